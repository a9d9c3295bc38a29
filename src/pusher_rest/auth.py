"""HMAC-SHA256 socket authorization for private/presence channels."""

from __future__ import annotations

import hashlib
import hmac
import json
from dataclasses import dataclass
from typing import Any

from .exceptions import ValidationError


def hmac_sha256_hex(secret: str, message: str) -> str:
    """Hex HMAC-SHA256 digest of ``message`` keyed with ``secret``."""
    return hmac.new(
        secret.encode("utf-8"),
        message.encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()


@dataclass(frozen=True)
class SocketAuthToken:
    """Token a server-side app hands back to its client for a subscription."""

    auth: str

    def to_dict(self) -> dict[str, str]:
        return {"auth": self.auth}

    def to_json(self) -> str:
        """Serialize to the JSON object sent to the subscribing client."""
        return json.dumps(self.to_dict())


class ChannelAuthorizer:
    """
    Signs channel subscriptions for a given socket.

    The signature is computed as:
        HMAC-SHA256(secret, f"{socket_id}:{channel}")

    For presence channels, user data is included:
        HMAC-SHA256(secret, f"{socket_id}:{channel}:{user_data_json}")

    The user data only feeds the signature; the token carries just ``auth``.
    """

    def __init__(self, auth_key: str, secret: str) -> None:
        self.auth_key = auth_key
        self._secret = secret

    def authorize_private(self, socket_id: str, channel: str) -> SocketAuthToken:
        """
        Generate the token for a private channel subscription.

        Args:
            socket_id: Socket ID of the connection asking to subscribe
            channel: The channel to authorize

        Raises:
            ValidationError: If socket_id or channel is empty.
        """
        self._check(socket_id, channel)
        return self._token(f"{socket_id}:{channel}")

    def authorize_presence(
        self,
        socket_id: str,
        channel: str,
        user_id: str | int,
        user_info: dict[str, Any] | None = None,
    ) -> SocketAuthToken:
        """
        Generate the token for a presence channel subscription.

        Args:
            socket_id: Socket ID of the connection asking to subscribe
            channel: The channel to authorize
            user_id: Identity of the subscribing user
            user_info: Optional extra user details (name, email, ...)

        Raises:
            ValidationError: If socket_id, channel or user_id is empty.
        """
        self._check(socket_id, channel)
        if user_id is None or user_id == "":
            raise ValidationError("user_id is required for presence channels")

        user_data: dict[str, Any] = {"user_id": user_id}
        if user_info:
            user_data["user_info"] = user_info
        channel_data = json.dumps(user_data, separators=(",", ":"), ensure_ascii=False)

        return self._token(f"{socket_id}:{channel}:{channel_data}")

    @staticmethod
    def _check(socket_id: str, channel: str) -> None:
        if not socket_id:
            raise ValidationError("socket_id is required")
        if not channel:
            raise ValidationError("channel is required")

    def _token(self, message: str) -> SocketAuthToken:
        """Sign ``message`` into a token of the form "auth_key:hex_digest"."""
        signature = hmac_sha256_hex(self._secret, message)
        return SocketAuthToken(auth=f"{self.auth_key}:{signature}")
