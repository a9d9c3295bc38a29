"""Signed request construction for the Pusher REST API."""

from __future__ import annotations

import hashlib
import json
import logging
from dataclasses import dataclass
from urllib.parse import urlencode

from .auth import hmac_sha256_hex
from .config import ClientConfig
from .exceptions import SerializationError, ValidationError
from .types import JSONValue

logger = logging.getLogger(__name__)

AUTH_VERSION = "1.0"
CONTENT_TYPE = "application/json"


@dataclass
class TriggerRequest:
    """An event to publish on a channel."""

    event: str
    data: JSONValue = None
    channel: str | None = None
    socket_id: str | None = None  # excluded from receiving its own event


@dataclass(frozen=True)
class SignedRequest:
    """A trigger request ready to send."""

    url: str
    body: bytes
    path: str
    query_string: str
    signature: str
    method: str = "POST"
    content_type: str = CONTENT_TYPE

    @property
    def headers(self) -> dict[str, str]:
        return {"Content-Type": self.content_type}


def encode_payload(data: JSONValue) -> str:
    """
    Serialize event data to JSON.

    Bare scalars are allowed, so "Hello" encodes as '"Hello"'.

    Raises:
        SerializationError: If data is not JSON representable.
    """
    try:
        return json.dumps(data, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Event data is not JSON serializable: {e}") from e


def build_query(
    auth_key: str,
    timestamp: int,
    body_md5: str,
    event: str,
    socket_id: str | None = None,
) -> str:
    """Build the canonical query string. Parameter order is part of the signature."""
    params = [
        ("auth_key", auth_key),
        ("auth_timestamp", str(timestamp)),
        ("auth_version", AUTH_VERSION),
        ("body_md5", body_md5),
        ("name", event),
    ]
    if socket_id:
        params.append(("socket_id", socket_id))
    return urlencode(params)


def string_to_sign(method: str, path: str, query_string: str) -> str:
    return f"{method}\n{path}\n{query_string}"


class RequestSigner:
    """
    Produces signed trigger requests for one application.

    The signature is computed as:
        HMAC-SHA256(secret, "POST\\n{path}\\n{query_string}")

    and appended as ``auth_signature`` outside the signed query string.
    """

    def __init__(self, config: ClientConfig) -> None:
        self.config = config

    def sign(self, request: TriggerRequest, timestamp: int) -> SignedRequest:
        """
        Sign a trigger request.

        Args:
            request: Event, payload and optional channel/socket_id
            timestamp: Current Unix time in seconds

        Raises:
            ValidationError: If the event name is empty or no channel resolves.
            SerializationError: If the payload cannot be encoded.
        """
        if not request.event:
            raise ValidationError("Event name is required")
        channel = self.config.resolve_channel(request.channel)

        payload = encode_payload(request.data)
        body = payload.encode("utf-8")
        body_md5 = hashlib.md5(body).hexdigest()

        path = f"/apps/{self.config.app_id}/channels/{channel}/events"
        query_string = build_query(
            self.config.auth_key,
            timestamp,
            body_md5,
            request.event,
            request.socket_id,
        )
        signature = hmac_sha256_hex(
            self.config.secret.get_secret_value(),
            string_to_sign("POST", path, query_string),
        )

        url = (
            f"{self.config.build_base_url()}{path}"
            f"?{query_string}&auth_signature={signature}"
        )
        logger.debug(f"Signed '{request.event}' for {path} at {timestamp}")

        return SignedRequest(
            url=url,
            body=body,
            path=path,
            query_string=query_string,
            signature=signature,
        )
