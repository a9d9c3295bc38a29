"""Main PusherClient class for the Pusher REST API."""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass, field
from typing import Any

import aiohttp
import pydantic
from multidict import CIMultiDict
from yarl import URL

from .auth import ChannelAuthorizer
from .config import ClientConfig
from .exceptions import ConfigurationError, TransportError
from .signing import RequestSigner, SignedRequest, TriggerRequest
from .types import Clock, JSONValue

logger = logging.getLogger(__name__)

ACCEPTED_BODY = "202 ACCEPTED\n"


def unix_time() -> int:
    """Current Unix time in whole seconds."""
    return int(time.time())


@dataclass
class RawResponse:
    """Outcome of one trigger request as seen by the transport."""

    status: int | None
    body: str = ""
    headers: CIMultiDict[str] = field(default_factory=CIMultiDict)
    error: TransportError | None = None

    @property
    def is_success(self) -> bool:
        """2xx status with the exact acceptance body."""
        if self.status is None:
            return False
        return 200 <= self.status < 300 and self.body == ACCEPTED_BODY

    def raise_for_status(self) -> None:
        """Raise TransportError unless the event was accepted."""
        if self.error is not None:
            raise self.error
        if not self.is_success:
            raise TransportError(
                f"Trigger not accepted (HTTP {self.status})",
                status=self.status,
                body=self.body,
            )


class PusherClient:
    """
    Client for publishing events and authorizing channel subscriptions.

    Example:
        pusher = PusherClient(auth_key="key", secret="secret", app_id="123",
                              channel="test_channel")
        await pusher.trigger("my_event", "Hello, World!")
        token = pusher.authorize_private("123.456", "private-chat")
    """

    def __init__(
        self,
        auth_key: str | None = None,
        secret: str | None = None,
        app_id: str | None = None,
        channel: str | None = None,
        host: str | None = None,
        port: int | None = None,
        *,
        config: ClientConfig | None = None,
        debug: bool | None = None,
        clock: Clock | None = None,
        session: aiohttp.ClientSession | None = None,
        log_level: str | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            auth_key: Pusher application key
            secret: Pusher application secret
            app_id: Pusher application ID
            channel: Default channel for calls that name none
            host: API host (default: http://api.pusherapp.com)
            port: API port (default: 80)
            config: Optional ClientConfig instance (overrides individual params)
            debug: Return RawResponse from every trigger() call
            clock: Callable returning the current Unix time, for signing
            session: aiohttp session to send requests with
            log_level: Logging level name (default: INFO)

        Raises:
            ConfigurationError: If a credential is missing or a value is invalid.
        """
        # Build config from params or use provided config
        if config is not None:
            self._config = config
        else:
            # Build kwargs for config, only including non-None values
            config_kwargs: dict[str, Any] = {
                "auth_key": auth_key,
                "secret": secret,
                "app_id": app_id,
            }
            if channel is not None:
                config_kwargs["default_channel"] = channel
            if host is not None:
                config_kwargs["host"] = host
            if port is not None:
                config_kwargs["port"] = port
            if debug is not None:
                config_kwargs["debug"] = debug
            if log_level is not None:
                config_kwargs["log_level"] = log_level

            try:
                self._config = ClientConfig(**config_kwargs)
            except pydantic.ValidationError as e:
                raise ConfigurationError(f"Invalid Pusher configuration: {e}") from e

        # Set up logging
        logging.basicConfig(level=getattr(logging, self._config.log_level))

        self._signer = RequestSigner(self._config)
        self._authorizer = ChannelAuthorizer(
            self._config.auth_key,
            self._config.secret.get_secret_value(),
        )
        self._clock: Clock = clock or unix_time

        self._session = session
        self._owns_session = False

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def trigger(
        self,
        event: str,
        data: JSONValue,
        channel: str | None = None,
        socket_id: str | None = None,
        debug: bool = False,
    ) -> bool | RawResponse:
        """
        Publish an event on a channel.

        Args:
            event: Event name
            data: Payload; any JSON value, no need to encode it first
            channel: Channel to publish on (default: configured channel)
            socket_id: Connection to exclude from receiving the event
            debug: Return the RawResponse instead of a boolean

        Returns:
            True if the API accepted the event, False otherwise. In debug mode
            the RawResponse, even when the request failed.

        Raises:
            ValidationError: Missing event name or channel, before any request.
            SerializationError: Payload is not JSON serializable.
        """
        request = TriggerRequest(event=event, data=data, channel=channel, socket_id=socket_id)
        signed = self._signer.sign(request, self._clock())

        response = await self._send(signed)

        if debug or self._config.debug:
            return response

        if response.is_success:
            logger.info(f"Triggered '{event}' via {signed.path}")
            return True

        if response.error is not None:
            logger.warning(f"Trigger '{event}' failed: {response.error}")
        else:
            logger.warning(f"Trigger '{event}' rejected with HTTP {response.status}")
        return False

    def authorize_private(self, socket_id: str, channel: str | None = None) -> str:
        """
        Authorize a socket for a private channel.

        Returns:
            JSON text {"auth": "<auth_key>:<signature>"} for the client.
        """
        resolved = self._config.resolve_channel(channel)
        return self._authorizer.authorize_private(socket_id, resolved).to_json()

    def authorize_presence(
        self,
        socket_id: str,
        user_id: str | int,
        user_info: dict[str, Any] | None = None,
        channel: str | None = None,
    ) -> str:
        """
        Authorize a socket for a presence channel.

        Returns:
            JSON text {"auth": "<auth_key>:<signature>"} for the client.
        """
        resolved = self._config.resolve_channel(channel)
        token = self._authorizer.authorize_presence(socket_id, resolved, user_id, user_info)
        return token.to_json()

    async def _send(self, signed: SignedRequest) -> RawResponse:
        """POST a signed request, capturing transport errors in the response."""
        if self._session is not None:
            return await self._post(self._session, signed)
        async with aiohttp.ClientSession() as session:
            return await self._post(session, signed)

    async def _post(self, session: aiohttp.ClientSession, signed: SignedRequest) -> RawResponse:
        # The query string is already encoded and signed; it must go out as is
        url = URL(signed.url, encoded=True)
        logger.debug(f"POST {signed.path}")

        try:
            async with session.post(url, data=signed.body, headers=signed.headers) as resp:
                # The body is kept even when it is not valid UTF-8
                raw = await resp.read()
                body = raw.decode("utf-8", errors="replace")
                logger.debug(f"Response: HTTP {resp.status}")
                return RawResponse(status=resp.status, body=body, headers=CIMultiDict(resp.headers))
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            error = TransportError(f"Request to {signed.path} failed: {e}")
            error.__cause__ = e
            return RawResponse(status=None, error=error)

    async def close(self) -> None:
        """Close the HTTP session if this client opened it."""
        if self._session is not None and self._owns_session:
            await self._session.close()
            self._session = None
            self._owns_session = False

    async def __aenter__(self) -> "PusherClient":
        """Async context manager entry; shares one session across calls."""
        if self._session is None:
            self._session = aiohttp.ClientSession()
            self._owns_session = True
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Async context manager exit."""
        await self.close()
