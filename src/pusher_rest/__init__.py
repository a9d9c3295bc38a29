"""
Python Pusher REST - trigger events and authorize channels on the Pusher API.

Example:
    from pusher_rest import PusherClient

    async def main():
        async with PusherClient(auth_key="key", secret="secret", app_id="123") as pusher:
            await pusher.trigger("my_event", {"message": "hi"}, channel="test_channel")
"""

from pusher_rest.auth import ChannelAuthorizer, SocketAuthToken
from pusher_rest.client import PusherClient, RawResponse
from pusher_rest.config import DEFAULTS, ClientConfig
from pusher_rest.exceptions import (
    ConfigurationError,
    PusherError,
    SerializationError,
    TransportError,
    ValidationError,
)
from pusher_rest.signing import RequestSigner, SignedRequest, TriggerRequest
from pusher_rest.types import Clock, JSONValue

__version__ = "0.1.0"

__all__ = [
    # Main client
    "PusherClient",
    "ClientConfig",
    "DEFAULTS",
    "RawResponse",
    # Signing
    "RequestSigner",
    "TriggerRequest",
    "SignedRequest",
    "ChannelAuthorizer",
    "SocketAuthToken",
    # Exceptions
    "PusherError",
    "ConfigurationError",
    "ValidationError",
    "SerializationError",
    "TransportError",
    # Types
    "JSONValue",
    "Clock",
]
