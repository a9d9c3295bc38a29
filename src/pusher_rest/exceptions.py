"""Custom exceptions for the Pusher REST client."""

from __future__ import annotations


class PusherError(Exception):
    """Base exception for all Pusher client errors."""

    pass


class ConfigurationError(PusherError):
    """Missing or invalid client configuration."""

    pass


class ValidationError(PusherError):
    """A required per-call argument is missing or invalid."""

    pass


class SerializationError(ValidationError):
    """Event payload cannot be represented as JSON."""

    pass


class TransportError(PusherError):
    """The HTTP request failed or was not accepted by the API."""

    def __init__(self, message: str, status: int | None = None, body: str | None = None) -> None:
        super().__init__(message)
        self.status = status
        self.body = body
