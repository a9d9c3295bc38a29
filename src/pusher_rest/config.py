"""Configuration management for the Pusher REST client."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Literal, Mapping
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator, model_validator

from .exceptions import ConfigurationError, ValidationError

# Read-only defaults applied when a value is not given at construction
DEFAULTS: Mapping[str, Any] = MappingProxyType(
    {
        "host": "http://api.pusherapp.com",
        "port": 80,
    }
)

_REQUIRED_CREDENTIALS = (
    ("auth_key", "Pusher auth key must be defined"),
    ("secret", "Pusher secret must be defined"),
    ("app_id", "Pusher application ID must be defined"),
)


class ClientConfig(BaseModel):
    """
    Credentials and endpoint for the Pusher REST API.

    Instances are immutable. Values come only from constructor arguments
    and the DEFAULTS table; nothing is read from the environment.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Required credentials
    auth_key: str = Field(..., description="Pusher application key")
    secret: SecretStr = Field(..., description="Pusher application secret (HMAC key only)")
    app_id: str = Field(..., description="Pusher application ID")

    # Optional settings with defaults
    default_channel: str = Field(default="", description="Channel used when a call names none")
    host: str = Field(default=DEFAULTS["host"], description="API host, optionally with scheme")
    port: int = Field(default=DEFAULTS["port"], ge=1, le=65535, description="API port")

    # Behaviour
    debug: bool = Field(default=False, description="Return raw responses from trigger()")

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )

    @model_validator(mode="before")
    @classmethod
    def _require_credentials(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        for name, message in _REQUIRED_CREDENTIALS:
            value = data.get(name)
            if isinstance(value, SecretStr):
                value = value.get_secret_value()
            if not value:
                raise ConfigurationError(message)
        return data

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value

    def resolve_channel(self, channel: str | None = None) -> str:
        """
        Pick the channel for a call.

        An explicit non-empty channel wins over the configured default.

        Raises:
            ValidationError: If neither is set.
        """
        resolved = channel or self.default_channel
        if not resolved:
            raise ValidationError("Channel must be given or configured as default_channel")
        return resolved

    def build_base_url(self) -> str:
        """Construct ``scheme://host:port`` for API requests."""
        host = self.host if "://" in self.host else f"http://{self.host}"
        parts = urlsplit(host)
        hostname = parts.hostname or ""
        # IPv6 literals need their brackets back
        if ":" in hostname:
            hostname = f"[{hostname}]"
        return f"{parts.scheme}://{hostname}:{self.port}"
