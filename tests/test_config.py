"""Tests for configuration management."""

import pydantic
import pytest

from pusher_rest.config import DEFAULTS, ClientConfig
from pusher_rest.exceptions import ConfigurationError, ValidationError


class TestClientConfig:
    """Tests for the ClientConfig class."""

    @pytest.mark.parametrize(
        "missing, message",
        [
            ("auth_key", "auth key"),
            ("secret", "secret"),
            ("app_id", "application ID"),
        ],
    )
    def test_required_credentials(self, missing, message):
        """Test that each credential must be present and non-empty."""
        values = {"auth_key": "KEY", "secret": "SECRET", "app_id": "APPID"}

        values[missing] = ""
        with pytest.raises(ConfigurationError, match=message):
            ClientConfig(**values)

        del values[missing]
        with pytest.raises(ConfigurationError, match=message):
            ClientConfig(**values)

    def test_default_values(self):
        """Test default configuration values."""
        config = ClientConfig(auth_key="KEY", secret="SECRET", app_id="APPID")

        assert config.host == "http://api.pusherapp.com"
        assert config.port == 80
        assert config.default_channel == ""
        assert config.debug is False
        assert config.host == DEFAULTS["host"]

    def test_defaults_table_is_read_only(self):
        """Test the defaults table cannot be changed at runtime."""
        with pytest.raises(TypeError):
            DEFAULTS["port"] = 8080  # type: ignore[index]

    def test_config_is_immutable(self, config):
        """Test fields cannot be reassigned after construction."""
        with pytest.raises(pydantic.ValidationError):
            config.app_id = "OTHER"

    def test_invalid_port(self):
        """Test out-of-range ports are rejected."""
        with pytest.raises(pydantic.ValidationError):
            ClientConfig(auth_key="KEY", secret="SECRET", app_id="APPID", port=0)

    def test_secret_is_secret(self, config):
        """Test that secret is a SecretStr."""
        assert "SECRET" not in str(config)
        assert "SECRET" not in repr(config)

        assert config.secret.get_secret_value() == "SECRET"

    def test_build_base_url(self, config):
        """Test API base URL construction."""
        assert config.build_base_url() == "http://api.pusherapp.com:80"

    def test_build_base_url_custom_host(self):
        """Test a custom host and port replace the defaults."""
        config = ClientConfig(
            auth_key="KEY",
            secret="SECRET",
            app_id="APPID",
            host="https://api-eu.pusher.com/",
            port=443,
        )

        assert config.build_base_url() == "https://api-eu.pusher.com:443"

    def test_build_base_url_bare_hostname(self):
        """Test a hostname without scheme defaults to http."""
        config = ClientConfig(
            auth_key="KEY", secret="SECRET", app_id="APPID", host="localhost", port=8080
        )

        assert config.build_base_url() == "http://localhost:8080"

    def test_build_base_url_ipv6(self):
        """Test IPv6 literal hosts keep their brackets."""
        config = ClientConfig(
            auth_key="KEY", secret="SECRET", app_id="APPID", host="http://[::1]", port=8080
        )

        assert config.build_base_url() == "http://[::1]:8080"

    def test_log_level(self):
        """Test log levels are normalized and checked."""
        config = ClientConfig(auth_key="KEY", secret="SECRET", app_id="APPID", log_level="debug")

        assert config.log_level == "DEBUG"
        with pytest.raises(pydantic.ValidationError):
            ClientConfig(auth_key="KEY", secret="SECRET", app_id="APPID", log_level="verbose")


class TestResolveChannel:
    """Tests for channel resolution."""

    def test_explicit_channel_wins(self, config):
        assert config.resolve_channel("other_channel") == "other_channel"

    def test_falls_back_to_default(self, config):
        assert config.resolve_channel(None) == "test_channel"
        assert config.resolve_channel("") == "test_channel"

    def test_no_channel_anywhere(self):
        config = ClientConfig(auth_key="KEY", secret="SECRET", app_id="APPID")

        with pytest.raises(ValidationError, match="Channel"):
            config.resolve_channel(None)
