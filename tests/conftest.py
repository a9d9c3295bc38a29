"""Pytest fixtures for Pusher REST client tests."""

import pytest

from pusher_rest.config import ClientConfig


@pytest.fixture
def config() -> ClientConfig:
    """Create a test configuration."""
    return ClientConfig(
        auth_key="KEY",
        secret="SECRET",
        app_id="APPID",
        default_channel="test_channel",
    )


@pytest.fixture
def socket_id() -> str:
    """Sample socket ID for testing."""
    return "123.456"
