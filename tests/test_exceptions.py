"""Tests for the exception hierarchy."""

from pusher_rest.exceptions import (
    ConfigurationError,
    PusherError,
    SerializationError,
    TransportError,
    ValidationError,
)


def test_all_errors_share_base():
    for error in (ConfigurationError, ValidationError, SerializationError, TransportError):
        assert issubclass(error, PusherError)


def test_serialization_is_validation():
    assert issubclass(SerializationError, ValidationError)


def test_transport_error_details():
    error = TransportError("not accepted", status=500, body="oops")

    assert str(error) == "not accepted"
    assert error.status == 500
    assert error.body == "oops"
