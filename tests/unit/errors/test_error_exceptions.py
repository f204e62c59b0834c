"""Tests for the error exception hierarchy."""

import pytest

from domoscio_client.errors.exceptions import (
    BadRequestError,
    ClientError,
    ConfigurationError,
    ConflictError,
    DecodeError,
    DomoscioError,
    ForbiddenError,
    NotFoundError,
    ResponseError,
    ServerError,
    UnauthorizedError,
    ValidationError,
)


@pytest.mark.unit
def test_response_error_attributes():
    error = ResponseError("boom", uri="https://api.example.com/x", status_code=418, data={"error": "teapot"})

    assert str(error) == "boom"
    assert error.uri == "https://api.example.com/x"
    assert error.status_code == 418
    assert error.data == {"error": "teapot"}
    assert error.response is None


@pytest.mark.unit
@pytest.mark.parametrize(
    "exc_class",
    [BadRequestError, UnauthorizedError, ForbiddenError, NotFoundError, ConflictError, ValidationError],
)
def test_client_errors_inherit_client_error(exc_class):
    assert issubclass(exc_class, ClientError)
    assert issubclass(exc_class, ResponseError)


@pytest.mark.unit
def test_server_error_is_not_client_error():
    assert issubclass(ServerError, ResponseError)
    assert not issubclass(ServerError, ClientError)


@pytest.mark.unit
@pytest.mark.parametrize("exc_class", [ResponseError, DecodeError, ConfigurationError])
def test_everything_derives_from_domoscio_error(exc_class):
    assert issubclass(exc_class, DomoscioError)


@pytest.mark.unit
def test_decode_error_attributes():
    error = DecodeError("bad json", uri="https://api.example.com/x", status_code=502, text="<html>")

    assert error.uri == "https://api.example.com/x"
    assert error.status_code == 502
    assert error.text == "<html>"
