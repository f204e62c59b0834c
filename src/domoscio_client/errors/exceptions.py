"""Structured exceptions for Domoscio API errors."""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import httpx


class DomoscioError(Exception):
    """Base exception for all errors raised by the client."""

    pass


class ConfigurationError(DomoscioError):
    """Invalid configuration value (bad boolean, version or timeout)."""

    pass


class ResponseError(DomoscioError):
    """Non-2xx response, raised only when ``raise_on_error`` is enabled."""

    def __init__(
        self,
        message: str,
        uri: str,
        status_code: int | None = None,
        data: Any = None,
        response: "httpx.Response | None" = None,
    ):
        super().__init__(message)
        self.uri = uri
        self.status_code = status_code
        self.data = data
        self.response = response


class ClientError(ResponseError):
    """4xx client errors."""

    pass


class BadRequestError(ClientError):
    """400 Bad Request."""

    pass


class UnauthorizedError(ClientError):
    """401 Unauthorized."""

    pass


class ForbiddenError(ClientError):
    """403 Forbidden."""

    pass


class NotFoundError(ClientError):
    """404 Not Found."""

    pass


class ConflictError(ClientError):
    """409 Conflict."""

    pass


class ValidationError(ClientError):
    """422 Unprocessable Entity."""

    pass


class ServerError(ResponseError):
    """5xx server errors."""

    pass


class DecodeError(DomoscioError):
    """Response body is not valid JSON, raised only when ``lenient_decode`` is off."""

    def __init__(self, message: str, uri: str, status_code: int | None = None, text: str = ""):
        super().__init__(message)
        self.uri = uri
        self.status_code = status_code
        self.text = text
