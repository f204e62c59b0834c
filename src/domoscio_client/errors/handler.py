"""Error handling utilities for HTTP responses."""

from typing import Any

import httpx

from domoscio_client.errors.exceptions import (
    BadRequestError,
    ClientError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ResponseError,
    ServerError,
    UnauthorizedError,
    ValidationError,
)

_EXCEPTION_MAP: dict[int, type[ResponseError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    422: ValidationError,
}


def is_error_status(status_code: int) -> bool:
    """Return True for 4xx and 5xx statuses (the ones that skip token capture)."""
    return 400 <= status_code < 600


def raise_for_status(uri: str, response: httpx.Response, data: Any = None) -> None:
    """Raise the appropriate exception for a non-2xx response.

    Args:
        uri: Request URI, kept on the exception for diagnostics
        response: HTTP response object
        data: Already decoded response body, attached to the exception

    Raises:
        ResponseError subclass based on status code
    """
    if response.is_success:
        return

    status_code = response.status_code

    if status_code in _EXCEPTION_MAP:
        exc_class = _EXCEPTION_MAP[status_code]
    elif 400 <= status_code < 500:
        exc_class = ClientError
    elif 500 <= status_code < 600:
        exc_class = ServerError
    else:
        exc_class = ResponseError

    # Prefer the server's own error text when the body carries one
    detail = None
    if isinstance(data, dict):
        detail = data.get("error") or data.get("message")
    if detail is None:
        detail = response.text[:200]
    message = f"HTTP {status_code} for {uri}: {detail}" if detail else f"HTTP {status_code} for {uri}"

    raise exc_class(
        message,
        uri=uri,
        status_code=status_code,
        data=data,
        response=response,
    )
