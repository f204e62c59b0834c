"""Error taxonomy and status handling for the Domoscio client."""

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
from domoscio_client.errors.handler import is_error_status, raise_for_status

__all__ = [
    "BadRequestError",
    "ClientError",
    "ConfigurationError",
    "ConflictError",
    "DecodeError",
    "DomoscioError",
    "ForbiddenError",
    "NotFoundError",
    "ResponseError",
    "ServerError",
    "UnauthorizedError",
    "ValidationError",
    "is_error_status",
    "raise_for_status",
]
