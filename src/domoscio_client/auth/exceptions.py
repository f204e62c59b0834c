"""Exceptions raised while resolving client credentials.

Example:
    ```python
    from domoscio_client.auth.exceptions import CredentialNotFoundError

    if not passphrase:
        raise CredentialNotFoundError("Passphrase not found", env_var_name="DOMOSCIO_CLIENT_PASSPHRASE")
    ```
"""

from domoscio_client.errors.exceptions import DomoscioError


class CredentialError(DomoscioError):
    """Base exception for credential-related errors."""

    pass


class CredentialNotFoundError(CredentialError):
    """Raised when a required credential cannot be resolved.

    Attributes:
        env_var_name: The environment variable name that was checked (if any).
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name


class CredentialFileError(CredentialError):
    """Raised when a credential file cannot be read."""

    pass
