"""Authentication components for the Domoscio client.

This module provides:
- Multi-source setting resolution (value → env → .env → default)
- Tagged credential values and token stores (memory, file)
- Header construction for passphrase and token modes

Example:
    ```python
    from domoscio_client.auth import MemoryTokenStore, build_request_headers

    store = MemoryTokenStore()
    headers = build_request_headers(config, store.get())
    ```
"""

from domoscio_client.auth.credentials import CredentialResolver
from domoscio_client.auth.exceptions import (
    CredentialError,
    CredentialFileError,
    CredentialNotFoundError,
)
from domoscio_client.auth.headers import build_request_headers, user_agent
from domoscio_client.auth.tokens import (
    Credentials,
    FileTokenStore,
    MemoryTokenStore,
    NoCredentials,
    Passphrase,
    Tokens,
    TokenStore,
)

__all__ = [
    "CredentialError",
    "CredentialFileError",
    "CredentialNotFoundError",
    "CredentialResolver",
    "Credentials",
    "FileTokenStore",
    "MemoryTokenStore",
    "NoCredentials",
    "Passphrase",
    "TokenStore",
    "Tokens",
    "build_request_headers",
    "user_agent",
]
