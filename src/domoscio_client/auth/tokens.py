"""Credential values and the stores that keep the last known token pair.

A credential is exactly one of:
- ``NoCredentials``: nothing captured yet, authenticate with the configured passphrase
- ``Passphrase(secret)``: authenticate with an explicit shared secret
- ``Tokens(access_token, refresh_token)``: authenticate with captured tokens

Example:
    ```python
    from domoscio_client.auth.tokens import FileTokenStore, Tokens

    store = FileTokenStore("/tmp/domoscio")
    store.store(Tokens("access", "refresh"))
    store.get()  # Tokens(access_token='access', refresh_token='refresh')
    ```
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

TOKEN_FILE_NAME = "domoscio_tokens.json"


@dataclass(frozen=True)
class NoCredentials:
    """No token captured yet."""


@dataclass(frozen=True)
class Passphrase:
    """Static shared secret sent as ``Authorization: Token token=<secret>``."""

    secret: str


@dataclass(frozen=True)
class Tokens:
    """Access/refresh pair captured from a successful response.

    Either half may be None when the server did not send it.
    """

    access_token: str | None = None
    refresh_token: str | None = None


Credentials = NoCredentials | Passphrase | Tokens


class TokenStore(Protocol):
    """Anything able to hand back and replace the current credentials."""

    def get(self) -> Credentials: ...

    def store(self, credentials: Credentials) -> None: ...


class MemoryTokenStore:
    """Keeps credentials for the lifetime of the process."""

    def __init__(self, initial: Credentials | None = None):
        self._credentials: Credentials = initial if initial is not None else NoCredentials()

    def get(self) -> Credentials:
        return self._credentials

    def store(self, credentials: Credentials) -> None:
        self._credentials = credentials


class FileTokenStore:
    """Persists credentials as JSON under ``temp_dir``.

    Storing ``NoCredentials`` removes the file. A missing, unreadable or
    malformed file reads back as ``NoCredentials``.
    """

    def __init__(self, temp_dir: str | Path):
        self.path = Path(temp_dir) / TOKEN_FILE_NAME

    def get(self) -> Credentials:
        try:
            raw = self.path.read_text()
        except FileNotFoundError:
            return NoCredentials()
        except OSError as e:
            logger.warning(f"Could not read token file {self.path}: {e}")
            return NoCredentials()

        try:
            data = json.loads(raw)
        except ValueError:
            data = None

        if not isinstance(data, dict):
            logger.warning(f"Ignoring malformed token file {self.path}")
            return NoCredentials()

        if data.get("kind") == "passphrase":
            fields = ("secret",)
        else:
            fields = ("access_token", "refresh_token")
        # Values end up in request headers, so only strings are usable
        if not all(isinstance(data.get(name), str | None) for name in fields):
            logger.warning(f"Ignoring malformed token file {self.path}")
            return NoCredentials()

        if data.get("kind") == "passphrase":
            return Passphrase(secret=data.get("secret") or "")
        return Tokens(
            access_token=data.get("access_token"),
            refresh_token=data.get("refresh_token"),
        )

    def store(self, credentials: Credentials) -> None:
        if isinstance(credentials, NoCredentials):
            self.path.unlink(missing_ok=True)
            logger.debug(f"Cleared token file {self.path}")
            return

        if isinstance(credentials, Passphrase):
            payload = {"kind": "passphrase", "secret": credentials.secret}
        else:
            payload = {
                "kind": "tokens",
                "access_token": credentials.access_token,
                "refresh_token": credentials.refresh_token,
            }
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(payload))
        logger.debug(f"Stored {payload['kind']} in {self.path} (***)")
