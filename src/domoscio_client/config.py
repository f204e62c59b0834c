"""Client configuration and API host resolution.

Example:
    ```python
    from domoscio_client.config import Configuration

    config = Configuration(preproduction=True, dev=True)
    config.base_url  # "https://domoscio-adaptive-engine-preprod.azurewebsites.net"

    # Or from DOMOSCIO_* environment variables / .env file
    config = Configuration.from_env(client_id="42")
    ```
"""

import dataclasses
import logging
from dataclasses import dataclass
from typing import Any

from domoscio_client.auth.credentials import CredentialResolver
from domoscio_client.errors.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

LOCAL_URL = "http://localhost:3001"
STAGING_URL = "https://domoscio-adaptive-engine-staging.azurewebsites.net"
PREPROD_URL = "https://domoscio-adaptive-engine-preprod.azurewebsites.net"
PRODUCTION_URL = "https://domoscio-adaptive-engine.azurewebsites.net"

ENV_PREFIX = "DOMOSCIO_"


@dataclass
class Configuration:
    """Environment flags and client credentials.

    ``root_url`` is only an override; read the effective host from
    ``base_url``.
    """

    preproduction: bool = False
    test: bool = False
    dev: bool = False
    disabled: bool = False
    version: int = 1
    root_url: str | None = None
    client_id: str | None = None
    client_passphrase: str | None = None
    client_identifier: str | None = None
    temp_dir: str | None = None
    # Legacy permissive policies; see DecodeError and ResponseError
    lenient_decode: bool = True
    raise_on_error: bool = False
    timeout: float | None = None

    @property
    def base_url(self) -> str:
        """Host every request path is appended to."""
        if not self.preproduction:
            return self.root_url or LOCAL_URL
        if self.test:
            return self.root_url or STAGING_URL
        if self.dev:
            return self.root_url or PREPROD_URL
        return self.root_url or PRODUCTION_URL

    def configure(self, **changes: Any) -> "Configuration":
        """Return a copy with ``changes`` applied.

        Raises:
            TypeError: If a name is not a configuration field.
        """
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_env(cls, resolver: CredentialResolver | None = None, **overrides: Any) -> "Configuration":
        """Build a configuration from ``DOMOSCIO_*`` environment variables.

        Keyword overrides win over the environment. The passphrase may also
        come from the file named by ``DOMOSCIO_CLIENT_PASSPHRASE_FILE``.

        Raises:
            ConfigurationError: On malformed boolean, version or timeout values.
        """
        resolver = resolver or CredentialResolver()
        unknown = set(overrides) - {f.name for f in dataclasses.fields(cls)}
        if unknown:
            raise TypeError(f"Unknown configuration fields: {sorted(unknown)}")

        values: dict[str, Any] = {}
        for name in ("preproduction", "test", "dev", "disabled", "raise_on_error"):
            values[name] = resolver.resolve_flag(value=overrides.get(name), env_var_name=_env_name(name))
        values["lenient_decode"] = resolver.resolve_flag(
            value=overrides.get("lenient_decode"),
            env_var_name=_env_name("lenient_decode"),
            default=True,
        )

        for name in ("root_url", "client_id", "client_identifier", "temp_dir"):
            values[name] = resolver.resolve(value=overrides.get(name), env_var_name=_env_name(name), mask_in_logs=False)

        passphrase = resolver.resolve(
            value=overrides.get("client_passphrase"),
            env_var_name=_env_name("client_passphrase"),
        )
        if passphrase is None:
            passphrase = resolver.resolve_from_file(env_var_name=_env_name("client_passphrase_file"))
        values["client_passphrase"] = passphrase

        if "version" in overrides:
            values["version"] = overrides["version"]
        else:
            raw_version = resolver.resolve(env_var_name=_env_name("version"), default="1", mask_in_logs=False)
            try:
                values["version"] = int(raw_version)
            except ValueError:
                raise ConfigurationError(f"Invalid API version: {raw_version!r}") from None

        if "timeout" in overrides:
            values["timeout"] = overrides["timeout"]
        else:
            raw_timeout = resolver.resolve(env_var_name=_env_name("timeout"), mask_in_logs=False)
            try:
                values["timeout"] = float(raw_timeout) if raw_timeout is not None else None
            except ValueError:
                raise ConfigurationError(f"Invalid timeout: {raw_timeout!r}") from None

        config = cls(**values)
        logger.debug(f"Loaded configuration from environment, host {config.base_url}")
        return config


def _env_name(field_name: str) -> str:
    return ENV_PREFIX + field_name.upper()
