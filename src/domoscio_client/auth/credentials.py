"""Resolution of Domoscio settings and secrets from several sources.

Resolution order (highest to lowest priority):
1. Explicitly provided value
2. Environment variable
3. .env file (python-dotenv, loaded into the environment)
4. Default value

Example:
    ```python
    from domoscio_client.auth import CredentialResolver

    resolver = CredentialResolver()
    passphrase = resolver.resolve(env_var_name="DOMOSCIO_CLIENT_PASSPHRASE", required=True)
    preproduction = resolver.resolve_flag(env_var_name="DOMOSCIO_PREPRODUCTION")
    ```

Secrets are never logged in full, only the source they came from.
"""

import logging
import os
from pathlib import Path
from threading import Lock

from dotenv import load_dotenv

from domoscio_client.auth.exceptions import CredentialFileError, CredentialNotFoundError
from domoscio_client.errors.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_TRUE_VALUES = frozenset(["1", "true", "yes", "on"])
_FALSE_VALUES = frozenset(["0", "false", "no", "off"])


class CredentialResolver:
    """Resolve settings from explicit values, the environment, .env files and defaults.

    Args:
        dotenv_path: Path to .env file. If None, python-dotenv searches
            parent directories for one.
        load_dotenv: Whether to load the .env file at all. Disable in tests.
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path
        self._load_dotenv_enabled = load_dotenv

        if self._load_dotenv_enabled:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return

            try:
                load_dotenv(dotenv_path=self._dotenv_path)
                logger.debug("Loaded .env file for Domoscio configuration")
            except OSError as e:
                logger.warning(f"Failed to load .env file: {e}")
            # Only ever attempted once
            self._dotenv_loaded = True

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        required: bool = False,
        mask_in_logs: bool = True,
    ) -> str | None:
        """Resolve a single string setting, first match wins.

        Args:
            value: Explicitly provided value (highest priority).
            env_var_name: Environment variable name to check.
            default: Value used when no other source has one.
            required: Raise CredentialNotFoundError instead of returning None.
            mask_in_logs: Log "***" instead of the value.

        Returns:
            Resolved value, or None if not found and not required.

        Raises:
            CredentialNotFoundError: If required and found nowhere.
        """
        result = None
        source = None

        if value is not None:
            result = value
            source = "explicit parameter"
        elif env_var_name and env_var_name in os.environ:
            result = os.environ[env_var_name]
            source = f"environment variable '{env_var_name}'"
        elif default is not None:
            result = default
            source = "default value"

        if result is not None:
            shown = "***" if mask_in_logs else result
            logger.debug(f"Resolved setting from {source}: {shown}")

        if required and result is None:
            error_msg = "Required credential not found"
            if env_var_name:
                error_msg += f" (checked env var: {env_var_name})"
            raise CredentialNotFoundError(error_msg, env_var_name=env_var_name)

        return result

    def resolve_flag(self, *, value: bool | None = None, env_var_name: str, default: bool = False) -> bool:
        """Resolve a boolean setting.

        Environment values accept 1/true/yes/on and 0/false/no/off,
        case-insensitively.

        Raises:
            ConfigurationError: If the environment holds any other value.
        """
        if value is not None:
            return value

        raw = self.resolve(env_var_name=env_var_name, mask_in_logs=False)
        if raw is None:
            return default

        normalized = raw.strip().lower()
        if normalized in _TRUE_VALUES:
            return True
        if normalized in _FALSE_VALUES:
            return False
        raise ConfigurationError(f"Invalid boolean for {env_var_name}: {raw!r}")

    def resolve_from_file(
        self,
        *,
        file_path: str | Path | None = None,
        env_var_name: str | None = None,
        required: bool = False,
    ) -> str | None:
        """Read a secret from a file.

        The path may be given directly or through ``env_var_name``; ``~`` and
        ``$VAR`` are expanded. File contents are stripped of whitespace.

        Raises:
            CredentialFileError: If required and the file cannot be read.
        """
        path_to_use = None

        if file_path is not None:
            path_to_use = str(file_path)
        elif env_var_name:
            path_to_use = self.resolve(env_var_name=env_var_name, mask_in_logs=False)

        if path_to_use is None:
            if required:
                error_msg = "No file path provided for credential resolution"
                if env_var_name:
                    error_msg += f" (env var '{env_var_name}' not set)"
                raise CredentialFileError(error_msg)
            return None

        path_obj = Path(os.path.expanduser(os.path.expandvars(path_to_use)))

        try:
            content = path_obj.read_text().strip()
        except FileNotFoundError:
            error_msg = f"Credential file not found: {path_obj}"
            if required:
                raise CredentialFileError(error_msg) from None
            logger.debug(error_msg)
            return None
        except OSError as e:
            error_msg = f"Error reading credential file {path_obj}: {e}"
            if required:
                raise CredentialFileError(error_msg) from e
            logger.warning(error_msg)
            return None

        logger.debug(f"Resolved credential from file: {path_obj} (***)")
        return content
