"""Entry point tying configuration, token storage and dispatch together."""

import logging
from collections.abc import Mapping
from http import HTTPMethod
from typing import Any

import httpx

from domoscio_client.auth.tokens import FileTokenStore, MemoryTokenStore, TokenStore
from domoscio_client.config import Configuration
from domoscio_client.dispatcher import Dispatcher
from domoscio_client.resources import RESOURCE_NAMES, Resource
from domoscio_client.transport.http import BeforeSend, Transport

logger = logging.getLogger(__name__)


class DomoscioClient:
    """Client for the Domoscio adaptive-learning API.

    Known resources are available as attributes named after them:

        ```python
        client = DomoscioClient(Configuration(client_id="42", client_passphrase="secret"))
        client.knowledge_node.fetch(3)
        client.resource("student").create(body={"civil_profile_id": 7})
        ```

    Args:
        config: Defaults to ``Configuration.from_env()``
        token_store: Defaults to a ``FileTokenStore`` in ``config.temp_dir``
            when set, an in-memory store otherwise
        transport: Optional httpx transport, mainly for tests
    """

    def __init__(
        self,
        config: Configuration | None = None,
        token_store: TokenStore | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.config = config if config is not None else Configuration.from_env()
        if token_store is None:
            if self.config.temp_dir:
                token_store = FileTokenStore(self.config.temp_dir)
            else:
                token_store = MemoryTokenStore()
        self.dispatcher = Dispatcher(
            self.config,
            token_store=token_store,
            transport=Transport(timeout=self.config.timeout, transport=transport),
        )
        self._resources: dict[str, Resource] = {}
        logger.debug(f"Domoscio client ready for {self.config.base_url}")

    def __enter__(self) -> "DomoscioClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        # Nothing pooled: every request owns its connection
        return None

    def __getattr__(self, name: str) -> Resource:
        if name in RESOURCE_NAMES:
            return self.resource(name)
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def resource(self, name: str) -> Resource:
        """Return the CRUD accessor for ``name``.

        Raises:
            ValueError: If the service has no such resource.
        """
        if name not in RESOURCE_NAMES:
            raise ValueError(f"Unknown resource: {name!r}")
        if name not in self._resources:
            self._resources[name] = Resource(self.dispatcher, name)
        return self._resources[name]

    @property
    def token_store(self) -> TokenStore:
        return self.dispatcher.token_store

    def request(
        self,
        method: HTTPMethod | str,
        path: str,
        body: Mapping[str, Any] | None = None,
        filters: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        before_send: BeforeSend | None = None,
    ) -> Any:
        """Send a raw request through the dispatcher; see ``Dispatcher.request``."""
        return self.dispatcher.request(method, path, body, filters, headers, before_send)
