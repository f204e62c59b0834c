"""Single-shot HTTP transport for Domoscio requests.

Every call opens its own ``httpx.Client`` (one connection per request), sends
the body as JSON whatever the verb, and returns the response untouched.
Network, timeout and TLS failures propagate as ``httpx.TransportError``;
nothing is retried here.

Example:
    ```python
    from domoscio_client.transport import HTTPMethod, Transport

    transport = Transport(timeout=10)
    response = transport.send(
        "https://domoscio-adaptive-engine.azurewebsites.net/v1/instances/42/students",
        HTTPMethod.GET,
        body={},
        headers={"Content-Type": "application/json"},
    )
    ```
"""

import json
import logging
from collections.abc import Callable, Mapping
from http import HTTPMethod
from typing import Any

import httpx

logger = logging.getLogger(__name__)

SUPPORTED_METHODS: frozenset[HTTPMethod] = frozenset(
    [HTTPMethod.GET, HTTPMethod.POST, HTTPMethod.PUT, HTTPMethod.DELETE]
)

BeforeSend = Callable[[httpx.Request], None]


def coerce_method(method: HTTPMethod | str) -> HTTPMethod:
    """Map ``"get"``, ``"GET"`` or ``HTTPMethod.GET`` to a supported verb.

    Raises:
        ValueError: If the verb is not GET, POST, PUT or DELETE.
    """
    try:
        verb = HTTPMethod(method.upper()) if isinstance(method, str) else HTTPMethod(method)
    except ValueError:
        raise ValueError(f"Unknown HTTP method: {method!r}") from None
    if verb not in SUPPORTED_METHODS:
        raise ValueError(f"Unsupported HTTP method: {verb}")
    return verb


class Transport:
    """Issues exactly one HTTP request per ``send`` call.

    Args:
        timeout: Passed to httpx; None keeps httpx's default.
        transport: Optional httpx transport, e.g. ``httpx.MockTransport`` in tests.
    """

    def __init__(self, *, timeout: float | None = None, transport: httpx.BaseTransport | None = None) -> None:
        self.timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.Client:
        kwargs: dict[str, Any] = {}
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return httpx.Client(**kwargs)

    def send(
        self,
        uri: str,
        method: HTTPMethod | str,
        body: Mapping[str, Any],
        headers: Mapping[str, str],
        before_send: BeforeSend | None = None,
    ) -> httpx.Response:
        """Send one request and return the raw response.

        Args:
            uri: Absolute URI, query string included
            method: One of GET, POST, PUT, DELETE
            body: Serialized to JSON as the request content
            headers: Sent as-is
            before_send: Called with the mutable request right before transmission

        Returns:
            The response, read but otherwise unmodified
        """
        verb = coerce_method(method)

        # TLS is chosen by httpx from the URI scheme
        with self._client() as client:
            request = client.build_request(
                verb.value,
                uri,
                content=json.dumps(dict(body)),
                headers=dict(headers),
            )
            if before_send is not None:
                before_send(request)

            logger.debug(f"Sending {request.method} {request.url}")
            response = client.send(request)
            response.read()

        logger.debug(f"Received {response.status_code} for {request.method} {request.url}")
        return response
