"""Request dispatch: one resource operation in, one decoded result out.

``Dispatcher.request`` builds the URI, picks the authentication headers,
sends the request, decodes the JSON body, captures tokens from successful
responses and, when the server paginates, fetches and merges the remaining
pages in order.

Example:
    ```python
    from domoscio_client import Configuration, Dispatcher

    dispatcher = Dispatcher(Configuration(client_id="42", client_passphrase="secret"))
    students = dispatcher.request("get", "/v1/instances/42/students")
    ```
"""

import logging
from collections.abc import Mapping
from http import HTTPMethod
from typing import Any
from urllib.parse import urlencode

import httpx

from domoscio_client.auth.headers import build_request_headers
from domoscio_client.auth.tokens import MemoryTokenStore, Tokens, TokenStore
from domoscio_client.config import Configuration
from domoscio_client.errors.exceptions import DecodeError
from domoscio_client.errors.handler import is_error_status, raise_for_status
from domoscio_client.transport.http import BeforeSend, Transport, coerce_method
from domoscio_client.transport.pagination import merge_page, page_count

logger = logging.getLogger(__name__)


class Dispatcher:
    """Turns logical operations into one or more HTTP calls.

    Args:
        config: Configuration held for the dispatcher's lifetime
        token_store: Where captured tokens are kept (in memory by default)
        transport: Sends individual requests; built from ``config.timeout`` by default

    Attributes:
        last_response: First-page response of the latest call, None after a
            disabled short-circuit. Lets callers read the status code, which
            the permissive policy otherwise hides.
    """

    def __init__(
        self,
        config: Configuration,
        token_store: TokenStore | None = None,
        transport: Transport | None = None,
    ) -> None:
        self.config = config
        self.token_store = token_store if token_store is not None else MemoryTokenStore()
        self.transport = transport if transport is not None else Transport(timeout=config.timeout)
        self.last_response: httpx.Response | None = None

    def build_uri(self, path: str, filters: Mapping[str, Any] | None = None) -> str:
        uri = self.config.base_url + path
        if filters:
            uri += "?" + urlencode(filters, doseq=True)
        return uri

    def request_headers(self) -> dict[str, str]:
        return build_request_headers(self.config, self.token_store.get())

    def request(
        self,
        method: HTTPMethod | str,
        path: str,
        body: Mapping[str, Any] | None = None,
        filters: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        before_send: BeforeSend | None = None,
    ) -> Any:
        """Dispatch one operation and return the decoded, aggregated body.

        Args:
            method: GET, POST, PUT or DELETE
            path: Appended to the configured host
            body: Entity data, sent as JSON
            filters: Query parameters; a non-None ``page`` disables aggregation
            headers: Replaces the authentication headers when given
            before_send: Called with each outgoing ``httpx.Request``

        Returns:
            Decoded body (all pages concatenated when paginated), ``{}`` for an
            undecodable body, or None when the client is disabled. Error
            statuses are returned as data unless ``raise_on_error`` is set.

        Raises:
            httpx.TransportError: Connection, timeout or TLS failure
            ResponseError: Non-2xx status with ``raise_on_error``
            DecodeError: Invalid JSON with ``lenient_decode`` off (empty 2xx bodies excepted)
        """
        if self.config.disabled:
            logger.debug(f"Client disabled, skipping {method} {path}")
            self.last_response = None
            return None

        verb = coerce_method(method)
        body = dict(body or {})
        filters = dict(filters or {})
        uri = self.build_uri(path, filters)
        if headers is None:
            headers = self.request_headers()

        response = self.transport.send(uri, verb, body, headers, before_send)
        self.last_response = response
        data = self._decode(uri, response)

        if not is_error_status(response.status_code):
            self.token_store.store(
                Tokens(
                    access_token=response.headers.get("Accesstoken"),
                    refresh_token=response.headers.get("Refreshtoken"),
                )
            )

        if self.config.raise_on_error:
            raise_for_status(uri, response, data)

        pages = page_count(response)
        if pages is not None and filters.get("page") is None:
            if pages > 1:
                logger.debug(f"Aggregating {pages} pages for {verb} {uri}")
            for page in range(2, pages + 1):
                body = {**body, "page": page}
                page_response = self.transport.send(uri, verb, body, headers, before_send)
                try:
                    page_data = page_response.json()
                    decoded = True
                except ValueError:
                    if not _is_empty_success(page_response):
                        self._decode_failed(uri, page_response)
                    page_data = {}
                    decoded = False

                if self.config.raise_on_error:
                    raise_for_status(uri, page_response, page_data)

                if not decoded:
                    logger.warning(f"Page {page} of {uri} is not valid JSON, discarding aggregated result")
                    data = {}
                    continue
                data = merge_page(data, page_data)

        return data

    def _decode(self, uri: str, response: httpx.Response) -> Any:
        if _is_empty_success(response):
            return {}
        try:
            return response.json()
        except ValueError:
            self._decode_failed(uri, response)
            return {}

    def _decode_failed(self, uri: str, response: httpx.Response) -> None:
        if not self.config.lenient_decode:
            raise DecodeError(
                f"Invalid JSON in {response.status_code} response from {uri}",
                uri=uri,
                status_code=response.status_code,
                text=response.text,
            ) from None
        logger.debug(f"Undecodable {response.status_code} body from {uri}, using empty result")


def _is_empty_success(response: httpx.Response) -> bool:
    """A 2xx without a body (204 No Content and the like) decodes to ``{}`` under both policies."""
    return response.is_success and not response.content.strip()
