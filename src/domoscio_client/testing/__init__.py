"""Testing utilities for code built on the Domoscio client.

Example:
    ```python
    from domoscio_client import Configuration, DomoscioClient
    from domoscio_client.testing import RecordingHandler, create_mock_response


    def test_fetch_students():
        handler = RecordingHandler([create_mock_response(200, json=[{"id": 1}])])
        client = DomoscioClient(Configuration(client_id="42"), transport=handler.transport())

        assert client.student.fetch() == [{"id": 1}]
        assert handler.requests[0].url.path == "/v1/instances/42/students"
    ```
"""

import json
from collections.abc import Callable, Iterable, Mapping
from typing import Any

import httpx

__all__ = ["RecordingHandler", "create_mock_response", "paginated_responses"]


def create_mock_response(
    status_code: int = 200,
    *,
    json: Any = None,
    text: str | None = None,
    headers: Mapping[str, str] | None = None,
) -> httpx.Response:
    """Build a canned response; ``text`` wins over ``json`` when both are given."""
    if text is not None:
        return httpx.Response(status_code, text=text, headers=headers)
    if json is not None:
        return httpx.Response(status_code, json=json, headers=headers)
    return httpx.Response(status_code, headers=headers)


def paginated_responses(pages: list[list[Any]], per_page: int) -> list[httpx.Response]:
    """Responses for a collection split over ``pages``, with Total/Per-Page headers on each."""
    total = sum(len(page) for page in pages)
    headers = {"Total": str(total), "Per-Page": str(per_page)}
    return [httpx.Response(200, json=page, headers=headers) for page in pages]


class RecordingHandler:
    """``httpx.MockTransport`` handler replaying responses and recording requests.

    Args:
        responses: Returned in order; the last one repeats once exhausted.
            None or an empty iterable replies 200 with an empty object.
            A callable receives the request and returns the response.
    """

    def __init__(
        self,
        responses: Iterable[httpx.Response] | Callable[[httpx.Request], httpx.Response] | None = None,
    ) -> None:
        self.requests: list[httpx.Request] = []
        if callable(responses):
            self._respond = responses
            self._queue: list[httpx.Response] = []
        else:
            self._respond = None
            self._queue = list(responses or []) or [httpx.Response(200, json={})]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._respond is not None:
            return self._respond(request)
        canned = self._queue[min(len(self.requests), len(self._queue)) - 1]
        # Fresh copy so a repeated response is never read twice
        return httpx.Response(canned.status_code, headers=canned.headers, content=canned.content)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def body(self, index: int = -1) -> Any:
        """Decoded JSON body of a recorded request."""
        return json.loads(self.requests[index].content)
