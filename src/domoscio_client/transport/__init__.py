"""Transport layer: verbs, single-request sending and pagination helpers.

Modules:
    http: ``Transport`` sending exactly one request per call
    pagination: ``Total``/``Per-Page`` page counting and result merging

Example:
    ```python
    from domoscio_client.transport import Transport

    transport = Transport(timeout=10)
    ```
"""

from http import HTTPMethod

from domoscio_client.transport.http import SUPPORTED_METHODS, BeforeSend, Transport, coerce_method
from domoscio_client.transport.pagination import flatten, merge_page, page_count

__all__ = [
    "SUPPORTED_METHODS",
    "BeforeSend",
    "HTTPMethod",
    "Transport",
    "coerce_method",
    "flatten",
    "merge_page",
    "page_count",
]
