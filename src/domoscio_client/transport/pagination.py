"""Helpers for header-driven page aggregation.

The service announces pagination with ``Total`` (item count) and
``Per-Page`` response headers; further pages are requested by adding
``page`` to the request body.
"""

import logging
import math
from typing import Any

import httpx

logger = logging.getLogger(__name__)


def page_count(response: httpx.Response) -> int | None:
    """Number of pages announced by ``response``.

    Returns:
        None when the response has no ``Total`` header (not paginated), or
        when ``Total``/``Per-Page`` cannot be used to compute a count.
    """
    total = response.headers.get("Total")
    if total is None:
        return None

    per_page = response.headers.get("Per-Page")
    try:
        total_items = int(total)
        page_size = float(per_page) if per_page is not None else 0.0
    except ValueError:
        logger.warning(f"Ignoring pagination headers Total={total!r} Per-Page={per_page!r}")
        return None

    if page_size <= 0:
        logger.warning(f"Ignoring pagination with Total={total_items} and no usable Per-Page header")
        return None

    return math.ceil(total_items / page_size)


def flatten(items: list[Any]) -> list[Any]:
    """Flatten nested lists at any depth; mappings inside are left alone."""
    flat: list[Any] = []
    for item in items:
        if isinstance(item, list):
            flat.extend(flatten(item))
        else:
            flat.append(item)
    return flat


def merge_page(aggregate: Any, page: Any) -> Any:
    """Append one decoded page to the aggregate result.

    Only list aggregates can grow. A mapping aggregate (an empty result
    after a decode failure, or a keyed first page) is returned unchanged.
    """
    if not isinstance(aggregate, list):
        logger.warning(f"Cannot merge page into {type(aggregate).__name__} result, page dropped")
        return aggregate

    extra = page if isinstance(page, list) else [page]
    return flatten(aggregate + extra)
