"""
Query construction for the /records endpoint.

Turns a page number into an offset and asks for one record more than the
page size, so the caller can tell whether a next page exists without a
second request.
"""

from typing import Any, Iterable, Optional

import httpx

from records_client.constants import (
    COLOR_PARAM,
    DEFAULT_COLORS,
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    LIMIT_PARAM,
    OFFSET_PARAM,
    OVERFETCH,
)
from records_client.schemas import QueryOptions


def calculate_offset(page: int = DEFAULT_PAGE, limit: int = DEFAULT_LIMIT) -> int:
    """
    Offset of the first record on a page.

    Args:
        page: 1-based page number (not validated)
        limit: Records per page

    Returns:
        ``(page - 1) * limit``
    """
    return (page - 1) * limit


def build_query_params(
    page: int = DEFAULT_PAGE,
    colors: Optional[Iterable[str]] = None,
    limit: int = DEFAULT_LIMIT,
) -> dict[str, Any]:
    """
    Build query parameters for one page.

    Args:
        page: 1-based page number
        colors: Colours to request (default: the five fixed colours)
        limit: Records per page

    Returns:
        Dict with the colour list, offset and the over-fetched limit

    Example:
        build_query_params(page=2, colors=["red"], limit=10)
        -> {"color[]": ["red"], "offset": 10, "limit": 11}
    """
    return {
        COLOR_PARAM: list(DEFAULT_COLORS if colors is None else colors),
        OFFSET_PARAM: calculate_offset(page, limit),
        LIMIT_PARAM: limit + OVERFETCH,
    }


def build_url(base_url: str | httpx.URL, options: QueryOptions) -> httpx.URL:
    """
    Merge query parameters for ``options`` onto the endpoint URL.

    List values encode as repeated keys (``color[]=red&color[]=blue``).
    """
    params = build_query_params(
        page=options.page,
        colors=options.colors,
        limit=options.limit,
    )
    return httpx.URL(base_url).copy_merge_params(params)
