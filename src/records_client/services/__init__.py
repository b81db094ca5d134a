"""
Services layer for query building and page formatting.

Both services are pure functions over request-scoped values.
"""

from records_client.services.query_builder import (
    build_query_params,
    build_url,
    calculate_offset,
)
from records_client.services.transformer import (
    filter_open_records,
    format_page,
    get_closed_primary,
    get_ids,
    is_primary_color,
)

__all__ = [
    "build_query_params",
    "build_url",
    "calculate_offset",
    "filter_open_records",
    "format_page",
    "get_closed_primary",
    "get_ids",
    "is_primary_color",
]
