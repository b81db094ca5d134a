"""
Records Client

Async client for a paginated /records endpoint. Fetches one page (plus one
probe record), and reduces it to record ids, open records flagged by
primary colour, the closed-primary count and previous/next page numbers.
"""

__version__ = "1.0.0"

from records_client.clients.records_client import RecordsClient, retrieve
from records_client.config import Settings, configure_logging
from records_client.errors import HttpStatusError, MalformedRecordsError, RecordsClientError
from records_client.schemas import (
    AnnotatedRecord,
    FormattedPage,
    QueryOptions,
    Record,
    RetrieveResult,
)
from records_client.services.query_builder import build_query_params, build_url, calculate_offset
from records_client.services.transformer import format_page, is_primary_color

__all__ = [
    "AnnotatedRecord",
    "FormattedPage",
    "HttpStatusError",
    "MalformedRecordsError",
    "QueryOptions",
    "Record",
    "RecordsClient",
    "RecordsClientError",
    "RetrieveResult",
    "Settings",
    "__version__",
    "build_query_params",
    "build_url",
    "calculate_offset",
    "configure_logging",
    "format_page",
    "is_primary_color",
    "retrieve",
]
