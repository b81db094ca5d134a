"""
Result transformation for fetched record pages.

Reduces the raw records of one request to a FormattedPage:
- ids of the records on the page
- open records annotated with their primary-colour flag
- count of closed records with a primary colour
- previous/next page numbers

The raw list may hold one overflow record past ``limit``; it only decides
whether a next page exists and never reaches the output.
"""

import logging
from typing import Any, Iterable, Sequence

from pydantic import ValidationError

from records_client.constants import (
    DEFAULT_LIMIT,
    DISPOSITION_CLOSED,
    DISPOSITION_OPEN,
    PRIMARY_COLORS,
)
from records_client.errors import MalformedRecordsError
from records_client.schemas import AnnotatedRecord, FormattedPage, Record

logger = logging.getLogger(__name__)


def is_primary_color(color: Any) -> bool:
    """True for exactly ``red``, ``blue`` or ``yellow`` (case-sensitive)."""
    return isinstance(color, str) and color in PRIMARY_COLORS


def parse_records(raw_records: Iterable[Any]) -> list[Record]:
    """
    Validate raw JSON objects into Record models.

    Raises:
        MalformedRecordsError: If any item lacks id/color/disposition or
            has the wrong types
    """
    records = []
    for position, raw in enumerate(raw_records):
        if isinstance(raw, Record):
            records.append(raw)
            continue
        try:
            records.append(Record.model_validate(raw))
        except ValidationError as e:
            raise MalformedRecordsError(
                f"Record at position {position} is malformed: {e.error_count()} error(s)"
            ) from e
    return records


def get_ids(records: Sequence[Record]) -> list[int]:
    return [record.id for record in records]


def annotate(record: Record) -> AnnotatedRecord:
    """Copy ``record`` into an AnnotatedRecord; the source is left as is."""
    data = record.model_dump()
    data.pop("isPrimary", None)
    data["is_primary"] = is_primary_color(record.color)
    return AnnotatedRecord.model_validate(data)


def filter_open_records(records: Sequence[Record]) -> list[AnnotatedRecord]:
    """Open records, in order, each annotated with ``is_primary``."""
    return [
        annotate(record)
        for record in records
        if record.disposition == DISPOSITION_OPEN
    ]


def get_closed_primary(records: Sequence[Record]) -> list[Record]:
    """Closed records whose colour is primary."""
    return [
        record
        for record in records
        if record.disposition == DISPOSITION_CLOSED and is_primary_color(record.color)
    ]


def format_page(
    cur_page: int,
    records: Sequence[Any] | None = None,
    limit: int = DEFAULT_LIMIT,
) -> FormattedPage:
    """
    Format the records of one request into a page.

    Args:
        cur_page: Current 1-based page number
        records: Raw records, possibly ``limit + 1`` long
        limit: Records per page

    Returns:
        FormattedPage built from the first ``limit`` records

    Raises:
        MalformedRecordsError: If a record on the page is malformed
    """
    records = list(records or [])

    previous_page = None if cur_page == 1 else cur_page - 1
    next_page = None if len(records) <= limit else cur_page + 1
    final_records = parse_records(records[:limit])

    page = FormattedPage(
        ids=get_ids(final_records),
        open=filter_open_records(final_records),
        closed_primary_count=len(get_closed_primary(final_records)),
        previous_page=previous_page,
        next_page=next_page,
    )

    logger.debug(
        f"Formatted page {cur_page}: {len(page.ids)} ids, {len(page.open)} open, "
        f"{page.closed_primary_count} closed primary, next={page.next_page}"
    )

    return page
