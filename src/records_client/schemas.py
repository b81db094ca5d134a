"""
Pydantic schemas for records, query options and formatted pages.

Field names are snake_case in Python; ``model_dump(by_alias=True)``
produces the camelCase names consumers of the page object expect
(``closedPrimaryCount``, ``previousPage``, ``nextPage``, ``isPrimary``).
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from records_client.constants import (
    DEFAULT_COLORS,
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    MIN_LIMIT,
    MIN_PAGE,
)

# ============================================================================
# Base Models
# ============================================================================


class CamelModel(BaseModel):
    """Base class for models serialized with camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


# ============================================================================
# Records
# ============================================================================


class Record(CamelModel):
    """
    A record as returned by the /records endpoint.

    Only ``id``, ``color`` and ``disposition`` are interpreted; any other
    server fields are kept as extras so they survive into the output.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        frozen=True,
    )

    id: int = Field(..., description="Record identifier")
    color: str = Field(..., description="Record colour")
    disposition: str = Field(..., description="Record status, 'open' or 'closed'")


class AnnotatedRecord(Record):
    """Open record carrying its primary-colour classification."""

    is_primary: bool = Field(..., description="Whether the colour is red, blue or yellow")


# ============================================================================
# Query Options
# ============================================================================


class QueryOptions(BaseModel):
    """Inputs for building a /records query."""

    model_config = ConfigDict(extra="forbid")

    page: int = Field(
        default=DEFAULT_PAGE,
        ge=MIN_PAGE,
        description="1-based page number",
    )
    colors: list[str] = Field(
        default_factory=lambda: list(DEFAULT_COLORS),
        description="Colours to request",
    )
    limit: int = Field(
        default=DEFAULT_LIMIT,
        ge=MIN_LIMIT,
        description="Records per page",
    )


# ============================================================================
# Formatted Page
# ============================================================================


class FormattedPage(CamelModel):
    """One page of records reduced to ids, open records and page pointers."""

    ids: list[int] = Field(default_factory=list, description="Record ids in order")
    open: list[AnnotatedRecord] = Field(
        default_factory=list,
        description="Records with disposition 'open'",
    )
    closed_primary_count: int = Field(
        default=0,
        ge=0,
        description="Closed records with a primary colour",
    )
    previous_page: int | None = Field(None, description="Previous page, None on page 1")
    next_page: int | None = Field(None, description="Next page, None when this is the last")


# ============================================================================
# Retrieve Result
# ============================================================================


class RetrieveResult(BaseModel):
    """
    Outcome of a retrieve call.

    Either ``ok`` with a ``page`` or not ok with the error message and the
    exception type name. An empty page is still a success.
    """

    ok: bool
    page: FormattedPage | None = None
    error: str | None = None
    error_type: str | None = None

    @classmethod
    def success(cls, page: FormattedPage) -> "RetrieveResult":
        return cls(ok=True, page=page)

    @classmethod
    def failure(cls, exc: BaseException) -> "RetrieveResult":
        return cls(ok=False, error=str(exc), error_type=type(exc).__name__)

    def to_dict(self) -> dict[str, Any] | None:
        """Page as a camelCase dict, or None for a failure."""
        if not self.ok or self.page is None:
            return None
        return self.page.model_dump(by_alias=True)
