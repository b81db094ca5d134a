"""
Async HTTP client for the paginated /records endpoint.

Provides:
- One GET per retrieve call, no retries
- Status verification with the reason phrase carried on failure
- Formatting of the fetched records into a page
- Failures logged and returned as a tagged result, never raised
"""

import logging
from typing import Any, Iterable, Optional

import httpx

from records_client.config import Settings
from records_client.errors import HttpStatusError, MalformedRecordsError
from records_client.schemas import QueryOptions, RetrieveResult
from records_client.services.query_builder import build_url
from records_client.services.transformer import format_page

logger = logging.getLogger(__name__)


class RecordsClient:
    """
    Client for the /records endpoint.

    Features:
    - Explicit configuration (no process-wide endpoint URL)
    - Async HTTP client with timeout
    - Over-fetch by one record for next-page detection
    - Swallow-and-log error policy surfaced as RetrieveResult
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize records client.

        Args:
            base_url: Full /records endpoint URL (default: settings.api_base)
            timeout: HTTP timeout in seconds (default: settings.timeout_seconds)
            settings: Settings instance (default: loaded from environment)
            transport: Optional httpx transport, used to plug in test doubles
        """
        self.settings = settings or Settings()
        self.base_url = base_url or self.settings.api_base
        self.limit = self.settings.page_limit
        self.client = httpx.AsyncClient(
            timeout=timeout if timeout is not None else self.settings.timeout_seconds,
            headers={"Accept": "application/json"},
            transport=transport,
        )

    async def fetch_records(self, url: str | httpx.URL) -> list[Any]:
        """
        Send GET to ``url`` and return the decoded records.

        Args:
            url: Fully formed request URL

        Returns:
            Decoded JSON array; ``[]`` when the body is empty or ``null``

        Raises:
            HttpStatusError: If status is outside [200, 300)
            MalformedRecordsError: If the body is not a JSON array
            httpx.HTTPError: On network failures and timeouts
            json.JSONDecodeError: If the body is not valid JSON
        """
        response = await self.client.get(url)

        if not response.is_success:
            raise HttpStatusError(response.status_code, response.reason_phrase)

        if not response.content:
            return []

        records = response.json()
        if records is None:
            return []
        if not isinstance(records, list):
            raise MalformedRecordsError(
                f"Expected a JSON array of records, got {type(records).__name__}"
            )

        logger.debug(f"Fetched {len(records)} records (status={response.status_code})")
        return records

    async def retrieve(
        self,
        page: Optional[int] = None,
        colors: Optional[Iterable[str]] = None,
    ) -> RetrieveResult:
        """
        Retrieve one formatted page of records.

        Args:
            page: 1-based page number (default: 1)
            colors: Colours to request (default: settings.default_colors)

        Returns:
            RetrieveResult with the page on success, or the error on failure.
            Errors are logged here and never propagate.
        """
        cur_page = page or 1

        try:
            options = QueryOptions(
                page=cur_page,
                colors=list(colors) if colors is not None else list(self.settings.default_colors),
                limit=self.limit,
            )
            url = build_url(self.base_url, options)
            logger.debug(f"Requesting records: {url}")

            records = await self.fetch_records(url)
            formatted = format_page(cur_page=cur_page, records=records, limit=options.limit)

        except Exception as e:
            logger.error(f"An error occurred during the request. {e}")
            return RetrieveResult.failure(e)

        return RetrieveResult.success(formatted)

    async def close(self) -> None:
        """Close HTTP client."""
        await self.client.aclose()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()


async def retrieve(
    page: Optional[int] = None,
    colors: Optional[Iterable[str]] = None,
    settings: Optional[Settings] = None,
) -> RetrieveResult:
    """
    Retrieve one formatted page with a short-lived client.

    Args:
        page: 1-based page number (default: 1)
        colors: Colours to request (default: settings.default_colors)
        settings: Settings instance (default: loaded from environment)

    Returns:
        RetrieveResult, see RecordsClient.retrieve
    """
    async with RecordsClient(settings=settings) as client:
        return await client.retrieve(page=page, colors=colors)
