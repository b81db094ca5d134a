"""Exceptions raised by the records client."""


class RecordsClientError(Exception):
    """Base class for records client failures."""


class HttpStatusError(RecordsClientError):
    """Endpoint answered with a status outside [200, 300)."""

    def __init__(self, status_code: int, status_text: str):
        self.status_code = status_code
        self.status_text = status_text
        super().__init__(status_text or f"HTTP {status_code}")


class MalformedRecordsError(RecordsClientError):
    """Response body or a record in it does not have the expected shape."""
