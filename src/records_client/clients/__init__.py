"""HTTP clients for the records endpoint."""

from records_client.clients.records_client import RecordsClient, retrieve

__all__ = ["RecordsClient", "retrieve"]
