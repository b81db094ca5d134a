"""
Shared test fixtures.

Provides:
- Isolated Settings (no .env or RECORDS_* leakage)
- Realistic /records payloads
- httpx response builders for mocked transports
"""

import pytest
import httpx

from records_client.config import Settings


@pytest.fixture
def settings():
    """Settings pinned to defaults, ignoring the environment file."""
    return Settings(
        _env_file=None,
        api_base="http://localhost:3000/records",
        timeout_seconds=5.0,
        page_limit=10,
        default_colors=["red", "brown", "blue", "yellow", "green"],
        log_level="DEBUG",
        log_format="text",
    )


@pytest.fixture
def sample_records():
    """
    Three records matching the documented example:
    - id 1 red/open (primary)
    - id 2 green/closed
    - id 3 blue/closed (primary)
    """
    return [
        {"id": 1, "color": "red", "disposition": "open"},
        {"id": 2, "color": "green", "disposition": "closed"},
        {"id": 3, "color": "blue", "disposition": "closed"},
    ]


@pytest.fixture
def make_records():
    """Factory for ``count`` records cycling through colours and dispositions."""
    colors = ["red", "brown", "blue", "yellow", "green"]
    dispositions = ["open", "closed"]

    def _make(count: int, start_id: int = 1) -> list[dict]:
        return [
            {
                "id": start_id + i,
                "color": colors[i % len(colors)],
                "disposition": dispositions[i % len(dispositions)],
            }
            for i in range(count)
        ]

    return _make


@pytest.fixture
def json_response():
    """Build an httpx.Response for a GET request."""

    def _build(status_code: int = 200, payload=None, content: bytes | None = None) -> httpx.Response:
        request = httpx.Request("GET", "http://localhost:3000/records")
        if content is not None:
            return httpx.Response(status_code, content=content, request=request)
        return httpx.Response(status_code, json=payload, request=request)

    return _build
