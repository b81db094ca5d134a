"""
Constants used throughout the package.

Includes the records endpoint defaults and colour classification values.
"""

# ============================================================================
# Endpoint Defaults
# ============================================================================

DEFAULT_API_BASE = "http://localhost:3000/records"
DEFAULT_TIMEOUT_SECONDS = 10.0

# ============================================================================
# Pagination Defaults
# ============================================================================

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MIN_PAGE = 1
MIN_LIMIT = 1

# Extra record requested past the page size to detect a next page
OVERFETCH = 1

# ============================================================================
# Query Parameter Names
# ============================================================================

COLOR_PARAM = "color[]"
OFFSET_PARAM = "offset"
LIMIT_PARAM = "limit"

# ============================================================================
# Colours & Dispositions
# ============================================================================

DEFAULT_COLORS = ("red", "brown", "blue", "yellow", "green")
PRIMARY_COLORS = frozenset({"red", "blue", "yellow"})

DISPOSITION_OPEN = "open"
DISPOSITION_CLOSED = "closed"

# ============================================================================
# Logging
# ============================================================================

TEXT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
JSON_LOG_FORMAT = (
    '{"time":"%(asctime)s","name":"%(name)s",'
    '"level":"%(levelname)s","message":"%(message)s"}'
)
