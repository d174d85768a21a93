"""Application-wide constants.

This module centralizes magic numbers and configuration constants
that are used across multiple modules. For environment-specific
configuration, see config.py.
"""

# =============================================================================
# Rankings
# =============================================================================

# Default limit for top cities / top activities
DEFAULT_RANKINGS_LIMIT: int = 10

# Largest ranking a client may request
MAX_RANKINGS_LIMIT: int = 50

# Display values used when a ranked key has no reference row
UNKNOWN_DISPLAY_NAME: str = "Unknown"
UNKNOWN_DISPLAY_DETAIL: str = ""

# =============================================================================
# Analytics
# =============================================================================

# Trailing window (in days) for the trips-by-day trend
DEFAULT_ANALYTICS_WINDOW_DAYS: int = 30

# Largest trailing window a client may request
MAX_ANALYTICS_WINDOW_DAYS: int = 365

# Day bucket format (ISO-8601 calendar date)
DAY_BUCKET_FORMAT: str = "%Y-%m-%d"

# =============================================================================
# Store
# =============================================================================

# Timeout for a single read against the statistics store
DEFAULT_STORE_QUERY_TIMEOUT_SECONDS: float = 10.0
