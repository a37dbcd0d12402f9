"""Constants used throughout the dnsloom library.

This module defines constants for API base URLs, the API version, default
client settings, rate-limit header names and the sort order enumeration used
when building list requests.
"""

from enum import Enum

# Base URLs
DNSIMPLE_PRODUCTION_BASE_URL = "https://api.dnsimple.com"
DNSIMPLE_SANDBOX_BASE_URL = "https://api.sandbox.dnsimple.com"

API_VERSION: str = "v2"

# Default settings
DEFAULT_TIMEOUT: float = 30.0  # Default request timeout in seconds
DEFAULT_PAGE: int = 1
DEFAULT_PER_PAGE: int = 30

# Response headers carrying the quota state
RATE_LIMIT_HEADER = "X-RateLimit-Limit"
RATE_LIMIT_REMAINING_HEADER = "X-RateLimit-Remaining"
RATE_LIMIT_RESET_HEADER = "X-RateLimit-Reset"


class SortOrder(Enum):
    ASC = "asc"
    DESC = "desc"


DNSLOOM_VERSION: str = "0.1.0"
DEFAULT_USER_AGENT: str = f"dnsloom/{DNSLOOM_VERSION}"
CLIENT_HEADERS: dict[str, str] = {
    "Accept": "application/json",
    "User-Agent": DEFAULT_USER_AGENT,
}
