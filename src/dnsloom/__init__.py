# dnsloom/__init__.py
"""dnsloom: a typed Python client for the DNSimple API v2."""

from .auth import BasicHttpCredentials, Credentials, OAuth2Credentials
from .client import DnsloomClient
from .config import ClientSettings, get_settings
from .constants import (
    DNSIMPLE_PRODUCTION_BASE_URL,
    DNSIMPLE_SANDBOX_BASE_URL,
    DNSLOOM_VERSION,
    SortOrder,
)
from .exceptions import (
    APIError,
    AuthenticationError,
    ConfigurationError,
    DnsloomError,
    DnsloomRequestError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    ResponseParseError,
    ServiceUnavailableError,
    TimeoutError,
    ValidationError,
)
from .options import (
    ContactsListOptions,
    DelegationSignerRecordsListOptions,
    DomainListOptions,
    ListOptions,
    ListOptionsWithFiltering,
    Pagination,
    ZoneRecordsListOptions,
    ZonesListOptions,
)
from .request_builder import RequestBuilder
from .responses import (
    EmptyResponse,
    ListResponse,
    PaginatedResponse,
    PaginationData,
    SimpleOrEmptyResponse,
    SimpleResponse,
)
from .types import HttpMethod, RawResponse, RequestData

__version__ = DNSLOOM_VERSION

__all__ = [
    "APIError",
    "AuthenticationError",
    "BasicHttpCredentials",
    "ClientSettings",
    "ConfigurationError",
    "ContactsListOptions",
    "Credentials",
    "DNSIMPLE_PRODUCTION_BASE_URL",
    "DNSIMPLE_SANDBOX_BASE_URL",
    "DelegationSignerRecordsListOptions",
    "DnsloomClient",
    "DnsloomError",
    "DnsloomRequestError",
    "DomainListOptions",
    "EmptyResponse",
    "HttpMethod",
    "ListOptions",
    "ListOptionsWithFiltering",
    "ListResponse",
    "NetworkError",
    "NotFoundError",
    "OAuth2Credentials",
    "PaginatedResponse",
    "Pagination",
    "PaginationData",
    "RateLimitError",
    "RawResponse",
    "RequestBuilder",
    "RequestData",
    "ResponseParseError",
    "ServiceUnavailableError",
    "SimpleOrEmptyResponse",
    "SimpleResponse",
    "SortOrder",
    "TimeoutError",
    "ValidationError",
    "ZoneRecordsListOptions",
    "ZonesListOptions",
    "__version__",
    "get_settings",
]
