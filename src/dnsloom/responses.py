"""Response decoders for the DNSimple JSON envelopes.

Every decoder is a Pydantic model built from the ``RawResponse`` returned by
the transport with ``from_raw()``. The generic decoders are parametrized with
the entity model they extract:

```python
domains = PaginatedResponse[Domain].from_raw(raw)
domains.data[0].name
domains.pagination.total_pages
```

All decoders also carry the rate-limit state reported in the response
headers. A decoder never substitutes defaults for missing data: an envelope
that does not have the expected shape raises ``ResponseParseError``.
"""

from typing import Any, Generic, Self, TypeVar

import httpx
from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from .constants import (
    RATE_LIMIT_HEADER,
    RATE_LIMIT_REMAINING_HEADER,
    RATE_LIMIT_RESET_HEADER,
)
from .exceptions import ResponseParseError
from .log_config import logger
from .types import RawResponse

T = TypeVar("T")


def _header_int(headers: httpx.Headers, name: str) -> int:
    value = headers.get(name)
    if value is None:
        raise ResponseParseError(f"Response is missing the {name} header.")
    try:
        return int(value)
    except ValueError as e:
        raise ResponseParseError(
            f"Header {name} is not a number: {value!r}"
        ) from e


def _envelope(raw: RawResponse) -> dict[str, Any]:
    if not isinstance(raw.data, dict):
        raise ResponseParseError(
            f"Expected a JSON object envelope from {raw.url}, got {type(raw.data).__name__}."
        )
    return raw.data


def _envelope_key(raw: RawResponse, key: str) -> Any:
    envelope = _envelope(raw)
    if key not in envelope:
        raise ResponseParseError(f"Response from {raw.url} has no '{key}' key.")
    return envelope[key]


class PaginationData(BaseModel):
    """The 'pagination' section of a paginated list response.

    Attributes:
        current_page: The page returned.
        per_page: The number of entries per page.
        total_entries: The total number of entries across all pages.
        total_pages: The total number of pages.
    """

    current_page: int
    per_page: int
    total_entries: int
    total_pages: int

    model_config = ConfigDict(extra="allow")


class Response(BaseModel):
    """Base for all decoders: the rate-limit state of the response.

    Attributes:
        rate_limit: Requests allowed per window (``X-RateLimit-Limit``).
        rate_limit_remaining: Requests left in the window (``X-RateLimit-Remaining``).
        rate_limit_reset: Epoch second at which the window resets (``X-RateLimit-Reset``).
    """

    rate_limit: int
    rate_limit_remaining: int
    rate_limit_reset: int

    @classmethod
    def from_raw(cls, raw: RawResponse) -> Self:
        """Decodes ``raw`` into this response type.

        Raises:
            ResponseParseError: If a rate-limit header is missing or not
                numeric, or the payload does not have the expected shape.
        """
        fields: dict[str, Any] = {
            "rate_limit": _header_int(raw.headers, RATE_LIMIT_HEADER),
            "rate_limit_remaining": _header_int(
                raw.headers, RATE_LIMIT_REMAINING_HEADER
            ),
            "rate_limit_reset": _header_int(raw.headers, RATE_LIMIT_RESET_HEADER),
        }
        fields.update(cls._payload_fields(raw))
        try:
            return cls.model_validate(fields)
        except PydanticValidationError as e:
            logger.error(f"Could not decode {cls.__name__} from {raw.url}: {e}")
            raise ResponseParseError(
                f"Could not decode {cls.__name__} from {raw.url}: {e}"
            ) from e

    @classmethod
    def _payload_fields(cls, raw: RawResponse) -> dict[str, Any]:
        return {}


class EmptyResponse(Response):
    """A response without payload (e.g. 204 No Content)."""


class SimpleResponse(Response, Generic[T]):
    """A response whose ``data`` is a single object."""

    data: T

    @classmethod
    def _payload_fields(cls, raw: RawResponse) -> dict[str, Any]:
        return {"data": _envelope_key(raw, "data")}


class SimpleOrEmptyResponse(Response, Generic[T]):
    """A response that carries a single object or, on 204 No Content, nothing.

    Only a no-content status counts as empty; any other status must carry a
    ``data`` envelope.

    Attributes:
        data: The object, or None when the response was empty.
        is_empty: True when the server answered without content.
    """

    data: T | None = None
    is_empty: bool = False

    @classmethod
    def _payload_fields(cls, raw: RawResponse) -> dict[str, Any]:
        if raw.is_no_content:
            return {"data": None, "is_empty": True}
        return {"data": _envelope_key(raw, "data"), "is_empty": False}


class ListResponse(Response, Generic[T]):
    """A response whose ``data`` is a list of objects, without pagination."""

    data: list[T]

    @classmethod
    def _payload_fields(cls, raw: RawResponse) -> dict[str, Any]:
        return {"data": _envelope_key(raw, "data")}


class PaginatedResponse(Response, Generic[T]):
    """A response whose ``data`` is one page of a list of objects.

    Only endpoints known to send a ``pagination`` section may be decoded with
    this class; its absence is an error.
    """

    data: list[T]
    pagination: PaginationData

    @classmethod
    def _payload_fields(cls, raw: RawResponse) -> dict[str, Any]:
        return {
            "data": _envelope_key(raw, "data"),
            "pagination": _envelope_key(raw, "pagination"),
        }
