# dnsloom/types.py
"""Core type definitions for the dnsloom request pipeline.

This module defines the request value assembled by the ``RequestBuilder`` and
the raw response value the transport hands over to the response decoders.
"""

from enum import Enum
from http import HTTPStatus
from typing import Any
from urllib.parse import urlencode

import httpx
from pydantic import BaseModel, ConfigDict, Field


class HttpMethod(str, Enum):
    """HTTP methods used by the API."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"


class RequestData(BaseModel):
    """Encapsulates data for a single HTTP request to the API.

    Headers and query parameters are ordered sequences of pairs: duplicate
    keys are legal and are all transmitted, and parameter order is the order
    of the serialized query string.
    """

    method: HttpMethod = HttpMethod.GET
    path: str
    headers: list[tuple[str, str]] = Field(default_factory=list)
    params: list[tuple[str, str]] = Field(default_factory=list)
    body: str | None = None

    def url(self, versioned_base_url: str) -> str:
        """Joins the request path onto the versioned API root."""
        return f"{versioned_base_url.rstrip('/')}/{self.path.lstrip('/')}"

    def build_request(
        self, client: httpx.Client, versioned_base_url: str
    ) -> httpx.Request:
        """Builds an httpx.Request object from the stored data.

        The request is built through ``client`` so that its default headers
        (Accept, User-Agent) and timeout apply.

        The query string is encoded here rather than by httpx: parameters keep
        their order, commas are percent-encoded and colons are sent as-is,
        e.g. ``sort=id:asc%2Cname:desc``.
        """
        url = httpx.URL(self.url(versioned_base_url))
        if self.params:
            query = urlencode(self.params, safe=":")
            url = url.copy_with(query=query.encode("ascii"))
        headers = list(self.headers)
        content: bytes | None = None
        if self.body is not None:
            headers.append(("Content-Type", "application/json"))
            content = self.body.encode("utf-8")
        return client.build_request(
            method=self.method.value,
            url=url,
            headers=headers,
            content=content,
        )


class RawResponse(BaseModel):
    """A successful response as seen by the response decoders.

    Attributes:
        status_code: The HTTP status code.
        headers: The response headers (case-insensitive).
        data: The parsed JSON payload, or None when the body was empty.
        url: The URL the request was sent to.
    """

    status_code: int
    headers: httpx.Headers
    data: Any | None = None
    url: str = ""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @property
    def is_no_content(self) -> bool:
        return self.status_code == HTTPStatus.NO_CONTENT
