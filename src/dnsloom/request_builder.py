"""Incremental construction of ``RequestData`` values.

The transport recycles one ``RequestBuilder`` per client, so every use starts
with ``for_path()`` which discards whatever the previous call left behind.

Example:
    ```python
    builder = RequestBuilder().for_path("/1010/domains")
    builder.method(HttpMethod.POST)
    builder.add_json_payload({"name": "example.com"})
    request = builder.request
    ```
"""

from collections.abc import Iterable
from typing import Any

from pydantic_core import to_json

from .exceptions import ConfigurationError
from .types import HttpMethod, RequestData


class RequestBuilder:
    """Builds the ``RequestData`` sent to the API.

    Attributes:
        _request: The request being built, or None until a path is set.
    """

    def __init__(self, path: str | None = None):
        self._request: RequestData | None = None
        if path is not None:
            self.for_path(path)

    @property
    def request(self) -> RequestData:
        """The request built so far."""
        return self._current()

    def for_path(self, path: str) -> "RequestBuilder":
        """Discards any previous state and starts a GET request for ``path``."""
        self._request = RequestData(path=path)
        return self

    def reset(self) -> "RequestBuilder":
        """Empties the builder; a path must be set again before use."""
        self._request = None
        return self

    def add_headers(self, headers: Iterable[tuple[str, str]]) -> None:
        self._current().headers.extend(headers)

    def add_parameter(self, parameter: tuple[str, str]) -> None:
        self._current().params.append(parameter)

    def add_parameters(self, parameters: Iterable[tuple[str, str]]) -> None:
        self._current().params.extend(parameters)

    def add_json_payload(self, payload: Any) -> None:
        """Serializes ``payload`` to JSON and stores it as the request body.

        Pydantic models are serialized through their own schema, plain data
        structures as-is. A previous body is overwritten.
        """
        self._current().body = to_json(payload).decode("utf-8")

    def method(self, method: HttpMethod) -> None:
        self._current().method = method

    def pagination(self, per_page: int, page: int) -> None:
        self.add_parameters([("per_page", str(per_page)), ("page", str(page))])

    def _current(self) -> RequestData:
        if self._request is None:
            raise ConfigurationError(
                "RequestBuilder has no path set; call for_path() first."
            )
        return self._request
