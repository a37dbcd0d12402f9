"""Transport layer: executes built requests and classifies the responses.

``HttpService`` owns the ``httpx.Client`` used to talk to the API. It sends a
``RequestData`` under ``<base-url>/<version>/``, hands successful responses
back as ``RawResponse`` values and turns every unsuccessful one into the
matching exception from ``dnsloom.exceptions``. It never retries.
"""

from http import HTTPStatus
from typing import Any

import httpx

from .auth import Credentials
from .constants import API_VERSION, DNSIMPLE_PRODUCTION_BASE_URL
from .exceptions import (
    APIError,
    AuthenticationError,
    DnsloomRequestError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    ResponseParseError,
    ServiceUnavailableError,
    TimeoutError,
    ValidationError,
)
from .log_config import logger
from .request_builder import RequestBuilder
from .types import RawResponse, RequestData

ERROR_CLASSES: dict[int, type[APIError]] = {
    HTTPStatus.BAD_REQUEST: ValidationError,
    HTTPStatus.UNAUTHORIZED: AuthenticationError,
    HTTPStatus.NOT_FOUND: NotFoundError,
    HTTPStatus.TOO_MANY_REQUESTS: RateLimitError,
    HTTPStatus.NOT_IMPLEMENTED: ServiceUnavailableError,
    HTTPStatus.BAD_GATEWAY: ServiceUnavailableError,
    HTTPStatus.SERVICE_UNAVAILABLE: ServiceUnavailableError,
    HTTPStatus.GATEWAY_TIMEOUT: ServiceUnavailableError,
}
"""Status codes with a dedicated error kind; anything else raises APIError."""


def _parse_error_envelope(response: httpx.Response) -> dict[str, Any] | None:
    """Returns the JSON error envelope, or None when the body is not a JSON object."""
    if not response.content:
        return None
    try:
        envelope = response.json()
    except ValueError:
        logger.warning(
            f"Error response from {response.request.url} is not JSON "
            f"(status {response.status_code})."
        )
        return None
    return envelope if isinstance(envelope, dict) else None


def error_from_response(response: httpx.Response) -> APIError:
    """Builds the typed error for an unsuccessful response.

    The status code selects the error kind; the message is the envelope's
    ``message`` unchanged. A body that cannot be parsed still produces the
    status-selected kind, with a message derived from the status line and no
    per-attribute errors.
    """
    envelope = _parse_error_envelope(response)
    status_code = response.status_code
    if envelope is not None and isinstance(envelope.get("message"), str):
        message = envelope["message"]
    else:
        message = f"HTTP {status_code} {response.reason_phrase}".rstrip()

    error_class = ERROR_CLASSES.get(status_code, APIError)
    if error_class is ValidationError:
        errors = envelope.get("errors") if envelope is not None else None
        return ValidationError(
            message,
            status_code=status_code,
            errors=errors if isinstance(errors, dict) else None,
            response=response,
            request=response.request,
        )
    return error_class(
        message,
        status_code=status_code,
        response=response,
        request=response.request,
    )


class HttpService:
    """Service used to interact with the API at the transport (HTTP) level.

    Attributes:
        base_url: The API root; requests go to ``<base_url>/<version>/<path>``.
            It can be changed at any time and applies from the next request.
        version: The API version segment.
        _http_client: The underlying httpx.Client. It carries the
            authenticator, the User-Agent header and the timeout.
        _builder: The RequestBuilder recycled by ``request_builder()``.
    """

    def __init__(
        self,
        http_client: httpx.Client,
        builder: RequestBuilder | None = None,
        *,
        base_url: str = DNSIMPLE_PRODUCTION_BASE_URL,
        version: str = API_VERSION,
    ):
        self._http_client = http_client
        self._builder = builder or RequestBuilder()
        self.base_url: str = base_url.rstrip("/")
        self.version = version
        logger.debug("HttpService initialized.")

    @property
    def http_client(self) -> httpx.Client:
        return self._http_client

    def versioned_base_url(self) -> str:
        return f"{self.base_url}/{self.version}/"

    def add_authenticator(self, credentials: Credentials) -> None:
        """Attaches the credentials' authenticator; the last one set wins."""
        self._http_client.auth = credentials.authenticator
        logger.info(f"Using authenticator from {type(credentials).__name__}")

    def request_builder(self, path: str) -> RequestBuilder:
        """Returns the recycled RequestBuilder, reset and bound to ``path``.

        State does not survive between calls: anything added for a previous
        request is discarded.
        """
        return self._builder.reset().for_path(path)

    def execute(self, request: RequestData) -> RawResponse:
        """Sends ``request`` and classifies the response.

        Args:
            request: The request built with a RequestBuilder.

        Returns:
            RawResponse: The status, headers and parsed JSON payload (None for
                an empty body) of a successful response.

        Raises:
            APIError: Or one of its subclasses, for an unsuccessful status.
            TimeoutError: If the request times out.
            NetworkError: For connection-level failures.
            DnsloomRequestError: For any other failure of the exchange.
            ResponseParseError: If a successful response body is not JSON.
        """
        http_request = request.build_request(
            self._http_client, self.versioned_base_url()
        )
        logger.debug(f"Sending request: {http_request.method} {http_request.url}")
        if http_request.content:
            logger.trace(f"Request Body: {http_request.content.decode()}")

        try:
            response = self._http_client.send(http_request)
        except httpx.TimeoutException as e:
            logger.error(f"Request timed out: {http_request.url}")
            raise TimeoutError("Request timed out", request=http_request) from e
        except httpx.NetworkError as e:
            logger.error(f"Network error occurred for {http_request.url}: {e}")
            raise NetworkError(
                f"Network error for {http_request.url}: {e}", request=http_request
            ) from e
        except httpx.RequestError as e:
            logger.error(f"HTTP request error for {http_request.url}: {e}")
            raise DnsloomRequestError(
                f"HTTP request error for {http_request.url}: {e}",
                request=http_request,
            ) from e

        logger.debug(
            f"Received response: {response.status_code} for {http_request.url}"
        )
        logger.trace(f"Response Headers: {response.headers}")

        if not response.is_success:
            error = error_from_response(response)
            logger.error(
                f"{type(error).__name__} ({response.status_code}) for "
                f"{http_request.method} {http_request.url}: {error.message}"
            )
            raise error

        return RawResponse(
            status_code=response.status_code,
            headers=response.headers,
            data=self._parse_payload(response),
            url=str(http_request.url),
        )

    @staticmethod
    def _parse_payload(response: httpx.Response) -> Any | None:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ResponseParseError(
                f"Response body is not valid JSON: {e}", response=response
            ) from e
