"""Custom exception classes for the dnsloom library."""

import httpx


class DnsloomError(Exception):
    """Base exception class for all dnsloom errors."""

    def __init__(
        self,
        message: str,
        *,
        response: httpx.Response | None = None,
        request: httpx.Request | None = None,
    ):
        """Initializes the base exception.

        Args:
            message: The error message.
            response: Optional httpx.Response object associated with the error.
            request: Optional httpx.Request object associated with the error.
        """
        super().__init__(message)
        self.message = message
        self.response = response
        self.request = request

    def __str__(self) -> str:
        if self.response is not None:
            url_info = getattr(getattr(self.response, "request", None), "url", "N/A")
            return (
                f"{self.message} (Status: {self.response.status_code}, URL: {url_info})"
            )
        if isinstance(self.request, httpx.Request):
            return f"{self.message} (URL: {self.request.url})"
        return self.message


class APIError(DnsloomError):
    """Represents an error returned by the API that has no more specific kind.

    The message is the ``message`` field of the error envelope, unchanged.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        response: httpx.Response | None = None,
        request: httpx.Request | None = None,
    ):
        super().__init__(message, response=response, request=request)
        self.status_code = status_code

    def __str__(self) -> str:
        # The server-supplied message is relayed verbatim.
        return self.message


class NotFoundError(APIError):
    """Represents a resource not found error (404 Not Found)."""


class AuthenticationError(APIError):
    """Represents missing or invalid credentials (401 Unauthorized)."""


class ValidationError(APIError):
    """Represents a request rejected by server-side validation (400 Bad Request).

    Attributes:
        errors: Mapping of attribute name to the list of messages reported for it.
            Empty when the server did not send per-attribute details.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int = 400,
        errors: dict[str, list[str]] | None = None,
        response: httpx.Response | None = None,
        request: httpx.Request | None = None,
    ):
        super().__init__(
            message, status_code=status_code, response=response, request=request
        )
        self.errors: dict[str, list[str]] = errors or {}

    def attribute_errors(self) -> dict[str, list[str]]:
        """Returns the per-attribute validation messages."""
        return self.errors


class RateLimitError(APIError):
    """Represents hitting the API rate limit (429 Too Many Requests)."""


class ServiceUnavailableError(APIError):
    """Represents a transient or capability-absent failure (501, 502, 503, 504)."""


class TimeoutError(DnsloomError):
    """Represents a request timeout error.

    This error is raised when an HTTP request does not complete within the configured timeout.
    """

    def __init__(self, message: str, *, request: httpx.Request | None = None):
        super().__init__(message, request=request, response=None)


class NetworkError(DnsloomError):
    """Represents a network connection error (e.g., DNS resolution failure, connection refused)."""

    def __init__(self, message: str, *, request: httpx.Request | None = None):
        super().__init__(message, request=request, response=None)


class DnsloomRequestError(DnsloomError):
    """Represents any other failure of the HTTP exchange itself."""


class ResponseParseError(DnsloomError):
    """Raised when a successful response cannot be decoded.

    Covers bodies that are not JSON, envelopes missing ``data`` or
    ``pagination``, payloads that do not match the target model, and missing
    or non-numeric rate-limit headers.
    """


class ConfigurationError(DnsloomError):
    """Represents an error in the library's configuration or usage."""

    def __init__(self, message: str):
        super().__init__(message, response=None)
