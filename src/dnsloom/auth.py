"""Credentials and the httpx authenticators they resolve to.

DNSimple accepts either HTTP Basic credentials (account e-mail and password)
or an OAuth2 access token sent as a Bearer token. Each credentials object
resolves to exactly one ``httpx.Auth`` which the transport attaches to the
underlying HTTP client.
"""

from collections.abc import Generator
from typing import Protocol

import httpx

from .exceptions import ConfigurationError
from .log_config import logger


class Credentials(Protocol):
    """Protocol for objects that can authenticate requests to the API."""

    @property
    def authenticator(self) -> httpx.Auth:
        """The authenticator applied to every outgoing request."""
        ...


class BearerAuth(httpx.Auth):
    """Adds an ``Authorization: Bearer <token>`` header to every request."""

    def __init__(self, token: str):
        self._token = token

    def auth_flow(
        self, request: httpx.Request
    ) -> Generator[httpx.Request, httpx.Response, None]:
        logger.trace("Authenticating request using BearerAuth.")
        request.headers["Authorization"] = f"Bearer {self._token}"
        yield request


class BasicHttpCredentials:
    """Credentials used to authenticate with account e-mail and password.

    Example:
        ```python
        credentials = BasicHttpCredentials("example-account@example.com", "secret")
        ```
    """

    __slots__ = ("_username", "_password")

    def __init__(self, username: str, password: str):
        if not username or not password:
            raise ConfigurationError(
                "BasicHttpCredentials requires a non-empty 'username' and 'password'."
            )
        self._username = username
        self._password = password

    @property
    def username(self) -> str:
        return self._username

    @property
    def authenticator(self) -> httpx.Auth:
        return httpx.BasicAuth(username=self._username, password=self._password)

    def __repr__(self) -> str:
        return f"BasicHttpCredentials(username={self._username!r})"


class OAuth2Credentials:
    """Credentials used to authorize operations with an OAuth2 access token.

    Example:
        ```python
        credentials = OAuth2Credentials("TOKEN")
        ```
    """

    __slots__ = ("_token",)

    def __init__(self, token: str | None):
        if not token:
            raise ConfigurationError("OAuth2Credentials requires a non-empty 'token'.")
        self._token: str = token

    @property
    def authenticator(self) -> httpx.Auth:
        return BearerAuth(self._token)

    def __repr__(self) -> str:
        return "OAuth2Credentials(token=***)"
