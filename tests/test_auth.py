"""Tests for the credentials and their authenticators."""

import base64

import httpx
import pytest

from dnsloom.auth import BasicHttpCredentials, BearerAuth, OAuth2Credentials
from dnsloom.exceptions import ConfigurationError


def authenticate(auth: httpx.Auth) -> httpx.Request:
    request = httpx.Request("GET", "https://api.dnsimple.com/v2/whoami")
    return next(auth.sync_auth_flow(request))


def test_bearer_auth_adds_authorization_header():
    request = authenticate(BearerAuth("test_token"))
    assert request.headers["Authorization"] == "Bearer test_token"


def test_oauth2_credentials_resolve_to_bearer_auth():
    credentials = OAuth2Credentials("test_token")
    assert isinstance(credentials.authenticator, BearerAuth)
    assert authenticate(credentials.authenticator).headers["Authorization"] == (
        "Bearer test_token"
    )


@pytest.mark.parametrize("token", ["", None])
def test_oauth2_credentials_require_token(token):
    with pytest.raises(
        ConfigurationError, match="OAuth2Credentials requires a non-empty 'token'."
    ):
        OAuth2Credentials(token)


def test_oauth2_credentials_repr_hides_token():
    assert "test_token" not in repr(OAuth2Credentials("test_token"))


def test_basic_credentials_resolve_to_basic_auth():
    credentials = BasicHttpCredentials("user@example.com", "secret")
    expected = base64.b64encode(b"user@example.com:secret").decode()

    request = authenticate(credentials.authenticator)

    assert credentials.username == "user@example.com"
    assert request.headers["Authorization"] == f"Basic {expected}"
    assert "secret" not in repr(credentials)


@pytest.mark.parametrize(
    "username, password", [("", "secret"), ("user@example.com", "")]
)
def test_basic_credentials_require_username_and_password(username, password):
    with pytest.raises(ConfigurationError):
        BasicHttpCredentials(username, password)
