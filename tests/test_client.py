"""Tests for DnsloomClient."""

import httpx
import pytest

from dnsloom.auth import BasicHttpCredentials, OAuth2Credentials
from dnsloom.client import DnsloomClient
from dnsloom.config import ClientSettings
from dnsloom.constants import DEFAULT_USER_AGENT, DNSIMPLE_SANDBOX_BASE_URL
from dnsloom.exceptions import AuthenticationError

from .conftest import API_ROOT, RATE_LIMIT_HEADERS, domain_payload


def test_defaults(client: DnsloomClient):
    assert client.base_url == "https://api.dnsimple.com"
    assert client.version == "v2"
    assert client.versioned_base_url() == "https://api.dnsimple.com/v2/"
    assert client.user_agent == DEFAULT_USER_AGENT


def test_default_headers_are_sent(client: DnsloomClient, httpx_mock):
    httpx_mock.add_response(json={"data": {}}, headers=RATE_LIMIT_HEADERS)

    client.http.execute(client.http.request_builder("/whoami").request)

    sent = httpx_mock.get_request()
    assert sent.headers["Accept"] == "application/json"
    assert sent.headers["User-Agent"] == DEFAULT_USER_AGENT
    assert sent.headers["Authorization"] == "Bearer TOKEN"


def test_change_base_url_keeps_user_agent(client: DnsloomClient, httpx_mock):
    httpx_mock.add_response(json={"data": {}}, headers=RATE_LIMIT_HEADERS)
    client.set_user_agent("MySuperAPP")

    client.change_base_url_to(DNSIMPLE_SANDBOX_BASE_URL)

    assert client.versioned_base_url() == "https://api.sandbox.dnsimple.com/v2/"
    assert client.user_agent == f"MySuperAPP {DEFAULT_USER_AGENT}"

    client.http.execute(client.http.request_builder("/whoami").request)
    sent = httpx_mock.get_request()
    assert str(sent.url) == "https://api.sandbox.dnsimple.com/v2/whoami"
    assert sent.headers["User-Agent"] == f"MySuperAPP {DEFAULT_USER_AGENT}"


def test_list_domains_end_to_end(client: DnsloomClient, httpx_mock):
    httpx_mock.add_response(
        json={
            "data": [
                domain_payload(181984, "example-alpha.com"),
                domain_payload(181985, "example-beta.com"),
            ],
            "pagination": {
                "current_page": 1,
                "per_page": 30,
                "total_entries": 2,
                "total_pages": 1,
            },
        },
        headers=RATE_LIMIT_HEADERS,
    )

    response = client.domains.list_domains(1010)

    sent = httpx_mock.get_request()
    assert sent.method == "GET"
    assert str(sent.url) == f"{API_ROOT}/1010/domains"
    assert sent.url.query == b""
    assert len(response.data) == 2
    assert response.pagination.current_page == 1


def test_authentication_failure_surfaces_server_message(
    client: DnsloomClient, httpx_mock
):
    httpx_mock.add_response(status_code=401, json={"message": "Authentication failed"})

    with pytest.raises(AuthenticationError, match="^Authentication failed$"):
        client.identity.whoami()


def test_credentials_from_access_token_setting(httpx_mock):
    httpx_mock.add_response(json={"data": {}})
    settings = ClientSettings(_env_file=None, access_token="settings-token")

    with DnsloomClient(settings) as client:
        client.http.execute(client.http.request_builder("/whoami").request)

    assert httpx_mock.get_request().headers["Authorization"] == "Bearer settings-token"


def test_explicit_credentials_win_over_settings(httpx_mock):
    httpx_mock.add_response(json={"data": {}})
    settings = ClientSettings(
        _env_file=None, username="user@example.com", password="secret"
    )

    with DnsloomClient(settings, credentials=OAuth2Credentials("explicit")) as client:
        client.http.execute(client.http.request_builder("/whoami").request)

    assert httpx_mock.get_request().headers["Authorization"] == "Bearer explicit"


def test_basic_credentials_from_settings(httpx_mock):
    httpx_mock.add_response(json={"data": {}})
    settings = ClientSettings(
        _env_file=None, username="user@example.com", password="secret"
    )

    with DnsloomClient(settings) as client:
        client.http.execute(client.http.request_builder("/whoami").request)

    assert httpx_mock.get_request().headers["Authorization"].startswith("Basic ")


def test_no_credentials_sends_no_authorization(settings, httpx_mock):
    httpx_mock.add_response(json={"data": {}})

    with DnsloomClient(settings) as client:
        client.http.execute(client.http.request_builder("/whoami").request)

    assert "Authorization" not in httpx_mock.get_request().headers


def test_add_credentials_replaces_previous(client: DnsloomClient, httpx_mock):
    httpx_mock.add_response(json={"data": {}})

    client.add_credentials(BasicHttpCredentials("user@example.com", "secret"))
    client.http.execute(client.http.request_builder("/whoami").request)

    assert httpx_mock.get_request().headers["Authorization"].startswith("Basic ")


def test_settings_user_agent_and_base_url_are_applied():
    settings = ClientSettings(
        _env_file=None,
        user_agent="MySuperAPP",
        base_url="https://api.sandbox.dnsimple.com/",
    )

    with DnsloomClient(settings) as client:
        assert client.user_agent == f"MySuperAPP {DEFAULT_USER_AGENT}"
        assert client.versioned_base_url() == "https://api.sandbox.dnsimple.com/v2/"


def test_base_url_argument_overrides_settings(settings):
    with DnsloomClient(settings, base_url=DNSIMPLE_SANDBOX_BASE_URL) as client:
        assert client.base_url == DNSIMPLE_SANDBOX_BASE_URL


def test_close_owned_http_client(settings):
    client = DnsloomClient(settings)
    client.close()
    assert client.http.http_client.is_closed


def test_close_leaves_injected_http_client_open(settings):
    with httpx.Client() as http_client:
        with DnsloomClient(settings, http_client=http_client) as client:
            assert client.http.http_client is http_client
        assert not http_client.is_closed


def test_injected_client_user_agent_is_replaced(settings, httpx_mock):
    httpx_mock.add_response(json={"data": {}})

    with httpx.Client(headers={"User-Agent": "mine"}) as http_client:
        client = DnsloomClient(settings, http_client=http_client)
        assert client.user_agent == DEFAULT_USER_AGENT

        client.set_user_agent("mine")
        client.http.execute(client.http.request_builder("/whoami").request)

    assert httpx_mock.get_request().headers["User-Agent"] == f"mine {DEFAULT_USER_AGENT}"
