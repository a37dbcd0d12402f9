# tests/conftest.py
import httpx
import pytest

from dnsloom.auth import OAuth2Credentials
from dnsloom.client import DnsloomClient
from dnsloom.config import ClientSettings

RATE_LIMIT_HEADERS = {
    "X-RateLimit-Limit": "4000",
    "X-RateLimit-Remaining": "3991",
    "X-RateLimit-Reset": "1450272970",
}

API_ROOT = "https://api.dnsimple.com/v2"


def domain_payload(domain_id: int = 181984, name: str = "example-alpha.com") -> dict:
    return {
        "id": domain_id,
        "account_id": 1385,
        "registrant_id": 2715,
        "name": name,
        "unicode_name": name,
        "state": "registered",
        "auto_renew": False,
        "private_whois": False,
        "expires_at": "2021-06-05T02:15:00Z",
        "created_at": "2014-12-06T15:56:55Z",
        "updated_at": "2015-12-09T00:20:56Z",
    }


def record_payload(record_id: int = 1) -> dict:
    return {
        "id": record_id,
        "zone_id": "example.com",
        "parent_id": None,
        "name": "www",
        "content": "127.0.0.1",
        "ttl": 600,
        "priority": None,
        "type": "A",
        "regions": ["global"],
        "system_record": False,
        "created_at": "2016-03-22T10:20:53Z",
        "updated_at": "2016-10-05T09:26:38Z",
    }


@pytest.fixture
def settings() -> ClientSettings:
    """Settings isolated from any local .env file."""
    return ClientSettings(_env_file=None)


@pytest.fixture
def client(settings):
    """A client authenticated with a test OAuth2 token."""
    with DnsloomClient(settings, credentials=OAuth2Credentials("TOKEN")) as c:
        yield c


@pytest.fixture
def http_client():
    with httpx.Client() as c:
        yield c
