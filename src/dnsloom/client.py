# dnsloom/client.py
"""Main client class for the dnsloom library.

The client wires the pieces of the request pipeline together: it owns (or is
given) the ``httpx.Client``, resolves the credentials, creates the
``HttpService`` transport and exposes one service per API resource.

Typical usage:
```python
with DnsloomClient(credentials=OAuth2Credentials("TOKEN")) as client:
    account_id = client.identity.whoami().data.account.id
    for domain in client.domains.list_domains(account_id).data:
        print(domain.name)
```
"""

import ssl
from typing import Self

import certifi
import httpx

from .auth import BasicHttpCredentials, Credentials, OAuth2Credentials
from .config import ClientSettings, get_settings
from .constants import API_VERSION, CLIENT_HEADERS, DEFAULT_USER_AGENT
from .http import HttpService
from .log_config import logger
from .resources import (
    AccountsService,
    ContactsService,
    DomainsService,
    IdentityService,
    RegistrarService,
    ZonesService,
)


class DnsloomClient:
    """Client for the DNSimple API v2.

    Resource services are available as properties of this client. The client
    is not thread safe: it recycles a single request builder, so use one
    client per thread.

    Attributes:
        identity (IdentityService): Service for the whoami endpoint.
        accounts (AccountsService): Service for the accounts endpoint.
        domains (DomainsService): Service for domain endpoints.
        zones (ZonesService): Service for zone and zone record endpoints.
        contacts (ContactsService): Service for contact endpoints.
        registrar (RegistrarService): Service for registrar endpoints.
        _settings (ClientSettings): The resolved settings for this instance.
        _http_client (httpx.Client): The HTTP client used for every request.
        _should_close_client (bool): Whether this instance owns ``_http_client``.
    """

    def __init__(
        self,
        settings: ClientSettings | None = None,
        credentials: Credentials | None = None,
        *,
        http_client: httpx.Client | None = None,
        base_url: str | None = None,
    ):
        """Initializes the DnsloomClient.

        Credentials Resolution:
        - If ``credentials`` is explicitly provided, it is used.
        - Otherwise an OAuth2 access token from ``settings`` is used.
        - Otherwise HTTP Basic credentials from ``settings`` are used, when
          both username and password are set.
        - Otherwise requests are sent unauthenticated.

        Args:
            settings: An optional ``ClientSettings`` instance. If ``None``, global
                settings are loaded via ``dnsloom.config.get_settings()``.
            credentials: Optional explicit credentials.
            http_client: An optional pre-configured ``httpx.Client``. It is not
                closed by ``close()``. Its Accept and User-Agent headers are
                replaced by the library ones; a custom User-Agent is set with
                ``set_user_agent()`` or ``settings.user_agent``, which prefix
                the library default.
            base_url: The API root. Defaults to ``settings.base_url``.
        """
        self._settings: ClientSettings = settings or get_settings()
        self._should_close_client = http_client is None
        self._http_client = http_client or self._create_default_http_client()
        if http_client is not None:
            logger.debug(
                f"Replacing User-Agent {http_client.headers.get('User-Agent')!r} "
                f"of the injected HTTP client with {DEFAULT_USER_AGENT!r}"
            )
        self._http_client.headers.update(CLIENT_HEADERS)

        self._http = HttpService(
            self._http_client,
            base_url=base_url or self._settings.base_url,
            version=API_VERSION,
        )

        resolved_credentials = credentials or self._credentials_from_settings()
        if resolved_credentials is not None:
            self.add_credentials(resolved_credentials)
        else:
            logger.info("No credentials found, requests will be unauthenticated.")

        if self._settings.user_agent:
            self.set_user_agent(self._settings.user_agent)

        self._identity = IdentityService(self)
        self._accounts = AccountsService(self)
        self._domains = DomainsService(self)
        self._zones = ZonesService(self)
        self._contacts = ContactsService(self)
        self._registrar = RegistrarService(self)

        logger.debug(f"DnsloomClient initialized for {self.versioned_base_url()}")

    def _create_default_http_client(self) -> httpx.Client:
        """Creates the default httpx.Client with the certifi CA bundle."""
        ssl_context = ssl.create_default_context(cafile=certifi.where())
        logger.debug("Using certifi SSL context.")
        return httpx.Client(
            timeout=self._settings.request_timeout,
            verify=ssl_context,
        )

    def _credentials_from_settings(self) -> Credentials | None:
        if self._settings.access_token:
            logger.info("Using OAuth2 access token from settings.")
            return OAuth2Credentials(self._settings.access_token)
        if self._settings.username and self._settings.password:
            logger.info("Using HTTP Basic credentials from settings.")
            return BasicHttpCredentials(
                self._settings.username, self._settings.password
            )
        return None

    @property
    def http(self) -> HttpService:
        """The transport shared by all resource services."""
        return self._http

    @property
    def base_url(self) -> str:
        return self._http.base_url

    @property
    def version(self) -> str:
        return self._http.version

    @property
    def user_agent(self) -> str:
        """The User-Agent header sent with every request."""
        return self._http_client.headers["User-Agent"]

    def versioned_base_url(self) -> str:
        """Returns the API root requests are sent under, e.g. ``https://api.dnsimple.com/v2/``."""
        return self._http.versioned_base_url()

    def change_base_url_to(self, base_url: str) -> None:
        """Points the client at another API root, e.g. the sandbox.

        Only the URL changes; headers such as the User-Agent are kept.
        """
        self._http.base_url = base_url.rstrip("/")
        logger.info(f"Base URL changed to {self._http.base_url}")

    def set_user_agent(self, custom_user_agent: str) -> None:
        """Prepends ``custom_user_agent`` to the library's own User-Agent."""
        self._http_client.headers["User-Agent"] = (
            f"{custom_user_agent} {DEFAULT_USER_AGENT}"
        )

    def add_credentials(self, credentials: Credentials) -> None:
        """Authenticates subsequent requests with ``credentials``.

        Replaces any credentials set before.
        """
        self._http.add_authenticator(credentials)

    @property
    def identity(self) -> IdentityService:
        return self._identity

    @property
    def accounts(self) -> AccountsService:
        return self._accounts

    @property
    def domains(self) -> DomainsService:
        return self._domains

    @property
    def zones(self) -> ZonesService:
        return self._zones

    @property
    def contacts(self) -> ContactsService:
        return self._contacts

    @property
    def registrar(self) -> RegistrarService:
        return self._registrar

    def close(self) -> None:
        """Closes the underlying HTTP client if this instance created it."""
        if self._should_close_client and not self._http_client.is_closed:
            self._http_client.close()
            logger.debug("DnsloomClient closed its HTTP client.")

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
