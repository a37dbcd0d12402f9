# dnsloom/config.py
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_TIMEOUT, DNSIMPLE_PRODUCTION_BASE_URL


class ClientSettings(BaseSettings):
    """
    Manages user-configurable settings for the dnsloom client, primarily
    loaded from environment variables or a .env file.

    Settings are loaded from environment variables prefixed with 'DNSLOOM_'
    (e.g. DNSLOOM_ACCESS_TOKEN) or from .env/secrets.env files.
    """

    model_config = SettingsConfigDict(
        env_file=(".env", "secrets.env"),
        env_file_encoding="utf-8",
        env_prefix="DNSLOOM_",
        extra="ignore",
        case_sensitive=False,
    )

    # --- Client Behavior Settings ---
    base_url: str = Field(
        default=DNSIMPLE_PRODUCTION_BASE_URL,
        description="API root the versioned paths are appended to",
    )
    request_timeout: float = Field(
        default=DEFAULT_TIMEOUT,
        description="Request timeout in seconds, passed straight to httpx",
    )
    user_agent: str | None = Field(
        default=None,
        description="Custom User-Agent prefix, prepended to the library default",
    )

    # --- Authentication Settings ---
    # Option 1: OAuth2 access token (Bearer)
    access_token: str | None = Field(
        default=None, description="DNSimple OAuth2 access token (optional)"
    )

    # Option 2: HTTP Basic credentials
    username: str | None = Field(
        default=None, description="Account e-mail for HTTP Basic authentication"
    )
    password: str | None = Field(
        default=None, description="Account password for HTTP Basic authentication"
    )


@lru_cache
def get_settings() -> ClientSettings:
    """
    Provides access to the client settings.

    Settings are loaded from environment variables or .env/secrets.env files.
    The instance is cached for performance.

    Returns:
        ClientSettings: The client settings instance.
    """
    return ClientSettings()
