"""Models for domains and their delegation signer records."""

from datetime import date, datetime

from .base import BaseEntity


class Domain(BaseEntity):
    """A domain in a DNSimple account.

    Attributes:
        id: The domain ID.
        account_id: The account the domain belongs to.
        registrant_id: The registrant contact, when the domain is registered.
        name: The domain name.
        unicode_name: The domain name in Unicode form.
        state: The domain state (e.g. "registered", "hosted").
        auto_renew: Whether the registration renews automatically.
        private_whois: Whether WHOIS privacy is enabled.
        expires_at: When the registration expires.
        created_at: When the domain was added.
        updated_at: When the domain was last updated.
    """

    account_id: int
    registrant_id: int | None = None
    name: str
    unicode_name: str | None = None
    state: str
    auto_renew: bool | None = None
    private_whois: bool | None = None
    expires_at: datetime | None = None
    created_at: datetime
    updated_at: datetime

    @property
    def expires_on(self) -> date | None:
        """Deprecated: compatibility accessor derived from ``expires_at``."""
        return self.expires_at.date() if self.expires_at is not None else None


class DelegationSignerRecord(BaseEntity):
    """A DS record published for a domain at the registry."""

    domain_id: int
    algorithm: str
    digest: str | None = None
    digest_type: str | None = None
    keytag: str | None = None
    public_key: str | None = None
    created_at: datetime
    updated_at: datetime
