"""Model for registrant contacts."""

from datetime import datetime

from .base import BaseEntity


class Contact(BaseEntity):
    """A contact used as registrant or admin for registered domains."""

    account_id: int
    label: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    job_title: str | None = None
    organization_name: str | None = None
    email: str | None = None
    phone: str | None = None
    fax: str | None = None
    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    state_province: str | None = None
    postal_code: str | None = None
    country: str | None = None
    created_at: datetime
    updated_at: datetime
