"""Models for zones and zone records."""

from datetime import datetime

from pydantic import BaseModel, Field

from .base import BaseEntity


class Zone(BaseEntity):
    """A DNS zone hosted by DNSimple."""

    account_id: int
    name: str
    reverse: bool = False
    created_at: datetime
    updated_at: datetime


class ZoneRecord(BaseEntity):
    """A record in a zone.

    Attributes:
        zone_id: The name of the zone the record belongs to.
        parent_id: The parent record, for records managed by another record.
        name: The record name, without the zone name ("" for the apex).
        content: The record content.
        ttl: The time to live in seconds.
        priority: The priority, for MX and SRV records.
        type: The record type (A, AAAA, CNAME, MX, ...).
        regions: The regions the record is served from.
        system_record: Whether the record is managed by DNSimple.
    """

    zone_id: str
    parent_id: int | None = None
    name: str
    content: str
    ttl: int
    priority: int | None = None
    type: str
    regions: list[str] = Field(default_factory=list)
    system_record: bool = False
    created_at: datetime
    updated_at: datetime


class ZoneRecordInput(BaseModel):
    """Attributes sent to create or update a zone record."""

    name: str | None = None
    type: str | None = None
    content: str | None = None
    ttl: int | None = None
    priority: int | None = None
    regions: list[str] | None = None
