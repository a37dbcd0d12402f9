"""Pydantic models for the entities returned by the DNSimple API."""

from .account import Account, User, WhoamiData
from .base import BaseEntity
from .contact import Contact
from .domain import DelegationSignerRecord, Domain
from .registrar import DomainCheck
from .zone import Zone, ZoneRecord, ZoneRecordInput

__all__ = [
    "Account",
    "BaseEntity",
    "Contact",
    "DelegationSignerRecord",
    "Domain",
    "DomainCheck",
    "User",
    "WhoamiData",
    "Zone",
    "ZoneRecord",
    "ZoneRecordInput",
]
