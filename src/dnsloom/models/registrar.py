"""Models for registrar operations."""

from pydantic import BaseModel, ConfigDict


class DomainCheck(BaseModel):
    """Availability of a domain name for registration."""

    domain: str
    available: bool
    premium: bool = False

    model_config = ConfigDict(extra="allow")
