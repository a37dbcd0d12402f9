"""Models for accounts, users and the whoami identity endpoint."""

from datetime import datetime

from pydantic import BaseModel

from .base import BaseEntity


class Account(BaseEntity):
    """A DNSimple account."""

    email: str
    plan_identifier: str | None = None
    created_at: datetime
    updated_at: datetime


class User(BaseEntity):
    """A DNSimple user."""

    email: str
    created_at: datetime
    updated_at: datetime


class WhoamiData(BaseModel):
    """The entity the credentials belong to: an account, a user, or both."""

    account: Account | None = None
    user: User | None = None
