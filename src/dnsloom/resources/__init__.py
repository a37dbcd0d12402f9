# dnsloom/resources/__init__.py
"""Initializes the resources sub-package, exporting the resource services."""

from .accounts_client import AccountsService
from .base_client import ServiceBase
from .contacts_client import ContactsService
from .domains_client import DomainsService
from .identity_client import IdentityService
from .registrar_client import RegistrarService
from .zones_client import ZonesService

__all__ = [
    "AccountsService",
    "ContactsService",
    "DomainsService",
    "IdentityService",
    "RegistrarService",
    "ServiceBase",
    "ZonesService",
]
