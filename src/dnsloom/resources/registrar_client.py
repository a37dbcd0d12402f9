"""Service for registrar operations.

See https://developer.dnsimple.com/v2/registrar/
"""

from ..models import DomainCheck
from ..responses import EmptyResponse, SimpleResponse
from ..types import HttpMethod
from .base_client import ServiceBase


class RegistrarService(ServiceBase):
    """Checks availability and toggles auto-renewal of registered domains."""

    def check_domain(self, account_id: int, domain: str) -> SimpleResponse[DomainCheck]:
        """Checks whether ``domain`` can be registered."""
        builder = self.build_request_for_path(
            f"/{account_id}/registrar/domains/{domain}/check"
        )
        return SimpleResponse[DomainCheck].from_raw(self.execute(builder.request))

    def enable_auto_renewal(self, account_id: int, domain: str) -> EmptyResponse:
        builder = self.build_request_for_path(
            f"/{account_id}/registrar/domains/{domain}/auto_renewal"
        )
        builder.method(HttpMethod.PUT)
        return EmptyResponse.from_raw(self.execute(builder.request))

    def disable_auto_renewal(self, account_id: int, domain: str) -> EmptyResponse:
        builder = self.build_request_for_path(
            f"/{account_id}/registrar/domains/{domain}/auto_renewal"
        )
        builder.method(HttpMethod.DELETE)
        return EmptyResponse.from_raw(self.execute(builder.request))
