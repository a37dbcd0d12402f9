"""Service for the identity endpoint."""

from ..models import WhoamiData
from ..responses import SimpleResponse
from .base_client import ServiceBase


class IdentityService(ServiceBase):
    """Tells who the current credentials belong to."""

    def whoami(self) -> SimpleResponse[WhoamiData]:
        """Retrieves the account and/or user the credentials authenticate as.

        See https://developer.dnsimple.com/v2/identity/#whoami
        """
        builder = self.build_request_for_path("/whoami")
        return SimpleResponse[WhoamiData].from_raw(self.execute(builder.request))
