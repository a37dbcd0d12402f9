"""Service for the accounts endpoint."""

from ..models import Account
from ..responses import ListResponse
from .base_client import ServiceBase


class AccountsService(ServiceBase):
    def list_accounts(self) -> ListResponse[Account]:
        """Lists the accounts the credentials have access to.

        See https://developer.dnsimple.com/v2/accounts/#listAccounts
        """
        builder = self.build_request_for_path("/accounts")
        return ListResponse[Account].from_raw(self.execute(builder.request))
