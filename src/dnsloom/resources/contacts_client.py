"""Service for contacts."""

from ..models import Contact
from ..options import ContactsListOptions
from ..responses import PaginatedResponse, SimpleResponse
from .base_client import ServiceBase


class ContactsService(ServiceBase):
    def list_contacts(
        self, account_id: int, options: ContactsListOptions | None = None
    ) -> PaginatedResponse[Contact]:
        """Lists the contacts in the account.

        See https://developer.dnsimple.com/v2/contacts/#listContacts
        """
        builder = self.build_request_for_path(f"/{account_id}/contacts")
        self.add_list_options_to_request(options, builder)
        return PaginatedResponse[Contact].from_raw(self.execute(builder.request))

    def get_contact(self, account_id: int, contact_id: int) -> SimpleResponse[Contact]:
        builder = self.build_request_for_path(f"/{account_id}/contacts/{contact_id}")
        return SimpleResponse[Contact].from_raw(self.execute(builder.request))
