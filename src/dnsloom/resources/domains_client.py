"""Service for domains and their delegation signer records.

See https://developer.dnsimple.com/v2/domains/
"""

from ..models import DelegationSignerRecord, Domain
from ..options import DelegationSignerRecordsListOptions, DomainListOptions
from ..responses import EmptyResponse, PaginatedResponse, SimpleResponse
from ..types import HttpMethod
from .base_client import ServiceBase


class DomainsService(ServiceBase):
    """Lists, retrieves, creates and deletes domains of an account."""

    def list_domains(
        self, account_id: int, options: DomainListOptions | None = None
    ) -> PaginatedResponse[Domain]:
        """Lists the domains in the account.

        Args:
            account_id: The account ID.
            options: Sorting, filtering and pagination options.

        Returns:
            PaginatedResponse[Domain]: One page of domains.
        """
        builder = self.build_request_for_path(f"/{account_id}/domains")
        self.add_list_options_to_request(options, builder)
        return PaginatedResponse[Domain].from_raw(self.execute(builder.request))

    def get_domain(self, account_id: int, domain: str | int) -> SimpleResponse[Domain]:
        """Retrieves a domain by name or ID."""
        builder = self.build_request_for_path(f"/{account_id}/domains/{domain}")
        return SimpleResponse[Domain].from_raw(self.execute(builder.request))

    def create_domain(self, account_id: int, name: str) -> SimpleResponse[Domain]:
        """Adds a domain to the account without registering it."""
        builder = self.build_request_for_path(f"/{account_id}/domains")
        builder.method(HttpMethod.POST)
        builder.add_json_payload({"name": name})
        return SimpleResponse[Domain].from_raw(self.execute(builder.request))

    def delete_domain(self, account_id: int, domain: str | int) -> EmptyResponse:
        builder = self.build_request_for_path(f"/{account_id}/domains/{domain}")
        builder.method(HttpMethod.DELETE)
        return EmptyResponse.from_raw(self.execute(builder.request))

    def list_delegation_signer_records(
        self,
        account_id: int,
        domain: str | int,
        options: DelegationSignerRecordsListOptions | None = None,
    ) -> PaginatedResponse[DelegationSignerRecord]:
        """Lists the DS records of a domain.

        See https://developer.dnsimple.com/v2/domains/dnssec/#listDomainDelegationSignerRecords
        """
        builder = self.build_request_for_path(
            f"/{account_id}/domains/{domain}/ds_records"
        )
        self.add_list_options_to_request(options, builder)
        return PaginatedResponse[DelegationSignerRecord].from_raw(
            self.execute(builder.request)
        )
