"""Service for zones and zone records.

See https://developer.dnsimple.com/v2/zones/
"""

from ..models import Zone, ZoneRecord, ZoneRecordInput
from ..options import ZoneRecordsListOptions, ZonesListOptions
from ..responses import EmptyResponse, PaginatedResponse, SimpleResponse
from ..types import HttpMethod
from .base_client import ServiceBase


class ZonesService(ServiceBase):
    """Reads zones and manages their records."""

    def list_zones(
        self, account_id: int, options: ZonesListOptions | None = None
    ) -> PaginatedResponse[Zone]:
        builder = self.build_request_for_path(f"/{account_id}/zones")
        self.add_list_options_to_request(options, builder)
        return PaginatedResponse[Zone].from_raw(self.execute(builder.request))

    def get_zone(self, account_id: int, zone: str) -> SimpleResponse[Zone]:
        builder = self.build_request_for_path(f"/{account_id}/zones/{zone}")
        return SimpleResponse[Zone].from_raw(self.execute(builder.request))

    def list_records(
        self,
        account_id: int,
        zone: str,
        options: ZoneRecordsListOptions | None = None,
    ) -> PaginatedResponse[ZoneRecord]:
        """Lists the records of a zone.

        Args:
            account_id: The account ID.
            zone: The zone name.
            options: Sorting, filtering and pagination options.
        """
        builder = self.build_request_for_path(f"/{account_id}/zones/{zone}/records")
        self.add_list_options_to_request(options, builder)
        return PaginatedResponse[ZoneRecord].from_raw(self.execute(builder.request))

    def get_record(
        self, account_id: int, zone: str, record_id: int
    ) -> SimpleResponse[ZoneRecord]:
        builder = self.build_request_for_path(
            f"/{account_id}/zones/{zone}/records/{record_id}"
        )
        return SimpleResponse[ZoneRecord].from_raw(self.execute(builder.request))

    def create_record(
        self, account_id: int, zone: str, record: ZoneRecordInput
    ) -> SimpleResponse[ZoneRecord]:
        """Creates a record in the zone.

        Attributes left as None on ``record`` are not sent.
        """
        builder = self.build_request_for_path(f"/{account_id}/zones/{zone}/records")
        builder.method(HttpMethod.POST)
        builder.add_json_payload(record.model_dump(exclude_none=True))
        return SimpleResponse[ZoneRecord].from_raw(self.execute(builder.request))

    def update_record(
        self, account_id: int, zone: str, record_id: int, record: ZoneRecordInput
    ) -> SimpleResponse[ZoneRecord]:
        """Updates the attributes set on ``record``; the others are left unchanged."""
        builder = self.build_request_for_path(
            f"/{account_id}/zones/{zone}/records/{record_id}"
        )
        builder.method(HttpMethod.PATCH)
        builder.add_json_payload(record.model_dump(exclude_none=True))
        return SimpleResponse[ZoneRecord].from_raw(self.execute(builder.request))

    def delete_record(
        self, account_id: int, zone: str, record_id: int
    ) -> EmptyResponse:
        builder = self.build_request_for_path(
            f"/{account_id}/zones/{zone}/records/{record_id}"
        )
        builder.method(HttpMethod.DELETE)
        return EmptyResponse.from_raw(self.execute(builder.request))
