"""
Edge DNS record sets.

A record set is addressed by zone, owner name and record type.
"""

from typing import Annotated

import httpx
from pydantic import Field, ValidationInfo, field_validator

from .. import validation
from ..client import BaseClient
from ..errors import OperationError
from ..models import APIModel
from ..session import Request
from ..tools import path

RECORD_TYPE_AKAMAICDN = "AKAMAICDN"

RECORD_TYPES = (
    "A",
    "AAAA",
    "AFSDB",
    "AKAMAICDN",
    "AKAMAITLC",
    "CAA",
    "CERT",
    "CNAME",
    "DNSKEY",
    "DS",
    "HINFO",
    "HTTPS",
    "LOC",
    "MX",
    "NAPTR",
    "NS",
    "NSEC3",
    "NSEC3PARAM",
    "PTR",
    "RP",
    "RRSIG",
    "SOA",
    "SPF",
    "SRV",
    "SSHFP",
    "SVCB",
    "TLSA",
    "TXT",
)


class RecordBody(APIModel):
    name: Annotated[str, validation.rules(validation.required)] = ""
    record_type: Annotated[
        str, validation.rules(validation.required, validation.one_of(*RECORD_TYPES))
    ] = Field("", alias="type")
    ttl: int = 0
    active: bool | None = None
    target: Annotated[list[str], validation.rules(validation.required)] = Field(
        default_factory=list, alias="rdata"
    )

    @field_validator("ttl")
    @classmethod
    def ttl_unless_akamaicdn(cls, value: int, info: ValidationInfo) -> int:
        # AKAMAICDN records take their TTL from the zone.
        if info.data.get("record_type") == RECORD_TYPE_AKAMAICDN:
            return value
        return validation.enforce(info, value, validation.required)


class GetRecordError(OperationError):
    operation = "get record"


class CreateRecordError(OperationError):
    operation = "create record"


class UpdateRecordError(OperationError):
    operation = "update record"


class DeleteRecordError(OperationError):
    operation = "delete record"


def _record_path(zone: str, name: str, record_type: str) -> str:
    return path("/config-dns/v2/zones/{}/names/{}/types/{}", zone, name, record_type)


class Records(BaseClient):
    """Operations on Edge DNS record sets."""

    def get_record(self, zone: str, name: str, record_type: str) -> RecordBody:
        """See: https://techdocs.akamai.com/edge-dns/reference/get-zone-name-type"""
        self.log().debug("GetRecord")
        self._require(GetRecordError, zone=zone, name=name, record_type=record_type)

        request = Request("GET", _record_path(zone, name, record_type))
        return self._call(GetRecordError, request, result=RecordBody)

    def create_record(self, record: RecordBody, zone: str) -> None:
        """See: https://techdocs.akamai.com/edge-dns/reference/post-zones-zone-names-name-types-type"""
        self.log().debug("CreateRecord")
        self._save_record(CreateRecordError, "POST", httpx.codes.CREATED, record, zone)

    def update_record(self, record: RecordBody, zone: str) -> None:
        """See: https://techdocs.akamai.com/edge-dns/reference/put-zones-zone-names-name-types-type"""
        self.log().debug("UpdateRecord")
        self._save_record(UpdateRecordError, "PUT", httpx.codes.OK, record, zone)

    def delete_record(self, record: RecordBody, zone: str) -> None:
        """See: https://techdocs.akamai.com/edge-dns/reference/delete-zone-name-type"""
        self.log().debug("DeleteRecord")
        self._validate(DeleteRecordError, record)
        self._require(DeleteRecordError, zone=zone)

        request = Request("DELETE", _record_path(zone, record.name, record.record_type))
        self._call(DeleteRecordError, request, expect=(httpx.codes.NO_CONTENT,))

    def _save_record(
        self,
        error: type[OperationError],
        method: str,
        status: int,
        record: RecordBody,
        zone: str,
    ) -> None:
        self._validate(error, record)
        self._require(error, zone=zone)

        request = Request(method, _record_path(zone, record.name, record.record_type))
        self._call(error, request, expect=(status,), body=record)
