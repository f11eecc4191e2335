"""
Edge DNS zones.

See: https://techdocs.akamai.com/edge-dns/reference/zones
"""

from pydantic import Field

from .. import validation
from ..client import BaseClient
from ..errors import OperationError
from ..models import APIModel
from ..session import Request
from ..tools import join, path, query


class ZoneResponse(APIModel):
    zone: str = ""
    type: str = ""
    comment: str = ""
    masters: list[str] = Field(default_factory=list)
    sign_and_serve: bool = False
    sign_and_serve_algorithm: str = ""
    target: str = ""
    end_customer_id: str = ""
    contract_id: str = ""
    alias_count: int = 0
    activation_state: str = ""
    last_activation_date: str = ""
    last_modified_by: str = ""
    last_modified_date: str = ""
    version_id: str = ""


class ListMetadata(APIModel):
    contract_ids: list[str] = Field(default_factory=list)
    page: int = 0
    page_size: int = 0
    show_all: bool = False
    total_elements: int = 0


class ZoneListResponse(APIModel):
    metadata: ListMetadata | None = None
    zones: list[ZoneResponse] = Field(default_factory=list)


class ListZonesRequest(validation.RequestModel):
    """Filters for ListZones. Unset values are left out of the query."""

    contract_ids: list[str] = Field(default_factory=list)
    types: list[str] = Field(default_factory=list)
    search: str = ""
    page: int | None = None
    page_size: int | None = None
    show_all: bool | None = None
    sort_by: str = ""


class ListZonesError(OperationError):
    operation = "list zones"


class GetZoneError(OperationError):
    operation = "get zone"


class Zones(BaseClient):
    """Read access to Edge DNS zones."""

    def list_zones(self, params: ListZonesRequest | None = None) -> ZoneListResponse:
        """
        List the zones the caller can access, filtered by ``params``.

        See: https://techdocs.akamai.com/edge-dns/reference/get-zones
        """
        self.log().debug("ListZones")
        params = params if params is not None else ListZonesRequest()
        self._validate(ListZonesError, params)

        request = Request(
            "GET",
            "/config-dns/v2/zones",
            params=query(
                contractIds=join(params.contract_ids),
                types=join(params.types),
                search=params.search,
                page=params.page,
                pageSize=params.page_size,
                showAll=params.show_all,
                sortBy=params.sort_by,
            ),
        )
        return self._call(ListZonesError, request, result=ZoneListResponse)

    def get_zone(self, zone: str) -> ZoneResponse:
        """See: https://techdocs.akamai.com/edge-dns/reference/get-zone"""
        self.log().debug("GetZone")
        self._require(GetZoneError, zone=zone)

        request = Request("GET", path("/config-dns/v2/zones/{}", zone))
        return self._call(GetZoneError, request, result=ZoneResponse)
