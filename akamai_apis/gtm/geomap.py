"""
GTM geographic maps (schema 1.4).

A geographic map routes requests to datacenters by the client's country.
"""

from typing import Annotated

import httpx
from pydantic import Field

from .. import validation
from ..client import BaseClient
from ..errors import OperationError
from ..models import APIModel, Link
from ..session import Request
from ..tools import path
from .common import DatacenterBase, ResponseBody, ResponseStatus, version_headers


class GeoAssignment(DatacenterBase):
    countries: list[str] = Field(default_factory=list)


class GeoMap(APIModel):
    default_datacenter: Annotated[DatacenterBase | None, validation.rules(validation.required)] = None
    assignments: list[GeoAssignment] = Field(default_factory=list)
    name: Annotated[str, validation.rules(validation.required)] = ""
    links: list[Link] = Field(default_factory=list)


class GeoMapList(APIModel):
    items: list[GeoMap] = Field(default_factory=list)


class GeoMapResponse(APIModel):
    resource: GeoMap | None = None
    status: ResponseStatus | None = None


class ListGeoMapsError(OperationError):
    operation = "list geo maps"


class GetGeoMapError(OperationError):
    operation = "get geo map"


class CreateGeoMapError(OperationError):
    operation = "create geo map"


class UpdateGeoMapError(OperationError):
    operation = "update geo map"


class DeleteGeoMapError(OperationError):
    operation = "delete geo map"


def _geo_map_path(domain_name: str, name: str) -> str:
    return path("/config-gtm/v1/domains/{}/geographic-maps/{}", domain_name, name)


class GeoMaps(BaseClient):
    """Operations on GTM geographic maps."""

    def new_geo_map(self, name: str) -> GeoMap:
        self.log().debug("NewGeoMap")
        return GeoMap(name=name)

    def new_geo_assignment(self, geo_map: GeoMap | None, datacenter_id: int, nickname: str) -> GeoAssignment:
        self.log().debug("NewGeoAssignment")
        return GeoAssignment(datacenter_id=datacenter_id, nickname=nickname)

    def list_geo_maps(self, domain_name: str) -> list[GeoMap]:
        """
        Retrieve all geographic maps of a domain.

        See: https://techdocs.akamai.com/gtm/reference/get-geographic-maps
        """
        self.log().debug("ListGeoMaps")
        self._require(ListGeoMapsError, domain_name=domain_name)

        request = Request(
            "GET",
            path("/config-gtm/v1/domains/{}/geographic-maps", domain_name),
            headers=version_headers(),
        )
        result = self._call(ListGeoMapsError, request, result=GeoMapList)
        return result.items if result is not None else []

    def get_geo_map(self, name: str, domain_name: str) -> GeoMap:
        """See: https://techdocs.akamai.com/gtm/reference/get-geographic-map"""
        self.log().debug("GetGeoMap")
        self._require(GetGeoMapError, name=name, domain_name=domain_name)

        request = Request("GET", _geo_map_path(domain_name, name), headers=version_headers())
        return self._call(GetGeoMapError, request, result=GeoMap)

    def create_geo_map(self, geo_map: GeoMap, domain_name: str) -> GeoMapResponse:
        """See: https://techdocs.akamai.com/gtm/reference/put-geographic-map"""
        self.log().debug("CreateGeoMap")
        return self._save_geo_map(CreateGeoMapError, geo_map, domain_name)

    def update_geo_map(self, geo_map: GeoMap, domain_name: str) -> ResponseStatus | None:
        """See: https://techdocs.akamai.com/gtm/reference/put-geographic-map"""
        self.log().debug("UpdateGeoMap")
        result = self._save_geo_map(UpdateGeoMapError, geo_map, domain_name)
        return result.status if result is not None else None

    def delete_geo_map(self, geo_map: GeoMap, domain_name: str) -> ResponseStatus | None:
        """See: https://techdocs.akamai.com/gtm/reference/delete-geographic-map"""
        self.log().debug("DeleteGeoMap")
        self._validate(DeleteGeoMapError, geo_map)
        self._require(DeleteGeoMapError, domain_name=domain_name)

        request = Request("DELETE", _geo_map_path(domain_name, geo_map.name), headers=version_headers())
        result = self._call(DeleteGeoMapError, request, result=ResponseBody)
        return result.status if result is not None else None

    def _save_geo_map(self, error: type[OperationError], geo_map: GeoMap, domain_name: str) -> GeoMapResponse:
        # Create and update share the same PUT.
        self._validate(error, geo_map)
        self._require(error, domain_name=domain_name)

        request = Request("PUT", _geo_map_path(domain_name, geo_map.name), headers=version_headers())
        return self._call(
            error,
            request,
            expect=(httpx.codes.OK, httpx.codes.CREATED),
            result=GeoMapResponse,
            body=geo_map,
        )
