"""
GTM CIDR maps (schema 1.4).

A CIDR map routes requests to datacenters by the client's IP block.
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


class CidrAssignment(DatacenterBase):
    blocks: list[str] = Field(default_factory=list)


class CidrMap(APIModel):
    default_datacenter: Annotated[DatacenterBase | None, validation.rules(validation.required)] = None
    assignments: list[CidrAssignment] = Field(default_factory=list)
    name: Annotated[str, validation.rules(validation.required)] = ""
    links: list[Link] = Field(default_factory=list)


class CidrMapList(APIModel):
    items: list[CidrMap] = Field(default_factory=list)


class CidrMapResponse(APIModel):
    resource: CidrMap | None = None
    status: ResponseStatus | None = None


class ListCidrMapsError(OperationError):
    operation = "list cidr maps"


class GetCidrMapError(OperationError):
    operation = "get cidr map"


class CreateCidrMapError(OperationError):
    operation = "create cidr map"


class UpdateCidrMapError(OperationError):
    operation = "update cidr map"


class DeleteCidrMapError(OperationError):
    operation = "delete cidr map"


def _cidr_map_path(domain_name: str, name: str) -> str:
    return path("/config-gtm/v1/domains/{}/cidr-maps/{}", domain_name, name)


class CidrMaps(BaseClient):
    """Operations on GTM CIDR maps."""

    def new_cidr_map(self, name: str) -> CidrMap:
        self.log().debug("NewCidrMap")
        return CidrMap(name=name)

    def new_cidr_assignment(self, cidr_map: CidrMap | None, datacenter_id: int, nickname: str) -> CidrAssignment:
        self.log().debug("NewCidrAssignment")
        return CidrAssignment(datacenter_id=datacenter_id, nickname=nickname)

    def list_cidr_maps(self, domain_name: str) -> list[CidrMap]:
        """
        Retrieve all CIDR maps of a domain.

        See: https://techdocs.akamai.com/gtm/reference/get-cidr-maps
        """
        self.log().debug("ListCidrMaps")
        self._require(ListCidrMapsError, domain_name=domain_name)

        request = Request(
            "GET",
            path("/config-gtm/v1/domains/{}/cidr-maps", domain_name),
            headers=version_headers(),
        )
        result = self._call(ListCidrMapsError, request, result=CidrMapList)
        return result.items if result is not None else []

    def get_cidr_map(self, name: str, domain_name: str) -> CidrMap:
        """See: https://techdocs.akamai.com/gtm/reference/get-cidr-map"""
        self.log().debug("GetCidrMap")
        self._require(GetCidrMapError, name=name, domain_name=domain_name)

        request = Request("GET", _cidr_map_path(domain_name, name), headers=version_headers())
        return self._call(GetCidrMapError, request, result=CidrMap)

    def create_cidr_map(self, cidr_map: CidrMap, domain_name: str) -> CidrMapResponse:
        """See: https://techdocs.akamai.com/gtm/reference/put-cidr-map"""
        self.log().debug("CreateCidrMap")
        return self._save_cidr_map(CreateCidrMapError, cidr_map, domain_name)

    def update_cidr_map(self, cidr_map: CidrMap, domain_name: str) -> ResponseStatus | None:
        """See: https://techdocs.akamai.com/gtm/reference/put-cidr-map"""
        self.log().debug("UpdateCidrMap")
        result = self._save_cidr_map(UpdateCidrMapError, cidr_map, domain_name)
        return result.status if result is not None else None

    def delete_cidr_map(self, cidr_map: CidrMap, domain_name: str) -> ResponseStatus | None:
        """See: https://techdocs.akamai.com/gtm/reference/delete-cidr-maps"""
        self.log().debug("DeleteCidrMap")
        self._validate(DeleteCidrMapError, cidr_map)
        self._require(DeleteCidrMapError, domain_name=domain_name)

        request = Request("DELETE", _cidr_map_path(domain_name, cidr_map.name), headers=version_headers())
        result = self._call(DeleteCidrMapError, request, result=ResponseBody)
        return result.status if result is not None else None

    def _save_cidr_map(self, error: type[OperationError], cidr_map: CidrMap, domain_name: str) -> CidrMapResponse:
        # Create and update share the same PUT.
        self._validate(error, cidr_map)
        self._require(error, domain_name=domain_name)

        request = Request("PUT", _cidr_map_path(domain_name, cidr_map.name), headers=version_headers())
        return self._call(
            error,
            request,
            expect=(httpx.codes.OK, httpx.codes.CREATED),
            result=CidrMapResponse,
            body=cidr_map,
        )
