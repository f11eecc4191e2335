"""
Network lists: named sets of IP addresses, CIDR blocks or country codes.

See: https://techdocs.akamai.com/network-lists/reference/network-lists
"""

from enum import Enum
from typing import Annotated

import httpx
from pydantic import Field

from .. import validation
from ..client import BaseClient
from ..errors import OperationError
from ..models import APIModel
from ..session import Request
from ..tools import path, query


class NetworkListType(str, Enum):
    IP = "IP"
    GEO = "GEO"


# ============================================
# Models
# ============================================

class ListLink(APIModel):
    """Network Lists links carry an HTTP method instead of a relation."""

    href: str = ""
    method: str = ""


class NetworkListLinks(APIModel):
    activate_in_production: ListLink | None = None
    activate_in_staging: ListLink | None = None
    append_items: ListLink | None = None
    retrieve: ListLink | None = None
    status_in_production: ListLink | None = None
    status_in_staging: ListLink | None = None
    update: ListLink | None = None


class NetworkListResponse(APIModel):
    """A network list, with its elements when they were requested."""

    name: str = ""
    unique_id: str = ""
    type: NetworkListType | str | None = None
    description: str = ""
    element_count: int = 0
    elements: list[str] = Field(default_factory=list, alias="list")
    network_list_type: str = ""
    read_only: bool = False
    shared: bool = False
    sync_point: int = 0
    account_id: str = ""
    created_by: str = ""
    create_date: str = ""
    updated_by: str = ""
    update_date: str = ""
    production_activation_status: str = ""
    staging_activation_status: str = ""
    links: NetworkListLinks | None = None


class GetNetworkListsResponse(APIModel):
    network_lists: list[NetworkListResponse] = Field(default_factory=list)
    links: dict[str, ListLink] = Field(default_factory=dict)


class NetworkListBody(APIModel):
    """Body of the create network list POST."""

    name: str
    type: NetworkListType
    description: str = ""
    elements: list[str] = Field(default_factory=list, alias="list")
    contract_id: str | None = None
    group_id: int | None = None


class RemoveNetworkListResponse(APIModel):
    status: int = 0
    unique_id: str = ""
    sync_point: int = 0


# ============================================
# Requests
# ============================================

class GetNetworkListsRequest(validation.RequestModel):
    search: str = ""
    type: Annotated[NetworkListType | str | None, validation.rules(validation.one_of(*NetworkListType))] = None
    include_elements: bool | None = None


class GetNetworkListRequest(validation.RequestModel):
    unique_id: Annotated[str, validation.rules(validation.required)] = ""
    include_elements: bool | None = None


class CreateNetworkListRequest(validation.RequestModel):
    name: Annotated[str, validation.rules(validation.required)] = ""
    type: Annotated[
        NetworkListType | str,
        validation.rules(validation.required, validation.one_of(*NetworkListType)),
    ] = ""
    description: str = ""
    elements: list[str] = Field(default_factory=list)
    contract_id: str | None = None
    group_id: int | None = None

    def body(self) -> NetworkListBody:
        return NetworkListBody(
            name=self.name,
            type=self.type,
            description=self.description,
            elements=self.elements,
            contract_id=self.contract_id,
            group_id=self.group_id,
        )


class RemoveNetworkListRequest(validation.RequestModel):
    unique_id: Annotated[str, validation.rules(validation.required)] = ""


class GetNetworkListsError(OperationError):
    operation = "get network lists"


class GetNetworkListError(OperationError):
    operation = "get network list"


class CreateNetworkListError(OperationError):
    operation = "create network list"


class RemoveNetworkListError(OperationError):
    operation = "remove network list"


class NetworkList(BaseClient):
    """CRUD operations on network lists."""

    def get_network_lists(self, params: GetNetworkListsRequest | None = None) -> GetNetworkListsResponse:
        """
        List network lists, optionally filtered by name and type.

        See: https://techdocs.akamai.com/network-lists/reference/get-network-lists
        """
        self.log().debug("GetNetworkLists")
        params = params if params is not None else GetNetworkListsRequest()
        self._validate(GetNetworkListsError, params)

        request = Request(
            "GET",
            "/network-list/v2/network-lists",
            params=query(search=params.search, listType=params.type, includeElements=params.include_elements),
        )
        return self._call(GetNetworkListsError, request, result=GetNetworkListsResponse)

    def get_network_list(self, params: GetNetworkListRequest) -> NetworkListResponse:
        """See: https://techdocs.akamai.com/network-lists/reference/get-network-list"""
        self.log().debug("GetNetworkList")
        self._validate(GetNetworkListError, params)

        request = Request(
            "GET",
            path("/network-list/v2/network-lists/{}", params.unique_id),
            params=query(includeElements=params.include_elements),
        )
        return self._call(GetNetworkListError, request, result=NetworkListResponse)

    def create_network_list(self, params: CreateNetworkListRequest) -> NetworkListResponse:
        """See: https://techdocs.akamai.com/network-lists/reference/post-network-lists"""
        self.log().debug("CreateNetworkList")
        self._validate(CreateNetworkListError, params)

        request = Request("POST", "/network-list/v2/network-lists")
        return self._call(
            CreateNetworkListError,
            request,
            expect=(httpx.codes.CREATED,),
            result=NetworkListResponse,
            body=params.body(),
        )

    def remove_network_list(self, params: RemoveNetworkListRequest) -> RemoveNetworkListResponse:
        """See: https://techdocs.akamai.com/network-lists/reference/delete-network-list"""
        self.log().debug("RemoveNetworkList")
        self._validate(RemoveNetworkListError, params)

        request = Request("DELETE", path("/network-list/v2/network-lists/{}", params.unique_id))
        return self._call(RemoveNetworkListError, request, result=RemoveNetworkListResponse)
