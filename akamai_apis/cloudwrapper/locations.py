"""Cloud Wrapper locations."""

from pydantic import Field

from ..client import BaseClient
from ..errors import OperationError
from ..models import APIModel
from ..session import Request


class TrafficTypeItem(APIModel):
    traffic_type_id: int
    traffic_type: str
    map_name: str = ""


class Location(APIModel):
    location_id: int
    location_name: str
    multi_cdn_location_id: str = ""
    traffic_types: list[TrafficTypeItem] = Field(default_factory=list)


class ListLocationResponse(APIModel):
    locations: list[Location] = Field(default_factory=list)


class ListLocationsError(OperationError):
    operation = "list locations"


class Locations(BaseClient):
    """Cloud Wrapper locations API."""

    def list_locations(self) -> ListLocationResponse:
        """
        List the locations available to Cloud Wrapper configurations.

        See: https://techdocs.akamai.com/cloud-wrapper/reference/get-locations
        """
        self.log().debug("ListLocations")

        request = Request("GET", "/cloud-wrapper/v1/locations")
        return self._call(ListLocationsError, request, result=ListLocationResponse)
