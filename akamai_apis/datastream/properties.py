"""Properties that can be attached to a DataStream stream."""

from typing import Annotated

from pydantic import Field

from .. import validation
from ..client import BaseClient
from ..errors import OperationError
from ..models import APIModel
from ..session import Request
from ..tools import path


class Property(APIModel):
    property_id: int
    property_name: str
    product_id: str = ""
    product_name: str = ""
    hostnames: list[str] = Field(default_factory=list)


class GetPropertiesRequest(validation.RequestModel):
    group_id: Annotated[int, validation.rules(validation.required)] = 0
    product_id: Annotated[str, validation.rules(validation.required)] = ""


class GetPropertiesByGroupRequest(validation.RequestModel):
    group_id: Annotated[int, validation.rules(validation.required)] = 0


class GetPropertiesError(OperationError):
    operation = "get properties"


class GetPropertiesByGroupError(OperationError):
    operation = "get properties by group"


class Properties(BaseClient):
    """DataStream properties API."""

    def get_properties(self, params: GetPropertiesRequest) -> list[Property]:
        """
        List properties of a group that are eligible for the given product.

        See: https://techdocs.akamai.com/datastream2/v1/reference/get-properties
        """
        self.log().debug("GetProperties")
        self._validate(GetPropertiesError, params)

        request = Request(
            "GET",
            path("/datastream-config-api/v1/log/properties/product/{}/group/{}", params.product_id, params.group_id),
        )
        result = self._call(GetPropertiesError, request, result=list[Property])
        return result if result is not None else []

    def get_properties_by_group(self, params: GetPropertiesByGroupRequest) -> list[Property]:
        """See: https://techdocs.akamai.com/datastream2/v1/reference/get-properties-group"""
        self.log().debug("GetPropertiesByGroup")
        self._validate(GetPropertiesByGroupError, params)

        request = Request("GET", path("/datastream-config-api/v1/log/properties/group/{}", params.group_id))
        result = self._call(GetPropertiesByGroupError, request, result=list[Property])
        return result if result is not None else []
