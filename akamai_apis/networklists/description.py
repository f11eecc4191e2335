"""Network list name and description."""

from typing import Annotated

from .. import validation
from ..client import BaseClient
from ..errors import OperationError
from ..models import APIModel
from ..session import Request
from ..tools import path


class NetworkListDetails(APIModel):
    name: str
    description: str = ""


class UpdateNetworkListDescriptionRequest(validation.RequestModel):
    unique_id: Annotated[str, validation.rules(validation.required)] = ""
    name: Annotated[str, validation.rules(validation.required)] = ""
    description: str = ""


class UpdateNetworkListDescriptionError(OperationError):
    operation = "update network list description"


class NetworkListDescription(BaseClient):

    def update_network_list_description(self, params: UpdateNetworkListDescriptionRequest) -> None:
        """See: https://techdocs.akamai.com/network-lists/reference/put-network-list-details"""
        self.log().debug("UpdateNetworkListDescription")
        self._validate(UpdateNetworkListDescriptionError, params)

        request = Request("PUT", path("/network-list/v2/network-lists/{}/details", params.unique_id))
        self._call(
            UpdateNetworkListDescriptionError,
            request,
            body=NetworkListDetails(name=params.name, description=params.description),
        )
