"""Network list activation on the staging and production networks."""

from enum import Enum
from typing import Annotated

from pydantic import Field

from .. import validation
from ..client import BaseClient
from ..errors import OperationError
from ..models import APIModel
from ..session import Request
from ..tools import path
from .network_list import ListLink


class Network(str, Enum):
    STAGING = "STAGING"
    PRODUCTION = "PRODUCTION"


def check_network(network: Network | str) -> str | None:
    return validation.check(network, validation.required, validation.one_of(*Network))


class ActivationLinks(APIModel):
    app_url: ListLink | None = None
    activation_details: ListLink | None = None


class ActivationStatus(APIModel):
    """Activation state of a network list on one network."""

    activation_id: int = 0
    activation_comments: str = ""
    activation_status: str = ""
    sync_point: int = 0
    unique_id: str = ""
    fast: bool = False
    dispatch_count: int = 0
    links: ActivationLinks | None = None


class ActivationBody(APIModel):
    comments: str = ""
    notification_recipients: list[str] = Field(default_factory=list)


class GetActivationsRequest(validation.RequestModel):
    unique_id: Annotated[str, validation.rules(validation.required)] = ""
    network: Annotated[Network | str, validation.rules(check_network)] = ""


class CreateActivationsRequest(GetActivationsRequest):
    comments: str = ""
    notification_recipients: list[str] = Field(default_factory=list)


class GetActivationsError(OperationError):
    operation = "get activations"


class CreateActivationsError(OperationError):
    operation = "create activations"


def _environment_path(unique_id: str, network: Network | str, action: str) -> str:
    return path("/network-list/v2/network-lists/{}/environments/{}/" + action, unique_id, network)


class Activations(BaseClient):
    """Activation status and requests for network lists."""

    def get_activations(self, params: GetActivationsRequest) -> ActivationStatus:
        """See: https://techdocs.akamai.com/network-lists/reference/get-network-list-status"""
        self.log().debug("GetActivations")
        self._validate(GetActivationsError, params)

        request = Request("GET", _environment_path(params.unique_id, params.network, "status"))
        return self._call(GetActivationsError, request, result=ActivationStatus)

    def create_activations(self, params: CreateActivationsRequest) -> ActivationStatus:
        """
        Activate the latest version of a network list.

        See: https://techdocs.akamai.com/network-lists/reference/post-network-list-activate
        """
        self.log().debug("CreateActivations")
        self._validate(CreateActivationsError, params)

        request = Request("POST", _environment_path(params.unique_id, params.network, "activate"))
        return self._call(
            CreateActivationsError,
            request,
            result=ActivationStatus,
            body=ActivationBody(comments=params.comments, notification_recipients=params.notification_recipients),
        )
