"""EdgeWorkers activations."""

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


class ActivationNetwork(str, Enum):
    """Network an EdgeWorker version is (de)activated on."""

    STAGING = "STAGING"
    PRODUCTION = "PRODUCTION"


def check_network(network: ActivationNetwork | str) -> str | None:
    value = network.value if isinstance(network, ActivationNetwork) else network
    return validation.check(
        network,
        validation.required,
        validation.one_of(
            *ActivationNetwork,
            message=f"value '{value}' is invalid. Must be one of: "
            f"'{ActivationNetwork.STAGING.value}' or '{ActivationNetwork.PRODUCTION.value}'",
        ),
    )


# ============================================
# Models
# ============================================

class Activation(APIModel):
    """Activation of an EdgeWorker version."""

    edge_worker_id: int
    version: str
    activation_id: int
    account_id: str = ""
    status: str = ""
    network: ActivationNetwork | str
    note: str | None = None
    created_by: str = ""
    created_time: str = ""
    last_modified_time: str = ""


class ListActivationsResponse(APIModel):
    activations: list[Activation] = Field(default_factory=list)


class ActivateVersion(APIModel):
    """Request body for ActivateVersion."""

    network: Annotated[ActivationNetwork | str, validation.rules(check_network)] = ""
    version: Annotated[str, validation.rules(validation.required)] = ""
    note: str | None = None


# ============================================
# Requests
# ============================================

class ListActivationsRequest(validation.RequestModel):
    edge_worker_id: Annotated[int, validation.rules(validation.required)] = 0
    version: str | None = None


class ActivateVersionRequest(validation.RequestModel):
    edge_worker_id: Annotated[int, validation.rules(validation.required)] = 0
    body: ActivateVersion = Field(default_factory=ActivateVersion)


class GetActivationRequest(validation.RequestModel):
    edge_worker_id: Annotated[int, validation.rules(validation.required)] = 0
    activation_id: Annotated[int, validation.rules(validation.required)] = 0


class CancelActivationRequest(GetActivationRequest):
    pass


# ============================================
# Errors
# ============================================

class ListActivationsError(OperationError):
    operation = "list activations"


class ActivateVersionError(OperationError):
    operation = "activate version"


class GetActivationError(OperationError):
    operation = "get activation"


class CancelActivationError(OperationError):
    operation = "cancel activation"


class Activations(BaseClient):
    """EdgeWorkers activations API."""

    def list_activations(self, params: ListActivationsRequest) -> ListActivationsResponse:
        """
        List activations for an EdgeWorker, optionally filtered by version.

        See: https://techdocs.akamai.com/edgeworkers/reference/get-activations-1
        """
        self.log().debug("ListActivations")
        self._validate(ListActivationsError, params)

        request = Request(
            "GET",
            path("/edgeworkers/v1/ids/{}/activations", params.edge_worker_id),
            params=query(version=params.version),
        )
        return self._call(ListActivationsError, request, result=ListActivationsResponse)

    def activate_version(self, params: ActivateVersionRequest) -> Activation:
        """
        Activate an EdgeWorker version on a network.

        See: https://techdocs.akamai.com/edgeworkers/reference/post-activations-1
        """
        self.log().debug("ActivateVersion")
        self._validate(ActivateVersionError, params)

        request = Request("POST", path("/edgeworkers/v1/ids/{}/activations", params.edge_worker_id))
        return self._call(
            ActivateVersionError,
            request,
            expect=(httpx.codes.CREATED,),
            result=Activation,
            body=params.body,
        )

    def get_activation(self, params: GetActivationRequest) -> Activation:
        """See: https://techdocs.akamai.com/edgeworkers/reference/get-activation-1"""
        self.log().debug("GetActivation")
        self._validate(GetActivationError, params)

        request = Request(
            "GET",
            path("/edgeworkers/v1/ids/{}/activations/{}", params.edge_worker_id, params.activation_id),
        )
        return self._call(GetActivationError, request, result=Activation)

    def cancel_pending_activation(self, params: CancelActivationRequest) -> Activation:
        """See: https://techdocs.akamai.com/edgeworkers/reference/cancel-activation"""
        self.log().debug("CancelPendingActivation")
        self._validate(CancelActivationError, params)

        request = Request(
            "DELETE",
            path("/edgeworkers/v1/ids/{}/activations/{}", params.edge_worker_id, params.activation_id),
        )
        return self._call(CancelActivationError, request, result=Activation)
