"""EdgeWorkers deactivations."""

from typing import Annotated

import httpx
from pydantic import Field

from .. import validation
from ..client import BaseClient
from ..errors import OperationError
from ..models import APIModel
from ..session import Request
from ..tools import path, query
from .activations import ActivationNetwork, check_network


class Deactivation(APIModel):
    """Returned by GetDeactivation, DeactivateVersion and ListDeactivations."""

    edge_worker_id: int
    version: str
    deactivation_id: int
    account_id: str = ""
    status: str = ""
    network: ActivationNetwork | str
    note: str | None = None
    created_by: str = ""
    created_time: str = ""
    last_modified_time: str = ""


class ListDeactivationsResponse(APIModel):
    deactivations: list[Deactivation] = Field(default_factory=list)


class DeactivateVersion(APIModel):
    """Request body for DeactivateVersion."""

    network: Annotated[ActivationNetwork | str, validation.rules(check_network)] = ""
    note: str = ""
    version: Annotated[str, validation.rules(validation.required)] = ""


class ListDeactivationsRequest(validation.RequestModel):
    edge_worker_id: Annotated[int, validation.rules(validation.required)] = 0
    version: str | None = None


class DeactivateVersionRequest(validation.RequestModel):
    edge_worker_id: Annotated[int, validation.rules(validation.required)] = 0
    body: DeactivateVersion = Field(default_factory=DeactivateVersion)


class GetDeactivationRequest(validation.RequestModel):
    edge_worker_id: Annotated[int, validation.rules(validation.required)] = 0
    deactivation_id: Annotated[int, validation.rules(validation.required)] = 0


class ListDeactivationsError(OperationError):
    operation = "list deactivations"


class DeactivateVersionError(OperationError):
    operation = "deactivate version"


class GetDeactivationError(OperationError):
    operation = "get deactivation"


class Deactivations(BaseClient):
    """EdgeWorkers deactivations API."""

    def list_deactivations(self, params: ListDeactivationsRequest) -> ListDeactivationsResponse:
        """
        List all deactivations for an EdgeWorker.

        See: https://techdocs.akamai.com/edgeworkers/reference/get-deactivations-1
        """
        self.log().debug("ListDeactivations")
        self._validate(ListDeactivationsError, params)

        request = Request(
            "GET",
            path("/edgeworkers/v1/ids/{}/deactivations", params.edge_worker_id),
            params=query(version=params.version),
        )
        return self._call(ListDeactivationsError, request, result=ListDeactivationsResponse)

    def deactivate_version(self, params: DeactivateVersionRequest) -> Deactivation:
        """
        Deactivate an existing EdgeWorker version on the Akamai network.

        See: https://techdocs.akamai.com/edgeworkers/reference/post-deactivations-1
        """
        self.log().debug("DeactivateVersion")
        self._validate(DeactivateVersionError, params)

        request = Request("POST", path("/edgeworkers/v1/ids/{}/deactivations", params.edge_worker_id))
        return self._call(
            DeactivateVersionError,
            request,
            expect=(httpx.codes.CREATED,),
            result=Deactivation,
            body=params.body,
        )

    def get_deactivation(self, params: GetDeactivationRequest) -> Deactivation:
        """
        Get details for a specific deactivation.

        See: https://techdocs.akamai.com/edgeworkers/reference/get-deactivation-1
        """
        self.log().debug("GetDeactivation")
        self._validate(GetDeactivationError, params)

        request = Request(
            "GET",
            path("/edgeworkers/v1/ids/{}/deactivations/{}", params.edge_worker_id, params.deactivation_id),
        )
        return self._call(GetDeactivationError, request, result=Deactivation)
