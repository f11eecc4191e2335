"""CPS change status and cancellation."""

from typing import Annotated, Any

from pydantic import Field

from .. import validation
from ..client import BaseClient
from ..errors import OperationError
from ..models import APIModel
from ..session import Request
from ..tools import path

CHANGE_MEDIA_TYPE = "application/vnd.akamai.cps.change.v2+json"
CHANGE_ID_MEDIA_TYPE = "application/vnd.akamai.cps.change-id.v1+json"


class StatusInfoError(APIModel):
    code: str = ""
    description: str = ""
    timestamp: str = ""


class StatusInfo(APIModel):
    deployment_schedule: dict[str, Any] | None = None
    description: str = ""
    error: StatusInfoError | None = None
    state: str = ""
    status: str = ""


class AllowedInput(APIModel):
    info: str = ""
    requirement: str = ""
    type: str = ""
    update: str = ""


class Change(APIModel):
    """Status of an enrollment change and the input it is waiting for."""

    allowed_input: list[AllowedInput] = Field(default_factory=list)
    status_info: StatusInfo | None = None


class CancelChangeResponse(APIModel):
    change: str = ""


class GetChangeStatusRequest(validation.RequestModel):
    enrollment_id: Annotated[int, validation.rules(validation.required)] = 0
    change_id: Annotated[int, validation.rules(validation.required)] = 0


class CancelChangeRequest(GetChangeStatusRequest):
    pass


class GetChangeStatusError(OperationError):
    operation = "get change status"


class CancelChangeError(OperationError):
    operation = "cancel change"


class ChangeOperations(BaseClient):
    """CPS change operations API."""

    def get_change_status(self, params: GetChangeStatusRequest) -> Change:
        """See: https://techdocs.akamai.com/cps/reference/get-enrollment-change"""
        self.log().debug("GetChangeStatus")
        self._validate(GetChangeStatusError, params)

        request = Request(
            "GET",
            path("/cps/v2/enrollments/{}/changes/{}", params.enrollment_id, params.change_id),
            headers={"Accept": CHANGE_MEDIA_TYPE},
        )
        return self._call(GetChangeStatusError, request, result=Change)

    def cancel_change(self, params: CancelChangeRequest) -> CancelChangeResponse:
        """See: https://techdocs.akamai.com/cps/reference/delete-enrollment-change"""
        self.log().debug("CancelChange")
        self._validate(CancelChangeError, params)

        request = Request(
            "DELETE",
            path("/cps/v2/enrollments/{}/changes/{}", params.enrollment_id, params.change_id),
            headers={"Accept": CHANGE_ID_MEDIA_TYPE},
        )
        return self._call(CancelChangeError, request, result=CancelChangeResponse)
