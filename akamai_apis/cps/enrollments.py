"""CPS certificate enrollments."""

from typing import Annotated, Any

import httpx
from pydantic import Field

from .. import validation
from ..client import BaseClient
from ..errors import OperationError
from ..models import APIModel
from ..session import Request
from ..tools import path, query

ENROLLMENTS_MEDIA_TYPE = "application/vnd.akamai.cps.enrollments.v11+json"
ENROLLMENT_MEDIA_TYPE = "application/vnd.akamai.cps.enrollment.v11+json"
ENROLLMENT_STATUS_MEDIA_TYPE = "application/vnd.akamai.cps.enrollment-status.v1+json"


class CSR(APIModel):
    cn: str = ""
    country: str | None = Field(None, alias="c")
    locality: str | None = Field(None, alias="l")
    organization: str | None = Field(None, alias="o")
    organizational_unit: str | None = Field(None, alias="ou")
    state: str | None = Field(None, alias="st")
    sans: list[str] = Field(default_factory=list)


class PendingChange(APIModel):
    location: str = ""
    change_type: str = ""


class Enrollment(APIModel):
    """A certificate enrollment; nested sections are kept as raw JSON."""

    id: int | None = None
    location: str = ""
    ra: str = ""
    validation_type: str = ""
    certificate_type: str = ""
    change_management: bool = False
    csr: CSR | None = None
    enable_multi_stacked_certificates: bool = False
    network_configuration: dict[str, Any] | None = None
    signature_algorithm: str | None = None
    pending_changes: list[PendingChange] = Field(default_factory=list)
    admin_contact: dict[str, Any] | None = None
    tech_contact: dict[str, Any] | None = None
    org: dict[str, Any] | None = None


class ListEnrollmentsResponse(APIModel):
    enrollments: list[Enrollment] = Field(default_factory=list)


class RemoveEnrollmentResponse(APIModel):
    enrollment: str = ""
    changes: list[str] = Field(default_factory=list)


class ListEnrollmentsRequest(validation.RequestModel):
    """Every parameter is optional."""

    contract_id: str | None = None


class GetEnrollmentRequest(validation.RequestModel):
    enrollment_id: Annotated[int, validation.rules(validation.required)] = 0


class RemoveEnrollmentRequest(validation.RequestModel):
    enrollment_id: Annotated[int, validation.rules(validation.required)] = 0
    allow_cancel_pending_changes: bool | None = None
    deploy_not_after: str | None = None
    deploy_not_before: str | None = None


class ListEnrollmentsError(OperationError):
    operation = "list enrollments"


class GetEnrollmentError(OperationError):
    operation = "get enrollment"


class RemoveEnrollmentError(OperationError):
    operation = "remove enrollment"


class Enrollments(BaseClient):
    """CPS enrollments API."""

    def list_enrollments(self, params: ListEnrollmentsRequest) -> ListEnrollmentsResponse:
        """See: https://techdocs.akamai.com/cps/reference/get-enrollments"""
        self.log().debug("ListEnrollments")
        self._validate(ListEnrollmentsError, params)

        request = Request(
            "GET",
            "/cps/v2/enrollments",
            params=query(contractId=params.contract_id),
            headers={"Accept": ENROLLMENTS_MEDIA_TYPE},
        )
        return self._call(ListEnrollmentsError, request, result=ListEnrollmentsResponse)

    def get_enrollment(self, params: GetEnrollmentRequest) -> Enrollment:
        """See: https://techdocs.akamai.com/cps/reference/get-enrollment"""
        self.log().debug("GetEnrollment")
        self._validate(GetEnrollmentError, params)

        request = Request(
            "GET",
            path("/cps/v2/enrollments/{}", params.enrollment_id),
            headers={"Accept": ENROLLMENT_MEDIA_TYPE},
        )
        return self._call(GetEnrollmentError, request, result=Enrollment)

    def remove_enrollment(self, params: RemoveEnrollmentRequest) -> RemoveEnrollmentResponse:
        """
        Remove an enrollment; CPS answers 202 and removes it asynchronously.

        See: https://techdocs.akamai.com/cps/reference/delete-enrollment
        """
        self.log().debug("RemoveEnrollment")
        self._validate(RemoveEnrollmentError, params)

        request = Request(
            "DELETE",
            path("/cps/v2/enrollments/{}", params.enrollment_id),
            params=query(**{
                "allow-cancel-pending-changes": params.allow_cancel_pending_changes,
                "deploy-not-after": params.deploy_not_after,
                "deploy-not-before": params.deploy_not_before,
            }),
            headers={"Accept": ENROLLMENT_STATUS_MEDIA_TYPE},
        )
        return self._call(
            RemoveEnrollmentError,
            request,
            expect=(httpx.codes.ACCEPTED,),
            result=RemoveEnrollmentResponse,
        )
