"""Certificate Provisioning System (CPS) client."""

from .change_operations import (
    AllowedInput,
    CancelChangeError,
    CancelChangeRequest,
    CancelChangeResponse,
    Change,
    ChangeOperations,
    GetChangeStatusError,
    GetChangeStatusRequest,
    StatusInfo,
    StatusInfoError,
)
from .cps import CPS
from .enrollments import (
    CSR,
    Enrollment,
    Enrollments,
    GetEnrollmentError,
    GetEnrollmentRequest,
    ListEnrollmentsError,
    ListEnrollmentsRequest,
    ListEnrollmentsResponse,
    PendingChange,
    RemoveEnrollmentError,
    RemoveEnrollmentRequest,
    RemoveEnrollmentResponse,
)

__all__ = [
    "AllowedInput",
    "CPS",
    "CSR",
    "CancelChangeError",
    "CancelChangeRequest",
    "CancelChangeResponse",
    "Change",
    "ChangeOperations",
    "Enrollment",
    "Enrollments",
    "GetChangeStatusError",
    "GetChangeStatusRequest",
    "GetEnrollmentError",
    "GetEnrollmentRequest",
    "ListEnrollmentsError",
    "ListEnrollmentsRequest",
    "ListEnrollmentsResponse",
    "PendingChange",
    "RemoveEnrollmentError",
    "RemoveEnrollmentRequest",
    "RemoveEnrollmentResponse",
    "StatusInfo",
    "StatusInfoError",
]
