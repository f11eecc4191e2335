"""Cloudlets API client."""

from .cloudlets import Cloudlets
from .policy_property import (
    AssociateProperty,
    CloudletsOrigin,
    DeletePolicyPropertyError,
    DeletePolicyPropertyRequest,
    GetPolicyPropertiesError,
    GetPolicyPropertiesResponse,
    NetworkStatus,
    OriginType,
    PolicyProperty,
    VersionActivationNetwork,
)

__all__ = [
    "AssociateProperty",
    "Cloudlets",
    "CloudletsOrigin",
    "DeletePolicyPropertyError",
    "DeletePolicyPropertyRequest",
    "GetPolicyPropertiesError",
    "GetPolicyPropertiesResponse",
    "NetworkStatus",
    "OriginType",
    "PolicyProperty",
    "VersionActivationNetwork",
]
