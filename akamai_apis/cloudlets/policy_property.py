"""Properties associated with a Cloudlets policy."""

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


class OriginType(str, Enum):
    CUSTOMER = "CUSTOMER"
    APPLICATION_LOAD_BALANCER = "APPLICATION_LOAD_BALANCER"
    NETSTORAGE = "NETSTORAGE"


class VersionActivationNetwork(str, Enum):
    STAGING = "staging"
    PRODUCTION = "prod"


class CloudletsOrigin(APIModel):
    origin_id: str = Field("", alias="id")
    hostname: str = ""
    type: OriginType | str = ""
    checksum: str = ""
    description: str | None = None


class NetworkStatus(APIModel):
    """Activation state of a property on one network."""

    activated_by: str | None = None
    activation_date: str | None = None
    version: int | None = None
    cloudlets_origins: dict[str, CloudletsOrigin] | None = None
    referenced_policies: list[str] | None = None


class AssociateProperty(APIModel):
    group_id: int
    id: int
    name: str
    newest_version: NetworkStatus = Field(default_factory=NetworkStatus)
    production: NetworkStatus = Field(default_factory=NetworkStatus)
    staging: NetworkStatus = Field(default_factory=NetworkStatus)


GetPolicyPropertiesResponse = dict[str, AssociateProperty]


class DeletePolicyPropertyRequest(validation.RequestModel):
    policy_id: Annotated[int, validation.rules(validation.required)] = 0
    property_id: Annotated[int, validation.rules(validation.required)] = 0
    network: Annotated[
        VersionActivationNetwork | str | None,
        validation.rules(validation.one_of(*VersionActivationNetwork)),
    ] = None


class GetPolicyPropertiesError(OperationError):
    operation = "get policy properties"


class DeletePolicyPropertyError(OperationError):
    operation = "delete policy property"


class PolicyProperty(BaseClient):
    """Cloudlets policy associated properties."""

    def get_policy_properties(self, policy_id: int) -> GetPolicyPropertiesResponse:
        """
        Get all properties associated with a policy, keyed by property name.

        See: https://techdocs.akamai.com/cloudlets/v2/reference/get-policy-properties
        """
        self.log().debug("GetPolicyProperties")
        self._require(GetPolicyPropertiesError, policy_id=policy_id)

        request = Request("GET", path("/cloudlets/api/v2/policies/{}/properties", policy_id))
        result = self._call(GetPolicyPropertiesError, request, result=GetPolicyPropertiesResponse)
        return result if result is not None else {}

    def delete_policy_property(self, params: DeletePolicyPropertyRequest) -> None:
        """Remove a property from a policy's activation associated properties."""
        self.log().debug("DeletePolicyProperty")
        self._validate(DeletePolicyPropertyError, params)

        request = Request(
            "DELETE",
            path("/cloudlets/api/v2/policies/{}/properties/{}", params.policy_id, params.property_id),
            params=query(network=params.network),
        )
        self._call(DeletePolicyPropertyError, request, expect=(httpx.codes.NO_CONTENT,))
