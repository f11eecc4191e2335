"""
Property Manager edge hostnames.

See: https://techdocs.akamai.com/property-mgr/reference/edge-hostnames
"""

from typing import Annotated

import httpx
from pydantic import Field, ValidationInfo, field_validator

from .. import validation
from ..client import BaseClient
from ..errors import ErrorKind, OperationError
from ..models import APIModel
from ..session import Request
from ..tools import InvalidLocationError, fetch_id_from_location, join, path, query
from .config import PAPIConfig

SECURE_NETWORK_STANDARD_TLS = "STANDARD_TLS"
SECURE_NETWORK_SHARED_CERT = "SHARED_CERT"
SECURE_NETWORK_ENHANCED_TLS = "ENHANCED_TLS"

IP_VERSION_V4 = "IPV4"
IP_VERSION_V6_COMPLIANCE = "IPV6_COMPLIANCE"

USE_CASE_GLOBAL = "GLOBAL"

SECURE_NETWORK_SUFFIXES = {
    SECURE_NETWORK_STANDARD_TLS: "edgesuite.net",
    SECURE_NETWORK_SHARED_CERT: "akamaized.net",
    SECURE_NETWORK_ENHANCED_TLS: "edgekey.net",
}


# ============================================
# Models
# ============================================

class UseCase(APIModel):
    option: Annotated[str, validation.rules(validation.required)] = ""
    type: Annotated[str, validation.rules(validation.required, validation.one_of(USE_CASE_GLOBAL))] = ""
    use_case: Annotated[str, validation.rules(validation.required)] = ""


class EdgeHostnameGetItem(APIModel):
    id: str = Field("", alias="edgeHostnameId")
    domain: str = Field("", alias="edgeHostnameDomain")
    product_id: str = ""
    domain_prefix: str = ""
    domain_suffix: str = ""
    status: str | None = None
    secure: bool = False
    ip_version_behavior: str = ""
    use_cases: list[UseCase] = Field(default_factory=list)


class EdgeHostnameItems(APIModel):
    items: list[EdgeHostnameGetItem] = Field(default_factory=list)


class GetEdgeHostnamesResponse(APIModel):
    """Returned by GetEdgeHostnames and GetEdgeHostname."""

    account_id: str = ""
    contract_id: str = ""
    group_id: str = ""
    edge_hostnames: EdgeHostnameItems = Field(default_factory=EdgeHostnameItems)


class EdgeHostnameCreate(APIModel):
    """
    Body of the create edge hostname POST.

    ``secure_network`` comes before the fields whose rules depend on it, so its
    validated value is in ``info.data`` when they are checked.
    """

    product_id: Annotated[str, validation.rules(validation.required)] = ""
    domain_prefix: Annotated[str, validation.rules(validation.required)] = ""
    secure: bool | None = None
    secure_network: Annotated[str | None, validation.rules(validation.one_of(*SECURE_NETWORK_SUFFIXES))] = None
    domain_suffix: Annotated[str, validation.rules(validation.required)] = ""
    slot_number: int | None = None
    ip_version_behavior: Annotated[
        str,
        validation.rules(validation.required, validation.one_of(IP_VERSION_V4, IP_VERSION_V6_COMPLIANCE)),
    ] = ""
    cert_enrollment_id: int | None = None
    use_cases: list[UseCase] | None = None

    @field_validator("domain_suffix")
    @classmethod
    def suffix_matches_network(cls, value: str, info: ValidationInfo) -> str:
        suffix = SECURE_NETWORK_SUFFIXES.get(info.data.get("secure_network"))
        if suffix is None:
            return value
        return validation.enforce(info, value, validation.one_of(suffix))

    @field_validator("cert_enrollment_id")
    @classmethod
    def enhanced_tls_needs_certificate(cls, value: int | None, info: ValidationInfo) -> int | None:
        if info.data.get("secure_network") != SECURE_NETWORK_ENHANCED_TLS:
            return value
        return validation.enforce(info, value, validation.required)


class CreateEdgeHostnameResponse(APIModel):
    edge_hostname_link: str = ""
    edge_hostname_id: str = Field("", exclude=True)


# ============================================
# Requests
# ============================================

class GetEdgeHostnamesRequest(validation.RequestModel):
    contract_id: Annotated[str, validation.rules(validation.required)] = ""
    group_id: Annotated[str, validation.rules(validation.required)] = ""
    options: list[str] = Field(default_factory=list)


class GetEdgeHostnameRequest(validation.RequestModel):
    edge_hostname_id: Annotated[str, validation.rules(validation.required)] = ""
    contract_id: Annotated[str, validation.rules(validation.required)] = ""
    group_id: Annotated[str, validation.rules(validation.required)] = ""
    options: list[str] = Field(default_factory=list)


class CreateEdgeHostnameRequest(validation.RequestModel):
    contract_id: Annotated[str, validation.rules(validation.required)] = ""
    group_id: Annotated[str, validation.rules(validation.required)] = ""
    edge_hostname: EdgeHostnameCreate = Field(default_factory=EdgeHostnameCreate)
    options: list[str] = Field(default_factory=list)


class GetEdgeHostnamesError(OperationError):
    operation = "get edge hostnames"


class GetEdgeHostnameError(OperationError):
    operation = "get edge hostname"


class CreateEdgeHostnameError(OperationError):
    operation = "create edge hostname"


class EdgeHostnames(BaseClient):
    """Operations on PAPI edge hostnames."""

    config_class = PAPIConfig

    def _headers(self) -> dict[str, str]:
        if isinstance(self.config, PAPIConfig):
            return self.config.prefix_headers
        return PAPIConfig().prefix_headers

    def get_edge_hostnames(self, params: GetEdgeHostnamesRequest) -> GetEdgeHostnamesResponse:
        """
        List edge hostnames available to a contract and group.

        See: https://techdocs.akamai.com/property-mgr/reference/get-edgehostnames
        """
        self.log().debug("GetEdgeHostnames")
        self._validate(GetEdgeHostnamesError, params)

        request = Request(
            "GET",
            "/papi/v1/edgehostnames",
            params=query(contractId=params.contract_id, groupId=params.group_id, options=join(params.options)),
            headers=self._headers(),
        )
        return self._call(GetEdgeHostnamesError, request, result=GetEdgeHostnamesResponse)

    def get_edge_hostname(self, params: GetEdgeHostnameRequest) -> GetEdgeHostnamesResponse:
        """See: https://techdocs.akamai.com/property-mgr/reference/get-edgehostname"""
        self.log().debug("GetEdgeHostname")
        self._validate(GetEdgeHostnameError, params)

        request = Request(
            "GET",
            path("/papi/v1/edgehostnames/{}", params.edge_hostname_id),
            params=query(contractId=params.contract_id, groupId=params.group_id, options=join(params.options)),
            headers=self._headers(),
        )
        return self._call(GetEdgeHostnameError, request, result=GetEdgeHostnamesResponse)

    def create_edge_hostname(self, params: CreateEdgeHostnameRequest) -> CreateEdgeHostnameResponse:
        """
        Create an edge hostname and return its link and ID.

        See: https://techdocs.akamai.com/property-mgr/reference/post-edgehostnames
        """
        self.log().debug("CreateEdgeHostname")
        self._validate(CreateEdgeHostnameError, params)

        request = Request(
            "POST",
            "/papi/v1/edgehostnames",
            params=query(contractId=params.contract_id, groupId=params.group_id, options=join(params.options)),
            headers=self._headers(),
        )
        result = self._call(
            CreateEdgeHostnameError,
            request,
            expect=(httpx.codes.CREATED,),
            result=CreateEdgeHostnameResponse,
            body=params.edge_hostname,
        )
        if result is None:
            result = CreateEdgeHostnameResponse()
        try:
            result.edge_hostname_id = fetch_id_from_location(result.edge_hostname_link)
        except InvalidLocationError as exc:
            raise CreateEdgeHostnameError(ErrorKind.REQUEST, exc) from exc
        return result
