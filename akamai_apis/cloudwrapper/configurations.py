"""Cloud Wrapper configurations."""

from typing import Annotated

import httpx
from pydantic import Field

from .. import validation
from ..client import BaseClient
from ..errors import OperationError
from ..models import APIModel
from ..session import Request
from ..tools import path


class Capacity(APIModel):
    unit: str
    value: int


class ConfigLocationResp(APIModel):
    comments: str = ""
    traffic_type_id: int
    capacity: Capacity | None = None
    map_name: str = ""


class Configuration(APIModel):
    """A Cloud Wrapper configuration as returned by the API."""

    config_id: int
    config_name: str
    comments: str = ""
    contract_id: str = ""
    status: str = ""
    locations: list[ConfigLocationResp] = Field(default_factory=list)
    property_ids: list[str] = Field(default_factory=list)
    notification_emails: list[str] = Field(default_factory=list)
    retain_idle_objects: bool = False
    capacity_alerts_threshold: int | None = None
    last_updated_by: str = ""
    last_updated_date: str = ""
    last_activated_by: str | None = None
    last_activated_date: str | None = None


class GetConfigurationRequest(validation.RequestModel):
    config_id: Annotated[int, validation.rules(validation.required)] = 0


class DeleteConfigurationRequest(GetConfigurationRequest):
    pass


class GetConfigurationError(OperationError):
    operation = "get configuration"


class DeleteConfigurationError(OperationError):
    operation = "delete configuration"


class Configurations(BaseClient):
    """Cloud Wrapper configurations API."""

    def get_configuration(self, params: GetConfigurationRequest) -> Configuration:
        """See: https://techdocs.akamai.com/cloud-wrapper/reference/get-configuration"""
        self.log().debug("GetConfiguration")
        self._validate(GetConfigurationError, params)

        request = Request("GET", path("/cloud-wrapper/v1/configurations/{}", params.config_id))
        return self._call(GetConfigurationError, request, result=Configuration)

    def delete_configuration(self, params: DeleteConfigurationRequest) -> None:
        """
        Delete a configuration; the removal completes asynchronously.

        See: https://techdocs.akamai.com/cloud-wrapper/reference/delete-configuration
        """
        self.log().debug("DeleteConfiguration")
        self._validate(DeleteConfigurationError, params)

        request = Request("DELETE", path("/cloud-wrapper/v1/configurations/{}", params.config_id))
        self._call(DeleteConfigurationError, request, expect=(httpx.codes.ACCEPTED,))
