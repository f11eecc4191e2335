"""Cloud Wrapper API client."""

from .cloudwrapper import CloudWrapper
from .configurations import (
    Capacity,
    ConfigLocationResp,
    Configuration,
    Configurations,
    DeleteConfigurationError,
    DeleteConfigurationRequest,
    GetConfigurationError,
    GetConfigurationRequest,
)
from .errors import CloudWrapperProblem, Error, ErrorItem
from .locations import ListLocationResponse, ListLocationsError, Location, Locations, TrafficTypeItem

__all__ = [
    "Capacity",
    "CloudWrapper",
    "CloudWrapperProblem",
    "ConfigLocationResp",
    "Configuration",
    "Configurations",
    "DeleteConfigurationError",
    "DeleteConfigurationRequest",
    "Error",
    "ErrorItem",
    "GetConfigurationError",
    "GetConfigurationRequest",
    "ListLocationResponse",
    "ListLocationsError",
    "Location",
    "Locations",
    "TrafficTypeItem",
]
