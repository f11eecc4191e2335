"""GTM configuration API client."""

from .cidrmap import (
    CidrAssignment,
    CidrMap,
    CidrMapList,
    CidrMapResponse,
    CidrMaps,
    CreateCidrMapError,
    DeleteCidrMapError,
    GetCidrMapError,
    ListCidrMapsError,
    UpdateCidrMapError,
)
from .common import SCHEMA_VERSION, DatacenterBase, ResponseBody, ResponseStatus, version_headers
from .errors import Error, GTMProblem
from .geomap import (
    CreateGeoMapError,
    DeleteGeoMapError,
    GeoAssignment,
    GeoMap,
    GeoMapList,
    GeoMapResponse,
    GeoMaps,
    GetGeoMapError,
    ListGeoMapsError,
    UpdateGeoMapError,
)
from .gtm import GTM

__all__ = [
    "SCHEMA_VERSION",
    "CidrAssignment",
    "CidrMap",
    "CidrMapList",
    "CidrMapResponse",
    "CidrMaps",
    "CreateCidrMapError",
    "CreateGeoMapError",
    "DatacenterBase",
    "DeleteCidrMapError",
    "DeleteGeoMapError",
    "Error",
    "GTM",
    "GTMProblem",
    "GeoAssignment",
    "GeoMap",
    "GeoMapList",
    "GeoMapResponse",
    "GeoMaps",
    "GetCidrMapError",
    "GetGeoMapError",
    "ListCidrMapsError",
    "ListGeoMapsError",
    "ResponseBody",
    "ResponseStatus",
    "UpdateCidrMapError",
    "UpdateGeoMapError",
    "version_headers",
]
