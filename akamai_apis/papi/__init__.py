"""Property Manager (PAPI) client."""

from .config import PAPIConfig
from .edgehostname import (
    IP_VERSION_V4,
    IP_VERSION_V6_COMPLIANCE,
    SECURE_NETWORK_ENHANCED_TLS,
    SECURE_NETWORK_SHARED_CERT,
    SECURE_NETWORK_STANDARD_TLS,
    USE_CASE_GLOBAL,
    CreateEdgeHostnameError,
    CreateEdgeHostnameRequest,
    CreateEdgeHostnameResponse,
    EdgeHostnameCreate,
    EdgeHostnameGetItem,
    EdgeHostnameItems,
    EdgeHostnames,
    GetEdgeHostnameError,
    GetEdgeHostnameRequest,
    GetEdgeHostnamesError,
    GetEdgeHostnamesRequest,
    GetEdgeHostnamesResponse,
    UseCase,
)
from .errors import Error, PAPIProblem
from .papi import PAPI

__all__ = [
    "IP_VERSION_V4",
    "IP_VERSION_V6_COMPLIANCE",
    "SECURE_NETWORK_ENHANCED_TLS",
    "SECURE_NETWORK_SHARED_CERT",
    "SECURE_NETWORK_STANDARD_TLS",
    "USE_CASE_GLOBAL",
    "CreateEdgeHostnameError",
    "CreateEdgeHostnameRequest",
    "CreateEdgeHostnameResponse",
    "EdgeHostnameCreate",
    "EdgeHostnameGetItem",
    "EdgeHostnameItems",
    "EdgeHostnames",
    "Error",
    "GetEdgeHostnameError",
    "GetEdgeHostnameRequest",
    "GetEdgeHostnamesError",
    "GetEdgeHostnamesRequest",
    "GetEdgeHostnamesResponse",
    "PAPI",
    "PAPIConfig",
    "PAPIProblem",
    "UseCase",
]
