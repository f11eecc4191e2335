"""
Property Manager (PAPI) client.

See: https://techdocs.akamai.com/property-mgr/reference/api
"""

from .config import PAPIConfig
from .edgehostname import EdgeHostnames
from .errors import Error


class PAPI(EdgeHostnames):
    """Property Manager API; configure with ``PAPIConfig``."""

    config_class = PAPIConfig
    error_class = Error
