"""
Cloud Wrapper API client.

See: https://techdocs.akamai.com/cloud-wrapper/reference/api
"""

from .configurations import Configurations
from .errors import Error
from .locations import Locations


class CloudWrapper(Configurations, Locations):
    """Cloud Wrapper API: locations and configurations."""

    error_class = Error
