"""
Global Traffic Management (GTM) configuration API client.

See: https://techdocs.akamai.com/gtm/reference/api
"""

from .cidrmap import CidrMaps
from .errors import Error
from .geomap import GeoMaps


class GTM(CidrMaps, GeoMaps):
    """GTM API: CIDR and geographic maps of a GTM domain."""

    error_class = Error
