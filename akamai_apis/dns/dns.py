"""
Edge DNS API client.

See: https://techdocs.akamai.com/edge-dns/reference/edge-dns-api
"""

from .records import Records
from .zones import Zones


class DNS(Records, Zones):
    """Edge DNS API: zones and record sets."""
