"""
Cloudlets (v2) API client.

See: https://techdocs.akamai.com/cloudlets/v2/reference/api
"""

from .policy_property import PolicyProperty


class Cloudlets(PolicyProperty):
    """Cloudlets API."""
