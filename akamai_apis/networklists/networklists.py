"""
Network Lists API client.

See: https://techdocs.akamai.com/network-lists/reference/api
"""

from .activations import Activations
from .description import NetworkListDescription
from .network_list import NetworkList
from .subscription import NetworkListSubscription


class NetworkLists(Activations, NetworkList, NetworkListDescription, NetworkListSubscription):
    """Network Lists API: lists, descriptions, activations and notification subscriptions."""
