"""
EdgeWorkers API client.

See: https://techdocs.akamai.com/edgeworkers/reference/api
"""

from .activations import Activations
from .deactivations import Deactivations


class EdgeWorkers(Activations, Deactivations):
    """EdgeWorkers API: activations and deactivations of EdgeWorker versions."""
