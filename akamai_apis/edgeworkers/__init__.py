"""EdgeWorkers API client."""

from .activations import (
    ActivateVersion,
    ActivateVersionError,
    ActivateVersionRequest,
    Activation,
    ActivationNetwork,
    Activations,
    CancelActivationError,
    CancelActivationRequest,
    GetActivationError,
    GetActivationRequest,
    ListActivationsError,
    ListActivationsRequest,
    ListActivationsResponse,
)
from .deactivations import (
    DeactivateVersion,
    DeactivateVersionError,
    DeactivateVersionRequest,
    Deactivation,
    Deactivations,
    GetDeactivationError,
    GetDeactivationRequest,
    ListDeactivationsError,
    ListDeactivationsRequest,
    ListDeactivationsResponse,
)
from .edgeworkers import EdgeWorkers

__all__ = [
    "ActivateVersion",
    "ActivateVersionError",
    "ActivateVersionRequest",
    "Activation",
    "ActivationNetwork",
    "Activations",
    "CancelActivationError",
    "CancelActivationRequest",
    "DeactivateVersion",
    "DeactivateVersionError",
    "DeactivateVersionRequest",
    "Deactivation",
    "Deactivations",
    "EdgeWorkers",
    "GetActivationError",
    "GetActivationRequest",
    "GetDeactivationError",
    "GetDeactivationRequest",
    "ListActivationsError",
    "ListActivationsRequest",
    "ListActivationsResponse",
    "ListDeactivationsError",
    "ListDeactivationsRequest",
    "ListDeactivationsResponse",
]
