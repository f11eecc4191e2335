"""Network Lists API client."""

from .activations import (
    ActivationBody,
    ActivationLinks,
    Activations,
    ActivationStatus,
    CreateActivationsError,
    CreateActivationsRequest,
    GetActivationsError,
    GetActivationsRequest,
    Network,
)
from .description import (
    NetworkListDescription,
    NetworkListDetails,
    UpdateNetworkListDescriptionError,
    UpdateNetworkListDescriptionRequest,
)
from .network_list import (
    CreateNetworkListError,
    CreateNetworkListRequest,
    GetNetworkListError,
    GetNetworkListRequest,
    GetNetworkListsError,
    GetNetworkListsRequest,
    GetNetworkListsResponse,
    ListLink,
    NetworkList,
    NetworkListBody,
    NetworkListLinks,
    NetworkListResponse,
    NetworkListType,
    RemoveNetworkListError,
    RemoveNetworkListRequest,
    RemoveNetworkListResponse,
)
from .networklists import NetworkLists
from .subscription import (
    GetNetworkListSubscriptionError,
    GetNetworkListSubscriptionResponse,
    NetworkListSubscription,
    NetworkListSubscriptionRequest,
    RemoveNetworkListSubscriptionError,
    Subscription,
    SubscriptionBody,
    UpdateNetworkListSubscriptionError,
)

__all__ = [
    "ActivationBody",
    "ActivationLinks",
    "ActivationStatus",
    "Activations",
    "CreateActivationsError",
    "CreateActivationsRequest",
    "CreateNetworkListError",
    "CreateNetworkListRequest",
    "GetActivationsError",
    "GetActivationsRequest",
    "GetNetworkListError",
    "GetNetworkListRequest",
    "GetNetworkListSubscriptionError",
    "GetNetworkListSubscriptionResponse",
    "GetNetworkListsError",
    "GetNetworkListsRequest",
    "GetNetworkListsResponse",
    "ListLink",
    "Network",
    "NetworkList",
    "NetworkListBody",
    "NetworkListDescription",
    "NetworkListDetails",
    "NetworkListLinks",
    "NetworkListResponse",
    "NetworkListSubscription",
    "NetworkListSubscriptionRequest",
    "NetworkListType",
    "NetworkLists",
    "RemoveNetworkListError",
    "RemoveNetworkListRequest",
    "RemoveNetworkListResponse",
    "RemoveNetworkListSubscriptionError",
    "Subscription",
    "SubscriptionBody",
    "UpdateNetworkListDescriptionError",
    "UpdateNetworkListDescriptionRequest",
]
