"""Email notifications about changes to network lists."""

from typing import Annotated

from pydantic import Field

from .. import validation
from ..client import BaseClient
from ..errors import OperationError
from ..models import APIModel
from ..session import Request
from .network_list import ListLink


class SubscriptionBody(APIModel):
    recipients: list[str] = Field(default_factory=list)
    unique_ids: list[str] = Field(default_factory=list)


class Subscription(APIModel):
    name: str = ""
    unique_id: str = ""
    type: str = ""
    description: str = ""
    element_count: int = 0
    read_only: bool = False
    sync_point: int = 0
    recipients: list[str] = Field(default_factory=list)
    links: dict[str, ListLink] = Field(default_factory=dict)


class GetNetworkListSubscriptionResponse(APIModel):
    subscriptions: list[Subscription] = Field(default_factory=list)
    links: dict[str, ListLink] = Field(default_factory=dict)


class NetworkListSubscriptionRequest(validation.RequestModel):
    """Recipients and the network lists they are (un)subscribed to."""

    recipients: Annotated[list[str], validation.rules(validation.required)] = Field(default_factory=list)
    unique_ids: Annotated[list[str], validation.rules(validation.required)] = Field(default_factory=list)

    def body(self) -> SubscriptionBody:
        return SubscriptionBody(recipients=self.recipients, unique_ids=self.unique_ids)


class GetNetworkListSubscriptionError(OperationError):
    operation = "get network list subscription"


class UpdateNetworkListSubscriptionError(OperationError):
    operation = "update network list subscription"


class RemoveNetworkListSubscriptionError(OperationError):
    operation = "remove network list subscription"


class NetworkListSubscription(BaseClient):
    """Subscribe recipients to network list change notifications."""

    def get_network_list_subscription(
        self, params: NetworkListSubscriptionRequest
    ) -> GetNetworkListSubscriptionResponse:
        """See: https://techdocs.akamai.com/network-lists/reference/post-notification-status"""
        self.log().debug("GetNetworkListSubscription")
        self._validate(GetNetworkListSubscriptionError, params)

        request = Request("POST", "/network-list/v2/notification/status")
        return self._call(
            GetNetworkListSubscriptionError,
            request,
            result=GetNetworkListSubscriptionResponse,
            body=params.body(),
        )

    def subscribe(self, params: NetworkListSubscriptionRequest) -> None:
        """See: https://techdocs.akamai.com/network-lists/reference/post-notification-subscribe"""
        self.log().debug("UpdateNetworkListSubscription")
        self._validate(UpdateNetworkListSubscriptionError, params)

        request = Request("POST", "/network-list/v2/notification/subscribe")
        self._call(UpdateNetworkListSubscriptionError, request, body=params.body())

    def unsubscribe(self, params: NetworkListSubscriptionRequest) -> None:
        """See: https://techdocs.akamai.com/network-lists/reference/post-notification-unsubscribe"""
        self.log().debug("RemoveNetworkListSubscription")
        self._validate(RemoveNetworkListSubscriptionError, params)

        request = Request("POST", "/network-list/v2/notification/unsubscribe")
        self._call(RemoveNetworkListSubscriptionError, request, body=params.body())
