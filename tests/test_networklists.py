"""Tests for the Network Lists client."""

import pytest

from akamai_apis import ClientConfig, ErrorKind, NotFoundError, is_error
from akamai_apis.networklists import (
    CreateActivationsRequest,
    CreateNetworkListError,
    CreateNetworkListRequest,
    GetActivationsError,
    GetActivationsRequest,
    GetNetworkListError,
    GetNetworkListRequest,
    GetNetworkListsError,
    GetNetworkListsRequest,
    Network,
    NetworkLists,
    NetworkListSubscriptionRequest,
    NetworkListType,
    RemoveNetworkListError,
    RemoveNetworkListRequest,
    UpdateNetworkListDescriptionError,
    UpdateNetworkListDescriptionRequest,
    UpdateNetworkListSubscriptionError,
)

NETWORK_LIST = {
    "name": "Test IP list",
    "uniqueId": "86093_AGEOLIST",
    "type": "IP",
    "description": "Test description",
    "elementCount": 2,
    "list": ["10.1.8.23", "10.3.5.0/24"],
    "readOnly": False,
    "shared": False,
    "syncPoint": 22,
    "links": {
        "activateInProduction": {
            "href": "/network-list/v2/network-lists/86093_AGEOLIST/environments/PRODUCTION/activate",
            "method": "POST",
        },
    },
}

ACTIVATION = {
    "activationId": 12345,
    "activationComments": "Activating my network list",
    "activationStatus": "PENDING_ACTIVATION",
    "syncPoint": 5,
    "uniqueId": "86093_AGEOLIST",
    "fast": True,
    "dispatchCount": 1,
    "links": {"appUrl": {"href": "/network-list-v2/network-lists/activations/12345"}},
}


@pytest.fixture
def client(session):
    return NetworkLists(session)


def test_default_config(client):
    """Test that Network Lists uses the shared config, which carries no prefix option."""
    assert type(client.config) is ClientConfig
    assert not hasattr(client.config, "use_prefixes")


def test_get_network_lists(api, client):
    """Test the list filters and the links of the response."""
    api.respond(200, {"networkLists": [NETWORK_LIST], "links": {"create": {"href": "/network-list/v2/network-lists/", "method": "POST"}}})

    result = client.get_network_lists(GetNetworkListsRequest(search="Test", type=NetworkListType.IP, include_elements=True))

    assert api.last["path"] == "/network-list/v2/network-lists"
    assert api.last["query"] == {"search": "Test", "listType": "IP", "includeElements": "true"}
    assert result.network_lists[0].elements == ["10.1.8.23", "10.3.5.0/24"]
    assert result.network_lists[0].links.activate_in_production.method == "POST"
    assert result.links["create"].href == "/network-list/v2/network-lists/"


def test_get_network_lists_rejects_type(api, client):
    """Test that an unknown list type is rejected before any request."""
    with pytest.raises(GetNetworkListsError) as exc_info:
        client.get_network_lists(GetNetworkListsRequest(type="ASN"))

    assert exc_info.value.reason.errors == {"type": "must be a valid value"}
    assert api.requests == []


def test_get_network_list(api, client):
    """Test that one list decodes with its elements."""
    api.respond(200, NETWORK_LIST)

    result = client.get_network_list(GetNetworkListRequest(unique_id="86093_AGEOLIST"))

    assert api.last["path"] == "/network-list/v2/network-lists/86093_AGEOLIST"
    assert result.type == NetworkListType.IP
    assert result.sync_point == 22


def test_get_network_list_unknown_type(api, client):
    """Test that a list type this client does not know still decodes."""
    api.respond(200, {**NETWORK_LIST, "type": "ASN"})

    result = client.get_network_list(GetNetworkListRequest(unique_id="86093_AGEOLIST"))

    assert result.type == "ASN"


def test_get_network_list_not_found(api, client):
    """Test that a missing list matches NotFoundError."""
    api.respond(404, {"title": "Not Found", "detail": "Network list 1_X not found"})

    with pytest.raises(GetNetworkListError) as exc_info:
        client.get_network_list(GetNetworkListRequest(unique_id="1_X"))

    assert is_error(exc_info.value, NotFoundError)


def test_create_network_list(api, client):
    """Test that the list is POSTed with its elements under ``list``."""
    api.respond(201, NETWORK_LIST)

    result = client.create_network_list(CreateNetworkListRequest(
        name="Test IP list",
        type="IP",
        description="Test description",
        elements=["10.1.8.23", "10.3.5.0/24"],
    ))

    assert api.last["method"] == "POST"
    assert api.last["json"] == {
        "name": "Test IP list",
        "type": "IP",
        "description": "Test description",
        "list": ["10.1.8.23", "10.3.5.0/24"],
    }
    assert result.unique_id == "86093_AGEOLIST"


def test_create_network_list_validation(api, client):
    """Test that name and type are checked together."""
    with pytest.raises(CreateNetworkListError) as exc_info:
        client.create_network_list(CreateNetworkListRequest(name="", type="ASN"))

    assert exc_info.value.reason.errors == {"name": "cannot be blank", "type": "must be a valid value"}


def test_create_network_list_server_error(api, client):
    """Test that a create failure is an API error."""
    api.respond(500, {"title": "Internal Server Error"})

    with pytest.raises(CreateNetworkListError) as exc_info:
        client.create_network_list(CreateNetworkListRequest(name="Test", type=NetworkListType.GEO, elements=["US"]))

    assert exc_info.value.kind is ErrorKind.API


def test_remove_network_list(api, client):
    """Test that removal sends a DELETE and decodes the status."""
    api.respond(200, {"status": 200, "uniqueId": "86093_AGEOLIST", "syncPoint": 0})

    result = client.remove_network_list(RemoveNetworkListRequest(unique_id="86093_AGEOLIST"))

    assert api.last["method"] == "DELETE"
    assert result.unique_id == "86093_AGEOLIST"


def test_remove_network_list_validation(client):
    """Test that a blank unique ID is rejected."""
    with pytest.raises(RemoveNetworkListError):
        client.remove_network_list(RemoveNetworkListRequest(unique_id=""))


def test_update_network_list_description(api, client):
    """Test that the details are PUT to the details path."""
    api.respond(200)

    client.update_network_list_description(UpdateNetworkListDescriptionRequest(
        unique_id="86093_AGEOLIST",
        name="Renamed",
        description="New description",
    ))

    assert api.last["method"] == "PUT"
    assert api.last["path"] == "/network-list/v2/network-lists/86093_AGEOLIST/details"
    assert api.last["json"] == {"name": "Renamed", "description": "New description"}


def test_update_network_list_description_validation(client):
    """Test that a blank name is rejected."""
    with pytest.raises(UpdateNetworkListDescriptionError) as exc_info:
        client.update_network_list_description(UpdateNetworkListDescriptionRequest(unique_id="86093_AGEOLIST", name=""))

    assert exc_info.value.reason.errors == {"name": "cannot be blank"}


@pytest.mark.parametrize("network", [Network.STAGING, "PRODUCTION"])
def test_get_activations(api, client, network):
    """Test the status path for enum and string networks."""
    api.respond(200, ACTIVATION)

    result = client.get_activations(GetActivationsRequest(unique_id="86093_AGEOLIST", network=network))

    assert api.last["method"] == "GET"
    assert api.last["path"].startswith("/network-list/v2/network-lists/86093_AGEOLIST/environments/")
    assert api.last["path"].endswith("/status")
    assert result.activation_status == "PENDING_ACTIVATION"
    assert result.links.app_url.href == "/network-list-v2/network-lists/activations/12345"


def test_get_activations_rejects_network(api, client):
    """Test that an unknown network is rejected before any request."""
    with pytest.raises(GetActivationsError) as exc_info:
        client.get_activations(GetActivationsRequest(unique_id="86093_AGEOLIST", network="QA"))

    assert exc_info.value.reason.errors == {"network": "must be a valid value"}
    assert api.requests == []


def test_create_activations(api, client):
    """Test that activation POSTs the comments and recipients."""
    api.respond(200, ACTIVATION)

    result = client.create_activations(CreateActivationsRequest(
        unique_id="86093_AGEOLIST",
        network=Network.PRODUCTION,
        comments="Activating my network list",
        notification_recipients=["user@example.com"],
    ))

    assert api.last["method"] == "POST"
    assert api.last["path"] == "/network-list/v2/network-lists/86093_AGEOLIST/environments/PRODUCTION/activate"
    assert api.last["json"] == {
        "comments": "Activating my network list",
        "notificationRecipients": ["user@example.com"],
    }
    assert result.activation_id == 12345


def test_get_network_list_subscription(api, client):
    """Test that subscriptions decode from the status call."""
    api.respond(200, {"subscriptions": [{"name": "Test IP list", "uniqueId": "86093_AGEOLIST", "recipients": ["a@b.c"]}]})

    result = client.get_network_list_subscription(
        NetworkListSubscriptionRequest(recipients=["a@b.c"], unique_ids=["86093_AGEOLIST"])
    )

    assert api.last["method"] == "POST"
    assert api.last["path"] == "/network-list/v2/notification/status"
    assert api.last["json"] == {"recipients": ["a@b.c"], "uniqueIds": ["86093_AGEOLIST"]}
    assert result.subscriptions[0].recipients == ["a@b.c"]


@pytest.mark.parametrize("operation, action", [("subscribe", "subscribe"), ("unsubscribe", "unsubscribe")])
def test_subscribe_and_unsubscribe(api, client, operation, action):
    """Test that both actions POST the recipients and list IDs."""
    api.respond(200)

    getattr(client, operation)(NetworkListSubscriptionRequest(recipients=["a@b.c"], unique_ids=["86093_AGEOLIST"]))

    assert api.last["method"] == "POST"
    assert api.last["path"] == f"/network-list/v2/notification/{action}"
    assert api.last["json"] == {"recipients": ["a@b.c"], "uniqueIds": ["86093_AGEOLIST"]}


def test_subscribe_validation(client):
    """Test that recipients and list IDs are both required."""
    with pytest.raises(UpdateNetworkListSubscriptionError) as exc_info:
        client.subscribe(NetworkListSubscriptionRequest())

    assert exc_info.value.reason.errors == {"recipients": "cannot be blank", "unique_ids": "cannot be blank"}
