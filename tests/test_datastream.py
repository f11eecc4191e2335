"""Tests for the DataStream client."""

import pytest

from akamai_apis import ErrorKind, NotFoundError, is_error
from akamai_apis.datastream import (
    ActivateStreamError,
    ActivateStreamRequest,
    DataStream,
    DeactivateStreamRequest,
    DeleteStreamRequest,
    FormatType,
    GetActivationHistoryRequest,
    GetPropertiesByGroupRequest,
    GetPropertiesError,
    GetPropertiesRequest,
    GetStreamError,
    GetStreamRequest,
    ListStreamsError,
    ListStreamsRequest,
)

STREAM_VERSION_KEY = {"streamVersionKey": {"streamId": 7050, "streamVersionId": 2}}

PROPERTY = {
    "propertyId": 382631,
    "propertyName": "customp.akamai.com",
    "productId": "Ion_Standard",
    "productName": "Ion Standard",
    "hostnames": ["customp.akamaize.net", "customp.akamaized-staging.net"],
}

STREAM = {
    "streamId": 7050,
    "streamVersionId": 2,
    "streamName": "ds2-sample-name",
    "groupId": 1234,
    "contractId": "2-AB1234",
    "activationStatus": "DEACTIVATED",
    "config": {
        "delimiter": "SPACE",
        "format": "STRUCTURED",
        "frequency": {"timeInSec": 30},
        "uploadFilePrefix": "ak",
        "uploadFileSuffix": "ds",
    },
    "connectors": [{"connectorType": "S3", "bucket": "datastream.akamai.com", "path": "log/edgelogs"}],
    "datasets": [
        {
            "datasetGroupName": "Log information",
            "datasetFields": [{"datasetFieldId": 1000, "datasetFieldName": "CP code", "order": 0}],
        },
    ],
    "properties": [PROPERTY],
}

STREAM_SUMMARY = {
    "streamId": 2,
    "streamName": "Stream1",
    "streamVersionId": 2,
    "createdBy": "user1",
    "createdDate": "14-07-2020 07:07:40 GMT",
    "currentVersionId": 2,
    "archived": False,
    "activationStatus": "DEACTIVATED",
    "groupId": 1234,
    "groupName": "Default Group",
    "contractId": "1-ABCDE",
    "connectors": "S3-S1",
    "streamTypeName": "Logs - Raw",
    "properties": [{"propertyId": 13371337, "propertyName": "property_name_1"}],
    "errors": [{"name": "ACTIVATION_ERROR", "type": "ACTIVATION_ERROR", "description": "Contact technical support."}],
}


@pytest.fixture
def client(session):
    return DataStream(session)


def test_activate_stream(api, client):
    """Test that activation PUTs to the activate path and decodes the version key."""
    api.respond(202, STREAM_VERSION_KEY)

    result = client.activate_stream(ActivateStreamRequest(stream_id=7050))

    assert api.last["method"] == "PUT"
    assert api.last["path"] == "/datastream-config-api/v1/log/streams/7050/activate"
    assert result.stream_version_key.stream_version_id == 2


@pytest.mark.parametrize(
    "status_code, body",
    [
        (400, {"type": "bad-request", "title": "Bad Request", "detail": "bad request", "statusCode": 400}),
        (500, {"type": "internal-error", "title": "Internal Server Error"}),
    ],
)
def test_activate_stream_errors(api, client, status_code, body):
    """Test that failed activations keep their status code."""
    api.respond(status_code, body)

    with pytest.raises(ActivateStreamError) as exc_info:
        client.activate_stream(ActivateStreamRequest(stream_id=7050))

    assert exc_info.value.kind is ErrorKind.API
    assert exc_info.value.status_code == status_code


def test_activate_stream_validation(api, client):
    """Test that a blank stream ID is rejected before any request."""
    with pytest.raises(ActivateStreamError) as exc_info:
        client.activate_stream(ActivateStreamRequest(stream_id=0))

    assert str(exc_info.value) == "activate stream: struct validation: stream_id: cannot be blank."
    assert api.requests == []


def test_deactivate_stream(api, client):
    """Test that deactivation PUTs to the deactivate path."""
    api.respond(202, STREAM_VERSION_KEY)

    result = client.deactivate_stream(DeactivateStreamRequest(stream_id=7050))

    assert api.last["path"] == "/datastream-config-api/v1/log/streams/7050/deactivate"
    assert result.stream_version_key.stream_id == 7050


def test_get_activation_history(api, client):
    """Test that the history decodes as a list of entries."""
    api.respond(200, [
        {
            "createdBy": "user1",
            "createdDate": "16-01-2020 11:07:12 GMT",
            "isActive": False,
            "streamId": 7050,
            "streamVersionId": 2,
        },
    ])

    result = client.get_activation_history(GetActivationHistoryRequest(stream_id=7050))

    assert api.last["path"] == "/datastream-config-api/v1/log/streams/7050/activationHistory"
    assert result[0].created_by == "user1"
    assert result[0].is_active is False


def test_get_properties(api, client):
    """Test the product and group path of the properties lookup."""
    api.respond(200, [PROPERTY])

    result = client.get_properties(GetPropertiesRequest(group_id=12345, product_id="Ion_Standard"))

    assert api.last["path"] == "/datastream-config-api/v1/log/properties/product/Ion_Standard/group/12345"
    assert result[0].hostnames == PROPERTY["hostnames"]


def test_get_properties_validation(client):
    """Test that group and product are both required."""
    with pytest.raises(GetPropertiesError) as exc_info:
        client.get_properties(GetPropertiesRequest(group_id=0, product_id=""))

    assert exc_info.value.reason.errors == {"group_id": "cannot be blank", "product_id": "cannot be blank"}


def test_get_properties_by_group(api, client):
    """Test the group-only properties lookup."""
    api.respond(200, [PROPERTY])

    result = client.get_properties_by_group(GetPropertiesByGroupRequest(group_id=12345))

    assert api.last["path"] == "/datastream-config-api/v1/log/properties/group/12345"
    assert result[0].property_name == "customp.akamai.com"


@pytest.mark.parametrize("version, query", [(None, {}), (2, {"version": "2"})])
def test_get_stream(api, client, version, query):
    """Test that a stream decodes with its connectors."""
    api.respond(200, STREAM)

    result = client.get_stream(GetStreamRequest(stream_id=7050, version=version))

    assert api.last["path"] == "/datastream-config-api/v1/log/streams/7050"
    assert api.last["query"] == query
    assert result.config.format is FormatType.STRUCTURED
    assert result.config.frequency.time_in_sec == 30
    assert result.datasets[0].dataset_fields[0].dataset_field_id == 1000
    assert result.connectors[0]["connectorType"] == "S3"


def test_get_stream_not_found(api, client):
    """Test that a missing stream matches NotFoundError."""
    api.respond(404, {"title": "Not Found", "detail": "Stream does not exist"})

    with pytest.raises(GetStreamError) as exc_info:
        client.get_stream(GetStreamRequest(stream_id=7050))

    assert is_error(exc_info.value, NotFoundError)


def test_delete_stream(api, client):
    """Test that deleting a stream sends a DELETE."""
    api.respond(200, {"message": "Success"})

    result = client.delete_stream(DeleteStreamRequest(stream_id=7050))

    assert api.last["method"] == "DELETE"
    assert api.last["path"] == "/datastream-config-api/v1/log/streams/7050"
    assert result.message == "Success"


@pytest.mark.parametrize("group_id, query", [(None, {}), (1234, {"groupId": "1234"})])
def test_list_streams(api, client, group_id, query):
    """Test the optional group filter of the stream list."""
    api.respond(200, [STREAM_SUMMARY])

    result = client.list_streams(ListStreamsRequest(group_id=group_id))

    assert api.last["path"] == "/datastream-config-api/v1/log/streams"
    assert api.last["query"] == query
    assert result[0].errors[0].name == "ACTIVATION_ERROR"
    assert result[0].properties[0].property_id == 13371337


def test_list_streams_server_error(api, client):
    """Test that a list failure is an API error."""
    api.respond(500, {"title": "Internal Server Error"})

    with pytest.raises(ListStreamsError):
        client.list_streams(ListStreamsRequest())
