"""DataStream streams."""

from enum import Enum
from typing import Annotated, Any

from pydantic import Field

from .. import validation
from ..client import BaseClient
from ..errors import OperationError
from ..models import APIModel
from ..session import Request
from ..tools import path, query
from .properties import Property


class DelimiterType(str, Enum):
    SPACE = "SPACE"


class FormatType(str, Enum):
    STRUCTURED = "STRUCTURED"
    JSON = "JSON"


class Frequency(APIModel):
    time_in_sec: int


class StreamConfiguration(APIModel):
    delimiter: DelimiterType | None = None
    format: FormatType
    frequency: Frequency
    upload_file_prefix: str | None = None
    upload_file_suffix: str | None = None


class DataSetField(APIModel):
    dataset_field_id: int
    dataset_field_name: str = ""
    dataset_field_description: str = ""
    dataset_field_json_key: str = ""
    order: int | None = None


class DataSets(APIModel):
    dataset_group_name: str = ""
    dataset_group_description: str | None = None
    dataset_fields: list[DataSetField] = Field(default_factory=list)


class DetailedStreamVersion(APIModel):
    """A stream version as returned by GetStream."""

    activation_status: str = ""
    config: StreamConfiguration | None = None
    connectors: list[dict[str, Any]] = Field(default_factory=list)
    contract_id: str = ""
    created_by: str = ""
    created_date: str = ""
    datasets: list[DataSets] = Field(default_factory=list)
    email_ids: str | None = None
    group_id: int
    group_name: str = ""
    modified_by: str = ""
    modified_date: str = ""
    product_id: str = ""
    product_name: str = ""
    properties: list[Property] = Field(default_factory=list)
    stream_id: int
    stream_name: str
    stream_type: str = ""
    stream_version_id: int


class StreamError(APIModel):
    description: str = ""
    name: str = ""
    type: str = ""


class StreamDetails(APIModel):
    """A stream summary as returned by ListStreams."""

    activation_status: str = ""
    archived: bool = False
    connectors: str = ""
    contract_id: str = ""
    created_by: str = ""
    created_date: str = ""
    current_version_id: int | None = None
    errors: list[StreamError] = Field(default_factory=list)
    group_id: int
    group_name: str = ""
    properties: list[Property] = Field(default_factory=list)
    stream_id: int
    stream_name: str
    stream_type_name: str = ""
    stream_version_id: int | None = None


class DeleteStreamResponse(APIModel):
    message: str = ""


class GetStreamRequest(validation.RequestModel):
    stream_id: Annotated[int, validation.rules(validation.required)] = 0
    version: int | None = None


class DeleteStreamRequest(validation.RequestModel):
    stream_id: Annotated[int, validation.rules(validation.required)] = 0


class ListStreamsRequest(validation.RequestModel):
    """Every parameter is optional."""

    group_id: int | None = None


class GetStreamError(OperationError):
    operation = "get stream"


class DeleteStreamError(OperationError):
    operation = "delete stream"


class ListStreamsError(OperationError):
    operation = "list streams"


class Stream(BaseClient):
    """DataStream streams API."""

    def get_stream(self, params: GetStreamRequest) -> DetailedStreamVersion:
        """
        Get a stream, optionally at a specific version.

        See: https://techdocs.akamai.com/datastream2/v1/reference/get-stream
        """
        self.log().debug("GetStream")
        self._validate(GetStreamError, params)

        request = Request(
            "GET",
            path("/datastream-config-api/v1/log/streams/{}", params.stream_id),
            params=query(version=params.version),
        )
        return self._call(GetStreamError, request, result=DetailedStreamVersion)

    def delete_stream(self, params: DeleteStreamRequest) -> DeleteStreamResponse:
        """See: https://techdocs.akamai.com/datastream2/v1/reference/delete-stream"""
        self.log().debug("DeleteStream")
        self._validate(DeleteStreamError, params)

        request = Request("DELETE", path("/datastream-config-api/v1/log/streams/{}", params.stream_id))
        return self._call(DeleteStreamError, request, result=DeleteStreamResponse)

    def list_streams(self, params: ListStreamsRequest) -> list[StreamDetails]:
        """See: https://techdocs.akamai.com/datastream2/v1/reference/get-streams"""
        self.log().debug("ListStreams")
        self._validate(ListStreamsError, params)

        request = Request(
            "GET",
            "/datastream-config-api/v1/log/streams",
            params=query(groupId=params.group_id),
        )
        result = self._call(ListStreamsError, request, result=list[StreamDetails])
        return result if result is not None else []
