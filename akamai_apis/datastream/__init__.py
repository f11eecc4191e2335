"""DataStream API client."""

from .activation import (
    ActivateStreamError,
    ActivateStreamRequest,
    ActivateStreamResponse,
    Activation,
    ActivationHistoryEntry,
    DeactivateStreamError,
    DeactivateStreamRequest,
    DeactivateStreamResponse,
    GetActivationHistoryError,
    GetActivationHistoryRequest,
    StreamVersionKey,
)
from .ds import DataStream
from .properties import (
    GetPropertiesByGroupError,
    GetPropertiesByGroupRequest,
    GetPropertiesError,
    GetPropertiesRequest,
    Properties,
    Property,
)
from .stream import (
    DataSetField,
    DataSets,
    DelimiterType,
    DeleteStreamError,
    DeleteStreamRequest,
    DeleteStreamResponse,
    DetailedStreamVersion,
    FormatType,
    Frequency,
    GetStreamError,
    GetStreamRequest,
    ListStreamsError,
    ListStreamsRequest,
    Stream,
    StreamConfiguration,
    StreamDetails,
    StreamError,
)

__all__ = [
    "ActivateStreamError",
    "ActivateStreamRequest",
    "ActivateStreamResponse",
    "Activation",
    "ActivationHistoryEntry",
    "DataSetField",
    "DataSets",
    "DataStream",
    "DeactivateStreamError",
    "DeactivateStreamRequest",
    "DeactivateStreamResponse",
    "DelimiterType",
    "DeleteStreamError",
    "DeleteStreamRequest",
    "DeleteStreamResponse",
    "DetailedStreamVersion",
    "FormatType",
    "Frequency",
    "GetActivationHistoryError",
    "GetActivationHistoryRequest",
    "GetPropertiesByGroupError",
    "GetPropertiesByGroupRequest",
    "GetPropertiesError",
    "GetPropertiesRequest",
    "GetStreamError",
    "GetStreamRequest",
    "ListStreamsError",
    "ListStreamsRequest",
    "Properties",
    "Property",
    "Stream",
    "StreamConfiguration",
    "StreamDetails",
    "StreamError",
    "StreamVersionKey",
]
