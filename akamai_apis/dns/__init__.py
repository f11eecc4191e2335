"""Edge DNS API client."""

from .dns import DNS
from .records import (
    RECORD_TYPE_AKAMAICDN,
    RECORD_TYPES,
    CreateRecordError,
    DeleteRecordError,
    GetRecordError,
    RecordBody,
    Records,
    UpdateRecordError,
)
from .zones import (
    GetZoneError,
    ListMetadata,
    ListZonesError,
    ListZonesRequest,
    ZoneListResponse,
    ZoneResponse,
    Zones,
)

__all__ = [
    "DNS",
    "RECORD_TYPES",
    "RECORD_TYPE_AKAMAICDN",
    "CreateRecordError",
    "DeleteRecordError",
    "GetRecordError",
    "GetZoneError",
    "ListMetadata",
    "ListZonesError",
    "ListZonesRequest",
    "RecordBody",
    "Records",
    "UpdateRecordError",
    "ZoneListResponse",
    "ZoneResponse",
    "Zones",
]
