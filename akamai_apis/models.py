"""Base models shared by API payloads."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class APIModel(BaseModel):
    """JSON payload with camelCase wire names and snake_case attributes."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore", loc_by_alias=False
    )


class Link(APIModel):
    """Hypermedia link attached to many responses."""

    rel: str = Field(..., description="Link relation")
    href: str = Field(..., description="Target path or URL")
