"""Types and headers shared by GTM resources."""

from pydantic import Field

from ..models import APIModel, Link

SCHEMA_VERSION = "1.4"


def version_headers(version: str = SCHEMA_VERSION) -> dict[str, str]:
    """GTM selects the resource schema from the media type."""
    media_type = f"application/vnd.config-gtm.v{version}+json"
    return {"Accept": media_type, "Content-Type": media_type}


class DatacenterBase(APIModel):
    nickname: str = ""
    datacenter_id: int = 0


class ResponseStatus(APIModel):
    """Change status returned by every GTM write."""

    change_id: str = ""
    links: list[Link] = Field(default_factory=list)
    message: str = ""
    passing_validation: bool = False
    propagation_status: str = ""
    propagation_status_date: str = ""


class ResponseBody(APIModel):
    status: ResponseStatus | None = None
