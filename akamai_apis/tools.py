"""Helpers for building request paths and reading location links."""

from enum import Enum
from typing import Any, Iterable
from urllib.parse import quote, urlparse


class InvalidLocationError(ValueError):
    """A location link returned by the API could not be parsed."""


def path(template: str, *segments: Any) -> str:
    """Interpolate ``segments`` into ``template``, escaping each one as a single path segment."""
    return template.format(*(quote(str(_plain(segment)), safe="") for segment in segments))


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def join(values: Iterable[Any] | None) -> str | None:
    """Comma-join list query values; empty lists are omitted."""
    values = [str(_plain(value)) for value in values or ()]
    return ",".join(values) if values else None


def query(**params: Any) -> dict[str, str]:
    """Drop unset parameters and render booleans the way the APIs expect."""
    rendered: dict[str, str] = {}
    for key, value in params.items():
        if value is None or value == "":
            continue
        value = _plain(value)
        if isinstance(value, bool):
            value = "true" if value else "false"
        rendered[key] = str(value)
    return rendered


def fetch_id_from_location(location: str) -> str:
    """
    Return the last path segment of a location link.

    ``/papi/v1/edgehostnames/ehn_123?contractId=ctr_1`` -> ``ehn_123``
    """
    parsed = urlparse(location)
    segments = [segment for segment in parsed.path.split("/") if segment]
    if not location or not segments:
        raise InvalidLocationError(f"location has no ID: {location!r}")
    return segments[-1]
