"""
Session layer: the single point where requests leave the process.

Clients never talk to httpx directly. They hand a ``Request`` to a ``Session``
which resolves it against the configured host, attaches the signer and common
headers, sends it, and decodes successful JSON responses into the requested
type.
"""

import json
import logging
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Protocol, runtime_checkable

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from .config import Settings, settings as default_settings
from .errors import RequestBuildError, UnmarshalError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Request:
    """
    An API call before it is sent.

    Attributes:
        method: HTTP verb.
        path: Path relative to the API host, with identifiers already escaped.
        params: Query parameters.
        headers: Extra headers, e.g. schema-version markers.
    """

    method: str
    path: str
    params: dict[str, str] = field(default_factory=dict)
    headers: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Response:
    """Result of ``Session.exec``; ``data`` is None unless a JSON body was decoded."""

    status_code: int
    data: Any
    raw: httpx.Response


@runtime_checkable
class Session(Protocol):
    """Transport contract consumed by every API client."""

    def exec(self, request: Request, result: Any = None, body: Any = None) -> Response:
        """Send ``request`` with optional JSON ``body`` and decode a 2xx body into ``result``."""
        ...

    def log(self) -> logging.Logger:
        """Logger operations report through."""
        ...


@lru_cache(maxsize=256)
def _adapter(result: Any) -> TypeAdapter:
    return TypeAdapter(result)


def encode_body(body: Any) -> Any:
    """Convert pydantic payloads to JSON-ready data using wire names."""
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(body, (list, tuple)):
        return [encode_body(item) for item in body]
    return body


def _decodable(response: httpx.Response) -> bool:
    return (
        response.is_success
        and response.status_code not in (httpx.codes.NO_CONTENT, httpx.codes.RESET_CONTENT)
        and bool(response.content)
    )


def decode(response: httpx.Response, result: Any) -> Any:
    """Decode a successful JSON body into ``result``; None when there is nothing to decode."""
    if result is None or not _decodable(response):
        return None
    try:
        payload = json.loads(response.content)
    except ValueError:
        logger.debug("Response body is not JSON, skipping decode")
        return None
    try:
        return _adapter(result).validate_python(payload)
    except ValidationError as exc:
        raise UnmarshalError(f"unable to decode response body: {exc}") from exc


class HTTPSession:
    """
    httpx-backed Session.

    Args:
        settings: Connection settings (defaults to the environment-loaded ``settings``)
        client: Pre-built ``httpx.Client``; its base_url is used as the API host
        auth: Request signer, e.g. an EdgeGrid ``httpx.Auth`` implementation
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        client: httpx.Client | None = None,
        auth: httpx.Auth | None = None,
    ):
        self.settings = settings or default_settings
        self.auth = auth
        self._owns_client = client is None
        self._client = client or httpx.Client(
            base_url=self.settings.base_url,
            timeout=httpx.Timeout(self.settings.request_timeout),
            verify=self.settings.verify_tls,
        )
        self._logger = logger

    def __enter__(self) -> "HTTPSession":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying client if this session created it."""
        if self._owns_client:
            self._client.close()

    def log(self) -> logging.Logger:
        return self._logger

    def exec(self, request: Request, result: Any = None, body: Any = None) -> Response:
        params = dict(request.params)
        if self.settings.account_key:
            params.setdefault("accountSwitchKey", self.settings.account_key)
        headers = {"User-Agent": self.settings.user_agent, **request.headers}

        try:
            http_request = self._client.build_request(
                request.method,
                request.path,
                params=params,
                headers=headers,
                json=encode_body(body) if body is not None else None,
            )
        except (httpx.InvalidURL, TypeError, ValueError) as exc:
            raise RequestBuildError(f"failed to create request: {exc}") from exc

        self._logger.debug(f"API Request: {http_request.method} {http_request.url}")
        send_kwargs = {"auth": self.auth} if self.auth is not None else {}
        response = self._client.send(http_request, **send_kwargs)
        self._logger.debug(f"API Response: {response.status_code} {http_request.method} {http_request.url}")

        return Response(status_code=response.status_code, data=decode(response, result), raw=response)
