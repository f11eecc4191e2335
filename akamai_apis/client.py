"""Base class shared by every API domain client."""

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, ClassVar, Iterable, Mapping

import httpx
from pydantic import BaseModel

from . import validation
from .errors import APIError, ErrorKind, OperationError, SessionError
from .session import Request, Response, Session, decode
from .validation import ValidationErrors


@dataclass(frozen=True)
class ClientConfig:
    """
    Configuration fixed when a client is built.

    Attributes:
        headers: Headers added to every request made by the client. A read-only
            copy is kept, so later changes to the mapping passed in are not seen.
    """

    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))


class BaseClient:
    """
    Concrete clients aggregate one mixin per resource group on top of this class.

    The session and config are never reassigned after construction, so one
    client instance may be shared between threads.
    """

    error_class: ClassVar[type[APIError]] = APIError
    config_class: ClassVar[type[ClientConfig]] = ClientConfig

    def __init__(self, session: Session, config: ClientConfig | None = None):
        self.session = session
        self.config = config if config is not None else self.config_class()

    def log(self):
        return self.session.log()

    def error(self, response: Response) -> APIError:
        """Map a failed response to this domain's APIError."""
        return self.error_class.from_response(response.raw)

    def _validate(self, error: type[OperationError], params: BaseModel) -> None:
        try:
            validation.validate(params)
        except ValidationErrors as exc:
            raise error(ErrorKind.VALIDATION, exc) from exc

    def _require(self, error: type[OperationError], **fields: Any) -> None:
        """Validate that scalar operation arguments are not blank."""
        try:
            validation.require(**fields)
        except ValidationErrors as exc:
            raise error(ErrorKind.VALIDATION, exc) from exc

    def _call(
        self,
        error: type[OperationError],
        request: Request,
        *,
        expect: Iterable[int] = (httpx.codes.OK,),
        result: Any = None,
        body: Any = None,
    ) -> Any:
        """
        Execute ``request`` and decode the body into ``result``.

        The status is checked against ``expect`` before anything is decoded, so
        an unexpected status is always reported as an API error carrying it.
        """
        if self.config.headers:
            request = replace(request, headers={**self.config.headers, **request.headers})

        try:
            response = self.session.exec(request, body=body)
        except (httpx.HTTPError, SessionError) as exc:
            raise error(ErrorKind.REQUEST, exc) from exc

        if response.status_code not in tuple(expect):
            api_error = self.error(response)
            raise error(ErrorKind.API, api_error) from api_error

        try:
            return decode(response.raw, result)
        except SessionError as exc:
            raise error(ErrorKind.REQUEST, exc) from exc
