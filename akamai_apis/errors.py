"""
Error types shared by every API client.

Three kinds of failure reach callers, each wrapped in the failing operation's
own ``OperationError`` subclass:

- VALIDATION: the request was rejected locally, nothing was sent.
- REQUEST: the request could not be built, sent, or its response decoded.
- API: the server answered with an unexpected status; the cause is an ``APIError``
  carrying the problem-details body.

Use ``is_error`` to classify an error without inspecting messages.
"""

import json
import logging
from enum import Enum
from typing import Any, ClassVar

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    """Classification tag carried by every OperationError."""

    VALIDATION = "struct validation"
    REQUEST = "request failed"
    API = "API error"


class NotFoundError(Exception):
    """Sentinel matched by any APIError with status 404."""


class SessionError(Exception):
    """Raised by a session when a request cannot be built or its response decoded."""


class RequestBuildError(SessionError):
    """The HTTP request could not be constructed."""


class UnmarshalError(SessionError):
    """A successful response body did not match the expected type."""


# ============================================
# Remote API errors
# ============================================

class Problem(BaseModel):
    """Problem-details body returned by Akamai APIs on failure."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    type: str = ""
    title: str = ""
    detail: str = ""
    instance: str = ""


class APIError(Exception):
    """
    Typed error built from a failed HTTP response.

    Problem fields are readable as attributes (``err.title``, ``err.detail``)
    and the HTTP status is always kept in ``status_code``, even when the body
    could not be decoded.
    """

    problem_model: ClassVar[type[Problem]] = Problem

    def __init__(self, status_code: int, problem: Problem | None = None, **fields: Any):
        self.status_code = status_code
        self.problem = problem if problem is not None else self.problem_model(**fields)
        super().__init__(self.render())

    def __getattr__(self, name: str) -> Any:
        if name == "problem":
            raise AttributeError(name)
        try:
            return getattr(self.problem, name)
        except AttributeError:
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}") from None

    @classmethod
    def from_response(cls, response: httpx.Response) -> "APIError":
        """Decode a problem-details body; non-JSON bodies become the title."""
        try:
            problem = cls.problem_model.model_validate_json(response.content)
        except ValidationError as exc:
            logger.error("could not unmarshal API error: %s", exc.errors()[0]["msg"])
            problem = cls.problem_model(title=response.text)
        return cls(response.status_code, problem)

    def render(self) -> str:
        fields = self.problem.model_dump(mode="json", by_alias=True, exclude_defaults=True)
        return f"API error: \n{json.dumps(fields, indent=2, sort_keys=True)}"

    def matches(self, target: object) -> bool:
        """Equality used by ``is_error``: same status and same rendered message."""
        if target is NotFoundError or isinstance(target, NotFoundError):
            return self.status_code == httpx.codes.NOT_FOUND
        if not isinstance(target, APIError):
            return False
        if self is target:
            return True
        return self.status_code == target.status_code and self.render() == target.render()


# ============================================
# Operation errors
# ============================================

class OperationError(Exception):
    """
    Base class for errors raised by resource operations.

    Subclasses set ``operation`` to a stable name, e.g. ``"list deactivations"``,
    and act as the sentinel callers catch.
    """

    operation: ClassVar[str] = "operation"

    def __init__(self, kind: ErrorKind, reason: BaseException | str):
        self.kind = kind
        self.reason = reason
        if kind is ErrorKind.API:
            message = f"{self.operation}: {reason}"
        else:
            message = f"{self.operation}: {kind.value}: {reason}"
        super().__init__(message)

    @property
    def status_code(self) -> int | None:
        if isinstance(self.reason, APIError):
            return self.reason.status_code
        return None


def _matches(err: BaseException, target: object) -> bool:
    if err is target:
        return True
    if isinstance(target, ErrorKind):
        return getattr(err, "kind", None) is target
    if isinstance(target, type) and isinstance(err, target):
        return True
    matches = getattr(err, "matches", None)
    return callable(matches) and matches(target)


def is_error(err: BaseException | None, target: object) -> bool:
    """
    Report whether ``err`` or anything in its ``__cause__`` chain matches ``target``.

    ``target`` may be an exception instance, an exception class, an ``ErrorKind``,
    or an ``APIError`` to compare by status and message.
    """
    seen: set[int] = set()
    while err is not None and id(err) not in seen:
        if _matches(err, target):
            return True
        seen.add(id(err))
        err = err.__cause__
    return False


__all__ = [
    "APIError",
    "ErrorKind",
    "NotFoundError",
    "OperationError",
    "Problem",
    "RequestBuildError",
    "SessionError",
    "UnmarshalError",
    "is_error",
]
