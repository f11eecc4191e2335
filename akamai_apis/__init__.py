"""Typed clients for Akamai REST APIs."""

import logging

from .client import BaseClient, ClientConfig
from .config import Settings, settings
from .errors import (
    APIError,
    ErrorKind,
    NotFoundError,
    OperationError,
    RequestBuildError,
    SessionError,
    UnmarshalError,
    is_error,
)
from .session import HTTPSession, Request, Response, Session
from .validation import ValidationErrors

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())


__all__ = [
    "APIError",
    "BaseClient",
    "ClientConfig",
    "ErrorKind",
    "HTTPSession",
    "NotFoundError",
    "OperationError",
    "Request",
    "RequestBuildError",
    "Response",
    "Session",
    "SessionError",
    "Settings",
    "UnmarshalError",
    "ValidationErrors",
    "is_error",
    "settings",
]
