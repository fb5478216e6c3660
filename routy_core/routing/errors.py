"""Routing errors - Setup errors, HTTP failures and error-handler keys.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Union


class RouteError(Exception):
    """Base class for route/handler setup errors."""

    pass


class InvalidHandler(RouteError, TypeError):
    """Raised when a handler is not callable."""

    pass


class InvalidMethod(RouteError, ValueError):
    """Raised when registering against an unknown method token."""

    pass


class InvalidPattern(RouteError, ValueError):
    """Raised for an empty route list or an unterminated placeholder."""

    pass


class InvalidStatus(RouteError, ValueError):
    """Raised when error codes are not a non-empty collection of status codes."""

    pass


class HttpException(Exception):
    """HTTP failure raised by handlers or by the dispatch loop.

    Caught once by ``Router.run`` and handed to the matching error handler.
    """

    def __init__(self, message: str = "", status: int = 500):
        super().__init__(message)
        self.message = message
        self.status = status

    @property
    def code(self) -> int:
        return self.status

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status={self.status}, message={self.message!r})"


class NotFound(HttpException):
    """404 failure."""

    def __init__(self, message: str = "Route not found"):
        super().__init__(message, 404)


class ErrorScope(Enum):
    """Error handler scopes that are not tied to a status code."""

    GLOBAL = auto()


@dataclass(frozen=True)
class ExactCode:
    """Error handler key for a single status code."""

    code: int


ErrorKey = Union[ExactCode, ErrorScope]


__all__ = [
    "RouteError",
    "InvalidHandler",
    "InvalidMethod",
    "InvalidPattern",
    "InvalidStatus",
    "HttpException",
    "NotFound",
    "ErrorScope",
    "ExactCode",
    "ErrorKey",
]
