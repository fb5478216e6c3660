"""Routing module - Route registration, matching and dispatch."""

from routy_core.routing.router import Router, DispatchResult
from routy_core.routing.action import Action
from routy_core.routing.matcher import WildcardCompiler
from routy_core.routing.errors import (
    HttpException,
    NotFound,
    ErrorScope,
    ExactCode,
    RouteError,
    InvalidHandler,
    InvalidMethod,
    InvalidPattern,
    InvalidStatus,
)

__all__ = [
    "Router",
    "DispatchResult",
    "Action",
    "WildcardCompiler",
    "HttpException",
    "NotFound",
    "ErrorScope",
    "ExactCode",
    "RouteError",
    "InvalidHandler",
    "InvalidMethod",
    "InvalidPattern",
    "InvalidStatus",
]
