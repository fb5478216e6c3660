"""HTTP module - Request context adapters."""

from routy_core.http.request import RequestContext

__all__ = [
    "RequestContext",
]
