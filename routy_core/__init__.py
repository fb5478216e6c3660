"""Routy - Request Router.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.

Routy matches an incoming method and path against registered route
patterns and dispatches to the first matching handler:
- Per-method registration (ANY, GET, POST, PUT, DELETE)
- Placeholder routes with positional parameters
- Method override for HTML forms (_method=PUT|DELETE)
- HTTP error handlers per status code, or global
- Named routes and URL generation

Architecture Overview:
┌──────────────────────────────────────────────────────────────────────┐
│                               Routy                                   │
├──────────────────────────────────────────────────────────────────────┤
│                                                                       │
│  ┌────────────────────────────────────────────────────────────────┐  │
│  │                         Request Flow                            │  │
│  │  Context ──▶ Router ──▶ ANY + METHOD actions ──▶ Handler        │  │
│  │                 │                                  │            │  │
│  │                 └──▶ HttpException ──▶ Error handler            │  │
│  └────────────────────────────────────────────────────────────────┘  │
│                                                                       │
│  ┌─────────────────┐  ┌─────────────────┐  ┌──────────────────────┐  │
│  │      HTTP       │  │     Routing     │  │        Utils         │  │
│  │                 │  │                 │  │                      │  │
│  │ - Request       │  │ - Router        │  │ - Config (YAML/JSON/ │  │
│  │   context       │  │ - Action        │  │   env)               │  │
│  │ - Raw/WSGI      │  │ - Wildcards     │  │ - Logging setup      │  │
│  │   adapters      │  │ - Errors        │  │ - Path helpers       │  │
│  └─────────────────┘  └─────────────────┘  └──────────────────────┘  │
│                                                                       │
└──────────────────────────────────────────────────────────────────────┘

Request Flow:
1. Host builds a RequestContext (method, path, override, host)
2. Router is created for that request and routes are registered
3. run() picks the effective method and walks ANY then method actions
4. First matching route calls its handler with the captured parameters
5. HTTP failures (including 404) go to the matching error handler

Usage:
    from routy_core import Router, RequestContext, HttpException

    router = Router(RequestContext.from_environ(environ), context="blog")

    router.get("/", lambda args: "home")
    router.get("posts/{id}", show_post).identify("post")
    router.error(404, lambda error: "not found")

    body = router.run()
    link = router.to("post", {"{id}": "42"})
"""

__version__ = "0.1.0"
__author__ = "BlackRoad OS, Inc."

# HTTP
from routy_core.http.request import RequestContext

# Routing
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

# Utils
from routy_core.utils.config import RouterConfig, load_config, configure_logging

__all__ = [
    # Version
    "__version__",
    # HTTP
    "RequestContext",
    # Routing
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
    # Utils
    "RouterConfig",
    "load_config",
    "configure_logging",
]
