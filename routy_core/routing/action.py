"""Action - A handler bound to one or more route patterns.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import weakref
from typing import TYPE_CHECKING, Any, Callable, List, Optional, Sequence, Union

from routy_core.routing.errors import InvalidHandler, InvalidPattern, RouteError

if TYPE_CHECKING:
    from routy_core.routing.router import Router

Handler = Callable[[List[str]], Any]


class Action:
    """Registration record created by ``Router.register``.

    Holds the raw route patterns in declaration order and the handler that
    receives the captured parameters. The owning router is kept as a weak
    reference; the router owns the naming map.
    """

    __slots__ = ("_routes", "_handler", "_owner", "name")

    def __init__(
        self,
        routes: Union[str, Sequence[str]],
        handler: Handler,
        owner: Optional["Router"] = None,
    ):
        if isinstance(routes, str):
            routes = [routes]

        if not routes:
            raise InvalidPattern("An action needs at least one route")

        if not callable(handler):
            raise InvalidHandler(f"Handler {handler!r} is not callable")

        self._routes = tuple(routes)
        self._handler = handler
        self._owner = weakref.ref(owner) if owner is not None else None
        self.name: Optional[str] = None

    @property
    def handler(self) -> Handler:
        return self._handler

    @property
    def owner(self) -> Optional["Router"]:
        """Owning router, or None if detached."""
        if self._owner is None:
            return None
        return self._owner()

    def routes(self) -> List[str]:
        """Get the raw route patterns, in declaration order."""
        return list(self._routes)

    def call(self, arguments: List[str]) -> Any:
        """Invoke the handler with the captured parameters."""
        return self._handler(arguments)

    def identify(self, name: str) -> "Action":
        """Name this action so the owning router can build URLs to it."""
        router = self.owner
        if router is None:
            raise RouteError(f"Cannot name {self!r}: it has no owning router")

        router.identify(self, name)
        return self

    def __repr__(self) -> str:
        return f"Action(routes={list(self._routes)!r}, name={self.name!r})"


__all__ = [
    "Action",
    "Handler",
]
