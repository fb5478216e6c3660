"""Router - Request matching, dispatch and URL generation.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import time
import uuid
from dataclasses import dataclass
from typing import (
    Any,
    Callable,
    Dict,
    Iterable,
    List,
    Mapping,
    MutableMapping,
    Optional,
    Tuple,
    Union,
)

from routy_core.http.request import RequestContext
from routy_core.routing.action import Action, Handler
from routy_core.routing.errors import (
    ErrorKey,
    ErrorScope,
    ExactCode,
    HttpException,
    InvalidHandler,
    InvalidMethod,
    InvalidStatus,
    NotFound,
)
from routy_core.routing.matcher import WildcardCompiler, has_wildcards
from routy_core.utils.config import RouterConfig
from routy_core.utils.helpers import join_path, normalize_base_url, request_path, trim_slashes

logger = logging.getLogger(__name__)

ANY = "ANY"
METHODS = (ANY, "GET", "POST", "PUT", "DELETE")

# Methods an HTML form can only reach through the override field.
OVERRIDE_METHODS = frozenset({"PUT", "DELETE"})

ErrorHandler = Callable[[HttpException], Any]


@dataclass
class DispatchResult:
    """Outcome of one dispatch pass.

    Holds either the handler output or the routing failure.
    """

    value: Any = None
    error: Optional[HttpException] = None
    action: Optional[Action] = None
    route: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _reraise(exception: HttpException) -> Any:
    raise exception


class Router:
    """Request Router.

    Features:
    - Per-method registration (any/get/post/put/delete)
    - Placeholder routes (users/{id}) with positional parameters
    - First-match-wins dispatch in registration order
    - Method override through a form/query field (PUT, DELETE)
    - Error handlers per status code or global
    - Named routes and URL generation

    A router serves exactly one request: it is built from the request
    context, routes are registered, then ``run`` is called once.

    Usage:
        router = Router(RequestContext("GET", "/users/7"), base_url="http://site.com")
        router.get("users/{id}", lambda args: f"user {args[0]}").identify("user")
        router.error(404, lambda error: "not found")

        router.run()                         # 'user 7'
        router.to("user", {"{id}": "42"})    # 'http://site.com/users/42'
    """

    def __init__(
        self,
        request: RequestContext,
        context: str = "",
        base_url: Optional[str] = None,
    ):
        self.request = request

        # Generate the base url if not provided
        if not base_url:
            base_url = f"{request.scheme}://{request.host}"

        self.base_url = normalize_base_url(base_url)
        self.context = trim_slashes(context)
        self.current_path = request_path(request.path)

        self._actions: Dict[str, List[Action]] = {method: [] for method in METHODS}
        self._names: Dict[str, Action] = {}
        self._error_handlers: Dict[ErrorKey, ErrorHandler] = {}
        self._compiler = WildcardCompiler()

    @classmethod
    def from_config(
        cls,
        request: RequestContext,
        config: Optional[RouterConfig] = None,
    ) -> "Router":
        """Create a router for request from config."""
        config = config or RouterConfig()
        return cls(request, context=config.context, base_url=config.base_url or None)

    @classmethod
    def from_raw(
        cls,
        data: bytes,
        config: Optional[RouterConfig] = None,
    ) -> "Router":
        """Create a router for a raw HTTP request message.

        The method override is read from the configured field.
        """
        config = config or RouterConfig()
        request = RequestContext.from_raw(data, config.method_override_field)
        return cls.from_config(request, config)

    @classmethod
    def from_environ(
        cls,
        environ: MutableMapping[str, Any],
        config: Optional[RouterConfig] = None,
    ) -> "Router":
        """Create a router for a WSGI environ."""
        config = config or RouterConfig()
        request = RequestContext.from_environ(environ, config.method_override_field)
        return cls.from_config(request, config)

    @property
    def actions(self) -> Dict[str, List[Action]]:
        """Get registered actions per method token."""
        return {method: list(actions) for method, actions in self._actions.items()}

    def base(self) -> str:
        """Get the base URL joined with the context, without trailing slash."""
        return (self.base_url + self.context).rstrip("/")

    # Registration

    def register(
        self,
        method: str,
        route: Union[str, Iterable[str]],
        handler: Handler,
    ) -> Action:
        """Register handler for one or more routes under a method token.

        Raises:
            InvalidMethod: If method is not one of ANY, GET, POST, PUT, DELETE
            InvalidHandler: If handler is not callable
        """
        method = method.upper()
        if method not in self._actions:
            raise InvalidMethod(f"Unknown request method: {method}")

        routes = [route] if isinstance(route, str) else list(route)
        action = Action(routes, handler, self)

        self._actions[method].append(action)
        logger.debug(f"Registered {method} {routes}")
        return action

    def any(self, route: Union[str, Iterable[str]], handler: Handler) -> Action:
        """Register handler for every request method."""
        return self.register(ANY, route, handler)

    def get(self, route: Union[str, Iterable[str]], handler: Handler) -> Action:
        """Register GET handler."""
        return self.register("GET", route, handler)

    def post(self, route: Union[str, Iterable[str]], handler: Handler) -> Action:
        """Register POST handler."""
        return self.register("POST", route, handler)

    def put(self, route: Union[str, Iterable[str]], handler: Handler) -> Action:
        """Register PUT handler.

        Browsers reach it by posting a form with the override field set.
        """
        return self.register("PUT", route, handler)

    def delete(self, route: Union[str, Iterable[str]], handler: Handler) -> Action:
        """Register DELETE handler.

        Browsers reach it by posting a form with the override field set.
        """
        return self.register("DELETE", route, handler)

    # Named routes

    def identify(self, action: Action, name: str) -> None:
        """Register action under name, replacing any action of that name."""
        action.name = name
        self._names[name] = action
        logger.debug(f"Named {action.routes()} as {name!r}")

    def find(self, name: str) -> Optional[Action]:
        """Get the action registered under name."""
        return self._names.get(name)

    def to(
        self,
        name: str,
        replacements: Optional[Mapping[str, Any]] = None,
        offset: int = 0,
    ) -> str:
        """Build a URL to a named route.

        Unknown names are used as the route itself. Replacements are plain
        substring substitutions applied in order, e.g. ``{"{id}": 42}``.

        Args:
            name: Route name, or a literal route
            replacements: Substrings to substitute in the route
            offset: Which of the action's routes to use (falls back to the first)
        """
        action = self.find(name)

        if action is None:
            route = name
        else:
            routes = action.routes()
            route = routes[offset] if 0 <= offset < len(routes) else routes[0]

        for search, replace in (replacements or {}).items():
            route = route.replace(str(search), str(replace))

        return f"{self.base()}/{route.lstrip('/')}"

    # Matching and dispatch

    def matches(self, route: str) -> Tuple[bool, List[str]]:
        """Check route against the current path.

        Returns:
            Tuple of (matched, parameters in placeholder order)
        """
        pattern = join_path(self.context, trim_slashes(route))

        # No wildcards, simply compare it
        if not has_wildcards(pattern):
            return pattern == self.current_path, []

        arguments = self._compiler.match(pattern, self.current_path)
        if arguments is None:
            return False, []
        return True, arguments

    def effective_method(self) -> str:
        """Get the request method, honouring the override field."""
        override = self.request.override
        if override and override.upper() in OVERRIDE_METHODS:
            return override.upper()
        return self.request.method.upper()

    def dispatch(self) -> DispatchResult:
        """Invoke the first matching action.

        HTTP failures raised by handlers, and the 404 raised when nothing
        matches, are returned in the result instead of propagating.
        """
        method = self.effective_method()
        candidates = self._actions[ANY] + self._actions.get(method, [])

        try:
            for action in candidates:
                for route in action.routes():
                    matched, arguments = self.matches(route)
                    if matched:
                        value = action.call(arguments)
                        return DispatchResult(value=value, action=action, route=route)

            raise NotFound()
        except HttpException as error:
            return DispatchResult(error=error)

    def run(self) -> Any:
        """Run the router.

        Returns:
            The handler result, or the error handler result on HTTP failure

        Raises:
            HttpException: If the failure has no error handler
        """
        request_id = str(uuid.uuid4())[:8]
        start_time = time.time()
        logger.info(f"[{request_id}] --> {self.effective_method()} /{self.current_path}")

        result = self.dispatch()
        duration_ms = (time.time() - start_time) * 1000

        if result.ok:
            logger.info(f"[{request_id}] <-- matched {result.route!r} ({duration_ms:.2f}ms)")
            return result.value

        error = result.error
        logger.info(f"[{request_id}] <-- {error.status} {error.message} ({duration_ms:.2f}ms)")

        handler = self._error_handler_for(error)
        return handler(error)

    # Error handlers

    def error(
        self,
        code: Union[int, Iterable[int], ErrorScope, ErrorHandler],
        handler: Optional[ErrorHandler] = None,
    ) -> None:
        """Set an error handler for the given status codes.

        If code is not a status code (or an iterable of them) it is used as
        the global handler for every HTTP failure.

        Usage:
            router.error(404, not_found)         # 404 only
            router.error([401, 403], forbidden)  # both codes
            router.error(fallback)               # everything else

        Raises:
            InvalidHandler: If the handler is not callable
            InvalidStatus: If a collection of codes is empty or holds non-codes
        """
        if isinstance(code, ErrorScope):
            keys: List[ErrorKey] = [code]
        elif _is_status(code):
            keys = [ExactCode(code)]
        elif callable(code) or isinstance(code, (str, bytes)) or not hasattr(code, "__iter__"):
            handler = code
            keys = [ErrorScope.GLOBAL]
        else:
            codes = list(code)
            if not codes or not all(_is_status(status) for status in codes):
                raise InvalidStatus(f"Expected one or more status codes, got {codes!r}")
            keys = [ExactCode(status) for status in codes]

        if not callable(handler):
            raise InvalidHandler(f"Error handler {handler!r} is not callable")

        for key in keys:
            self._error_handlers[key] = handler

    def _error_handler_for(self, error: HttpException) -> ErrorHandler:
        """Pick the handler for error: exact code, then global, then re-raise."""
        handler = self._error_handlers.get(ExactCode(error.status))
        if handler is None:
            handler = self._error_handlers.get(ErrorScope.GLOBAL, _reraise)
        return handler


def _is_status(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


__all__ = [
    "Router",
    "DispatchResult",
    "METHODS",
    "ANY",
]
