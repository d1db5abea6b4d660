"""
=============================================================================
URL ROUTER
=============================================================================

Maps a request target to the handler that produces its response.

=============================================================================
ROUTE TABLE
=============================================================================

    ┌──────────┬────────────────┬──────────────────────────────────────┐
    │  TYPE    │  PATTERN       │  RESPONSE                            │
    ├──────────┼────────────────┼──────────────────────────────────────┤
    │ EXACT    │ /              │ 200, empty body                      │
    │ PREFIX   │ /echo/         │ 200, body = rest of the target       │
    │ CONTAINS │ /user-agent    │ 200, body = trimmed User-Agent       │
    │ (none)   │                │ 404, empty body                      │
    └──────────┴────────────────┴──────────────────────────────────────┘

First match wins, so order matters: "/" is an equality check while the
others look at parts of the target.

MATCH TYPES
───────────

    EXACT     target == pattern
    PREFIX    target.startswith(pattern)    params = {"suffix": rest}
    CONTAINS  pattern in target

PREFIX is strict: "/foo/echo/bar" is NOT an echo request, it falls
through to the 404 (or to CONTAINS, if it happens to match one).

Routing is a pure function of the request. No handler keeps state, so
routing the same request twice gives equal responses.

=============================================================================
"""

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Callable, Dict, List, Optional

from .request import HTTPRequest
from .response import HTTPResponse, not_found


# Handler: takes the request and the params extracted by the match
Handler = Callable[[HTTPRequest, Dict[str, str]], HTTPResponse]


class RouteType(Enum):
    """How a route pattern is compared with the request target."""
    EXACT = "exact"         # /      - whole target must equal the pattern
    PREFIX = "prefix"       # /echo/ - target must start with the pattern
    CONTAINS = "contains"   # /user-agent - pattern anywhere in the target


@dataclass(frozen=True)
class Route:
    """A pattern bound to a handler."""

    pattern: str
    route_type: RouteType
    handler: Handler
    name: Optional[str] = None

    def match(self, target: str) -> Optional[Dict[str, str]]:
        """
        Compare the target with this route.

        Returns:
            The extracted params if the route matches, None otherwise.
        """
        if self.route_type is RouteType.EXACT:
            return {} if target == self.pattern else None

        if self.route_type is RouteType.PREFIX:
            if target.startswith(self.pattern):
                return {"suffix": target[len(self.pattern):]}
            return None

        if self.pattern in target:
            return {}
        return None


@dataclass(frozen=True)
class RouteMatch:
    """
    Result of a successful route match.

    Example:
        Pattern: /echo/  (PREFIX)
        Target:  /echo/abc
        Result:  RouteMatch(route=<Route>, params={"suffix": "abc"})
    """
    route: Route
    params: Dict[str, str]


class Router:
    """
    Ordered list of routes, first match wins.

    Usage:
        router = Router()
        router.add_route("/", index_handler, RouteType.EXACT)
        router.add_route("/echo/", echo_handler, RouteType.PREFIX)

        response = router.handle(request)
    """

    def __init__(self):
        self._routes: List[Route] = []

    def add_route(
        self,
        pattern: str,
        handler: Handler,
        route_type: RouteType = RouteType.EXACT,
        name: Optional[str] = None,
    ) -> Route:
        """
        Register a route after all routes registered so far.

        Returns:
            The registered Route.
        """
        route = Route(
            pattern=pattern,
            route_type=route_type,
            handler=handler,
            name=name,
        )
        self._routes.append(route)
        return route

    def match(self, target: str) -> Optional[RouteMatch]:
        """Find the first route matching the target."""
        for route in self._routes:
            params = route.match(target)
            if params is not None:
                return RouteMatch(route=route, params=params)
        return None

    def handle(self, request: HTTPRequest) -> HTTPResponse:
        """
        Route a request to its handler.

        Returns:
            The handler's response, or 404 Not Found if nothing matched.
        """
        match = self.match(request.target)
        if match is None:
            return not_found(request.version)
        return match.route.handler(request, match.params)

    def routes(self) -> List[Route]:
        """Get all registered routes, in match order."""
        return list(self._routes)


def create_router() -> Router:
    """Build the router with the server's three routes, in match order."""
    # handlers import minihttp.http, so they are imported on first use
    from ..handlers import index_handler, echo_handler, user_agent_handler

    router = Router()
    router.add_route("/", index_handler, RouteType.EXACT, name="index")
    router.add_route("/echo/", echo_handler, RouteType.PREFIX, name="echo")
    router.add_route("/user-agent", user_agent_handler, RouteType.CONTAINS, name="user_agent")
    return router


@lru_cache(maxsize=None)
def default_router() -> Router:
    """The shared router. Built on first use; never modified afterwards."""
    return create_router()


def route(request: HTTPRequest) -> HTTPResponse:
    """
    Route a request with the default router.

    Example:
        response = route(HTTPRequest("GET", "/echo/abc", "HTTP/1.1"))
        response.body  # "abc"
    """
    return default_router().handle(request)
