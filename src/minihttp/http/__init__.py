"""
=============================================================================
HTTP PROTOCOL IMPLEMENTATION
=============================================================================

The request/response pipeline, one module per stage:

    ┌─────────────────────────────────────────────────────────────────────┐
    │                                                                      │
    │   lines ──► RequestParser ──► HTTPRequest                           │
    │                                    │                                 │
    │                                    ▼                                 │
    │                                  Router ──► HTTPResponse            │
    │                                                  │                   │
    │                                                  ▼                   │
    │                                             to_bytes() ──► bytes    │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

    request.py       HTTPRequest, RequestParser, parse_request
    router.py        Router, Route, RouteType, route
    response.py      HTTPResponse, serialize, ok, not_found
    status_codes.py  HTTPStatus

=============================================================================
"""

from .status_codes import HTTPStatus
from .request import HTTPRequest, RequestParser, parse_request
from .response import HTTPResponse, serialize, ok, not_found
from .router import Router, Route, RouteMatch, RouteType, create_router, route

__all__ = [
    # Request
    "HTTPRequest",
    "RequestParser",
    "parse_request",

    # Response
    "HTTPResponse",
    "HTTPStatus",
    "serialize",
    "ok",
    "not_found",

    # Routing
    "Router",
    "Route",
    "RouteMatch",
    "RouteType",
    "create_router",
    "route",
]
