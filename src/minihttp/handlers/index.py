"""Handler for the root path."""

from typing import Dict

from ..http.request import HTTPRequest
from ..http.response import HTTPResponse, ok


def index_handler(request: HTTPRequest, params: Dict[str, str]) -> HTTPResponse:
    """GET / → 200 OK with an empty body."""
    return ok("", request.version)
