"""
Echo handler.

Returns the part of the target after the "/echo/" prefix, as-is:

    GET /echo/abc      →  "abc"
    GET /echo/a/b/c    →  "a/b/c"
    GET /echo/         →  ""
    GET /echo/%20x     →  "%20x"    (targets are never URL-decoded)
"""

from typing import Dict

from ..http.request import HTTPRequest
from ..http.response import HTTPResponse, ok


def echo_handler(request: HTTPRequest, params: Dict[str, str]) -> HTTPResponse:
    """
    Echo the target suffix back as the body.

    Args:
        request: The parsed request (only its version is used).
        params: Match params; "suffix" is the target minus "/echo/".
    """
    return ok(params.get("suffix", ""), request.version)
