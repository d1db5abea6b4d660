"""
User-Agent handler.

The parser stores the raw header token, which still carries the line
terminator ("curl/8.1\r\n"). Surrounding whitespace is trimmed here,
so Content-Length counts only the visible value.
"""

from typing import Dict

from ..http.request import HTTPRequest
from ..http.response import HTTPResponse, ok


def user_agent_handler(request: HTTPRequest, params: Dict[str, str]) -> HTTPResponse:
    """Return the client's User-Agent, trimmed. Empty if the header was absent."""
    return ok(request.user_agent.strip(), request.version)
