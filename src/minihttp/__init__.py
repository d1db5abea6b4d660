"""
=============================================================================
MINIHTTP - A Minimal HTTP/1.1 Server
=============================================================================

A single-protocol HTTP/1.1 server on raw Python sockets. It reads the
request line plus the Host and User-Agent headers, answers one of three
routes, and closes the connection.

    ┌─────────────────────────────────────────────────────────────────────┐
    │                         ROUTES                                       │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   GET /                 200  (empty body)                           │
    │   GET /echo/<suffix>    200  <suffix>                               │
    │   GET .../user-agent    200  <User-Agent header, trimmed>           │
    │   anything else         404  (empty body)                           │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
PACKAGE STRUCTURE
=============================================================================

    minihttp/
    ├── __init__.py          # This file - package exports
    ├── __main__.py          # python -m minihttp
    ├── server.py            # HTTPServer: accept → thread → pipeline
    ├── config.py            # ServerConfig dataclass
    ├── access_log.py        # One log record per request
    ├── core/
    │   ├── socket_server.py # Listening socket + accept loop
    │   ├── connection.py    # One client socket
    │   └── line_reader.py   # Byte stream → lines
    ├── http/
    │   ├── request.py       # Request parsing
    │   ├── response.py      # Response serialization
    │   ├── router.py        # Route matching
    │   └── status_codes.py  # HTTPStatus enum
    └── handlers/
        ├── index.py         # /
        ├── echo.py          # /echo/<suffix>
        └── user_agent.py    # /user-agent

=============================================================================
QUICK START
=============================================================================

    $ python -m minihttp
    $ curl -i http://localhost:4221/echo/abc
    HTTP/1.1 200 OK
    Content-Type: text/plain
    Content-Length: 3

    abc

=============================================================================
"""

__version__ = "1.0.0"

from .server import HTTPServer, create_app
from .config import ServerConfig

__all__ = ["HTTPServer", "ServerConfig", "create_app", "__version__"]
