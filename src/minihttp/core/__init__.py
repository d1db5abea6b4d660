"""
=============================================================================
CORE SERVER COMPONENTS
=============================================================================

The networking plumbing underneath the HTTP pipeline:

    ┌─────────────────────────────────────────────────────────────────────┐
    │                         SOCKET SERVER                                │
    │  • Creates the listening socket, binds, listens                     │
    │  • Runs the accept() loop                                           │
    │  • Hands every accepted socket off as a Connection                  │
    └─────────────────────────────────────────────────────────────────────┘
                                    │
                                    ▼
    ┌─────────────────────────────────────────────────────────────────────┐
    │                          CONNECTION                                  │
    │  • Owns one client socket for one request/response                  │
    │  • Single sendall() of the response, idempotent close()             │
    └─────────────────────────────────────────────────────────────────────┘
                                    │
                                    ▼
    ┌─────────────────────────────────────────────────────────────────────┐
    │                          LINE READER                                 │
    │  • Turns the TCP byte stream into LF-terminated lines               │
    └─────────────────────────────────────────────────────────────────────┘

THREAD-PER-CONNECTION MODEL
    Each accepted connection gets its own thread. Connections share no
    mutable state, so there are no locks and no pool to size.

=============================================================================
"""

from .socket_server import SocketServer
from .connection import Connection, ConnectionState
from .line_reader import LineReader, LineReadError

__all__ = [
    "SocketServer",     # Listening socket + accept loop
    "Connection",       # One client socket
    "ConnectionState",  # Connection lifecycle states
    "LineReader",       # Byte stream → lines
    "LineReadError",    # Read failure while assembling a line
]
