"""
=============================================================================
CONNECTION MANAGEMENT
=============================================================================

Wraps one accepted client socket for exactly one request/response
exchange.

=============================================================================
ONE REQUEST PER CONNECTION
=============================================================================

There is no keep-alive. Every connection walks the same short path:

    NEW ──► READING ──► PROCESSING ──► WRITING ──► CLOSING ──► CLOSED
              │                           │
              └──── read/write failure ───┴──────────► CLOSING

Reading is delegated to a LineReader, which the request parser pulls
lines from. Writing is a single sendall() of the serialized response.
Closing happens once, whatever happened before it.

=============================================================================
"""

import socket
import time
import logging
from enum import Enum
from dataclasses import dataclass, field
import uuid

from ..config import MAX_LINE_LENGTH
from .line_reader import LineReader


logger = logging.getLogger(__name__)


class ConnectionState(Enum):
    """Connection lifecycle states, used for logging and close bookkeeping."""
    NEW = "new"                # Just accepted
    READING = "reading"        # Parser is pulling lines
    PROCESSING = "processing"  # Request parsed, routing
    WRITING = "writing"        # Sending response bytes
    CLOSING = "closing"        # Shutdown sequence in progress
    CLOSED = "closed"          # Socket released


@dataclass
class Connection:
    """
    Represents a client connection.

    Attributes:
        socket: The client socket.
        address: Client's (ip, port) tuple.
        id: Short connection identifier for log lines.
        state: Current connection state.
        created_at: Timestamp when the connection was accepted.
        reader: LineReader bound to the socket.
    """

    socket: socket.socket
    address: tuple[str, int]

    id: str = field(default_factory=lambda: str(uuid.uuid4())[:8])
    state: ConnectionState = ConnectionState.NEW
    created_at: float = field(default_factory=time.time)

    buffer_size: int = 4096
    max_line_length: int = MAX_LINE_LENGTH

    reader: LineReader = field(init=False, repr=False)

    def __post_init__(self):
        # Blocking with no deadline; a silent client holds its thread
        self.socket.settimeout(None)
        self.reader = LineReader(
            self.socket,
            buffer_size=self.buffer_size,
            max_line_length=self.max_line_length,
        )

    @property
    def client_ip(self) -> str:
        """Get the client IP address."""
        return self.address[0]

    @property
    def client_port(self) -> int:
        return self.address[1]

    @property
    def age(self) -> float:
        """Get connection age in seconds."""
        return time.time() - self.created_at

    # =========================================================================
    # WRITING
    # =========================================================================

    def send_response(self, data: bytes) -> bool:
        """
        Send the serialized response to the client.

        Uses sendall() so a partial send never truncates the response.

        Args:
            data: Response bytes to send.

        Returns:
            True if the send succeeded, False if the connection was lost.
        """
        self.state = ConnectionState.WRITING

        try:
            self.socket.sendall(data)
            return True
        except OSError as e:
            logger.warning(f"[{self.id}] Send failed: {e}")
            return False

    # =========================================================================
    # CLOSING
    # =========================================================================

    def close(self):
        """
        Close the connection. Safe to call more than once.

        1. shutdown(SHUT_WR) sends FIN so the client sees the end of the
           response.
        2. Drain anything the client sent that we never read, so close()
           does not turn into a RST that discards our response.
        3. close() releases the file descriptor.
        """
        if self.state in (ConnectionState.CLOSING, ConnectionState.CLOSED):
            return

        self.state = ConnectionState.CLOSING

        try:
            self.socket.shutdown(socket.SHUT_WR)
        except OSError:
            pass  # Peer already gone

        try:
            self.socket.settimeout(0.5)
            while self.socket.recv(1024):
                pass
        except OSError:
            pass

        try:
            self.socket.close()
        except OSError:
            pass

        self.state = ConnectionState.CLOSED
        logger.debug(f"[{self.id}] Connection closed after {self.age:.3f}s")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit - ensure connection is closed."""
        self.close()
        return False  # Don't suppress exceptions
