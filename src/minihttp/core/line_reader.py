"""
=============================================================================
LINE READER
=============================================================================

Incrementally reads LF-terminated lines from a connected socket.

=============================================================================
WHY A LINE READER?
=============================================================================

TCP is a byte stream. A single recv() can return half a line, one line,
or several lines at once:

    Client sends:   GET / HTTP/1.1\r\nHost: a\r\n\r\n

    Server might see:
        recv() → b"GET / HT"
        recv() → b"TP/1.1\r\nHost: a\r\n\r\n"

The HTTP head is line oriented, so the parser wants whole lines. The
reader keeps whatever recv() returned past the current line and hands it
out on the next call:

    ┌─────────────────────────────────────────────────────────────────────┐
    │                      next_line() Flow                                │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   while b"\\n" not in buffer:                                        │
    │       chunk = recv()                                                 │
    │       chunk == b""  →  end of stream, return None                   │
    │       buffer += chunk                                                │
    │                                                                      │
    │   line, buffer = buffer split after the first b"\\n"                 │
    │   return line          (terminator included)                         │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

The reader is single-consumer and sequential. It does not know anything
about HTTP.

=============================================================================
"""

import logging
import socket
from typing import Optional

from ..config import MAX_LINE_LENGTH


logger = logging.getLogger(__name__)


class LineReadError(OSError):
    """
    Raised when the underlying socket fails while a line is being read.

    The request parser treats this exactly like end-of-stream: it stops
    and keeps whatever it has parsed so far.
    """


class LineReader:
    """
    Reads LF-terminated lines from a socket-like object.

    Anything with a ``recv(bufsize) -> bytes`` method works, which keeps
    the reader testable without a real network.

    Attributes:
        buffer_size: Bytes requested per recv() call.
        max_line_length: Upper bound on a single line, terminator included.
    """

    def __init__(
        self,
        sock: socket.socket,
        buffer_size: int = 4096,
        max_line_length: int = MAX_LINE_LENGTH,
    ):
        self._sock = sock
        self.buffer_size = buffer_size
        self.max_line_length = max_line_length

        # Bytes received past the end of the last line handed out
        self._buffer = b""
        self._eof = False

    def next_line(self) -> Optional[bytes]:
        """
        Return the next line including its ``b"\\n"`` terminator.

        Blocks until a full line is available.

        Returns:
            The line bytes, or None once the peer has closed the stream.
            A trailing fragment with no line feed is dropped at EOF.

        Raises:
            LineReadError: If recv() fails or the line exceeds
                max_line_length.
        """
        while b"\n" not in self._buffer:
            if self._eof:
                return None

            if len(self._buffer) > self.max_line_length:
                raise LineReadError(
                    f"Line exceeds {self.max_line_length} bytes"
                )

            chunk = self._recv()
            if not chunk:
                self._eof = True
                if self._buffer:
                    logger.debug(f"Dropping {len(self._buffer)} bytes of unterminated input")
                    self._buffer = b""
                return None

            self._buffer += chunk

        end = self._buffer.index(b"\n") + 1
        if end > self.max_line_length:
            raise LineReadError(f"Line exceeds {self.max_line_length} bytes")

        line, self._buffer = self._buffer[:end], self._buffer[end:]
        return line

    def _recv(self) -> bytes:
        try:
            return self._sock.recv(self.buffer_size)
        except OSError as e:
            # Covers resets, broken pipes and socket.timeout
            raise LineReadError(f"Read failed: {e}") from e
