"""
=============================================================================
HTTP REQUEST PARSER
=============================================================================

Turns the lines of one connection into a structured HTTPRequest.

=============================================================================
WHAT WE READ
=============================================================================

Only the request head is read, and only three things in it matter:

    ┌─────────────────────────────────────────────────────────────────────┐
    │                                                                      │
    │    GET /echo/abc HTTP/1.1\\r\\n       ◄── request line (always first)│
    │    ─┬─ ────┬──── ───┬────                                           │
    │   method target  version                                            │
    │                                                                      │
    │    Host: localhost:4221\\r\\n         ◄── stored as host            │
    │    User-Agent: curl/8.1\\r\\n         ◄── stored as user_agent      │
    │    Accept: */*\\r\\n                  ◄── ignored                   │
    │    \\r\\n                             ◄── end of head, stop reading │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

The body is never read.

=============================================================================
PARSING RULES
=============================================================================

1. The first line is the request line. It must split on single spaces
   into exactly three fields. Anything else is malformed and parsing
   stops with an empty request line.

2. Header lines are split on single spaces and the SECOND field is the
   value, stored verbatim:

       "User-Agent: curl/8.1\\r\\n".split(" ")
           → ["User-Agent:", "curl/8.1\\r\\n"]
                             ───────┬──────
                                    └── user_agent (terminator included)

   Consumers trim it. A header line with fewer than two fields is
   ignored instead of crashing.

3. Parsing stops at the blank line, at end of stream, or on a read
   error. Whatever was parsed until then IS the request; nothing is
   rejected.

=============================================================================
"""

from dataclasses import dataclass, field
from typing import Iterator, Optional, Tuple
import logging

from ..core.line_reader import LineReader, LineReadError


logger = logging.getLogger(__name__)


USER_AGENT_PREFIX = "User-Agent:"
HOST_PREFIX = "Host:"


@dataclass(frozen=True)
class HTTPRequest:
    """
    Represents a parsed HTTP request.

    Frozen: the parser builds it once, after the head has been read, and
    nothing changes it afterwards.

    Attributes:
        method: Request method, "GET" in practice.
        target: Raw request target, not URL-decoded ("/echo/abc").
        version: Protocol version from the request line ("HTTP/1.1").
        host: Raw Host header token, "" if absent.
        user_agent: Raw User-Agent header token, "" if absent. May still
            carry the line terminator; strip before use.
        client_address: (ip, port) of the peer, for logging only.
    """

    method: str = ""
    target: str = ""
    version: str = ""

    host: str = ""
    user_agent: str = ""

    client_address: Tuple[str, int] = field(default=("", 0), compare=False)

    @property
    def request_line(self) -> str:
        """The request line as it appeared on the wire, without terminator."""
        return f"{self.method} {self.target} {self.version}"


class RequestParser:
    """
    Parser for the head of an HTTP/1.1 request.

    Usage:
        parser = RequestParser()
        request = parser.parse(conn.reader, conn.address)
    """

    def parse(
        self,
        reader: LineReader,
        client_address: Tuple[str, int] = ("", 0),
    ) -> HTTPRequest:
        """
        Read lines from the reader and build an HTTPRequest.

        Args:
            reader: Source of lines, anything with next_line().
            client_address: Peer address, copied onto the request.

        Returns:
            The parsed request. Never raises for malformed input or read
            failures; missing parts are left empty.
        """
        lines = self._head_lines(reader)

        request_line = next(lines, None)
        if request_line is None:
            logger.debug("No request line received")
            return HTTPRequest(client_address=client_address)

        parts = self._parse_request_line(request_line)
        if parts is None:
            logger.warning(f"Malformed request line: {request_line!r}")
            return HTTPRequest(client_address=client_address)

        method, target, version = parts
        host = ""
        user_agent = ""

        for line in lines:
            if line.startswith(USER_AGENT_PREFIX):
                user_agent = self._header_value(line, default=user_agent)
            elif line.startswith(HOST_PREFIX):
                host = self._header_value(line, default=host)
            # Every other header is dropped

        request = HTTPRequest(
            method=method,
            target=target,
            version=version,
            host=host,
            user_agent=user_agent,
            client_address=client_address,
        )
        logger.debug(f"Parsed request: {request}")
        return request

    def _head_lines(self, reader: LineReader) -> Iterator[str]:
        """
        Yield decoded lines of the request head.

        Stops at the blank line, end of stream or a read error.
        """
        while True:
            try:
                raw = reader.next_line()
            except LineReadError as e:
                logger.warning(f"Stopped reading request head: {e}")
                return

            if raw is None:
                return

            logger.debug(f"Read line: {raw!r}")

            if raw in (b"\r\n", b"\n"):
                return

            yield raw.decode("utf-8", errors="replace")

    def _parse_request_line(self, line: str) -> Optional[Tuple[str, str, str]]:
        """
        Split the request line into (method, target, version).

        Returns:
            The three fields, or None if the line does not have exactly
            three space-separated fields.
        """
        fields = line.split(" ")
        if len(fields) != 3:
            return None

        method, target, version = fields
        return method, target, _strip_terminator(version)

    def _header_value(self, line: str, default: str) -> str:
        """
        Second space-separated field of a header line.

        A line with fewer than two fields is malformed and leaves the
        previous value (default) in place.
        """
        fields = line.split(" ")
        if len(fields) < 2:
            logger.debug(f"Ignoring malformed header line: {line!r}")
            return default
        return fields[1]


def _strip_terminator(value: str) -> str:
    if value.endswith("\r\n"):
        return value[:-2]
    if value.endswith("\n"):
        return value[:-1]
    return value


def parse_request(
    reader: LineReader,
    client_address: Tuple[str, int] = ("", 0),
) -> HTTPRequest:
    """
    Convenience function to parse a request.

    Example:
        request = parse_request(LineReader(sock))
    """
    return RequestParser().parse(reader, client_address)
