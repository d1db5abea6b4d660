"""
=============================================================================
HTTP RESPONSE SERIALIZER
=============================================================================

Every response this server writes has exactly the same shape:

    ┌─────────────────────────────────────────────────────────────────────┐
    │                                                                      │
    │    HTTP/1.1 200 OK\\r\\n                  ◄── status line            │
    │    Content-Type: text/plain\\r\\n                                     │
    │    Content-Length: 3\\r\\n                ◄── BYTES, not characters  │
    │    \\r\\n                                 ◄── end of headers         │
    │    abc                                  ◄── body, no terminator     │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

No Date, Server or Connection header is ever added. The client learns
where the body ends from Content-Length and from the connection closing.

Content-Length is computed from the encoded body at serialization time,
never stored, so it cannot drift from the body:

    "héllo"  →  5 characters, 6 bytes in UTF-8  →  Content-Length: 6

=============================================================================
"""

from dataclasses import dataclass

from .status_codes import HTTPStatus


DEFAULT_VERSION = "HTTP/1.1"
TEXT_PLAIN = "text/plain"

CRLF = "\r\n"


@dataclass(frozen=True)
class HTTPResponse:
    """
    Represents an HTTP response to be sent to the client.

    Built once by a route handler, serialized once, never changed.
    """

    version: str = DEFAULT_VERSION
    status: HTTPStatus = HTTPStatus.OK
    content_type: str = TEXT_PLAIN
    body: str = ""

    @property
    def status_code(self) -> int:
        return int(self.status)

    @property
    def status_message(self) -> str:
        return self.status.phrase

    @property
    def body_bytes(self) -> bytes:
        return self.body.encode("utf-8")

    @property
    def content_length(self) -> int:
        """Byte length of the encoded body."""
        return len(self.body_bytes)

    @property
    def status_line(self) -> str:
        """
        Format: HTTP-VERSION SP STATUS-CODE SP REASON-PHRASE
        Example: "HTTP/1.1 404 Not Found"
        """
        return f"{self.version} {self.status_code} {self.status_message}"

    def to_bytes(self) -> bytes:
        """
        Serialize the response to bytes for socket.sendall().

        Deterministic: equal responses always give identical bytes.
        """
        body = self.body_bytes
        head = (
            f"{self.status_line}{CRLF}"
            f"Content-Type: {self.content_type}{CRLF}"
            f"Content-Length: {len(body)}{CRLF}"
            f"{CRLF}"
        )
        return head.encode("utf-8") + body


def serialize(response: HTTPResponse) -> bytes:
    """Render a response into wire bytes."""
    return response.to_bytes()


# =============================================================================
# CONVENIENCE CONSTRUCTORS
# =============================================================================
#
# Route handlers build responses through these, so every response gets
# the same content type and the request's version.
#
# An empty version means no request line ever arrived; the status line
# still needs one, so HTTP/1.1 is used.
#
# =============================================================================

def ok(body: str = "", version: str = DEFAULT_VERSION) -> HTTPResponse:
    """200 OK with a text/plain body."""
    return HTTPResponse(
        version=version or DEFAULT_VERSION,
        status=HTTPStatus.OK,
        body=body,
    )


def not_found(version: str = DEFAULT_VERSION) -> HTTPResponse:
    """404 Not Found with an empty body."""
    return HTTPResponse(
        version=version or DEFAULT_VERSION,
        status=HTTPStatus.NOT_FOUND,
    )
