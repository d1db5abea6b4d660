"""
=============================================================================
HTTP STATUS CODES
=============================================================================

The status codes this server can answer with, and their reason phrases.

    HTTP/1.1 200 OK
             ─── ──
              │   │
              │   └── Reason phrase (HTTPStatus.phrase)
              └────── Status code   (int(HTTPStatus))

Because the phrase is looked up from the code, a response can never carry
a mismatched pair such as "200 Not Found".

=============================================================================
"""

from enum import IntEnum


class HTTPStatus(IntEnum):
    """
    HTTP status codes and reason phrases.

        >>> HTTPStatus.OK == 200
        True
        >>> HTTPStatus.NOT_FOUND.phrase
        'Not Found'
    """

    OK = 200           # Route matched
    NOT_FOUND = 404    # No route matched

    @property
    def phrase(self) -> str:
        """Get the reason phrase for this status code."""
        return _STATUS_PHRASES[self]


_STATUS_PHRASES = {
    HTTPStatus.OK: "OK",
    HTTPStatus.NOT_FOUND: "Not Found",
}
