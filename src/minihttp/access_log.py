"""
=============================================================================
ACCESS LOG
=============================================================================

One structured record per handled request, written to the
"minihttp.access" logger so it can be routed separately from the
server's diagnostic logs:

    logging.getLogger("minihttp.access").setLevel(logging.WARNING)  # mute

Format (close to the Apache common log format):

    127.0.0.1 - - [18/Oct/2026:09:12:44 +0000] "GET /echo/abc HTTP/1.1" 200 3 0.41ms
    ─────┬───       ─────────────┬────────────  ──────────┬──────────── ─┬─ ┬ ──┬───
     client               timestamp                 request line        │  │  duration
                                                                  status   Content-Length

=============================================================================
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from .http.request import HTTPRequest
from .http.response import HTTPResponse


logger = logging.getLogger("minihttp.access")


@dataclass
class AccessLog:
    """Structured log entry for a request."""

    client_ip: str
    request_line: str
    status_code: int
    content_length: int
    duration_ms: float
    timestamp: str

    @classmethod
    def build(
        cls,
        request: HTTPRequest,
        response: HTTPResponse,
        duration_ms: float,
    ) -> "AccessLog":
        return cls(
            client_ip=request.client_address[0] or "-",
            request_line=request.request_line.strip(),
            status_code=response.status_code,
            content_length=response.content_length,
            duration_ms=duration_ms,
            timestamp=datetime.now(timezone.utc).strftime("%d/%b/%Y:%H:%M:%S %z"),
        )

    def to_dict(self) -> dict:
        """Convert to a dictionary, e.g. for a JSON log handler."""
        return {
            "client_ip": self.client_ip,
            "request_line": self.request_line,
            "status_code": self.status_code,
            "content_length": self.content_length,
            "duration_ms": round(self.duration_ms, 2),
            "timestamp": self.timestamp,
        }

    def to_text(self) -> str:
        return (
            f'{self.client_ip} - - [{self.timestamp}] '
            f'"{self.request_line}" {self.status_code} '
            f'{self.content_length} {self.duration_ms:.2f}ms'
        )

    def emit(self) -> None:
        logger.info(self.to_text(), extra={"access": self.to_dict()})
