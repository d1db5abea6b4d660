"""
=============================================================================
SERVER CONFIGURATION
=============================================================================

The server has a fixed address and fixed behaviour. ServerConfig exists
so the values live in one place and so tests can bind an ephemeral port:

    # What `python -m minihttp` runs
    ServerConfig()                         # 0.0.0.0:4221

    # What the integration tests run
    ServerConfig(host="127.0.0.1", port=0) # OS picks a free port

There is no from_env(): the process reads no environment
variables.

=============================================================================
"""

from dataclasses import dataclass


DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 4221

# Hard limit on one request or header line. Far above any real request
# line, it only stops a client that never sends a line feed.
MAX_LINE_LENGTH = 1024 * 1024


@dataclass
class ServerConfig:
    """
    Configuration for the HTTP server.

    NETWORK SETTINGS
    - host, port, backlog

    READING
    - buffer_size, max_line_length

    LOGGING
    - log_level
    """

    host: str = DEFAULT_HOST
    """Address to bind. All interfaces by default."""

    port: int = DEFAULT_PORT
    """Port to listen on. 0 lets the OS choose (tests only)."""

    backlog: int = 128
    """Maximum number of queued, not yet accepted connections."""

    buffer_size: int = 4096
    """Bytes requested per recv() call while reading lines."""

    max_line_length: int = MAX_LINE_LENGTH
    """Longest request or header line accepted, terminator included (1 MiB)."""

    log_level: str = "INFO"
    """Logging level (DEBUG, INFO, WARNING, ERROR)."""

    def validate(self) -> None:
        """Validate configuration values at startup."""
        if not 0 <= self.port < 65536:
            raise ValueError(f"Invalid port: {self.port}. Must be 0-65535.")

        if self.backlog < 1:
            raise ValueError("backlog must be >= 1")

        if self.buffer_size < 1:
            raise ValueError("buffer_size must be >= 1")

        if self.max_line_length < 2:
            raise ValueError("max_line_length must be >= 2")

        if self.log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log_level: {self.log_level}")
