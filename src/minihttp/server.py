"""
=============================================================================
MAIN HTTP SERVER
=============================================================================

Ties the pieces together: one listening socket, one thread per accepted
connection, and the parse → route → serialize → write pipeline inside
each thread.

=============================================================================
ARCHITECTURE OVERVIEW
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │                                                                      │
    │                        ┌─────────────────┐                          │
    │                        │   HTTPServer    │                          │
    │                        └────────┬────────┘                          │
    │                                 │                                    │
    │            ┌────────────────────┼────────────────────┐              │
    │            ▼                    ▼                    ▼              │
    │    ┌──────────────┐    ┌──────────────┐    ┌──────────────┐        │
    │    │ SocketServer │    │ Thread per   │    │    Router    │        │
    │    │ (accept)     │    │ connection   │    │ (dispatch)   │        │
    │    └──────────────┘    └──────────────┘    └──────────────┘        │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
REQUEST LIFECYCLE
=============================================================================

    1. ACCEPT       SocketServer accepts, wraps the socket in a Connection
    2. SPAWN        a new daemon thread takes the Connection
    3. PARSE        RequestParser pulls lines until the blank line
    4. ROUTE        Router picks a handler, handler builds HTTPResponse
    5. SERIALIZE    HTTPResponse.to_bytes()
    6. WRITE        one sendall()
    7. CLOSE        always, exactly once (Connection context manager)

Failures never cross connections. A read failure ends parsing early and
the partial request is routed anyway; a write failure is logged; any
unexpected exception is logged with its traceback. In every case the
connection is closed and the accept loop keeps running.

=============================================================================
"""

import logging
import threading
import time
from typing import Optional, Tuple

from .access_log import AccessLog
from .config import ServerConfig
from .core import SocketServer, Connection, ConnectionState
from .http import RequestParser, Router, create_router


logger = logging.getLogger(__name__)


class HTTPServer:
    """
    The HTTP/1.1 server.

    Usage:
        server = HTTPServer()          # 0.0.0.0:4221
        server.run()                   # blocks until Ctrl+C / SIGTERM

    From another thread (tests):
        server = HTTPServer(ServerConfig(host="127.0.0.1", port=0))
        threading.Thread(target=server.run, daemon=True).start()
        server.wait_until_ready()
        host, port = server.address
        ...
        server.shutdown()
    """

    def __init__(self, config: Optional[ServerConfig] = None, router: Optional[Router] = None):
        """
        Initialize the HTTP server.

        Args:
            config: Server configuration. Defaults to ServerConfig().
            router: Router to dispatch with. Defaults to the three
                built-in routes.
        """
        self.config = config or ServerConfig()
        self.config.validate()

        self._socket_server = SocketServer(self.config)
        self._parser = RequestParser()
        self._router = router or create_router()

        self._running = False

    @property
    def router(self) -> Router:
        return self._router

    @property
    def address(self) -> Tuple[str, int]:
        """The bound (host, port); the real port once listening."""
        return self._socket_server.address

    @property
    def is_running(self) -> bool:
        return self._running

    # =========================================================================
    # SERVER LIFECYCLE
    # =========================================================================

    def run(self, setup_logging: bool = True):
        """
        Bind and serve until shutdown() (blocking).

        Args:
            setup_logging: Configure the root logger from config.log_level.
                Embedders with their own logging pass False.

        Raises:
            OSError: If the listening socket cannot be bound.
        """
        if setup_logging:
            self._setup_logging()

        self._running = True
        logger.info(f"Starting HTTP server on {self.config.host}:{self.config.port}")

        try:
            self._socket_server.start(self._handle_connection)
        except KeyboardInterrupt:
            logger.info("Received keyboard interrupt")
        finally:
            self._running = False
            logger.info("Server stopped")

    def shutdown(self):
        """Stop accepting connections. In-flight connections finish on their own."""
        self._socket_server.shutdown()

    def wait_until_ready(self, timeout: Optional[float] = None) -> bool:
        """Block until the listening socket is up."""
        return self._socket_server.wait_until_ready(timeout)

    def _setup_logging(self):
        """Configure logging based on config."""
        level = getattr(logging, self.config.log_level.upper(), logging.INFO)

        logging.basicConfig(
            level=level,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

        logging.getLogger("minihttp").setLevel(level)

    # =========================================================================
    # REQUEST HANDLING
    # =========================================================================

    def _handle_connection(self, conn: Connection):
        """
        Hand a new connection to its own thread.

        Called from the accept loop, so it must return immediately.
        """
        worker = threading.Thread(
            target=self._process_connection,
            args=(conn,),
            name=f"conn-{conn.id}",
            daemon=True,
        )
        worker.start()

    def _process_connection(self, conn: Connection):
        """
        Run the whole pipeline for one connection (worker thread).

        Args:
            conn: The client connection. Closed on return.
        """
        with conn:
            try:
                start_time = time.perf_counter()

                conn.state = ConnectionState.READING
                request = self._parser.parse(conn.reader, conn.address)

                conn.state = ConnectionState.PROCESSING
                response = self._router.handle(request)
                logger.debug(f"[{conn.id}] Generated response: {response}")

                data = response.to_bytes()
                logger.debug(f"[{conn.id}] Response to write: {data!r}")

                if not conn.send_response(data):
                    return

                duration_ms = (time.perf_counter() - start_time) * 1000
                AccessLog.build(request, response, duration_ms).emit()

            except Exception as e:
                logger.exception(f"[{conn.id}] Connection error: {e}")


def create_app(config: Optional[ServerConfig] = None) -> HTTPServer:
    """
    Create an HTTP server with the built-in routes.

    Example:
        app = create_app(ServerConfig(port=4221))
        app.run()
    """
    return HTTPServer(config)
