"""
=============================================================================
LOW-LEVEL TCP SOCKET SERVER
=============================================================================

Owns the listening socket and runs the accept loop. It knows nothing
about HTTP: every accepted socket is wrapped in a Connection and handed
to a callback.

=============================================================================
LIFECYCLE
=============================================================================

    start(handler)
        │
        ├──► _create_socket()   socket(), SO_REUSEADDR, TCP_NODELAY
        ├──► bind()             failure here is fatal: logged and re-raised
        ├──► listen()
        ├──► _setup_signals()   SIGINT/SIGTERM → shutdown() (main thread only)
        │
        └──► _accept_loop()     blocks until shutdown()
                 │
                 └──► accept() → Connection → handler(conn)

    shutdown()                  sets the shutdown event, loop exits within 1 second
                                (before start(), start() returns without binding)
    _cleanup()                  restores signals, closes the listener

The accept() call has a 1-second timeout. That timeout exists only so the
loop can notice shutdown(); it never applies to client sockets.

=============================================================================
"""

import socket
import signal
import logging
import threading
from typing import Optional, Callable, Tuple

from ..config import ServerConfig
from .connection import Connection


logger = logging.getLogger(__name__)


class SocketServer:
    """
    Low-level TCP socket server.

    Usage:
        def handle_connection(conn: Connection):
            ...

        server = SocketServer(config)
        server.start(handle_connection)  # Blocks until shutdown
    """

    def __init__(self, config: ServerConfig):
        self.config = config

        self._socket: Optional[socket.socket] = None
        self._running = False

        # Set once the socket is listening, so other threads can wait for it
        self._ready_event = threading.Event()
        # Set by shutdown(); never cleared, a stopped server is not restarted
        self._shutdown_event = threading.Event()

        self._original_handlers: dict = {}

    @property
    def is_running(self) -> bool:
        """Check if server is running."""
        return self._running

    @property
    def address(self) -> Tuple[str, int]:
        """
        Get the server's bound address (IP, port).

        Once listening this is the real address, so port=0 resolves to
        the port the OS picked.
        """
        if self._socket is not None:
            host, port = self._socket.getsockname()[:2]
            return (host, port)
        return (self.config.host, self.config.port)

    def _create_socket(self) -> socket.socket:
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)

        # Avoid "Address already in use" while the old socket sits in TIME_WAIT
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)

        # Responses are written in one sendall(); send them immediately
        sock.setsockopt(socket.IPPROTO_TCP, socket.TCP_NODELAY, 1)

        sock.settimeout(1.0)
        return sock

    def _setup_signals(self):
        """
        Install SIGTERM/SIGINT handlers that trigger shutdown().

        Python only allows signal handlers in the main thread, so when the
        server runs in a background thread (tests, embedding) this is a
        no-op and the owner calls shutdown() directly.
        """
        if threading.current_thread() is not threading.main_thread():
            return

        def shutdown_handler(signum, frame):
            signal_name = signal.Signals(signum).name
            logger.info(f"Received {signal_name}, initiating shutdown...")
            self.shutdown()

        self._original_handlers[signal.SIGTERM] = signal.signal(signal.SIGTERM, shutdown_handler)
        self._original_handlers[signal.SIGINT] = signal.signal(signal.SIGINT, shutdown_handler)

    def _restore_signals(self):
        """Restore original signal handlers."""
        for sig, handler in self._original_handlers.items():
            signal.signal(sig, handler)
        self._original_handlers.clear()

    def start(self, connection_handler: Callable[[Connection], None]):
        """
        Bind, listen and accept connections until shutdown() is called.

        Args:
            connection_handler: Called once per accepted connection. It must
                not block the loop; HTTPServer hands the connection to a
                new thread.

        Raises:
            OSError: If the address cannot be bound.
        """
        if self._shutdown_event.is_set():
            logger.info("Shutdown requested before start, not binding")
            return

        self._socket = self._create_socket()

        try:
            self._socket.bind((self.config.host, self.config.port))
        except OSError as e:
            logger.error(f"Failed to bind to {self.config.host}:{self.config.port}: {e}")
            self._socket.close()
            self._socket = None
            raise

        self._socket.listen(self.config.backlog)

        self._running = True
        self._setup_signals()

        host, port = self.address
        logger.info(f"Server listening on {host}:{port}")
        self._ready_event.set()

        try:
            self._accept_loop(connection_handler)
        finally:
            self._cleanup()

    def _accept_loop(self, connection_handler: Callable[[Connection], None]):
        """
        Accept connections until shutdown.

        A failed accept() is logged and the loop carries on; it never
        affects connections already handed off.
        """
        while not self._shutdown_event.is_set():
            try:
                client_socket, client_address = self._socket.accept()
            except socket.timeout:
                continue
            except OSError as e:
                if self._shutdown_event.is_set():
                    break
                logger.error(f"Accept error: {e}")
                continue

            conn = Connection(
                socket=client_socket,
                address=client_address,
                buffer_size=self.config.buffer_size,
                max_line_length=self.config.max_line_length,
            )
            logger.debug(f"[{conn.id}] Accepted connection from {conn.client_ip}:{conn.client_port}")

            connection_handler(conn)

    def shutdown(self):
        """
        Initiate shutdown. Idempotent and safe from any thread.

        Called before start(), it makes start() return without binding.
        """
        if self._running:
            logger.info("Shutting down socket server...")
        self._running = False
        self._shutdown_event.set()

    def _cleanup(self):
        self._restore_signals()

        if self._socket:
            try:
                self._socket.close()
            except OSError:
                pass
            self._socket = None

        self._ready_event.clear()
        logger.info("Socket server stopped")

    def wait_until_ready(self, timeout: Optional[float] = None) -> bool:
        """
        Block until the socket is listening.

        Returns:
            True if the server is listening, False on timeout.
        """
        return self._ready_event.wait(timeout)
