"""
pytest configuration and fixtures.
"""

import socket
import threading
from typing import Generator, Iterable, List, Tuple, Union
import pytest

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minihttp import HTTPServer, ServerConfig
from minihttp.core import LineReader


Chunk = Union[bytes, BaseException]


class FakeSocket:
    """
    Socket stand-in that returns scripted recv() results.

    Each item is either the bytes one recv() call returns, or an exception
    that recv() raises. Once the script runs out, recv() returns b"" (EOF).
    """

    def __init__(self, chunks: Iterable[Chunk]):
        self._chunks: List[Chunk] = list(chunks)
        self.recv_calls = 0

    def recv(self, bufsize: int) -> bytes:
        self.recv_calls += 1
        if not self._chunks:
            return b""
        chunk = self._chunks.pop(0)
        if isinstance(chunk, BaseException):
            raise chunk
        return chunk


def make_reader(*chunks: Chunk, **kwargs) -> LineReader:
    """Line reader over a FakeSocket with the given recv() script."""
    return LineReader(FakeSocket(chunks), **kwargs)


@pytest.fixture
def sample_get_request() -> bytes:
    """Sample HTTP GET request with the two headers the server reads."""
    return (
        b"GET /user-agent HTTP/1.1\r\n"
        b"Host: localhost:4221\r\n"
        b"User-Agent: curl/8.1\r\n"
        b"Accept: */*\r\n"
        b"\r\n"
    )


@pytest.fixture
def running_server() -> Generator[HTTPServer, None, None]:
    """An HTTPServer on an ephemeral localhost port, served from a thread."""
    server = HTTPServer(ServerConfig(
        host="127.0.0.1",
        port=0,  # Let OS pick a free port
        log_level="WARNING",
    ))

    thread = threading.Thread(
        target=server.run,
        kwargs={"setup_logging": False},
        daemon=True,
    )
    thread.start()

    if not server.wait_until_ready(timeout=5.0):
        raise RuntimeError("Server failed to start")

    yield server

    server.shutdown()
    thread.join(timeout=5.0)


def exchange(address: Tuple[str, int], *parts: bytes, timeout: float = 5.0) -> bytes:
    """
    Send the parts over a fresh connection and read until the server closes.
    """
    with socket.create_connection(address, timeout=timeout) as sock:
        for part in parts:
            sock.sendall(part)

        received = b""
        while True:
            chunk = sock.recv(4096)
            if not chunk:
                return received
            received += chunk


@pytest.fixture
def held_port() -> Generator[int, None, None]:
    """A localhost port already bound and listening by another socket."""
    holder = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    holder.bind(("127.0.0.1", 0))
    holder.listen(1)
    yield holder.getsockname()[1]
    holder.close()
