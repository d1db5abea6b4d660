"""
Unit tests for the client connection wrapper.
"""

import socket

import pytest

from minihttp.core import Connection, ConnectionState


@pytest.fixture
def socket_pair():
    """Connected (server side, client side) sockets."""
    server_side, client_side = socket.socketpair()
    yield server_side, client_side
    server_side.close()
    client_side.close()


class TestConnection:
    """Tests for Connection class."""

    def test_initial_state(self, socket_pair):
        """Test a freshly wrapped connection."""
        server_side, _ = socket_pair
        conn = Connection(server_side, ("127.0.0.1", 50000))

        assert conn.state is ConnectionState.NEW
        assert conn.client_ip == "127.0.0.1"
        assert conn.client_port == 50000
        assert len(conn.id) == 8
        assert conn.age >= 0

    def test_reader_reads_from_socket(self, socket_pair):
        """Test that the reader is bound to the client socket."""
        server_side, client_side = socket_pair
        conn = Connection(server_side, ("127.0.0.1", 50000))

        client_side.sendall(b"GET / HTTP/1.1\r\n")

        assert conn.reader.next_line() == b"GET / HTTP/1.1\r\n"

    def test_send_response(self, socket_pair):
        """Test that the whole payload reaches the peer."""
        server_side, client_side = socket_pair
        conn = Connection(server_side, ("127.0.0.1", 50000))

        assert conn.send_response(b"HTTP/1.1 200 OK\r\n\r\n") is True
        assert conn.state is ConnectionState.WRITING
        assert client_side.recv(1024) == b"HTTP/1.1 200 OK\r\n\r\n"

    def test_close_sends_eof(self, socket_pair):
        """Test that the peer sees end of stream after close."""
        server_side, client_side = socket_pair
        conn = Connection(server_side, ("127.0.0.1", 50000))

        conn.send_response(b"abc")
        conn.close()

        assert client_side.recv(1024) == b"abc"
        assert client_side.recv(1024) == b""
        assert conn.state is ConnectionState.CLOSED

    def test_close_twice(self, socket_pair):
        """Test that close() is idempotent."""
        server_side, _ = socket_pair
        conn = Connection(server_side, ("127.0.0.1", 50000))

        conn.close()
        conn.close()

        assert conn.state is ConnectionState.CLOSED

    def test_send_after_close(self, socket_pair):
        """Test that writing to a closed connection reports failure."""
        server_side, _ = socket_pair
        conn = Connection(server_side, ("127.0.0.1", 50000))
        conn.close()

        assert conn.send_response(b"late") is False

    def test_context_manager_closes(self, socket_pair):
        """Test that leaving the with block closes the connection."""
        server_side, _ = socket_pair

        with Connection(server_side, ("127.0.0.1", 50000)) as conn:
            assert conn.state is ConnectionState.NEW

        assert conn.state is ConnectionState.CLOSED

    def test_context_manager_does_not_swallow(self, socket_pair):
        """Test that exceptions inside the with block propagate."""
        server_side, _ = socket_pair

        with pytest.raises(RuntimeError):
            with Connection(server_side, ("127.0.0.1", 50000)):
                raise RuntimeError("boom")
