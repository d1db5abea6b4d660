"""
Unit tests for the URL router.
"""

import pytest

from minihttp.http.router import Router, Route, RouteType, create_router, route
from minihttp.http.request import HTTPRequest
from minihttp.http.response import HTTPResponse, HTTPStatus, ok, serialize


def make_request(target: str, user_agent: str = "", version: str = "HTTP/1.1") -> HTTPRequest:
    """Helper to create a request for testing."""
    return HTTPRequest(method="GET", target=target, version=version, user_agent=user_agent)


def dummy_handler(request: HTTPRequest, params: dict) -> HTTPResponse:
    """Dummy handler for testing."""
    return ok(params.get("suffix", "dummy"), request.version)


class TestRoutes:
    """Tests for the built-in route table."""

    def test_root(self):
        """Test that / answers 200 with an empty body."""
        response = route(make_request("/"))

        assert response.status == HTTPStatus.OK
        assert response.body == ""
        assert response.content_length == 0

    def test_root_ignores_headers(self):
        """Test that headers do not change the / response."""
        assert route(make_request("/", user_agent="curl/8.1\r\n")) == route(make_request("/"))

    @pytest.mark.parametrize("suffix", ["abc", "hello-world", "a/b/c", "%20x", "user-agent", ""])
    def test_echo(self, suffix: str):
        """Test that /echo/<suffix> returns the suffix."""
        response = route(make_request("/echo/" + suffix))

        assert response.status == HTTPStatus.OK
        assert response.body == suffix
        assert response.content_length == len(suffix.encode())

    def test_echo_is_prefix_only(self):
        """Test that /echo/ elsewhere in the path is not an echo route."""
        response = route(make_request("/foo/echo/bar"))

        assert response.status == HTTPStatus.NOT_FOUND
        assert response.body == ""

    def test_echo_without_trailing_slash(self):
        """Test that /echo alone is not found."""
        assert route(make_request("/echo")).status == HTTPStatus.NOT_FOUND

    def test_echo_wins_over_user_agent(self):
        """Test first-match-wins ordering."""
        response = route(make_request("/echo/user-agent", user_agent="curl/8.1\r\n"))

        assert response.body == "user-agent"

    def test_user_agent(self):
        """Test that the User-Agent value is returned trimmed."""
        response = route(make_request("/user-agent", user_agent="curl/8.1\r\n"))

        assert response.status == HTTPStatus.OK
        assert response.body == "curl/8.1"
        assert response.content_length == 8

    @pytest.mark.parametrize("target", ["/user-agent", "/user-agent/", "/api/user-agent", "/x/user-agent?y"])
    def test_user_agent_anywhere_in_path(self, target: str):
        """Test that any target containing /user-agent matches."""
        response = route(make_request(target, user_agent="  spaced  "))

        assert response.status == HTTPStatus.OK
        assert response.body == "spaced"

    def test_user_agent_missing(self):
        """Test that an absent header gives an empty 200."""
        response = route(make_request("/user-agent"))

        assert response.status == HTTPStatus.OK
        assert response.body == ""
        assert response.content_length == 0

    @pytest.mark.parametrize("target", ["/nope", "/index.html", "//", "/Echo/abc", "/useragent", ""])
    def test_not_found(self, target: str):
        """Test that unmatched targets are 404 with an empty body."""
        response = route(make_request(target))

        assert response.status == HTTPStatus.NOT_FOUND
        assert response.status_message == "Not Found"
        assert response.body == ""
        assert response.content_length == 0

    def test_content_type_always_text_plain(self):
        """Test that every route answers text/plain."""
        for target in ["/", "/echo/x", "/user-agent", "/nope"]:
            assert route(make_request(target)).content_type == "text/plain"

    def test_version_copied(self):
        """Test that the response mirrors the request version."""
        assert route(make_request("/echo/x", version="HTTP/1.0")).version == "HTTP/1.0"
        assert route(make_request("/nope", version="HTTP/1.0")).version == "HTTP/1.0"

    def test_empty_request(self):
        """Test routing a request whose request line never arrived."""
        response = route(HTTPRequest())

        assert response.status == HTTPStatus.NOT_FOUND
        assert response.version == "HTTP/1.1"

    def test_idempotent(self):
        """Test that routing the same request twice gives equal responses."""
        request = make_request("/user-agent", user_agent="curl/8.1\r\n")

        first = route(request)
        second = route(request)

        assert first == second
        assert serialize(first) == serialize(second)

    @pytest.mark.parametrize("target", ["/", "/echo/abc", "/echo/héllo", "/user-agent", "/nope"])
    def test_wire_format(self, target: str):
        """Test that every routed response is framed correctly."""
        response = route(make_request(target, user_agent="curl/8.1\r\n"))
        data = serialize(response)

        status_line = f"HTTP/1.1 {response.status_code} {response.status_message}\r\n".encode()
        assert data.startswith(status_line)

        head, body = data.split(b"\r\n\r\n", 1)
        assert b"\r\n\r\n" not in head
        assert f"Content-Length: {len(body)}".encode() in head.split(b"\r\n")


class TestRouter:
    """Tests for Router class."""

    def test_add_route(self):
        """Test adding routes."""
        router = Router()
        router.add_route("/users", dummy_handler, RouteType.EXACT, name="users")

        routes = router.routes()
        assert len(routes) == 1
        assert routes[0].pattern == "/users"
        assert routes[0].route_type is RouteType.EXACT
        assert routes[0].name == "users"

    def test_match_exact(self):
        """Test exact matching."""
        router = Router()
        router.add_route("/", dummy_handler, RouteType.EXACT)

        assert router.match("/") is not None
        assert router.match("/x") is None

    def test_match_prefix_params(self):
        """Test that prefix matches expose the suffix."""
        router = Router()
        router.add_route("/files/", dummy_handler, RouteType.PREFIX)

        match = router.match("/files/a/b.txt")
        assert match is not None
        assert match.params == {"suffix": "a/b.txt"}
        assert router.match("/other/files/a") is None

    def test_match_contains(self):
        """Test substring matching."""
        router = Router()
        router.add_route("/status", dummy_handler, RouteType.CONTAINS)

        assert router.match("/api/status/now") is not None
        assert router.match("/api/stat") is None

    def test_first_match_wins(self):
        """Test that registration order decides between overlapping routes."""
        router = Router()
        first = router.add_route("/a", dummy_handler, RouteType.CONTAINS, name="first")
        router.add_route("/a/", dummy_handler, RouteType.PREFIX, name="second")

        assert router.match("/a/b").route is first

    def test_handle_calls_handler(self):
        """Test that handle() passes match params to the handler."""
        router = Router()
        router.add_route("/say/", dummy_handler, RouteType.PREFIX)

        response = router.handle(make_request("/say/hi"))

        assert response.status == HTTPStatus.OK
        assert response.body == "hi"

    def test_handle_not_found(self):
        """Test 404 handling on an empty router."""
        response = Router().handle(make_request("/anything"))

        assert response.status == HTTPStatus.NOT_FOUND

    def test_route_match_method(self):
        """Test Route.match directly."""
        r = Route(pattern="/echo/", route_type=RouteType.PREFIX, handler=dummy_handler)

        assert r.match("/echo/abc") == {"suffix": "abc"}
        assert r.match("/x/echo/abc") is None

    def test_create_router_order(self):
        """Test the built-in route order."""
        names = [r.name for r in create_router().routes()]

        assert names == ["index", "echo", "user_agent"]
