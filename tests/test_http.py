"""HTTP value tests."""

import dataclasses

import pytest
from tinyrouter_core.http.method import Method
from tinyrouter_core.http.request import Request, Response


class TestMethod:
    """Test Method enum."""

    def test_from_string_case_insensitive(self):
        """Test parsing is case-insensitive."""
        assert Method.from_string("get") is Method.GET
        assert Method.from_string(" Patch ") is Method.PATCH
        assert Method.from_string(Method.HEAD) is Method.HEAD

    def test_unknown_method(self):
        """Test unknown methods are rejected."""
        with pytest.raises(ValueError):
            Method.from_string("BREW")

    def test_str(self):
        """Test string form is the method name."""
        assert str(Method.DELETE) == "DELETE"


class TestRequest:
    """Test Request class."""

    def test_create_request(self):
        """Test request creation."""
        request = Request(
            method="GET",
            path="/api/users",
            headers={"Content-Type": "application/json"},
            query={"page": "1"},
        )
        assert request.method is Method.GET
        assert request.path == "/api/users"
        assert request.query["page"] == "1"
        assert request.params == {}

    def test_with_params_returns_new_request(self):
        """Test with_params leaves the original untouched."""
        request = Request("GET", "/users/1")
        updated = request.with_params({"id": "1"})

        assert updated is not request
        assert updated.param("id") == "1"
        assert request.param("id") is None
        assert updated.path == request.path

    def test_immutable(self):
        """Test requests cannot be mutated."""
        request = Request("GET", "/", headers={"A": "1"})

        with pytest.raises(dataclasses.FrozenInstanceError):
            request.path = "/other"
        with pytest.raises(TypeError):
            request.headers["B"] = "2"

    def test_caller_dict_changes_do_not_leak(self):
        """Test the request copies its mappings."""
        headers = {"A": "1"}
        request = Request("GET", "/", headers=headers)
        headers["A"] = "2"

        assert request.headers["A"] == "1"

    def test_get_header_case_insensitive(self):
        """Test header lookup ignores case."""
        request = Request("GET", "/", headers={"X-Request-Id": "abc"})

        assert request.get_header("x-request-id") == "abc"
        assert request.get_header("missing", "none") == "none"


class TestResponse:
    """Test Response class."""

    def test_create_response(self):
        """Test response creation."""
        response = Response("OK")
        assert response.status == 200
        assert response.body == "OK"
        assert response.is_success

    def test_with_header_returns_new_response(self):
        """Test with_header leaves the original untouched."""
        response = Response("OK")
        updated = response.with_header("X-A", "1")

        assert updated.headers == {"X-A": "1"}
        assert response.headers == {}

    def test_response_json(self):
        """Test JSON response."""
        response = Response.json({"message": "success"}, status=201)
        assert response.status == 201
        assert response.headers["Content-Type"] == "application/json"
        assert '"message"' in response.body

    def test_redirect(self):
        """Test redirect response."""
        response = Response.redirect("/login")
        assert response.is_redirect
        assert response.headers["Location"] == "/login"

    def test_error(self):
        """Test error response."""
        response = Response.error(404)
        assert response.is_error
        assert response.status_message == "Not Found"
        assert "Not Found" in response.body


class TestHashing:
    """Test request/response hashing."""

    def test_request_unhashable(self):
        """Test requests refuse hashing instead of failing on a field."""
        assert Request.__hash__ is None
        with pytest.raises(TypeError):
            hash(Request("GET", "/"))

    def test_response_unhashable(self):
        """Test responses refuse hashing."""
        assert Response.__hash__ is None
        with pytest.raises(TypeError):
            {Response("OK")}
