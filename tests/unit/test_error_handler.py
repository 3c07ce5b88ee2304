"""Unit tests for API error types and error responses."""

import json

import pytest
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request

from profile_api.api.middleware.error_handler import (
    APIError,
    AuthorizationError,
    InternalError,
    NotFoundError,
    create_error_response,
    http_exception_handler,
)
from profile_api.schemas.common import ErrorDetail, ErrorResponse


class TestErrorTypes:
    """Tests for the APIError hierarchy."""

    def test_authorization_error_defaults(self) -> None:
        """Test that failed identity checks map to 403."""
        error = AuthorizationError()

        assert error.status_code == 403
        assert error.error_type == "authorization_error"
        assert error.message == "Unauthorized access"

    def test_not_found_error_keeps_message(self) -> None:
        """Test that not found errors carry their message."""
        error = NotFoundError("Profile not found")

        assert error.status_code == 404
        assert str(error) == "Profile not found"

    def test_internal_error_is_api_error(self) -> None:
        """Test that internal errors are part of the hierarchy."""
        error = InternalError("Error creating profile", details=[{"msg": "boom", "type": "RuntimeError"}])

        assert isinstance(error, APIError)
        assert error.status_code == 500
        assert error.details == [{"msg": "boom", "type": "RuntimeError"}]


class TestCreateErrorResponse:
    """Tests for create_error_response."""

    def test_renders_standard_body(self) -> None:
        """Test that the JSON body follows the ErrorResponse shape."""
        response = create_error_response(
            error_type="not_found",
            message="Profile not found",
            status_code=404,
            request_id="req-1",
        )

        body = json.loads(response.body)
        assert response.status_code == 404
        assert body["error"] == "not_found"
        assert body["message"] == "Profile not found"
        assert body["request_id"] == "req-1"
        assert "timestamp" in body
        assert "details" not in body

    def test_renders_details(self) -> None:
        """Test that details are serialized when present."""
        response = create_error_response(
            error_type="internal_error",
            message="Error updating profile",
            status_code=500,
            details=[{"msg": "boom", "type": "RuntimeError"}],
        )

        body = json.loads(response.body)
        assert body["details"] == [{"msg": "boom", "type": "RuntimeError"}]

    def test_details_are_built_from_dicts(self) -> None:
        """Test that detail dictionaries become ErrorDetail entries."""
        error_response = ErrorResponse.from_exception(
            error_type="internal_error",
            message="Error fetching profile",
            details=[{"msg": "boom", "type": "RuntimeError"}],
        )

        assert error_response.details == [ErrorDetail(msg="boom", type="RuntimeError")]


class TestHttpExceptionHandler:
    """Tests for http_exception_handler."""

    @pytest.mark.asyncio
    async def test_renders_standard_body_and_keeps_headers(self) -> None:
        """Test that framework HTTP errors get the standard body and their headers."""
        request = Request(
            {"type": "http", "method": "DELETE", "path": "/profile/u1", "headers": [(b"x-request-id", b"req-9")]}
        )
        exc = StarletteHTTPException(status_code=405, detail="Method Not Allowed", headers={"Allow": "GET, PUT"})

        response = await http_exception_handler(request, exc)

        body = json.loads(response.body)
        assert response.status_code == 405
        assert response.headers["allow"] == "GET, PUT"
        assert body["error"] == "http_error"
        assert body["message"] == "Method Not Allowed"
        assert body["request_id"] == "req-9"
