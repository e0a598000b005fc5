"""
Unit Tests for Exception Handlers.

Tests the exception handler functions in isolation.
"""

import json
from unittest.mock import MagicMock

import pytest
from fastapi import Request
from fastapi.exceptions import RequestValidationError

from campground_api.core.exception_handlers import (
    EXCEPTION_STATUS_MAP,
    _get_request_id,
    application_error_handler,
    status_for,
    unhandled_exception_handler,
    validation_error_handler,
)
from campground_api.core.exceptions import (
    ApplicationError,
    AuthenticationError,
    AuthorizationError,
    BookingLimitError,
    ConflictError,
    DatabaseError,
    NotFoundError,
    ValidationError,
)


class TestExceptionStatusMapping:
    """Tests for exception to HTTP status code mapping."""

    @pytest.mark.parametrize(
        ("exc_class", "status"),
        [
            (NotFoundError, 404),
            (ValidationError, 400),
            (ConflictError, 400),
            (AuthenticationError, 401),
            (AuthorizationError, 401),
            (DatabaseError, 503),
        ],
    )
    def test_mapping(self, exc_class, status):
        assert EXCEPTION_STATUS_MAP[exc_class] == status

    def test_subclass_inherits_parent_status(self):
        """BookingLimitError is a ValidationError and answers 400."""
        assert status_for(BookingLimitError("limit reached", limit=3)) == 400

    def test_unknown_application_error_is_500(self):
        assert status_for(ApplicationError("boom")) == 500


class TestGetRequestId:
    """Tests for request ID extraction."""

    def test_extracts_from_request_state(self):
        request = MagicMock(spec=Request)
        request.state.request_id = "state-123"
        request.headers = {}

        assert _get_request_id(request) == "state-123"

    def test_extracts_from_header(self):
        request = MagicMock(spec=Request)
        del request.state.request_id
        request.headers = {"x-request-id": "header-456"}

        assert _get_request_id(request) == "header-456"

    def test_returns_none_when_not_present(self):
        request = MagicMock(spec=Request)
        del request.state.request_id
        request.headers = {}

        assert _get_request_id(request) is None


class TestApplicationErrorHandler:
    """Tests for application_error_handler."""

    @pytest.fixture
    def mock_request(self):
        request = MagicMock(spec=Request)
        request.url.path = "/api/v1/campgrounds"
        request.method = "GET"
        request.headers = {"x-request-id": "test-123"}
        del request.state.request_id
        return request

    async def test_not_found_returns_404(self, mock_request):
        response = await application_error_handler(
            mock_request, NotFoundError("No campground with the id of abc")
        )

        assert response.status_code == 404
        body = json.loads(response.body)
        assert body["success"] is False
        assert body["error"]["code"] == "RES_NOT_FOUND"
        assert body["error"]["message"] == "No campground with the id of abc"
        assert body["metadata"]["request_id"] == "test-123"

    async def test_conflict_returns_400(self, mock_request):
        response = await application_error_handler(mock_request, ConflictError("Already favorited"))

        assert response.status_code == 400
        assert json.loads(response.body)["error"]["code"] == "RES_CONFLICT"

    async def test_booking_limit_includes_details(self, mock_request):
        exc = BookingLimitError("The user with ID u1 has already made 3 appointments", limit=3)

        response = await application_error_handler(mock_request, exc)

        body = json.loads(response.body)
        assert response.status_code == 400
        assert body["error"]["code"] == "VAL_BOOKING_LIMIT"
        assert body["error"]["details"] == {"limit": 3}

    async def test_not_authorized_returns_401(self, mock_request):
        response = await application_error_handler(
            mock_request, AuthorizationError("User role user is not authorized to access this route")
        )
        assert response.status_code == 401


class TestValidationErrorHandler:
    async def test_returns_400_with_field_details(self):
        request = MagicMock(spec=Request)
        request.url.path = "/api/v1/campgrounds"
        request.method = "POST"
        request.headers = {}
        del request.state.request_id

        exc = RequestValidationError(
            [{"loc": ("body", "telephone"), "msg": "String should match pattern", "type": "string_pattern_mismatch"}]
        )
        response = await validation_error_handler(request, exc)

        body = json.loads(response.body)
        assert response.status_code == 400
        assert body["error"]["code"] == "VAL_REQUEST_INVALID"
        errors = body["error"]["details"]["validation_errors"]
        assert errors[0]["field"] == "body.telephone"


class TestUnhandledExceptionHandler:
    async def test_hides_internal_details(self):
        request = MagicMock(spec=Request)
        request.url.path = "/api/v1/campgrounds"
        request.method = "GET"
        request.headers = {}
        del request.state.request_id

        response = await unhandled_exception_handler(request, RuntimeError("secret detail"))

        body = json.loads(response.body)
        assert response.status_code == 500
        assert body["error"]["code"] == "SYS_INTERNAL_ERROR"
        assert "secret detail" not in response.body.decode()
