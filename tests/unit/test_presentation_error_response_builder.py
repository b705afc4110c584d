"""Unit tests for ErrorResponseBuilder (RFC 9457 problem details)."""

import json
from unittest.mock import MagicMock

import pytest

from userwallet.application.errors import ApplicationError, ApplicationErrorCode
from userwallet.core.enums import ErrorCode
from userwallet.core.errors import ValidationError
from userwallet.presentation.api.v1.errors import ErrorResponseBuilder


def make_request(path: str = "/api/v1/users") -> MagicMock:
    request = MagicMock()
    request.url.path = path
    return request


@pytest.mark.unit
class TestErrorResponseBuilder:
    """Test mapping of application errors to HTTP responses."""

    @pytest.mark.parametrize(
        "code, status",
        [
            (ApplicationErrorCode.COMMAND_VALIDATION_FAILED, 400),
            (ApplicationErrorCode.QUERY_VALIDATION_FAILED, 400),
            (ApplicationErrorCode.NOT_FOUND, 404),
            (ApplicationErrorCode.CONFLICT, 409),
            (ApplicationErrorCode.COMMAND_EXECUTION_FAILED, 500),
            (ApplicationErrorCode.QUERY_FAILED, 500),
        ],
    )
    def test_status_codes(self, code, status):
        assert ErrorResponseBuilder.get_status_code(code) == status

    def test_problem_body(self):
        # Arrange
        error = ApplicationError(
            code=ApplicationErrorCode.CONFLICT,
            message="User already exists",
        )

        # Act
        response = ErrorResponseBuilder.from_application_error(
            error=error, request=make_request(), request_id="req-1"
        )

        # Assert
        body = json.loads(response.body)
        assert response.status_code == 409
        assert body["type"].endswith("/errors/conflict")
        assert body["title"] == "Resource Conflict"
        assert body["detail"] == "User already exists"
        assert body["instance"] == "/api/v1/users"
        assert body["request_id"] == "req-1"
        assert "errors" not in body

    def test_validation_failure_lists_field(self):
        error = ApplicationError(
            code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
            message="Invalid email",
            domain_error=ValidationError(
                code=ErrorCode.INVALID_EMAIL,
                message="Invalid email",
                field="email",
            ),
        )

        response = ErrorResponseBuilder.from_application_error(
            error=error, request=make_request(), request_id="req-2"
        )

        body = json.loads(response.body)
        assert response.status_code == 400
        assert body["errors"] == [
            {"field": "email", "code": "invalid_email", "message": "Invalid email"}
        ]
