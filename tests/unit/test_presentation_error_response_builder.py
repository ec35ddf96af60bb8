"""Unit tests for ErrorResponseBuilder utility.

Tests cover:
- Error code to HTTP status mapping
- RFC 7807 body for validation and not-found errors
- Field errors for ValidationError
"""

import json
from unittest.mock import MagicMock

import pytest
from fastapi import status

from src.core.enums import ErrorCode
from src.core.errors import AuthorizationError, NotFoundError, ValidationError
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder


def _request(path: str) -> MagicMock:
    request = MagicMock()
    request.url.path = path
    return request


@pytest.mark.unit
class TestErrorResponseBuilder:
    """Unit tests for ErrorResponseBuilder utility class."""

    def test_validation_error_with_field(self):
        error = ValidationError(
            code=ErrorCode.INVALID_ROLE,
            message="Unknown role: GUEST",
            field="role",
        )

        response = ErrorResponseBuilder.from_domain_error(
            error, _request("/api/v1/users/check-role/GUEST")
        )

        assert response.status_code == 400
        body = json.loads(bytes(response.body))
        assert body["title"] == "Validation Failed"
        assert body["detail"] == "Unknown role: GUEST"
        assert body["type"].endswith("/errors/invalid_role")
        assert body["instance"] == "/api/v1/users/check-role/GUEST"
        assert body["errors"] == [
            {"field": "role", "code": "invalid_role", "message": "Unknown role: GUEST"}
        ]

    def test_not_found_error(self):
        error = NotFoundError(
            code=ErrorCode.ROLE_NOT_FOUND,
            message="Role 'guest' does not exist",
            resource_type="Role",
            resource_id="guest",
        )

        response = ErrorResponseBuilder.from_domain_error(
            error, _request("/api/v1/roles/guest")
        )

        assert response.status_code == 404
        body = json.loads(bytes(response.body))
        assert body["title"] == "Resource Not Found"
        assert "errors" not in body

    def test_authorization_error_is_forbidden(self):
        error = AuthorizationError(
            code=ErrorCode.ADMIN_REQUIRED,
            message="Access denied: Administrative privileges required",
        )

        response = ErrorResponseBuilder.from_domain_error(
            error, _request("/api/v1/admin/stats")
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN

    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            (ErrorCode.INVALID_PERMISSION, 400),
            (ErrorCode.USER_NOT_FOUND, 404),
            (ErrorCode.TOKEN_EXPIRED, 401),
            (ErrorCode.PERMISSION_DENIED, 403),
            (ErrorCode.ROLE_REQUIRED, 403),
        ],
    )
    def test_status_for(self, code: ErrorCode, expected: int):
        assert ErrorResponseBuilder.status_for(code)[0] == expected
