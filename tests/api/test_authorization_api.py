"""API tests for authorization dependencies and admin routes.

Tests cover:
- 401 for missing, invalid and expired tokens (RFC 7807 body)
- require_permission / require_any_permission / require_all_permissions
- require_authority (Casbin enforcer)
- require_admin and require_role on the admin routes
- Unknown role claims are dropped, never mapped to a default role

Architecture:
- Uses the real app with the lifespan running (Casbin enforcer loaded)
- Real JWTs signed by the application's token service
- Guard-only test endpoints are added to the real app once per module

Reference:
    - src/presentation/routers/api/middleware/authorization_dependencies.py
"""

from typing import Annotated

import pytest
from fastapi import Depends
from freezegun import freeze_time

from src.core.config import settings
from src.domain.enums import Permission, UserRole
from src.presentation.routers.api.middleware.authorization_dependencies import (
    require_all_permissions,
    require_any_permission,
    require_authority,
    require_permission,
)
from tests.conftest import auth_headers, create_user, issue_token


# =============================================================================
# Test Endpoints Setup
# =============================================================================


def setup_test_endpoints():
    """Add guard-protected test endpoints to the real app."""
    from src.main import app

    @app.post("/test/news/publish")
    async def publish_news(
        _: Annotated[None, Depends(require_permission(Permission.NEWS_PUBLISH))],
    ):
        return {"published": True}

    @app.get("/test/review-queue")
    async def review_queue(
        _: Annotated[
            None,
            Depends(
                require_any_permission(
                    Permission.CONTENT_APPROVE,
                    Permission.NEWS_CREATE,
                )
            ),
        ],
    ):
        return {"items": []}

    @app.delete("/test/news")
    async def purge_news(
        _: Annotated[
            None,
            Depends(
                require_all_permissions(
                    Permission.NEWS_DELETE,
                    Permission.SYSTEM_ADMIN,
                )
            ),
        ],
    ):
        return {"purged": True}

    @app.get("/test/user-directory")
    async def user_directory(
        _: Annotated[None, Depends(require_authority("PERMISSION_USER_READ"))],
    ):
        return {"users": []}

    # Edge case endpoints
    @app.get("/test/empty-any")
    async def empty_any(
        _: Annotated[None, Depends(require_any_permission())],
    ):
        return {"ok": True}

    @app.get("/test/empty-all")
    async def empty_all(
        _: Annotated[None, Depends(require_all_permissions())],
    ):
        return {"ok": True}


@pytest.fixture(scope="module", autouse=True)
def setup_endpoints():
    """Setup test endpoints once for the entire module."""
    setup_test_endpoints()


# =============================================================================
# Authentication
# =============================================================================


@pytest.mark.api
class TestAuthentication:
    """Test 401 responses."""

    def test_missing_token_returns_401(self, client):
        response = client.post("/test/news/publish")

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"
        body = response.json()
        assert body["status"] == 401
        assert body["title"] == "Authentication Required"
        assert body["detail"] == "Not authenticated"

    def test_invalid_token_returns_401(self, client):
        response = client.post(
            "/test/news/publish",
            headers={"Authorization": "Bearer not-a-jwt"},
        )

        assert response.status_code == 401

    def test_expired_token_returns_401(self, client):
        with freeze_time("2024-01-01 12:00:00"):
            token = issue_token(create_user(UserRole.SUPER_ADMIN))

        response = client.post(
            "/test/news/publish",
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 401

    def test_problem_details_carry_trace_id(self, client):
        response = client.post("/test/news/publish")

        assert response.json()["trace_id"] == response.headers["X-Trace-Id"]

    def test_unknown_roles_in_token_are_dropped(self, client):
        user = create_user(UserRole.EDITOR)
        token = issue_token(user, roles=["EDITOR", "GUEST"])

        response = client.get(
            "/api/v1/users/me",
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 200
        assert response.json()["roles"] == ["EDITOR"]

    def test_token_with_only_unknown_roles_has_no_permissions(self, client):
        user = create_user()
        token = issue_token(user, roles=["ROOT"])

        response = client.post(
            "/test/news/publish",
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 403


# =============================================================================
# Permission guards
# =============================================================================


@pytest.mark.api
class TestRequirePermission:
    """Test require_permission dependency."""

    def test_returns_403_when_permission_missing(self, client):
        response = client.post(
            "/test/news/publish",
            headers=auth_headers(create_user(UserRole.MODERATOR)),
        )

        assert response.status_code == 403
        body = response.json()
        assert body["title"] == "Access Denied"
        assert body["detail"] == "Access denied: Missing required permission Publish news"

    def test_allows_access_when_permission_held(self, client):
        response = client.post(
            "/test/news/publish",
            headers=auth_headers(create_user(UserRole.EDITOR)),
        )

        assert response.status_code == 200
        assert response.json() == {"published": True}


@pytest.mark.api
class TestRequireAnyPermission:
    """Test require_any_permission dependency."""

    @pytest.mark.parametrize("role", [UserRole.MODERATOR, UserRole.EDITOR])
    def test_any_matching_permission_allows(self, client, role: UserRole):
        response = client.get(
            "/test/review-queue", headers=auth_headers(create_user(role))
        )

        assert response.status_code == 200

    def test_no_matching_permission_denies(self, client):
        response = client.get(
            "/test/review-queue", headers=auth_headers(create_user(UserRole.USER))
        )

        assert response.status_code == 403
        assert response.json()["detail"] == "Access denied: Missing required permissions"

    def test_empty_permission_list_denies(self, client):
        response = client.get(
            "/test/empty-any",
            headers=auth_headers(create_user(UserRole.SUPER_ADMIN)),
        )

        assert response.status_code == 403


@pytest.mark.api
class TestRequireAllPermissions:
    """Test require_all_permissions dependency."""

    def test_all_permissions_required(self, client):
        response = client.delete(
            "/test/news", headers=auth_headers(create_user(UserRole.ADMIN))
        )

        # ADMIN holds NEWS_DELETE but not SYSTEM_ADMIN
        assert response.status_code == 403

    def test_all_permissions_held(self, client):
        response = client.delete(
            "/test/news", headers=auth_headers(create_user(UserRole.SUPER_ADMIN))
        )

        assert response.status_code == 200

    def test_empty_permission_list_allows(self, client):
        response = client.get(
            "/test/empty-all", headers=auth_headers(create_user())
        )

        assert response.status_code == 200


@pytest.mark.api
class TestRequireAuthority:
    """Test require_authority dependency (Casbin)."""

    def test_authority_granted(self, client):
        response = client.get(
            "/test/user-directory", headers=auth_headers(create_user(UserRole.ADMIN))
        )

        assert response.status_code == 200

    def test_authority_denied(self, client):
        response = client.get(
            "/test/user-directory", headers=auth_headers(create_user(UserRole.EDITOR))
        )

        assert response.status_code == 403
        assert (
            response.json()["detail"]
            == "Access denied: Missing required authority PERMISSION_USER_READ"
        )


# =============================================================================
# Admin routes
# =============================================================================


@pytest.mark.api
class TestAdminRoutes:
    """Test require_admin and require_role on registry routes."""

    def test_stats_for_admin(self, client):
        response = client.get(
            "/api/v1/admin/stats", headers=auth_headers(create_user(UserRole.ADMIN))
        )

        assert response.status_code == 200
        data = response.json()
        assert data["total_permissions"] == 50
        assert data["total_roles"] == 5
        assert data["policy_count"] == 145
        assert data["permissions_per_role"] == {
            "SUPER_ADMIN": 50,
            "ADMIN": 47,
            "EDITOR": 25,
            "MODERATOR": 11,
            "USER": 7,
        }

    def test_stats_denied_for_editor(self, client):
        response = client.get(
            "/api/v1/admin/stats", headers=auth_headers(create_user(UserRole.EDITOR))
        )

        assert response.status_code == 403
        assert (
            response.json()["detail"]
            == "Access denied: Administrative privileges required"
        )

    def test_stats_requires_authentication(self, client):
        assert client.get("/api/v1/admin/stats").status_code == 401

    def test_system_info_for_super_admin(self, client):
        response = client.get(
            "/api/v1/admin/system",
            headers=auth_headers(create_user(UserRole.SUPER_ADMIN)),
        )

        assert response.status_code == 200
        data = response.json()
        assert data["environment"] == settings.environment.value
        assert data["token_lifetime_minutes"] > 0

    def test_system_info_denied_for_admin(self, client):
        """Test the exact role is required; ADMIN does not satisfy SUPER_ADMIN."""
        response = client.get(
            "/api/v1/admin/system", headers=auth_headers(create_user(UserRole.ADMIN))
        )

        assert response.status_code == 403
        assert (
            response.json()["detail"]
            == "Access denied: Missing required role Super Administrator"
        )
