"""Unit tests for AuthorizationService (authorization gate).

Tests cover:
- Boolean queries deny a missing principal without raising
- can_manage_user() for full targets and bare identifiers
- can_access_user_resource()
- can_perform_action() resource/action table (case-insensitive)
- require_* methods return Success/Failure with error codes and messages

Architecture:
- Pure unit tests (service has no dependencies)
"""

import pytest
from uuid_extensions import uuid7

from src.application.services.authorization_service import AuthorizationService
from src.core.enums import ErrorCode
from src.core.errors import AuthorizationError
from src.core.result import Failure, Success
from src.domain.enums import Permission, UserRole
from tests.conftest import create_user


@pytest.fixture
def service() -> AuthorizationService:
    return AuthorizationService()


@pytest.mark.unit
class TestMissingPrincipal:
    """A missing principal holds nothing."""

    def test_boolean_queries_are_false(self, service: AuthorizationService):
        assert service.has_permission(None, Permission.NEWS_READ) is False
        assert service.has_any_permission(None, Permission.NEWS_READ) is False
        assert service.has_all_permissions(None) is False
        assert service.has_role(None, UserRole.USER) is False
        assert service.has_any_role(None, UserRole.USER) is False
        assert service.is_admin(None) is False
        assert service.can_manage_user(None, uuid7()) is False
        assert service.can_access_user_resource(None, uuid7()) is False
        assert service.can_perform_action(None, "news", "read") is False

    def test_get_all_permissions_is_empty(self, service: AuthorizationService):
        assert service.get_all_permissions(None) == frozenset()

    def test_require_methods_fail(self, service: AuthorizationService):
        assert isinstance(service.require_permission(None, Permission.NEWS_READ), Failure)
        assert isinstance(service.require_role(None, UserRole.USER), Failure)
        assert isinstance(service.require_admin(None), Failure)


@pytest.mark.unit
class TestPermissionQueries:
    """Test permission and role queries against a principal."""

    def test_has_permission(self, service: AuthorizationService):
        editor = create_user(UserRole.EDITOR)

        assert service.has_permission(editor, Permission.NEWS_PUBLISH)
        assert not service.has_permission(editor, Permission.USER_DELETE)

    def test_has_all_permissions_vacuous_for_present_principal(
        self, service: AuthorizationService
    ):
        assert service.has_all_permissions(create_user()) is True

    def test_get_all_permissions(self, service: AuthorizationService):
        moderator = create_user(UserRole.MODERATOR)

        assert service.get_all_permissions(moderator) == UserRole.MODERATOR.permissions

    def test_is_admin(self, service: AuthorizationService):
        assert service.is_admin(create_user(UserRole.ADMIN))
        assert not service.is_admin(create_user(UserRole.EDITOR))


@pytest.mark.unit
class TestUserManagement:
    """Test can_manage_user() and can_access_user_resource()."""

    def test_admin_manages_any_user(self, service: AuthorizationService):
        admin = create_user(UserRole.ADMIN)

        assert service.can_manage_user(admin, create_user(UserRole.SUPER_ADMIN))
        assert service.can_manage_user(admin, create_user(UserRole.USER))

    def test_admin_manages_any_bare_identifier(self, service: AuthorizationService):
        admin = create_user(UserRole.ADMIN)

        assert service.can_manage_user(admin, uuid7())

    def test_non_admin_manages_only_own_identifier(
        self, service: AuthorizationService
    ):
        editor = create_user(UserRole.EDITOR)

        assert service.can_manage_user(editor, editor.id)
        assert not service.can_manage_user(editor, uuid7())

    def test_missing_target_is_never_manageable(self, service: AuthorizationService):
        assert service.can_manage_user(create_user(UserRole.SUPER_ADMIN), None) is False
        assert service.can_manage_user(create_user(UserRole.ADMIN), None) is False
        assert service.can_manage_user(create_user(UserRole.USER), None) is False

    def test_can_access_user_resource(self, service: AuthorizationService):
        user = create_user(UserRole.USER)

        assert service.can_access_user_resource(user, user.id)
        assert not service.can_access_user_resource(user, uuid7())
        assert service.can_access_user_resource(create_user(UserRole.ADMIN), uuid7())


@pytest.mark.unit
class TestCanPerformAction:
    """Test the resource/action table."""

    @pytest.mark.parametrize(
        ("role", "resource_type", "action", "expected"),
        [
            (UserRole.EDITOR, "news", "publish", True),
            (UserRole.EDITOR, "news", "delete", True),
            (UserRole.EDITOR, "member", "delete", False),
            (UserRole.MODERATOR, "news", "moderate", True),
            (UserRole.MODERATOR, "news", "create", False),
            (UserRole.USER, "player", "read", True),
            (UserRole.USER, "user", "read", False),
            (UserRole.ADMIN, "tournament", "manage_results", True),
            (UserRole.ADMIN, "media", "manage_galleries", True),
        ],
    )
    def test_action_table(
        self,
        service: AuthorizationService,
        role: UserRole,
        resource_type: str,
        action: str,
        expected: bool,
    ):
        assert (
            service.can_perform_action(create_user(role), resource_type, action)
            is expected
        )

    def test_player_statistics_follow_the_permission(
        self, service: AuthorizationService
    ):
        holder = create_user(UserRole.EDITOR)
        other = create_user(UserRole.USER)

        assert holder.has_permission(Permission.PLAYER_MANAGE_STATISTICS)
        assert not other.has_permission(Permission.PLAYER_MANAGE_STATISTICS)
        assert service.can_perform_action(holder, "player", "manage_statistics")
        assert not service.can_perform_action(other, "player", "manage_statistics")

    def test_matching_is_case_insensitive(self, service: AuthorizationService):
        editor = create_user(UserRole.EDITOR)

        assert service.can_perform_action(editor, "NEWS", "Publish")

    def test_unknown_resource_or_action_is_denied(self, service: AuthorizationService):
        super_admin = create_user(UserRole.SUPER_ADMIN)

        assert not service.can_perform_action(super_admin, "stadium", "read")
        assert not service.can_perform_action(super_admin, "news", "archive")


@pytest.mark.unit
class TestRequireMethods:
    """Test Result-returning require_* methods."""

    def test_require_permission_success(self, service: AuthorizationService):
        result = service.require_permission(
            create_user(UserRole.SUPER_ADMIN), Permission.USER_CREATE
        )

        assert result == Success(value=None)

    def test_require_permission_failure(self, service: AuthorizationService):
        result = service.require_permission(
            create_user(UserRole.USER), Permission.USER_CREATE
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthorizationError)
        assert result.error.code == ErrorCode.PERMISSION_DENIED
        assert (
            result.error.message
            == "Access denied: Missing required permission Create new users"
        )
        assert result.error.required_permission == "PERMISSION_USER_CREATE"

    def test_require_any_permission(self, service: AuthorizationService):
        user = create_user(UserRole.USER)

        ok = service.require_any_permission(
            user, Permission.NEWS_CREATE, Permission.NEWS_READ
        )
        denied = service.require_any_permission(user, Permission.NEWS_CREATE)

        assert isinstance(ok, Success)
        assert isinstance(denied, Failure)
        assert denied.error.message == "Access denied: Missing required permissions"
        assert denied.error.details == {
            "required_permissions": "PERMISSION_NEWS_CREATE"
        }

    def test_require_all_permissions(self, service: AuthorizationService):
        editor = create_user(UserRole.EDITOR)

        ok = service.require_all_permissions(
            editor, Permission.NEWS_CREATE, Permission.NEWS_PUBLISH
        )
        denied = service.require_all_permissions(
            editor, Permission.NEWS_CREATE, Permission.USER_DELETE
        )

        assert isinstance(ok, Success)
        assert isinstance(denied, Failure)
        assert denied.error.code == ErrorCode.PERMISSION_DENIED

    def test_require_role_failure(self, service: AuthorizationService):
        result = service.require_role(create_user(UserRole.ADMIN), UserRole.SUPER_ADMIN)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.ROLE_REQUIRED
        assert (
            result.error.message
            == "Access denied: Missing required role Super Administrator"
        )
        assert result.error.required_role == "ROLE_SUPER_ADMIN"

    def test_require_admin(self, service: AuthorizationService):
        assert isinstance(service.require_admin(create_user(UserRole.ADMIN)), Success)

        result = service.require_admin(create_user(UserRole.EDITOR))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.ADMIN_REQUIRED
        assert result.error.message == "Access denied: Administrative privileges required"
