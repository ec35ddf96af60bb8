"""Integration tests for the Casbin authority enforcer.

Tests cover:
- Policies derived from the role catalog
- is_granted() for role and permission authorities
- policies_for() per role
- Enforcer lifecycle in the container (init/get/close)

Architecture:
- Real casbin.Enforcer with in-memory policies (no adapter, no database)
- Mocked logger
"""

from unittest.mock import MagicMock

import pytest

from src.core.container import close_enforcer, get_enforcer, init_enforcer
from src.domain.enums import Permission, UserRole
from src.infrastructure.authorization import (
    CasbinAuthorityEnforcer,
    build_enforcer,
    role_policies,
)

# One role authority plus one rule per bundled permission
_EXPECTED_POLICY_COUNT = sum(1 + len(role.permissions) for role in UserRole)


@pytest.fixture(scope="module")
def casbin_enforcer():
    return build_enforcer()


@pytest.fixture
def enforcer(casbin_enforcer) -> CasbinAuthorityEnforcer:
    return CasbinAuthorityEnforcer(enforcer=casbin_enforcer, logger=MagicMock())


@pytest.mark.integration
class TestRolePolicies:
    """Test policy derivation."""

    def test_policy_count(self):
        assert len(role_policies()) == _EXPECTED_POLICY_COUNT == 145

    def test_every_role_grants_its_own_authority(self):
        rules = role_policies()
        for role in UserRole:
            assert [role.authority, role.authority] in rules

    def test_enforcer_loaded_with_every_policy(self, casbin_enforcer):
        assert len(casbin_enforcer.get_policy()) == _EXPECTED_POLICY_COUNT


@pytest.mark.integration
class TestCasbinAuthorityEnforcer:
    """Test is_granted() and policies_for()."""

    def test_permission_granted_by_role(self, enforcer):
        assert enforcer.is_granted(
            [UserRole.EDITOR], Permission.NEWS_PUBLISH.authority
        )

    def test_permission_not_granted(self, enforcer):
        assert not enforcer.is_granted(
            [UserRole.USER], Permission.USER_READ.authority
        )

    def test_any_held_role_grants(self, enforcer):
        assert enforcer.is_granted(
            [UserRole.USER, UserRole.MODERATOR], Permission.CONTENT_APPROVE.authority
        )

    def test_role_authority_is_exact(self, enforcer):
        """Test a role grants only its own ROLE_ authority."""
        assert enforcer.is_granted([UserRole.ADMIN], "ROLE_ADMIN")
        assert not enforcer.is_granted([UserRole.SUPER_ADMIN], "ROLE_ADMIN")

    def test_no_roles_grants_nothing(self, enforcer):
        assert not enforcer.is_granted([], Permission.NEWS_READ.authority)

    def test_unknown_authority_denied(self, enforcer):
        assert not enforcer.is_granted([UserRole.SUPER_ADMIN], "PERMISSION_UNKNOWN")

    def test_check_is_logged(self, casbin_enforcer):
        logger = MagicMock()
        enforcer = CasbinAuthorityEnforcer(enforcer=casbin_enforcer, logger=logger)

        enforcer.is_granted([UserRole.USER], "PERMISSION_NEWS_READ")

        logger.debug.assert_called_once_with(
            "authority_check",
            roles=["USER"],
            authority="PERMISSION_NEWS_READ",
            granted=True,
        )

    def test_policies_for_matches_role_authorities(self, enforcer):
        expected = sorted(
            [UserRole.USER.authority]
            + [p.authority for p in UserRole.USER.permissions]
        )

        assert enforcer.policies_for(UserRole.USER) == expected


@pytest.mark.integration
class TestEnforcerLifecycle:
    """Test container-managed enforcer singleton."""

    def test_get_before_init_raises(self):
        with pytest.raises(RuntimeError, match="not initialized"):
            get_enforcer()

    def test_init_get_close(self):
        created = init_enforcer()
        try:
            assert get_enforcer() is created
            with pytest.raises(RuntimeError, match="already initialized"):
                init_enforcer()
        finally:
            close_enforcer()

        with pytest.raises(RuntimeError):
            get_enforcer()
