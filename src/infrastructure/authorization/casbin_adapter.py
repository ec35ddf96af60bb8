"""Casbin implementation of AuthorityEnforcerProtocol.

Policies are derived once from the role catalog and held in memory:

    p, ROLE_EDITOR, ROLE_EDITOR
    p, ROLE_EDITOR, PERMISSION_NEWS_CREATE
    ...

The enforcer is built at FastAPI startup and only read afterwards, so
concurrent requests never observe a partially loaded policy set.

Following hexagonal architecture:
- Infrastructure implements domain protocol (AuthorityEnforcerProtocol)
- Domain doesn't know about Casbin
"""

from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING

import casbin

from src.domain.enums import UserRole

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol

MODEL_PATH = Path(__file__).with_name("model.conf")


def role_policies() -> list[list[str]]:
    """Casbin policy rules granted by every role.

    Each role is granted its own role authority plus the authority of
    every permission it bundles.

    Returns:
        list[list[str]]: ``[role_authority, authority]`` pairs, sorted.
    """
    rules: list[list[str]] = []
    for role in UserRole:
        rules.append([role.authority, role.authority])
        rules.extend(
            [role.authority, permission.authority]
            for permission in sorted(role.permissions, key=lambda p: p.value)
        )
    return rules


def build_enforcer(model_path: Path = MODEL_PATH) -> casbin.Enforcer:
    """Create a Casbin enforcer loaded with the role catalog policies.

    Args:
        model_path: Path to the Casbin model definition.

    Returns:
        casbin.Enforcer: Enforcer with in-memory policies (no adapter).
    """
    enforcer = casbin.Enforcer(str(model_path))
    enforcer.add_policies(role_policies())
    return enforcer


class CasbinAuthorityEnforcer:
    """Casbin-based authority enforcer.

    Attributes:
        _enforcer: Casbin Enforcer instance (pre-loaded, read-only).
        _logger: Structured logger.
    """

    def __init__(self, enforcer: casbin.Enforcer, logger: "LoggerProtocol") -> None:
        self._enforcer = enforcer
        self._logger = logger

    def is_granted(self, roles: Iterable[UserRole], authority: str) -> bool:
        """Check whether any role grants the authority.

        Args:
            roles: Roles held by the principal.
            authority: Authority string to check.

        Returns:
            bool: True if allowed, False if denied.
        """
        granted = any(
            self._enforcer.enforce(role.authority, authority) for role in roles
        )
        self._logger.debug(
            "authority_check",
            roles=sorted(role.value for role in roles),
            authority=authority,
            granted=granted,
        )
        return granted

    def policies_for(self, role: UserRole) -> list[str]:
        """Authority strings granted to one role, sorted."""
        return sorted(
            rule[1] for rule in self._enforcer.get_filtered_policy(0, role.authority)
        )
