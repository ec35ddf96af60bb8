"""Authority enforcer protocol (port) for policy-based access checks.

External enforcement layers reason in authority strings rather than enum
members: ``ROLE_<NAME>`` for roles and ``PERMISSION_<IDENTIFIER>`` for
permissions. This port answers "do these roles grant this authority?".

Following hexagonal architecture:
- Domain defines the PORT (this protocol)
- Infrastructure provides the ADAPTER (CasbinAuthorityEnforcer)
- Presentation uses the protocol for authority-string guards

Usage:
    enforcer: AuthorityEnforcerProtocol = Depends(get_authority_enforcer)

    if enforcer.is_granted(user.roles, "PERMISSION_USER_READ"):
        ...
"""

from collections.abc import Iterable
from typing import Protocol

from src.domain.enums import UserRole


class AuthorityEnforcerProtocol(Protocol):
    """Protocol for authority-string enforcement.

    Implementations:
        - CasbinAuthorityEnforcer: Casbin model with in-memory policies

    Error Handling:
        Unknown authority strings are simply not granted (fail-closed).
    """

    def is_granted(self, roles: Iterable[UserRole], authority: str) -> bool:
        """Check whether any of the roles grants an authority.

        Args:
            roles: Roles held by the principal (may be empty).
            authority: ``PERMISSION_...`` or ``ROLE_...`` token.

        Returns:
            bool: True if at least one role grants the authority.
        """
        ...

    def policies_for(self, role: UserRole) -> list[str]:
        """List the authority strings granted to one role."""
        ...
