"""Authorization infrastructure package.

Casbin-based authority enforcement:
- model.conf: Authority model definition (sub, obj)
- casbin_adapter.py: CasbinAuthorityEnforcer implementing AuthorityEnforcerProtocol
"""

from src.infrastructure.authorization.casbin_adapter import (
    CasbinAuthorityEnforcer,
    build_enforcer,
    role_policies,
)

__all__ = [
    "CasbinAuthorityEnforcer",
    "build_enforcer",
    "role_policies",
]
