"""Authorization dependency factories.

- AuthorizationService: stateless gate, app-scoped
- Casbin enforcer: built from the role catalog at application startup
"""

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from casbin import Enforcer

    from src.application.services.authorization_service import AuthorizationService
    from src.domain.protocols.authority_enforcer_protocol import (
        AuthorityEnforcerProtocol,
    )


# Module-level state for enforcer singleton
_enforcer: "Enforcer | None" = None


# ============================================================================
# Authorization Service
# ============================================================================


@lru_cache()
def get_authorization_service() -> "AuthorizationService":
    """Get authorization service singleton (app-scoped).

    Usage:
        service: AuthorizationService = Depends(get_authorization_service)
    """
    from src.application.services.authorization_service import AuthorizationService

    return AuthorizationService()


# ============================================================================
# Authority Enforcement (Casbin)
# ============================================================================


def init_enforcer() -> "Enforcer":
    """Initialize the Casbin enforcer at application startup.

    Creates the enforcer from infrastructure/authorization/model.conf and
    loads one policy per (role, granted authority) pair.

    MUST be called during FastAPI lifespan startup.

    Returns:
        Initialized Enforcer instance.

    Raises:
        RuntimeError: If enforcer is already initialized.
    """
    global _enforcer

    if _enforcer is not None:
        raise RuntimeError("Enforcer already initialized")

    from src.core.container.infrastructure import get_logger
    from src.infrastructure.authorization.casbin_adapter import (
        MODEL_PATH,
        build_enforcer,
    )

    _enforcer = build_enforcer(MODEL_PATH)

    get_logger().info(
        "casbin_enforcer_initialized",
        model_path=str(MODEL_PATH),
        policy_count=len(_enforcer.get_policy()),
    )

    return _enforcer


def close_enforcer() -> None:
    """Drop the enforcer singleton (FastAPI lifespan shutdown)."""
    global _enforcer
    _enforcer = None


def get_enforcer() -> "Enforcer":
    """Get Casbin Enforcer singleton.

    MUST be called after init_enforcer() during startup.

    Raises:
        RuntimeError: If called before init_enforcer().
    """
    if _enforcer is None:
        raise RuntimeError(
            "Enforcer not initialized. Call init_enforcer() during startup."
        )
    return _enforcer


def get_authority_enforcer() -> "AuthorityEnforcerProtocol":
    """Get authority enforcer adapter (request-scoped wrapper).

    Wraps the app-scoped Casbin enforcer.

    Usage:
        enforcer: AuthorityEnforcerProtocol = Depends(get_authority_enforcer)
        if enforcer.is_granted(user.roles, "PERMISSION_USER_READ"):
            ...
    """
    from src.core.container.infrastructure import get_logger
    from src.infrastructure.authorization.casbin_adapter import (
        CasbinAuthorityEnforcer,
    )

    return CasbinAuthorityEnforcer(enforcer=get_enforcer(), logger=get_logger())
