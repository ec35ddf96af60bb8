"""Administration handlers.

Routes are registered via ROUTE_REGISTRY in routes/registry.py, which
attaches the guards:
    get_admin_stats - require_admin()
    get_system_info - require_role(UserRole.SUPER_ADMIN)
"""

from typing import Annotated

from casbin import Enforcer
from fastapi import Depends

from src.core.config import settings
from src.core.container import get_enforcer
from src.domain.enums import Permission, UserRole
from src.schemas.authorization_schemas import AdminStatsResponse, SystemInfoResponse


async def get_admin_stats(
    enforcer: Annotated[Enforcer, Depends(get_enforcer)],
) -> AdminStatsResponse:
    """Authorization catalog statistics.

    GET /api/v1/admin/stats → 200 OK (403 for non-admins)
    """
    return AdminStatsResponse(
        total_permissions=len(Permission.all()),
        total_roles=len(UserRole),
        policy_count=len(enforcer.get_policy()),
        permissions_per_role={role.value: len(role.permissions) for role in UserRole},
    )


async def get_system_info() -> SystemInfoResponse:
    """System information.

    GET /api/v1/admin/system → 200 OK (403 unless SUPER_ADMIN)
    """
    return SystemInfoResponse(
        app_name=settings.app_name,
        app_version=settings.app_version,
        environment=settings.environment.value,
        token_lifetime_minutes=settings.access_token_expire_minutes,
    )
