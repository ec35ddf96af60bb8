"""Admin API handlers.

Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    get_admin_stats - Authorization statistics
    get_system_info - System information
"""

from src.presentation.routers.api.v1.admin.system import (
    get_admin_stats,
    get_system_info,
)

__all__ = [
    "get_admin_stats",
    "get_system_info",
]
