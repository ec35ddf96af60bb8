"""API v1 routers.

All routes are generated from the Route Metadata Registry at startup.
The registry (ROUTE_REGISTRY) is the single source of truth for all endpoints.
See src/presentation/routers/api/v1/routes/registry.py for the complete route catalog.

Resources:
    /api/v1/permissions                                - Permission catalog
    /api/v1/roles                                      - Role catalog
    /api/v1/users/me                                   - Current principal
    /api/v1/users/check-permission/{permission}        - Permission check
    /api/v1/users/check-role/{role}                    - Role check
    /api/v1/users/check-action/{resource_type}/{action} - Action check
    /api/v1/users/{user_id}/permissions                - Permission listing

Admin Resources:
    /api/v1/admin/stats    - Authorization statistics (administrators)
    /api/v1/admin/system   - System information (super administrators)
"""

from fastapi import APIRouter

from src.core.config import settings
from src.presentation.routers.api.v1.routes.generator import (
    register_routes_from_registry,
)
from src.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY

# Create v1 router and generate all routes from registry
v1_router = APIRouter(prefix=settings.api_v1_prefix)
register_routes_from_registry(v1_router, ROUTE_REGISTRY)

__all__ = [
    "v1_router",
]
