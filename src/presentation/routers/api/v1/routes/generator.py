"""Route generator for the API Route Registry.

register_routes_from_registry() turns declarative RouteMetadata entries into
runtime FastAPI routes at application startup.

Functions:
    register_routes_from_registry: Generate all routes from registry
    build_dependencies: Build FastAPI dependencies from auth policy
    _build_responses: Build OpenAPI responses dict from error specs

Usage:
    v1_router = APIRouter(prefix="/api/v1")
    register_routes_from_registry(v1_router, ROUTE_REGISTRY)
"""

from typing import Any

from fastapi import APIRouter, Depends

from src.presentation.routers.api.middleware.auth_dependencies import (
    get_current_user,
)
from src.presentation.routers.api.middleware.authorization_dependencies import (
    require_admin,
    require_all_permissions,
    require_authority,
    require_role,
)
from src.presentation.routers.api.v1.routes.metadata import (
    AuthLevel,
    AuthPolicy,
    ErrorSpec,
    RouteMetadata,
)


def register_routes_from_registry(
    router: APIRouter,
    registry: list[RouteMetadata],
) -> None:
    """Generate FastAPI routes from registry metadata.

    Args:
        router: FastAPI APIRouter to register routes on
        registry: List of RouteMetadata entries to convert into routes
    """
    for metadata in registry:
        dependencies = build_dependencies(metadata.auth_policy)
        responses = _build_responses(metadata.errors) if metadata.errors else None

        router.add_api_route(
            path=metadata.path,
            endpoint=metadata.handler,
            methods=[metadata.method.value],
            response_model=metadata.response_model,
            status_code=metadata.status_code,
            tags=list(metadata.tags),
            summary=metadata.summary,
            description=metadata.description,
            operation_id=metadata.operation_id,
            responses=responses,
            dependencies=dependencies,
            deprecated=metadata.deprecated,
        )


def build_dependencies(auth_policy: AuthPolicy) -> list[Any]:
    """Build FastAPI dependencies from auth policy.

    Auth policy mapping:
        PUBLIC / MANUAL_AUTH: No dependencies
        AUTHENTICATED: Depends(get_current_user)
        ADMIN: Depends(require_admin())
        ROLE: Depends(require_role(role))
        PERMISSION: Depends(require_all_permissions(*permissions))
        AUTHORITY: Depends(require_authority(authority))

    Every guard depends on get_current_user itself, so a missing token
    answers 401 before any 403.

    Raises:
        ValueError: If the policy is missing the field its level needs.
    """
    match auth_policy.level:
        case AuthLevel.PUBLIC | AuthLevel.MANUAL_AUTH:
            return []

        case AuthLevel.AUTHENTICATED:
            return [Depends(get_current_user)]

        case AuthLevel.ADMIN:
            return [Depends(require_admin())]

        case AuthLevel.ROLE:
            if auth_policy.role is None:
                raise ValueError("ROLE auth policy requires a role")
            return [Depends(require_role(auth_policy.role))]

        case AuthLevel.PERMISSION:
            if not auth_policy.permissions:
                raise ValueError("PERMISSION auth policy requires permissions")
            return [Depends(require_all_permissions(*auth_policy.permissions))]

        case AuthLevel.AUTHORITY:
            if auth_policy.authority is None:
                raise ValueError("AUTHORITY auth policy requires an authority")
            return [Depends(require_authority(auth_policy.authority))]

        case _:
            # Unknown auth level - fail closed (no access)
            msg = f"Unknown auth level: {auth_policy.level}"
            raise ValueError(msg)


def _build_responses(errors: list[ErrorSpec]) -> dict[int | str, dict[str, Any]]:
    """Build OpenAPI responses dict from error specifications."""
    return {error.status: {"description": error.description} for error in errors}
