"""Route metadata types for the API Route Registry.

The registry is the single source of truth for all API routes, generating
FastAPI routes, authorization guards, and OpenAPI metadata.

Core types:
    RouteMetadata: Complete route specification (method, path, handler, auth, etc.)
    HTTPMethod: HTTP method enum
    AuthLevel / AuthPolicy: Who may call the route and which guard applies
    ErrorSpec: Error response specification for OpenAPI

Usage:
    from src.presentation.routers.api.v1.routes.metadata import (
        AuthLevel,
        AuthPolicy,
        HTTPMethod,
        RouteMetadata,
    )

    metadata = RouteMetadata(
        method=HTTPMethod.GET,
        path="/admin/stats",
        handler=get_admin_stats,
        resource="admin",
        tags=["Admin"],
        summary="Authorization statistics",
        response_model=AdminStatsResponse,
        auth_policy=AuthPolicy(level=AuthLevel.ADMIN),
    )
"""

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel

from src.domain.enums import Permission, UserRole


# =============================================================================
# HTTP Method Enum
# =============================================================================


class HTTPMethod(str, Enum):
    """HTTP methods for API routes."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


# =============================================================================
# Authentication / Authorization Policy
# =============================================================================


class AuthLevel(str, Enum):
    """Authentication levels for routes.

    Attributes:
        PUBLIC: No authentication (catalog, optional-principal checks)
        AUTHENTICATED: Requires valid JWT
        ADMIN: Requires SUPER_ADMIN or ADMIN
        ROLE: Requires the exact role in AuthPolicy.role
        PERMISSION: Requires every permission in AuthPolicy.permissions
        AUTHORITY: Requires AuthPolicy.authority via the Casbin enforcer
        MANUAL_AUTH: Handler combines checks itself
    """

    PUBLIC = "public"
    AUTHENTICATED = "authenticated"
    ADMIN = "admin"
    ROLE = "role"
    PERMISSION = "permission"
    AUTHORITY = "authority"
    MANUAL_AUTH = "manual_auth"


@dataclass(frozen=True, kw_only=True)
class AuthPolicy:
    """Authentication policy for a route.

    Attributes:
        level: Authentication level
        role: Required role (ROLE level)
        permissions: Required permissions (PERMISSION level)
        authority: Required authority string (AUTHORITY level)
        rationale: Explanation for MANUAL_AUTH routes

    Examples:
        >>> AuthPolicy(level=AuthLevel.PUBLIC)
        >>> AuthPolicy(level=AuthLevel.ROLE, role=UserRole.SUPER_ADMIN)
        >>> AuthPolicy(
        ...     level=AuthLevel.PERMISSION,
        ...     permissions=(Permission.NEWS_PUBLISH,),
        ... )
    """

    level: AuthLevel
    role: UserRole | None = None
    permissions: tuple[Permission, ...] = ()
    authority: str | None = None
    rationale: str | None = None


# =============================================================================
# Error Specification
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class ErrorSpec:
    """Error response specification for OpenAPI documentation.

    Examples:
        >>> ErrorSpec(status=403, description="Administrative privileges required")
    """

    status: int
    description: str
    model: type[BaseModel] | None = None


# =============================================================================
# Route Metadata (SSOT)
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class RouteMetadata:
    """Complete specification for an API route (Single Source of Truth).

    Identity fields:
        method: HTTP method
        path: URL path relative to the version prefix
        handler: Async function that implements the endpoint

    Grouping fields:
        resource: Resource category (e.g., "users", "roles")
        tags: OpenAPI tags

    OpenAPI documentation:
        summary, description, operation_id

    Request/Response:
        response_model, status_code, errors

    Behavior:
        auth_policy: Who may call the route
    """

    # Identity
    method: HTTPMethod
    path: str
    handler: Callable[..., Awaitable[Any]]

    # Grouping
    resource: str
    tags: Sequence[str]
    version: str = "v1"

    # OpenAPI documentation
    summary: str
    description: str | None = None
    operation_id: str | None = None

    # Request/Response
    response_model: type[BaseModel] | None = None
    status_code: int = 200
    errors: list[ErrorSpec] | None = None

    # Behavior
    auth_policy: AuthPolicy

    # Deprecation
    deprecated: bool = False
