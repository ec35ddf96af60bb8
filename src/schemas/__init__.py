"""Request/response schemas for API endpoints.

Pydantic models for HTTP response serialization. Schemas are kept separate
from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import RoleResponse, CurrentUserResponse
"""

from src.schemas.authorization_schemas import (
    ActionCheckResponse,
    AdminStatsResponse,
    CurrentUserResponse,
    PermissionCheckResponse,
    PermissionListResponse,
    PermissionResponse,
    RoleCheckResponse,
    RoleListResponse,
    RoleResponse,
    SystemInfoResponse,
    UserPermissionsResponse,
)

__all__ = [
    # Catalog
    "PermissionResponse",
    "PermissionListResponse",
    "RoleResponse",
    "RoleListResponse",
    # Users
    "CurrentUserResponse",
    "UserPermissionsResponse",
    "PermissionCheckResponse",
    "RoleCheckResponse",
    "ActionCheckResponse",
    # Admin
    "AdminStatsResponse",
    "SystemInfoResponse",
]
