"""Pytest configuration and shared helpers.

Settings are loaded when src.core.config is first imported, so the
environment is prepared here before anything from src is imported.

Provides:
1. Test environment (testing mode, 256-bit signing key)
2. create_user() helper for domain principals
3. issue_token() helper for real JWTs accepted by the app
4. client fixture running the FastAPI lifespan (Casbin enforcer)
"""

import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-jwt-signing-0123456789")

from collections.abc import Iterable, Iterator  # noqa: E402
from uuid import UUID  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from uuid_extensions import uuid7  # noqa: E402

from src.domain.entities import User  # noqa: E402
from src.domain.enums import UserRole  # noqa: E402


# Test helper functions for domain entities
def create_user(
    *roles: UserRole,
    user_id: UUID | None = None,
    username: str = "tester",
    email: str = "tester@example.com",
) -> User:
    """Helper to create a User principal for testing.

    Usage:
        editor = create_user(UserRole.EDITOR)
        nobody = create_user()  # no roles, no permissions
    """
    return User(
        id=user_id or uuid7(),
        username=username,
        email=email,
        roles=frozenset(roles),
    )


def issue_token(user: User, roles: Iterable[str] | None = None) -> str:
    """Sign an access token for user with the application's token service.

    Args:
        user: Principal to encode.
        roles: Raw role claim; defaults to the user's role identifiers.
    """
    from src.core.container import get_token_service

    claim = list(roles) if roles is not None else [r.value for r in user.roles]
    return get_token_service().generate_access_token(
        user_id=user.id,
        username=user.username,
        email=user.email,
        roles=claim,
    )


def auth_headers(user: User) -> dict[str, str]:
    return {"Authorization": f"Bearer {issue_token(user)}"}


@pytest.fixture
def client() -> Iterator[TestClient]:
    """TestClient with the lifespan running (enforcer initialized)."""
    from src.main import app

    with TestClient(app) as test_client:
        yield test_client


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Tests against real libraries (PyJWT, Casbin)"
    )
    config.addinivalue_line("markers", "api: API tests through the FastAPI TestClient")
