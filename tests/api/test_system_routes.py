"""API tests for non-versioned system routes.

Validates behavior of root, health, and config endpoints exposed by the
system router.
"""

from src.core.config import settings


def test_root_endpoint_returns_status_and_version(client) -> None:
    """Root endpoint should return operational status and app version."""
    response = client.get("/")

    assert response.status_code == 200
    data = response.json()

    assert data["message"] == settings.app_name
    assert data["status"] == "operational"
    assert data["version"] == settings.app_version


def test_health_endpoint_returns_healthy_status(client) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_responses_carry_trace_id_header(client) -> None:
    response = client.get("/health", headers={"X-Trace-Id": "trace-123"})

    assert response.headers["X-Trace-Id"] == "trace-123"


def test_config_endpoint_behavior_depends_on_environment(client) -> None:
    """Config endpoint should be dev-only and return 403 otherwise."""
    response = client.get("/config")

    if settings.is_development:
        assert response.status_code == 200
        data = response.json()

        assert data["environment"] == settings.environment.value
        assert data["security"]["secret_key"] == "<redacted>"
    else:
        assert response.status_code == 403
        assert (
            response.json()["detail"] == "Config endpoint only available in development"
        )
