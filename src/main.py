"""
Main FastAPI application entry point.

Builds the application: lifespan (Casbin enforcer), trace middleware,
RFC 7807 exception handlers, system routes and the v1 API.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.core.config import settings
from src.presentation.api.middleware.trace_middleware import TraceMiddleware
from src.presentation.routers import system_router
from src.presentation.routers.api.v1 import v1_router
from src.presentation.routers.api.v1.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Handles startup and shutdown events:
    - Startup: Initialize Casbin enforcer from the role catalog
    - Shutdown: Release the enforcer

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    from src.core.container import close_enforcer, get_logger, init_enforcer

    init_enforcer()
    get_logger().info(
        "application_started",
        environment=settings.environment.value,
        version=settings.app_version,
    )

    yield

    close_enforcer()
    get_logger().info("application_stopped")


# Initialize FastAPI application with settings and lifespan
app = FastAPI(
    title=settings.app_name,
    description="Role and permission authorization for the ball badminton association",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

# Wire trace middleware (request correlation)
app.add_middleware(TraceMiddleware)

# Register global exception handlers (RFC 7807 error responses)
register_exception_handlers(app)

# Non-versioned system endpoints (root, health, config)
app.include_router(system_router)

# Include API v1 routers (registry-generated)
app.include_router(v1_router)
