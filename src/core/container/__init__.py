"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_authorization_service

The container is organized into modules:
- infrastructure: Core services (logging, tokens)
- authorization: Authorization service and Casbin enforcer
"""

# Infrastructure services
from src.core.container.infrastructure import get_logger, get_token_service

# Authorization
from src.core.container.authorization import (
    close_enforcer,
    get_authority_enforcer,
    get_authorization_service,
    get_enforcer,
    init_enforcer,
)

__all__ = [
    # Infrastructure
    "get_logger",
    "get_token_service",
    # Authorization
    "get_authorization_service",
    "init_enforcer",
    "close_enforcer",
    "get_enforcer",
    "get_authority_enforcer",
]
