"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Token generation (JWT)
- Logging (structlog console)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import settings

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_token_service() -> "TokenGenerationProtocol":
    """Get JWT token service singleton (app-scoped).

    Signing key, algorithm and lifetime come from settings.

    Returns:
        Token generation service implementing TokenGenerationProtocol.
    """
    from src.infrastructure.security import JWTService

    return JWTService(
        secret_key=settings.secret_key,
        expiration_minutes=settings.access_token_expire_minutes,
        algorithm=settings.algorithm,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - testing/ci: ConsoleAdapter (JSON)
    - development/production: ConsoleAdapter (human-readable)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    use_json = settings.is_testing or settings.is_ci
    return ConsoleAdapter(use_json=use_json, level=settings.log_level)
