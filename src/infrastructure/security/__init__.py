"""Security infrastructure adapters.

- JWT access token generation/validation (PyJWT)
"""

from src.infrastructure.security.jwt_service import JWTService

__all__ = [
    "JWTService",
]
