"""Application services."""

from src.application.services.authorization_service import AuthorizationService

__all__ = ["AuthorizationService"]
