"""Logging infrastructure adapters (structlog)."""

from src.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
