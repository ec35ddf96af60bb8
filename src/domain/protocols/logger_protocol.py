"""LoggerProtocol definition for structured logging.

Backend-agnostic port for structured logging. Implementations MUST emit
key-value context and never log secrets (bearer tokens, signing keys).

Log Levels:
    - DEBUG: Diagnostic detail (dev only)
    - INFO: Normal operational events (enforcer loaded, app started)
    - WARNING: Expected denials and rejected input (authorization_denied)
    - ERROR: Operation failed, system continues
    - CRITICAL: Process cannot continue

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.warning(
        "authorization_denied",
        user_id=str(user.id),
        required_permission=Permission.USER_READ.authority,
    )

    request_logger = logger.bind(trace_id=trace_id)
    request_logger.info("request_started")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    Every call takes an event message plus structured context fields.
    """

    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event name or short message.
            error: Optional exception; adapters add error_type and
                error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message. Same arguments as error()."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        The original logger is left unchanged.

        Example:
            request_logger = logger.bind(trace_id=trace_id, user_id=user_id)
            request_logger.info("request_started")
        """
        ...

    def with_context(self, **context: Any) -> LoggerProtocol:
        """Alias for bind()."""
        ...
