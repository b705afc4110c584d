"""LoggerProtocol definition for structured logging.

Backend-agnostic port for structured logging. Implementations MUST emit
structured records (message + key-value context).

Log Levels:
    - DEBUG: Repository writes, transaction boundaries, event dispatch
    - INFO: Normal operational events (user created, wallet opened)
    - WARNING: Degraded behavior (event subscriber failed)
    - ERROR: Operation failed, system continues (read mapped to "not found")
    - CRITICAL: System-wide failure

Context Binding:
    Use bind() or with_context() to create loggers with permanent context
    (request_id, handler name) automatically included in all logs.

Usage:
    from userwallet.core.container import get_logger

    logger: LoggerProtocol = get_logger()
    logger.info("user_created", user_id=str(user_id))

    request_logger = logger.bind(request_id=request_id)
    request_logger.debug("transaction_started")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    Supports 5 standard log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    and context binding.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message.

        Args:
            message: Event name (snake_case; put variable data in context).
            **context: Structured key-value context fields.
        """
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event name.
            error: Optional exception instance; implementations include
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message for catastrophic failures."""
        ...

    def bind(self, **context: Any) -> "LoggerProtocol":
        """Return new logger with permanently bound context.

        Original logger instance remains unchanged.

        Args:
            **context: Context to bind to all future logs.

        Returns:
            New logger instance with bound context.
        """
        ...

    def with_context(self, **context: Any) -> "LoggerProtocol":
        """Alias for bind()."""
        ...
