"""LoggerProtocol definition for structured logging.

Standardizes structured logging across the client while remaining
backend-agnostic. Implementations MUST keep logs structured (message plus
key-value context) and safe.

Security:
    - NEVER log passwords, encoded credentials or API tokens
    - NEVER log record payloads or search queries (they carry user data)

Usage:
    from src.core.container import get_logger

    logger = get_logger().bind(component="kintone_api")
    logger.info("kintone_request_started", operation="search", app_name="customers")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    Supports the 5 standard log levels and context binding.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message.

        Args:
            message: Event name (avoid f-strings; use context).
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
            error: Optional exception instance; implementation may include
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message with optional exception details."""
        ...

    def bind(self, **context: Any) -> "LoggerProtocol":
        """Return new logger with permanently bound context.

        Original logger instance remains unchanged (immutable pattern).

        Args:
            **context: Context to bind to all future logs.

        Returns:
            New logger instance with bound context.
        """
        ...

    def with_context(self, **context: Any) -> "LoggerProtocol":
        """Alias for bind()."""
        ...
