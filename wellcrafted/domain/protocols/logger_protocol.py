"""LoggerProtocol definition for structured logging.

Standardizes structured logging inside the library while staying
backend-agnostic. Implementations MUST keep logs structured (message plus
key-value context).

Log Levels:
    - DEBUG: Kind definitions, exceptions caught by try wrappers
    - INFO: Normal operational events
    - WARNING: Contract violations about to be raised
    - ERROR: Operation failed, system continues

Usage:
    from wellcrafted.core.container import get_logger

    logger = get_logger()
    logger.debug("Tagged error kind defined", error_name="FileError")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message.

        Args:
            message: Human-readable message (avoid f-strings; use context).
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
            message: Human-readable message.
            error: Optional exception; adapters add its type and text.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a new logger with context bound to every subsequent call."""
        ...
