"""LoggerProtocol definition for structured logging.

Standardizes structured logging across the package while remaining
backend-agnostic. Implementations MUST keep logs structured (key-value
context) and safe (no secrets).

Log Levels:
    - DEBUG: Detailed diagnostic info (pipeline steps)
    - INFO: Normal operational events (context-bound decrypt)
    - WARNING: Degraded behavior
    - ERROR: Operation failed, caller sees a Failure
    - CRITICAL: Unrecoverable failure

Security:
    - NEVER log ciphertext, plaintext, or SecretValue contents
    - Log coordinates (bucket, path, region) and error types instead

Usage:
    from bucket_credentials.core.container import get_logger

    logger = get_logger()
    scoped = logger.bind(bucket="creds-bucket", path="svc/api-key.enc")
    scoped.debug("object_fetch_started")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    All logging calls are structured: event name + key-value context.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
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
            error: Optional exception; implementations may add error_type
                and error_message fields.
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

        The original logger instance remains unchanged.

        Args:
            **context: Context to bind to all future logs.

        Returns:
            New logger instance with bound context.
        """
        ...
