"""Logging infrastructure package.

Usage:
    from bucket_credentials.core.container import get_logger
"""

from bucket_credentials.infrastructure.logging.console_adapter import (
    ConsoleAdapter,
    redact_sensitive_fields,
)

__all__ = ["ConsoleAdapter", "redact_sensitive_fields"]
