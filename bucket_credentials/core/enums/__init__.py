"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from bucket_credentials.core.enums import ErrorCode, Environment
"""

from bucket_credentials.core.enums.environment import Environment
from bucket_credentials.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
