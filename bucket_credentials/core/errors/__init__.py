"""Core errors package.

Usage:
    from bucket_credentials.core.errors import DomainError
"""

from bucket_credentials.core.errors.domain_error import DomainError

__all__ = ["DomainError"]
