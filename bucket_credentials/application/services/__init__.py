"""Application services package.

Usage:
    from bucket_credentials.application.services import SecretResolver
"""

from bucket_credentials.application.services.caching_secret_resolver import (
    CachingSecretResolver,
)
from bucket_credentials.application.services.secret_resolver import SecretResolver

__all__ = ["CachingSecretResolver", "SecretResolver"]
