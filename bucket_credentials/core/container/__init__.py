"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from bucket_credentials.core.container import get_logger, get_secret_resolver

The container is organized into modules:
- infrastructure: Logging and AWS adapters (S3, KMS)
- resolvers: Password resolvers (optionally cached)

Factories are lru_cache singletons. Region-bound factories are cached per
region, so every credential in a region shares one client pair; boto3
clients are thread-safe.
"""

from bucket_credentials.core.container.infrastructure import (
    get_key_decryptor,
    get_logger,
    get_object_store,
)
from bucket_credentials.core.container.resolvers import (
    get_secret_resolver,
    reset_container,
)

__all__ = [
    "get_logger",
    "get_object_store",
    "get_key_decryptor",
    "get_secret_resolver",
    "reset_container",
]
