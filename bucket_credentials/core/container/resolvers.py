"""Password resolver factories."""

from functools import lru_cache
from typing import TYPE_CHECKING

from bucket_credentials.core.config import get_settings
from bucket_credentials.core.container.infrastructure import (
    get_key_decryptor,
    get_logger,
    get_object_store,
)

if TYPE_CHECKING:
    from bucket_credentials.domain.enums import AwsRegion
    from bucket_credentials.domain.protocols import PasswordResolverProtocol


@lru_cache()
def get_secret_resolver(region: "AwsRegion") -> "PasswordResolverProtocol":
    """Get the password resolver for a region (cached per region).

    Wraps the resolver in CachingSecretResolver when
    PASSWORD_CACHE_TTL_SECONDS is greater than 0.

    Args:
        region: Resolved AWS region.

    Returns:
        Resolver implementing PasswordResolverProtocol.
    """
    from bucket_credentials.application.services import (
        CachingSecretResolver,
        SecretResolver,
    )

    settings = get_settings()
    logger = get_logger()
    resolver = SecretResolver(
        object_store=get_object_store(region),
        key_decryptor=get_key_decryptor(region),
        logger=logger,
    )
    if not settings.password_cache_enabled:
        return resolver
    return CachingSecretResolver(
        resolver,
        ttl_seconds=settings.password_cache_ttl_seconds,
        logger=logger,
    )


def reset_container() -> None:
    """Clear every cached singleton, settings included.

    Used by tests and by hosts that reload configuration.
    """
    get_secret_resolver.cache_clear()
    get_key_decryptor.cache_clear()
    get_object_store.cache_clear()
    get_logger.cache_clear()
    get_settings.cache_clear()
