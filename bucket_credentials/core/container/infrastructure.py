"""Infrastructure dependency factories.

Application-scoped singletons:
- Logging (structlog console adapter)
- Object store (S3), one per region
- Key decryptor (KMS), one per region
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from bucket_credentials.core.config import get_settings
from bucket_credentials.core.enums import Environment

if TYPE_CHECKING:
    from bucket_credentials.domain.enums import AwsRegion
    from bucket_credentials.domain.protocols import (
        KeyDecryptorProtocol,
        LoggerProtocol,
        ObjectStoreProtocol,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from bucket_credentials.infrastructure.logging.console_adapter import (
        ConsoleAdapter,
    )

    settings = get_settings()
    return ConsoleAdapter(
        use_json=settings.environment != Environment.DEVELOPMENT,
        level=settings.log_level,
    )


@lru_cache()
def get_object_store(region: "AwsRegion") -> "ObjectStoreProtocol":
    """Get S3 object store for a region (cached per region).

    Args:
        region: Resolved AWS region.

    Returns:
        Object store implementing ObjectStoreProtocol.
    """
    from bucket_credentials.infrastructure.secrets.s3_object_store import (
        S3ObjectStoreAdapter,
    )

    return S3ObjectStoreAdapter.for_region(region, get_settings())


@lru_cache()
def get_key_decryptor(region: "AwsRegion") -> "KeyDecryptorProtocol":
    """Get KMS key decryptor for a region (cached per region).

    Args:
        region: Resolved AWS region.

    Returns:
        Key decryptor implementing KeyDecryptorProtocol.
    """
    from bucket_credentials.infrastructure.secrets.kms_decryptor import (
        KMSDecryptorAdapter,
    )

    return KMSDecryptorAdapter.for_region(region, get_settings())
