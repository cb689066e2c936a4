"""Domain errors package.

Exports all domain-level error classes for convenient importing.

Usage:
    from bucket_credentials.domain.errors import ConfigError, SecretFetchError
    from bucket_credentials.domain.errors import ObjectNotFoundError, TransportError
"""

from bucket_credentials.domain.errors.credentials_exception import (
    CredentialsException,
)
from bucket_credentials.domain.errors.secrets_error import (
    ConfigError,
    MissingFieldError,
    SecretDecryptError,
    SecretFetchError,
    SecretsError,
)
from bucket_credentials.domain.errors.service_error import (
    AccessDeniedError,
    InvalidCiphertextError,
    KeyNotFoundError,
    ObjectNotFoundError,
    ServiceError,
    TransportError,
)

__all__ = [
    "SecretsError",
    "ConfigError",
    "MissingFieldError",
    "SecretFetchError",
    "SecretDecryptError",
    # External service errors
    "ServiceError",
    "ObjectNotFoundError",
    "KeyNotFoundError",
    "AccessDeniedError",
    "InvalidCiphertextError",
    "TransportError",
    # Host boundary
    "CredentialsException",
]
