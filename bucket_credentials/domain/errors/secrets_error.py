"""Credential pipeline error types.

Error Hierarchy:
    SecretsError (base)
    ├── ConfigError (bad configuration, reported at construction)
    ├── MissingFieldError (required field absent at read time)
    ├── SecretFetchError (object store failure, wraps cause)
    └── SecretDecryptError (key service failure, wraps cause)

Usage:
    from bucket_credentials.domain.errors import ConfigError
    from bucket_credentials.core.enums import ErrorCode
    from bucket_credentials.core.result import Failure

    return Failure(error=ConfigError(
        code=ErrorCode.CONFIG_REGION_INVALID,
        message="Unknown region: mars-north-1",
        field="region",
    ))
"""

from dataclasses import dataclass

from bucket_credentials.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class SecretsError(DomainError):
    """Base error for the credential pipeline.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message (never contains secret material).
        details: Additional context.
    """

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class ConfigError(SecretsError):
    """Invalid credential configuration.

    Attributes:
        field: Configuration field that failed validation.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class MissingFieldError(SecretsError):
    """Required field absent when the host reads it.

    Attributes:
        field: Name of the missing field.
    """

    field: str


@dataclass(frozen=True, slots=True, kw_only=True)
class SecretFetchError(SecretsError):
    """Ciphertext could not be fetched or read from the object store.

    Attributes:
        bucket: Bucket that was read.
        path: Object key that was read.
        cause: Underlying error (service or transport), if any.
    """

    bucket: str
    path: str
    cause: DomainError | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class SecretDecryptError(SecretsError):
    """Ciphertext could not be decrypted by the key service.

    Attributes:
        cause: Underlying key service error, if any.
    """

    cause: DomainError | None = None
