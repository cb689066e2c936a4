"""External service error types (S3 and KMS).

Adapters catch SDK exceptions and map them to these errors so the
application layer never sees botocore types.

Error Hierarchy:
    ServiceError
    ├── ObjectNotFoundError (object absent)
    ├── KeyNotFoundError (KMS key absent or disabled)
    ├── AccessDeniedError (authorization failure, either service)
    ├── InvalidCiphertextError (malformed ciphertext or context mismatch)
    └── TransportError (network, timeout, stream read failure)
"""

from dataclasses import dataclass

from bucket_credentials.domain.errors.secrets_error import SecretsError


@dataclass(frozen=True, slots=True, kw_only=True)
class ServiceError(SecretsError):
    """Failure reported by (or on the way to) an external service.

    Attributes:
        service: Service name ('s3', 'kms').
    """

    service: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ObjectNotFoundError(ServiceError):
    """Requested object does not exist."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class KeyNotFoundError(ServiceError):
    """KMS key does not exist or cannot be used."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class AccessDeniedError(ServiceError):
    """Caller is not authorized for the operation."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class InvalidCiphertextError(ServiceError):
    """Ciphertext rejected by KMS (corrupt, wrong key, or context mismatch)."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class TransportError(ServiceError):
    """Network, timeout, or stream failure."""

    pass
