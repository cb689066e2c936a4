"""Application layer: password resolution and the host-facing credential.

Importing this package registers the 'aws-bucket-credentials' type with
CredentialTypeRegistry.

Usage:
    from bucket_credentials.application import BucketCredentials
"""

from bucket_credentials.application.bucket_credentials import (
    CREDENTIAL_TYPE_KEY,
    BucketCredentials,
)
from bucket_credentials.application.credential_registry import (
    CredentialTypeInfo,
    CredentialTypeRegistry,
    register_credential_type,
)
from bucket_credentials.application.services import (
    CachingSecretResolver,
    SecretResolver,
)

__all__ = [
    "CREDENTIAL_TYPE_KEY",
    "BucketCredentials",
    "CachingSecretResolver",
    "CredentialTypeInfo",
    "CredentialTypeRegistry",
    "SecretResolver",
    "register_credential_type",
]
