"""Secrets infrastructure package.

Adapters implementing the object store and key decryptor ports with boto3.
All adapters are wired through bucket_credentials.core.container.

Architecture:
- S3ObjectStoreAdapter: ObjectStoreProtocol over S3 GetObject
- KMSDecryptorAdapter: KeyDecryptorProtocol over KMS Decrypt
- create_aws_client: shared boto3 client factory (timeouts, retries, endpoint)

Security:
- Read-only (no PutObject, no Encrypt)
- Credentials come from the default AWS provider chain
"""

from bucket_credentials.infrastructure.secrets.aws_client import (
    build_client_config,
    create_aws_client,
)
from bucket_credentials.infrastructure.secrets.kms_decryptor import (
    KMSDecryptorAdapter,
)
from bucket_credentials.infrastructure.secrets.s3_object_store import (
    S3ObjectStoreAdapter,
    S3ObjectStream,
)

__all__ = [
    "build_client_config",
    "create_aws_client",
    "KMSDecryptorAdapter",
    "S3ObjectStoreAdapter",
    "S3ObjectStream",
]
