"""Password resolver protocol (port).

Implemented by SecretResolver and CachingSecretResolver; consumed by
BucketCredentials so the host-facing object does not care whether
passwords are cached.
"""

from typing import Protocol

from bucket_credentials.core.result import Result
from bucket_credentials.domain.errors import SecretsError
from bucket_credentials.domain.value_objects import CredentialRecord, SecretValue


class PasswordResolverProtocol(Protocol):
    """Resolves a credential record to its decrypted password."""

    def resolve_password(self, record: CredentialRecord) -> Result[SecretValue, SecretsError]:
        """Fetch and decrypt the password for a credential.

        Args:
            record: Credential coordinates and decryption settings.

        Returns:
            Success(SecretValue) or Failure(SecretsError).
        """
        ...
