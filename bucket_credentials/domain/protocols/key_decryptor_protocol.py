"""Key decryptor protocol (port) for hexagonal architecture."""

from typing import Protocol

from bucket_credentials.core.result import Result
from bucket_credentials.domain.errors import ServiceError
from bucket_credentials.domain.value_objects import DecryptRequest


class KeyDecryptorProtocol(Protocol):
    """Decrypts ciphertext with a managed key service.

    Implementations:
        - KMSDecryptorAdapter: AWS KMS (boto3)
    """

    def decrypt(self, request: DecryptRequest) -> Result[bytes, ServiceError]:
        """Decrypt a ciphertext blob.

        Args:
            request: Ciphertext and optional encryption context.

        Returns:
            Success(plaintext_bytes) on success.
            Failure(KeyNotFoundError) if the key is missing or unusable.
            Failure(AccessDeniedError) if the caller may not use the key.
            Failure(InvalidCiphertextError) if the ciphertext or context
                does not authenticate.
            Failure(TransportError) on network failure.
        """
        ...
