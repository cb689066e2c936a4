"""AWS KMS adapter for decrypting credential ciphertext.

Implements KeyDecryptorProtocol using KMS Decrypt. The key is identified
by the ciphertext blob itself, so no key id is configured.

File: kms_decryptor.py → class KMSDecryptorAdapter (PEP 8 naming)
"""

from typing import Any

from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    NoCredentialsError,
    ParamValidationError,
    PartialCredentialsError,
)

from bucket_credentials.core.config import Settings
from bucket_credentials.core.enums import ErrorCode
from bucket_credentials.core.result import Failure, Result, Success
from bucket_credentials.domain.enums import AwsRegion
from bucket_credentials.domain.errors import (
    AccessDeniedError,
    InvalidCiphertextError,
    KeyNotFoundError,
    ServiceError,
    TransportError,
)
from bucket_credentials.domain.value_objects import DecryptRequest
from bucket_credentials.infrastructure.secrets.aws_client import create_aws_client

SERVICE_NAME = "kms"

KEY_NOT_FOUND_CODES = frozenset(
    {
        "NotFoundException",
        "DisabledException",
        "KMSInvalidStateException",
        "KeyUnavailableException",
    }
)
INVALID_CIPHERTEXT_CODES = frozenset(
    {"InvalidCiphertextException", "IncorrectKeyException"}
)
ACCESS_DENIED_CODES = frozenset(
    {"AccessDeniedException", "UnrecognizedClientException", "InvalidGrantTokenException"}
)
TRANSPORT_CODES = frozenset({"DependencyTimeoutException", "KMSInternalException"})


class KMSDecryptorAdapter:
    """Decrypts ciphertext blobs with AWS KMS.

    Error mapping:
        - NotFound / Disabled / invalid key state → KeyNotFoundError
        - InvalidCiphertext / IncorrectKey / rejected parameters → InvalidCiphertextError
          (includes encryption context mismatch)
        - AccessDenied → AccessDeniedError
        - Network and KMS internal failures → TransportError
    """

    def __init__(self, client: Any) -> None:
        """Initialize with a boto3 KMS client.

        Args:
            client: boto3 KMS client (see create_aws_client).
        """
        self.client = client

    @classmethod
    def for_region(cls, region: AwsRegion, settings: Settings) -> "KMSDecryptorAdapter":
        """Create an adapter with a fresh client for a region."""
        return cls(create_aws_client(SERVICE_NAME, region, settings))

    def decrypt(self, request: DecryptRequest) -> Result[bytes, ServiceError]:
        """Decrypt a ciphertext blob with KMS.

        Args:
            request: Ciphertext and optional encryption context.

        Returns:
            Success(plaintext_bytes) on success.
            Failure(ServiceError) on any KMS or transport failure.
        """
        params: dict[str, Any] = {"CiphertextBlob": request.ciphertext_blob}
        if request.has_context:
            params["EncryptionContext"] = dict(request.encryption_context)

        try:
            response = self.client.decrypt(**params)
        except ClientError as e:
            return Failure(error=self._map_client_error(e))
        except ParamValidationError:
            # Rejected client-side, e.g. an empty blob from an empty object.
            return Failure(
                error=InvalidCiphertextError(
                    code=ErrorCode.KMS_INVALID_CIPHERTEXT,
                    message="Ciphertext rejected before reaching KMS",
                    service=SERVICE_NAME,
                    details={"error_type": "ParamValidationError"},
                )
            )
        except (NoCredentialsError, PartialCredentialsError) as e:
            return Failure(
                error=AccessDeniedError(
                    code=ErrorCode.SERVICE_ACCESS_DENIED,
                    message="No AWS credentials available for KMS decrypt",
                    service=SERVICE_NAME,
                    details={"error_type": type(e).__name__},
                )
            )
        except BotoCoreError as e:
            return Failure(
                error=TransportError(
                    code=ErrorCode.SERVICE_TRANSPORT_FAILED,
                    message="Failed to reach KMS",
                    service=SERVICE_NAME,
                    details={"error_type": type(e).__name__, "error": str(e)},
                )
            )

        return Success(value=response["Plaintext"])

    def _map_client_error(self, e: ClientError) -> ServiceError:
        """Map a KMS ClientError to a ServiceError subtype.

        The AWS error message is dropped: KMS never echoes plaintext, but
        the ciphertext may appear in some SDK messages.
        """
        error_code = str(e.response.get("Error", {}).get("Code", ""))
        details = {"aws_error_code": error_code}

        if error_code in KEY_NOT_FOUND_CODES:
            return KeyNotFoundError(
                code=ErrorCode.KMS_KEY_NOT_FOUND,
                message="KMS key not found or not usable",
                service=SERVICE_NAME,
                details=details,
            )
        if error_code in INVALID_CIPHERTEXT_CODES:
            return InvalidCiphertextError(
                code=ErrorCode.KMS_INVALID_CIPHERTEXT,
                message="KMS rejected the ciphertext or encryption context",
                service=SERVICE_NAME,
                details=details,
            )
        if error_code in ACCESS_DENIED_CODES:
            return AccessDeniedError(
                code=ErrorCode.SERVICE_ACCESS_DENIED,
                message="Access denied for KMS decrypt",
                service=SERVICE_NAME,
                details=details,
            )
        if error_code in TRANSPORT_CODES:
            return TransportError(
                code=ErrorCode.SERVICE_TRANSPORT_FAILED,
                message="KMS temporarily unavailable",
                service=SERVICE_NAME,
                details=details,
            )
        return ServiceError(
            code=ErrorCode.SERVICE_REQUEST_FAILED,
            message="KMS rejected decrypt request",
            service=SERVICE_NAME,
            details=details,
        )
