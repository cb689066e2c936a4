"""Secret resolver service.

Orchestrates the retrieve-then-decrypt pipeline for one credential:

    1. Fetch the ciphertext object from the object store
    2. Read it line by line, joining lines WITHOUT separators
    3. Decrypt with the key service (context-bound when configured)
    4. Wrap the plaintext in a SecretValue

Architecture:
- Application layer service (orchestrates, no SDK imports)
- Depends only on domain protocols (object store, key decryptor, logger)
- Uses Result types for error handling; never raises for pipeline failures
- Stateless: safe to share across threads

Line joining:
    Line terminators ('\\n', '\\r', '\\r\\n') are dropped, not preserved.
    Wrapped base64 ciphertext relies on this. A ciphertext whose meaning
    depends on embedded newlines would be altered.

Blocking:
    resolve_password() makes two network calls on the calling thread.
    Timeouts are those of the injected clients (see Settings).
"""

import base64
import binascii

from bucket_credentials.core.enums import ErrorCode
from bucket_credentials.core.result import Failure, Result, Success
from bucket_credentials.domain.enums import CiphertextEncoding
from bucket_credentials.domain.errors import (
    SecretDecryptError,
    SecretFetchError,
    SecretsError,
    TransportError,
)
from bucket_credentials.domain.protocols import (
    KeyDecryptorProtocol,
    LoggerProtocol,
    ObjectStoreProtocol,
    ObjectStream,
)
from bucket_credentials.domain.value_objects import (
    CredentialRecord,
    DecryptRequest,
    SecretValue,
)


class SecretResolver:
    """Resolves a credential record to its decrypted password.

    Dependencies (injected via constructor):
        - ObjectStoreProtocol: Ciphertext storage (S3)
        - KeyDecryptorProtocol: Key service (KMS)
        - LoggerProtocol: Structured logging
    """

    def __init__(
        self,
        object_store: ObjectStoreProtocol,
        key_decryptor: KeyDecryptorProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize resolver with dependencies.

        Args:
            object_store: Object store holding ciphertext objects.
            key_decryptor: Key service that decrypts ciphertext.
            logger: Structured logger.
        """
        self._object_store = object_store
        self._key_decryptor = key_decryptor
        self._logger = logger

    def resolve_password(self, record: CredentialRecord) -> Result[SecretValue, SecretsError]:
        """Fetch and decrypt the password for a credential.

        Every call performs a full fetch and decrypt; nothing is cached.

        Args:
            record: Credential coordinates and decryption settings.

        Returns:
            Success(SecretValue) with the decrypted password.
            Failure(SecretFetchError) if the object could not be read.
            Failure(SecretDecryptError) if decryption failed. No decrypt is
                attempted after a fetch failure.
        """
        logger = self._logger.bind(
            bucket=record.bucket_name,
            path=record.bucket_path,
            region=record.region.value,
        )

        fetch_result = self._read_ciphertext(record, logger)
        if isinstance(fetch_result, Failure):
            return fetch_result

        return self._decrypt(record, fetch_result.value, logger)

    def _read_ciphertext(
        self, record: CredentialRecord, logger: LoggerProtocol
    ) -> Result[str, SecretFetchError]:
        """Read the ciphertext object as text with line terminators removed."""
        logger.debug("object_fetch_started")

        match self._object_store.fetch(record.bucket_name, record.bucket_path):
            case Failure(error=error):
                logger.error(
                    "object_fetch_failed",
                    error_code=error.code.value,
                    error_message=error.message,
                )
                return Failure(
                    error=SecretFetchError(
                        code=ErrorCode.SECRET_FETCH_FAILED,
                        message=f"Failed to fetch {record.display_name()}: {error.message}",
                        bucket=record.bucket_name,
                        path=record.bucket_path,
                        cause=error,
                    )
                )
            case Success(value=stream):
                pass

        try:
            content = b"".join(stream.iter_lines())
            ciphertext = content.decode("utf-8")
        except OSError as e:
            logger.error("object_read_failed", error=e)
            return Failure(
                error=SecretFetchError(
                    code=ErrorCode.SECRET_FETCH_FAILED,
                    message=f"I/O error reading {record.display_name()}",
                    bucket=record.bucket_name,
                    path=record.bucket_path,
                    cause=TransportError(
                        code=ErrorCode.SERVICE_TRANSPORT_FAILED,
                        message=str(e),
                        service="object_store",
                        details={"error_type": type(e).__name__},
                    ),
                )
            )
        except UnicodeDecodeError as e:
            # The exception text would quote the offending bytes.
            logger.error("object_decode_failed", position=e.start)
            return Failure(
                error=SecretFetchError(
                    code=ErrorCode.SECRET_DECODE_FAILED,
                    message=f"Object {record.display_name()} is not valid UTF-8 text",
                    bucket=record.bucket_name,
                    path=record.bucket_path,
                )
            )
        finally:
            self._close_quietly(stream, logger)

        logger.debug("object_fetch_completed", ciphertext_length=len(ciphertext))
        return Success(value=ciphertext)

    def _close_quietly(self, stream: ObjectStream, logger: LoggerProtocol) -> None:
        """Close the object stream; a close failure is logged, never raised."""
        try:
            stream.close()
        except Exception as e:
            logger.error("object_stream_close_failed", error=e)

    def _decrypt(
        self, record: CredentialRecord, ciphertext: str, logger: LoggerProtocol
    ) -> Result[SecretValue, SecretDecryptError]:
        """Decrypt ciphertext text with the key service."""
        logger.debug("kms_decrypt_started")

        match self._to_ciphertext_blob(ciphertext, record.ciphertext_encoding):
            case Failure(error=error):
                logger.error("kms_ciphertext_invalid", error_code=error.code.value)
                return Failure(error=error)
            case Success(value=blob):
                pass

        context = record.encryption_context()
        if context:
            logger.info(
                "kms_decrypt_with_context",
                context_key=record.kms_encryption_context_key,
            )
        request = DecryptRequest(ciphertext_blob=blob, encryption_context=context)

        match self._key_decryptor.decrypt(request):
            case Failure(error=error):
                logger.error(
                    "kms_decrypt_failed",
                    error_code=error.code.value,
                    error_message=error.message,
                )
                return Failure(
                    error=SecretDecryptError(
                        code=ErrorCode.SECRET_DECRYPT_FAILED,
                        message=f"Failed to decrypt {record.display_name()}: {error.message}",
                        cause=error,
                    )
                )
            case Success(value=plaintext):
                pass

        try:
            secret = SecretValue.from_bytes(plaintext)
        except UnicodeDecodeError:
            logger.error("kms_plaintext_not_utf8")
            return Failure(
                error=SecretDecryptError(
                    code=ErrorCode.SECRET_DECODE_FAILED,
                    message=f"Decrypted value of {record.display_name()} is not valid UTF-8",
                )
            )

        logger.debug("kms_decrypt_completed")
        return Success(value=secret)

    def _to_ciphertext_blob(
        self, ciphertext: str, encoding: CiphertextEncoding
    ) -> Result[bytes, SecretDecryptError]:
        """Convert ciphertext text to the bytes sent to the key service."""
        if encoding is CiphertextEncoding.TEXT:
            return Success(value=ciphertext.encode("utf-8"))

        try:
            return Success(value=base64.b64decode(ciphertext, validate=True))
        except (binascii.Error, ValueError):
            return Failure(
                error=SecretDecryptError(
                    code=ErrorCode.SECRET_DECODE_FAILED,
                    message="Ciphertext object is not valid base64",
                )
            )
