"""AWS S3 adapter for reading ciphertext objects.

Implements ObjectStoreProtocol using S3 GetObject.

File: s3_object_store.py → class S3ObjectStoreAdapter (PEP 8 naming)
"""

from collections.abc import Iterator
from typing import Any

from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    NoCredentialsError,
    PartialCredentialsError,
)

from bucket_credentials.core.config import Settings
from bucket_credentials.core.enums import ErrorCode
from bucket_credentials.core.result import Failure, Result, Success
from bucket_credentials.domain.enums import AwsRegion
from bucket_credentials.domain.errors import (
    AccessDeniedError,
    ObjectNotFoundError,
    ServiceError,
    TransportError,
)
from bucket_credentials.infrastructure.secrets.aws_client import create_aws_client

SERVICE_NAME = "s3"

NOT_FOUND_CODES = frozenset({"NoSuchKey", "NoSuchBucket", "404", "NotFound"})
ACCESS_DENIED_CODES = frozenset(
    {"AccessDenied", "403", "Forbidden", "InvalidAccessKeyId", "SignatureDoesNotMatch"}
)


class S3ObjectStream:
    """Line reader over an S3 response body.

    Wraps botocore's StreamingBody so read failures surface as OSError,
    which is all the application layer knows about.
    """

    def __init__(self, body: Any, *, chunk_size: int = 1024) -> None:
        """Initialize with an open StreamingBody.

        Args:
            body: botocore StreamingBody from a GetObject response.
            chunk_size: Bytes read per network read.
        """
        self._body = body
        self._chunk_size = chunk_size

    def iter_lines(self) -> Iterator[bytes]:
        """Yield body lines without terminators.

        Raises:
            OSError: If the body cannot be read to the end.
        """
        try:
            yield from self._body.iter_lines(chunk_size=self._chunk_size)
        except (BotoCoreError, OSError) as e:
            raise OSError(f"Failed reading S3 object body: {type(e).__name__}") from e

    def close(self) -> None:
        """Close the body and release the HTTP connection."""
        self._body.close()


class S3ObjectStoreAdapter:
    """Ciphertext objects from AWS S3.

    Features:
        - Read-only GetObject
        - SDK errors mapped to ServiceError subtypes
        - Retries and timeouts from the injected client's config
    """

    def __init__(self, client: Any) -> None:
        """Initialize with a boto3 S3 client.

        Args:
            client: boto3 S3 client (see create_aws_client).
        """
        self.client = client

    @classmethod
    def for_region(cls, region: AwsRegion, settings: Settings) -> "S3ObjectStoreAdapter":
        """Create an adapter with a fresh client for a region.

        Args:
            region: Bucket region.
            settings: Runtime settings.

        Returns:
            S3ObjectStoreAdapter bound to the region.
        """
        return cls(create_aws_client(SERVICE_NAME, region, settings))

    def fetch(self, bucket: str, key: str) -> Result[S3ObjectStream, ServiceError]:
        """Open an S3 object for reading.

        Args:
            bucket: Bucket name.
            key: Object key.

        Returns:
            Success(S3ObjectStream) if the object was opened.
            Failure(ServiceError) if not found, denied, or unreachable.

        Example:
            >>> adapter = S3ObjectStoreAdapter(boto3.client("s3"))
            >>> match adapter.fetch("creds-bucket", "svc/api-key.enc"):
            ...     case Success(value=stream):
            ...         lines = list(stream.iter_lines())
        """
        details = {"bucket": bucket, "key": key}
        try:
            response = self.client.get_object(Bucket=bucket, Key=key)
        except ClientError as e:
            return Failure(error=self._map_client_error(e, details))
        except (NoCredentialsError, PartialCredentialsError) as e:
            return Failure(
                error=AccessDeniedError(
                    code=ErrorCode.SERVICE_ACCESS_DENIED,
                    message=f"No AWS credentials available to read s3://{bucket}/{key}",
                    service=SERVICE_NAME,
                    details=details | {"error_type": type(e).__name__},
                )
            )
        except BotoCoreError as e:
            return Failure(
                error=TransportError(
                    code=ErrorCode.SERVICE_TRANSPORT_FAILED,
                    message=f"Failed to reach S3 for s3://{bucket}/{key}",
                    service=SERVICE_NAME,
                    details=details | {"error_type": type(e).__name__, "error": str(e)},
                )
            )

        return Success(value=S3ObjectStream(response["Body"]))

    def _map_client_error(self, e: ClientError, details: dict[str, str]) -> ServiceError:
        """Map an S3 ClientError to a ServiceError subtype."""
        error_code = str(e.response.get("Error", {}).get("Code", ""))
        location = f"s3://{details['bucket']}/{details['key']}"
        details = details | {"aws_error_code": error_code}

        if error_code in NOT_FOUND_CODES:
            return ObjectNotFoundError(
                code=ErrorCode.OBJECT_NOT_FOUND,
                message=f"Object not found: {location}",
                service=SERVICE_NAME,
                details=details,
            )
        if error_code in ACCESS_DENIED_CODES:
            return AccessDeniedError(
                code=ErrorCode.SERVICE_ACCESS_DENIED,
                message=f"Access denied reading {location}",
                service=SERVICE_NAME,
                details=details,
            )
        return ServiceError(
            code=ErrorCode.SERVICE_REQUEST_FAILED,
            message=f"S3 rejected request for {location}",
            service=SERVICE_NAME,
            details=details,
        )
