"""Object store protocol (port) for hexagonal architecture.

The credential pipeline only needs to open one object and read it line by
line. Infrastructure provides the S3 adapter; tests provide fakes.
"""

from collections.abc import Iterator
from typing import Protocol

from bucket_credentials.core.result import Result
from bucket_credentials.domain.errors import ServiceError


class ObjectStream(Protocol):
    """Open, readable object body.

    The caller owns the stream and must close it.
    """

    def iter_lines(self) -> Iterator[bytes]:
        """Yield the body one line at a time without line terminators.

        Lines are split on '\\n', '\\r' and '\\r\\n'.

        Raises:
            OSError: If reading the body fails part way.
        """
        ...

    def close(self) -> None:
        """Release the underlying connection."""
        ...


class ObjectStoreProtocol(Protocol):
    """Read-only access to objects in a bucket.

    Implementations:
        - S3ObjectStoreAdapter: AWS S3 (boto3)
    """

    def fetch(self, bucket: str, key: str) -> Result[ObjectStream, ServiceError]:
        """Open an object for reading.

        Args:
            bucket: Bucket name.
            key: Object key within the bucket.

        Returns:
            Success(ObjectStream) if the object was opened.
            Failure(ObjectNotFoundError) if the object does not exist.
            Failure(AccessDeniedError) if the caller may not read it.
            Failure(TransportError) on network failure.
        """
        ...
