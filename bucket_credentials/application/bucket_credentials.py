"""Host-facing bucket credential.

BucketCredentials is what a host's credential lookup receives: a
username/password identity whose password lives encrypted in S3.

Architecture:
- Composition: a CredentialRecord plus a password resolver
- Registered as the 'aws-bucket-credentials' credential type
- The one place where Result failures become exceptions, because host
  lookups expect accessors that return or raise

Accessors:
    display_name(), username()  - synchronous, no I/O
    password()                  - BLOCKING: one S3 GetObject and one KMS
                                  Decrypt per call unless caching is on.
                                  Do not call on a latency-sensitive
                                  dispatch thread; offload it to a worker.
"""

from bucket_credentials.application.credential_registry import (
    register_credential_type,
)
from bucket_credentials.core.enums import ErrorCode
from bucket_credentials.core.result import Failure, Success
from bucket_credentials.domain.enums import (
    AwsRegion,
    CiphertextEncoding,
    CredentialsScope,
)
from bucket_credentials.domain.errors import CredentialsException, MissingFieldError
from bucket_credentials.domain.protocols import PasswordResolverProtocol
from bucket_credentials.domain.value_objects import CredentialRecord, SecretValue

CREDENTIAL_TYPE_KEY = "aws-bucket-credentials"


@register_credential_type(
    key=CREDENTIAL_TYPE_KEY,
    display_name="AWS Bucket Credentials",
    description="Username with a KMS-encrypted password stored in an S3 bucket",
)
class BucketCredentials:
    """Username/password credential backed by S3 and KMS.

    Construct with BucketCredentials.create(); it validates configuration
    before any AWS client is built.

    Example:
        >>> credentials = BucketCredentials.create(
        ...     scope="GLOBAL",
        ...     region="us-east-1",
        ...     bucket_name="creds-bucket",
        ...     bucket_path="svc/api-key.enc",
        ...     username="svc-deploy",
        ... )
        >>> credentials.display_name()
        'creds-bucket:svc/api-key.enc'
    """

    def __init__(self, record: CredentialRecord, resolver: PasswordResolverProtocol) -> None:
        """Initialize from a validated record.

        Args:
            record: Validated credential record.
            resolver: Resolver performing fetch and decrypt.
        """
        self._record = record
        self._resolver = resolver

    @classmethod
    def create(
        cls,
        *,
        scope: str | CredentialsScope | None,
        region: str | AwsRegion | None,
        bucket_name: str | None,
        bucket_path: str | None,
        username: str | None,
        id: str | None = None,
        description: str | None = None,
        kms_encryption_context_key: str | None = None,
        kms_secret_name: str | None = None,
        ciphertext_encoding: str | CiphertextEncoding = CiphertextEncoding.TEXT,
        resolver: PasswordResolverProtocol | None = None,
    ) -> "BucketCredentials":
        """Validate configuration and build the credential.

        Args:
            scope: Host visibility scope.
            region: AWS region id or enum name.
            bucket_name: Bucket holding the ciphertext.
            bucket_path: Object key of the ciphertext.
            username: Username paired with the password.
            id: Host catalog key.
            description: Host catalog description.
            kms_encryption_context_key: Encryption context key (paired).
            kms_secret_name: Encryption context value (paired).
            ciphertext_encoding: 'text' or 'base64'.
            resolver: Resolver to use. Defaults to the container's resolver
                for the record's region.

        Returns:
            BucketCredentials: Ready-to-use credential.

        Raises:
            CredentialsException: Wrapping ConfigError if configuration is
                invalid. No AWS client has been created in that case.
        """
        match CredentialRecord.create(
            scope=scope,
            region=region,
            bucket_name=bucket_name,
            bucket_path=bucket_path,
            username=username,
            id=id,
            description=description,
            kms_encryption_context_key=kms_encryption_context_key,
            kms_secret_name=kms_secret_name,
            ciphertext_encoding=ciphertext_encoding,
        ):
            case Failure(error=error):
                raise CredentialsException(error)
            case Success(value=record):
                pass

        if resolver is None:
            from bucket_credentials.core.container import get_secret_resolver

            resolver = get_secret_resolver(record.region)
        return cls(record, resolver)

    def display_name(self) -> str:
        """Return 'bucket_name:bucket_path'."""
        return self._record.display_name()

    def username(self) -> str:
        """Return the configured username.

        Raises:
            CredentialsException: Wrapping MissingFieldError if no
                username is set.
        """
        if not self._record.username:
            raise CredentialsException(
                MissingFieldError(
                    code=ErrorCode.FIELD_MISSING,
                    message="username is not set",
                    field="username",
                )
            )
        return self._record.username

    def password(self) -> SecretValue:
        """Fetch and decrypt the password. Blocking.

        Returns:
            SecretValue: Decrypted password (redacted when formatted).

        Raises:
            CredentialsException: Wrapping SecretFetchError or
                SecretDecryptError. Nothing is retried here.
        """
        match self._resolver.resolve_password(self._record):
            case Success(value=secret):
                return secret
            case Failure(error=error):
                raise CredentialsException(error)

    @property
    def record(self) -> CredentialRecord:
        return self._record

    @property
    def scope(self) -> CredentialsScope:
        return self._record.scope

    @property
    def id(self) -> str | None:
        return self._record.id

    @property
    def description(self) -> str | None:
        return self._record.description

    @property
    def region(self) -> AwsRegion:
        return self._record.region

    @property
    def bucket_name(self) -> str:
        return self._record.bucket_name

    @property
    def bucket_path(self) -> str:
        return self._record.bucket_path

    @property
    def kms_encryption_context_key(self) -> str | None:
        return self._record.kms_encryption_context_key

    @property
    def kms_secret_name(self) -> str | None:
        return self._record.kms_secret_name

    def __repr__(self) -> str:
        return (
            f"BucketCredentials(display_name={self.display_name()!r}, "
            f"username={self._record.username!r}, region={self._record.region.value})"
        )
