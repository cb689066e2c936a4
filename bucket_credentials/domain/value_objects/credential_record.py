"""Credential record value object.

Immutable coordinates needed to locate and unlock one S3-stored, KMS-encrypted
credential. The record never holds secret material; it is safe to log.

Construction:
    Use CredentialRecord.create() for values supplied by a host
    configuration form. It validates every field and returns a Result, so
    an invalid region or missing bucket fails before any AWS client exists.

Encryption context:
    kms_encryption_context_key and kms_secret_name form one entry
    {key: secret_name}. The entry is used only when BOTH are set.

Usage:
    from bucket_credentials.domain.value_objects import CredentialRecord

    match CredentialRecord.create(
        scope="GLOBAL",
        region="eu-west-1",
        bucket_name="creds-bucket",
        bucket_path="svc/api-key.enc",
        username="svc-deploy",
    ):
        case Success(value=record):
            record.display_name()  # "creds-bucket:svc/api-key.enc"
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass, fields
from typing import Any

from bucket_credentials.core.enums import ErrorCode
from bucket_credentials.core.result import Failure, Result, Success
from bucket_credentials.domain.enums import (
    AwsRegion,
    CiphertextEncoding,
    CredentialsScope,
)
from bucket_credentials.domain.errors import ConfigError

REQUIRED_TEXT_FIELDS = ("bucket_name", "bucket_path", "username")


def _clean(value: str | None) -> str | None:
    """Map blank or whitespace-only strings to None; keep other values as given."""
    if value is None or not str(value).strip():
        return None
    return value


@dataclass(frozen=True, kw_only=True)
class CredentialRecord:
    """Location and decryption settings for one bucket credential.

    Attributes:
        scope: Host visibility scope (passed through).
        region: AWS region of the bucket and KMS key.
        bucket_name: Bucket holding the ciphertext object.
        bucket_path: Object key of the ciphertext within the bucket.
        username: Username paired with the decrypted password.
        id: Host catalog key.
        description: Host catalog description.
        kms_encryption_context_key: Encryption context key (paired).
        kms_secret_name: Encryption context value (paired).
        ciphertext_encoding: How the object text maps to ciphertext bytes.
    """

    scope: CredentialsScope
    region: AwsRegion
    bucket_name: str
    bucket_path: str
    username: str
    id: str | None = None
    description: str | None = None
    kms_encryption_context_key: str | None = None
    kms_secret_name: str | None = None
    ciphertext_encoding: CiphertextEncoding = CiphertextEncoding.TEXT

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
    ) -> Result["CredentialRecord", ConfigError]:
        """Validate host-supplied configuration and build a record.

        Args:
            scope: 'GLOBAL' / 'SYSTEM' (any case) or CredentialsScope.
            region: Region id ('us-east-1') or enum name ('US_EAST_1').
            bucket_name: Required bucket name.
            bucket_path: Required object key.
            username: Required username.
            id: Optional catalog key.
            description: Optional catalog description.
            kms_encryption_context_key: Optional context key.
            kms_secret_name: Optional context value.
            ciphertext_encoding: 'text' (default) or 'base64'.

        Returns:
            Success(CredentialRecord) if every field is valid.
            Failure(ConfigError) naming the first invalid field.
        """
        if scope is None:
            return _config_failure(
                ErrorCode.CONFIG_FIELD_REQUIRED, "scope is required", "scope"
            )
        resolved_scope = CredentialsScope.from_identifier(scope)
        if resolved_scope is None:
            return _config_failure(
                ErrorCode.CONFIG_SCOPE_INVALID, f"Unknown scope: {scope}", "scope"
            )

        if _clean(region) is None:
            return _config_failure(
                ErrorCode.CONFIG_FIELD_REQUIRED, "region is required", "region"
            )
        resolved_region = AwsRegion.from_identifier(region)
        if resolved_region is None:
            return _config_failure(
                ErrorCode.CONFIG_REGION_INVALID, f"Unknown region: {region}", "region"
            )

        required = {
            "bucket_name": _clean(bucket_name),
            "bucket_path": _clean(bucket_path),
            "username": _clean(username),
        }
        for name in REQUIRED_TEXT_FIELDS:
            if required[name] is None:
                return _config_failure(
                    ErrorCode.CONFIG_FIELD_REQUIRED, f"{name} is required", name
                )

        try:
            resolved_encoding = CiphertextEncoding(
                str(getattr(ciphertext_encoding, "value", ciphertext_encoding)).lower()
            )
        except ValueError:
            return _config_failure(
                ErrorCode.CONFIG_ENCODING_INVALID,
                f"Unknown ciphertext encoding: {ciphertext_encoding}",
                "ciphertext_encoding",
            )

        return Success(
            value=cls(
                scope=resolved_scope,
                region=resolved_region,
                bucket_name=required["bucket_name"],
                bucket_path=required["bucket_path"],
                username=required["username"],
                id=_clean(id),
                description=_clean(description),
                kms_encryption_context_key=_clean(kms_encryption_context_key),
                kms_secret_name=_clean(kms_secret_name),
                ciphertext_encoding=resolved_encoding,
            )
        )

    def with_changes(self, **changes: Any) -> Result["CredentialRecord", ConfigError]:
        """Build a new validated record with some fields replaced.

        The current record is left untouched.

        Args:
            **changes: Field names and their new raw values.

        Returns:
            Success(CredentialRecord) or Failure(ConfigError).

        Raises:
            TypeError: If a change names an unknown field.
        """
        current = {f.name: getattr(self, f.name) for f in fields(self)}
        unknown = set(changes) - set(current)
        if unknown:
            raise TypeError(f"Unknown CredentialRecord fields: {sorted(unknown)}")
        return CredentialRecord.create(**(current | changes))

    def display_name(self) -> str:
        """Return 'bucket_name:bucket_path'."""
        return f"{self.bucket_name}:{self.bucket_path}"

    @property
    def uses_encryption_context(self) -> bool:
        """True only when both context fields are set."""
        return (
            self.kms_encryption_context_key is not None
            and self.kms_secret_name is not None
        )

    def encryption_context(self) -> dict[str, str]:
        """Return the KMS encryption context for this credential.

        Returns:
            dict[str, str]: One entry when both context fields are set,
                otherwise empty.
        """
        if not self.uses_encryption_context:
            return {}
        return {self.kms_encryption_context_key: self.kms_secret_name}  # type: ignore[dict-item]


def _config_failure(
    code: ErrorCode, message: str, field_name: str
) -> Failure[ConfigError]:
    return Failure(error=ConfigError(code=code, message=message, field=field_name))
