"""Unit tests for CredentialRecord value object.

Tests cover:
- create() validation (required fields, region, scope, encoding)
- display_name() formatting
- Encryption context all-or-nothing pairing
- Immutability and with_changes()
"""

from dataclasses import FrozenInstanceError

import pytest

from bucket_credentials.core.enums import ErrorCode
from bucket_credentials.core.result import Failure, Success
from bucket_credentials.domain.enums import (
    AwsRegion,
    CiphertextEncoding,
    CredentialsScope,
)
from bucket_credentials.domain.errors import ConfigError
from bucket_credentials.domain.value_objects import CredentialRecord
from tests.conftest import make_record


def create(**overrides):
    fields = {
        "scope": "GLOBAL",
        "region": "us-east-1",
        "bucket_name": "creds-bucket",
        "bucket_path": "svc/api-key.enc",
        "username": "svc-deploy",
    }
    return CredentialRecord.create(**(fields | overrides))


@pytest.mark.unit
class TestCredentialRecordCreate:
    """Test CredentialRecord.create() validation."""

    def test_create_valid_record(self):
        """Test create() returns Success with resolved enums."""
        result = create(id="svc-api-key", description="Service API key")

        assert isinstance(result, Success)
        record = result.value
        assert record.scope is CredentialsScope.GLOBAL
        assert record.region is AwsRegion.US_EAST_1
        assert record.bucket_name == "creds-bucket"
        assert record.bucket_path == "svc/api-key.enc"
        assert record.username == "svc-deploy"
        assert record.id == "svc-api-key"
        assert record.description == "Service API key"
        assert record.ciphertext_encoding is CiphertextEncoding.TEXT

    def test_create_accepts_enum_name_region(self):
        """Test region given as enum name ('EU_WEST_1') resolves."""
        result = create(region="EU_WEST_1")

        assert isinstance(result, Success)
        assert result.value.region is AwsRegion.EU_WEST_1

    @pytest.mark.parametrize(
        "bucket, path",
        [
            ("creds-bucket", "svc/api-key.enc"),
            ("a", "b"),
            ("team.bucket-01", "deep/nested/path/secret.txt"),
        ],
    )
    def test_display_name_is_bucket_colon_path(self, bucket, path):
        """Test display_name() for valid bucket/path pairs."""
        result = create(bucket_name=bucket, bucket_path=path)

        assert isinstance(result, Success)
        assert result.value.display_name() == f"{bucket}:{path}"

    def test_invalid_region_fails(self):
        """Test unknown region returns ConfigError naming region."""
        result = create(region="mars-north-1")

        assert isinstance(result, Failure)
        assert isinstance(result.error, ConfigError)
        assert result.error.code == ErrorCode.CONFIG_REGION_INVALID
        assert result.error.field == "region"
        assert "mars-north-1" in result.error.message

    @pytest.mark.parametrize("region", [None, "", "   "])
    def test_missing_region_fails(self, region):
        result = create(region=region)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.CONFIG_FIELD_REQUIRED
        assert result.error.field == "region"

    @pytest.mark.parametrize("field", ["bucket_name", "bucket_path", "username"])
    @pytest.mark.parametrize("value", [None, "", "  "])
    def test_required_text_fields(self, field, value):
        """Test bucket_name, bucket_path and username are required."""
        result = create(**{field: value})

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.CONFIG_FIELD_REQUIRED
        assert result.error.field == field

    def test_missing_scope_fails(self):
        result = create(scope=None)

        assert isinstance(result, Failure)
        assert result.error.field == "scope"

    def test_unknown_scope_fails(self):
        result = create(scope="USER")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.CONFIG_SCOPE_INVALID

    def test_unknown_encoding_fails(self):
        result = create(ciphertext_encoding="rot13")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.CONFIG_ENCODING_INVALID
        assert result.error.field == "ciphertext_encoding"

    def test_base64_encoding_accepted(self):
        result = create(ciphertext_encoding="BASE64")

        assert isinstance(result, Success)
        assert result.value.ciphertext_encoding is CiphertextEncoding.BASE64

    def test_blank_optional_fields_become_none(self):
        result = create(
            id=" ",
            description="",
            kms_encryption_context_key="",
            kms_secret_name="  ",
        )

        assert isinstance(result, Success)
        record = result.value
        assert record.id is None
        assert record.description is None
        assert record.kms_encryption_context_key is None
        assert record.kms_secret_name is None

    def test_surrounding_whitespace_is_kept(self):
        """S3 keys and KMS context values are matched byte for byte."""
        result = create(
            bucket_path=" svc/key.enc",
            kms_encryption_context_key="app",
            kms_secret_name="billing ",
        )

        assert isinstance(result, Success)
        record = result.value
        assert record.bucket_path == " svc/key.enc"
        assert record.display_name() == "creds-bucket: svc/key.enc"
        assert record.encryption_context() == {"app": "billing "}


@pytest.mark.unit
class TestCredentialRecordEncryptionContext:
    """Test encryption context pairing."""

    def test_both_fields_set_gives_single_entry(self):
        record = make_record(
            kms_encryption_context_key="app", kms_secret_name="billing-api"
        )

        assert record.uses_encryption_context is True
        assert record.encryption_context() == {"app": "billing-api"}

    @pytest.mark.parametrize(
        "key, name",
        [("app", None), (None, "billing-api"), (None, None)],
    )
    def test_either_field_missing_gives_no_context(self, key, name):
        record = make_record(kms_encryption_context_key=key, kms_secret_name=name)

        assert record.uses_encryption_context is False
        assert record.encryption_context() == {}


@pytest.mark.unit
class TestCredentialRecordImmutability:
    """Test records cannot be mutated in place."""

    def test_fields_are_frozen(self, record):
        with pytest.raises(FrozenInstanceError):
            record.kms_encryption_context_key = "changed"  # type: ignore[misc]

    def test_with_changes_returns_new_record(self, record):
        result = record.with_changes(kms_encryption_context_key="app", kms_secret_name="x")

        assert isinstance(result, Success)
        assert result.value is not record
        assert result.value.encryption_context() == {"app": "x"}
        assert record.encryption_context() == {}

    def test_with_changes_validates(self, record):
        result = record.with_changes(region="nowhere-1")

        assert isinstance(result, Failure)
        assert result.error.field == "region"

    def test_with_changes_rejects_unknown_field(self, record):
        with pytest.raises(TypeError):
            record.with_changes(password="nope")

    def test_records_are_hashable_and_comparable(self):
        assert make_record() == make_record()
        assert hash(make_record()) == hash(make_record())
        assert make_record() != make_record(bucket_path="other")
