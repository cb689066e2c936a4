"""Integration tests for BucketCredentials against moto-mocked AWS.

The full path is real: container wiring, boto3 clients built from
Settings, S3 GetObject, line joining and KMS Decrypt. Only AWS itself is
replaced by moto.

KMS ciphertext is binary, so objects are stored base64-encoded (wrapped
at 76 columns, as `base64` and `aws kms encrypt | base64` produce) and
the credentials use ciphertext_encoding="base64".
"""

import base64

import boto3
import pytest
from moto import mock_aws

from bucket_credentials.application import CREDENTIAL_TYPE_KEY, CredentialTypeRegistry
from bucket_credentials.core.enums import ErrorCode
from bucket_credentials.domain.errors import (
    CredentialsException,
    InvalidCiphertextError,
    ObjectNotFoundError,
    SecretDecryptError,
    SecretFetchError,
)

REGION = "eu-west-1"
BUCKET = "creds-bucket"
PASSWORD = "correct horse battery staple"


@pytest.fixture
def aws():
    with mock_aws():
        s3 = boto3.client("s3", region_name=REGION)
        s3.create_bucket(
            Bucket=BUCKET,
            CreateBucketConfiguration={"LocationConstraint": REGION},
        )
        kms = boto3.client("kms", region_name=REGION)
        key_id = kms.create_key()["KeyMetadata"]["KeyId"]
        yield s3, kms, key_id


def store_secret(aws, path: str, *, context: dict[str, str] | None = None) -> None:
    s3, kms, key_id = aws
    params = {"KeyId": key_id, "Plaintext": PASSWORD.encode("utf-8")}
    if context:
        params["EncryptionContext"] = context
    blob = kms.encrypt(**params)["CiphertextBlob"]
    s3.put_object(Bucket=BUCKET, Key=path, Body=base64.encodebytes(blob))


def build_credentials(path: str, **fields):
    return CredentialTypeRegistry.create(
        CREDENTIAL_TYPE_KEY,
        scope="GLOBAL",
        id="svc-api-key",
        region=REGION,
        bucket_name=BUCKET,
        bucket_path=path,
        username="svc-deploy",
        ciphertext_encoding="base64",
        **fields,
    )


@pytest.mark.integration
class TestBucketCredentialsAws:
    """End-to-end password resolution."""

    def test_password_without_context(self, aws):
        store_secret(aws, "svc/plain.enc")
        credentials = build_credentials("svc/plain.enc")

        assert credentials.username() == "svc-deploy"
        assert credentials.display_name() == f"{BUCKET}:svc/plain.enc"
        assert credentials.password().reveal() == PASSWORD

    def test_password_with_context(self, aws):
        store_secret(aws, "svc/bound.enc", context={"app": "billing-api"})
        credentials = build_credentials(
            "svc/bound.enc",
            kms_encryption_context_key="app",
            kms_secret_name="billing-api",
        )

        assert credentials.password().reveal() == PASSWORD

    def test_context_mismatch_raises_decrypt_error(self, aws):
        store_secret(aws, "svc/bound.enc", context={"app": "billing-api"})
        credentials = build_credentials(
            "svc/bound.enc",
            kms_encryption_context_key="app",
            kms_secret_name="other-api",
        )

        with pytest.raises(CredentialsException) as exc_info:
            credentials.password()

        error = exc_info.value.error
        assert isinstance(error, SecretDecryptError)
        assert isinstance(error.cause, InvalidCiphertextError)

    def test_context_field_alone_is_ignored(self, aws):
        store_secret(aws, "svc/plain.enc")
        credentials = build_credentials("svc/plain.enc", kms_secret_name="billing-api")

        assert credentials.password().reveal() == PASSWORD

    def test_missing_object_raises_fetch_error(self, aws):
        credentials = build_credentials("svc/missing.enc")

        with pytest.raises(CredentialsException) as exc_info:
            credentials.password()

        error = exc_info.value.error
        assert isinstance(error, SecretFetchError)
        assert error.code == ErrorCode.SECRET_FETCH_FAILED
        assert isinstance(error.cause, ObjectNotFoundError)

    def test_secret_not_in_repr_or_str(self, aws):
        store_secret(aws, "svc/plain.enc")
        credentials = build_credentials("svc/plain.enc")

        secret = credentials.password()

        assert PASSWORD not in repr(secret)
        assert PASSWORD not in str(secret)
        assert PASSWORD not in repr(credentials)
