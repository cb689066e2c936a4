"""Unit tests for CredentialTypeRegistry."""

from unittest.mock import Mock

import pytest

from bucket_credentials.application import (
    CREDENTIAL_TYPE_KEY,
    BucketCredentials,
    CredentialTypeRegistry,
    register_credential_type,
)
from bucket_credentials.domain.errors import CredentialsException


@pytest.fixture
def scratch_type():
    """Register a throwaway type and remove it afterwards."""
    key = "test-scratch-credentials"
    yield key
    CredentialTypeRegistry.unregister(key)


@pytest.mark.unit
class TestCredentialTypeRegistry:
    """Test registration table behavior."""

    def test_bucket_credentials_registered_on_import(self):
        info = CredentialTypeRegistry.get(CREDENTIAL_TYPE_KEY)

        assert info.credential_class is BucketCredentials
        assert info.display_name == "AWS Bucket Credentials"
        assert CredentialTypeRegistry.is_registered(CREDENTIAL_TYPE_KEY)

    def test_create_builds_bucket_credentials(self):
        resolver = Mock()

        credentials = CredentialTypeRegistry.create(
            CREDENTIAL_TYPE_KEY,
            scope="SYSTEM",
            region="us-west-2",
            bucket_name="creds-bucket",
            bucket_path="svc/api-key.enc",
            username="svc-deploy",
            resolver=resolver,
        )

        assert isinstance(credentials, BucketCredentials)
        assert credentials.display_name() == "creds-bucket:svc/api-key.enc"

    def test_create_propagates_config_errors(self):
        with pytest.raises(CredentialsException):
            CredentialTypeRegistry.create(
                CREDENTIAL_TYPE_KEY,
                scope="GLOBAL",
                region="bogus",
                bucket_name="creds-bucket",
                bucket_path="svc/api-key.enc",
                username="svc-deploy",
            )

    def test_unknown_type_raises(self):
        with pytest.raises(ValueError, match="not found"):
            CredentialTypeRegistry.get("no-such-type")

    def test_duplicate_key_rejected(self):
        with pytest.raises(ValueError, match="already registered"):
            CredentialTypeRegistry.register(
                CREDENTIAL_TYPE_KEY, BucketCredentials, "Duplicate"
            )

    def test_decorator_registers_class(self, scratch_type):
        @register_credential_type(key=scratch_type, display_name="Scratch")
        class ScratchCredentials:
            @classmethod
            def create(cls, **fields):
                return fields

        assert CredentialTypeRegistry.get(scratch_type).credential_class is ScratchCredentials
        assert CredentialTypeRegistry.create(scratch_type, a=1) == {"a": 1}
        assert scratch_type in [info.key for info in CredentialTypeRegistry.list_types()]
