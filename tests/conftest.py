"""Pytest configuration and shared fixtures.

This configuration ensures:
1. AWS SDK calls never reach real AWS (fake credentials, moto in tests)
2. Container singletons and settings are reset between tests
3. Ports (object store, key decryptor, logger) have simple test doubles
"""

from collections.abc import Iterator
from unittest.mock import Mock

import pytest

from bucket_credentials.core.container import reset_container
from bucket_credentials.core.result import Success
from bucket_credentials.domain.enums import (
    AwsRegion,
    CiphertextEncoding,
    CredentialsScope,
)
from bucket_credentials.domain.value_objects import CredentialRecord


@pytest.fixture(autouse=True)
def aws_test_environment(monkeypatch):
    """Fake AWS credentials so boto3 never picks up real ones."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    monkeypatch.setenv("ENVIRONMENT", "testing")
    for name in ("PASSWORD_CACHE_TTL_SECONDS", "AWS_ENDPOINT_URL", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def fresh_container():
    """Clear container singletons before and after each test."""
    reset_container()
    yield
    reset_container()


class FakeObjectStream:
    """In-memory ObjectStream.

    Args:
        data: Object body.
        read_error: Raised from iter_lines() after yielding the first line.
        close_error: Raised from close().
    """

    def __init__(
        self,
        data: bytes = b"",
        *,
        read_error: Exception | None = None,
        close_error: Exception | None = None,
    ) -> None:
        self._data = data
        self._read_error = read_error
        self._close_error = close_error
        self.closed = False

    def iter_lines(self) -> Iterator[bytes]:
        lines = self._data.splitlines()
        if self._read_error is not None:
            yield from lines[:1]
            raise self._read_error
        yield from lines

    def close(self) -> None:
        self.closed = True
        if self._close_error is not None:
            raise self._close_error


def make_record(**overrides) -> CredentialRecord:
    """Build a valid CredentialRecord for tests.

    Args:
        **overrides: Fields to replace.

    Returns:
        CredentialRecord with test defaults.
    """
    fields = {
        "scope": CredentialsScope.GLOBAL,
        "region": AwsRegion.US_EAST_1,
        "bucket_name": "creds-bucket",
        "bucket_path": "svc/api-key.enc",
        "username": "svc-deploy",
        "id": "svc-api-key",
        "description": "Service API key",
        "kms_encryption_context_key": None,
        "kms_secret_name": None,
        "ciphertext_encoding": CiphertextEncoding.TEXT,
    }
    return CredentialRecord(**(fields | overrides))


@pytest.fixture
def record() -> CredentialRecord:
    return make_record()


@pytest.fixture
def mock_logger() -> Mock:
    """Logger double whose bind() returns itself, so calls are visible."""
    logger = Mock()
    logger.bind.return_value = logger
    return logger


@pytest.fixture
def object_stream() -> FakeObjectStream:
    return FakeObjectStream(b"ciphertext-line-1\nciphertext-line-2\n")


@pytest.fixture
def object_store(object_stream) -> Mock:
    store = Mock()
    store.fetch.return_value = Success(value=object_stream)
    return store


@pytest.fixture
def key_decryptor() -> Mock:
    decryptor = Mock()
    decryptor.decrypt.return_value = Success(value=b"s3cr3t-password")
    return decryptor


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: End-to-end tests against moto-mocked AWS"
    )

