"""Unit tests for SecretValue and DecryptRequest value objects."""

import pytest

from bucket_credentials.domain.value_objects import DecryptRequest, SecretValue


@pytest.mark.unit
class TestSecretValue:
    """Test SecretValue redaction and access."""

    def test_reveal_returns_plaintext(self):
        assert SecretValue("hunter2").reveal() == "hunter2"

    def test_str_and_repr_are_redacted(self):
        secret = SecretValue("hunter2")

        assert "hunter2" not in str(secret)
        assert "hunter2" not in repr(secret)
        assert "hunter2" not in f"{secret}"
        assert str(secret) == "********"

    def test_redaction_does_not_leak_length(self):
        assert str(SecretValue("a")) == str(SecretValue("a" * 64))

    def test_from_bytes_decodes_utf8(self):
        assert SecretValue.from_bytes("pässwörd".encode("utf-8")).reveal() == "pässwörd"

    def test_from_bytes_rejects_invalid_utf8(self):
        with pytest.raises(UnicodeDecodeError):
            SecretValue.from_bytes(b"\xff\xfe\xfa")

    def test_equality_compares_values(self):
        assert SecretValue("same") == SecretValue("same")
        assert SecretValue("same") != SecretValue("different")
        assert SecretValue("same") != "same"

    def test_is_empty(self):
        assert SecretValue("").is_empty() is True
        assert SecretValue("x").is_empty() is False


@pytest.mark.unit
class TestDecryptRequest:
    """Test DecryptRequest construction."""

    def test_default_has_no_context(self):
        request = DecryptRequest(ciphertext_blob=b"blob")

        assert request.has_context is False
        assert dict(request.encryption_context) == {}

    def test_context_is_read_only_copy(self):
        context = {"app": "billing-api"}
        request = DecryptRequest(ciphertext_blob=b"blob", encryption_context=context)
        context["other"] = "x"

        assert dict(request.encryption_context) == {"app": "billing-api"}
        with pytest.raises(TypeError):
            request.encryption_context["new"] = "value"  # type: ignore[index]

    def test_repr_hides_ciphertext(self):
        request = DecryptRequest(
            ciphertext_blob=b"very-secret-ciphertext",
            encryption_context={"app": "billing-api"},
        )

        assert "very-secret-ciphertext" not in repr(request)
        assert "22 bytes" in repr(request)
