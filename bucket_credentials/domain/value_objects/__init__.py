"""Domain value objects package.

Usage:
    from bucket_credentials.domain.value_objects import CredentialRecord, SecretValue
"""

from bucket_credentials.domain.value_objects.credential_record import CredentialRecord
from bucket_credentials.domain.value_objects.decrypt_request import DecryptRequest
from bucket_credentials.domain.value_objects.secret_value import SecretValue

__all__ = ["CredentialRecord", "DecryptRequest", "SecretValue"]
