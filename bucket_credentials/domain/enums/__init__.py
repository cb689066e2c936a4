"""Domain enums package.

Usage:
    from bucket_credentials.domain.enums import AwsRegion, CredentialsScope
"""

from bucket_credentials.domain.enums.aws_region import AwsRegion
from bucket_credentials.domain.enums.ciphertext_encoding import CiphertextEncoding
from bucket_credentials.domain.enums.credentials_scope import CredentialsScope

__all__ = ["AwsRegion", "CiphertextEncoding", "CredentialsScope"]
