"""How the ciphertext object text maps to the KMS ciphertext blob.

TEXT sends the object text UTF-8 encoded as-is. BASE64 treats the object
text as base64 (e.g. the output of `aws kms encrypt --output text`) and
sends the decoded bytes.
"""

from enum import Enum


class CiphertextEncoding(str, Enum):
    """Encoding of the stored ciphertext object."""

    TEXT = "text"
    BASE64 = "base64"
