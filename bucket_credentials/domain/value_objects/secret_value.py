"""Opaque secret value object.

Wraps a decrypted password so that formatting it (str, repr, f-strings,
structured log fields) never exposes the plaintext. Callers that need
the actual value must ask for it with reveal().
"""

import hmac
from dataclasses import dataclass, field

REDACTED = "********"


@dataclass(frozen=True, eq=False)
class SecretValue:
    """Decrypted secret with redacted string conversion.

    Attributes:
        _value: The plaintext. Not part of repr.

    Example:
        >>> secret = SecretValue("hunter2")
        >>> str(secret)
        '********'
        >>> secret.reveal()
        'hunter2'
    """

    _value: str = field(repr=False)

    @classmethod
    def from_bytes(cls, data: bytes) -> "SecretValue":
        """Build from UTF-8 plaintext bytes.

        Raises:
            UnicodeDecodeError: If data is not valid UTF-8.
        """
        return cls(data.decode("utf-8"))

    def reveal(self) -> str:
        """Return the plaintext.

        Returns:
            str: Decrypted secret. Never log this value.
        """
        return self._value

    def is_empty(self) -> bool:
        """Check whether the decrypted secret is an empty string."""
        return not self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SecretValue):
            return NotImplemented
        return hmac.compare_digest(
            self._value.encode("utf-8"), other._value.encode("utf-8")
        )

    def __hash__(self) -> int:
        return hash((SecretValue, self._value))

    def __str__(self) -> str:
        return REDACTED

    def __repr__(self) -> str:
        return f"SecretValue('{REDACTED}')"
