"""Credential visibility scope.

Opaque to the credential pipeline; carried through to the host catalog.
"""

from enum import Enum


class CredentialsScope(str, Enum):
    """Where in the host a credential is visible."""

    GLOBAL = "GLOBAL"
    SYSTEM = "SYSTEM"

    @classmethod
    def from_identifier(cls, identifier: "str | CredentialsScope") -> "CredentialsScope | None":
        """Resolve a scope from its name in any case.

        Args:
            identifier: Scope enum or name such as 'global' or 'SYSTEM'.

        Returns:
            Matching scope, or None if the name is unknown.
        """
        if isinstance(identifier, cls):
            return identifier
        try:
            return cls[str(identifier).strip().upper()]
        except KeyError:
            return None
