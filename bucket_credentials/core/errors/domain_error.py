"""Base domain error class for Railway-Oriented Programming.

DomainError is the base class for every error in the credential pipeline.
Errors flow through the system as data (Result types), not exceptions.
Only the host-facing boundary converts a Failure into a raised exception
(see CredentialsException).

Architecture:
- Base class for all error types (configuration, pipeline, external service)
- Does NOT inherit from Exception (not raised, returned in Result)
- Uses dataclass inheritance (NOT Protocol/ABC)
- Type-safe with Result[T, DomainError]

Security:
    Messages and details must never carry ciphertext or plaintext values.

Usage:
    from bucket_credentials.core.errors import DomainError

    @dataclass(frozen=True, slots=True, kw_only=True)
    class MyError(DomainError):
        pass  # Inherits code, message, details
"""

from dataclasses import dataclass

from bucket_credentials.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable error message.
        details: Optional context for debugging.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"
