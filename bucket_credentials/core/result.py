"""Result types for railway-oriented programming.

Every step of the credential pipeline (validate, fetch, decrypt) returns a
Result instead of raising, so failures are explicit values that tests can
inspect and the host boundary can convert in one place.

Usage:
    def load(bucket: str) -> Result[bytes, SecretsError]:
        if not bucket:
            return Failure(error=ConfigError(...))
        return Success(value=b"...")

    match load("creds-bucket"):
        case Success(value=blob):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


Result = Success[T] | Failure[E]
