"""Caching decorator for SecretResolver.

Reuses a decrypted password for a fixed TTL so repeated lookups of the
same credential skip the S3 and KMS round trips.

Caching Strategy:
    - Keyed by CredentialRecord (immutable, so a reconfigured credential
      is a different key)
    - Only successes are cached; a failure is retried on the next call
    - Expired entries are dropped on lookup and swept on every store
    - Monotonic clock, so wall-clock changes do not extend entries
    - One lock guards the table; resolution itself runs outside the lock

Disabled (TTL 0) is the default in Settings, which keeps the
re-fetch-on-every-call behavior.
"""

import threading
import time
from dataclasses import dataclass

from bucket_credentials.core.result import Result, Success
from bucket_credentials.domain.errors import SecretsError
from bucket_credentials.domain.protocols import (
    LoggerProtocol,
    PasswordResolverProtocol,
)
from bucket_credentials.domain.value_objects import CredentialRecord, SecretValue


@dataclass(frozen=True, slots=True)
class _CacheEntry:
    value: SecretValue
    expires_at: float


class CachingSecretResolver:
    """TTL cache in front of another resolver.

    Attributes:
        ttl_seconds: Lifetime of a cached password.
    """

    def __init__(
        self,
        resolver: PasswordResolverProtocol,
        *,
        ttl_seconds: float,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize cache.

        Args:
            resolver: Resolver performing the real fetch and decrypt.
            ttl_seconds: Seconds a password stays valid. Must be > 0.
            logger: Structured logger.

        Raises:
            ValueError: If ttl_seconds is not positive.
        """
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be greater than 0")
        self._resolver = resolver
        self.ttl_seconds = ttl_seconds
        self._logger = logger
        self._entries: dict[CredentialRecord, _CacheEntry] = {}
        self._lock = threading.Lock()

    def resolve_password(self, record: CredentialRecord) -> Result[SecretValue, SecretsError]:
        """Return a cached password or resolve and cache a fresh one.

        Args:
            record: Credential to resolve.

        Returns:
            Success(SecretValue) from cache or the wrapped resolver.
            Failure(SecretsError) from the wrapped resolver (not cached).
        """
        now = time.monotonic()
        with self._lock:
            entry = self._entries.get(record)
            if entry is not None:
                if entry.expires_at > now:
                    self._logger.debug("password_cache_hit", credential=record.display_name())
                    return Success(value=entry.value)
                del self._entries[record]

        result = self._resolver.resolve_password(record)

        if isinstance(result, Success):
            stored_at = time.monotonic()
            with self._lock:
                self._evict_expired(stored_at)
                self._entries[record] = _CacheEntry(
                    value=result.value,
                    expires_at=stored_at + self.ttl_seconds,
                )
            self._logger.debug(
                "password_cache_stored",
                credential=record.display_name(),
                ttl_seconds=self.ttl_seconds,
            )
        return result

    def _evict_expired(self, now: float) -> None:
        """Drop expired entries. Caller holds the lock."""
        expired = [key for key, entry in self._entries.items() if entry.expires_at <= now]
        for key in expired:
            del self._entries[key]

    def invalidate(self, record: CredentialRecord | None = None) -> None:
        """Drop one cached password, or all of them.

        Call after rotating a ciphertext object so the next lookup
        fetches the new value.

        Args:
            record: Credential to drop; None clears the whole cache.
        """
        with self._lock:
            if record is None:
                self._entries.clear()
            else:
                self._entries.pop(record, None)
