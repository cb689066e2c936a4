"""KMS decrypt request value object."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class DecryptRequest:
    """Ciphertext plus optional encryption context for a decrypt call.

    Attributes:
        ciphertext_blob: Ciphertext bytes sent to the key service.
        encryption_context: Authenticated context entries. Empty when the
            credential does not bind a context.
    """

    ciphertext_blob: bytes
    encryption_context: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self) -> None:
        # Freeze a caller-supplied dict so the request stays immutable.
        if not isinstance(self.encryption_context, MappingProxyType):
            object.__setattr__(
                self,
                "encryption_context",
                MappingProxyType(dict(self.encryption_context)),
            )

    @property
    def has_context(self) -> bool:
        """Whether the request is context-bound."""
        return bool(self.encryption_context)

    def __repr__(self) -> str:
        return (
            f"DecryptRequest(ciphertext_blob=<{len(self.ciphertext_blob)} bytes>, "
            f"encryption_context_keys={sorted(self.encryption_context)})"
        )
