"""Credential type registry.

A registration table a host's plugin discovery reads to learn which
credential types exist and how to build them from configuration fields.
Credential classes register themselves with @register_credential_type
when their module is imported; there is no base class to extend.

Usage:
    from bucket_credentials.application import CredentialTypeRegistry

    for info in CredentialTypeRegistry.list_types():
        print(info.key, info.display_name)

    credentials = CredentialTypeRegistry.create(
        "aws-bucket-credentials",
        scope="GLOBAL",
        region="us-east-1",
        bucket_name="creds-bucket",
        bucket_path="svc/api-key.enc",
        username="svc-deploy",
    )
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class CredentialTypeInfo:
    """Registered credential type.

    Attributes:
        key: Unique type key (e.g. 'aws-bucket-credentials').
        display_name: Name shown in host configuration screens.
        description: Short description of the type.
        factory: Callable building a credential from keyword fields.
        credential_class: Class the factory builds.
    """

    key: str
    display_name: str
    description: str
    factory: Callable[..., Any]
    credential_class: type


class CredentialTypeRegistry:
    """Central registry of credential types.

    Application-level and process-wide. Keys are unique.
    """

    _types: dict[str, CredentialTypeInfo] = {}

    @classmethod
    def register(
        cls,
        key: str,
        credential_class: type,
        display_name: str,
        description: str = "",
        factory: Callable[..., Any] | None = None,
    ) -> None:
        """Register a credential type.

        Args:
            key: Unique type key.
            credential_class: Credential implementation class.
            display_name: Host-facing display name.
            description: Short description.
            factory: Builder taking configuration fields as keyword
                arguments. Defaults to credential_class.create.

        Raises:
            ValueError: If the key is already registered.
        """
        if key in cls._types:
            raise ValueError(f"Credential type '{key}' is already registered")

        cls._types[key] = CredentialTypeInfo(
            key=key,
            display_name=display_name,
            description=description,
            factory=factory or getattr(credential_class, "create"),
            credential_class=credential_class,
        )

    @classmethod
    def get(cls, key: str) -> CredentialTypeInfo:
        """Get a registered credential type.

        Raises:
            ValueError: If the key is not registered.
        """
        if key not in cls._types:
            available = ", ".join(sorted(cls._types)) or "none"
            raise ValueError(
                f"Credential type '{key}' not found. Available types: {available}"
            )
        return cls._types[key]

    @classmethod
    def create(cls, key: str, **fields: Any) -> Any:
        """Build a credential of a registered type from configuration fields.

        Args:
            key: Registered type key.
            **fields: Configuration fields passed to the type's factory.

        Returns:
            The constructed credential.

        Raises:
            ValueError: If the key is not registered.
            CredentialsException: If the factory rejects the configuration.
        """
        return cls.get(key).factory(**fields)

    @classmethod
    def list_types(cls) -> list[CredentialTypeInfo]:
        """List registered types ordered by key."""
        return [cls._types[key] for key in sorted(cls._types)]

    @classmethod
    def is_registered(cls, key: str) -> bool:
        return key in cls._types

    @classmethod
    def unregister(cls, key: str) -> None:
        """Remove a type (hosts unloading a plugin, tests)."""
        cls._types.pop(key, None)


def register_credential_type(
    key: str,
    display_name: str,
    description: str = "",
) -> Callable[[type[T]], type[T]]:
    """Decorator registering a credential class.

    The class must expose a `create` classmethod accepting configuration
    fields as keyword arguments.

    Args:
        key: Unique type key.
        display_name: Host-facing display name.
        description: Short description.

    Returns:
        The decorated class unchanged.

    Example:
        >>> @register_credential_type(
        ...     key="aws-bucket-credentials",
        ...     display_name="AWS Bucket Credentials",
        ... )
        ... class BucketCredentials:
        ...     @classmethod
        ...     def create(cls, **fields): ...
    """

    def decorator(credential_class: type[T]) -> type[T]:
        CredentialTypeRegistry.register(
            key=key,
            credential_class=credential_class,
            display_name=display_name,
            description=description,
        )
        return credential_class

    return decorator
