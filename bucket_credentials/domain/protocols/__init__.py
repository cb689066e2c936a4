"""Domain protocols (ports) package.

Infrastructure adapters implement these structurally (PEP 544); nothing
inherits from them.

Usage:
    from bucket_credentials.domain.protocols import (
        KeyDecryptorProtocol,
        LoggerProtocol,
        ObjectStoreProtocol,
    )
"""

from bucket_credentials.domain.protocols.key_decryptor_protocol import (
    KeyDecryptorProtocol,
)
from bucket_credentials.domain.protocols.logger_protocol import LoggerProtocol
from bucket_credentials.domain.protocols.object_store_protocol import (
    ObjectStoreProtocol,
    ObjectStream,
)
from bucket_credentials.domain.protocols.password_resolver_protocol import (
    PasswordResolverProtocol,
)

__all__ = [
    "KeyDecryptorProtocol",
    "LoggerProtocol",
    "ObjectStoreProtocol",
    "ObjectStream",
    "PasswordResolverProtocol",
]
