"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Configuration errors (CONFIG_*)
- Secret pipeline errors (SECRET_*)
- External service errors (OBJECT_*, KMS_*, SERVICE_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Configuration errors (raised at construction)
    CONFIG_FIELD_REQUIRED = "config_field_required"
    CONFIG_REGION_INVALID = "config_region_invalid"
    CONFIG_SCOPE_INVALID = "config_scope_invalid"
    CONFIG_ENCODING_INVALID = "config_encoding_invalid"

    # Read-time errors
    FIELD_MISSING = "field_missing"

    # Secret pipeline errors
    SECRET_FETCH_FAILED = "secret_fetch_failed"
    SECRET_DECRYPT_FAILED = "secret_decrypt_failed"
    SECRET_DECODE_FAILED = "secret_decode_failed"

    # Object store errors
    OBJECT_NOT_FOUND = "object_not_found"

    # Key management errors
    KMS_KEY_NOT_FOUND = "kms_key_not_found"
    KMS_INVALID_CIPHERTEXT = "kms_invalid_ciphertext"

    # Shared external service errors
    SERVICE_ACCESS_DENIED = "service_access_denied"
    SERVICE_TRANSPORT_FAILED = "service_transport_failed"
    SERVICE_REQUEST_FAILED = "service_request_failed"
