"""Exception raised at the host boundary.

Inside the package errors are Result values. A host's credential lookup
expects accessors that either return or raise, so BucketCredentials
converts a Failure into this exception and keeps the domain error on
`error` for inspection.
"""

from bucket_credentials.core.enums import ErrorCode
from bucket_credentials.domain.errors.secrets_error import SecretsError


class CredentialsException(Exception):
    """Credential could not be constructed or resolved.

    Attributes:
        error: The domain error that caused the failure.
    """

    def __init__(self, error: SecretsError) -> None:
        super().__init__(str(error))
        self.error = error

    @property
    def code(self) -> ErrorCode:
        """Machine-readable error code of the wrapped error."""
        return self.error.code
