"""
Domain error taxonomy.

All errors that the translator recognizes by identity are defined here.
Each class carries its kind tag and the default message used when the
error is raised without one. These are mapped to HTTP responses by the
application layer.
No framework imports allowed.
"""

from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    """Discriminator naming each recognized error kind.

    Values equal the class names of the taxonomy so that a kind can be
    recovered from a bare name tag after serialization.
    """

    CREDENTIALS = "CredentialsError"
    CONCURRENCY = "ConcurrencyError"
    EXISTS = "ExistsError"
    FORMAT = "FormatError"
    NOT_FOUND = "NotFoundError"
    TEMP_UNAVAILABLE = "TempUnavailableError"
    UNAUTHORIZED = "UnauthorizedError"
    VALIDATION = "ValidationError"


class InvalidArgumentError(TypeError):
    """Raised when the translator itself is called with invalid arguments.

    Signals a bug in the calling code. Never converted into an HTTP outcome.
    """


class DomainError(Exception):
    """Base error for all translatable domain errors."""

    kind: Optional[ErrorKind] = None
    default_message: str = "An unspecified error has occurred."

    def __init__(self, message: Optional[str] = None, data: Any = None) -> None:
        self.message = message
        self.data = data
        super().__init__(message or self.default_message)

    @property
    def name(self) -> str:
        """Name tag of the error, kept when the error is serialized."""
        return self.kind.value if self.kind is not None else type(self).__name__

    def to_dict(self) -> dict[str, Any]:
        """Return a plain mapping that still translates to the same kind."""
        return {"kind": self.name, "message": self.message, "data": self.data}


class CredentialsError(DomainError):
    """Raised when credentials are missing or invalid.

    ``data`` holds the WWW-Authenticate challenge (e.g. ``"Bearer"``).
    """

    kind = ErrorKind.CREDENTIALS
    default_message = "Valid credentials are required to access this resource."


class ConcurrencyError(DomainError):
    """Raised when a write conflicts with a concurrent modification."""

    kind = ErrorKind.CONCURRENCY
    default_message = "The resource was modified by another request."


class ExistsError(DomainError):
    """Raised when creating something that already exists."""

    kind = ErrorKind.EXISTS
    default_message = "The resource already exists."


class FormatError(DomainError):
    """Raised when input cannot be parsed."""

    kind = ErrorKind.FORMAT
    default_message = "The request is not in a valid format."


class NotFoundError(DomainError):
    """Raised when a requested resource does not exist."""

    kind = ErrorKind.NOT_FOUND
    default_message = "The requested resource could not be found."


class TempUnavailableError(DomainError):
    """Raised when a dependency is temporarily unavailable."""

    kind = ErrorKind.TEMP_UNAVAILABLE
    default_message = "The service is temporarily unavailable."


class UnauthorizedError(DomainError):
    """Raised when the caller is authenticated but not allowed to act."""

    kind = ErrorKind.UNAUTHORIZED
    default_message = "You are not authorized to perform this action."


class ValidationError(DomainError):
    """Raised when input is well-formed but fails validation.

    ``data`` usually holds per-field validation details.
    """

    kind = ErrorKind.VALIDATION
    default_message = "The request failed validation."
