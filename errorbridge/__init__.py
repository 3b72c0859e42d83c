"""
errorbridge — domain error to HTTP response translation.

Package root. Follows a small hexagonal layout:

Layers:
    - domain: Error taxonomy, mapping table, value objects. No framework imports.
    - application: The translator that classifies errors and builds outcomes.
    - interfaces: Output adapters (reply builder, boxed HTTP error) and schemas.
    - shared: Cross-cutting concerns (FastAPI handlers, logging).
"""

from errorbridge.application.translate_error import ErrorTranslator, translate
from errorbridge.domain.entities import Outcome
from errorbridge.domain.errors import (
    ConcurrencyError,
    CredentialsError,
    DomainError,
    ErrorKind,
    ExistsError,
    FormatError,
    InvalidArgumentError,
    NotFoundError,
    TempUnavailableError,
    UnauthorizedError,
    ValidationError,
)
from errorbridge.interfaces.boxed import HTTPErrorBox, boxed_error, is_boxed
from errorbridge.interfaces.reply import JSONReply, reply_error

__all__ = [
    "ConcurrencyError",
    "CredentialsError",
    "DomainError",
    "ErrorKind",
    "ErrorTranslator",
    "ExistsError",
    "FormatError",
    "HTTPErrorBox",
    "InvalidArgumentError",
    "JSONReply",
    "NotFoundError",
    "Outcome",
    "TempUnavailableError",
    "UnauthorizedError",
    "ValidationError",
    "boxed_error",
    "is_boxed",
    "reply_error",
    "translate",
]
