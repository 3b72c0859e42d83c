"""
Static mapping table from error kinds to HTTP outcomes.

Rules are checked in tuple order and the first match wins.
UNKNOWN_RULE applies only when no kind matches.
"""

from types import MappingProxyType

from errorbridge.domain.entities import KindRule
from errorbridge.domain.errors import (
    ConcurrencyError,
    CredentialsError,
    ErrorKind,
    ExistsError,
    FormatError,
    NotFoundError,
    TempUnavailableError,
    UnauthorizedError,
    ValidationError,
)

UNSPECIFIED_MESSAGE = "An unspecified error has occurred."

HTTP_400 = 400
HTTP_401 = 401
HTTP_403 = 403
HTTP_404 = 404
HTTP_409 = 409
HTTP_500 = 500
HTTP_503 = 503

KIND_RULES: tuple[KindRule, ...] = (
    KindRule(
        ErrorKind.CREDENTIALS,
        HTTP_401,
        CredentialsError.default_message,
        auth_header=True,
    ),
    KindRule(
        ErrorKind.CONCURRENCY,
        HTTP_409,
        ConcurrencyError.default_message,
        carries_data=True,
    ),
    KindRule(ErrorKind.EXISTS, HTTP_409, ExistsError.default_message, carries_data=True),
    KindRule(ErrorKind.FORMAT, HTTP_400, FormatError.default_message),
    KindRule(ErrorKind.NOT_FOUND, HTTP_404, NotFoundError.default_message),
    KindRule(
        ErrorKind.TEMP_UNAVAILABLE, HTTP_503, TempUnavailableError.default_message
    ),
    KindRule(ErrorKind.UNAUTHORIZED, HTTP_403, UnauthorizedError.default_message),
    KindRule(
        ErrorKind.VALIDATION,
        HTTP_400,
        ValidationError.default_message,
        carries_data=True,
    ),
)

UNKNOWN_RULE = KindRule(None, HTTP_500, UNSPECIFIED_MESSAGE)

# Classes recognized by identity, keyed by the kind they represent.
KIND_CLASSES = MappingProxyType({
    ErrorKind.CREDENTIALS: CredentialsError,
    ErrorKind.CONCURRENCY: ConcurrencyError,
    ErrorKind.EXISTS: ExistsError,
    ErrorKind.FORMAT: FormatError,
    ErrorKind.NOT_FOUND: NotFoundError,
    ErrorKind.TEMP_UNAVAILABLE: TempUnavailableError,
    ErrorKind.UNAUTHORIZED: UnauthorizedError,
    ErrorKind.VALIDATION: ValidationError,
})
