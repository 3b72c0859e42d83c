"""
Boxed adapter: deliver a translated error as an HTTPException.

The returned value can be raised from a FastAPI route or handed to any
framework that understands starlette HTTP exceptions. Errors that are
already HTTP exceptions are passed through untouched.
"""

from typing import Any, Optional

from fastapi import HTTPException
from starlette.exceptions import HTTPException as StarletteHTTPException

from errorbridge.application.translate_error import (
    ErrorTranslator,
    translate,
    validate_error,
)
from errorbridge.domain.entities import Outcome
from errorbridge.interfaces.schemas import ErrorOutput, ErrorPayload

# Outcome header names as sent on the wire by the boxed error.
_BOXED_HEADER_NAMES = {
    "content-type": "Content-Type",
    "www-authenticate": "WWW-Authenticate",
}


class HTTPErrorBox(HTTPException):
    """HTTPException carrying the full translated error description.

    Attributes:
        output: Status code, headers and JSON payload of the response.
        data: The payload data, or None when the error kind carries none.
    """

    def __init__(self, outcome: Outcome) -> None:
        headers = {
            _BOXED_HEADER_NAMES.get(name, name): value
            for name, value in outcome.headers.items()
        }
        super().__init__(
            status_code=outcome.status_code,
            detail=outcome.message,
            headers=headers,
        )
        self.outcome = outcome
        self.data = outcome.data if outcome.has_data else None
        self.output = ErrorOutput(
            status_code=outcome.status_code,
            headers=headers,
            payload=ErrorPayload.from_outcome(outcome),
        )

    @property
    def message(self) -> str:
        return self.outcome.message


def is_boxed(err: Any) -> bool:
    """Return True when ``err`` is already an HTTP exception."""
    return isinstance(err, StarletteHTTPException)


def boxed_error(
    err: Any, translator: Optional[ErrorTranslator] = None
) -> StarletteHTTPException:
    """Translate ``err`` into a boxed HTTP error.

    Args:
        err: The error to translate.
        translator: Translator to use. Defaults to the module default.

    Returns:
        ``err`` unchanged if it is already an HTTP exception, else a new
        HTTPErrorBox.

    Raises:
        InvalidArgumentError: If ``err`` is not a valid error value.
    """
    validate_error(err)
    if is_boxed(err):
        return err
    outcome = translator.translate(err) if translator else translate(err)
    return HTTPErrorBox(outcome)
