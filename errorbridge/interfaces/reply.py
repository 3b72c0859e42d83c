"""
Builder adapter: deliver a translated error through a reply function.

The caller supplies a ``reply`` callable that accepts the JSON payload
and returns a builder exposing chainable ``type``, ``code`` and
``header`` methods. The adapter configures that builder and returns
whatever the chain returns.
"""

from typing import Any, Callable, Optional, Protocol

from starlette.responses import JSONResponse

from errorbridge.application.translate_error import (
    ErrorTranslator,
    translate,
    validate_error,
)
from errorbridge.domain.errors import InvalidArgumentError
from errorbridge.interfaces.boxed import is_boxed


class ReplyBuilder(Protocol):
    """Chainable response builder returned by a reply function."""

    def type(self, mime_type: str) -> "ReplyBuilder": ...

    def code(self, status_code: int) -> "ReplyBuilder": ...

    def header(self, name: str, value: str) -> "ReplyBuilder": ...


ReplyFunction = Callable[[dict[str, Any]], ReplyBuilder]


def reply_error(
    err: Any,
    reply: ReplyFunction,
    translator: Optional[ErrorTranslator] = None,
) -> Any:
    """Translate ``err`` and hand the outcome to ``reply``.

    Args:
        err: The error to translate.
        reply: Callable building a response from the payload.
        translator: Translator to use. Defaults to the module default.

    Returns:
        Whatever the configured builder chain returns, or ``err`` itself
        when it is already a boxed HTTP error.

    Raises:
        InvalidArgumentError: On invalid ``err`` or non-callable ``reply``.
    """
    validate_error(err)
    if not callable(reply):
        raise InvalidArgumentError('The argument "reply" must be a function.')

    if is_boxed(err):
        return err

    outcome = translator.translate(err) if translator else translate(err)
    response = reply(outcome.payload()).type(outcome.content_type).code(
        outcome.status_code
    )
    for name, value in outcome.extra_headers.items():
        response = response.header(name, value)
    return response


class JSONReply:
    """A reply builder that renders to a starlette JSONResponse.

    Usable as the ``reply`` argument of :func:`reply_error`::

        response = reply_error(err, JSONReply).to_response()
    """

    def __init__(self, payload: Any, status_code: int = 200) -> None:
        self.payload = payload
        self.status_code = status_code
        self.headers: dict[str, str] = {}

    def type(self, mime_type: str) -> "JSONReply":
        self.headers["content-type"] = mime_type
        return self

    def code(self, status_code: int) -> "JSONReply":
        self.status_code = status_code
        return self

    def header(self, name: str, value: str) -> "JSONReply":
        self.headers[name] = value
        return self

    def to_response(self) -> JSONResponse:
        """Render the configured reply."""
        headers = dict(self.headers)
        media_type = headers.pop("content-type", None)
        return JSONResponse(
            content=self.payload,
            status_code=self.status_code,
            headers=headers,
            media_type=media_type,
        )
