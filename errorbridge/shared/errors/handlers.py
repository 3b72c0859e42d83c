"""
Error handlers for FastAPI.

Maps domain errors to HTTP responses through the translator.
No stack traces or internal details are exposed to clients.
All error responses use the ErrorPayload schema.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from errorbridge.application.translate_error import ErrorTranslator, translate
from errorbridge.domain.entities import Outcome
from errorbridge.domain.errors import DomainError
from errorbridge.interfaces.boxed import HTTPErrorBox
from errorbridge.interfaces.schemas import ErrorPayload

logger = logging.getLogger(__name__)

HTTP_500 = 500


def to_json_response(outcome: Outcome) -> JSONResponse:
    """Build the JSON response described by an outcome."""
    return JSONResponse(
        status_code=outcome.status_code,
        content=ErrorPayload.from_outcome(outcome).to_body(),
        headers=outcome.extra_headers,
        media_type=outcome.content_type,
    )


def register_error_handlers(
    app: FastAPI, translator: Optional[ErrorTranslator] = None
) -> None:
    """Register domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
        translator: Translator to use. Defaults to the module default.
    """
    _translate = translator.translate if translator else translate

    @app.exception_handler(HTTPErrorBox)
    async def handle_boxed(_request: Request, exc: HTTPErrorBox) -> JSONResponse:
        """Render an already translated error."""
        return to_json_response(exc.outcome)

    @app.exception_handler(DomainError)
    async def handle_domain(_request: Request, exc: DomainError) -> JSONResponse:
        """Translate a domain error raised by a route."""
        outcome = _translate(exc)
        if outcome.status_code >= HTTP_500:
            logger.error("Domain error: %s -> %d", exc.name, outcome.status_code)
        else:
            logger.warning("Domain error: %s -> %d", exc.name, outcome.status_code)
        return to_json_response(outcome)
