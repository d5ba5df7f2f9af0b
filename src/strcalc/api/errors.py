"""Map calculator exceptions to HTTP 422 responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from strcalc.core.exceptions import (
    InvalidNumberFormatError,
    MalformedHeaderError,
    NegativeNumbersNotAllowed,
    StringCalculatorError,
)
from strcalc.models.calculation import ErrorResponse

logger = logging.getLogger(__name__)

ERROR_CODES: dict[type[StringCalculatorError], str] = {
    NegativeNumbersNotAllowed: "negative_numbers_not_allowed",
    InvalidNumberFormatError: "invalid_number_format",
    MalformedHeaderError: "malformed_header",
}


def to_error_response(exc: StringCalculatorError) -> ErrorResponse:
    code = ERROR_CODES.get(type(exc), "calculator_error")
    negatives = exc.negatives if isinstance(exc, NegativeNumbersNotAllowed) else None
    return ErrorResponse(error=code, message=str(exc), negatives=negatives)


async def calculator_error_handler(request: Request, exc: StringCalculatorError) -> JSONResponse:
    body = to_error_response(exc)
    logger.info("rejected %s %s: %s", request.method, request.url.path, body.message)
    return JSONResponse(status_code=422, content=body.model_dump(exclude_none=True))


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StringCalculatorError, calculator_error_handler)
