"""
Error taxonomy and the HTTP mapping for it.

Error bodies are plain text:
- client input problems (bad JSON, wrong field types, bad path ids) -> 400
- rows that do not fit the response model -> 500 with the validator text
- store/query failures -> 500 with the driver's message as-is
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError, ResponseValidationError
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """
    A database call failed. `str(exc)` is the raw driver message.
    """


def _format_validation_error(error: dict) -> str:
    loc = ".".join(str(part) for part in error.get("loc", ()))
    msg = str(error.get("msg", "invalid request"))
    decode_error = (error.get("ctx") or {}).get("error")
    if decode_error and str(decode_error) not in msg:
        msg = f"{msg}: {decode_error}"
    return f"{loc}: {msg}" if loc else msg


async def store_error_handler(request: Request, exc: StoreError) -> PlainTextResponse:
    # Raw driver text goes back to the caller; see DESIGN.md known issues.
    logger.error("store_error path=%s error=%s", request.url.path, exc)
    return PlainTextResponse(str(exc), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> PlainTextResponse:
    body = "\n".join(_format_validation_error(error) for error in exc.errors())
    logger.info("bad_request path=%s errors=%s", request.url.path, len(exc.errors()))
    return PlainTextResponse(body or "Bad Request", status_code=status.HTTP_400_BAD_REQUEST)


async def body_validation_handler(request: Request, exc: ValidationError) -> PlainTextResponse:
    body = "\n".join(_format_validation_error(error) for error in exc.errors())
    logger.info("bad_request path=%s errors=%s", request.url.path, exc.error_count())
    return PlainTextResponse(body or "Bad Request", status_code=status.HTTP_400_BAD_REQUEST)


async def response_validation_handler(
    request: Request, exc: ResponseValidationError
) -> PlainTextResponse:
    # A row that does not fit the response model is a scan failure: 500 with the raw text.
    body = "\n".join(_format_validation_error(error) for error in exc.errors())
    logger.error("store_error path=%s error=%s", request.url.path, body)
    return PlainTextResponse(
        body or "Internal Server Error", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> PlainTextResponse:
    if exc.status_code in (status.HTTP_204_NO_CONTENT, status.HTTP_304_NOT_MODIFIED):
        return PlainTextResponse(status_code=exc.status_code, headers=exc.headers)
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StoreError, store_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ValidationError, body_validation_handler)
    app.add_exception_handler(ResponseValidationError, response_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
