"""
Exception handlers that turn every failure into a short plain-text response.

  * ``RequestValidationError`` (malformed JSON, wrong field types, empty id)
    becomes 400 with the decode errors spelled out.
  * ``HTTPException`` keeps its status and detail (404, 409, 405, ...).
  * Anything else is a 500; the traceback goes to the log, not the client.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal Server Error"


def _format_location(loc: Iterable[Any]) -> str:
    return ".".join(str(part) for part in loc)


def format_validation_errors(errors: Iterable[Mapping[str, Any]]) -> str:
    parts = []
    for err in errors:
        location = _format_location(err.get("loc", ()))
        message = err.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "Invalid request body: " + "; ".join(parts)


def _status_code_for(exc: Exception) -> int:
    for attr in ("status_code", "status"):
        value = getattr(exc, attr, None)
        if isinstance(value, int) and 400 <= value < 600:
            return value
    return 500


def error_handler(request: Request, exc: Exception) -> PlainTextResponse:
    status_code = _status_code_for(exc)
    headers = getattr(exc, "headers", None)

    if status_code >= 500:
        logger.error(
            "%s %s failed with %s: %s",
            request.method,
            request.url.path,
            type(exc).__name__,
            exc,
            exc_info=(type(exc), exc, exc.__traceback__),
        )
        return PlainTextResponse(INTERNAL_ERROR_MESSAGE, status_code=status_code, headers=headers)

    detail = getattr(exc, "detail", None) or str(exc) or type(exc).__name__
    logger.info("%s %s -> %s %s", request.method, request.url.path, status_code, detail)
    return PlainTextResponse(str(detail), status_code=status_code, headers=headers)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    return error_handler(request, exc)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> PlainTextResponse:
    message = format_validation_errors(exc.errors())
    logger.warning("%s %s rejected: %s", request.method, request.url.path, message)
    return PlainTextResponse(message, status_code=400)


async def unhandled_exception_handler(request: Request, exc: Exception) -> PlainTextResponse:
    return error_handler(request, exc)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
