from __future__ import annotations

import datetime as dt
import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from prices.api.schemas.prices import ErrorResponse


logger = logging.getLogger(__name__)


def error_response(request: Request, status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    body = ErrorResponse(
        timestamp=dt.datetime.now().replace(microsecond=0),
        status=status_code,
        error=HTTPStatus(status_code).phrase,
        message=message,
        path=request.url.path,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"), headers=headers)


async def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(request, exc.status_code, str(exc.detail), headers=exc.headers)


async def _validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # mauvais format de date, id non numérique... -> 400 comme une requête invalide
    errors = exc.errors()
    if errors:
        first = errors[0]
        name = first.get("loc", ("?",))[-1]
        message = f"parameter '{name}' has an invalid value {first.get('input')!r}: {first.get('msg')}"
    else:
        message = "invalid request"
    logger.warning("request validation failed on %s: %s", request.url.path, message)
    return error_response(request, 400, message)


async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unexpected error on %s: %s", request.url.path, exc)
    return error_response(request, 500, "Internal error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)
