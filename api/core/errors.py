"""
API error taxonomy and the exception handlers that render it.

Every error response has the shape `{"msg": "..."}`:
- malformed input             -> 400 "Bad Request"
- referenced entity missing   -> 404 with a route-specific message
- unmatched path or method    -> 404 "invalid url"
- anything else               -> 500
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

BAD_REQUEST_MSG = "Bad Request"
INVALID_URL_MSG = "invalid url"
INTERNAL_ERROR_MSG = "Internal Server Error"


class ApiError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_msg = INTERNAL_ERROR_MSG

    def __init__(self, msg: str | None = None) -> None:
        self.msg = msg or self.default_msg
        super().__init__(self.msg)


class BadRequest(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_msg = BAD_REQUEST_MSG


class NotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    default_msg = "not found"


class MissingReference(NotFound):
    """
    A write pointed at a row that does not exist (foreign-key violation).

    `column` and `table` name the offending reference, e.g. `author` -> `users`.
    """

    def __init__(self, *, column: str | None = None, table: str | None = None, msg: str | None = None) -> None:
        self.column = column
        self.table = table
        super().__init__(msg or f"{table or 'referenced row'} does not exist")


def _error_response(status_code: int, msg: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"msg": msg})


async def api_error_handler(_: Request, exc: ApiError) -> JSONResponse:
    return _error_response(exc.status_code, exc.msg)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return _error_response(status.HTTP_400_BAD_REQUEST, BAD_REQUEST_MSG)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Unknown paths and unknown methods on known paths are both "invalid url".
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        logger.debug("No route for %s %s", request.method, request.url.path)
        return _error_response(status.HTTP_404_NOT_FOUND, INVALID_URL_MSG)
    return _error_response(exc.status_code, str(exc.detail))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MSG)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
