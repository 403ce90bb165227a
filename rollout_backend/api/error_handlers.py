"""
rollout_backend.api.error_handlers

Purpose:
    Register global exception handlers that turn escaped exceptions into
    ExceptionInfo JSON bodies. Translation itself lives in
    rollout_backend.api.errors; this module only adapts it to FastAPI.

Notes:
    - Starlette reports a broken multipart body as HTTPException(400) raised
      while handling its MultiPartException, so the HTTPException handler
      looks for that failure before falling back to FastAPI's default.
    - Only validation errors located in the request body are "not readable";
      path/query/header errors keep FastAPI's default 422 response.

Created:
    2026-10-19
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import (
    http_exception_handler,
    request_validation_exception_handler,
)
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.formparsers import MultiPartException

from rollout_backend.api.contracts.error_contract import ErrorEnvelope
from rollout_backend.api.errors import (
    handle_message_not_readable,
    handle_multipart_error,
    handle_server_error,
)
from rollout_backend.shared.errors import MultipartError, ServerRuntimeError

logger = logging.getLogger(__name__)


def _to_response(envelope: ErrorEnvelope) -> JSONResponse:
    return JSONResponse(status_code=envelope.status_code, content=envelope.body.to_payload())


def _find_multipart_failure(exc: BaseException) -> MultiPartException | None:
    # Starlette re-raises inside its except block, so the failure is __context__.
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        if isinstance(current, MultiPartException):
            return current
        seen.add(id(current))
        current = current.__cause__ or current.__context__
    return None


def _is_body_error(exc: RequestValidationError) -> bool:
    for err in exc.errors():
        loc = tuple(err.get("loc") or ())
        if loc[:1] == ("body",):
            return True
    return False


def register_error_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers on the FastAPI app.
    """

    @app.exception_handler(ServerRuntimeError)
    async def handle_server_runtime_error(request: Request, exc: ServerRuntimeError) -> JSONResponse:
        return _to_response(handle_server_error(exc, str(request.url)))

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError) -> Response:
        if not _is_body_error(exc):
            return await request_validation_exception_handler(request, exc)
        return _to_response(handle_message_not_readable(exc, str(request.url)))

    @app.exception_handler(MultipartError)
    async def handle_multipart(request: Request, exc: MultipartError) -> JSONResponse:
        return _to_response(handle_multipart_error(exc, str(request.url)))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException) -> Response:
        multipart_failure = _find_multipart_failure(exc)
        if multipart_failure is None:
            return await http_exception_handler(request, exc)
        return _to_response(handle_multipart_error(multipart_failure, str(request.url)))

    @app.exception_handler(Exception)
    async def handle_unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception in API request", exc_info=exc)
        return _to_response(handle_server_error(exc, str(request.url)))
