"""
rollout_backend.api.errors

Purpose:
    Translate exceptions that escaped request handling into an ErrorEnvelope
    (HTTP status + ExceptionInfo body). Framework-free so the translation can
    be unit tested; rollout_backend.api.error_handlers wires these functions
    into FastAPI.

Handled categories:
    - classified errors (ServerRuntimeError) -> status from the mapping table
    - unreadable request bodies -> 400, parser detail hidden
    - multipart upload failures -> 400, built from the innermost cause

Notes:
    - Translation never raises. If building the envelope fails, the caller
      still gets DEFAULT_RESPONSE_STATUS with a best-effort body.
    - Only the exception type and the request URL are logged at debug level,
      never the exception message.

Created:
    2026-10-19
"""

from __future__ import annotations

import builtins
import logging
from http import HTTPStatus

from rollout_backend.api.contracts.error_contract import ErrorEnvelope, ExceptionInfo
from rollout_backend.api.status_mapping import DEFAULT_RESPONSE_STATUS, get_status_or_default
from rollout_backend.shared.errors.exceptions import (
    MessageNotReadableError,
    MultipartFileUploadError,
    ServerRuntimeError,
)

logger = logging.getLogger(__name__)


def exception_class_name(exc: BaseException) -> str:
    cls = type(exc)
    if cls.__module__ == builtins.__name__:
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def throwable_list(exc: BaseException) -> list[BaseException]:
    """
    Return the cause chain of ``exc`` from outermost to innermost.

    Only explicit causes (``raise ... from cause``) are followed. An implicit
    __context__ is whatever happened to be in flight and is not a wrapped
    cause. Stops at the first repeated exception.
    """
    chain: list[BaseException] = []
    seen: set[int] = set()
    current: BaseException | None = exc

    while current is not None and id(current) not in seen:
        chain.append(current)
        seen.add(id(current))
        current = current.__cause__

    return chain


def create_exception_info(exc: BaseException) -> ExceptionInfo:
    # Messages of unclassified errors may carry internals; only the type is sent.
    if not isinstance(exc, ServerRuntimeError):
        return ExceptionInfo(exception_class=exception_class_name(exc))

    return ExceptionInfo(
        message=exc.message,
        exception_class=exception_class_name(exc),
        error_code=exc.error.key,
    )


def _log_request(exc: BaseException, request_url: str | None) -> None:
    logger.debug("Handling exception %s of request %s", exception_class_name(exc), request_url)


def _fallback(exc: BaseException) -> ErrorEnvelope:
    logger.exception("Failed to translate exception %s", type(exc).__name__)
    try:
        class_name = exception_class_name(exc)
    except Exception:
        class_name = type(exc).__name__
    return ErrorEnvelope(
        status_code=int(DEFAULT_RESPONSE_STATUS),
        body=ExceptionInfo(exception_class=class_name),
    )


def handle_server_error(exc: BaseException, request_url: str | None = None) -> ErrorEnvelope:
    """
    Translate a (possibly) classified error.

    ServerRuntimeError -> mapped status (default 500) and errorCode = its key.
    Anything else -> default status without errorCode.
    """
    try:
        _log_request(exc, request_url)

        if isinstance(exc, ServerRuntimeError):
            status = get_status_or_default(exc.error)
        else:
            status = DEFAULT_RESPONSE_STATUS

        return ErrorEnvelope(status_code=int(status), body=create_exception_info(exc))
    except Exception:
        return _fallback(exc)


def handle_message_not_readable(exc: BaseException, request_url: str | None = None) -> ErrorEnvelope:
    """
    Translate a request body that failed to deserialize.

    The parser error itself is not exposed; the body always describes a
    MessageNotReadableError.
    """
    try:
        _log_request(exc, request_url)
        return ErrorEnvelope(
            status_code=int(HTTPStatus.BAD_REQUEST),
            body=create_exception_info(MessageNotReadableError()),
        )
    except Exception:
        return _fallback(exc)


def handle_multipart_error(exc: BaseException, request_url: str | None = None) -> ErrorEnvelope:
    """
    Translate a failed multipart upload using the root cause of ``exc``.

    Wrapper errors around e.g. size limits or I/O failures are skipped so the
    client sees the actionable reason.
    """
    try:
        _log_request(exc, request_url)
        root_cause = throwable_list(exc)[-1]
        return ErrorEnvelope(
            status_code=int(HTTPStatus.BAD_REQUEST),
            body=create_exception_info(MultipartFileUploadError(root_cause)),
        )
    except Exception:
        return _fallback(exc)
