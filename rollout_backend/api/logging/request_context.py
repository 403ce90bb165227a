"""
rollout_backend.api.logging.request_context

Purpose:
    Request-scoped correlation id for log records. The middleware sets it per
    request; RequestIdFilter stamps it onto every record so the translator's
    "Handling exception ..." lines can be tied to the failing request.

Created:
    2026-10-19
"""

from __future__ import annotations

import contextvars
import logging

NO_REQUEST_ID = "-"

request_id_ctx_var: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "request_id",
    default=None,
)


def current_request_id() -> str:
    return request_id_ctx_var.get() or NO_REQUEST_ID


class RequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = current_request_id()
        return True
