"""
rollout_backend.api.middleware.request_id

Purpose:
    Assign each request a correlation id (taken from the caller when present),
    expose it to logging for the lifetime of the request and echo it back.

Created:
    2026-10-19
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from rollout_backend.api.logging.request_context import request_id_ctx_var


@dataclass(frozen=True)
class RequestIdPolicy:
    incoming_headers: tuple[str, ...] = ("X-Request-Id", "X-Correlation-Id")
    response_header: str = "X-Request-Id"

    def pick(self, request: Request) -> str:
        for header in self.incoming_headers:
            value = request.headers.get(header)
            if value:
                return value
        return str(uuid.uuid4())


class RequestIdMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, policy: RequestIdPolicy | None = None) -> None:
        super().__init__(app)
        self._policy = policy or RequestIdPolicy()

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = self._policy.pick(request)
        request.state.request_id = request_id

        token = request_id_ctx_var.set(request_id)
        try:
            response: Response = await call_next(request)
        finally:
            request_id_ctx_var.reset(token)

        response.headers[self._policy.response_header] = request_id
        return response
