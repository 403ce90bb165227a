"""
rollout_backend.api.main

Purpose:
    FastAPI application factory for the rollout backend API. Routers are
    mounted by the hosting service; this factory owns logging, request ids
    and the error translation hooks.

Created:
    2026-10-19
"""

from __future__ import annotations

from fastapi import FastAPI

from rollout_backend.api.error_handlers import register_error_handlers
from rollout_backend.api.logging.logging_config import configure_logging
from rollout_backend.api.middleware.request_id import RequestIdMiddleware, RequestIdPolicy
from rollout_backend.api.settings import Settings, get_settings


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    configure_logging(settings.log_level)

    app = FastAPI(title=settings.service_name, version=settings.service_version)

    app.add_middleware(RequestIdMiddleware, policy=RequestIdPolicy())

    register_error_handlers(app)

    return app
