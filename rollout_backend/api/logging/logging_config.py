"""
rollout_backend.api.logging.logging_config

Purpose:
    Central logging configuration for the rollout backend API.
    Ensures request_id is present in logs (including uvicorn.access and uvicorn.error).

Created:
    2026-10-19
"""

from __future__ import annotations

import logging

from rollout_backend.api.logging.request_context import RequestIdFilter

LOG_FORMAT = "%(asctime)s | %(levelname)s | request_id=%(request_id)s | %(name)s | %(message)s"


def _make_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))
    handler.addFilter(RequestIdFilter())
    return handler


def _configure_logger(logger_name: str, handler: logging.Handler, level: int) -> None:
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.propagate = False


def configure_logging(level_name: str = "INFO") -> None:
    level = getattr(logging, level_name.upper(), logging.INFO)
    handler = _make_handler(level)

    # Root/app logs (don't clear root handlers to avoid surprising other libs)
    root = logging.getLogger()
    root.setLevel(level)
    if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        root.addHandler(handler)

    # Uvicorn uses these loggers; clear their handlers so our formatter/filter wins.
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        _configure_logger(name, handler, level)
