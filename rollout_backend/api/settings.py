# rollout_backend/api/settings.py
"""
rollout_backend.api.settings

Purpose:
    Centralized configuration for the FastAPI service.
    Keeps deployment flexible and avoids hard-coded app metadata.

Created:
    2026-10-19
"""

from __future__ import annotations

import os

from pydantic import BaseModel, Field, field_validator


class Settings(BaseModel):
    service_name: str = Field(default="rollout-backend-api")
    service_version: str = Field(default="0.1.0")

    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"Invalid log level: {v}")
        return level


def get_settings() -> Settings:
    # Later: switch to pydantic-settings if more env vars show up.
    overrides = {}
    if os.environ.get("LOG_LEVEL"):
        overrides["log_level"] = os.environ["LOG_LEVEL"]
    return Settings(**overrides)
