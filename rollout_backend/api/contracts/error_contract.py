"""
rollout_backend.api.contracts.error_contract

Purpose:
    Stable error contract for the REST API (response body + envelope).
    Used by the error translator so every failed request gets the same
    JSON shape:

        {"message": str|null, "exceptionClass": str, "errorCode": str|null}

Created:
    2026-10-19
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field


class ExceptionInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    message: str | None = Field(default=None, description="Human-readable error message")
    exception_class: str = Field(
        ...,
        alias="exceptionClass",
        description="Fully-qualified type name of the raised error",
    )
    error_code: str | None = Field(
        default=None,
        alias="errorCode",
        description="Machine-readable error key, only for classified errors",
    )

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True)


@dataclass(frozen=True)
class ErrorEnvelope:
    status_code: int
    body: ExceptionInfo
