"""
tests.api.conftest

Shared pytest fixtures for API tests.
"""

from __future__ import annotations

import pytest
from fastapi import FastAPI, File, UploadFile
from fastapi.testclient import TestClient
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from rollout_backend.api.main import create_app
from rollout_backend.shared.errors.exceptions import (
    ConcurrentModificationError,
    EntityAlreadyExistsError,
    EntityLockedError,
    EntityNotFoundError,
    InsufficientPermissionError,
    MultipartError,
)


class TargetIn(BaseModel):
    controller_id: str
    name: str


def _add_failing_routes(app: FastAPI) -> None:
    @app.get("/targets/{controller_id}")
    def get_target(controller_id: str) -> dict:
        raise EntityNotFoundError("Target", controller_id)

    @app.post("/targets")
    def create_target(target: TargetIn) -> dict:
        raise EntityAlreadyExistsError("Target", target.controller_id)

    @app.delete("/targets/{controller_id}")
    def delete_target(controller_id: str) -> dict:
        raise InsufficientPermissionError()

    @app.put("/rollouts/{rollout_id}")
    def update_rollout(rollout_id: int) -> dict:
        raise EntityLockedError()

    @app.put("/targets/{controller_id}")
    def update_target(controller_id: str) -> dict:
        raise ConcurrentModificationError()

    @app.get("/broken")
    def broken() -> dict:
        raise RuntimeError("db password is hunter2")

    @app.post("/artifacts")
    def upload_artifact() -> dict:
        try:
            try:
                raise OSError("Maximum upload size exceeded")
            except OSError as exc:
                raise ValueError("stream closed") from exc
        except ValueError as exc:
            raise MultipartError("Could not parse multipart request") from exc

    @app.post("/softwaremodules/{module_id}/artifacts")
    async def upload_module_artifact(module_id: int, file: UploadFile = File(...)) -> dict:
        return {"module_id": module_id, "filename": file.filename}

    @app.get("/legacy")
    def legacy() -> dict:
        raise StarletteHTTPException(status_code=410, detail="Gone")


@pytest.fixture()
def client_factory():
    """
    Factory fixture that creates a fresh TestClient.

    raise_server_exceptions=False is needed for routes that end up in the
    catch-all handler, which Starlette re-raises after responding.
    """

    def _make(*, raise_server_exceptions: bool = True) -> TestClient:
        app = create_app()
        _add_failing_routes(app)
        return TestClient(app, raise_server_exceptions=raise_server_exceptions)

    return _make


@pytest.fixture()
def client(client_factory) -> TestClient:
    return client_factory()
