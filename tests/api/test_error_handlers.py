"""
tests.api.test_error_handlers

Purpose:
    API regression tests for the ExceptionInfo error envelope.

Covers:
    - Classified errors map to their configured status
    - Unmapped classification and unclassified errors fall back to 500
    - Malformed JSON body -> 400 without parser detail
    - Multipart failure -> 400 built from the root cause (app and framework raised)
    - Non-body validation and other HTTP errors keep FastAPI defaults
"""

from __future__ import annotations

import logging

from rollout_backend.shared.errors.server_error import ServerError

_EXC_MODULE = "rollout_backend.shared.errors.exceptions"


def test_entity_not_found_404(client) -> None:
    r = client.get("/targets/controller-17")
    assert r.status_code == 404, r.text

    data = r.json()
    assert set(data) == {"message", "exceptionClass", "errorCode"}
    assert data["exceptionClass"] == f"{_EXC_MODULE}.EntityNotFoundError"
    assert data["errorCode"] == ServerError.REPO_ENTITY_NOT_EXISTS.key
    assert data["message"] == "Target with given identifier {controller-17} does not exist."
    assert r.headers.get("x-request-id")


def test_entity_already_exists_409(client) -> None:
    r = client.post("/targets", json={"controller_id": "c1", "name": "first"})
    assert r.status_code == 409, r.text
    assert r.json()["errorCode"] == ServerError.REPO_ENTITY_ALREADY_EXISTS.key


def test_insufficient_permission_403(client) -> None:
    r = client.delete("/targets/c1")
    assert r.status_code == 403, r.text
    assert r.json()["message"] == ServerError.INSUFFICIENT_PERMISSION.message


def test_entity_locked_423(client) -> None:
    r = client.put("/rollouts/5")
    assert r.status_code == 423, r.text
    assert r.json()["errorCode"] == ServerError.ENTITY_LOCKED.key


def test_unmapped_classification_defaults_to_500(client) -> None:
    r = client.put("/targets/c1")
    assert r.status_code == 500, r.text
    assert r.json()["errorCode"] == ServerError.REPO_CONCURRENT_MODIFICATION.key


def test_unclassified_error_500_without_code_or_message(client_factory) -> None:
    client = client_factory(raise_server_exceptions=False)
    r = client.get("/broken")
    assert r.status_code == 500

    data = r.json()
    assert data == {"message": None, "exceptionClass": "RuntimeError", "errorCode": None}


def test_malformed_body_400_hides_parser_detail(client) -> None:
    r = client.post(
        "/targets",
        content=b'{"controller_id": "c1", "name": ',
        headers={"Content-Type": "application/json"},
    )
    assert r.status_code == 400, r.text

    data = r.json()
    assert data["exceptionClass"] == f"{_EXC_MODULE}.MessageNotReadableError"
    assert data["errorCode"] == ServerError.REST_BODY_NOT_READABLE.key
    assert data["message"] == ServerError.REST_BODY_NOT_READABLE.message


def test_body_failing_validation_400(client) -> None:
    r = client.post("/targets", json={"controller_id": "c1"})
    assert r.status_code == 400, r.text
    assert r.json()["exceptionClass"] == f"{_EXC_MODULE}.MessageNotReadableError"


def test_multipart_failure_reports_root_cause(client) -> None:
    r = client.post("/artifacts")
    assert r.status_code == 400, r.text

    data = r.json()
    assert data["exceptionClass"] == f"{_EXC_MODULE}.MultipartFileUploadError"
    assert data["errorCode"] == ServerError.ARTIFACT_UPLOAD_FAILED.key
    assert data["message"] == "Maximum upload size exceeded"


def test_framework_multipart_failure_uses_exception_info(client) -> None:
    r = client.post(
        "/softwaremodules/3/artifacts",
        content=b"--x\r\nContent-Disposition: form-data; name=\"file\"\r\n\r\nabc\r\n--x--\r\n",
        headers={"Content-Type": "multipart/form-data"},
    )
    assert r.status_code == 400, r.text

    data = r.json()
    assert set(data) == {"message", "exceptionClass", "errorCode"}
    assert data["exceptionClass"] == f"{_EXC_MODULE}.MultipartFileUploadError"
    assert data["errorCode"] == ServerError.ARTIFACT_UPLOAD_FAILED.key
    assert data["message"] == "Missing boundary in multipart."


def test_other_http_errors_keep_default_shape(client) -> None:
    r = client.get("/legacy")
    assert r.status_code == 410
    assert r.json() == {"detail": "Gone"}

    r = client.get("/no/such/route")
    assert r.status_code == 404
    assert r.json() == {"detail": "Not Found"}


def test_path_param_validation_is_not_a_body_error(client) -> None:
    r = client.put("/rollouts/abc")
    assert r.status_code == 422, r.text

    data = r.json()
    assert "errorCode" not in data
    assert data["detail"][0]["loc"] == ["path", "rollout_id"]


def test_unclassified_error_logged_with_traceback(client_factory, caplog) -> None:
    client = client_factory(raise_server_exceptions=False)
    caplog.set_level(logging.ERROR, logger="rollout_backend.api.error_handlers")

    client.get("/broken")

    records = [r for r in caplog.records if r.name == "rollout_backend.api.error_handlers"]
    assert len(records) == 1
    assert records[0].levelno == logging.ERROR
    assert records[0].exc_info is not None
    assert records[0].exc_info[0] is RuntimeError
