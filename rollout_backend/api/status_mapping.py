"""
rollout_backend.api.status_mapping

Purpose:
    Read-only translation table from ServerError classification to HTTP status.
    Built once at import; classifications missing from the table resolve to
    DEFAULT_RESPONSE_STATUS.

Created:
    2026-10-19
"""

from __future__ import annotations

from http import HTTPStatus
from types import MappingProxyType
from typing import Mapping

from rollout_backend.shared.errors.server_error import ServerError

DEFAULT_RESPONSE_STATUS = HTTPStatus.INTERNAL_SERVER_ERROR

ERROR_TO_HTTP_STATUS: Mapping[ServerError, HTTPStatus] = MappingProxyType(
    {
        ServerError.REPO_ENTITY_NOT_EXISTS: HTTPStatus.NOT_FOUND,
        ServerError.REPO_ENTITY_ALREADY_EXISTS: HTTPStatus.CONFLICT,
        ServerError.REPO_ENTITY_READ_ONLY: HTTPStatus.FORBIDDEN,
        ServerError.REST_SORT_PARAM_INVALID_DIRECTION: HTTPStatus.BAD_REQUEST,
        ServerError.REST_SORT_PARAM_INVALID_FIELD: HTTPStatus.BAD_REQUEST,
        ServerError.REST_SORT_PARAM_SYNTAX: HTTPStatus.BAD_REQUEST,
        ServerError.REST_RSQL_PARAM_INVALID_FIELD: HTTPStatus.BAD_REQUEST,
        ServerError.REST_RSQL_SEARCH_PARAM_SYNTAX: HTTPStatus.BAD_REQUEST,
        ServerError.INSUFFICIENT_PERMISSION: HTTPStatus.FORBIDDEN,
        ServerError.ARTIFACT_UPLOAD_FAILED: HTTPStatus.INTERNAL_SERVER_ERROR,
        ServerError.ARTIFACT_UPLOAD_FAILED_SHA1_MATCH: HTTPStatus.BAD_REQUEST,
        ServerError.ARTIFACT_UPLOAD_FAILED_MD5_MATCH: HTTPStatus.BAD_REQUEST,
        ServerError.ARTIFACT_DELETE_FAILED: HTTPStatus.INTERNAL_SERVER_ERROR,
        ServerError.ARTIFACT_LOAD_FAILED: HTTPStatus.INTERNAL_SERVER_ERROR,
        ServerError.ACTION_STATUS_TOO_MANY_ENTRIES: HTTPStatus.FORBIDDEN,
        ServerError.ATTRIBUTES_TOO_MANY_ENTRIES: HTTPStatus.FORBIDDEN,
        ServerError.ACTION_NOT_CANCELABLE: HTTPStatus.METHOD_NOT_ALLOWED,
        ServerError.ACTION_NOT_FORCE_QUITABLE: HTTPStatus.METHOD_NOT_ALLOWED,
        ServerError.DS_CREATION_FAILED_MISSING_MODULE: HTTPStatus.BAD_REQUEST,
        ServerError.DS_MODULE_UNSUPPORTED: HTTPStatus.BAD_REQUEST,
        ServerError.DS_TYPE_UNDEFINED: HTTPStatus.BAD_REQUEST,
        ServerError.REPO_TENANT_NOT_EXISTS: HTTPStatus.BAD_REQUEST,
        ServerError.ENTITY_LOCKED: HTTPStatus.LOCKED,
        ServerError.ROLLOUT_ILLEGAL_STATE: HTTPStatus.BAD_REQUEST,
        ServerError.CONFIGURATION_VALUE_INVALID: HTTPStatus.BAD_REQUEST,
        ServerError.CONFIGURATION_KEY_INVALID: HTTPStatus.BAD_REQUEST,
        ServerError.REPO_INVALID_TARGET_ADDRESS: HTTPStatus.BAD_REQUEST,
    }
)


def get_status_or_default(error: ServerError | None) -> HTTPStatus:
    if error is None:
        return DEFAULT_RESPONSE_STATUS
    return ERROR_TO_HTTP_STATUS.get(error, DEFAULT_RESPONSE_STATUS)
