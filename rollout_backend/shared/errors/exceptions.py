"""
rollout_backend.shared.errors.exceptions

Purpose:
    Classified exception types raised by repository, artifact and REST layers.
    Every ServerRuntimeError carries exactly one ServerError classification;
    the API boundary translates it into an HTTP status and ExceptionInfo body.

Usage:
    raise EntityNotFoundError("Target", "controller-17")
    raise ArtifactUploadFailedError("disk full") from os_error

Created:
    2026-10-19
"""

from __future__ import annotations

from typing import Any

from rollout_backend.shared.errors.server_error import ServerError

_DEFAULT_MESSAGE: Any = object()


class ServerRuntimeError(Exception):
    """
    Base class for classified application errors.

    message:
        Defaults to the classification's message. Pass None explicitly for an
        error without a message.
    cause:
        Optional underlying exception; stored as __cause__ just like
        ``raise ... from cause``.
    """

    error: ServerError = ServerError.REPO_GENERIC_ERROR

    def __init__(
        self,
        message: str | None = _DEFAULT_MESSAGE,
        *,
        error: ServerError | None = None,
        cause: BaseException | None = None,
    ) -> None:
        if error is not None:
            self.error = error
        if message is _DEFAULT_MESSAGE:
            message = self.error.message

        if message is None:
            super().__init__()
        else:
            super().__init__(message)
        self.message: str | None = message

        if cause is not None:
            self.__cause__ = cause


class GenericRepositoryError(ServerRuntimeError):
    error = ServerError.REPO_GENERIC_ERROR


class EntityNotFoundError(ServerRuntimeError):
    error = ServerError.REPO_ENTITY_NOT_EXISTS

    def __init__(
        self,
        entity_type: str | None = None,
        entity_id: Any = None,
        *,
        message: str | None = _DEFAULT_MESSAGE,
    ) -> None:
        if message is _DEFAULT_MESSAGE and entity_type is not None:
            if entity_id is None:
                message = f"{entity_type} does not exist."
            else:
                message = f"{entity_type} with given identifier {{{entity_id}}} does not exist."
        super().__init__(message)
        self.entity_type = entity_type
        self.entity_id = entity_id


class EntityAlreadyExistsError(ServerRuntimeError):
    error = ServerError.REPO_ENTITY_ALREADY_EXISTS

    def __init__(
        self,
        entity_type: str | None = None,
        entity_id: Any = None,
        *,
        message: str | None = _DEFAULT_MESSAGE,
    ) -> None:
        if message is _DEFAULT_MESSAGE and entity_type is not None and entity_id is not None:
            message = f"{entity_type} with given identifier {{{entity_id}}} already exists."
        super().__init__(message)
        self.entity_type = entity_type
        self.entity_id = entity_id


class EntityReadOnlyError(ServerRuntimeError):
    error = ServerError.REPO_ENTITY_READ_ONLY


class ConcurrentModificationError(ServerRuntimeError):
    error = ServerError.REPO_CONCURRENT_MODIFICATION


class TenantNotExistError(ServerRuntimeError):
    error = ServerError.REPO_TENANT_NOT_EXISTS


class InvalidTargetAddressError(ServerRuntimeError):
    error = ServerError.REPO_INVALID_TARGET_ADDRESS


class EntityLockedError(ServerRuntimeError):
    error = ServerError.ENTITY_LOCKED


# --- REST parameters ---------------------------------------------------------


class SortParameterSyntaxError(ServerRuntimeError):
    error = ServerError.REST_SORT_PARAM_SYNTAX


class SortParameterUnsupportedFieldError(ServerRuntimeError):
    error = ServerError.REST_SORT_PARAM_INVALID_FIELD


class SortParameterUnsupportedDirectionError(ServerRuntimeError):
    error = ServerError.REST_SORT_PARAM_INVALID_DIRECTION


class RsqlParameterSyntaxError(ServerRuntimeError):
    error = ServerError.REST_RSQL_SEARCH_PARAM_SYNTAX


class RsqlParameterUnsupportedFieldError(ServerRuntimeError):
    error = ServerError.REST_RSQL_PARAM_INVALID_FIELD


class MessageNotReadableError(ServerRuntimeError):
    """Request body could not be deserialized. Never carries parser detail."""

    error = ServerError.REST_BODY_NOT_READABLE

    def __init__(self) -> None:
        super().__init__()


class InsufficientPermissionError(ServerRuntimeError):
    error = ServerError.INSUFFICIENT_PERMISSION


# --- Artifacts ---------------------------------------------------------------


class ArtifactUploadFailedError(ServerRuntimeError):
    error = ServerError.ARTIFACT_UPLOAD_FAILED


class InvalidMd5HashError(ServerRuntimeError):
    error = ServerError.ARTIFACT_UPLOAD_FAILED_MD5_MATCH


class InvalidSha1HashError(ServerRuntimeError):
    error = ServerError.ARTIFACT_UPLOAD_FAILED_SHA1_MATCH


class ArtifactDeleteFailedError(ServerRuntimeError):
    error = ServerError.ARTIFACT_DELETE_FAILED


class ArtifactBinaryNotFoundError(ServerRuntimeError):
    error = ServerError.ARTIFACT_LOAD_FAILED


class MultipartFileUploadError(ServerRuntimeError):
    """
    Upload failure reported to clients for a broken multipart request.

    Built from the root cause of the failure; the message is the cause's text.
    """

    error = ServerError.ARTIFACT_UPLOAD_FAILED

    def __init__(self, cause: BaseException) -> None:
        super().__init__(str(cause) or None, cause=cause)


# --- Actions -----------------------------------------------------------------


class TooManyStatusEntriesError(ServerRuntimeError):
    error = ServerError.ACTION_STATUS_TOO_MANY_ENTRIES


class TooManyAttributeEntriesError(ServerRuntimeError):
    error = ServerError.ATTRIBUTES_TOO_MANY_ENTRIES


class CancelActionNotAllowedError(ServerRuntimeError):
    error = ServerError.ACTION_NOT_CANCELABLE


class ForceQuitActionNotAllowedError(ServerRuntimeError):
    error = ServerError.ACTION_NOT_FORCE_QUITABLE


# --- Distribution sets -------------------------------------------------------


class DistributionSetCreationFailedMissingModuleError(ServerRuntimeError):
    error = ServerError.DS_CREATION_FAILED_MISSING_MODULE


class UnsupportedSoftwareModuleForDistributionSetError(ServerRuntimeError):
    error = ServerError.DS_MODULE_UNSUPPORTED


class DistributionSetTypeUndefinedError(ServerRuntimeError):
    error = ServerError.DS_TYPE_UNDEFINED


# --- Rollouts / configuration ------------------------------------------------


class RolloutIllegalStateError(ServerRuntimeError):
    error = ServerError.ROLLOUT_ILLEGAL_STATE


class InvalidConfigurationValueError(ServerRuntimeError):
    error = ServerError.CONFIGURATION_VALUE_INVALID


class InvalidConfigurationKeyError(ServerRuntimeError):
    error = ServerError.CONFIGURATION_KEY_INVALID


# --- Framework-level ---------------------------------------------------------


class MultipartError(Exception):
    """
    Raised by upload endpoints when a multipart request cannot be parsed or
    stored. The actionable reason is usually the innermost __cause__.
    """
