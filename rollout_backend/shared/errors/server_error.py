"""
rollout_backend.shared.errors.server_error

Purpose:
    Closed set of application error classifications for the rollout server.
    Each classification carries a stable external key (sent to clients as
    errorCode) and a default human-readable message.

Design Notes:
    - Keys are part of the public REST contract. Never rename an existing key,
      even where the spelling is odd (existing clients match on it).
    - HTTP status translation lives in rollout_backend.api.status_mapping,
      not here; this module carries no transport concerns.

Created:
    2026-10-19
"""

from __future__ import annotations

from enum import Enum


class ServerError(Enum):
    """
    Application error classifications.

    Value is a (key, message) pair; use the ``key`` and ``message`` properties.
    """

    # Repository
    REPO_GENERIC_ERROR = (
        "hawkbit.server.error.repo.genericError",
        "unknown error occurred",
    )
    REPO_ENTITY_NOT_EXISTS = (
        "hawkbit.server.error.repo.entitiyNotFound",
        "The given entity does not exist in the repository",
    )
    REPO_ENTITY_ALREADY_EXISTS = (
        "hawkbit.server.error.repo.entitiyAlreayExists",
        "The given entity already exists in database",
    )
    REPO_ENTITY_READ_ONLY = (
        "hawkbit.server.error.entityreadonly",
        "The given entity is read only and the change cannot be completed",
    )
    REPO_CONCURRENT_MODIFICATION = (
        "hawkbit.server.error.repo.concurrentModification",
        "The entity was modified by another user",
    )
    REPO_TENANT_NOT_EXISTS = (
        "hawkbit.server.error.repo.tenantNotExists",
        "The entity cannot be inserted due the tenant does not exist",
    )
    REPO_INVALID_TARGET_ADDRESS = (
        "hawkbit.server.error.repo.invalidTargetAddress",
        "The target address is not well formed",
    )
    ENTITY_LOCKED = (
        "hawkbit.server.error.entitiylocked",
        "The given entity is locked by the server",
    )

    # REST parameters and body
    REST_SORT_PARAM_INVALID_DIRECTION = (
        "hawkbit.server.error.rest.param.sortParamInvalidDirection",
        "The given sort parameter direction does not exist",
    )
    REST_SORT_PARAM_INVALID_FIELD = (
        "hawkbit.server.error.rest.param.sortParamInvalidField",
        "The given sort parameter field does not exist",
    )
    REST_SORT_PARAM_SYNTAX = (
        "hawkbit.server.error.rest.param.sortParamSyntaxError",
        "The given sort parameter is not well formed",
    )
    REST_RSQL_SEARCH_PARAM_SYNTAX = (
        "hawkbit.server.error.rest.param.rsqlSearchParamSyntax",
        "The given search parameter is not well formed",
    )
    REST_RSQL_PARAM_INVALID_FIELD = (
        "hawkbit.server.error.rest.param.rsqlInvalidField",
        "The given search parameter field does not exist",
    )
    REST_BODY_NOT_READABLE = (
        "hawkbit.server.error.rest.body.notReadable",
        "The given request body is not well formed",
    )

    # Security
    INSUFFICIENT_PERMISSION = (
        "hawkbit.server.error.insufficientpermission",
        "Insufficient Permission",
    )

    # Artifacts
    ARTIFACT_UPLOAD_FAILED = (
        "hawkbit.server.error.artifact.uploadFailed",
        "Upload of artifact failed with internal server error.",
    )
    ARTIFACT_UPLOAD_FAILED_MD5_MATCH = (
        "hawkbit.server.error.artifact.uploadFailed.checksum.md5.match",
        "Upload of artifact failed as the provided MD5 checksum did not match with the provided artifact.",
    )
    ARTIFACT_UPLOAD_FAILED_SHA1_MATCH = (
        "hawkbit.server.error.artifact.uploadFailed.checksum.sha1.match",
        "Upload of artifact failed as the provided SHA1 checksum did not match with the provided artifact.",
    )
    ARTIFACT_DELETE_FAILED = (
        "hawkbit.server.error.artifact.deleteFailed",
        "Deletion of artifact failed with internal server error.",
    )
    ARTIFACT_LOAD_FAILED = (
        "hawkbit.server.error.artifact.loadFailed",
        "Load of artifact failed with internal server error.",
    )

    # Actions
    ACTION_STATUS_TOO_MANY_ENTRIES = (
        "hawkbit.server.error.repo.tooManyStatusEntries",
        "Too many status entries have been inserted.",
    )
    ATTRIBUTES_TOO_MANY_ENTRIES = (
        "hawkbit.server.error.repo.tooManyAttributeEntries",
        "Too many attribute entries have been inserted.",
    )
    ACTION_NOT_CANCELABLE = (
        "hawkbit.server.error.action.notcancelable",
        "Only active actions which are in status pending are cancelable.",
    )
    ACTION_NOT_FORCE_QUITABLE = (
        "hawkbit.server.error.action.notforcequitable",
        "Only active actions which are in status pending can be force quit.",
    )

    # Distribution sets
    DS_CREATION_FAILED_MISSING_MODULE = (
        "hawkbit.server.error.distributionset.creationFailed.missingModule",
        "Creation if Distribution Set failed as module is missing that is configured as mandatory.",
    )
    DS_MODULE_UNSUPPORTED = (
        "hawkbit.server.error.distributionset.modules.unsupported",
        "Distribution Set type does not support the given module, i.e. is incompatible.",
    )
    DS_TYPE_UNDEFINED = (
        "hawkbit.server.error.distributionset.type.undefined",
        "Distribution Set type is not yet defined. Modules cannot be added until definition.",
    )

    # Rollouts
    ROLLOUT_ILLEGAL_STATE = (
        "hawkbit.server.error.rollout.illegalstate",
        "The rollout is in the wrong state for the requested operation",
    )

    # Tenant configuration
    CONFIGURATION_VALUE_INVALID = (
        "hawkbit.server.error.configValueInvalid",
        "The given configuration value is invalid.",
    )
    CONFIGURATION_KEY_INVALID = (
        "hawkbit.server.error.configKeyInvalid",
        "The given configuration key is invalid.",
    )

    @property
    def key(self) -> str:
        return self.value[0]

    @property
    def message(self) -> str:
        return self.value[1]

    @classmethod
    def from_key(cls, key: str) -> ServerError:
        for member in cls:
            if member.key == key:
                return member
        raise ValueError(f"Unknown server error key: {key!r}")
