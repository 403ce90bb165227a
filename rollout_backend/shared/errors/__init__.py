"""
Shared error package.

Classified application errors and their classifications. HTTP translation
lives in rollout_backend.api so this package stays transport-free.
"""

from rollout_backend.shared.errors.exceptions import (
    MessageNotReadableError,
    MultipartError,
    MultipartFileUploadError,
    ServerRuntimeError,
)
from rollout_backend.shared.errors.server_error import ServerError

__all__ = [
    "MessageNotReadableError",
    "MultipartError",
    "MultipartFileUploadError",
    "ServerError",
    "ServerRuntimeError",
]
