"""Controller credential store adapter."""

from __future__ import annotations

from .client import (
    ControllerAPIError,
    ControllerCredentialNotFoundError,
    ControllerCredentialStore,
)
from .schema import (
    CreateCredentialResponse,
    CredentialPayload,
    CredentialWriteRequest,
    ErrorResponse,
)
from .translator import tag_attribute, translate_credential

__all__ = [
    "ControllerAPIError",
    "ControllerCredentialNotFoundError",
    "ControllerCredentialStore",
    "CreateCredentialResponse",
    "CredentialPayload",
    "CredentialWriteRequest",
    "ErrorResponse",
    "tag_attribute",
    "translate_credential",
]
