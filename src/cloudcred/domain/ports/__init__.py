"""Domain port definitions for adapters."""

from __future__ import annotations

from .credentials import (
    CreatedCredential,
    CredentialNotFoundError,
    CredentialStore,
    CredentialStoreError,
)

__all__ = [
    "CreatedCredential",
    "CredentialNotFoundError",
    "CredentialStore",
    "CredentialStoreError",
]
