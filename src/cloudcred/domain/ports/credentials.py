"""Port for the external store that owns credentials."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping

    from cloudcred.domain.model import RemoteCredential


class CredentialStoreError(RuntimeError):
    """Raised by store implementations when an operation fails."""


class CredentialNotFoundError(CredentialStoreError):
    """Raised when the store holds no credential under the requested name."""


@dataclass(frozen=True, slots=True)
class CreatedCredential:
    """Result of a create call; ``cloud_name`` is the store's canonical spelling."""

    cloud_name: str


@runtime_checkable
class CredentialStore(Protocol):
    """Create/read/update/destroy contract of the credential store."""

    def create_credential(
        self,
        *,
        attributes: Mapping[str, str],
        auth_type: str,
        client_credential: bool,
        cloud_name: str,
        controller_credential: bool,
        name: str,
    ) -> CreatedCredential: ...

    def read_credential(
        self,
        *,
        client_credential: bool,
        cloud_name: str,
        controller_credential: bool,
        name: str,
    ) -> RemoteCredential: ...

    def update_credential(
        self,
        *,
        attributes: Mapping[str, str],
        auth_type: str,
        client_credential: bool,
        cloud_name: str,
        controller_credential: bool,
        name: str,
    ) -> None: ...

    def destroy_credential(
        self,
        *,
        client_credential: bool,
        cloud_name: str,
        controller_credential: bool,
        name: str,
    ) -> None: ...


__all__ = [
    "CreatedCredential",
    "CredentialNotFoundError",
    "CredentialStore",
    "CredentialStoreError",
]
