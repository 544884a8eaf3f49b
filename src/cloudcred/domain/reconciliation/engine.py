"""Create/read/update/delete convergence for credential resources.

The reconciler keeps no state between calls. Every verb receives the full
descriptor it works on, derives the store coordinates from it (the identifier
for everything but create) and returns a new descriptor. Store failures are
raised as ``Upstream*Error`` without touching the identifier.
"""

from __future__ import annotations

from dataclasses import replace
from logging import getLogger
from typing import TYPE_CHECKING

from cloudcred.domain.errors import (
    ClientNotConfiguredError,
    UpstreamCreateError,
    UpstreamDeleteError,
    UpstreamReadError,
    UpstreamUpdateError,
)
from cloudcred.domain.model import CloudRef, CredentialDescriptor
from cloudcred.domain.ports import CredentialStoreError

from .identity import decode_identifier, encode_identifier, identity_from
from .normalize import merge_attributes, normalize_declared

if TYPE_CHECKING:
    from cloudcred.domain.ports import CredentialStore

log = getLogger(__name__)


def is_unchanged(prior: CredentialDescriptor, planned: CredentialDescriptor) -> bool:
    """Whether an update from ``prior`` to ``planned`` needs no store call."""

    return (
        planned.auth_type == prior.auth_type
        and planned.client_credential == prior.client_credential
        and planned.controller_credential == prior.controller_credential
        and planned.attributes == prior.attributes
    )


class CredentialReconciler:
    """Converge credentials held by a :class:`CredentialStore`."""

    def __init__(self, store: CredentialStore | None) -> None:
        if store is None:
            raise ClientNotConfiguredError
        self._store = store

    @property
    def store(self) -> CredentialStore:
        return self._store

    def create(self, descriptor: CredentialDescriptor) -> CredentialDescriptor:
        attributes = normalize_declared(descriptor.attributes)
        try:
            created = self._store.create_credential(
                attributes=attributes,
                auth_type=descriptor.auth_type,
                client_credential=descriptor.client_credential,
                cloud_name=descriptor.cloud.name,
                controller_credential=descriptor.controller_credential,
                name=descriptor.name,
            )
        except CredentialStoreError as exc:
            raise UpstreamCreateError(descriptor.name, exc) from exc
        log.debug("created credential resource %r", descriptor.name)

        return descriptor.with_id(
            encode_identifier(
                descriptor.name,
                created.cloud_name,
                descriptor.client_credential,
                descriptor.controller_credential,
            )
        )

    def read(self, descriptor: CredentialDescriptor) -> CredentialDescriptor:
        identity = identity_from(descriptor, operation="read")
        client_credential, controller_credential = identity.scope_flags()
        try:
            remote = self._store.read_credential(
                client_credential=client_credential,
                cloud_name=identity.cloud,
                controller_credential=controller_credential,
                name=identity.name,
            )
        except CredentialStoreError as exc:
            raise UpstreamReadError(identity.name, exc) from exc
        log.debug("read credential resource %r", identity.name)

        attributes = descriptor.attributes
        if attributes:
            # an empty or absent mapping is written back untouched
            attributes = merge_attributes(attributes, remote.attributes)

        return replace(
            descriptor,
            name=remote.label,
            cloud=CloudRef(identity.cloud),
            auth_type=remote.auth_type,
            attributes=attributes,
            client_credential=client_credential,
            controller_credential=controller_credential,
        )

    def update(
        self,
        prior: CredentialDescriptor,
        planned: CredentialDescriptor,
    ) -> CredentialDescriptor:
        if is_unchanged(prior, planned):
            log.debug("credential resource %r unchanged, skipping update", prior.name)
            return planned.with_id(prior.id)

        identity = identity_from(prior, operation="update")
        try:
            self._store.update_credential(
                attributes=normalize_declared(planned.attributes),
                auth_type=planned.auth_type,
                client_credential=planned.client_credential,
                cloud_name=identity.cloud,
                controller_credential=planned.controller_credential,
                name=identity.name,
            )
        except CredentialStoreError as exc:
            raise UpstreamUpdateError(identity.name, exc) from exc
        log.debug("updated credential resource %r", identity.name)

        return planned.with_id(
            encode_identifier(
                identity.name,
                identity.cloud,
                planned.client_credential,
                planned.controller_credential,
            )
        )

    def delete(self, descriptor: CredentialDescriptor) -> None:
        identity = identity_from(descriptor, operation="delete")
        client_credential, controller_credential = identity.scope_flags()
        try:
            self._store.destroy_credential(
                client_credential=client_credential,
                cloud_name=identity.cloud,
                controller_credential=controller_credential,
                name=identity.name,
            )
        except CredentialStoreError as exc:
            raise UpstreamDeleteError(identity.name, exc) from exc
        log.debug("deleted credential resource %r", identity.name)

    def import_state(self, identifier: str) -> CredentialDescriptor:
        """Rebuild a full descriptor from an identifier alone."""

        identity = decode_identifier(identifier, operation="import")
        skeleton = CredentialDescriptor(
            name=identity.name,
            cloud=CloudRef(identity.cloud),
            auth_type="",
            id=identifier,
        )
        return self.read(skeleton)
