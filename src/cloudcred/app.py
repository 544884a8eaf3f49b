"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from cloudcred.adapters.controller import ControllerCredentialStore
from cloudcred.domain.errors import ClientNotConfiguredError, UnexpectedConfigureTypeError
from cloudcred.domain.model import requires_replacement
from cloudcred.domain.ports import CredentialStore
from cloudcred.domain.reconciliation import CredentialReconciler

if TYPE_CHECKING:
    from cloudcred.config import ControllerConfig
    from cloudcred.domain.model import CredentialDescriptor


log = getLogger(__name__)


def build_store(*, config: ControllerConfig | None = None) -> CredentialStore:
    """Build the controller-backed credential store from configuration."""

    return ControllerCredentialStore(config=config)


def configure_reconciler(provider_data: object) -> CredentialReconciler:
    """Build a reconciler from whatever the host handed over as provider data."""

    if provider_data is None:
        raise ClientNotConfiguredError
    if not isinstance(provider_data, CredentialStore):
        raise UnexpectedConfigureTypeError(provider_data)
    return CredentialReconciler(provider_data)


def build_reconciler(store: CredentialStore | None = None) -> CredentialReconciler:
    return configure_reconciler(store or build_store())


def create_credential(
    descriptor: CredentialDescriptor,
    *,
    store: CredentialStore | None = None,
) -> CredentialDescriptor:
    log.info("Creating credential %r for cloud %r", descriptor.name, descriptor.cloud.name)
    created = build_reconciler(store).create(descriptor)
    log.info("Created credential %s", created.id)
    return created


def read_credential(
    descriptor: CredentialDescriptor,
    *,
    store: CredentialStore | None = None,
) -> CredentialDescriptor:
    log.info("Refreshing credential %s", descriptor.id)
    return build_reconciler(store).read(descriptor)


def update_credential(
    prior: CredentialDescriptor,
    planned: CredentialDescriptor,
    *,
    store: CredentialStore | None = None,
) -> CredentialDescriptor:
    """Converge ``prior`` to ``planned``, replacing the credential when required."""

    reconciler = build_reconciler(store)
    replaced_fields = requires_replacement(prior, planned)
    if replaced_fields:
        log.info(
            "Replacing credential %s: %s cannot change in place",
            prior.id,
            ", ".join(replaced_fields),
        )
        reconciler.delete(prior)
        return reconciler.create(planned.with_id(None))

    log.info("Updating credential %s", prior.id)
    return reconciler.update(prior, planned)


def delete_credential(
    descriptor: CredentialDescriptor,
    *,
    store: CredentialStore | None = None,
) -> None:
    log.info("Deleting credential %s", descriptor.id)
    build_reconciler(store).delete(descriptor)


def import_credential(
    identifier: str,
    *,
    store: CredentialStore | None = None,
) -> CredentialDescriptor:
    log.info("Importing credential %s", identifier)
    return build_reconciler(store).import_state(identifier)
