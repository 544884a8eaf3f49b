from __future__ import annotations

import pytest

from cloudcred.domain.model import CloudRef, CredentialDescriptor
from cloudcred.domain.reconciliation import CredentialReconciler
from tests.support.credential_store import FakeCredentialStore


@pytest.fixture
def fake_store() -> FakeCredentialStore:
    return FakeCredentialStore()


@pytest.fixture
def reconciler(fake_store: FakeCredentialStore) -> CredentialReconciler:
    return CredentialReconciler(fake_store)


@pytest.fixture
def declared() -> CredentialDescriptor:
    return CredentialDescriptor(
        name="cred1",
        cloud=CloudRef("aws"),
        auth_type="userpass",
        attributes={"user": "a"},
    )
