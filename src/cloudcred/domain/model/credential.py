"""Declared and remote views of a cloud credential."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .values import AttributeValue


@dataclass(frozen=True, slots=True)
class CloudRef:
    """The cloud a credential grants access to."""

    name: str


@dataclass(frozen=True, slots=True, kw_only=True)
class CredentialDescriptor:
    """Desired (or last observed) state of one credential resource.

    ``attributes`` distinguishes ``None`` (no attributes declared) from an empty
    mapping. ``id`` is assigned by a successful create and is the only handle
    needed to locate the credential again.
    """

    name: str
    cloud: CloudRef
    auth_type: str
    attributes: Mapping[str, str] | None = None
    client_credential: bool = False
    controller_credential: bool = True
    id: str | None = None

    def with_id(self, identifier: str | None) -> CredentialDescriptor:
        return replace(self, id=identifier)


@dataclass(frozen=True, slots=True, kw_only=True)
class RemoteCredential:
    """A credential as reported by the credential store."""

    label: str
    auth_type: str
    attributes: Mapping[str, AttributeValue] = field(default_factory=dict)


@dataclass(frozen=True, slots=True, kw_only=True)
class FieldSpec:
    """Describes one field of the credential document and how changes to it apply."""

    name: str
    description: str
    required: bool = False
    computed: bool = False
    default: object = None
    requires_replace: bool = False


CREDENTIAL_SCHEMA: Final[tuple[FieldSpec, ...]] = (
    FieldSpec(
        name="cloud",
        description="Cloud where the credential will be used to access (block with a 'name')",
        required=True,
        requires_replace=True,
    ),
    FieldSpec(
        name="attributes",
        description="Credential attributes accordingly to the cloud",
    ),
    FieldSpec(
        name="auth_type",
        description="Credential authorization type",
        required=True,
    ),
    FieldSpec(
        name="client_credential",
        description="Add credentials to the client",
        computed=True,
        default=False,
    ),
    FieldSpec(
        name="controller_credential",
        description="Add credentials to the controller",
        computed=True,
        default=True,
    ),
    FieldSpec(
        name="name",
        description="The name to be assigned to the credential",
        required=True,
        requires_replace=True,
    ),
    FieldSpec(
        name="id",
        description="Opaque identifier 'name:cloud:client_credential:controller_credential'",
        computed=True,
    ),
)

REPLACEMENT_FIELDS: Final[tuple[str, ...]] = tuple(
    spec.name for spec in CREDENTIAL_SCHEMA if spec.requires_replace
)


def requires_replacement(
    prior: CredentialDescriptor,
    planned: CredentialDescriptor,
) -> tuple[str, ...]:
    """Return the immutable fields that differ between ``prior`` and ``planned``."""

    return tuple(
        name for name in REPLACEMENT_FIELDS if getattr(prior, name) != getattr(planned, name)
    )
