"""JSON documents exchanged with the CLI."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict

from cloudcred.domain.model import CloudRef, CredentialDescriptor


class CloudDocument(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str


class CredentialDocument(BaseModel):
    """On-disk shape of a credential resource's configuration or state."""

    model_config = ConfigDict(extra="forbid")

    name: str
    cloud: CloudDocument
    auth_type: str
    attributes: dict[str, str] | None = None
    client_credential: bool = False
    controller_credential: bool = True
    id: str | None = None

    @classmethod
    def from_descriptor(cls, descriptor: CredentialDescriptor) -> CredentialDocument:
        return cls(
            name=descriptor.name,
            cloud=CloudDocument(name=descriptor.cloud.name),
            auth_type=descriptor.auth_type,
            attributes=dict(descriptor.attributes) if descriptor.attributes is not None else None,
            client_credential=descriptor.client_credential,
            controller_credential=descriptor.controller_credential,
            id=descriptor.id,
        )

    def to_descriptor(self) -> CredentialDescriptor:
        return CredentialDescriptor(
            name=self.name,
            cloud=CloudRef(self.cloud.name),
            auth_type=self.auth_type,
            attributes=dict(self.attributes) if self.attributes is not None else None,
            client_credential=self.client_credential,
            controller_credential=self.controller_credential,
            id=self.id,
        )


def load_descriptor(path: Path | str) -> CredentialDescriptor:
    text = Path(path).read_text(encoding="utf-8")
    return CredentialDocument.model_validate_json(text).to_descriptor()


def dump_descriptor(descriptor: CredentialDescriptor) -> str:
    return CredentialDocument.from_descriptor(descriptor).model_dump_json(indent=2)
