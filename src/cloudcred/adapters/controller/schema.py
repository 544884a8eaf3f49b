"""Pydantic models for the controller credential API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

type RawAttribute = bool | int | float | str


class ControllerBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class CredentialPayload(ControllerBaseModel):
    label: str
    auth_type: str = Field(alias="auth-type")
    attributes: dict[str, RawAttribute] = Field(default_factory=dict)


class CreateCredentialResponse(ControllerBaseModel):
    cloud: str


class ErrorResponse(ControllerBaseModel):
    error: str | None = None
    code: str | None = None
    message: str


class CredentialWriteRequest(ControllerBaseModel):
    """Body of create and update calls."""

    name: str
    auth_type: str = Field(serialization_alias="auth-type")
    attributes: dict[str, str] = Field(default_factory=dict)
    client: bool = False
    controller: bool = True
