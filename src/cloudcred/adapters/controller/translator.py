"""Translate controller payloads into domain values."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cloudcred.domain.model import (
    AttributeValue,
    BoolValue,
    FloatValue,
    IntValue,
    RemoteCredential,
    StringValue,
)

if TYPE_CHECKING:
    from .schema import CredentialPayload, RawAttribute


def tag_attribute(raw: RawAttribute) -> AttributeValue:
    match raw:
        case bool():
            return BoolValue(raw)
        case int():
            return IntValue(raw)
        case float():
            return FloatValue(raw)
        case str():
            return StringValue(raw)
        case _:
            raise TypeError(f"Unsupported attribute value: {raw!r}")


def translate_credential(payload: CredentialPayload) -> RemoteCredential:
    return RemoteCredential(
        label=payload.label,
        auth_type=payload.auth_type,
        attributes={key: tag_attribute(value) for key, value in payload.attributes.items()},
    )
