"""Domain model for cloud credentials."""

from __future__ import annotations

from .credential import (
    CREDENTIAL_SCHEMA,
    REPLACEMENT_FIELDS,
    CloudRef,
    CredentialDescriptor,
    FieldSpec,
    RemoteCredential,
    requires_replacement,
)
from .values import (
    AttributeValue,
    BoolValue,
    FloatValue,
    IntValue,
    StringValue,
    string_values,
)

__all__ = [
    "CREDENTIAL_SCHEMA",
    "REPLACEMENT_FIELDS",
    "AttributeValue",
    "BoolValue",
    "CloudRef",
    "CredentialDescriptor",
    "FieldSpec",
    "FloatValue",
    "IntValue",
    "RemoteCredential",
    "StringValue",
    "requires_replacement",
    "string_values",
]
