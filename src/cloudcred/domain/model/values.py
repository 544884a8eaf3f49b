"""Tagged attribute values reported by the credential store.

The store may report an attribute as a boolean, an integer, a float or a
string. Each shape gets its own variant so that stringification can be
exhaustive over a closed union.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True, slots=True)
class BoolValue:
    value: bool


@dataclass(frozen=True, slots=True)
class IntValue:
    value: int


@dataclass(frozen=True, slots=True)
class FloatValue:
    value: float


@dataclass(frozen=True, slots=True)
class StringValue:
    value: str


type AttributeValue = BoolValue | IntValue | FloatValue | StringValue


def string_values(attributes: Mapping[str, str] | None) -> dict[str, StringValue]:
    """Wrap a declared string mapping as tagged values."""

    if not attributes:
        return {}
    return {key: StringValue(value) for key, value in attributes.items()}
