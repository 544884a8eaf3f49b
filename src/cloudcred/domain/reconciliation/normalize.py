"""Stringification of credential attributes.

The store may report attribute values with native scalar types, while the
declared state holds strings only. Stringification is deterministic and
idempotent so that repeated reads never manufacture drift.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, assert_never

from cloudcred.domain.model import (
    AttributeValue,
    BoolValue,
    FloatValue,
    IntValue,
    StringValue,
    string_values,
)

if TYPE_CHECKING:
    from collections.abc import Mapping


def stringify(value: AttributeValue) -> str:
    """Render one tagged value the way the store spells it."""

    match value:
        case BoolValue(value=flag):
            return "true" if flag else "false"
        case IntValue(value=number):
            return str(number)
        case FloatValue(value=number):
            return format(number, ".0f")
        case StringValue(value=text):
            return text
        case _:
            assert_never(value)


def to_external(raw: Mapping[str, AttributeValue]) -> dict[str, str]:
    """Stringify every value of ``raw``."""

    return {key: stringify(value) for key, value in raw.items()}


def normalize_declared(attributes: Mapping[str, str] | None) -> dict[str, str]:
    """Normalize declared attributes for a store call; ``None`` becomes ``{}``."""

    return to_external(string_values(attributes))


def merge_attributes(
    declared: Mapping[str, str] | None,
    remote: Mapping[str, AttributeValue],
) -> dict[str, str]:
    """Refresh ``declared`` with values reported by the store.

    Only declared keys are considered: keys the store reports in addition are
    ignored and declared keys missing remotely keep their declared value.
    """

    merged = dict(declared or {})
    for key in merged:
        reported = remote.get(key)
        if reported is not None:
            merged[key] = stringify(reported)
    return merged
