from __future__ import annotations

import itertools

import pytest

from cloudcred.domain.model import (
    AttributeValue,
    BoolValue,
    FloatValue,
    IntValue,
    StringValue,
)
from cloudcred.domain.reconciliation import (
    merge_attributes,
    normalize_declared,
    stringify,
    to_external,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (BoolValue(True), "true"),  # noqa: FBT003
        (BoolValue(False), "false"),  # noqa: FBT003
        (IntValue(0), "0"),
        (IntValue(42), "42"),
        (IntValue(-7), "-7"),
        (FloatValue(3.0), "3"),
        (FloatValue(3.7), "4"),
        (FloatValue(2.5), "2"),
        (FloatValue(1e20), "100000000000000000000"),
        (StringValue("secret"), "secret"),
        (StringValue(""), ""),
    ],
)
def test_stringify(value: AttributeValue, expected: str) -> None:
    assert stringify(value) == expected


def test_stringify_rejects_untagged_values() -> None:
    with pytest.raises(AssertionError):
        stringify("raw")  # type: ignore[arg-type]


def test_to_external_mixed_types() -> None:
    raw: dict[str, AttributeValue] = {
        "enabled": BoolValue(True),  # noqa: FBT003
        "port": IntValue(8443),
        "ratio": FloatValue(12.0),
        "user": StringValue("admin"),
    }

    assert to_external(raw) == {
        "enabled": "true",
        "port": "8443",
        "ratio": "12",
        "user": "admin",
    }


def test_to_external_is_identity_on_strings() -> None:
    raw = {"user": StringValue("a"), "password": StringValue("p4ss:word")}

    once = to_external(raw)

    assert once == {"user": "a", "password": "p4ss:word"}
    assert to_external({key: StringValue(value) for key, value in once.items()}) == once


def test_normalize_declared_handles_missing_attributes() -> None:
    assert normalize_declared(None) == {}
    assert normalize_declared({}) == {}
    assert normalize_declared({"user": "a"}) == {"user": "a"}


def test_merge_overwrites_declared_keys_and_ignores_extra() -> None:
    merged = merge_attributes(
        {"user": "a"},
        {"user": StringValue("b"), "extra": StringValue("x")},
    )

    assert merged == {"user": "b"}


def test_merge_keeps_declared_value_when_remote_is_missing() -> None:
    merged = merge_attributes({"user": "a", "token": "t"}, {"user": IntValue(5)})

    assert merged == {"user": "5", "token": "t"}


def test_merge_of_empty_declared_set_is_empty() -> None:
    assert merge_attributes({}, {"user": StringValue("b")}) == {}
    assert merge_attributes(None, {"user": StringValue("b")}) == {}


def test_merge_does_not_mutate_declared() -> None:
    declared = {"user": "a"}

    merge_attributes(declared, {"user": StringValue("b")})

    assert declared == {"user": "a"}


def test_merge_preserves_declared_key_set() -> None:
    keys = ("a", "b", "c")
    for declared_keys, remote_keys in itertools.product(
        (subset for size in range(4) for subset in itertools.combinations(keys, size)),
        repeat=2,
    ):
        declared = {key: "declared" for key in declared_keys}
        remote: dict[str, AttributeValue] = {key: BoolValue(True) for key in remote_keys}  # noqa: FBT003

        merged = merge_attributes(declared, remote)

        assert set(merged) == set(declared)
        for key in declared:
            assert merged[key] == ("true" if key in remote else "declared")


def test_repeated_merge_is_stable() -> None:
    remote: dict[str, AttributeValue] = {"port": FloatValue(80.0), "tls": BoolValue(False)}  # noqa: FBT003
    first = merge_attributes({"port": "0", "tls": "true"}, remote)

    assert merge_attributes(first, remote) == first == {"port": "80", "tls": "false"}
