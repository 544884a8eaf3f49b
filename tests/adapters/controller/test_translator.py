from __future__ import annotations

import pytest

from cloudcred.adapters.controller import CredentialPayload, tag_attribute, translate_credential
from cloudcred.domain.model import BoolValue, FloatValue, IntValue, StringValue


def test_tag_attribute_distinguishes_bool_from_int() -> None:
    assert tag_attribute(True) == BoolValue(True)  # noqa: FBT003
    assert tag_attribute(1) == IntValue(1)
    assert tag_attribute(1.5) == FloatValue(1.5)
    assert tag_attribute("1") == StringValue("1")


def test_tag_attribute_rejects_other_values() -> None:
    with pytest.raises(TypeError):
        tag_attribute(None)  # type: ignore[arg-type]


def test_translate_credential() -> None:
    payload = CredentialPayload.model_validate(
        {
            "label": "cred1",
            "auth-type": "oauth2",
            "attributes": {"client-id": "abc", "expires": 3600, "scale": 0.5, "debug": False},
        }
    )

    remote = translate_credential(payload)

    assert remote.label == "cred1"
    assert remote.auth_type == "oauth2"
    assert remote.attributes == {
        "client-id": StringValue("abc"),
        "expires": IntValue(3600),
        "scale": FloatValue(0.5),
        "debug": BoolValue(False),  # noqa: FBT003
    }
