from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from cloudcred.domain.errors import UpstreamDeleteError
from cloudcred.domain.model import CloudRef, CredentialDescriptor
from cloudcred.ui import cli as cli_module
from cloudcred.ui.documents import dump_descriptor, load_descriptor

if TYPE_CHECKING:
    from pathlib import Path

CONFIG = {
    "name": "cred1",
    "cloud": {"name": "aws"},
    "auth_type": "userpass",
    "attributes": {"user": "a"},
}


def _write(path: Path, payload: dict[str, object]) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_create_writes_state(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    captured: list[CredentialDescriptor] = []

    def fake_create(descriptor: CredentialDescriptor) -> CredentialDescriptor:
        captured.append(descriptor)
        return descriptor.with_id("cred1:aws:false:true")

    monkeypatch.setattr(cli_module, "create_credential", fake_create)
    config = _write(tmp_path / "cred.json", CONFIG)
    output = tmp_path / "state.json"

    cli_module.main(["-o", str(output), "create", "--config", str(config)])

    assert captured[0].controller_credential is True
    state = json.loads(output.read_text(encoding="utf-8"))
    assert state["id"] == "cred1:aws:false:true"
    assert state["attributes"] == {"user": "a"}


def test_update_passes_state_then_config(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    captured: dict[str, CredentialDescriptor] = {}

    def fake_update(
        prior: CredentialDescriptor,
        planned: CredentialDescriptor,
    ) -> CredentialDescriptor:
        captured["prior"] = prior
        captured["planned"] = planned
        return planned.with_id(prior.id)

    monkeypatch.setattr(cli_module, "update_credential", fake_update)
    state = _write(tmp_path / "state.json", {**CONFIG, "id": "cred1:aws:false:true"})
    config = _write(tmp_path / "cred.json", {**CONFIG, "auth_type": "access-key"})

    cli_module.main(["update", "--state", str(state), "--config", str(config)])

    assert captured["prior"].auth_type == "userpass"
    assert captured["planned"].auth_type == "access-key"
    printed = json.loads(capsys.readouterr().out)
    assert printed["id"] == "cred1:aws:false:true"
    assert printed["auth_type"] == "access-key"


def test_import_prints_state(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    def fake_import(identifier: str) -> CredentialDescriptor:
        return CredentialDescriptor(
            name="cred1",
            cloud=CloudRef("aws"),
            auth_type="userpass",
            id=identifier,
        )

    monkeypatch.setattr(cli_module, "import_credential", fake_import)

    cli_module.main(["import", "cred1:aws:false:true"])

    printed = json.loads(capsys.readouterr().out)
    assert printed["attributes"] is None
    assert printed["cloud"] == {"name": "aws"}


def test_schema_lists_fields(capsys: pytest.CaptureFixture[str]) -> None:
    cli_module.main(["schema"])

    out = capsys.readouterr().out
    assert "name: The name to be assigned to the credential" in out
    assert "forces replacement" in out
    assert "controller_credential" in out
    assert "(default: true)" in out


def test_invalid_document_exits_with_2(tmp_path: Path) -> None:
    config = _write(tmp_path / "cred.json", {"name": "cred1"})

    with pytest.raises(SystemExit) as exc:
        cli_module.main(["create", "--config", str(config)])

    assert exc.value.code == 2


def test_missing_document_exits_with_2(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc:
        cli_module.main(["read", "--state", str(tmp_path / "missing.json")])

    assert exc.value.code == 2


def test_operation_failure_exits_with_1(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    def fake_delete(descriptor: CredentialDescriptor) -> None:
        raise UpstreamDeleteError(descriptor.name, RuntimeError("controller unreachable"))

    monkeypatch.setattr(cli_module, "delete_credential", fake_delete)
    state = _write(tmp_path / "state.json", {**CONFIG, "id": "cred1:aws:false:true"})

    with pytest.raises(SystemExit) as exc:
        cli_module.main(["delete", "--state", str(state)])

    assert exc.value.code == 1


def test_documents_round_trip_through_files(tmp_path: Path) -> None:
    descriptor = CredentialDescriptor(
        name="cred1",
        cloud=CloudRef("aws"),
        auth_type="userpass",
        attributes={},
        client_credential=True,
        id="cred1:aws:true:true",
    )
    path = tmp_path / "state.json"
    path.write_text(dump_descriptor(descriptor), encoding="utf-8")

    assert load_descriptor(path) == descriptor
