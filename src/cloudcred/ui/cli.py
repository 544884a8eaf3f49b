from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv
from pydantic import ValidationError

from cloudcred.app import (
    create_credential,
    delete_credential,
    import_credential,
    read_credential,
    update_credential,
)
from cloudcred.config import configure_logging
from cloudcred.domain.model import CREDENTIAL_SCHEMA
from cloudcred.ui.documents import dump_descriptor, load_descriptor

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from cloudcred.domain.model import CredentialDescriptor

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Manage cloud credentials on a controller")
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log per-operation traces",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        help="Write the resulting state document here instead of stdout",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    create = subparsers.add_parser("create", help="Create a credential from a config document")
    create.add_argument("--config", type=Path, required=True, help="Desired credential document")

    read = subparsers.add_parser("read", help="Refresh a state document from the controller")
    read.add_argument("--state", type=Path, required=True, help="Current state document")

    update = subparsers.add_parser("update", help="Converge a state document to a config")
    update.add_argument("--state", type=Path, required=True, help="Current state document")
    update.add_argument("--config", type=Path, required=True, help="Desired credential document")

    delete = subparsers.add_parser("delete", help="Destroy the credential of a state document")
    delete.add_argument("--state", type=Path, required=True, help="Current state document")

    import_ = subparsers.add_parser("import", help="Build a state document from an identifier")
    import_.add_argument("id", help="Identifier 'name:cloud:client:controller'")

    subparsers.add_parser("schema", help="Describe the credential document fields")

    return parser.parse_args(list(argv))


def _load_documents(args: argparse.Namespace) -> dict[str, CredentialDescriptor]:
    documents: dict[str, CredentialDescriptor] = {}
    for key in ("config", "state"):
        path = getattr(args, key, None)
        if path is None:
            continue
        try:
            documents[key] = load_descriptor(path)
        except OSError as exc:
            raise ValueError(f"Cannot read {path}: {exc}") from exc
        except ValidationError as exc:
            raise ValueError(f"Invalid credential document {path}: {exc}") from exc
    return documents


def _describe_schema() -> str:
    lines: list[str] = []
    for spec in CREDENTIAL_SCHEMA:
        flags = [
            "required" if spec.required else "optional",
            *(["computed"] if spec.computed else []),
            *(["forces replacement"] if spec.requires_replace else []),
        ]
        default = f" (default: {str(spec.default).lower()})" if spec.default is not None else ""
        lines.append(f"{spec.name}: {spec.description} [{', '.join(flags)}]{default}")
    return "\n".join(lines)


def _emit(text: str, output: Path | None) -> None:
    if output is None:
        sys.stdout.write(text + "\n")
        return
    output.write_text(text + "\n", encoding="utf-8")
    log.info("Wrote %s", output)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args: argparse.Namespace
    try:
        parsed_args = _parse_args(args_list)
        configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)
        documents = _load_documents(parsed_args)
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        if parsed_args.command == "create":
            _emit(dump_descriptor(create_credential(documents["config"])), parsed_args.output)
        elif parsed_args.command == "read":
            _emit(dump_descriptor(read_credential(documents["state"])), parsed_args.output)
        elif parsed_args.command == "update":
            updated = update_credential(documents["state"], documents["config"])
            _emit(dump_descriptor(updated), parsed_args.output)
        elif parsed_args.command == "delete":
            delete_credential(documents["state"])
            log.info("Deleted credential %s", documents["state"].id)
        elif parsed_args.command == "import":
            _emit(dump_descriptor(import_credential(parsed_args.id)), parsed_args.output)
        elif parsed_args.command == "schema":
            _emit(_describe_schema(), parsed_args.output)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except Exception:
        log.exception("Credential operation failed")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
