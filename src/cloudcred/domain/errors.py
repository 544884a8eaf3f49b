"""Failures raised by the credential reconciliation core."""

from __future__ import annotations


class CredentialResourceError(RuntimeError):
    """Base class for credential resource failures."""


class ClientNotConfiguredError(CredentialResourceError):
    """Raised when the reconciler is used without a credential store."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message
            or "Expected a configured credential store. "
            "Please report this issue to the provider developers."
        )


class UnexpectedConfigureTypeError(ClientNotConfiguredError):
    """Raised when provider data handed to the configure step is not a store."""

    def __init__(self, provider_data: object) -> None:
        super().__init__(
            f"Expected a CredentialStore, got: {type(provider_data).__name__}. "
            "Please report this issue to the provider developers."
        )
        self.provider_data = provider_data


class IdentifierError(CredentialResourceError):
    """Raised when a resource identifier cannot be decoded."""


class MalformedIdentifierError(IdentifierError):
    """Raised when an identifier does not have exactly four components."""

    def __init__(self, identifier: str | None, *, operation: str | None = None) -> None:
        parts = identifier.split(":") if identifier is not None else []
        action = f"unable to {operation} credential resource, " if operation else ""
        super().__init__(
            f"{action}invalid ID, expected {{credentialName, cloudName, isClient, "
            f"isController}} - given : {identifier!r}"
        )
        self.identifier = identifier
        self.parts = tuple(parts)


class InvalidScopeFlagError(IdentifierError):
    """Raised when a scope component of an identifier is not ``true``/``false``."""

    def __init__(self, field: str, value: str) -> None:
        label = field.removesuffix("_credential").replace("_", " ")
        super().__init__(
            f"unable to parse {label} credential from provided ID: {value!r}"
        )
        self.field = field
        self.value = value


class UpstreamError(CredentialResourceError):
    """Raised when the credential store rejects an operation."""

    operation = "reach"

    def __init__(self, name: str, cause: BaseException) -> None:
        super().__init__(
            f"Unable to {self.operation} credential resource {name!r}, got error: {cause}"
        )
        self.name = name
        self.cause = cause


class UpstreamCreateError(UpstreamError):
    operation = "create"


class UpstreamReadError(UpstreamError):
    operation = "read"


class UpstreamUpdateError(UpstreamError):
    operation = "update"


class UpstreamDeleteError(UpstreamError):
    operation = "delete"
