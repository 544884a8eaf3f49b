"""Composite identifier of a credential resource.

The identifier is ``name:cloud:client_credential:controller_credential`` with
the flags spelled ``true``/``false``. Colons inside the name or the cloud are
not escaped, so such values do not survive a round trip.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final, NamedTuple

from cloudcred.domain.errors import InvalidScopeFlagError, MalformedIdentifierError

if TYPE_CHECKING:
    from cloudcred.domain.model import CredentialDescriptor

SEPARATOR: Final[str] = ":"
IDENTIFIER_FIELDS: Final[int] = 4

_FLAG_VALUES: Final[dict[str, bool]] = {"true": True, "false": False}


class CredentialIdentity(NamedTuple):
    """The four components of a decoded identifier, flags left unparsed."""

    name: str
    cloud: str
    client_flag: str
    controller_flag: str

    def scope_flags(self) -> tuple[bool, bool]:
        return parse_scope_flags(self.client_flag, self.controller_flag)


def _flag(value: bool) -> str:  # noqa: FBT001
    return "true" if value else "false"


def encode_identifier(
    name: str,
    cloud: str,
    client_credential: bool,  # noqa: FBT001
    controller_credential: bool,  # noqa: FBT001
) -> str:
    return SEPARATOR.join((name, cloud, _flag(client_credential), _flag(controller_credential)))


def decode_identifier(identifier: str, *, operation: str | None = None) -> CredentialIdentity:
    parts = identifier.split(SEPARATOR)
    if len(parts) != IDENTIFIER_FIELDS:
        raise MalformedIdentifierError(identifier, operation=operation)
    name, cloud, client_flag, controller_flag = parts
    return CredentialIdentity(name, cloud, client_flag, controller_flag)


def parse_scope_flag(field: str, value: str) -> bool:
    try:
        return _FLAG_VALUES[value]
    except KeyError:
        raise InvalidScopeFlagError(field, value) from None


def parse_scope_flags(client_flag: str, controller_flag: str) -> tuple[bool, bool]:
    return (
        parse_scope_flag("client_credential", client_flag),
        parse_scope_flag("controller_credential", controller_flag),
    )


def identity_from(
    descriptor: CredentialDescriptor,
    *,
    operation: str | None = None,
) -> CredentialIdentity:
    """Decode the identifier carried by ``descriptor``."""

    if descriptor.id is None:
        raise MalformedIdentifierError(None, operation=operation)
    return decode_identifier(descriptor.id, operation=operation)
