"""Reconciliation core for credential resources.

Three layers, leaf first:
1) ``normalize`` turns tagged store values into declared strings
2) ``identity`` encodes/decodes the composite resource identifier
3) ``engine`` runs create/read/update/delete against a credential store
"""

from __future__ import annotations

from .engine import CredentialReconciler, is_unchanged
from .identity import (
    CredentialIdentity,
    decode_identifier,
    encode_identifier,
    identity_from,
    parse_scope_flag,
    parse_scope_flags,
)
from .normalize import merge_attributes, normalize_declared, stringify, to_external

__all__ = [
    "CredentialIdentity",
    "CredentialReconciler",
    "decode_identifier",
    "encode_identifier",
    "identity_from",
    "is_unchanged",
    "merge_attributes",
    "normalize_declared",
    "parse_scope_flag",
    "parse_scope_flags",
    "stringify",
    "to_external",
]
