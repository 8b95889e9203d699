"""Pure key derivation pipeline: Argon2id -> SHA-256 -> HKDF -> Ed25519."""

from __future__ import annotations

from pwkeys.sdk.errors import (
    DerivationError,
    InvalidCredentialError,
    MissingCredentialError,
    PwKeysError,
    WriteFailureError,
)
from pwkeys.sdk.models import Credentials, KeyPair, PemFormat
from pwkeys.sdk.pipeline import derive_keypair, derive_keypair_from

__all__ = [
    "Credentials",
    "DerivationError",
    "InvalidCredentialError",
    "KeyPair",
    "MissingCredentialError",
    "PemFormat",
    "PwKeysError",
    "WriteFailureError",
    "derive_keypair",
    "derive_keypair_from",
]
