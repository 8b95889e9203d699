"""Derivation pipeline entry point.

password/salt -> Argon2id -> SHA-256 -> HKDF-SHA-256 stream -> Ed25519.
Every stage is a pure function and nothing is shared between calls.
"""

from __future__ import annotations

import logging

from pwkeys.sdk.errors import InvalidCredentialError, MissingCredentialError
from pwkeys.sdk.hashing import extract_seed, wipe
from pwkeys.sdk.kdf import MIN_SALT_LEN, harden
from pwkeys.sdk.keypair import generate_keypair
from pwkeys.sdk.models import Credentials, KeyPair
from pwkeys.sdk.stream import open_stream

logger = logging.getLogger(__name__)


def validate_credentials(credentials: Credentials) -> None:
    """Reject empty password, empty or short salt before any cryptographic work."""
    if not credentials.password:
        raise MissingCredentialError("Password is required")
    if not credentials.salt:
        raise MissingCredentialError("Salt is required")
    if len(credentials.salt) < MIN_SALT_LEN:
        raise InvalidCredentialError(f"Salt must be at least {MIN_SALT_LEN} bytes")


def derive_keypair(credentials: Credentials) -> KeyPair:
    """Derive the Ed25519 keypair for ``credentials``.

    Args:
        credentials: Non-empty password and salt

    Returns:
        The same KeyPair, bit for bit, for the same credentials

    Raises:
        MissingCredentialError: password or salt is empty
        InvalidCredentialError: salt is shorter than MIN_SALT_LEN bytes
        DerivationError: a stage failed internally
    """
    validate_credentials(credentials)

    derived = bytearray(harden(credentials.password, credentials.salt))
    try:
        seed = extract_seed(derived)
    finally:
        wipe(derived)
    logger.debug("Extracted %d-byte seed", len(seed))

    return generate_keypair(open_stream(seed))


def derive_keypair_from(password: bytes, salt: bytes) -> KeyPair:
    """Shortcut for ``derive_keypair(Credentials(password=..., salt=...))``."""
    return derive_keypair(Credentials(password=password, salt=salt))
