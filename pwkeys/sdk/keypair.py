"""Ed25519 keypair construction from a key stream.

libsodium does the standard construction: SHA-512 of the seed, clamping of
the lower half, then fixed-base scalar multiplication for the public point.
"""

from __future__ import annotations

import logging

from nacl.bindings import crypto_sign_seed_keypair
from nacl.exceptions import CryptoError

from pwkeys.sdk.errors import DerivationError
from pwkeys.sdk.models import PRIVATE_KEY_SIZE, PUBLIC_KEY_SIZE, SEED_SIZE, KeyPair
from pwkeys.sdk.stream import KeyStream

logger = logging.getLogger(__name__)


def generate_keypair(stream: KeyStream) -> KeyPair:
    """Consume 32 bytes of entropy from ``stream`` and build a keypair.

    Every failure is raised as DerivationError. None are swallowed.
    """
    seed = stream.read(SEED_SIZE)
    if len(seed) != SEED_SIZE:
        raise DerivationError(f"Short read from key stream: got {len(seed)} of {SEED_SIZE} bytes")

    try:
        public_key, private_key = crypto_sign_seed_keypair(seed)
    except CryptoError as e:
        raise DerivationError(f"Ed25519 key construction failed: {e}") from e

    _check_keypair(seed, public_key, private_key)
    logger.debug("Constructed Ed25519 keypair %s", public_key.hex())
    return KeyPair(public_key=public_key, private_key=private_key)


def _check_keypair(seed: bytes, public_key: bytes, private_key: bytes) -> None:
    """Enforce the seed || public layout of the private key."""
    if len(public_key) != PUBLIC_KEY_SIZE or len(private_key) != PRIVATE_KEY_SIZE:
        raise DerivationError("Ed25519 key construction returned keys of unexpected length")
    if private_key[:SEED_SIZE] != seed or private_key[SEED_SIZE:] != public_key:
        raise DerivationError("Ed25519 private key does not embed its seed and public key")
