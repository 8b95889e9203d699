"""Password hardening with Argon2id.

The cost parameters are fixed. Changing any of them changes every key ever
derived, so a new parameter set must ship under a new name, never in place.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from argon2.exceptions import HashingError
from argon2.low_level import Type, hash_secret_raw

from pwkeys.sdk.errors import DerivationError

logger = logging.getLogger(__name__)


class HardeningParams(NamedTuple):
    """Argon2id cost parameters."""
    time_cost: int
    memory_cost: int  # KiB
    parallelism: int
    hash_len: int


ARGON2ID_V1 = HardeningParams(time_cost=1, memory_cost=64 * 1024, parallelism=4, hash_len=32)

# libargon2 refuses shorter salts
MIN_SALT_LEN = 8


def harden(password: bytes, salt: bytes) -> bytes:
    """Derive a 32-byte key from password and salt with Argon2id.

    Args:
        password: Password bytes, already checked to be non-empty
        salt: Salt bytes, already checked to be at least MIN_SALT_LEN long

    Returns:
        Derived key bytes
    """
    params = ARGON2ID_V1
    logger.debug(
        "Hardening with Argon2id (t=%d, m=%d KiB, p=%d)",
        params.time_cost, params.memory_cost, params.parallelism,
    )
    try:
        derived = hash_secret_raw(
            password,
            salt,
            time_cost=params.time_cost,
            memory_cost=params.memory_cost,
            parallelism=params.parallelism,
            hash_len=params.hash_len,
            type=Type.ID,
        )
    except HashingError as e:
        raise DerivationError(f"Argon2id hashing failed: {e}") from e

    if len(derived) != params.hash_len:
        raise DerivationError(f"Argon2id returned {len(derived)} bytes, expected {params.hash_len}")
    return derived
