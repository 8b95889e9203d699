"""Seed extraction and buffer hygiene."""

from __future__ import annotations

import hashlib

SEED_LEN = hashlib.sha256().digest_size


def extract_seed(derived_key: bytes | bytearray) -> bytes:
    """Collapse the hardened key into a 32-byte SHA-256 seed."""
    return hashlib.sha256(derived_key).digest()


def wipe(buf: bytearray) -> None:
    """Overwrite a sensitive buffer with zeros in place."""
    for i in range(len(buf)):
        buf[i] = 0
