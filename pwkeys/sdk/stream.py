"""Deterministic key stream built on HKDF-SHA-256 (RFC 5869).

The seed is extracted under an all-zero salt and expanded with an empty info
string. A stream can be read in any number of calls and the concatenated
result is always the same prefix of the expansion.
"""

from __future__ import annotations

import logging

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.hkdf import HKDF

from pwkeys.sdk.errors import DerivationError

logger = logging.getLogger(__name__)

HASH_LEN = 32
MAX_OUTPUT = 255 * HASH_LEN


class KeyStream:
    """Keyed expansion with an explicit read position.

    Each instance tracks its own position. Two streams opened on the same
    seed yield identical bytes for identical total read lengths.
    """

    def __init__(self, seed: bytes) -> None:
        self._seed = bytes(seed)
        self._okm: bytes | None = None
        self._position = 0

    @property
    def position(self) -> int:
        """Number of bytes already consumed."""
        return self._position

    @property
    def remaining(self) -> int:
        """Bytes left before the HKDF output limit is reached."""
        return MAX_OUTPUT - self._position

    def read(self, n: int) -> bytes:
        """Return the next ``n`` bytes of the stream.

        Raises:
            ValueError: ``n`` is negative
            DerivationError: fewer than ``n`` bytes remain
        """
        if n < 0:
            raise ValueError("Read length must be non-negative")
        if n > self.remaining:
            raise DerivationError(
                f"Key stream exhausted: requested {n} bytes, {self.remaining} remaining"
            )

        if self._okm is None:
            hkdf = HKDF(algorithm=hashes.SHA256(), length=MAX_OUTPUT, salt=None, info=None)
            self._okm = hkdf.derive(self._seed)

        out = self._okm[self._position:self._position + n]
        self._position += n
        return out


def open_stream(seed: bytes) -> KeyStream:
    """Open a fresh key stream positioned at byte 0."""
    logger.debug("Opening HKDF-SHA-256 key stream")
    return KeyStream(seed)
