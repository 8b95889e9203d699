"""Shared fixtures data for pwkeys tests.

The golden vector was computed once against independent Argon2id, HKDF and
Ed25519 implementations and must never change.
"""

from __future__ import annotations

GOLDEN_PASSWORD = "correct horse"
GOLDEN_SALT = "battery staple"

GOLDEN_DERIVED_KEY = "adcb9617ad0b7366006ba9860c4119f896deb9fc52593ceac443866ae6588358"
GOLDEN_SEED = "fff501138812170a1b1310b4d2556cd8bce544b78837a5b2e408d4bfc111317a"
GOLDEN_STREAM_64 = (
    "538414bbfab402c948933d980dc06ce4b7ae9b0241c110d754c037bf4e069e8e"
    "d9f03125dc79a310e9bd2394ecb22ea5a3744291952ab5c64ffb0580c8dfad7e"
)
GOLDEN_PUBLIC_KEY = "db88b3d758d0b044c0141bb251624caeb2d2a32fc0e7000987b8f37a298fc2a6"
GOLDEN_PRIVATE_KEY = GOLDEN_STREAM_64[:64] + GOLDEN_PUBLIC_KEY


def flip_last_byte(data: bytes) -> bytes:
    """Return ``data`` with its final byte changed."""
    return data[:-1] + bytes([data[-1] ^ 0x01])
