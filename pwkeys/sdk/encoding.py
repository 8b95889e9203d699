"""Hex and PEM encodings for derived keys.

Two PEM layouts are supported. ``raw`` puts the bare key bytes under the
``PUBLIC KEY`` / ``PRIVATE KEY`` labels, byte-compatible with files written
by earlier releases of the tool. Other software cannot parse these as keys.
``pkcs8`` writes SubjectPublicKeyInfo / PKCS#8 structures that OpenSSL and
other tools can load.
"""

from __future__ import annotations

import base64
import binascii
import re

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

from pwkeys.sdk.models import KeyPair, PemFormat

PUBLIC_LABEL = "PUBLIC KEY"
PRIVATE_LABEL = "PRIVATE KEY"
PEM_LINE_LEN = 64

_PEM_RE = re.compile(
    r"-----BEGIN (?P<label>[^-\r\n]+)-----\r?\n"
    r"(?P<body>[A-Za-z0-9+/=\r\n]*?)"
    r"-----END (?P=label)-----"
)


def to_hex(data: bytes) -> str:
    """Lowercase hex encoding."""
    return data.hex()


def from_hex(text: str) -> bytes:
    """Decode hex text, ignoring surrounding whitespace."""
    try:
        return bytes.fromhex(text.strip())
    except ValueError:
        raise ValueError("Key must be valid hex")


def encode_pem(label: str, payload: bytes) -> str:
    """Wrap ``payload`` in a PEM block with 64-column base64 lines."""
    b64 = base64.b64encode(payload).decode("ascii")
    lines = [b64[i:i + PEM_LINE_LEN] for i in range(0, len(b64), PEM_LINE_LEN)]
    body = "".join(f"{line}\n" for line in lines)
    return f"-----BEGIN {label}-----\n{body}-----END {label}-----\n"


def decode_pem(text: str) -> tuple[str, bytes]:
    """Parse the first PEM block in ``text`` into (label, payload)."""
    match = _PEM_RE.search(text)
    if not match:
        raise ValueError("No PEM block found")
    body = "".join(match.group("body").split())
    try:
        payload = base64.b64decode(body, validate=True)
    except binascii.Error as e:
        raise ValueError(f"Invalid base64 in PEM body: {e}")
    return match.group("label"), payload


def pem_pair(keypair: KeyPair, fmt: PemFormat = PemFormat.RAW) -> tuple[str, str]:
    """Return (public_pem, private_pem) for ``keypair`` in the given layout."""
    if fmt is PemFormat.RAW:
        return (
            encode_pem(PUBLIC_LABEL, keypair.public_key),
            encode_pem(PRIVATE_LABEL, keypair.private_key),
        )
    return _pkcs8_pair(keypair)


def _pkcs8_pair(keypair: KeyPair) -> tuple[str, str]:
    private = Ed25519PrivateKey.from_private_bytes(keypair.seed)
    public_pem = private.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )
    private_pem = private.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )
    return public_pem.decode("ascii"), private_pem.decode("ascii")
