"""Pydantic models for pwkeys data structures.

Credentials go into the pipeline and a KeyPair comes out. Both are frozen so
a value cannot change once it has been handed to a later stage.
"""

from __future__ import annotations

from enum import Enum

from nacl.signing import SigningKey, VerifyKey
from pydantic import BaseModel, ConfigDict, Field, field_validator

PUBLIC_KEY_SIZE = 32
SEED_SIZE = 32
PRIVATE_KEY_SIZE = SEED_SIZE + PUBLIC_KEY_SIZE


class PemFormat(str, Enum):
    """PEM body layout for written key files."""
    RAW = "raw"
    PKCS8 = "pkcs8"


class Credentials(BaseModel):
    """Caller-supplied password and salt. Never persisted."""

    model_config = ConfigDict(frozen=True)

    password: bytes = Field(..., description="Password bytes")
    salt: bytes = Field(..., description="Salt bytes")

    @classmethod
    def from_text(cls, password: str, salt: str) -> Credentials:
        """Build credentials from text, encoded as UTF-8."""
        return cls(password=password.encode("utf-8"), salt=salt.encode("utf-8"))

    def __repr__(self) -> str:
        return "Credentials(password=<redacted>, salt=<redacted>)"

    __str__ = __repr__


class KeyPair(BaseModel):
    """Ed25519 keypair.

    ``private_key`` is the 64-byte ``seed || public_key`` layout used by
    libsodium, so hex output matches other tools that use that layout.
    """

    model_config = ConfigDict(frozen=True)

    public_key: bytes = Field(..., description="32-byte Ed25519 public key")
    private_key: bytes = Field(..., description="64-byte seed || public key")

    @field_validator("public_key")
    @classmethod
    def validate_public_key(cls, v: bytes) -> bytes:
        """Public key must be exactly 32 bytes."""
        if len(v) != PUBLIC_KEY_SIZE:
            raise ValueError(f"Public key must be {PUBLIC_KEY_SIZE} bytes, got {len(v)}")
        return v

    @field_validator("private_key")
    @classmethod
    def validate_private_key(cls, v: bytes) -> bytes:
        """Private key must be exactly 64 bytes."""
        if len(v) != PRIVATE_KEY_SIZE:
            raise ValueError(f"Private key must be {PRIVATE_KEY_SIZE} bytes, got {len(v)}")
        return v

    @property
    def seed(self) -> bytes:
        """The 32 bytes of private entropy consumed from the key stream."""
        return self.private_key[:SEED_SIZE]

    def signing_key(self) -> SigningKey:
        return SigningKey(self.seed)

    def verify_key(self) -> VerifyKey:
        return VerifyKey(self.public_key)

    def __repr__(self) -> str:
        return f"KeyPair(public_key={self.public_key.hex()}, private_key=<redacted>)"

    __str__ = __repr__
