"""Run configuration for the pwkeys CLI.

Flags are parsed once into an immutable RunConfig and passed down explicitly.
No environment variables or config files are consulted.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from pwkeys.sdk.errors import InvalidCredentialError, MissingCredentialError
from pwkeys.sdk.kdf import MIN_SALT_LEN
from pwkeys.sdk.models import Credentials, PemFormat


class RunConfig(BaseModel):
    """Immutable configuration for a single CLI invocation."""

    model_config = ConfigDict(frozen=True)

    password: str = Field(default="", description="Password for Argon2id hashing", repr=False)
    salt: str = Field(default="", description="Salt for Argon2id hashing", repr=False)
    write_hex: bool = Field(default=False, description="Write hex key files")
    write_pem: bool = Field(default=False, description="Write PEM key files")
    pem_format: PemFormat = Field(default=PemFormat.RAW, description="PEM body layout")
    out_dir: Path = Field(default=Path("."), description="Directory for key files")
    verbose: bool = Field(default=False, description="Enable debug logging")

    def credentials(self) -> Credentials:
        """Credentials for the derivation pipeline."""
        return Credentials.from_text(self.password, self.salt)


def validate_config(config: RunConfig) -> None:
    """Validate configuration completeness before deriving."""
    if not config.password:
        raise MissingCredentialError("Password required. Pass it with -p.")
    if not config.salt:
        raise MissingCredentialError("Salt required. Pass it with -s.")
    if len(config.salt.encode("utf-8")) < MIN_SALT_LEN:
        raise InvalidCredentialError(f"Salt must be at least {MIN_SALT_LEN} bytes.")
