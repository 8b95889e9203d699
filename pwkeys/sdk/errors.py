"""Exception types raised by the derivation pipeline and its collaborators."""

from __future__ import annotations

from pathlib import Path


class PwKeysError(Exception):
    """Base class for all pwkeys errors."""


class InvalidCredentialError(PwKeysError, ValueError):
    """Password or salt cannot be used; nothing was derived."""


class MissingCredentialError(InvalidCredentialError):
    """Password or salt is empty; nothing was derived."""


class DerivationError(PwKeysError, RuntimeError):
    """Internal fault while hardening, expanding, or constructing the keypair."""


class WriteFailureError(PwKeysError, OSError):
    """A key file could not be created or written."""

    def __init__(self, what: str, path: Path, reason: str) -> None:
        super().__init__(f"Error writing {what} to file: {reason}")
        self.what = what
        self.path = path
        self.reason = reason
