"""Key file writers.

Files are created with mode 0644 (before umask) and truncated when they
already exist. The first failure aborts the remaining writes.
"""

from __future__ import annotations

import os
from pathlib import Path

from pwkeys.sdk.encoding import pem_pair, to_hex
from pwkeys.sdk.errors import WriteFailureError
from pwkeys.sdk.models import KeyPair, PemFormat

FILE_MODE = 0o644

PUBLIC_HEX_FILE = "public"
PRIVATE_HEX_FILE = "private"
PUBLIC_PEM_FILE = "public.pem"
PRIVATE_PEM_FILE = "private.pem"


def write_key_file(path: Path, content: str, what: str) -> Path:
    """Write ``content`` to ``path``, raising WriteFailureError on any OS error."""
    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
        with os.fdopen(fd, "w", encoding="ascii") as f:
            f.write(content)
    except OSError as e:
        raise WriteFailureError(what, path, str(e)) from e
    return path


def write_hex_files(keypair: KeyPair, out_dir: Path) -> list[Path]:
    """Write ``public`` and ``private`` hex files."""
    return [
        write_key_file(out_dir / PUBLIC_HEX_FILE, to_hex(keypair.public_key), "public key"),
        write_key_file(out_dir / PRIVATE_HEX_FILE, to_hex(keypair.private_key), "private key"),
    ]


def write_pem_files(keypair: KeyPair, out_dir: Path, fmt: PemFormat = PemFormat.RAW) -> list[Path]:
    """Write ``public.pem`` and ``private.pem``."""
    public_pem, private_pem = pem_pair(keypair, fmt)
    return [
        write_key_file(out_dir / PUBLIC_PEM_FILE, public_pem, "public key PEM"),
        write_key_file(out_dir / PRIVATE_PEM_FILE, private_pem, "private key PEM"),
    ]
