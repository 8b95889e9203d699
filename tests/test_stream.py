"""Test the HKDF-SHA-256 key stream.

Covers split-read consistency, agreement with an independent HKDF
implementation, and exhaustion at the RFC 5869 output limit.
"""

from __future__ import annotations

import pytest
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.hkdf import HKDF

from pwkeys.sdk.errors import DerivationError
from pwkeys.sdk.stream import MAX_OUTPUT, KeyStream, open_stream
from tests.helpers import GOLDEN_SEED, GOLDEN_STREAM_64


@pytest.fixture
def seed() -> bytes:
    return bytes.fromhex(GOLDEN_SEED)


def _reference_hkdf(seed: bytes, length: int) -> bytes:
    return HKDF(algorithm=hashes.SHA256(), length=length, salt=None, info=None).derive(seed)


def test_rfc5869_case_3() -> None:
    """Test RFC 5869 test case 3 (zero salt, empty info)."""
    stream = open_stream(b"\x0b" * 22)

    okm = stream.read(42)

    assert okm.hex() == (
        "8da4e775a563c18f715f802a063c5a31b8a11f5c5ee1879ec3454e5f3c738d2d"
        "9d201395faa4b61a96c8"
    )


def test_golden_stream_prefix(seed: bytes) -> None:
    """Test the first 64 bytes for the golden seed."""
    assert open_stream(seed).read(64).hex() == GOLDEN_STREAM_64


@pytest.mark.parametrize("length", [1, 31, 32, 33, 64, 100, 1000])
def test_matches_reference_hkdf(seed: bytes, length: int) -> None:
    """Test output equals cryptography's HKDF for the same length."""
    assert open_stream(seed).read(length) == _reference_hkdf(seed, length)


@pytest.mark.parametrize("first,second", [(0, 32), (1, 31), (16, 16), (31, 1), (32, 32), (5, 90)])
def test_split_reads_equal_single_read(seed: bytes, first: int, second: int) -> None:
    """Test two reads concatenate to one read of the summed length."""
    split = open_stream(seed)
    whole = open_stream(seed)

    assert split.read(first) + split.read(second) == whole.read(first + second)


def test_many_small_reads(seed: bytes) -> None:
    """Test byte-at-a-time reads across several HMAC blocks."""
    stream = open_stream(seed)
    data = b"".join(stream.read(1) for _ in range(100))

    assert data == _reference_hkdf(seed, 100)


def test_position_is_per_instance(seed: bytes) -> None:
    """Test streams opened on one seed do not share position."""
    a = open_stream(seed)
    b = open_stream(seed)

    a.read(10)

    assert a.position == 10
    assert b.position == 0
    assert b.read(10) == open_stream(seed).read(10)


def test_read_zero(seed: bytes) -> None:
    """Test a zero-length read returns nothing and does not advance."""
    stream = open_stream(seed)

    assert stream.read(0) == b""
    assert stream.position == 0


def test_negative_read_rejected(seed: bytes) -> None:
    """Test negative read lengths raise ValueError."""
    with pytest.raises(ValueError):
        open_stream(seed).read(-1)


def test_read_to_capacity(seed: bytes) -> None:
    """Test the full HKDF output can be read."""
    stream = open_stream(seed)

    data = stream.read(MAX_OUTPUT)

    assert data == _reference_hkdf(seed, MAX_OUTPUT)
    assert stream.remaining == 0


def test_exhaustion_raises_derivation_error(seed: bytes) -> None:
    """Test reading past the HKDF limit fails without consuming."""
    stream = open_stream(seed)
    stream.read(MAX_OUTPUT - 4)

    with pytest.raises(DerivationError, match="exhausted"):
        stream.read(5)

    assert stream.position == MAX_OUTPUT - 4
    assert len(stream.read(4)) == 4


def test_empty_seed_matches_reference_hkdf() -> None:
    """Test empty input keying material expands like the reference HKDF."""
    assert KeyStream(b"").read(64) == _reference_hkdf(b"", 64)
