"""Binary layout of a ULID: 48-bit timestamp followed by 80 bits of randomness.

    01AN4Z07BY      79KA1307SR9X4MV3
   |----------|    |----------------|
    Timestamp          Randomness
     48 bits             80 bits

All values are handled as plain Python integers. Inputs wider than their
field are truncated to the low-order bits, never rejected.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ulidkit.errors import InvalidLengthError


if TYPE_CHECKING:
    from collections.abc import Buffer


TIMESTAMP_BITS = 48
RANDOM_BITS = 80
TOTAL_BITS = TIMESTAMP_BITS + RANDOM_BITS

TIMESTAMP_BYTES = TIMESTAMP_BITS // 8
RANDOM_BYTES = RANDOM_BITS // 8
TOTAL_BYTES = TOTAL_BITS // 8

TIMESTAMP_MASK = (1 << TIMESTAMP_BITS) - 1
RANDOM_MASK = (1 << RANDOM_BITS) - 1
TOTAL_MASK = (1 << TOTAL_BITS) - 1


def pack(timestamp: int, randomness: int) -> int:
    """Concatenate a timestamp and a random payload into a 128-bit integer."""
    return ((timestamp & TIMESTAMP_MASK) << RANDOM_BITS) | (randomness & RANDOM_MASK)


def unpack(value: int) -> tuple[int, int]:
    """Split a 128-bit integer into its (timestamp, randomness) fields."""
    value &= TOTAL_MASK
    return value >> RANDOM_BITS, value & RANDOM_MASK


def to_bytes(value: int) -> bytes:
    """Return the 16-byte big-endian representation of a 128-bit integer."""
    return (value & TOTAL_MASK).to_bytes(TOTAL_BYTES, "big")


def from_bytes(data: Buffer) -> int:
    """Read a 128-bit integer from a 16-byte big-endian buffer.

    Raises:
        InvalidLengthError: If the buffer is not exactly 16 bytes long.
        TypeError: If ``data`` is not a bytes-like object.
    """
    raw = memoryview(data).cast("B")
    if raw.nbytes != TOTAL_BYTES:
        raise InvalidLengthError(
            f"ULID must be {TOTAL_BYTES} bytes ({TOTAL_BITS} bits), got {raw.nbytes}"
        )
    return int.from_bytes(raw, "big")


__all__ = [
    "RANDOM_BITS",
    "RANDOM_BYTES",
    "RANDOM_MASK",
    "TIMESTAMP_BITS",
    "TIMESTAMP_BYTES",
    "TIMESTAMP_MASK",
    "TOTAL_BITS",
    "TOTAL_BYTES",
    "TOTAL_MASK",
    "from_bytes",
    "pack",
    "to_bytes",
    "unpack",
]
