"""Universally Unique Lexicographically Sortable Identifiers - 128-bit, time-ordered IDs."""

from __future__ import annotations

from ulidkit.errors import DecodeError, InvalidLengthError, ULIDError
from ulidkit.generator import factory, generate_fresh, generate_monotonic
from ulidkit.ulid import (
    ULID,
    decode,
    encode,
    from_bytes,
    from_parts,
    from_tuple,
    to_bytes,
    to_parts,
    to_tuple,
)


__all__ = [
    "ULID",
    "DecodeError",
    "InvalidLengthError",
    "ULIDError",
    "decode",
    "encode",
    "factory",
    "from_bytes",
    "from_parts",
    "from_tuple",
    "generate_fresh",
    "generate_monotonic",
    "to_bytes",
    "to_parts",
    "to_tuple",
]
