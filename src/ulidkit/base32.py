"""Crockford Base32 codec for 128-bit ULID values.

The 128-bit value is left-padded with two zero bits to 130 bits and written
as 26 symbols of 5 bits each, most significant first. Because the alphabet
is in ascending ASCII order, the string form sorts exactly like the integer.

Decoding is case-insensitive and accepts Crockford's aliases for commonly
misread symbols: ``O`` reads as ``0``, ``I`` and ``L`` read as ``1``.
"""

from __future__ import annotations

from ulidkit.errors import DecodeError, InvalidLengthError
from ulidkit.layout import TOTAL_BITS, TOTAL_MASK


# Crockford alphabet: digits then letters, omitting I, L, O and U.
# IMPORTANT: must stay in ascending ASCII order so string order matches integer order
ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"

_SYMBOL_BITS = 5
_SYMBOL_MASK = (1 << _SYMBOL_BITS) - 1

# 26 symbols * 5 bits = 130 bits, 2 more than a ULID holds
ENCODED_LENGTH = -(-TOTAL_BITS // _SYMBOL_BITS)
_PADDING_BITS = ENCODED_LENGTH * _SYMBOL_BITS - TOTAL_BITS

# Shift for each output symbol, most significant group first: 125, 120, ..., 0
_SHIFTS = tuple(range((ENCODED_LENGTH - 1) * _SYMBOL_BITS, -1, -_SYMBOL_BITS))

# Misread symbols and the canonical digit they stand for
_ALIASES = {"O": "0", "I": "1", "L": "1"}

# Sentinel for code points outside the accepted symbol set
_INVALID = -1


def _build_decode_table() -> tuple[int, ...]:
    """Map every ASCII code point to its 5-bit value, or _INVALID."""
    table = [_INVALID] * 128
    for value, symbol in enumerate(ALPHABET):
        table[ord(symbol)] = value
        table[ord(symbol.lower())] = value
    for alias, symbol in _ALIASES.items():
        table[ord(alias)] = table[ord(alias.lower())] = ALPHABET.index(symbol)
    return tuple(table)


_DECODE_TABLE = _build_decode_table()


def encode(value: int) -> str:
    """Encode a 128-bit integer as a 26-character uppercase Crockford string."""
    value &= TOTAL_MASK
    return "".join([ALPHABET[(value >> shift) & _SYMBOL_MASK] for shift in _SHIFTS])


def decode(string: str) -> int:
    """Decode a 26-character Crockford string into a 128-bit integer.

    Symbols are read left to right; the first one outside the accepted set
    aborts decoding. The length is checked once every symbol is known to be
    valid. Only the first 26 symbols are accumulated, so oversized input costs
    linear time. The two padding bits above bit 127 are dropped unchecked.

    Raises:
        DecodeError: If the string contains a symbol outside the alphabet.
        InvalidLengthError: If the string is not exactly 26 symbols long.
        TypeError: If ``string`` is not a str.
    """
    if not isinstance(string, str):
        raise TypeError(f"Expected str, got {type(string).__name__}")

    value = 0
    for index, symbol in enumerate(string):
        code = ord(symbol)
        digit = _DECODE_TABLE[code] if code < len(_DECODE_TABLE) else _INVALID
        if digit == _INVALID:
            raise DecodeError(f"Invalid Base32 symbol {symbol!r} at position {index}")
        if index < ENCODED_LENGTH:
            value = (value << _SYMBOL_BITS) | digit

    payload_bits = len(string) * _SYMBOL_BITS - _PADDING_BITS
    if payload_bits != TOTAL_BITS:
        raise InvalidLengthError(
            f"ULID string must be {ENCODED_LENGTH} characters ({TOTAL_BITS} bits), "
            f"got {len(string)} ({payload_bits} bits)"
        )
    return value & TOTAL_MASK


__all__ = ["ALPHABET", "ENCODED_LENGTH", "decode", "encode"]
