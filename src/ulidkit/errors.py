"""Exceptions raised by ulidkit."""

from __future__ import annotations


class ULIDError(ValueError):
    """Raised when ULID parsing or validation fails."""


class InvalidLengthError(ULIDError):
    """Raised when a string or byte buffer does not hold exactly 128 bits."""


class DecodeError(ULIDError):
    """Raised when a string contains a symbol outside the Crockford Base32 set."""


__all__ = ["DecodeError", "InvalidLengthError", "ULIDError"]
