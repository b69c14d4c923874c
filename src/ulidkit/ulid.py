"""Universally Unique Lexicographically Sortable Identifiers."""

from __future__ import annotations

from datetime import UTC
from datetime import datetime as dt_datetime
from typing import TYPE_CHECKING, Any, Self
from uuid import UUID

from pydantic_core import CoreSchema, core_schema

from ulidkit import base32, layout
from ulidkit.errors import ULIDError


if TYPE_CHECKING:
    from collections.abc import Buffer, Sequence


_MS_PER_SECOND = 1000


class ULID:
    """A 128-bit identifier made of a millisecond timestamp and 80 random bits.

    ULIDs are immutable values. Build them with the classmethods below or with
    the generators in :mod:`ulidkit.generator`; the canonical string form is
    26 uppercase Crockford Base32 characters and sorts like the binary form.

    Example:
        >>> u = ULID.from_parts(1_469_918_176_385, 0)
        >>> str(u)
        '01ARYZ6S410000000000000000'
        >>> u.timestamp
        1469918176385
    """

    __slots__ = ("_int", "_str")

    def __init__(self, value: int) -> None:
        """Initialize a ULID from a 128-bit integer.

        Args:
            value: The integer value; bits above 128 are discarded.
        """
        self._int = value & layout.TOTAL_MASK
        self._str: str | None = None

    @classmethod
    def from_int(cls, value: int) -> Self:
        """Build a ULID from a 128-bit integer, truncating wider values."""
        return cls(value)

    @classmethod
    def from_parts(cls, timestamp: int, random: int) -> Self:
        """Build a ULID from a millisecond timestamp and an 80-bit random payload.

        Both parts are truncated silently to their field widths.
        """
        return cls(layout.pack(timestamp, random))

    @classmethod
    def from_tuple(cls, parts: Sequence[int]) -> Self:
        """Build a ULID from a ``(timestamp, random)`` pair.

        Raises:
            ULIDError: If ``parts`` does not hold exactly two items.
        """
        if len(parts) != 2:  # noqa: PLR2004
            raise ULIDError(f"Expected a (timestamp, random) pair, got {len(parts)} items")
        timestamp, random = parts
        return cls.from_parts(timestamp, random)

    @classmethod
    def from_bytes(cls, data: Buffer) -> Self:
        """Build a ULID from its 16-byte big-endian representation.

        Raises:
            InvalidLengthError: If ``data`` is not exactly 16 bytes.
        """
        return cls(layout.from_bytes(data))

    @classmethod
    def from_string(cls, string: str) -> Self:
        """Parse a ULID from its Crockford Base32 form (case-insensitive).

        Raises:
            DecodeError: If the string contains a symbol outside the alphabet.
            InvalidLengthError: If the string is not exactly 26 symbols.
        """
        return cls(base32.decode(string))

    @classmethod
    def from_uuid(cls, uid: UUID) -> Self:
        """Reinterpret the 128 bits of a UUID as a ULID."""
        return cls(uid.int)

    @property
    def timestamp(self) -> int:
        """Milliseconds since the Unix epoch (the high 48 bits)."""
        return self._int >> layout.RANDOM_BITS

    @property
    def random(self) -> int:
        """The 80-bit random payload (the low 80 bits)."""
        return self._int & layout.RANDOM_MASK

    @property
    def datetime(self) -> dt_datetime:
        """The timestamp as a timezone-aware UTC datetime.

        Raises:
            ValueError: If the timestamp falls after year 9999, the last year
                :class:`datetime.datetime` can hold (timestamps from
                253402300800000 up to the 48-bit maximum).
        """
        return dt_datetime.fromtimestamp(self.timestamp / _MS_PER_SECOND, tz=UTC)

    @property
    def int(self) -> int:
        """The 128-bit unsigned integer value."""
        return self._int

    @property
    def bytes(self) -> bytes:
        """The 16-byte big-endian representation."""
        return layout.to_bytes(self._int)

    @property
    def uuid(self) -> UUID:
        """The same 128 bits as a :class:`uuid.UUID`."""
        return UUID(int=self._int)

    def to_parts(self) -> tuple[int, int]:
        """Return the ``(timestamp, random)`` fields."""
        return layout.unpack(self._int)

    def to_tuple(self) -> tuple[int, int]:
        """Return the ``(timestamp, random)`` fields as a tuple."""
        return self.to_parts()

    def to_bytes(self) -> bytes:
        """Return the 16-byte big-endian representation."""
        return layout.to_bytes(self._int)

    def __str__(self) -> str:
        """Return the canonical 26-character uppercase Crockford string."""
        if self._str is None:
            self._str = base32.encode(self._int)
        return self._str

    def __repr__(self) -> str:
        """Return a detailed representation."""
        return f"ULID({str(self)!r})"

    def __int__(self) -> int:
        return self._int

    def __bytes__(self) -> bytes:
        return layout.to_bytes(self._int)

    def __hash__(self) -> int:
        """Return hash for use in sets and dict keys."""
        return hash(self._int)

    def __eq__(self, other: object) -> bool:
        """Check equality with another ULID."""
        if isinstance(other, ULID):
            return self._int == other._int
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        """Compare as unsigned 128-bit integers."""
        if isinstance(other, ULID):
            return self._int < other._int
        return NotImplemented

    def __le__(self, other: object) -> bool:
        """Compare as unsigned 128-bit integers."""
        if isinstance(other, ULID):
            return self._int <= other._int
        return NotImplemented

    def __gt__(self, other: object) -> bool:
        """Compare as unsigned 128-bit integers."""
        if isinstance(other, ULID):
            return self._int > other._int
        return NotImplemented

    def __ge__(self, other: object) -> bool:
        """Compare as unsigned 128-bit integers."""
        if isinstance(other, ULID):
            return self._int >= other._int
        return NotImplemented

    def __copy__(self) -> Self:
        """Return self (ULIDs are immutable)."""
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        """Return self (ULIDs are immutable)."""
        return self

    def __reduce__(self) -> tuple[type[Self], tuple[int]]:
        """Support pickling for multiprocessing, caching, etc."""
        return (type(self), (self._int,))

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,  # noqa: ANN401
        handler: Any,  # noqa: ANN401
    ) -> CoreSchema:
        """Pydantic integration for validation and serialization.

        Python mode accepts a ULID, its string form or its 16-byte form.
        JSON mode accepts the string form. Both serialize to the string form.
        """

        def validate(v: ULID | str | bytes) -> ULID:
            if isinstance(v, ULID):
                return v
            if isinstance(v, str):
                return cls.from_string(v)
            if isinstance(v, bytes | bytearray):
                return cls.from_bytes(v)
            raise ULIDError(f"Expected ULID, str or bytes, got {type(v).__name__}")

        return core_schema.json_or_python_schema(
            json_schema=core_schema.chain_schema(
                [
                    core_schema.str_schema(),
                    core_schema.no_info_plain_validator_function(validate),
                ]
            ),
            python_schema=core_schema.no_info_plain_validator_function(validate),
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )


def from_parts(timestamp: int, random: int) -> ULID:
    """Build a ULID from a millisecond timestamp and an 80-bit random payload."""
    return ULID.from_parts(timestamp, random)


def to_parts(ulid: ULID) -> tuple[int, int]:
    """Return the ``(timestamp, random)`` fields of a ULID."""
    return ulid.to_parts()


def from_tuple(parts: Sequence[int]) -> ULID:
    """Build a ULID from a ``(timestamp, random)`` pair."""
    return ULID.from_tuple(parts)


def to_tuple(ulid: ULID) -> tuple[int, int]:
    """Return the ``(timestamp, random)`` fields of a ULID as a tuple."""
    return ulid.to_tuple()


def from_bytes(data: Buffer) -> ULID:
    """Build a ULID from its 16-byte big-endian representation."""
    return ULID.from_bytes(data)


def to_bytes(ulid: ULID) -> bytes:
    """Return the 16-byte big-endian representation of a ULID."""
    return ulid.to_bytes()


def decode(string: str) -> ULID:
    """Parse a ULID from its Crockford Base32 form."""
    return ULID.from_string(string)


def encode(ulid: ULID) -> str:
    """Return the canonical 26-character Crockford form of a ULID."""
    return str(ulid)
