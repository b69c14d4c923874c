"""ULID generation, plain and monotonic.

The functions here keep no state between calls: a monotonic sequence is
threaded through ``generate_monotonic`` by the caller, one previous value at
a time. ``factory`` wraps that bookkeeping in a thread-safe closure.
"""

from __future__ import annotations

import logging
import secrets
import threading
import time
from typing import TYPE_CHECKING

from ulidkit import layout
from ulidkit.ulid import ULID


if TYPE_CHECKING:
    from collections.abc import Callable

    type TimeSource = Callable[[], int]
    type RandomSource = Callable[[int], bytes]


logger = logging.getLogger(__name__)

_NS_PER_MS = 1_000_000


def now_millis() -> int:
    """Return the current wall-clock time in milliseconds since the Unix epoch."""
    return time.time_ns() // _NS_PER_MS


def strong_random(n: int) -> bytes:
    """Return ``n`` cryptographically strong random bytes."""
    return secrets.token_bytes(n)


def _read_randomness(random_source: RandomSource) -> int:
    return int.from_bytes(random_source(layout.RANDOM_BYTES), "big")


def generate_fresh(
    time_source: TimeSource = now_millis,
    random_source: RandomSource = strong_random,
) -> ULID:
    """Generate a ULID from the current time and 80 fresh random bits.

    Args:
        time_source: Returns milliseconds since the Unix epoch.
        random_source: Returns the requested number of random bytes.
    """
    return ULID.from_parts(time_source(), _read_randomness(random_source))


def generate_monotonic(
    previous: ULID,
    time_source: TimeSource = now_millis,
    random_source: RandomSource = strong_random,
) -> ULID:
    """Generate the successor of ``previous`` in a monotonic sequence.

    When the clock has advanced past ``previous.timestamp`` the result gets the
    new timestamp and fresh randomness. Otherwise (same millisecond, or a
    clock that went backwards) it keeps the previous timestamp and adds one
    to the random field. The increment carries within the 80-bit field only;
    on overflow the field wraps to zero and the timestamp is left untouched.

    Args:
        previous: The last ULID of the sequence.
        time_source: Returns milliseconds since the Unix epoch.
        random_source: Returns the requested number of random bytes.

    Returns:
        A ULID strictly greater than ``previous`` unless the random field
        overflowed.
    """
    current = time_source() & layout.TIMESTAMP_MASK
    prev_timestamp, prev_random = previous.to_parts()

    if current > prev_timestamp:
        return ULID.from_parts(current, _read_randomness(random_source))

    if current < prev_timestamp:
        logger.debug(
            "Clock is %d ms behind previous ULID; keeping timestamp %d",
            prev_timestamp - current,
            prev_timestamp,
        )

    successor = (prev_random + 1) & layout.RANDOM_MASK
    if successor == 0:
        logger.warning(
            "Random component overflowed at timestamp %d; wrapped to zero", prev_timestamp
        )
    return ULID.from_parts(prev_timestamp, successor)


def factory(
    *,
    monotonic: bool = False,
    time_source: TimeSource = now_millis,
    random_source: RandomSource = strong_random,
) -> Callable[[], ULID]:
    """Create a zero-argument ULID generator.

    This is useful with Pydantic's Field(default_factory=...).

    With ``monotonic=True`` the returned function remembers the last ULID it
    produced and serializes calls with a lock, so one factory shared between
    threads still yields a single increasing sequence.

    Example:
        class Event(BaseModel):
            id: ULID = Field(default_factory=factory(monotonic=True))
    """
    if not monotonic:

        def _factory() -> ULID:
            return generate_fresh(time_source, random_source)

        return _factory

    lock = threading.Lock()
    previous: ULID | None = None

    def _monotonic_factory() -> ULID:
        nonlocal previous
        with lock:
            if previous is None:
                previous = generate_fresh(time_source, random_source)
            else:
                previous = generate_monotonic(previous, time_source, random_source)
            return previous

    return _monotonic_factory
