"""Shared test fixtures and Hypothesis strategies."""

from __future__ import annotations

import pytest
from hypothesis import strategies as st

from ulidkit.base32 import ALPHABET
from ulidkit.layout import RANDOM_MASK, TIMESTAMP_MASK, TOTAL_MASK


# =============================================================================
# Hypothesis Strategies
# =============================================================================

timestamp_strategy = st.integers(min_value=0, max_value=TIMESTAMP_MASK)
random_strategy = st.integers(min_value=0, max_value=RANDOM_MASK)
ulid_int_strategy = st.integers(min_value=0, max_value=TOTAL_MASK)

# Every symbol decode accepts: canonical, lowercase and the O/I/L aliases
ACCEPTED_SYMBOLS = ALPHABET + ALPHABET.lower() + "OoIiLl"
accepted_symbol_strategy = st.sampled_from(ACCEPTED_SYMBOLS)
ulid_string_strategy = st.text(accepted_symbol_strategy, min_size=26, max_size=26)

rejected_symbol_strategy = st.characters().filter(lambda c: c not in ACCEPTED_SYMBOLS)


# =============================================================================
# Collaborator Fixtures
# =============================================================================


class FakeClock:
    """Time source returning a settable millisecond reading."""

    def __init__(self, now: int = 1_700_000_000_000) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int = 1) -> None:
        self.now += ms


class FakeRandom:
    """Random source returning a fixed byte pattern and recording requests."""

    def __init__(self, fill: int = 0xAB) -> None:
        self.fill = fill
        self.requests: list[int] = []

    def __call__(self, n: int) -> bytes:
        self.requests.append(n)
        return bytes([self.fill]) * n


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def entropy() -> FakeRandom:
    return FakeRandom()

