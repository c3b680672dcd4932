import datetime as dt

import pytest

from egp_markets.services.random_source import NumpyRandomSource


class FixedRandom:
    """Returns the same uniform draw forever."""

    def __init__(self, value: float = 0.5):
        self.value = value
        self.calls = 0

    def next_uniform(self) -> float:
        self.calls += 1
        return self.value


@pytest.fixture
def now():
    return dt.datetime(2026, 1, 5, 12, 0, tzinfo=dt.timezone.utc)


@pytest.fixture
def rng():
    return NumpyRandomSource(seed=7)


@pytest.fixture
def flat_rng():
    return FixedRandom(0.5)
