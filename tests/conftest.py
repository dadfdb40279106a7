"""Shared fixtures for the RoyaleAPI client tests."""

import pytest


class FakeClock:
    """Manually advanced wall clock."""

    def __init__(self, now: float = 1_700_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def token():
    return "test-royale-token"
