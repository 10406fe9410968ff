"""Pytest configuration for path tracer tests.

Provides seeded random sources so that stochastic tests are reproducible.
"""

import random

import pytest


class FixedRandom:
    """random.Random stand-in whose random() always returns ``value``."""

    def __init__(self, value: float):
        self.value = value

    def random(self) -> float:
        return self.value

    def uniform(self, a: float, b: float) -> float:
        return a + (b - a) * self.value

    def randint(self, a: int, b: int) -> int:
        return min(b, a + int((b - a + 1) * self.value))


@pytest.fixture
def rng():
    """A seeded random source, fresh for each test."""
    return random.Random(1234)


@pytest.fixture
def fixed_rng():
    """Factory for FixedRandom instances."""
    return FixedRandom
