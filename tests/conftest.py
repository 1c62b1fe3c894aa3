"""Shared fixtures for the foretpe test suite."""

from __future__ import annotations

import numpy as np
import pytest

from foretpe import make_categorical_range, make_continuous_range


class ConstantRng:
    """Generator stand-in returning fixed draws, for driving edge cases."""

    def __init__(self, u: float = 0.5, z: float = 0.0):
        self.u = u
        self.z = z
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.u

    def standard_normal(self) -> float:
        self.calls += 1
        return self.z


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(12345)


@pytest.fixture
def unit_range():
    return make_continuous_range(-5.0, 5.0)


@pytest.fixture
def three_choices():
    return make_categorical_range(3)


@pytest.fixture
def constant_rng():
    return ConstantRng
