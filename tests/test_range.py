"""
Unit tests for Range construction and membership.
"""

from __future__ import annotations

import math

import numpy as np
import pytest

from foretpe import (
    InvalidRangeError,
    Range,
    categorical_range,
    continuous_range,
    make_categorical_range,
    make_continuous_range,
)


@pytest.mark.unit
def test_continuous_range_properties():
    """Continuous ranges expose bounds, width and midpoint."""
    r = make_continuous_range(-5.0, 5.0)

    assert r.low == -5.0
    assert r.high == 5.0
    assert r.width == 10.0
    assert r.midpoint == 0.0
    assert r.size is None
    assert not r.is_categorical
    assert str(r) == "-5.0..5.0"


@pytest.mark.unit
@pytest.mark.parametrize(
    "low, high",
    [
        (1.0, 1.0),
        (2.0, 1.0),
        (math.nan, 1.0),
        (0.0, math.inf),
        (-math.inf, 0.0),
        (-1e308, 1e308),
        ("a", 1.0),
    ],
)
def test_continuous_range_rejects_invalid_bounds(low, high):
    """Empty, non-finite or non-numeric bounds raise InvalidRangeError."""
    with pytest.raises(InvalidRangeError):
        make_continuous_range(low, high)


@pytest.mark.unit
def test_invalid_range_is_value_error():
    """InvalidRangeError stays catchable as ValueError."""
    with pytest.raises(ValueError):
        make_continuous_range(1.0, 0.0)


@pytest.mark.unit
def test_continuous_contains_is_half_open():
    """low is included, high is excluded, NaN never belongs."""
    r = make_continuous_range(0.0, 1.0)

    assert r.contains(0.0)
    assert r.contains(0.5)
    assert r.contains(np.float64(0.999))
    assert not r.contains(1.0)
    assert not r.contains(-1e-12)
    assert not r.contains(math.nan)
    assert not r.contains(math.inf)
    assert not r.contains("0.5")


@pytest.mark.unit
def test_categorical_range_properties():
    """Categorical ranges cover integer indices [0, size)."""
    r = make_categorical_range(3)

    assert r.is_categorical
    assert r.size == 3
    assert r.low == 0.0
    assert r.high == 3.0
    assert str(r) == "{0..2}"


@pytest.mark.unit
@pytest.mark.parametrize("size", [0, -1, 2.5, True, "3", None])
def test_categorical_range_rejects_invalid_size(size):
    """Non-positive or non-integer sizes raise InvalidRangeError."""
    with pytest.raises(InvalidRangeError):
        make_categorical_range(size)


@pytest.mark.unit
def test_categorical_contains_integral_values_only():
    """Integral values in [0, size) belong; fractions and bools do not."""
    r = make_categorical_range(3)

    assert r.contains(0)
    assert r.contains(2)
    assert r.contains(np.int64(1))
    assert r.contains(1.0)
    assert not r.contains(3)
    assert not r.contains(-1)
    assert not r.contains(1.5)
    assert not r.contains(True)
    assert not r.contains(math.nan)


@pytest.mark.unit
def test_coerce_returns_native_types():
    """Categorical values coerce to int, continuous ones to float."""
    assert make_categorical_range(3).coerce(np.int64(2)) == 2
    assert isinstance(make_categorical_range(3).coerce(2.0), int)
    assert isinstance(make_continuous_range(0.0, 1.0).coerce(np.float32(0.5)), float)


@pytest.mark.unit
def test_aliases_and_equality():
    """Short aliases build equal, hashable ranges."""
    assert continuous_range(0.0, 1.0) == Range.continuous(0.0, 1.0)
    assert categorical_range(4) == Range.categorical(4)
    assert len({categorical_range(4), make_categorical_range(4)}) == 1
