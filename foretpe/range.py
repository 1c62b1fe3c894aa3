from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Any, Optional

from .exceptions import InvalidRangeError


@dataclass(frozen=True)
class Range:
    """
    Domain of a single parameter.

    Continuous ranges are half-open ``[low, high)``. Categorical ranges cover
    the integer indices ``{0, ..., size - 1}`` and are stored as
    ``[0, size)`` with ``size`` set.
    """

    low: float
    high: float
    size: Optional[int] = None

    @classmethod
    def continuous(cls, low: float, high: float) -> "Range":
        try:
            lo, hi = float(low), float(high)
        except (TypeError, ValueError) as e:
            raise InvalidRangeError(f"range bounds must be numbers, got {low!r}, {high!r}") from e
        if not (math.isfinite(lo) and math.isfinite(hi) and math.isfinite(hi - lo)):
            raise InvalidRangeError(f"not a finite range: {lo}..{hi}")
        if not lo < hi:
            raise InvalidRangeError(f"an empty range: {lo}..{hi}")
        return cls(lo, hi)

    @classmethod
    def categorical(cls, size: int) -> "Range":
        if isinstance(size, bool) or not isinstance(size, numbers.Integral):
            raise InvalidRangeError(f"categorical size must be an integer, got {size!r}")
        if size <= 0:
            raise InvalidRangeError(f"categorical size must be positive, got {size}")
        return cls(0.0, float(size), int(size))

    @property
    def is_categorical(self) -> bool:
        return self.size is not None

    @property
    def width(self) -> float:
        return self.high - self.low

    @property
    def midpoint(self) -> float:
        return (self.low + self.high) * 0.5

    def contains(self, value: Any) -> bool:
        if isinstance(value, bool):
            return False
        if self.is_categorical:
            if isinstance(value, numbers.Integral):
                return 0 <= int(value) < self.size
            if isinstance(value, numbers.Real):
                v = float(value)
                return math.isfinite(v) and v.is_integer() and 0 <= v < self.size
            return False
        if not isinstance(value, numbers.Real):
            return False
        v = float(value)
        return self.low <= v < self.high

    def coerce(self, value: Any) -> float | int:
        """Native representation of an in-range value (``int`` for categories)."""
        if self.is_categorical:
            return int(value)
        return float(value)

    def __str__(self) -> str:
        if self.is_categorical:
            return f"{{0..{self.size - 1}}}"
        return f"{self.low}..{self.high}"


def make_continuous_range(low: float, high: float) -> Range:
    """Creates a continuous ``[low, high)`` range."""
    return Range.continuous(low, high)


def make_categorical_range(size: int) -> Range:
    """Creates a categorical range over ``{0, ..., size - 1}``."""
    return Range.categorical(size)


# Short aliases
continuous_range = make_continuous_range
categorical_range = make_categorical_range
