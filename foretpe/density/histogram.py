from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

import numpy as np

from ..exceptions import ConfigError, OutOfRangeError, SamplingError
from ..range import Range
from ..utils import weighted_index
from .base import DensityEstimator, EstimatorFactory


@dataclass(frozen=True, eq=False)
class HistogramEstimator(DensityEstimator):
    """Laplace-smoothed probability mass over the categories of a range."""

    param_range: Range
    counts: np.ndarray
    weight_sums: np.ndarray
    probabilities: np.ndarray
    _cumulative: np.ndarray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if not (np.all(np.isfinite(self.probabilities)) and np.all(self.probabilities > 0)):
            raise SamplingError("histogram probabilities must be positive and finite")
        object.__setattr__(self, "_cumulative", np.cumsum(self.probabilities))

    @property
    def size(self) -> int:
        return int(self.probabilities.size)

    def probability(self, c: Any) -> float:
        if not self.param_range.contains(c):
            return 0.0
        return float(self.probabilities[int(c)])

    def log_pdf(self, c: Any) -> float:
        if not self.param_range.contains(c):
            return -math.inf
        return math.log(self.probabilities[int(c)])

    def sample(self, rng: np.random.Generator) -> int:
        return weighted_index(self._cumulative, float(rng.random()))


@dataclass
class HistogramEstimatorFactory(EstimatorFactory):
    """
    Builds :class:`HistogramEstimator` instances.

    Args:
        alpha: pseudo-count added to every category before normalising.
    """

    alpha: float = 1.0
    kind: str = field(default="histogram", init=False)

    def __post_init__(self) -> None:
        if not (math.isfinite(self.alpha) and self.alpha > 0):
            raise ConfigError(f"alpha must be a finite positive number, got {self.alpha}")

    def supports(self, param_range: Range) -> bool:
        return param_range.is_categorical

    def build(
        self,
        values: Sequence[int],
        weights: Optional[Sequence[float]],
        param_range: Range,
    ) -> HistogramEstimator:
        if not self.supports(param_range):
            raise ConfigError(f"histogram estimator needs a categorical range, got {param_range}")
        size = int(param_range.size)
        counts = np.zeros(size, dtype=float)
        weight_sums = np.zeros(size, dtype=float)

        values = list(values)
        if weights is None:
            weights = [1.0] * len(values)
        elif len(weights) != len(values):
            raise SamplingError(f"expected {len(values)} weights, got {len(weights)}")

        for v, w in zip(values, weights):
            if not param_range.contains(v):
                raise OutOfRangeError(v, param_range)
            w = float(w)
            if not (math.isfinite(w) and w > 0):
                raise SamplingError("observation weights must be positive and finite")
            counts[int(v)] += 1.0
            weight_sums[int(v)] += w

        smoothed = weight_sums + self.alpha
        probabilities = smoothed / float(np.sum(smoothed))
        return HistogramEstimator(param_range, counts, weight_sums, probabilities)
