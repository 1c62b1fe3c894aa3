from __future__ import annotations

import math
from typing import Callable, Sequence

import numpy as np

from ..exceptions import ConfigError
from ..observation import Observation
from .base import WeightingStrategy


class UniformWeighting(WeightingStrategy):
    def weights(self, observations: Sequence[Observation]) -> np.ndarray:
        return np.ones(len(observations), dtype=float)

    def __repr__(self) -> str:
        return "UniformWeighting()"


class TimeDecayWeighting(WeightingStrategy):
    """
    Recency weighting ``exp(-decay * age)``.

    Age counts insertions since the observation, so the newest observation
    has age 0 and weight 1.
    """

    def __init__(self, decay: float = 0.02):
        decay = float(decay)
        if not (math.isfinite(decay) and decay >= 0):
            raise ConfigError(f"time_weight_decay must be a finite non-negative number, got {decay}")
        self.decay = decay

    def weights(self, observations: Sequence[Observation]) -> np.ndarray:
        if not observations:
            return np.empty(0, dtype=float)
        idx = np.asarray([o.index for o in observations], dtype=float)
        age = float(np.max(idx)) - idx
        # exp underflows to 0.0 once decay * age passes ~745
        return np.maximum(np.exp(-self.decay * age), np.finfo(float).tiny)

    def __repr__(self) -> str:
        return f"TimeDecayWeighting(decay={self.decay})"


class CallableWeighting(WeightingStrategy):
    def __init__(self, fn: Callable[[Sequence[Observation]], Sequence[float]]):
        self.fn = fn

    def weights(self, observations: Sequence[Observation]) -> np.ndarray:
        w = np.asarray(self.fn(observations), dtype=float).reshape(-1)
        if w.size != len(observations):
            raise ConfigError(
                f"weights_func returned {w.size} weights for {len(observations)} observations"
            )
        if not np.all(np.isfinite(w)) or np.any(w <= 0):
            raise ConfigError("weights_func must return positive, finite weights")
        return w

    def __repr__(self) -> str:
        return f"CallableWeighting({getattr(self.fn, '__name__', self.fn)!r})"
