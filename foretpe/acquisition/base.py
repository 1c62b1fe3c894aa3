from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Sequence

import numpy as np

from ..density import DensityEstimator


class AcquisitionStrategy(ABC):
    @abstractmethod
    def score(self, x: Any, good: DensityEstimator, bad: DensityEstimator) -> float:
        pass

    def score_many(
        self, xs: Sequence[Any], good: DensityEstimator, bad: DensityEstimator
    ) -> np.ndarray:
        return np.asarray([self.score(x, good, bad) for x in xs], dtype=float)
