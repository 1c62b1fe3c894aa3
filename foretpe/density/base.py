from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence

import numpy as np

from ..range import Range


class DensityEstimator(ABC):
    """Density (or probability mass) over one parameter range."""

    param_range: Range

    @abstractmethod
    def log_pdf(self, x: Any) -> float:
        pass

    @abstractmethod
    def sample(self, rng: np.random.Generator) -> Any:
        pass

    def sample_many(self, rng: np.random.Generator, n: int) -> list:
        return [self.sample(rng) for _ in range(int(n))]


class EstimatorFactory(ABC):
    """Builds a fresh estimator from weighted observed values."""

    kind: str

    @abstractmethod
    def supports(self, param_range: Range) -> bool:
        pass

    @abstractmethod
    def build(
        self,
        values: Sequence[Any],
        weights: Optional[Sequence[float]],
        param_range: Range,
    ) -> DensityEstimator:
        pass
