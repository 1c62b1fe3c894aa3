from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

import numpy as np

from ..observation import Observation


class WeightingStrategy(ABC):
    @abstractmethod
    def weights(self, observations: Sequence[Observation]) -> np.ndarray:
        """One positive, finite weight per observation, aligned with the input."""
