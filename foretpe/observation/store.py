from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np


@dataclass(frozen=True)
class Observation:
    value: float | int
    objective: float
    index: int


@dataclass(frozen=True)
class Split:
    good: Tuple[Observation, ...]
    bad: Tuple[Observation, ...]
    good_weights: np.ndarray
    bad_weights: np.ndarray

    @property
    def good_values(self) -> List[float | int]:
        return [o.value for o in self.good]

    @property
    def bad_values(self) -> List[float | int]:
        return [o.value for o in self.bad]


@dataclass
class ObservationStore:
    """Append-only trial history, kept in evaluation order."""

    _observations: List[Observation] = field(default_factory=list)

    def append(self, value: float | int, objective: float) -> Observation:
        obs = Observation(value, float(objective), len(self._observations))
        self._observations.append(obs)
        return obs

    @property
    def observations(self) -> Tuple[Observation, ...]:
        return tuple(self._observations)

    def __len__(self) -> int:
        return len(self._observations)

    def __iter__(self) -> Iterator[Observation]:
        return iter(tuple(self._observations))

    def best(self) -> Optional[Observation]:
        if not self._observations:
            return None
        return min(self._observations, key=lambda o: o.objective)

    def sort_for_split(self) -> List[int]:
        """Indices ordered by objective; ties keep insertion order."""
        return sorted(range(len(self._observations)), key=lambda i: self._observations[i].objective)

    def split_good_bad(self, n_good: int, weights: Optional[Sequence[float]] = None) -> Split:
        n = len(self._observations)
        w = np.ones(n, dtype=float) if weights is None else np.asarray(weights, dtype=float)
        if not self._observations:
            empty = np.empty(0, dtype=float)
            return Split((), (), empty, empty)
        k = int(max(1, min(n_good, n)))
        order = self.sort_for_split()
        good_idx, bad_idx = order[:k], order[k:]
        return Split(
            good=tuple(self._observations[i] for i in good_idx),
            bad=tuple(self._observations[i] for i in bad_idx),
            good_weights=w[good_idx],
            bad_weights=w[bad_idx] if bad_idx else np.empty(0, dtype=float),
        )
