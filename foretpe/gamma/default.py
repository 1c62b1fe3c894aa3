from __future__ import annotations

import math
from typing import Any

from ..exceptions import ConfigError
from ..utils import clamp_int
from .base import GammaStrategy

GAMMA_STRATEGIES = ("fixed", "sqrt", "linear", "decay")


class DefaultGammaStrategy(GammaStrategy):
    """
    Size of the good subset for ``n_obs`` observations.

    ``gamma`` is either a fraction in ``(0, 1]`` or a callable
    ``n_obs -> n_good``. The result is always clamped into ``[1, n_obs]`` so
    the good subset is never empty once there is data.
    """

    def __init__(self, gamma: Any = 0.25, gamma_strategy: str = "fixed"):
        self.gamma = gamma
        self.gamma_strategy = str(gamma_strategy).lower()
        if self.gamma_strategy not in GAMMA_STRATEGIES:
            raise ConfigError(
                f"unknown gamma_strategy {gamma_strategy!r}, expected one of {GAMMA_STRATEGIES}"
            )
        if not callable(gamma):
            try:
                g = float(gamma)
            except (TypeError, ValueError) as e:
                raise ConfigError(f"gamma must be a number or a callable, got {gamma!r}") from e
            if not (0.0 < g <= 1.0):
                raise ConfigError("the value of `gamma` must be in the range (0.0, 1.0]")
            self.gamma = g

    def n_good(self, n_obs: int) -> int:
        if n_obs <= 0:
            return 0
        return clamp_int(self._raw_n_good(n_obs), 1, n_obs)

    def _raw_n_good(self, n_obs: int) -> int:
        if callable(self.gamma):
            return int(self.gamma(n_obs))
        if self.gamma_strategy == "sqrt":
            return int(math.ceil(math.sqrt(n_obs)))
        if self.gamma_strategy == "linear":
            # start conservative, widen the good set as data grows
            gamma_frac = min(0.25, max(0.08, 0.08 + 0.0015 * n_obs))
            return int(math.ceil(gamma_frac * n_obs))
        if self.gamma_strategy == "decay":
            curr_gamma = max(0.10, 0.25 - 0.0008 * n_obs)
            return int(math.ceil(curr_gamma * n_obs))
        return int(math.ceil(self.gamma * n_obs))

    def __repr__(self) -> str:
        return f"DefaultGammaStrategy(gamma={self.gamma!r}, gamma_strategy={self.gamma_strategy!r})"
