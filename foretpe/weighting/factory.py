from __future__ import annotations

from typing import Any, Callable, Optional

from ..exceptions import ConfigError
from .base import WeightingStrategy
from .strategies import CallableWeighting, TimeDecayWeighting, UniformWeighting

WEIGHT_STRATEGIES = ("uniform", "time_decay")


def build_weighting_strategy(
    weight_strategy: Any = "uniform",
    *,
    time_weight_decay: float = 0.02,
    weights_func: Optional[Callable] = None,
) -> WeightingStrategy:
    if weights_func is not None:
        return CallableWeighting(weights_func)
    if isinstance(weight_strategy, WeightingStrategy):
        return weight_strategy
    key = str(weight_strategy or "uniform").lower()
    if key == "uniform":
        return UniformWeighting()
    if key == "time_decay":
        return TimeDecayWeighting(time_weight_decay)
    raise ConfigError(
        f"unknown weight_strategy {weight_strategy!r}, expected one of {WEIGHT_STRATEGIES}"
    )
