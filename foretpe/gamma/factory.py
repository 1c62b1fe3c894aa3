from __future__ import annotations

from typing import Any

from .base import GammaStrategy
from .default import DefaultGammaStrategy


def build_gamma_strategy(gamma: Any, gamma_strategy: str = "fixed") -> GammaStrategy:
    if isinstance(gamma, GammaStrategy):
        return gamma
    return DefaultGammaStrategy(gamma, gamma_strategy)
