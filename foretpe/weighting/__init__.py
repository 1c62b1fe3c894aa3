from .base import WeightingStrategy
from .factory import WEIGHT_STRATEGIES, build_weighting_strategy
from .strategies import CallableWeighting, TimeDecayWeighting, UniformWeighting

__all__ = [
    "WEIGHT_STRATEGIES",
    "CallableWeighting",
    "TimeDecayWeighting",
    "UniformWeighting",
    "WeightingStrategy",
    "build_weighting_strategy",
]
