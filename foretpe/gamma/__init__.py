from .base import GammaStrategy
from .default import GAMMA_STRATEGIES, DefaultGammaStrategy
from .factory import build_gamma_strategy

__all__ = ["GAMMA_STRATEGIES", "GammaStrategy", "DefaultGammaStrategy", "build_gamma_strategy"]
