from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

# -----------------------------------------------------------------------------
# Optimizer options (quick reference)
# -----------------------------------------------------------------------------
# Split: gamma (float in (0, 1] or callable n -> n_good), gamma_strategy
#        ("fixed" | "sqrt" | "linear" | "decay")
# Sampling: n_ei_candidates
# Weights: weight_strategy ("uniform" | "time_decay"), time_weight_decay,
#          weights_func (callable observations -> weights)
# Other: verbose
#
# Estimator settings (prior_weight, min_bandwidth_divisor,
# max_sampling_attempts, alpha) belong to the estimator factories.


@dataclass
class TPEConf:
    """
    Single config container for TpeOptimizer.
    Use with `TpeOptimizer.from_config(factory, param_range, conf)`.
    """

    gamma: Dict[str, Any] = field(
        default_factory=lambda: {
            "gamma": 0.25,
            "gamma_strategy": "fixed",
        }
    )
    sampling: Dict[str, Any] = field(
        default_factory=lambda: {
            "n_ei_candidates": 24,
        }
    )
    weights: Dict[str, Any] = field(
        default_factory=lambda: {
            "weight_strategy": "uniform",
            "time_weight_decay": 0.02,
            "weights_func": None,
        }
    )
    extra: Dict[str, Any] = field(default_factory=lambda: {"verbose": False})

    def to_kwargs(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        out.update(dict(self.gamma))
        out.update(dict(self.sampling))
        out.update(dict(self.weights))
        out.update(dict(self.extra))
        return out

    def merged(self, **overrides: Any) -> "TPEConf":
        merged = TPEConf(
            gamma=dict(self.gamma),
            sampling=dict(self.sampling),
            weights=dict(self.weights),
            extra=dict(self.extra),
        )
        merged.extra.update(overrides)
        return merged
