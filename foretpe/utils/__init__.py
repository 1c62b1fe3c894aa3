from .numerics import (
    clamp_int,
    log_truncated_mass,
    safe_normalize,
    weighted_index,
)

__all__ = [
    "clamp_int",
    "log_truncated_mass",
    "safe_normalize",
    "weighted_index",
]
