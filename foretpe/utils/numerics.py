from __future__ import annotations

import numpy as np
from scipy.special import log_ndtr, ndtr


def safe_normalize(w: np.ndarray) -> np.ndarray:
    w = np.asarray(w, dtype=float)
    s = float(np.sum(w))
    if s > 1e-12:
        return w / s
    if w.size == 0:
        return w
    return np.full_like(w, 1.0 / float(len(w)))


def clamp_int(x: int, lo: int, hi: int) -> int:
    return int(min(max(x, lo), hi))


def weighted_index(cumulative: np.ndarray, u: float) -> int:
    """
    Index drawn by inverting a cumulative weight vector with a uniform ``u``.
    The last bucket absorbs rounding error in ``cumulative[-1]``.
    """
    idx = int(np.searchsorted(cumulative, u * cumulative[-1], side="right"))
    return min(idx, cumulative.size - 1)


def log_truncated_mass(
    means: np.ndarray, sigmas: np.ndarray, low: float, high: float
) -> np.ndarray:
    """
    log(Phi((high - m) / s) - Phi((low - m) / s)) per component.

    Evaluated on the side of the mean with the smaller tail so that kernels far
    from the centre of the domain keep their precision.
    """
    a = (low - means) / sigmas
    b = (high - means) / sigmas
    flip = a > 0
    lo_z = np.where(flip, -b, a)
    hi_z = np.where(flip, -a, b)
    mass = ndtr(hi_z) - ndtr(lo_z)
    with np.errstate(divide="ignore"):
        direct = np.log(mass)
    # log(Phi(hi) - Phi(lo)) = log Phi(hi) + log1p(-exp(log Phi(lo) - log Phi(hi)))
    log_hi = log_ndtr(hi_z)
    log_lo = log_ndtr(lo_z)
    with np.errstate(divide="ignore", invalid="ignore"):
        stable = log_hi + np.log1p(-np.exp(log_lo - log_hi))
    return np.where(mass > 1e-12, direct, stable)
