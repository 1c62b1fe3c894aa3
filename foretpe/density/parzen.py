from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

import numpy as np
from scipy.special import logsumexp
from scipy.stats import norm

from ..exceptions import ConfigError, OutOfRangeError, SamplingError
from ..range import Range
from ..utils import log_truncated_mass, safe_normalize, weighted_index
from .base import DensityEstimator, EstimatorFactory


@dataclass(frozen=True, eq=False)
class ParzenEstimator(DensityEstimator):
    """
    Parzen window density over a continuous range.

    A weighted mixture of normal kernels, each truncated to ``[low, high)`` and
    renormalised there. With no kernels the estimator is uniform on the range.
    """

    param_range: Range
    means: np.ndarray
    sigmas: np.ndarray
    weights: np.ndarray
    max_sampling_attempts: int = 1000
    _log_coef: np.ndarray = field(init=False, repr=False)
    _cumulative: np.ndarray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.means.size == 0:
            object.__setattr__(self, "_log_coef", np.empty(0))
            object.__setattr__(self, "_cumulative", np.empty(0))
            return
        log_mass = log_truncated_mass(
            self.means, self.sigmas, self.param_range.low, self.param_range.high
        )
        with np.errstate(divide="ignore"):
            log_coef = np.log(self.weights) - np.log(self.sigmas) - log_mass
        if not np.all(np.isfinite(log_coef)):
            raise SamplingError("parzen kernels produced non-finite normalisers")
        object.__setattr__(self, "_log_coef", log_coef)
        object.__setattr__(self, "_cumulative", np.cumsum(self.weights))

    @classmethod
    def uniform(cls, param_range: Range, max_sampling_attempts: int = 1000) -> "ParzenEstimator":
        empty = np.empty(0, dtype=float)
        return cls(param_range, empty, empty, empty, max_sampling_attempts)

    @property
    def is_uniform(self) -> bool:
        return self.means.size == 0

    @property
    def n_components(self) -> int:
        return int(self.means.size)

    def log_pdf(self, x: Any) -> float:
        if not self.param_range.contains(x):
            return -math.inf
        if self.is_uniform:
            return -math.log(self.param_range.width)
        z = (float(x) - self.means) / self.sigmas
        return float(logsumexp(self._log_coef + norm.logpdf(z)))

    def log_pdf_many(self, xs: Sequence[float]) -> np.ndarray:
        x = np.asarray(xs, dtype=float)
        inside = (x >= self.param_range.low) & (x < self.param_range.high)
        out = np.full(x.shape, -np.inf)
        if self.is_uniform:
            out[inside] = -math.log(self.param_range.width)
            return out
        z = (x[inside, None] - self.means[None, :]) / self.sigmas[None, :]
        out[inside] = logsumexp(self._log_coef[None, :] + norm.logpdf(z), axis=1)
        return out

    def sample(self, rng: np.random.Generator) -> float:
        lo, hi = self.param_range.low, self.param_range.high
        if self.is_uniform:
            x = lo + float(rng.random()) * self.param_range.width
            # u * width can round up to ``high`` for u close to 1
            return x if x < hi else float(np.nextafter(hi, lo))

        i = weighted_index(self._cumulative, float(rng.random()))
        mu, sigma = float(self.means[i]), float(self.sigmas[i])
        for _ in range(self.max_sampling_attempts):
            x = mu + sigma * float(rng.standard_normal())
            if lo <= x < hi:
                return x
        raise SamplingError(
            f"no draw inside {self.param_range} after {self.max_sampling_attempts} attempts "
            f"(kernel mean={mu}, sigma={sigma})"
        )


@dataclass
class ParzenEstimatorFactory(EstimatorFactory):
    """
    Builds :class:`ParzenEstimator` instances.

    Args:
        prior_weight: weight of the wide prior kernel at the range midpoint, in
            units of the mean observation weight. ``0`` disables the prior.
        min_bandwidth_divisor: kernel widths are floored at
            ``width / min(min_bandwidth_divisor, 1 + n)``.
        max_sampling_attempts: rejected draws tolerated per sample.
    """

    prior_weight: float = 1.0
    min_bandwidth_divisor: float = 100.0
    max_sampling_attempts: int = 1000
    kind: str = field(default="parzen", init=False)

    def __post_init__(self) -> None:
        if not (math.isfinite(self.prior_weight) and self.prior_weight >= 0):
            raise ConfigError(f"prior_weight must be a finite non-negative number, got {self.prior_weight}")
        if not (math.isfinite(self.min_bandwidth_divisor) and self.min_bandwidth_divisor >= 1.0):
            raise ConfigError(
                f"min_bandwidth_divisor must be a finite number >= 1, got {self.min_bandwidth_divisor}"
            )
        if int(self.max_sampling_attempts) < 1:
            raise ConfigError("max_sampling_attempts must be a positive integer")
        self.max_sampling_attempts = int(self.max_sampling_attempts)

    def supports(self, param_range: Range) -> bool:
        return not param_range.is_categorical

    def build(
        self,
        values: Sequence[float],
        weights: Optional[Sequence[float]],
        param_range: Range,
    ) -> ParzenEstimator:
        if not self.supports(param_range):
            raise ConfigError(f"parzen estimator needs a continuous range, got {param_range}")
        vals = np.asarray(values, dtype=float).reshape(-1)
        if vals.size == 0:
            return ParzenEstimator.uniform(param_range, self.max_sampling_attempts)
        for v in vals:
            if not param_range.contains(v):
                raise OutOfRangeError(float(v), param_range)

        w = _as_weights(weights, vals.size)
        order = np.argsort(vals, kind="stable")
        mus = vals[order]
        w = w[order]

        sigmas = self._bandwidths(mus, param_range)
        if self.prior_weight > 0:
            mus = np.append(mus, param_range.midpoint)
            sigmas = np.append(sigmas, param_range.width)
            w = np.append(w, self.prior_weight * float(np.mean(w)))

        return ParzenEstimator(
            param_range,
            mus,
            sigmas,
            safe_normalize(w),
            self.max_sampling_attempts,
        )

    def _bandwidths(self, mus: np.ndarray, param_range: Range) -> np.ndarray:
        n = mus.size
        left = np.concatenate(([param_range.low], mus[:-1]))
        right = np.concatenate((mus[1:], [param_range.high]))
        sigmas = np.maximum(mus - left, right - mus)

        width = param_range.width
        min_bw = width / min(self.min_bandwidth_divisor, 1.0 + n)
        return np.clip(sigmas, min_bw, width)


def _as_weights(weights: Optional[Sequence[float]], n: int) -> np.ndarray:
    if weights is None:
        return np.ones(n, dtype=float)
    w = np.asarray(weights, dtype=float).reshape(-1)
    if w.size != n:
        raise SamplingError(f"expected {n} weights, got {w.size}")
    if not np.all(np.isfinite(w)) or np.any(w <= 0):
        raise SamplingError("observation weights must be positive and finite")
    return w
