from __future__ import annotations

import logging
import math
import numbers
from typing import Any, Dict, Optional, Tuple

import numpy as np

from .acquisition import AcquisitionStrategy, build_acquisition_strategy
from .config import TPEConf
from .density import DensityEstimator, EstimatorFactory, default_estimator_factory
from .exceptions import BuildError, ConfigError, InvalidObjectiveError, OutOfRangeError, SamplingError
from .gamma import GammaStrategy, build_gamma_strategy
from .observation import Observation, ObservationStore
from .range import Range
from .weighting import WeightingStrategy, build_weighting_strategy

__all__ = ["TpeOptimizer", "new_optimizer", "ask", "tell"]

logger = logging.getLogger(__name__)

_KNOWN_OPTIONS = frozenset(TPEConf().to_kwargs())


class TpeOptimizer:
    """
    Optimizer using TPE.

    Searches for the parameter value minimising the told objective. One
    instance handles exactly one parameter; to tune several parameters create
    one optimizer per parameter and tell each of them the same objective.

    Usage::

        opt = TpeOptimizer(parzen_estimator_factory(), make_continuous_range(-5.0, 5.0))
        rng = np.random.default_rng(0)
        for _ in range(100):
            x = opt.ask(rng)
            opt.tell(x, x ** 2)

    Estimators are rebuilt from the full history on every ``ask``; nothing is
    cached between calls. Instances are not thread-safe.
    """

    @classmethod
    def from_config(
        cls,
        factory: Optional[EstimatorFactory],
        param_range: Range,
        cfg: TPEConf,
        **overrides: Any,
    ) -> "TpeOptimizer":
        if not overrides:
            return cls(factory, param_range, conf=cfg)
        return cls(factory, param_range, conf=cfg.merged(**overrides))

    def __init__(
        self,
        factory: Optional[EstimatorFactory],
        param_range: Range,
        conf: Optional[TPEConf] = None,
        **overrides: Any,
    ):
        cfg = TPEConf() if conf is None else conf
        if overrides:
            cfg = cfg.merged(**overrides)
        opts = cfg.to_kwargs()
        unknown = sorted(set(opts) - _KNOWN_OPTIONS)
        if unknown:
            raise BuildError(f"unknown optimizer options: {', '.join(unknown)}")

        if not isinstance(param_range, Range):
            raise BuildError(f"param_range must be a Range, got {type(param_range).__name__}")
        if factory is None:
            factory = default_estimator_factory(param_range)
        if not factory.supports(param_range):
            raise BuildError(
                f"{type(factory).__name__} does not support the range {param_range}"
            )

        n_ei_candidates = opts.get("n_ei_candidates", 24)
        if (
            isinstance(n_ei_candidates, bool)
            or not isinstance(n_ei_candidates, numbers.Integral)
            or n_ei_candidates < 1
        ):
            raise BuildError("the value of `n_ei_candidates` must be a positive integer")

        try:
            self.gamma_strategy: GammaStrategy = build_gamma_strategy(
                opts.get("gamma", 0.25), opts.get("gamma_strategy", "fixed")
            )
            self.weighting: WeightingStrategy = build_weighting_strategy(
                opts.get("weight_strategy", "uniform"),
                time_weight_decay=opts.get("time_weight_decay", 0.02),
                weights_func=opts.get("weights_func", None),
            )
        except ConfigError as e:
            raise BuildError(str(e)) from e

        self.acquisition: AcquisitionStrategy = build_acquisition_strategy()
        self.conf = cfg
        self.n_ei_candidates = int(n_ei_candidates)
        self.verbose = bool(opts.get("verbose", False))
        self._factory = factory
        self._range = param_range
        self._store = ObservationStore()

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def param_range(self) -> Range:
        return self._range

    @property
    def factory(self) -> EstimatorFactory:
        return self._factory

    @property
    def history(self) -> Tuple[Observation, ...]:
        return self._store.observations

    @property
    def n_trials(self) -> int:
        return len(self._store)

    def __len__(self) -> int:
        return len(self._store)

    @property
    def best(self) -> Optional[Observation]:
        return self._store.best()

    # ------------------------------------------------------------------
    # Ask / tell
    # ------------------------------------------------------------------

    def build_estimators(self) -> Tuple[DensityEstimator, DensityEstimator]:
        """Good (``l``) and bad (``g``) estimators for the current history."""
        return self._estimators(self.gamma_strategy.n_good(len(self._store)))

    def _estimators(self, n_good: int) -> Tuple[DensityEstimator, DensityEstimator]:
        obs = self._store.observations
        weights = self.weighting.weights(obs) if obs else None
        split = self._store.split_good_bad(n_good, weights)
        good = self._factory.build(split.good_values, split.good_weights, self._range)
        bad = self._factory.build(split.bad_values, split.bad_weights, self._range)
        return good, bad

    def ask(self, rng: np.random.Generator) -> float | int:
        """
        Returns the next value of the parameter to be evaluated.

        ``rng`` is the only source of randomness: equal histories and equally
        seeded generators yield equal suggestions.
        """
        n_good = self.gamma_strategy.n_good(len(self._store))
        good, bad = self._estimators(n_good)

        candidates = good.sample_many(rng, self.n_ei_candidates)
        for c in candidates:
            if not self._range.contains(c):
                raise SamplingError(f"estimator produced {c!r} outside {self._range}")

        scores = self.acquisition.score_many(candidates, good, bad)
        if np.any(np.isnan(scores)):
            raise SamplingError("candidate scoring produced NaN")

        # np.argmax returns the first maximum, so ties go to the earliest draw
        best = int(np.argmax(scores))
        value = self._range.coerce(candidates[best])
        logger.log(
            logging.INFO if self.verbose else logging.DEBUG,
            "ask: n=%d n_good=%d value=%r score=%.4g",
            len(self._store),
            n_good,
            value,
            float(scores[best]),
        )
        return value

    def tell(self, value: Any, objective: float) -> None:
        """
        Tells the evaluation result of a parameter value to the optimizer.

        Raises:
            OutOfRangeError: ``value`` is not in the optimizer's range.
            InvalidObjectiveError: ``objective`` is NaN, infinite or not a number.
        """
        if not self._range.contains(value):
            raise OutOfRangeError(value, self._range)
        if isinstance(objective, bool):
            raise InvalidObjectiveError(objective)
        try:
            obj = float(objective)
        except (TypeError, ValueError) as e:
            raise InvalidObjectiveError(objective) from e
        if not math.isfinite(obj):
            raise InvalidObjectiveError(objective)

        self._store.append(self._range.coerce(value), obj)

    def diagnostics(self) -> Dict[str, Any]:
        n = len(self._store)
        best = self._store.best()
        out: Dict[str, Any] = {
            "observations": n,
            "n_good": int(self.gamma_strategy.n_good(n)),
            "estimator": getattr(self._factory, "kind", type(self._factory).__name__),
            "range": str(self._range),
            "gamma_strategy": repr(self.gamma_strategy),
            "weighting": repr(self.weighting),
            "n_ei_candidates": self.n_ei_candidates,
        }
        if best is not None:
            out.update({"best_value": best.value, "best_objective": best.objective})
        return out

    def __repr__(self) -> str:
        return (
            f"TpeOptimizer(range={self._range}, estimator={type(self._factory).__name__}, "
            f"trials={len(self._store)})"
        )


def new_optimizer(factory: Optional[EstimatorFactory], param_range: Range, **overrides: Any) -> TpeOptimizer:
    return TpeOptimizer(factory, param_range, **overrides)


def ask(optimizer: TpeOptimizer, rng: np.random.Generator) -> float | int:
    return optimizer.ask(rng)


def tell(optimizer: TpeOptimizer, value: Any, objective: float) -> None:
    optimizer.tell(value, objective)
