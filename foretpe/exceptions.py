"""
foretpe exception hierarchy.

TpeError (base, Exception)
├── InvalidRangeError(TpeError, ValueError)      ← bad domain parameters
├── OutOfRangeError(TpeError, ValueError)        ← tell() value outside the range
├── InvalidObjectiveError(TpeError, ValueError)  ← NaN / infinite objective
├── SamplingError(TpeError, RuntimeError)        ← numeric failure inside ask()
└── ConfigError(TpeError, ValueError)            ← optimizer / estimator settings
    └── BuildError(ConfigError)                  ← optimizer construction

The ValueError / RuntimeError bases keep plain ``except ValueError`` blocks
working for callers that do not care about the finer distinction.
"""

from __future__ import annotations

from typing import Any


class TpeError(Exception):
    """Base exception for all foretpe errors."""


class InvalidRangeError(TpeError, ValueError):
    """A parameter domain could not be constructed."""


class OutOfRangeError(TpeError, ValueError):
    """A told value does not belong to the optimizer's range."""

    def __init__(self, value: Any, param_range: Any):
        self.value = value
        self.range = param_range
        super().__init__(f"the parameter value {value!r} is out of the range {param_range}")


class InvalidObjectiveError(TpeError, ValueError):
    """A told objective is NaN, infinite or not a number."""

    def __init__(self, objective: Any):
        self.objective = objective
        super().__init__(f"objective must be a finite number, got {objective!r}")


class SamplingError(TpeError, RuntimeError):
    """Estimator fitting or sampling could not produce a finite value."""


class ConfigError(TpeError, ValueError):
    """Invalid optimizer, weighting or estimator setting."""


class BuildError(ConfigError):
    """TpeOptimizer could not be built from the given settings."""
