from __future__ import annotations

from typing import Any

from ..range import Range
from .base import EstimatorFactory
from .histogram import HistogramEstimatorFactory
from .parzen import ParzenEstimatorFactory


def parzen_estimator_factory(**kwargs: Any) -> ParzenEstimatorFactory:
    """Factory of Parzen estimators (continuous ranges)."""
    return ParzenEstimatorFactory(**kwargs)


def histogram_estimator_factory(**kwargs: Any) -> HistogramEstimatorFactory:
    """Factory of histogram estimators (categorical ranges)."""
    return HistogramEstimatorFactory(**kwargs)


def default_estimator_factory(param_range: Range) -> EstimatorFactory:
    if param_range.is_categorical:
        return HistogramEstimatorFactory()
    return ParzenEstimatorFactory()
