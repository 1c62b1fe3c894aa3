"""Probability density estimation over a single parameter range."""

from .base import DensityEstimator, EstimatorFactory
from .factory import (
    default_estimator_factory,
    histogram_estimator_factory,
    parzen_estimator_factory,
)
from .histogram import HistogramEstimator, HistogramEstimatorFactory
from .parzen import ParzenEstimator, ParzenEstimatorFactory

__all__ = [
    "DensityEstimator",
    "EstimatorFactory",
    "HistogramEstimator",
    "HistogramEstimatorFactory",
    "ParzenEstimator",
    "ParzenEstimatorFactory",
    "default_estimator_factory",
    "histogram_estimator_factory",
    "parzen_estimator_factory",
]
