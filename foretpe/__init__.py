"""
foretpe: sequential hyperparameter optimization with the Tree-structured
Parzen Estimator.

One optimizer handles one parameter. Continuous parameters use a Parzen
(truncated-normal kernel mixture) estimator, categorical ones a Laplace
smoothed histogram::

    import numpy as np
    import foretpe

    choices = [1, 10, 100]
    opt_x = foretpe.TpeOptimizer(
        foretpe.parzen_estimator_factory(), foretpe.make_continuous_range(-5.0, 5.0)
    )
    opt_y = foretpe.TpeOptimizer(
        foretpe.histogram_estimator_factory(), foretpe.make_categorical_range(len(choices))
    )

    rng = np.random.default_rng(0)
    for _ in range(100):
        x, y = opt_x.ask(rng), opt_y.ask(rng)
        v = x ** 2 + choices[y]
        opt_x.tell(x, v)
        opt_y.tell(y, v)

References:

- Bergstra et al., "Algorithms for Hyper-Parameter Optimization", NeurIPS 2011.
- Bergstra et al., "Making a Science of Model Search: Hyperparameter
  Optimization in Hundreds of Dimensions for Vision Architectures", ICML 2013.
"""

from .config import TPEConf
from .density import (
    DensityEstimator,
    EstimatorFactory,
    HistogramEstimator,
    HistogramEstimatorFactory,
    ParzenEstimator,
    ParzenEstimatorFactory,
    default_estimator_factory,
    histogram_estimator_factory,
    parzen_estimator_factory,
)
from .exceptions import (
    BuildError,
    ConfigError,
    InvalidObjectiveError,
    InvalidRangeError,
    OutOfRangeError,
    SamplingError,
    TpeError,
)
from .observation import Observation, ObservationStore
from .optimizer import TpeOptimizer, ask, new_optimizer, tell
from .plotter import OptimizationPlotter, PlotStyle
from .range import (
    Range,
    categorical_range,
    continuous_range,
    make_categorical_range,
    make_continuous_range,
)

__version__ = "0.1.0"

__all__ = [
    "BuildError",
    "ConfigError",
    "DensityEstimator",
    "EstimatorFactory",
    "HistogramEstimator",
    "HistogramEstimatorFactory",
    "InvalidObjectiveError",
    "InvalidRangeError",
    "Observation",
    "ObservationStore",
    "OptimizationPlotter",
    "OutOfRangeError",
    "ParzenEstimator",
    "ParzenEstimatorFactory",
    "PlotStyle",
    "Range",
    "SamplingError",
    "TPEConf",
    "TpeError",
    "TpeOptimizer",
    "ask",
    "categorical_range",
    "continuous_range",
    "default_estimator_factory",
    "histogram_estimator_factory",
    "make_categorical_range",
    "make_continuous_range",
    "new_optimizer",
    "parzen_estimator_factory",
    "tell",
]
