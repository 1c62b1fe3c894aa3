from __future__ import annotations

from typing import Any

from ..density import DensityEstimator
from .base import AcquisitionStrategy


class LogRatioAcquisition(AcquisitionStrategy):
    """
    TPE criterion ``log l(x) - log g(x)``.

    Maximising the density ratio of the good model ``l`` over the bad model
    ``g`` is equivalent to maximising expected improvement under the TPE
    factorisation.
    """

    def score(self, x: Any, good: DensityEstimator, bad: DensityEstimator) -> float:
        return float(good.log_pdf(x) - bad.log_pdf(x))
