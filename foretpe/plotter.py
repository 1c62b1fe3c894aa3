from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple

import numpy as np

try:
    import matplotlib.pyplot as plt
except ImportError:  # pragma: no cover - optional dependency
    plt = None

from .density import HistogramEstimator, ParzenEstimator
from .observation import Observation
from .range import Range


@dataclass
class PlotStyle:
    dpi: int = 150
    figsize: Tuple[float, float] = (6.4, 4.0)
    grid: bool = True
    best_color: str = "#1f77b4"
    scatter_color: str = "#444444"
    accent_color: str = "#e15759"


class OptimizationPlotter:
    """
    Lightweight plotting utilities for a single-parameter TPE run.

    Works from an optimizer or from a plain history of observations; every
    plot returns the matplotlib axes it drew on.
    """

    def __init__(
        self,
        history: Sequence[Observation],
        param_range: Range,
        style: Optional[PlotStyle] = None,
    ) -> None:
        self.history = list(history)
        self.param_range = param_range
        self.style = style or PlotStyle()

    @classmethod
    def from_optimizer(cls, optimizer: Any, style: Optional[PlotStyle] = None) -> "OptimizationPlotter":
        return cls(optimizer.history, optimizer.param_range, style=style)

    # ------------------------------------------------------------------
    # Core plots
    # ------------------------------------------------------------------

    def plot_optimization_history(
        self,
        ax: Optional[Any] = None,
        show_best: bool = True,
        title: str = "Optimization History",
        save_path: Optional[str] = None,
    ) -> Any:
        ax, fig = self._axes(ax)

        objectives = [o.objective for o in self.history if math.isfinite(o.objective)]
        xs = list(range(1, len(objectives) + 1))
        ax.plot(xs, objectives, color=self.style.scatter_color, linewidth=1.2, alpha=0.7)

        if show_best and objectives:
            best = np.minimum.accumulate(np.asarray(objectives, dtype=float))
            ax.plot(xs, best, color=self.style.best_color, linewidth=2.0, label="best so far")
            ax.legend(loc="best")

        ax.set_title(title)
        ax.set_xlabel("Trial")
        ax.set_ylabel("Objective")
        return self._finish(ax, fig, save_path)

    def plot_param_effect(
        self,
        ax: Optional[Any] = None,
        title: str = "Parameter Effect",
        save_path: Optional[str] = None,
    ) -> Any:
        ax, fig = self._axes(ax)
        ax.set_title(title)
        ax.set_xlabel("Value")
        ax.set_ylabel("Objective")
        if not self.history:
            return self._finish(ax, fig, save_path)

        xs = [o.value for o in self.history]
        ys = [o.objective for o in self.history]
        if self.param_range.is_categorical:
            cats = sorted(set(xs))
            data = [np.asarray([y for x, y in zip(xs, ys) if x == c], dtype=float) for c in cats]
            ax.boxplot(data, showfliers=False)
            ax.set_xticks(list(range(1, len(cats) + 1)))
            ax.set_xticklabels([str(c) for c in cats])
        else:
            ax.scatter(xs, ys, s=16, color=self.style.scatter_color, alpha=0.6)
            ax.set_xlim(self.param_range.low, self.param_range.high)
        return self._finish(ax, fig, save_path)

    def plot_densities(
        self,
        good: Any,
        bad: Any,
        ax: Optional[Any] = None,
        title: str = "Good vs Bad Density",
        resolution: int = 256,
        save_path: Optional[str] = None,
    ) -> Any:
        """Draws the good (``l``) and bad (``g``) estimators side by side."""
        ax, fig = self._axes(ax)

        if isinstance(good, HistogramEstimator) and isinstance(bad, HistogramEstimator):
            idx = np.arange(good.size)
            ax.bar(idx - 0.2, good.probabilities, width=0.4, color=self.style.best_color, label="good")
            ax.bar(idx + 0.2, bad.probabilities, width=0.4, color=self.style.accent_color, label="bad")
            ax.set_xticks(list(idx))
            ax.set_ylabel("Probability")
        elif isinstance(good, ParzenEstimator) and isinstance(bad, ParzenEstimator):
            lo, hi = self.param_range.low, self.param_range.high
            grid = np.linspace(lo, hi, int(resolution), endpoint=False)
            ax.plot(grid, np.exp(good.log_pdf_many(grid)), color=self.style.best_color, label="good")
            ax.plot(grid, np.exp(bad.log_pdf_many(grid)), color=self.style.accent_color, label="bad")
            ax.set_ylabel("Density")
        else:
            raise TypeError(
                f"cannot plot estimators of types {type(good).__name__} / {type(bad).__name__}"
            )

        ax.legend(loc="best")
        ax.set_title(title)
        ax.set_xlabel("Value")
        return self._finish(ax, fig, save_path)

    def best_so_far(self) -> List[float]:
        objectives = [o.objective for o in self.history]
        if not objectives:
            return []
        return [float(v) for v in np.minimum.accumulate(np.asarray(objectives, dtype=float))]

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _axes(self, ax: Optional[Any]) -> Tuple[Any, Any]:
        self._ensure_matplotlib()
        if ax is None:
            fig, ax = plt.subplots(figsize=self.style.figsize, dpi=self.style.dpi)
        else:
            fig = ax.figure
        return ax, fig

    def _finish(self, ax: Any, fig: Any, save_path: Optional[str]) -> Any:
        if self.style.grid:
            ax.grid(True, alpha=0.25)
        if save_path:
            fig.savefig(save_path, bbox_inches="tight")
        return ax

    def _ensure_matplotlib(self) -> None:
        if plt is None:
            raise RuntimeError("matplotlib is required for plotting.")
