"""
Gauss-Newton step types.

Contains the parameter payload and user-facing solution wrapper for one
refinement step.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pygaussnewton.core.result import Result

if TYPE_CHECKING:
    from pygaussnewton.regression.design import GaussNewtonDesign


@dataclass(frozen=True)
class StepParams:
    """
    Parameter payload for one Gauss-Newton step.

    This is the immutable data computed by backends. residuals and rss
    are measured at previous_coefficients, the point the step was
    linearized around.
    """
    coefficients: NDArray[np.floating[Any]]
    previous_coefficients: NDArray[np.floating[Any]]
    delta: NDArray[np.floating[Any]]
    residuals: NDArray[np.floating[Any]]
    rss: float


@dataclass
class StepSolution:
    """
    User-facing result of one refinement step.

    Wraps the backend Result and exposes what a caller needs to decide
    whether to keep iterating: the new estimate, the step taken, and the
    residual sum of squares before the step.
    """
    _result: Result[StepParams]
    _design: 'GaussNewtonDesign'

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        """Refined coefficients c + Δ."""
        return self._result.params.coefficients

    @property
    def previous_coefficients(self) -> NDArray[np.floating[Any]]:
        return self._result.params.previous_coefficients

    @property
    def delta(self) -> NDArray[np.floating[Any]]:
        return self._result.params.delta

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._result.params.residuals

    @property
    def rss(self) -> float:
        return self._result.params.rss

    @property
    def max_abs_delta(self) -> float:
        """Largest absolute coefficient change, ||Δ||_∞."""
        return float(np.max(np.abs(self.delta)))

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Generate a plain-text summary of the step."""
        lines = [
            "Gauss-Newton Step",
            "=" * 60,
            f"Model: {self.info.get('model', '?')}",
            f"Observations: {self._design.n}",
            f"Coefficients: {len(self.coefficients)}",
            f"RSS (before step): {self.rss:.6g}",
            f"Max |delta|: {self.max_abs_delta:.6g}",
            "",
            f"{'Index':<8} {'Previous':>16} {'Delta':>16} {'Refined':>16}",
            "-" * 60,
        ]

        for i, (prev, d, new) in enumerate(zip(
            self.previous_coefficients, self.delta, self.coefficients
        )):
            lines.append(f"  c[{i}]: {prev:16.8g} {d:16.8g} {new:16.8g}")

        lines.append("-" * 60)
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.6f}s")
        for w in self.warnings:
            lines.append(f"Warning: {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"StepSolution(n={self._design.n}, p={len(self.coefficients)}, "
            f"rss={self.rss:.4g}, max_abs_delta={self.max_abs_delta:.4g})"
        )
