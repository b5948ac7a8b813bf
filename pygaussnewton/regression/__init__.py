"""
Non-linear least squares by Gauss-Newton iteration.

Public API:
    refine(model, x, y, c) -> ndarray        one step, new coefficients
    step(model, x, y, c) -> StepSolution     one step with diagnostics
    iterate(model, x, y, c)                  endless stream of steps
    r_squared(model, x, y, c) -> float       coefficient of determination

The engine never decides when to stop. Callers run their own loop with
their own rule (fixed step count, |Δ| threshold, R² threshold).

Example:
    >>> from pygaussnewton.models import Exponential
    >>> from pygaussnewton.regression import refine, r_squared
    >>> c = [1.0, 1.0]
    >>> for _ in range(10):
    ...     c = refine(Exponential(), x, y, c)
    >>> r_squared(Exponential(), x, y, c)
"""

from pygaussnewton.regression.design import GaussNewtonDesign
from pygaussnewton.regression.solution import StepSolution, StepParams
from pygaussnewton.regression.solvers import (
    refine,
    step,
    iterate,
    r_squared,
    residuals,
    residual_sum_of_squares,
    total_sum_of_squares,
)

__all__ = [
    "refine",
    "step",
    "iterate",
    "r_squared",
    "residuals",
    "residual_sum_of_squares",
    "total_sum_of_squares",
    "GaussNewtonDesign",
    "StepSolution",
    "StepParams",
]
