"""
Solver dispatch for Gauss-Newton regression.

This module provides the public API: one refinement step (refine, step),
a caller-driven stream of steps (iterate), and goodness of fit
(r_squared and the sums of squares it is built from).

There is deliberately no fit() that loops until convergence. How many
steps to take and when to stop is a caller decision.
"""

from __future__ import annotations

from typing import Any, Iterator
import warnings
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pygaussnewton.core.protocols import Model
from pygaussnewton.core.compute.tolerances import DEFAULT_PIVOT_TOL
from pygaussnewton.core.validation import (
    check_array,
    check_1d,
    check_finite,
    check_length,
    check_min_samples,
)
from pygaussnewton.models import resolve_model
from pygaussnewton.regression.design import GaussNewtonDesign
from pygaussnewton.regression.solution import StepSolution
from pygaussnewton.regression.backends.cpu import CPUGaussNewtonBackend
from pygaussnewton.regression._goodness import (
    compute_residuals,
    compute_rss,
    compute_tss,
    compute_r_squared,
)


def refine(
    model: str | Model,
    x: ArrayLike,
    y: ArrayLike,
    coefficients: ArrayLike,
    *,
    tol: float = DEFAULT_PIVOT_TOL,
) -> NDArray[np.floating[Any]]:
    """
    Refine coefficients by one Gauss-Newton step.

    Computes c + Δ where (J'J) Δ = J'r, J is the Jacobian of the model at
    c and r = y - f(x; c). Call repeatedly, feeding each result back in,
    until your own stopping rule is satisfied.

    Args:
        model: A Model instance or a registered model name
        x: Sample abscissae (n,)
        y: Sample ordinates (n,)
        coefficients: Current estimate (m,), m = model.n_parameters.
            Never modified; a new array is returned.
        tol: Pivot tolerance for the elimination (0.0 = exact zero test)

    Returns:
        New coefficient vector (m,)

    Raises:
        ValidationError: If inputs are invalid
        DimensionError: If len(x) != len(y) or len(coefficients) != m
        SingularMatrixError: If J'J is singular
        NumericalError: If the model is non-finite at some sample

    Example:
        >>> import numpy as np
        >>> from pygaussnewton.models import Exponential
        >>> from pygaussnewton.regression import refine
        >>>
        >>> x = np.array([0.0, 1.0, 2.0, 3.0])
        >>> y = np.exp(x)
        >>> c = np.array([1.1, 0.9])
        >>> for _ in range(20):
        ...     c = refine(Exponential(), x, y, c)
    """
    model_obj, design, c = _prepare(model, x, y, coefficients)
    _warn_if_underdetermined(design, model_obj)
    return _step(model_obj, design, c, tol).coefficients


def step(
    model: str | Model,
    x: ArrayLike,
    y: ArrayLike,
    coefficients: ArrayLike,
    *,
    tol: float = DEFAULT_PIVOT_TOL,
) -> StepSolution:
    """
    Take one Gauss-Newton step and report diagnostics.

    Same computation as refine(), wrapped in a StepSolution carrying the
    step Δ, residuals and RSS at the starting point, and timing. These are
    the inputs to typical stopping rules (max |Δ| below a threshold,
    relative RSS change, fixed step count).

    Args:
        model: A Model instance or a registered model name
        x: Sample abscissae (n,)
        y: Sample ordinates (n,)
        coefficients: Current estimate (m,)
        tol: Pivot tolerance for the elimination

    Returns:
        StepSolution for this step

    Raises:
        Same as refine()
    """
    # === Input Validation ===
    # This is the boundary - validate here, trust everywhere else
    model_obj, design, c = _prepare(model, x, y, coefficients)
    _warn_if_underdetermined(design, model_obj)
    return _step(model_obj, design, c, tol)


def iterate(
    model: str | Model,
    x: ArrayLike,
    y: ArrayLike,
    coefficients: ArrayLike,
    *,
    tol: float = DEFAULT_PIVOT_TOL,
) -> Iterator[StepSolution]:
    """
    Yield successive Gauss-Newton steps, without end.

    Each step starts from the previous step's coefficients. The generator
    never stops on its own: break out of the loop, or bound it with
    itertools.islice, when your stopping rule is met. Any error raised
    by a step propagates out of the generator at that step.

    Inputs are validated once, before the first step.

    Example:
        >>> for s in iterate(Exponential(), x, y, [1.0, 1.0]):
        ...     if s.max_abs_delta < 1e-10 or s.info['iteration'] >= 50:
        ...         break
        >>> s.coefficients

    Yields:
        StepSolution per step; info['iteration'] counts from 1
    """
    model_obj, design, c = _prepare(model, x, y, coefficients)
    _warn_if_underdetermined(design, model_obj)

    backend = CPUGaussNewtonBackend(model_obj, tol=tol)
    iteration = 0
    while True:
        iteration += 1
        result = backend.solve(design, c)
        result.info['iteration'] = iteration
        solution = StepSolution(_result=result, _design=design)
        yield solution
        c = solution.coefficients


def residuals(
    model: str | Model,
    x: ArrayLike,
    y: ArrayLike,
    coefficients: ArrayLike,
) -> NDArray[np.floating[Any]]:
    """Residuals y_i - f(x_i; c), shape (n,)."""
    model_obj, design, c = _prepare(model, x, y, coefficients)
    return compute_residuals(model_obj, design.x, design.y, c)


def residual_sum_of_squares(
    model: str | Model,
    x: ArrayLike,
    y: ArrayLike,
    coefficients: ArrayLike,
) -> float:
    """RSS = Σ (y_i - f(x_i; c))²."""
    return compute_rss(residuals(model, x, y, coefficients))


def total_sum_of_squares(y: ArrayLike) -> float:
    """TSS = Σ (y_i - ȳ)²."""
    y_arr = check_array(y, 'y')
    if y_arr.ndim == 2 and y_arr.shape[1] == 1:
        y_arr = y_arr.ravel()
    check_1d(y_arr, 'y')
    check_min_samples(y_arr, 1, 'y')
    check_finite(y_arr, 'y')
    return compute_tss(y_arr)


def r_squared(
    model: str | Model,
    x: ArrayLike,
    y: ArrayLike,
    coefficients: ArrayLike,
) -> float:
    """
    Coefficient of determination for a set of coefficients.

    R² = 1 - RSS/TSS with RSS = Σ (y_i - f(x_i; c))² and
    TSS = Σ (y_i - ȳ)². Usually in [0, 1]; a negative value means the
    model fits worse than the constant mean(y) and is a valid result.

    Args:
        model: A Model instance or a registered model name
        x: Sample abscissae (n,)
        y: Sample ordinates (n,)
        coefficients: Coefficients to evaluate (m,)

    Returns:
        R² as a float

    Raises:
        ValidationError: If inputs are invalid
        DimensionError: If lengths are inconsistent
        DegenerateDataError: If every y value is identical
        NumericalError: If the model is non-finite at some sample
    """
    model_obj, design, c = _prepare(model, x, y, coefficients)
    rss = compute_rss(compute_residuals(model_obj, design.x, design.y, c))
    return compute_r_squared(rss, design.y)


def _step(
    model: Model,
    design: GaussNewtonDesign,
    coefficients: NDArray[np.floating[Any]],
    tol: float,
) -> StepSolution:
    """Run one step on validated inputs and wrap the result."""
    backend = CPUGaussNewtonBackend(model, tol=tol)
    result = backend.solve(design, coefficients)
    return StepSolution(_result=result, _design=design)


def _warn_if_underdetermined(design: GaussNewtonDesign, model: Model) -> None:
    """Warn (at the public caller's frame) when n < m."""
    if design.n < model.n_parameters:
        warnings.warn(
            f"Fewer observations ({design.n}) than coefficients "
            f"({model.n_parameters}); J'J is likely singular.",
            UserWarning,
            stacklevel=3,
        )


def _prepare(
    model: str | Model,
    x: ArrayLike,
    y: ArrayLike,
    coefficients: ArrayLike,
) -> tuple[Model, GaussNewtonDesign, NDArray[np.floating[Any]]]:
    """
    Validate public inputs.

    Returns:
        (model, design, coefficients) with coefficients as a private
        float64 copy of length model.n_parameters

    Raises:
        ValidationError / DimensionError on bad input
        TypeError, ValueError: If the model cannot be resolved
    """
    model_obj = resolve_model(model)
    design = GaussNewtonDesign.build(x, y)

    c = check_array(coefficients, 'coefficients')
    check_1d(c, 'coefficients')
    check_length(c, model_obj.n_parameters, 'coefficients')
    check_finite(c, 'coefficients')

    return model_obj, design, c
