"""
Residuals and the coefficient of determination.

Inputs are assumed validated (see GaussNewtonDesign.build).
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pygaussnewton.core.exceptions import DegenerateDataError, NumericalError
from pygaussnewton.core.protocols import Model


def compute_residuals(
    model: Model,
    x: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
    coefficients: NDArray[np.floating[Any]],
) -> NDArray[np.floating[Any]]:
    """
    r_i = y_i - f(x_i; c)

    Raises:
        NumericalError: If the model returns NaN or Inf at any sample
    """
    fitted = np.array(
        [model.evaluate(xi, coefficients) for xi in x], dtype=np.float64
    )
    if not np.all(np.isfinite(fitted)):
        bad = np.flatnonzero(~np.isfinite(fitted))
        raise NumericalError(
            f"{model.name!r} is non-finite at samples {bad.tolist()} "
            f"for coefficients {coefficients.tolist()}"
        )
    return y - fitted


def compute_rss(residuals: NDArray[np.floating[Any]]) -> float:
    """Residual sum of squares Σ r_i²."""
    return float(residuals @ residuals)


def compute_tss(y: NDArray[np.floating[Any]]) -> float:
    """Total sum of squares Σ (y_i - ȳ)²."""
    centered = y - np.mean(y)
    return float(centered @ centered)


def compute_r_squared(rss: float, y: NDArray[np.floating[Any]]) -> float:
    """
    R² = 1 - RSS/TSS.

    Negative values are valid: they mean the model fits worse than the
    constant mean(y).

    Constant y is detected on the values themselves. TSS of identical
    values need not be exactly 0 once mean(y) is rounded.

    Raises:
        DegenerateDataError: If every y value is identical
    """
    n = y.shape[0]
    if np.all(y == y[0]):
        raise DegenerateDataError(
            f"R-squared is undefined: all {n} y values are identical "
            f"(total sum of squares is 0)",
            statistic='r_squared',
            n_observations=n,
        )
    return 1.0 - rss / compute_tss(y)
