"""
Gauss-Newton Design.

Design holds the validated sample set (x, y) a model is fitted to. It is
built once at the public boundary and trusted everywhere after that, so
the engine never re-checks lengths or finiteness.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pygaussnewton.core.validation import (
    check_array,
    check_finite,
    check_1d,
    check_consistent_length,
    check_min_samples,
)


@dataclass(frozen=True)
class GaussNewtonDesign:
    """
    Sample set for non-linear least squares.

    Immutable after construction. The arrays are private float64 copies,
    so later changes to the caller's data do not leak in.

    Construction:
        GaussNewtonDesign.build(x, y)
    """
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _n: int

    @classmethod
    def build(cls, x: ArrayLike, y: ArrayLike) -> GaussNewtonDesign:
        """
        Validate samples and build the design.

        Args:
            x: Sample abscissae (n,). An (n, 1) column is flattened.
            y: Sample ordinates (n,). An (n, 1) column is flattened.

        Returns:
            GaussNewtonDesign ready for a refinement step

        Raises:
            ValidationError: If inputs are non-numeric, empty or non-finite
            DimensionError: If x or y is not 1D, or their lengths differ
        """
        x_arr = check_array(x, 'x')
        y_arr = check_array(y, 'y')

        if x_arr.ndim == 2 and x_arr.shape[1] == 1:
            x_arr = x_arr.ravel()
        if y_arr.ndim == 2 and y_arr.shape[1] == 1:
            y_arr = y_arr.ravel()

        check_1d(x_arr, 'x')
        check_1d(y_arr, 'y')
        check_consistent_length(x_arr, y_arr, names=('x', 'y'))
        check_min_samples(x_arr, 1, 'x')
        check_finite(x_arr, 'x')
        check_finite(y_arr, 'y')

        x_arr.flags.writeable = False
        y_arr.flags.writeable = False
        return cls(_x=x_arr, _y=y_arr, _n=x_arr.shape[0])

    # === Properties ===

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """Sample abscissae (n,), read-only."""
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Sample ordinates (n,), read-only."""
        return self._y

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n
