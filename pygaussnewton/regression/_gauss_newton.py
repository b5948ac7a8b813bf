"""
Gauss-Newton building blocks.

One step of the algorithm:

    c_{k+1} = c_k + Δ,   (J'J) Δ = J' r(c_k)

where J is the Jacobian of the model at c_k and r the residual vector.
(J'J)⁻¹ is never formed; Δ comes from solving the normal equations
directly by Gaussian elimination.

The Jacobian holds one row per sample and one column per coefficient:

    [ ∂f(x_0)/∂c_0   ∂f(x_0)/∂c_1   ...   ∂f(x_0)/∂c_m ]
    [ ∂f(x_1)/∂c_0   ∂f(x_1)/∂c_1   ...   ∂f(x_1)/∂c_m ]
    [      ...            ...       ...        ...      ]
    [ ∂f(x_n)/∂c_0   ∂f(x_n)/∂c_1   ...   ∂f(x_n)/∂c_m ]
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pygaussnewton.core.compute.linalg import transpose, multiply
from pygaussnewton.core.exceptions import NumericalError
from pygaussnewton.core.protocols import Model


def build_jacobian(
    model: Model,
    x: NDArray[np.floating[Any]],
    coefficients: NDArray[np.floating[Any]],
) -> NDArray[np.floating[Any]]:
    """
    Jacobian J (n x m) with J[i][k] = ∂f(x_i; c)/∂c_k.

    Raises:
        NumericalError: If any derivative is NaN or Inf (e.g. the model
            is evaluated outside its domain)
    """
    m = model.n_parameters
    J = np.array(
        [[model.partial_derivative(xi, k, coefficients) for k in range(m)] for xi in x],
        dtype=np.float64,
    ).reshape(len(x), m)

    if not np.all(np.isfinite(J)):
        bad_rows = np.flatnonzero(~np.all(np.isfinite(J), axis=1))
        raise NumericalError(
            f"Jacobian of {model.name!r} has non-finite entries at "
            f"samples {bad_rows.tolist()} for coefficients {coefficients.tolist()}"
        )
    return J


def normal_equations(
    jacobian: NDArray[np.floating[Any]],
    residuals: NDArray[np.floating[Any]],
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """
    Form J'J (m x m) and J'r (m x 1).

    Args:
        jacobian: J (n x m)
        residuals: r (n,)

    Returns:
        Tuple (J'J, J'r)
    """
    jacobian_t = transpose(jacobian)
    jtj = multiply(jacobian_t, jacobian)
    jtr = multiply(jacobian_t, residuals.reshape(-1, 1))
    return jtj, jtr
