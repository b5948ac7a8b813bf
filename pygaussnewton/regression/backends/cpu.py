"""
CPU backend for Gauss-Newton refinement.

Builds the Jacobian from the model, forms the normal equations with the
dense matrix primitives and solves them by Gaussian elimination. Exactly
one step per call; whether to take another is the caller's decision.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pygaussnewton.core.result import Result
from pygaussnewton.core.protocols import Model
from pygaussnewton.core.compute.timing import Timer
from pygaussnewton.core.compute.tolerances import DEFAULT_PIVOT_TOL
from pygaussnewton.core.compute.linalg import solve
from pygaussnewton.regression._gauss_newton import build_jacobian, normal_equations
from pygaussnewton.regression._goodness import compute_residuals, compute_rss
from pygaussnewton.regression.design import GaussNewtonDesign
from pygaussnewton.regression.solution import StepParams


class CPUGaussNewtonBackend:
    """
    CPU backend for one Gauss-Newton step.

    Implements the Backend protocol for GaussNewtonDesign -> StepParams.
    Holds only the model and the pivot tolerance, both fixed at
    construction, so one instance can serve any number of steps.
    """

    def __init__(self, model: Model, *, tol: float = DEFAULT_PIVOT_TOL):
        self._model = model
        self._tol = tol

    @property
    def name(self) -> str:
        return 'cpu_gauss_newton'

    @property
    def model(self) -> Model:
        return self._model

    def solve(
        self,
        design: GaussNewtonDesign,
        coefficients: NDArray[np.floating[Any]],
    ) -> Result[StepParams]:
        """
        Take one Gauss-Newton step from `coefficients`.

        Algorithm:
            1. J[i][k] = ∂f(x_i; c)/∂c_k
            2. r[i] = y_i - f(x_i; c)
            3. Solve (J'J) Δ = J'r by Gaussian elimination
            4. Return c + Δ

        Args:
            design: Validated sample set
            coefficients: Validated current estimate (m,). Not modified.

        Returns:
            Result containing StepParams

        Raises:
            SingularMatrixError: If J'J has no pivot for some column
            NumericalError: If the model is non-finite at some sample
        """
        timer = Timer()
        timer.start()

        model = self._model
        n, p = design.n, model.n_parameters

        with timer.section('jacobian'):
            jacobian = build_jacobian(model, design.x, coefficients)

        with timer.section('residuals'):
            residuals = compute_residuals(model, design.x, design.y, coefficients)

        with timer.section('normal_equations'):
            jtj, jtr = normal_equations(jacobian, residuals)

        with timer.section('elimination'):
            delta = solve(jtj, jtr, tol=self._tol, matrix_name="J'J").ravel()

        timer.stop()

        warnings: tuple[str, ...] = ()
        if n < p:
            warnings = (
                f"underdetermined: {n} observations for {p} coefficients",
            )

        params = StepParams(
            coefficients=coefficients + delta,
            previous_coefficients=coefficients.copy(),
            delta=delta,
            residuals=residuals,
            rss=compute_rss(residuals),
        )

        info: dict[str, Any] = {
            'method': 'gauss_newton',
            'model': model.name,
            'n': n,
            'p': p,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=warnings,
        )
