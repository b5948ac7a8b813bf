"""
pygaussnewton: non-linear curve fitting by Gauss-Newton iteration.

Fits a parametric model f(x; c) to (x, y) samples by repeated
least-squares refinement, one step per call, and scores the result with
the coefficient of determination.

Submodules:
    regression: refine / step / iterate / r_squared
    models: Catalog of exponential, power and damped-sine models
    core: Exceptions, validation, linear algebra kernels
"""

__version__ = "0.1.0"

from pygaussnewton import models
from pygaussnewton import regression

__all__ = [
    "__version__",
    "models",
    "regression",
]
