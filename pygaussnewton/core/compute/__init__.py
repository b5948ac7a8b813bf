"""
Shared compute infrastructure for pygaussnewton.

This module provides timing utilities, tolerance tiers and the dense linear
algebra kernels the Gauss-Newton engine is built on.

IMPORTANT: This is NOT where the regression backend lives. That goes in
regression/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Numerical tolerance tiers
    linalg: Matrix primitives and Gaussian elimination
"""

from pygaussnewton.core.compute.timing import Timer, timed
from pygaussnewton.core.compute.linalg import transpose, multiply, solve

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Linear algebra
    "transpose",
    "multiply",
    "solve",
]
