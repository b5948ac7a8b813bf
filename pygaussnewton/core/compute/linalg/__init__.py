"""
Linear algebra kernels for pygaussnewton.

All functions follow these conventions:
    - Inputs are validated and copied to float64 arrays; callers' data is
      never modified
    - Errors are raised immediately with clear messages

Submodules:
    matrix: Transpose and matrix multiplication
    elimination: Gaussian elimination with out-of-order pivoting
"""

from pygaussnewton.core.compute.linalg.matrix import transpose, multiply
from pygaussnewton.core.compute.linalg.elimination import solve

__all__ = [
    # Matrix primitives
    "transpose",
    "multiply",
    # Linear solve
    "solve",
]
