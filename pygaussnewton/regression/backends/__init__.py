"""
Gauss-Newton backends.

Available backends:
    CPUGaussNewtonBackend: Dense Gaussian elimination on the normal equations
"""

from pygaussnewton.regression.backends.cpu import CPUGaussNewtonBackend

__all__ = [
    "CPUGaussNewtonBackend",
]
