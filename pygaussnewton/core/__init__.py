"""
Core infrastructure for pygaussnewton.

This module provides shared abstractions, utilities, and numeric
infrastructure used by the regression engine and the model catalog.

Key components:
    protocols: Model, Backend protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing, tolerances, linear algebra kernels
"""

from pygaussnewton.core.protocols import Model, Backend
from pygaussnewton.core.result import Result
from pygaussnewton.core.exceptions import (
    GaussNewtonError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
    DegenerateDataError,
)

__all__ = [
    # Protocols
    "Model",
    "Backend",
    # Result
    "Result",
    # Exceptions
    "GaussNewtonError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
    "DegenerateDataError",
]
