"""
Exception hierarchy for pygaussnewton.

All exceptions inherit from GaussNewtonError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class GaussNewtonError(Exception):
    """Base exception for all pygaussnewton errors."""
    pass


class ValidationError(GaussNewtonError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks, including
    a coefficient index outside a model's parameter range.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions, when
    x and y have different lengths, when a coefficient vector does not
    match the model's parameter count, or when matrix operands do not
    conform.
    """
    pass


class NumericalError(GaussNewtonError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised when Gaussian elimination cannot find a pivot for some column:
    every remaining row is either already reduced or zero in that column.
    In a Gauss-Newton step this means J'J is rank-deficient, typically from
    too few, duplicated or linearly dependent samples, or from coefficients
    that zero out a partial derivative.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        column: Column for which no pivot row exists, if known
        rank: Number of pivots found before the failure, if known
        expected_rank: Expected rank (the matrix degree)
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        column: int | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.column = column
        self.rank = rank
        self.expected_rank = expected_rank


class DegenerateDataError(NumericalError):
    """
    Statistic is undefined for the supplied data.

    Raised by R² when every y value is identical: the total sum of
    squares is zero and 1 - RSS/TSS has no meaningful value.

    Attributes:
        statistic: Name of the statistic that could not be computed
        n_observations: Number of observations supplied
    """

    def __init__(
        self,
        message: str,
        statistic: str | None = None,
        n_observations: int | None = None
    ):
        super().__init__(message)
        self.statistic = statistic
        self.n_observations = n_observations
