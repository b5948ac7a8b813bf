"""
Gaussian elimination with out-of-order pivot selection.

Solves [M][C] = [A] for square M by appending A to M as an extra column,
row-reducing, and reading the solution from that column. Inverting M is
never needed: multiplying by an inverse is the same as solving the system,
and solving directly saves the multiplication.

The forward pass does not require the pivot for column j to live in row j.
For each column it takes the first row (top to bottom) that has not yet
been reduced and has a nonzero entry in that column. The column -> row
mapping is recorded and the back-substitution pass walks it in reverse, so
the solution comes out indexed by column regardless of which rows were
used.

All bookkeeping (finished rows, pivot order) is local to one call.
"""

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pygaussnewton.core.exceptions import (
    DimensionError,
    SingularMatrixError,
    ValidationError,
)
from pygaussnewton.core.validation import (
    check_array,
    check_finite,
    check_min_samples,
    check_square,
)
from pygaussnewton.core.compute.tolerances import DEFAULT_PIVOT_TOL


def solve(
    matrix: ArrayLike,
    answers: ArrayLike,
    *,
    tol: float = DEFAULT_PIVOT_TOL,
    matrix_name: str = 'M',
) -> NDArray[np.floating[Any]]:
    """
    Solve a square linear system by Gaussian elimination.

    Algorithm:
        1. Form the augmented d x (d+1) working matrix [M | A]
        2. Forward pass, column by column: pick the first unfinished row
           with a nonzero entry as pivot, normalize it to 1, eliminate
           the column from every other unfinished row
        3. Back-substitution over columns d-1..0 using the recorded pivot
           rows, leaving the identity in M's place and C in the last column

    Args:
        matrix: Square matrix M (d x d), d >= 1
        answers: Right-hand side A, either a d x 1 column or a length-d vector
        tol: Entries with |value| <= tol count as zero in the pivot search.
            The default (0.0) is the exact nonzero test.
        matrix_name: Name of M used in error messages

    Returns:
        Solution C with the same shape as `answers`. The inputs are not
        modified.

    Raises:
        ValidationError: If inputs are non-numeric, empty or non-finite,
            or tol is negative
        DimensionError: If M is not square or A does not have d rows
        SingularMatrixError: If no pivot exists for some column
    """
    if tol < 0:
        raise ValidationError(f"tol: must be non-negative, got {tol}")

    M = check_array(matrix, 'matrix')
    check_square(M, 'matrix')
    check_min_samples(M, 1, 'matrix')
    check_finite(M, 'matrix')

    A = check_array(answers, 'answers')
    is_vector = A.ndim == 1
    if is_vector:
        A = A.reshape(-1, 1)
    degree = M.shape[0]
    if A.ndim != 2 or A.shape != (degree, 1):
        raise DimensionError(
            f"answers: expected shape ({degree}, 1) or ({degree},) to match "
            f"{matrix_name} of degree {degree}, got {np.shape(answers)}"
        )
    check_finite(A, 'answers')

    work = np.hstack([M, A])
    is_done = np.zeros(degree, dtype=bool)
    order = np.empty(degree, dtype=np.intp)

    # Forward pass: upper-triangular in pivot order, unit diagonal.
    for column in range(degree):
        active_row = _find_pivot(work[:, column], is_done, tol)
        if active_row is None:
            raise SingularMatrixError(
                f"{matrix_name} is singular: no pivot for column {column} "
                f"(found {column} of {degree} pivots)",
                matrix_name=matrix_name,
                column=column,
                rank=column,
                expected_rank=degree,
            )
        order[column] = active_row

        work[active_row, column:] /= work[active_row, column]
        is_done[active_row] = True

        pending = ~is_done
        work[pending, column:] -= np.outer(
            work[pending, column], work[active_row, column:]
        )

    # Back-substitution.
    is_done[:] = False
    solution = np.empty(degree, dtype=np.float64)
    for column in range(degree - 1, -1, -1):
        active_row = order[column]
        is_done[active_row] = True

        pending = ~is_done
        work[pending, column:] -= np.outer(
            work[pending, column], work[active_row, column:]
        )

        solution[column] = work[active_row, degree]

    if is_vector:
        return solution
    return solution.reshape(-1, 1)


def _find_pivot(
    column_values: NDArray[np.floating[Any]],
    is_done: NDArray[np.bool_],
    tol: float,
) -> int | None:
    """First unfinished row with a usable entry, or None."""
    candidates = np.flatnonzero(~is_done & (np.abs(column_values) > tol))
    if candidates.size == 0:
        return None
    return int(candidates[0])
