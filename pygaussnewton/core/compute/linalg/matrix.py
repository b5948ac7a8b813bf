"""
Dense matrix primitives.

All matrices are 2D float64 numpy arrays indexed by row then column.
Column vectors are n x 1 matrices. Matrices are only used internally by
the engine; public inputs and outputs are 1D coefficient vectors.
"""

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pygaussnewton.core.exceptions import DimensionError
from pygaussnewton.core.validation import check_array, check_2d


def transpose(matrix: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Return the transpose of a matrix as a new array.

    Args:
        matrix: Any 2D matrix (r x c)

    Returns:
        Matrix (c x r) with result[j][i] = matrix[i][j]

    Raises:
        DimensionError: If matrix is not 2D
    """
    M = check_array(matrix, 'matrix')
    check_2d(M, 'matrix')
    return np.ascontiguousarray(M.T)


def multiply(matrix: ArrayLike, multiplicand: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Multiply two matrices: [A][B].

    result[i][j] = Σ_k A[i][k] B[k][j]

    Args:
        matrix: Left operand A (r x k)
        multiplicand: Right operand B (k x c)

    Returns:
        Product matrix (r x c)

    Raises:
        DimensionError: If either operand is not 2D, or columns(A) != rows(B).
            Operands are never padded or truncated to fit.
    """
    A = check_array(matrix, 'matrix')
    B = check_array(multiplicand, 'multiplicand')
    check_2d(A, 'matrix')
    check_2d(B, 'multiplicand')

    if A.shape[1] != B.shape[0]:
        raise DimensionError(
            f"Cannot multiply: matrix has {A.shape[1]} columns but "
            f"multiplicand has {B.shape[0]} rows "
            f"(shapes {A.shape} and {B.shape})"
        )

    return A @ B
