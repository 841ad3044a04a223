"""
Cofactor-expansion kernels: minor, determinant, cofactor matrix, inverse.

The classical textbook family:
- Minor M_ij: delete row i and column j
- Laplace expansion along the first row:
      det(A) = Σ_j (-1)^j · a_0j · det(M_0j)
- Cofactor matrix: C_ij = (-1)^(i+j) · det(M_ij)
- Inverse by adjugate over determinant: A^-1 = C^T / det(A)

The expansion is O(n!); there is no pivoting or decomposition. Every function takes and returns owned float64 arrays and
assumes its caller has already validated shapes (see Matrix).
"""

from __future__ import annotations

import warnings

import numpy as np
from numpy.typing import NDArray

from densematrix.core.exceptions import SingularMatrixError
from densematrix.core.tolerances import LAPLACE_WARN_SIZE, SINGULARITY_TOLERANCE


def warn_if_expensive(n: int, operation: str, stacklevel: int = 3) -> None:
    """Warn when an n x n cofactor expansion is likely to be very slow."""
    if n > LAPLACE_WARN_SIZE:
        warnings.warn(
            f"{operation} of a {n}x{n} matrix uses cofactor expansion, "
            f"whose cost grows factorially with n. Expect long run times "
            f"above {LAPLACE_WARN_SIZE}x{LAPLACE_WARN_SIZE}.",
            RuntimeWarning,
            stacklevel=stacklevel,
        )


def minor(a: NDArray[np.float64], row: int, column: int) -> NDArray[np.float64]:
    """Submatrix of ``a`` without 1-indexed ``row`` and ``column``.

    The result is a new array; relative order of the remaining elements is
    preserved.
    """
    keep_rows = np.arange(a.shape[0]) != row - 1
    keep_cols = np.arange(a.shape[1]) != column - 1
    return np.ascontiguousarray(a[np.ix_(keep_rows, keep_cols)])


def determinant(a: NDArray[np.float64]) -> float:
    """Determinant of a square array by Laplace expansion along row 0."""
    n = a.shape[0]
    if n == 1:
        return float(a[0, 0])
    if n == 2:
        return float(a[0, 0] * a[1, 1] - a[0, 1] * a[1, 0])

    result = 0.0
    for j in range(n):
        term = a[0, j] * determinant(minor(a, 1, j + 1))
        if j % 2 == 0:
            result += term
        else:
            result -= term
    return float(result)


def cofactors(a: NDArray[np.float64]) -> NDArray[np.float64]:
    """Matrix of signed minor determinants, same shape as ``a``.

    A 1x1 input has no minors; its cofactor matrix is [[det(a)]].
    """
    n = a.shape[0]
    out = np.zeros((n, n), dtype=np.float64)
    if n == 1:
        out[0, 0] = determinant(a)
        return out

    for i in range(n):
        for j in range(n):
            d = determinant(minor(a, i + 1, j + 1))
            out[i, j] = d if (i + j) % 2 == 0 else -d
    return out


def adjugate(a: NDArray[np.float64]) -> NDArray[np.float64]:
    """Transpose of the cofactor matrix.

    For 1x1 input the adjugate is [[1]], so that a @ adjugate(a) = det(a) I
    holds for every size.
    """
    if a.shape[0] == 1:
        return np.ones((1, 1), dtype=np.float64)
    return np.ascontiguousarray(cofactors(a).T)


def inverse(a: NDArray[np.float64]) -> NDArray[np.float64]:
    """Inverse of a square array as adjugate(a) / det(a).

    Raises
    ------
    SingularMatrixError
        If |det(a)| < SINGULARITY_TOLERANCE.
    """
    det = determinant(a)
    if abs(det) < SINGULARITY_TOLERANCE:
        raise SingularMatrixError(
            f"inverse: determinant {det!r} is below the singularity "
            f"tolerance {SINGULARITY_TOLERANCE!r}",
            determinant=det,
            tolerance=SINGULARITY_TOLERANCE,
        )
    return adjugate(a) * (1.0 / det)
