"""
Cofactor kernels: minors, Laplace-expansion determinant and adjugate.

All functions take and return plain float64 arrays and assume the caller
has already validated squareness. The determinant is the textbook
recursive expansion along the first row, O(n!) in the worst case; it is
exact in the sense that no pivoting or factorisation is involved, which
keeps small integer matrices free of round-off.
"""

import numpy as np
from numpy.typing import NDArray


def minor_of(a: NDArray[np.float64], i: int, j: int) -> NDArray[np.float64]:
    """Submatrix of ``a`` with row ``i`` and column ``j`` removed."""
    return np.delete(np.delete(a, i, axis=0), j, axis=1)


def determinant(a: NDArray[np.float64]) -> float:
    """
    Determinant by cofactor expansion along row 0.

        det(A) = sum_j (-1)^j * a[0, j] * det(minor(A, 0, j))
    """
    n = a.shape[0]
    if n == 1:
        return float(a[0, 0])
    if n == 2:
        return float(a[0, 0] * a[1, 1] - a[0, 1] * a[1, 0])

    total = 0.0
    for j in range(n):
        if a[0, j] == 0.0:
            continue
        sign = -1.0 if j % 2 else 1.0
        total += sign * a[0, j] * determinant(minor_of(a, 0, j))
    return float(total)


def adjugate(a: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Transpose of the cofactor matrix.

        adj[j, i] = (-1)^(i + j) * det(minor(A, i, j))

    The adjugate of a 1x1 matrix is [[1]].
    """
    n = a.shape[0]
    if n == 1:
        return np.ones((1, 1))

    adj = np.empty((n, n))
    for i in range(n):
        for j in range(n):
            sign = -1.0 if (i + j) % 2 else 1.0
            adj[j, i] = sign * determinant(minor_of(a, i, j))
    return adj
