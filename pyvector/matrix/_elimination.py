"""
Gauss-Jordan elimination to reduced row echelon form.

https://en.wikipedia.org/wiki/Row_echelon_form
"""

import numpy as np
from numpy.typing import NDArray


def row_reduce(a: NDArray[np.float64], pivot_tol: float = 0.0) -> NDArray[np.float64]:
    """
    Reduce ``a`` to reduced row echelon form.

    For each row the pivot column scans down from the current row for an
    entry with ``|value| > pivot_tol``, moving to the next column when the
    column is exhausted. The pivot row is swapped into place, normalised so
    the pivot is 1, and the pivot column is eliminated from every other
    row. Stops once the pivot column index reaches the column count.

    Args:
        a: Matrix to reduce (not modified)
        pivot_tol: Entries with absolute value <= pivot_tol are treated as
            zero when searching for a pivot. 0.0 means exact zeros only.

    Returns:
        New array holding the reduced matrix
    """
    m = np.array(a, dtype=np.float64)
    rows, cols = m.shape
    lead = 0

    for r in range(rows):
        if lead >= cols:
            break

        i = r
        while abs(m[i, lead]) <= pivot_tol:
            i += 1
            if i == rows:
                i = r
                lead += 1
                if lead == cols:
                    return m

        if i != r:
            m[[i, r]] = m[[r, i]]

        m[r] = m[r] / m[r, lead]
        for k in range(rows):
            if k != r:
                m[k] = m[k] - m[k, lead] * m[r]
        lead += 1

    return m


def rank_of_reduced(reduced: NDArray[np.float64], tol: float = 0.0) -> int:
    """Number of rows of a reduced matrix holding any entry with |value| > tol."""
    return int(np.sum(np.any(np.abs(reduced) > tol, axis=1)))
