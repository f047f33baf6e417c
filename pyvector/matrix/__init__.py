"""
Matrix engine.

Public API:
    Matrix        - dense real matrix with determinant, adjugate, inverse,
                    row reduction and Padé exponential
    expm(A)       - e^A as a new Matrix
    powm(A, b)    - b^A as a new Matrix
    as_grid(x)    - coerce a Matrix or grid into a float64 array
"""

from pyvector.matrix.matrix import Matrix, MatrixLike, as_grid, expm, powm

__all__ = [
    "Matrix",
    "MatrixLike",
    "as_grid",
    "expm",
    "powm",
]
