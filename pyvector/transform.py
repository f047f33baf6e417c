"""
Transform dispatcher.

Applies a Matrix to any vector and returns the concrete vector type that
matches the dimensionality of the result. The result type is the tagged
union ``AnyVector``; the concrete member is chosen by an explicit switch
on the number of components, never by the input vector's type.
"""

from __future__ import annotations

from typing import Any, Union

import numpy as np
from numpy.typing import ArrayLike

from pyvector.core.exceptions import DimensionError
from pyvector.core.validation import check_1d, check_array, check_not_empty
from pyvector.matrix.matrix import Matrix, MatrixLike
from pyvector.vector import BaseVector, Vec1, Vec2, Vec3, VecN, as_components


AnyVector = Union[Vec1, Vec2, Vec3, VecN]


def vector_from_components(values: ArrayLike) -> AnyVector:
    """
    Build the vector type matching the number of components.

        1 -> Vec1, 2 -> Vec2, 3 -> Vec3, otherwise VecN
    """
    coords = check_array(values, 'values')
    check_1d(coords, 'values')
    check_not_empty(coords, 'values')

    n = coords.shape[0]
    if n == 3:
        return Vec3._from_components(coords)
    if n == 2:
        return Vec2._from_components(coords)
    if n == 1:
        return Vec1._from_components(coords)
    return VecN._from_components(coords)


def apply_transform(vector: BaseVector | Any, matrix: MatrixLike) -> AnyVector:
    """
    Left-multiply ``vector`` (as a column) by ``matrix``.

    Args:
        vector: Vector instance or vector-like value
        matrix: Matrix or raw grid; a grid is wrapped, a Matrix is not modified

    Returns:
        New vector with as many components as ``matrix`` has rows

    Raises:
        DimensionError: If matrix.cols != the vector's dimension
    """
    m = matrix if isinstance(matrix, Matrix) else Matrix(matrix)
    coords = as_components(vector, 'vector')

    if m.cols != coords.shape[0]:
        raise DimensionError(
            f"transform: {m.rows}x{m.cols} matrix cannot act on a "
            f"{coords.shape[0]}-dimensional vector"
        )

    result = m.clone().multiply(coords[:, np.newaxis])
    return vector_from_components(result.grid[:, 0])
