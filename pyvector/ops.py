"""
Free-function vector namespace.

Every function accepts vector-like values (vectors, sequences, arrays,
named-axis objects), never modifies its inputs, and returns new vectors.
Arithmetic results are VecN; ``from_array`` and ``linspace`` return the
concrete type matching each vector's dimension.
"""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np

from pyvector.core.exceptions import ValidationError
from pyvector.core.validation import (
    check_positive_int,
    check_same_length,
)
from pyvector.matrix.matrix import Matrix
from pyvector.span import Span, collinear, span
from pyvector.transform import AnyVector, vector_from_components
from pyvector.vector import VecN, as_components


def _pair(v1: Any, v2: Any) -> tuple[np.ndarray, np.ndarray]:
    u1 = as_components(v1, 'v1')
    u2 = as_components(v2, 'v2')
    check_same_length(u1, u2, names=('v1', 'v2'))
    return u1, u2


def add(v1: Any, v2: Any) -> VecN:
    """
    Sum of two vectors of equal length.

    Raises:
        DimensionError: If the lengths differ
    """
    u1, u2 = _pair(v1, v2)
    return VecN(u1).add(u2)


def sub(v1: Any, v2: Any) -> VecN:
    """
    Difference ``v1 - v2`` of two vectors of equal length.

    Raises:
        DimensionError: If the lengths differ
    """
    u1, u2 = _pair(v1, v2)
    return VecN(u1).sub(u2)


def multiply(v: Any, s: float) -> VecN:
    return VecN(v).multiply(s)


def divide(v: Any, s: float) -> VecN:
    """
    Raises:
        DivisionByZeroError: If s == 0
    """
    return VecN(v).divide(s)


def normalize(v: Any) -> VecN:
    """Unit vector along ``v``; the zero vector is returned unchanged."""
    return VecN(v).unit()


def zero(n: int) -> VecN:
    """Zero vector in R^n."""
    return VecN.zeros(n)


def from_array(buffer: Any, stride: int) -> list[AnyVector]:
    """
    Decode a flat buffer into consecutive vectors of ``stride`` components.

        from_array([1, 2, 3, 4, 5, 6], 3) -> [Vec3(1, 2, 3), Vec3(4, 5, 6)]

    Args:
        buffer: Flat sequence, 1D array, or vector
        stride: Components per vector

    Returns:
        list of Vec1/Vec2/Vec3/VecN, one per chunk

    Raises:
        ValidationError: If len(buffer) is not divisible by stride
    """
    data = as_components(buffer, 'buffer')
    stride = check_positive_int(stride, 'stride')

    if data.shape[0] % stride != 0:
        raise ValidationError(
            f"buffer: length ({data.shape[0]}) is not divisible by stride ({stride})"
        )

    return [
        vector_from_components(data[i:i + stride])
        for i in range(0, data.shape[0], stride)
    ]


def linspace(start: Any, stop: Any, num: int) -> list[AnyVector]:
    """
    ``num`` evenly spaced points from ``start`` to ``stop``, both included.

    Raises:
        DimensionError: If start and stop differ in length
    """
    a, b = _pair(start, stop)
    num = check_positive_int(num, 'num')
    return [vector_from_components(row) for row in np.linspace(a, b, num)]


def _stack(vectors: Sequence[Any], name: str) -> np.ndarray:
    rows = [as_components(v, f'{name}[{i}]') for i, v in enumerate(vectors)]
    if not rows:
        raise ValidationError(f"{name}: need at least one vector")
    check_same_length(*rows, names=tuple(f'{name}[{i}]' for i in range(len(rows))))
    return np.vstack(rows)


def hstack(vectors: Sequence[Any]) -> Matrix:
    """Matrix whose columns are the given vectors."""
    return Matrix(_stack(vectors, 'vectors').T)


def vstack(vectors: Sequence[Any]) -> Matrix:
    """Matrix whose rows are the given vectors."""
    return Matrix(_stack(vectors, 'vectors'))


__all__ = [
    "add",
    "sub",
    "multiply",
    "divide",
    "normalize",
    "zero",
    "from_array",
    "linspace",
    "hstack",
    "vstack",
    "span",
    "collinear",
    "Span",
]
