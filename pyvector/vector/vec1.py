"""One-dimensional vector."""

from __future__ import annotations

from numbers import Real
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pyvector.vector._base import BaseVector, as_components


class Vec1(BaseVector):
    """
    A scalar wrapped in the vector contract.

    Accepts a bare number, a length-1 sequence/array, or another Vec1.
    Bare numbers are also accepted wherever a vector-like operand is
    expected (``Vec1(2).add(3)``).
    """

    __slots__ = ()

    _dimension = 1

    def __init__(self, v: Any = 0.0):
        self._assign(self._operand(v))

    def _operand(self, value: Any, name: str = 'v') -> NDArray[np.float64]:
        if isinstance(value, Real) and not isinstance(value, bool):
            return np.array([value], dtype=np.float64)
        return as_components(value, name, 1)

    @property
    def x(self) -> float:
        return float(self._coords[0])

    @x.setter
    def x(self, value: float) -> None:
        self._assign(self._operand(value, 'x'))

    def extend(self):
        """Lift into 2D space with a zero y-component."""
        from pyvector.vector.vec2 import Vec2

        return Vec2(self.x, 0.0)
