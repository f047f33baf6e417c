"""
Elementwise numeric container.

Tensor holds an n-dimensional float64 array and supports cellwise
arithmetic between tensors of identical shape. It does not depend on the
vector or matrix types.
"""

from __future__ import annotations

from numbers import Integral
from typing import Any, Callable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyvector.core.exceptions import DimensionError, DivisionByZeroError, ValidationError
from pyvector.core.validation import check_array, check_not_empty, check_positive_int


class Tensor:
    """
    Dense n-dimensional array with elementwise arithmetic.

    Construction:
        Tensor([[1, 2], [3, 4]])    nested sequences or ndarray
        Tensor(4)                   1D tensor of 4 zeros
    """

    __slots__ = ('_data',)

    def __init__(self, t: ArrayLike | int):
        if isinstance(t, Integral) and not isinstance(t, bool):
            self._data = np.zeros(check_positive_int(t, 't'))
        elif isinstance(t, Tensor):
            self._data = t._data.copy()
        else:
            data = check_array(t, 't')
            if data.ndim == 0:
                raise ValidationError("t: a scalar is not a tensor; pass a sequence or a size")
            check_not_empty(data, 't')
            self._data = data

    @property
    def data(self) -> NDArray[np.float64]:
        """Copy of the underlying array."""
        return self._data.copy()

    @property
    def shape(self) -> tuple[int, ...]:
        return self._data.shape

    @property
    def ndim(self) -> int:
        return self._data.ndim

    def tolist(self) -> list:
        return self._data.tolist()

    def __repr__(self) -> str:
        return f"Tensor({self.tolist()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tensor):
            return NotImplemented
        return self.shape == other.shape and np.array_equal(self._data, other._data)

    __hash__ = None  # mutable

    def _combine(
        self,
        other: Tensor | ArrayLike,
        op: Callable[[NDArray[np.float64], NDArray[np.float64]], NDArray[np.float64]],
    ) -> Tensor:
        rhs = other if isinstance(other, Tensor) else Tensor(other)
        if rhs.shape != self.shape:
            raise DimensionError(
                f"Tensors must have the same shape, got {self.shape} and {rhs.shape}"
            )
        result = Tensor.__new__(Tensor)
        result._data = op(self._data, rhs._data)
        return result

    def add(self, other: Tensor | ArrayLike) -> Tensor:
        return self._combine(other, np.add)

    def subtract(self, other: Tensor | ArrayLike) -> Tensor:
        return self._combine(other, np.subtract)

    def multiply(self, other: Tensor | ArrayLike) -> Tensor:
        """Hadamard (cellwise) product."""
        return self._combine(other, np.multiply)

    def divide(self, other: Tensor | ArrayLike) -> Tensor:
        """
        Cellwise quotient.

        Raises:
            DivisionByZeroError: If any cell of ``other`` is zero
        """
        rhs = other if isinstance(other, Tensor) else Tensor(other)
        if np.any(rhs._data == 0.0):
            raise DivisionByZeroError("divide: divisor tensor has zero cells")
        return self._combine(rhs, np.divide)

    def __add__(self, other: Any) -> Tensor:
        return self.add(other)

    def __sub__(self, other: Any) -> Tensor:
        return self.subtract(other)

    def __mul__(self, other: Any) -> Tensor:
        return self.multiply(other)

    def __truediv__(self, other: Any) -> Tensor:
        return self.divide(other)
