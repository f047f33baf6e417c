"""
Arbitrary-dimension vector.

VecN is the uniform representation used by the free-function namespace
and as the fallback result type of a matrix transform. Every binary
operation requires operands of equal dimension. There is no cross
product: it only exists in 3 and 7 dimensions
(https://math.stackexchange.com/questions/720813/).
"""

from __future__ import annotations

from numbers import Integral
from typing import Any

import numpy as np

from pyvector.core.validation import check_not_empty, check_positive_int
from pyvector.vector._base import BaseVector, as_components


class VecN(BaseVector):
    """
    Vector of any dimension >= 1.

    Construction:
        VecN(4)                      -> 4-dimensional zero vector
        VecN([1, 2, 3, 4, 5])        sequence or numpy array
        VecN({'x': 1, 'y': 2})       named axes (x/y, x/y/z, i/j/k)
        VecN(any_vector)
    """

    __slots__ = ()

    def __init__(self, v: Any):
        if isinstance(v, Integral) and not isinstance(v, bool):
            coords = np.zeros(check_positive_int(v, 'v'))
        else:
            coords = as_components(v, 'v')
            check_not_empty(coords, 'v')
        self._assign(coords)

    @classmethod
    def zeros(cls, n: int) -> VecN:
        """Zero vector in R^n."""
        return cls(check_positive_int(n, 'n'))

    def copy(self, v: Any) -> VecN:
        """
        Replace this vector's components with those of ``v``.

        Unlike the fixed-dimension vectors, the dimension may change.
        """
        coords = as_components(v, 'v')
        check_not_empty(coords, 'v')
        self._assign(coords)
        return self

    def __repr__(self) -> str:
        return f"VecN({list(self.coords)!r})"
