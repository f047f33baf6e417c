"""
Shared contract for every vector type.

BaseVector owns a float64 component array and a cached magnitude. All
mutation goes through ``_assign`` so the magnitude invariant

    magnitude == sqrt(sum(c_i ** 2))

holds the moment any mutating method returns. Mutating methods return
``self`` for chaining; every one of them has a non-mutating counterpart
(operators, ``normalized``, ``clamped``, ...) that works on a clone.

Vector-like operands are coerced by ``as_components``, which accepts:
    - another vector instance
    - a flat sequence or 1D numpy array
    - a mapping or attribute object with x/y, x/y/z or i/j/k axes
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from numbers import Real
from typing import Any, Iterator, TypeVar

import numpy as np
from numpy.typing import NDArray

from pyvector.core.exceptions import (
    DimensionError,
    DivisionByZeroError,
    ValidationError,
)
from pyvector.core.protocols import IJKPoint, XYPoint, XYZPoint
from pyvector.core.tolerances import DEFAULT, ToleranceTier, select_tolerance
from pyvector.core.validation import (
    check_1d,
    check_angle_unit,
    check_array,
    check_length,
    check_scalar,
)


V = TypeVar('V', bound='BaseVector')


def _from_mapping(value: Mapping, name: str) -> list[float]:
    if 'x' in value and 'y' in value:
        if 'z' in value:
            return [value['x'], value['y'], value['z']]
        return [value['x'], value['y']]
    if 'i' in value and 'j' in value and 'k' in value:
        return [value['i'], value['j'], value['k']]
    raise ValidationError(
        f"{name}: mapping must have keys (x, y), (x, y, z) or (i, j, k), "
        f"got {sorted(map(str, value))}"
    )


def as_components(
    value: Any,
    name: str = 'v',
    dimension: int | None = None,
) -> NDArray[np.float64]:
    """
    Coerce a vector-like value into a fresh 1D float64 array.

    Args:
        value: Vector instance, sequence, 1D array, or named-axis object
        name: Parameter name for error messages
        dimension: Required number of components, or None for any

    Returns:
        A new array; the caller may mutate it freely

    Raises:
        ValidationError: If the value is not vector-like
        DimensionError: If the component count differs from ``dimension``
    """
    if isinstance(value, BaseVector):
        arr = value.components
    elif isinstance(value, Mapping):
        arr = check_array(_from_mapping(value, name), name)
    elif isinstance(value, XYZPoint):
        arr = check_array([value.x, value.y, value.z], name)
    elif isinstance(value, IJKPoint):
        arr = check_array([value.i, value.j, value.k], name)
    elif isinstance(value, XYPoint):
        arr = check_array([value.x, value.y], name)
    elif isinstance(value, (str, bytes)):
        raise ValidationError(f"{name}: strings are not vector-like")
    else:
        arr = check_array(value, name)
        if arr.ndim == 0:
            raise ValidationError(
                f"{name}: got a scalar, expected a sequence of components"
            )
        check_1d(arr, name)

    if dimension is not None:
        check_length(arr, dimension, name)
    return arr


def to_radians(angle: float, unit: str, name: str = 'angle') -> float:
    """Convert ``angle`` given in ``unit`` to radians."""
    return check_scalar(angle, name) * check_angle_unit(unit)


def from_radians(angle: float, unit: str) -> float:
    """Convert an angle in radians to ``unit``."""
    if check_angle_unit(unit) == 1.0:
        return angle
    return math.degrees(angle)


class BaseVector:
    """
    Base class implementing the vector contract over a numpy array.

    Subclasses fix the dimension by setting ``_dimension`` and add
    dimension-specific geometry. ``VecN`` leaves it as None.
    """

    __slots__ = ('_coords', '_mag')

    _dimension: int | None = None

    def _assign(self, coords: NDArray[np.float64]) -> None:
        self._coords = coords
        self._mag = float(np.linalg.norm(coords)) if coords.size else 0.0

    @classmethod
    def _from_components(cls: type[V], coords: NDArray[np.float64]) -> V:
        obj = cls.__new__(cls)
        obj._assign(np.array(coords, dtype=np.float64))
        return obj

    def _operand(self, value: Any, name: str = 'v') -> NDArray[np.float64]:
        return as_components(value, name, self.dimension)

    # ─── read access ──────────────────────────────────────────────────

    @property
    def dimension(self) -> int:
        """Number of components."""
        return self._coords.shape[0]

    @property
    def components(self) -> NDArray[np.float64]:
        """Copy of the components as a float64 array."""
        return self._coords.copy()

    @property
    def coords(self) -> tuple[float, ...]:
        """Components as a tuple of Python floats."""
        return tuple(float(c) for c in self._coords)

    @property
    def magnitude(self) -> float:
        """Euclidean norm, recomputed after every mutation."""
        return self._mag

    def __len__(self) -> int:
        return self.dimension

    def __getitem__(self, index: int) -> float:
        return float(self._coords[index])

    def __iter__(self) -> Iterator[float]:
        for c in self._coords:
            yield float(c)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(c) for c in self.coords)})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseVector):
            return NotImplemented
        return type(self) is type(other) and np.array_equal(self._coords, other._coords)

    __hash__ = None  # mutable

    def isclose(self, other: Any, tolerance: ToleranceTier | str = DEFAULT) -> bool:
        """Componentwise approximate equality against a vector-like value."""
        if isinstance(tolerance, str):
            tolerance = select_tolerance(tolerance)
        try:
            other_arr = self._operand(other, 'other')
        except DimensionError:
            return False
        return bool(np.allclose(
            self._coords, other_arr, rtol=tolerance.rtol, atol=tolerance.atol
        ))

    # ─── scalar products ──────────────────────────────────────────────

    def dot(self, v: Any) -> float:
        """Dot product with a vector-like value of the same dimension."""
        return float(np.dot(self._coords, self._operand(v)))

    def distance(self, v: Any) -> float:
        """Euclidean distance to a point of the same dimension."""
        return float(np.linalg.norm(self._coords - self._operand(v)))

    # ─── mutating contract ────────────────────────────────────────────

    def clone(self: V) -> V:
        """Return an independent copy of this vector."""
        return type(self)._from_components(self._coords)

    def copy(self: V, v: Any) -> V:
        """Overwrite this vector's components with those of ``v``."""
        self._assign(self._operand(v))
        return self

    def zero(self: V) -> V:
        """Set every component to 0."""
        self._assign(np.zeros_like(self._coords))
        return self

    def unit(self: V) -> V:
        """
        Normalize to magnitude 1, keeping the direction.

        The zero vector has no direction and is left unchanged.
        """
        if self._mag != 0.0:
            self._assign(self._coords / self._mag)
        return self

    def antiparallel(self: V) -> V:
        """Reverse the direction of every axis."""
        self._assign(-self._coords)
        return self

    def oppose(self: V) -> V:
        """Alias for :meth:`antiparallel`."""
        return self.antiparallel()

    def max(self: V, v: Any) -> V:
        """Componentwise maximum with ``v``."""
        self._assign(np.maximum(self._coords, self._operand(v)))
        return self

    def min(self: V, v: Any) -> V:
        """Componentwise minimum with ``v``."""
        self._assign(np.minimum(self._coords, self._operand(v)))
        return self

    def ceil(self: V) -> V:
        self._assign(np.ceil(self._coords))
        return self

    def floor(self: V) -> V:
        self._assign(np.floor(self._coords))
        return self

    def round(self: V) -> V:
        """Round every component to the nearest integer, halves rounding up."""
        self._assign(np.floor(self._coords + 0.5))
        return self

    def clamp(self: V, min: Any, max: Any) -> V:
        """
        Clamp each component between the matching components of ``min``
        and ``max``. Assumes min <= max componentwise.
        """
        lo = self._operand(min, 'min')
        hi = self._operand(max, 'max')
        self._assign(np.maximum(lo, np.minimum(hi, self._coords)))
        return self

    def segvec(self: V, A: Any, B: Any) -> V:
        """Set this vector to the segment from point A to point B."""
        a = self._operand(A, 'A')
        b = self._operand(B, 'B')
        self._assign(b - a)
        return self

    def add(self: V, v: Any) -> V:
        self._assign(self._coords + self._operand(v))
        return self

    def sub(self: V, v: Any) -> V:
        self._assign(self._coords - self._operand(v))
        return self

    def multiply(self: V, s: float) -> V:
        """Scale by a scalar."""
        self._assign(self._coords * check_scalar(s, 's'))
        return self

    def divide(self: V, s: float) -> V:
        """
        Divide by a scalar.

        Raises:
            DivisionByZeroError: If s == 0
        """
        s = check_scalar(s, 's')
        if s == 0.0:
            raise DivisionByZeroError(f"{type(self).__name__}: division by zero scalar")
        self._assign(self._coords / s)
        return self

    def transform(self, m: Any):
        """
        Apply a matrix to this vector.

        Returns a new vector whose concrete type matches the number of
        rows of the result (see :func:`pyvector.transform.apply_transform`).
        This vector is not modified.
        """
        from pyvector.transform import apply_transform

        return apply_transform(self, m)

    def to_vecn(self):
        """Convert into a :class:`~pyvector.vector.vecn.VecN`."""
        from pyvector.vector.vecn import VecN

        return VecN._from_components(self._coords)

    # ─── non-mutating counterparts ────────────────────────────────────

    @classmethod
    def segment(cls: type[V], A: Any, B: Any) -> V:
        """New vector pointing from point A to point B."""
        a = as_components(A, 'A', cls._dimension)
        b = as_components(B, 'B', a.shape[0])
        return cls._from_components(b - a)

    def normalized(self: V) -> V:
        return self.clone().unit()

    def clamped(self: V, min: Any, max: Any) -> V:
        return self.clone().clamp(min, max)

    def maximum(self: V, v: Any) -> V:
        return self.clone().max(v)

    def minimum(self: V, v: Any) -> V:
        return self.clone().min(v)

    def __add__(self: V, other: Any) -> V:
        return self.clone().add(other)

    def __sub__(self: V, other: Any) -> V:
        return self.clone().sub(other)

    def __mul__(self: V, s: Any) -> V:
        if isinstance(s, bool) or not isinstance(s, Real):
            return NotImplemented
        return self.clone().multiply(s)

    __rmul__ = __mul__

    def __truediv__(self: V, s: Any) -> V:
        if isinstance(s, bool) or not isinstance(s, Real):
            return NotImplemented
        return self.clone().divide(s)

    def __neg__(self: V) -> V:
        return self.clone().antiparallel()

    def __round__(self: V, ndigits: int | None = None) -> V:
        if ndigits is not None:
            return type(self)._from_components(np.round(self._coords, ndigits))
        return self.clone().round()

    def __floor__(self: V) -> V:
        return self.clone().floor()

    def __ceil__(self: V) -> V:
        return self.clone().ceil()
