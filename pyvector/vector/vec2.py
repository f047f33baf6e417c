"""
Two-dimensional vector.

Adds planar geometry to the vector contract: the wedge product (the
signed parallelogram area that stands in for a cross product in 2D),
polar reparametrisation and angle queries.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Any

import numpy as np

from pyvector.core.exceptions import DivisionByZeroError, ValidationError
from pyvector.core.validation import check_axis, check_scalar
from pyvector.vector._base import BaseVector, as_components, from_radians, to_radians


AXES_2D = ('x', 'y', 'i', 'j')

_AXIS_INDEX = {'x': 0, 'i': 0, 'y': 1, 'j': 1}


class Vec2(BaseVector):
    """
    Vector in the plane.

    Construction:
        Vec2()                  -> (0, 0)
        Vec2(3, 4)
        Vec2([3, 4])            sequence or numpy array
        Vec2({'x': 3, 'y': 4})  mapping or object with x, y attributes
        Vec2(other_vec2)
    """

    __slots__ = ()

    _dimension = 2

    def __init__(self, x: Any = None, y: float | None = None):
        if x is None and y is None:
            coords = np.zeros(2)
        elif y is not None:
            coords = np.array([check_scalar(x, 'x'), check_scalar(y, 'y')])
        elif isinstance(x, Real) and not isinstance(x, bool):
            raise ValidationError("Vec2: got a single number, expected both x and y")
        else:
            coords = as_components(x, 'v', 2)
        self._assign(coords)

    @property
    def x(self) -> float:
        return float(self._coords[0])

    @x.setter
    def x(self, value: float) -> None:
        self._assign(np.array([check_scalar(value, 'x'), self._coords[1]]))

    @property
    def y(self) -> float:
        return float(self._coords[1])

    @y.setter
    def y(self, value: float) -> None:
        self._assign(np.array([self._coords[0], check_scalar(value, 'y')]))

    @property
    def angle(self) -> float:
        """Polar angle atan2(y, x) in radians."""
        return math.atan2(self._coords[1], self._coords[0])

    def wedge(self, v: Any) -> float:
        """Wedge product x1*y2 - y1*x2 (signed area)."""
        other = self._operand(v)
        return float(self._coords[0] * other[1] - self._coords[1] * other[0])

    def cross(self, v: Any) -> float:
        """
        2D has no cross product; returns the wedge product instead.

        See https://math.stackexchange.com/questions/3158634/
        """
        return self.wedge(v)

    def set_polar(self, magnitude: float, theta: float = 0.0, unit: str = 'rad') -> Vec2:
        """Set components from a magnitude and a polar angle."""
        r = check_scalar(magnitude, 'magnitude')
        theta = to_radians(theta, unit, 'theta')
        self._assign(np.array([r * math.cos(theta), r * math.sin(theta)]))
        return self

    def from_angle(self, theta: float, unit: str = 'rad') -> Vec2:
        """Point the vector at angle ``theta`` keeping its magnitude."""
        return self.set_polar(self._mag, theta, unit)

    def rotate(self, theta: float = 0.0, unit: str = 'rad') -> Vec2:
        """Rotate counter-clockwise by ``theta``."""
        theta = to_radians(theta, unit, 'theta') + self.angle
        return self.set_polar(self._mag, theta)

    def rotated(self, theta: float = 0.0, unit: str = 'rad') -> Vec2:
        return self.clone().rotate(theta, unit)

    def between(self, a: Any, unit: str = 'rad') -> float:
        """
        Angle between this vector and a positive axis or another vector.

        Computed as acos(a . b / (|a| |b|)).

        Args:
            a: Axis symbol ('x', 'y', 'i', 'j') or vector-like
            unit: 'rad' or 'deg'

        Raises:
            DivisionByZeroError: If either operand has zero magnitude
        """
        if self._mag == 0.0:
            raise DivisionByZeroError("between: this vector has zero magnitude")

        if isinstance(a, str):
            check_axis(a, AXES_2D, 'a')
            cos_theta = self._coords[_AXIS_INDEX[a]] / self._mag
        else:
            other = self._operand(a, 'a')
            other_mag = float(np.linalg.norm(other))
            if other_mag == 0.0:
                raise DivisionByZeroError("between: operand has zero magnitude")
            cos_theta = float(np.dot(self._coords, other)) / (self._mag * other_mag)

        theta = math.acos(min(1.0, max(-1.0, cos_theta)))
        return from_radians(theta, unit)

    def extend(self):
        """Lift into 3D space with a zero z-component."""
        from pyvector.vector.vec3 import Vec3

        return Vec3(self.x, self.y, 0.0)
