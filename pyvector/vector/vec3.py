"""
Three-dimensional vector.

Spherical quantities use the physics/mathematics convention (r, θ, φ)
with θ the azimuthal angle in the x-y plane and φ the polar angle
measured from +z. See
https://en.wikipedia.org/wiki/Spherical_coordinate_system
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from numbers import Real
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pyvector.core.exceptions import DivisionByZeroError, ValidationError
from pyvector.core.validation import (
    check_angle_unit,
    check_array,
    check_axis,
    check_length,
    check_scalar,
)
from pyvector.matrix.matrix import Matrix
from pyvector.vector._base import BaseVector, as_components, from_radians, to_radians
from pyvector.vector.vec2 import Vec2


AXES_3D = ('x', 'y', 'z', 'i', 'j', 'k')

_AXIS_INDEX = {'x': 0, 'i': 0, 'y': 1, 'j': 1, 'z': 2, 'k': 2}

# Components kept when projecting along (i.e. dropping) the named axis.
_PROJECTION_KEEP = {
    'x': (1, 2), 'i': (1, 2),
    'y': (0, 2), 'j': (0, 2),
    'z': (0, 1), 'k': (0, 1),
}


def _polar_angle(coords: NDArray[np.float64], mag: float) -> float:
    if mag == 0.0:
        return 0.0
    return math.acos(min(1.0, max(-1.0, coords[2] / mag)))


def _yaw_pitch(angle: Any) -> tuple[float, float]:
    if angle is None:
        return 0.0, 0.0
    if isinstance(angle, Mapping):
        return (
            check_scalar(angle.get('alpha', 0.0), 'alpha'),
            check_scalar(angle.get('beta', 0.0), 'beta'),
        )
    arr = check_array(angle, 'angle')
    if arr.ndim != 1:
        raise ValidationError("angle: expected (alpha, beta) or a mapping")
    check_length(arr, 2, 'angle')
    return float(arr[0]), float(arr[1])


class Vec3(BaseVector):
    """
    Vector in 3D space.

    Construction:
        Vec3()                          -> (0, 0, 0)
        Vec3(1, 2, 3)
        Vec3([1, 2, 3])                 sequence or numpy array
        Vec3({'x': 1, 'y': 2, 'z': 3})  also {'i', 'j', 'k'} and attribute objects
        Vec3(other_vec3)
    """

    __slots__ = ()

    _dimension = 3

    def __init__(self, x: Any = None, y: float | None = None, z: float | None = None):
        if x is None and y is None and z is None:
            coords = np.zeros(3)
        elif y is not None or z is not None:
            if y is None or z is None:
                raise ValidationError("Vec3: expected all of x, y and z")
            coords = np.array([
                check_scalar(x, 'x'), check_scalar(y, 'y'), check_scalar(z, 'z'),
            ])
        elif isinstance(x, Real) and not isinstance(x, bool):
            raise ValidationError("Vec3: got a single number, expected x, y and z")
        else:
            coords = as_components(x, 'v', 3)
        self._assign(coords)

    def _set_axis(self, index: int, value: float, name: str) -> None:
        coords = self._coords.copy()
        coords[index] = check_scalar(value, name)
        self._assign(coords)

    @property
    def x(self) -> float:
        return float(self._coords[0])

    @x.setter
    def x(self, value: float) -> None:
        self._set_axis(0, value, 'x')

    @property
    def y(self) -> float:
        return float(self._coords[1])

    @y.setter
    def y(self, value: float) -> None:
        self._set_axis(1, value, 'y')

    @property
    def z(self) -> float:
        return float(self._coords[2])

    @z.setter
    def z(self, value: float) -> None:
        self._set_axis(2, value, 'z')

    # ─── coordinate systems ───────────────────────────────────────────

    @property
    def cylinder(self) -> tuple[float, float, float]:
        """Cylindrical coordinates (ρ, φ, z)."""
        x, y, z = self.coords
        return math.hypot(x, y), math.atan2(y, x), z

    @property
    def sphere(self) -> tuple[float, float, float]:
        """Spherical coordinates (r, θ azimuthal, φ polar)."""
        x, y, _ = self.coords
        return self._mag, math.atan2(y, x), _polar_angle(self._coords, self._mag)

    def set_spherical(
        self,
        magnitude: float,
        theta: float = 0.0,
        phi: float = 0.0,
        unit: str = 'rad',
    ) -> Vec3:
        """Set components from spherical coordinates."""
        r = check_scalar(magnitude, 'magnitude')
        theta = to_radians(theta, unit, 'theta')
        phi = to_radians(phi, unit, 'phi')
        self._assign(np.array([
            r * math.sin(phi) * math.cos(theta),
            r * math.sin(phi) * math.sin(theta),
            r * math.cos(phi),
        ]))
        return self

    def from_angles(self, theta: float, phi: float | None = None, unit: str = 'rad') -> Vec3:
        """
        Point the vector at (θ, φ) keeping its magnitude.

        Args:
            theta: Azimuthal angle (x-y plane)
            phi: Polar angle from +z; None keeps the current one
            unit: 'rad' or 'deg'
        """
        theta = to_radians(theta, unit, 'theta')
        if phi is None:
            phi = _polar_angle(self._coords, self._mag)
        else:
            phi = to_radians(phi, unit, 'phi')
        return self.set_spherical(self._mag, theta, phi)

    def rotate(self, theta: float = 0.0, phi: float = 0.0, unit: str = 'rad') -> Vec3:
        """Add Δθ to the azimuthal and Δφ to the polar angle."""
        theta = to_radians(theta, unit, 'theta')
        phi = to_radians(phi, unit, 'phi')
        if self._mag == 0.0:
            return self
        theta += math.atan2(self._coords[1], self._coords[0])
        phi += _polar_angle(self._coords, self._mag)
        return self.set_spherical(self._mag, theta, phi)

    def rotated(self, theta: float = 0.0, phi: float = 0.0, unit: str = 'rad') -> Vec3:
        return self.clone().rotate(theta, phi, unit)

    # ─── products ─────────────────────────────────────────────────────

    def cross(self, v: Any) -> Vec3:
        """New vector perpendicular to both operands (right-hand rule)."""
        return Vec3._from_components(np.cross(self._coords, self._operand(v)))

    def outer(self, v: Any) -> Matrix:
        """Outer (direct) product as a 3x3 Matrix."""
        return Matrix(np.outer(self._coords, self._operand(v)))

    def direct(self, v: Any) -> Matrix:
        """Alias for :meth:`outer`."""
        return self.outer(v)

    def between(self, a: Any, unit: str = 'rad') -> float:
        """
        Angle between this vector and a positive axis or another vector.

        Args:
            a: Axis symbol ('x', 'y', 'z', 'i', 'j', 'k') or vector-like
            unit: 'rad' or 'deg'

        Raises:
            DivisionByZeroError: If either operand has zero magnitude
        """
        if self._mag == 0.0:
            raise DivisionByZeroError("between: this vector has zero magnitude")

        if isinstance(a, str):
            check_axis(a, AXES_3D, 'a')
            cos_theta = self._coords[_AXIS_INDEX[a]] / self._mag
        else:
            other = self._operand(a, 'a')
            other_mag = float(np.linalg.norm(other))
            if other_mag == 0.0:
                raise DivisionByZeroError("between: operand has zero magnitude")
            cos_theta = float(np.dot(self._coords, other)) / (self._mag * other_mag)

        theta = math.acos(min(1.0, max(-1.0, cos_theta)))
        return from_radians(theta, unit)

    # ─── projections ──────────────────────────────────────────────────

    def project(self, target: Any, angle: Any = None, unit: str = 'rad') -> Vec2:
        """
        Project onto a 2D plane.

        With an axis symbol the projection looks along that axis and drops
        it: 'x' -> (y, z), 'y' -> (x, z), 'z' -> (x, y).

        With a camera position the view direction is the camera's spherical
        direction offset by yaw ``alpha`` and pitch ``beta``. The vector's
        component along that normal is removed and the remainder, expressed
        in the plane basis (e_θ, -e_φ), is divided by the camera distance.
        See https://blog.mattt.space/p/vec-projection

        Args:
            target: Axis symbol or camera position (vector-like)
            angle: (alpha, beta) or {'alpha': ..., 'beta': ...}; camera only
            unit: Unit of ``angle``

        Raises:
            DivisionByZeroError: If the camera sits at the origin
        """
        if isinstance(target, str):
            check_axis(target, AXES_3D, 'target')
            i, j = _PROJECTION_KEEP[target]
            return Vec2(float(self._coords[i]), float(self._coords[j]))
        return self._project_camera(target, angle, unit)

    def _project_camera(self, camera: Any, angle: Any, unit: str) -> Vec2:
        c = as_components(camera, 'camera', 3)
        r = float(np.linalg.norm(c))
        if r == 0.0:
            raise DivisionByZeroError(
                "project: camera is at the origin, view direction is undefined"
            )

        alpha, beta = _yaw_pitch(angle)
        factor = check_angle_unit(unit)
        theta = math.atan2(c[1], c[0]) + alpha * factor
        phi = math.acos(min(1.0, max(-1.0, c[2] / r))) + beta * factor

        d = float(np.linalg.norm(c - self._coords))
        if d == 0.0:
            return Vec2()

        normal = np.array([
            math.sin(phi) * math.cos(theta),
            math.sin(phi) * math.sin(theta),
            math.cos(phi),
        ])
        # proj_n(v) = (v . n) n, n is unit length
        in_plane = self._coords - np.dot(self._coords, normal) * normal

        right = np.array([-math.sin(theta), math.cos(theta), 0.0])
        up = np.array([
            -math.cos(phi) * math.cos(theta),
            -math.cos(phi) * math.sin(theta),
            math.sin(phi),
        ])
        return Vec2(float(np.dot(in_plane, right)) / d, float(np.dot(in_plane, up)) / d)

    def flatten(self) -> Vec2:
        """
        Drop z by re-deriving (x, y) from the full 3D magnitude and the
        x-y angle.

        This is not a true projection: the z-component's share of the
        magnitude is folded into the plane.
        """
        theta = math.atan2(self._coords[1], self._coords[0])
        return Vec2(self._mag * math.cos(theta), self._mag * math.sin(theta))
