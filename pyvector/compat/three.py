"""
three.js-style adapters for Vec2 and Vec3.

The adapters mutate the wrapped vector in place and return themselves so
calls chain the way three.js calls do:

    v = Vec3(1, 2, 3)
    three(v).set_x(0).apply_matrix4(m)    # v now holds the result

Matrices are read in three.js layout: a flat, column-major ``elements``
sequence (9 entries for Matrix3, 16 for Matrix4). An object exposing
``elements``, a flat sequence of the right length, a square nested grid
(row-major, as elsewhere in pyvector) or a pyvector Matrix are accepted.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pyvector.core.exceptions import DimensionError, DivisionByZeroError, ValidationError
from pyvector.core.protocols import Camera, ElementMatrix
from pyvector.core.validation import check_array, check_scalar
from pyvector.matrix.matrix import Matrix
from pyvector.vector import Vec2, Vec3


def _elements(m: Any, n: int, name: str = 'm') -> NDArray[np.float64]:
    """Flat column-major elements of an n x n matrix."""
    if isinstance(m, ElementMatrix):
        e = check_array(m.elements, name).ravel()
    elif isinstance(m, Matrix):
        e = m.grid.T.ravel()
    else:
        arr = check_array(m, name)
        e = arr.T.ravel() if arr.ndim == 2 else arr.ravel()

    if e.shape[0] != n * n:
        raise DimensionError(
            f"{name}: expected a {n}x{n} matrix ({n * n} elements), got {e.shape[0]}"
        )
    return e


class ThreeVector2:
    """three.js Vector2 surface over a :class:`Vec2`."""

    __slots__ = ('vector',)

    def __init__(self, v: Vec2):
        if not isinstance(v, Vec2):
            raise ValidationError(f"v: expected Vec2, got {type(v).__name__}")
        self.vector = v

    def set(self, x: float, y: float) -> ThreeVector2:
        self.vector.copy([check_scalar(x, 'x'), check_scalar(y, 'y')])
        return self

    def set_x(self, x: float) -> ThreeVector2:
        self.vector.x = x
        return self

    def set_y(self, y: float) -> ThreeVector2:
        self.vector.y = y
        return self

    def apply_matrix3(self, m: ElementMatrix | Any) -> ThreeVector2:
        """Apply a 3x3 affine matrix to the point (x, y, 1)."""
        e = _elements(m, 3)
        x, y = self.vector.x, self.vector.y
        self.vector.copy([
            e[0] * x + e[3] * y + e[6],
            e[1] * x + e[4] * y + e[7],
        ])
        return self


class ThreeVector3:
    """three.js Vector3 surface over a :class:`Vec3`."""

    __slots__ = ('vector',)

    def __init__(self, v: Vec3):
        if not isinstance(v, Vec3):
            raise ValidationError(f"v: expected Vec3, got {type(v).__name__}")
        self.vector = v

    def set(self, x: float, y: float, z: float) -> ThreeVector3:
        self.vector.copy([check_scalar(x, 'x'), check_scalar(y, 'y'), check_scalar(z, 'z')])
        return self

    def set_x(self, x: float) -> ThreeVector3:
        self.vector.x = x
        return self

    def set_y(self, y: float) -> ThreeVector3:
        self.vector.y = y
        return self

    def set_z(self, z: float) -> ThreeVector3:
        self.vector.z = z
        return self

    def manhattan_length(self) -> float:
        """|x| + |y| + |z|"""
        return float(np.abs(self.vector.components).sum())

    def apply_matrix4(self, m: ElementMatrix | Any) -> ThreeVector3:
        """
        Apply a 4x4 matrix to the point (x, y, z, 1) with perspective divide.

        Raises:
            DivisionByZeroError: If the homogeneous w coordinate is 0
        """
        e = _elements(m, 4)
        x, y, z = self.vector.coords

        w = e[3] * x + e[7] * y + e[11] * z + e[15]
        if w == 0.0:
            raise DivisionByZeroError("apply_matrix4: homogeneous coordinate w is 0")

        self.vector.copy([
            (e[0] * x + e[4] * y + e[8] * z + e[12]) / w,
            (e[1] * x + e[5] * y + e[9] * z + e[13]) / w,
            (e[2] * x + e[6] * y + e[10] * z + e[14]) / w,
        ])
        return self

    def project(self, camera: Camera) -> ThreeVector3:
        """World space to normalised device coordinates."""
        camera = _check_camera(camera)
        return (
            self.apply_matrix4(camera.matrix_world_inverse)
            .apply_matrix4(camera.projection_matrix)
        )

    def unproject(self, camera: Camera) -> ThreeVector3:
        """Normalised device coordinates back to world space."""
        camera = _check_camera(camera)
        return (
            self.apply_matrix4(camera.projection_matrix_inverse)
            .apply_matrix4(camera.matrix_world)
        )


def _check_camera(camera: Any) -> Camera:
    if not isinstance(camera, Camera):
        raise ValidationError(
            "camera: expected an object with matrix_world, matrix_world_inverse, "
            "projection_matrix and projection_matrix_inverse"
        )
    return camera


def three(v: Vec2 | Vec3) -> ThreeVector2 | ThreeVector3:
    """Wrap a Vec2 or Vec3 in its three.js-style adapter."""
    if isinstance(v, Vec3):
        return ThreeVector3(v)
    if isinstance(v, Vec2):
        return ThreeVector2(v)
    raise ValidationError(
        f"v: three.js adapters exist for Vec2 and Vec3, got {type(v).__name__}"
    )
