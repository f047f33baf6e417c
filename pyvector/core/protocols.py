"""
Structural protocols for pyvector inputs.

These define the shapes of foreign objects the library reads from:
named-axis points and three.js-style matrices and cameras. We use
Protocol (structural typing) rather than ABC (nominal typing) so any
object with the right attributes is accepted without registration.

Mappings ({'x': 1, 'y': 2}) are handled separately by the vector
coercion code; these protocols cover attribute-style objects.
"""

from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class XYPoint(Protocol):
    """An object exposing planar coordinates as attributes."""

    x: float
    y: float


@runtime_checkable
class XYZPoint(Protocol):
    """An object exposing cartesian coordinates as attributes."""

    x: float
    y: float
    z: float


@runtime_checkable
class IJKPoint(Protocol):
    """An object exposing unit-vector (i, j, k) components as attributes."""

    i: float
    j: float
    k: float


@runtime_checkable
class ElementMatrix(Protocol):
    """
    A matrix stored as a flat, column-major ``elements`` sequence.

    This is how three.js stores Matrix3 (9 elements) and Matrix4
    (16 elements).
    """

    elements: Sequence[float]


@runtime_checkable
class Camera(Protocol):
    """A three.js-style camera carrying its world and projection matrices."""

    matrix_world: ElementMatrix
    matrix_world_inverse: ElementMatrix
    projection_matrix: ElementMatrix
    projection_matrix_inverse: ElementMatrix
