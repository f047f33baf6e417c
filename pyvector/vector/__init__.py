"""
Vector family.

Public API:
    Vec1, Vec2, Vec3  - fixed-dimension vectors with dimension-specific geometry
    VecN              - arbitrary-dimension vector
    BaseVector        - the shared contract
    as_components     - coerce a vector-like value into a float64 array
"""

from pyvector.vector._base import BaseVector, as_components
from pyvector.vector.vec1 import Vec1
from pyvector.vector.vec2 import Vec2
from pyvector.vector.vec3 import Vec3
from pyvector.vector.vecn import VecN

__all__ = [
    "BaseVector",
    "as_components",
    "Vec1",
    "Vec2",
    "Vec3",
    "VecN",
]
