"""
Compatibility adapters for foreign vector APIs.

Kept apart from the core: nothing in pyvector imports this package.
"""

from pyvector.compat.three import ThreeVector2, ThreeVector3, three

__all__ = [
    "ThreeVector2",
    "ThreeVector3",
    "three",
]
