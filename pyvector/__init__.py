"""
PyVector: vectors and dense matrices for Python.

A small linear-algebra toolkit built on numpy and scipy.

Submodules:
    vector: Vec1, Vec2, Vec3 and VecN
    matrix: Matrix (determinant, inverse, row reduction, Padé exponential)
    transform: matrix-vector transforms returning the right vector type
    span: Span, span() and collinear()
    ops: free-function vector namespace
    tensor: elementwise n-dimensional container
    compat: three.js-style adapters (imported explicitly)
"""

__version__ = "0.1.0"

from pyvector.core.exceptions import (
    PyVectorError,
    ValidationError,
    DimensionError,
    NotSquareError,
    InvalidArgumentError,
    NumericalError,
    SingularMatrixError,
    DivisionByZeroError,
)
from pyvector.vector import BaseVector, Vec1, Vec2, Vec3, VecN
from pyvector.matrix import Matrix, expm, powm
from pyvector.transform import AnyVector, apply_transform, vector_from_components
from pyvector.span import Span, span, collinear
from pyvector.tensor import Tensor
from pyvector import ops

__all__ = [
    "__version__",
    # Vectors
    "BaseVector",
    "Vec1",
    "Vec2",
    "Vec3",
    "VecN",
    "AnyVector",
    # Matrices
    "Matrix",
    "expm",
    "powm",
    # Transform and span
    "apply_transform",
    "vector_from_components",
    "Span",
    "span",
    "collinear",
    # Other
    "Tensor",
    "ops",
    # Exceptions
    "PyVectorError",
    "ValidationError",
    "DimensionError",
    "NotSquareError",
    "InvalidArgumentError",
    "NumericalError",
    "SingularMatrixError",
    "DivisionByZeroError",
]
