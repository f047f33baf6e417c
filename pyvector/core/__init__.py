"""
Core infrastructure for pyvector.

This module provides shared abstractions and utilities used by the
vector, matrix, transform and span modules.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    tolerances: Comparison tolerances and numeric configuration
    protocols: Structural types for named-axis and three.js-style inputs
"""

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
from pyvector.core.tolerances import ToleranceTier, EXACT, DEFAULT, LOOSE

__all__ = [
    # Exceptions
    "PyVectorError",
    "ValidationError",
    "DimensionError",
    "NotSquareError",
    "InvalidArgumentError",
    "NumericalError",
    "SingularMatrixError",
    "DivisionByZeroError",
    # Tolerances
    "ToleranceTier",
    "EXACT",
    "DEFAULT",
    "LOOSE",
]
