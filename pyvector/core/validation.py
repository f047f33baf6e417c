"""
Input validation utilities for pyvector.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math
from numbers import Integral, Real
from typing import Any, Iterable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyvector.core.exceptions import (
    DimensionError,
    InvalidArgumentError,
    NotSquareError,
    ValidationError,
)


ANGLE_UNITS = {
    'rad': 1.0,
    'deg': math.pi / 180.0,
}


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or ragged data)
    and non-numeric dtypes.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of dtype float64 (always a fresh copy)

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or ragged data"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex values are not supported")

    return np.array(result, dtype=np.float64)


def check_ndim(array: NDArray[Any], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        ValidationError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise ValidationError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[Any], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[Any], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_not_empty(array: NDArray[Any], name: str) -> None:
    """
    Verify array has at least one element.

    Raises:
        ValidationError: If array has no elements
    """
    if array.size == 0:
        raise ValidationError(f"{name}: must have at least one element")


def check_length(array: NDArray[Any], length: int, name: str) -> None:
    """
    Verify a 1D array has exactly ``length`` components.

    Raises:
        DimensionError: If the length does not match
    """
    if array.shape[0] != length:
        raise DimensionError(
            f"{name}: expected {length} components, got {array.shape[0]}"
        )


def check_same_length(
    *arrays: NDArray[Any],
    names: tuple[str, ...],
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Args:
        *arrays: Arrays to check
        names: Parameter names for error messages (must match number of arrays)

    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent dimensions: {details}")


def check_square(array: NDArray[Any], name: str, operation: str) -> None:
    """
    Verify a 2D array is square.

    Raises:
        NotSquareError: If rows != cols
    """
    rows, cols = array.shape
    if rows != cols:
        raise NotSquareError(
            f"{name}: {operation} requires a square matrix, got {rows}x{cols}",
            shape=(rows, cols),
            operation=operation,
        )


def check_positive_int(value: Any, name: str) -> int:
    """
    Verify value is an integer >= 1.

    Returns:
        The value as a Python int

    Raises:
        InvalidArgumentError: If value is not an integer or is < 1
    """
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidArgumentError(
            f"{name}: expected a positive integer, got {type(value).__name__} {value!r}",
            name=name,
            value=value,
        )
    if value < 1:
        raise InvalidArgumentError(
            f"{name}: must be >= 1, got {value}",
            name=name,
            value=value,
        )
    return int(value)


def check_scalar(value: Any, name: str) -> float:
    """
    Verify value is a real number.

    Raises:
        ValidationError: If value is not a real scalar
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__}"
        )
    return float(value)


def check_angle_unit(unit: str) -> float:
    """
    Validate an angle unit and return its size in radians.

    Args:
        unit: 'rad' or 'deg' (case-insensitive)

    Returns:
        Multiplier converting a value in ``unit`` to radians

    Raises:
        ValidationError: If the unit is unknown
    """
    key = unit.lower() if isinstance(unit, str) else unit
    if key not in ANGLE_UNITS:
        raise ValidationError(
            f"unit: unknown angle unit {unit!r}. Must be 'rad' or 'deg'."
        )
    return ANGLE_UNITS[key]


def check_axis(axis: str, allowed: Iterable[str], name: str) -> str:
    """
    Verify an axis symbol is one of ``allowed``.

    Raises:
        ValidationError: If the symbol is unknown
    """
    allowed = tuple(allowed)
    if axis not in allowed:
        raise ValidationError(
            f"{name}: unknown axis {axis!r}. Must be one of {', '.join(allowed)}."
        )
    return axis
