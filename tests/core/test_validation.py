"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype coercion, object/complex rejection
    - check_ndim / check_1d / check_2d: dimensionality checks
    - check_length / check_same_length: component counts
    - check_square, check_positive_int, check_scalar
    - check_angle_unit, check_axis
"""

import math

import numpy as np
import pytest

from pyvector.core.exceptions import (
    DimensionError,
    InvalidArgumentError,
    NotSquareError,
    ValidationError,
)
from pyvector.core.validation import (
    check_1d,
    check_2d,
    check_angle_unit,
    check_array,
    check_axis,
    check_length,
    check_ndim,
    check_not_empty,
    check_positive_int,
    check_same_length,
    check_scalar,
    check_square,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to float64 and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "v")
        assert isinstance(result, np.ndarray)
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_int_array_promoted_to_float(self):
        arr = np.array([1, 2, 3], dtype=np.int32)
        assert check_array(arr, "v").dtype == np.float64

    def test_returns_copy(self):
        arr = np.array([1.0, 2.0])
        result = check_array(arr, "v")
        result[0] = 99.0
        assert arr[0] == 1.0

    def test_nested_list_to_2d(self):
        result = check_array([[1, 2], [3, 4]], "m")
        assert result.shape == (2, 2)

    def test_ragged_rejected(self):
        with pytest.raises(ValidationError, match="m"):
            check_array([[1, 2], [3]], "m")

    def test_strings_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            check_array(["a", "b"], "v")

    def test_object_dtype_rejected(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array(np.array([1, None], dtype=object), "v")

    def test_complex_rejected(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array([1 + 2j, 3], "v")


# ═══════════════════════════════════════════════════════════════════════
# Dimensionality
# ═══════════════════════════════════════════════════════════════════════


class TestDimensionality:

    def test_check_ndim_passes(self):
        check_ndim(np.zeros((2, 2, 2)), 3, "t")

    def test_check_ndim_message(self):
        with pytest.raises(ValidationError, match="expected 3D array, got 2D"):
            check_ndim(np.zeros((2, 2)), 3, "t")

    def test_check_1d_rejects_2d(self):
        with pytest.raises(ValidationError, match="v"):
            check_1d(np.zeros((2, 2)), "v")

    def test_check_2d_rejects_1d(self):
        with pytest.raises(ValidationError, match="m"):
            check_2d(np.zeros(3), "m")

    def test_check_not_empty(self):
        with pytest.raises(ValidationError, match="at least one element"):
            check_not_empty(np.zeros(0), "v")


class TestLengths:

    def test_check_length_passes(self):
        check_length(np.zeros(3), 3, "v")

    def test_check_length_raises_dimension_error(self):
        with pytest.raises(DimensionError, match="expected 3 components, got 2"):
            check_length(np.zeros(2), 3, "v")

    def test_same_length_passes(self):
        check_same_length(np.zeros(2), np.ones(2), names=("a", "b"))

    def test_same_length_reports_all(self):
        with pytest.raises(DimensionError, match="a=2, b=3"):
            check_same_length(np.zeros(2), np.zeros(3), names=("a", "b"))

    def test_names_must_match(self):
        with pytest.raises(ValueError):
            check_same_length(np.zeros(2), np.zeros(2), names=("a",))


class TestCheckSquare:

    def test_square_passes(self):
        check_square(np.eye(3), "m", "inverse")

    def test_not_square_carries_shape(self):
        with pytest.raises(NotSquareError) as exc_info:
            check_square(np.zeros((2, 3)), "m", "inverse")
        assert exc_info.value.shape == (2, 3)
        assert "inverse" in str(exc_info.value)


# ═══════════════════════════════════════════════════════════════════════
# Scalars
# ═══════════════════════════════════════════════════════════════════════


class TestScalars:

    def test_positive_int_returns_int(self):
        assert check_positive_int(np.int64(4), "n") == 4

    @pytest.mark.parametrize("value", [0, -1])
    def test_positive_int_rejects_small(self, value):
        with pytest.raises(InvalidArgumentError, match=">= 1"):
            check_positive_int(value, "n")

    @pytest.mark.parametrize("value", [1.5, True, "3"])
    def test_positive_int_rejects_non_integers(self, value):
        with pytest.raises(InvalidArgumentError):
            check_positive_int(value, "n")

    def test_scalar_returns_float(self):
        result = check_scalar(3, "s")
        assert result == 3.0
        assert isinstance(result, float)

    @pytest.mark.parametrize("value", [[1], "1", None, False])
    def test_scalar_rejects(self, value):
        with pytest.raises(ValidationError, match="s"):
            check_scalar(value, "s")


class TestUnitsAndAxes:

    def test_radians(self):
        assert check_angle_unit('rad') == 1.0

    def test_degrees_case_insensitive(self):
        assert check_angle_unit('DEG') == pytest.approx(math.pi / 180)

    def test_unknown_unit(self):
        with pytest.raises(ValidationError, match="grad"):
            check_angle_unit('grad')

    def test_axis_passes(self):
        assert check_axis('y', ('x', 'y'), 'a') == 'y'

    def test_unknown_axis(self):
        with pytest.raises(ValidationError, match="Must be one of x, y"):
            check_axis('z', ('x', 'y'), 'a')
