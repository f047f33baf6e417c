"""
Tests for VecN.
"""

import numpy as np
import pytest

from pyvector import DimensionError, InvalidArgumentError, ValidationError, Vec3, VecN


class TestConstruction:

    def test_int_is_zero_vector(self):
        v = VecN(4)
        assert v.dimension == 4
        assert v.magnitude == 0.0

    def test_sequence(self):
        assert VecN([1, 2, 3, 4, 5]).dimension == 5

    def test_named_axes(self):
        assert VecN({'x': 1, 'y': 2}).coords == (1.0, 2.0)

    def test_from_other_vector(self):
        assert VecN(Vec3(1, 2, 3)).coords == (1.0, 2.0, 3.0)

    def test_zeros(self):
        assert VecN.zeros(3) == VecN([0, 0, 0])

    def test_empty_rejected(self):
        with pytest.raises(ValidationError):
            VecN([])

    @pytest.mark.parametrize("n", [0, -2])
    def test_non_positive_size(self, n):
        with pytest.raises(InvalidArgumentError):
            VecN(n)

    def test_scalar_float_rejected(self):
        with pytest.raises(ValidationError):
            VecN(2.5)

    def test_2d_rejected(self):
        with pytest.raises(ValidationError):
            VecN([[1, 2], [3, 4]])

    def test_repr(self):
        assert repr(VecN([1, 2])) == "VecN([1.0, 2.0])"


class TestDimensionRules:

    @pytest.mark.parametrize("method", ["add", "sub", "dot", "distance", "max", "min"])
    def test_binary_ops_require_equal_dimension(self, method):
        with pytest.raises(DimensionError):
            getattr(VecN([1, 2, 3, 4]), method)([1, 2, 3])

    def test_clamp_mismatch(self):
        with pytest.raises(DimensionError):
            VecN([1, 2, 3, 4]).clamp([0, 0, 0], [1, 1, 1, 1])

    def test_segvec_mismatch(self):
        with pytest.raises(DimensionError):
            VecN([1, 2, 3, 4]).segvec([0, 0, 0, 0], [1, 1])

    def test_copy_may_change_dimension(self):
        v = VecN([1, 2, 3, 4])
        v.copy([5, 6])
        assert v.dimension == 2
        assert v.magnitude == pytest.approx(np.hypot(5, 6))

    def test_no_cross_product(self):
        assert not hasattr(VecN([1, 2, 3]), 'cross')


class TestHighDimension:

    def test_unit(self, rng):
        v = VecN(rng.standard_normal(10)).unit()
        assert v.magnitude == pytest.approx(1.0)

    def test_dot(self):
        assert VecN([1, 1, 1, 1]).dot([1, 2, 3, 4]) == 10.0
