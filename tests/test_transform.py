"""
Tests for the transform dispatcher.

The result type is chosen by the number of rows of the matrix, not by the
type of the input vector.
"""

import numpy as np
import pytest

from pyvector import (
    DimensionError,
    Matrix,
    ValidationError,
    Vec1,
    Vec2,
    Vec3,
    VecN,
    apply_transform,
    vector_from_components,
)


class TestVectorFromComponents:

    @pytest.mark.parametrize("values, cls", [
        ([1.0], Vec1),
        ([1.0, 2.0], Vec2),
        ([1.0, 2.0, 3.0], Vec3),
        ([1.0, 2.0, 3.0, 4.0], VecN),
        (np.arange(9.0), VecN),
    ])
    def test_dispatch_by_length(self, values, cls):
        v = vector_from_components(values)
        assert type(v) is cls
        np.testing.assert_array_equal(v.components, values)

    def test_empty_rejected(self):
        with pytest.raises(ValidationError):
            vector_from_components([])

    def test_2d_rejected(self):
        with pytest.raises(ValidationError):
            vector_from_components([[1, 2]])


class TestApplyTransform:

    def test_identity(self, rng):
        v = Vec3(rng.standard_normal(3))
        assert v.transform(Matrix.eye(3)).isclose(v)

    def test_identity_keeps_type(self):
        assert type(Vec2(1, 2).transform(Matrix.eye(2))) is Vec2

    def test_row_selector_gives_vec1(self):
        assert Vec3([1, 1, 1]).transform(Matrix([[1, 0, 0]])) == Vec1(1)

    def test_raw_grid(self):
        assert Vec2(1, 2).transform([[0, -1], [1, 0]]) == Vec2(-2, 1)

    def test_lift_2d_to_3d(self):
        out = Vec2(1, 2).transform([[1, 0], [0, 1], [1, 1]])
        assert out == Vec3(1, 2, 3)

    def test_lift_to_vecn(self):
        out = Vec1(2).transform([[1], [2], [3], [4]])
        assert out == VecN([2, 4, 6, 8])

    def test_vecn_down_to_vec2(self):
        out = VecN([1, 2, 3, 4]).transform([[1, 1, 1, 1], [1, -1, 1, -1]])
        assert out == Vec2(10, -2)

    def test_matrix_not_mutated(self):
        m = Matrix([[1, 2], [3, 4]])
        Vec2(1, 1).transform(m)
        assert m == Matrix([[1, 2], [3, 4]])

    def test_vector_not_mutated(self):
        v = Vec2(1, 1)
        v.transform([[2, 0], [0, 2]])
        assert v == Vec2(1, 1)

    def test_dimension_mismatch(self):
        with pytest.raises(DimensionError, match="3-dimensional"):
            Vec3(1, 2, 3).transform(Matrix.eye(2))

    def test_plain_sequence_input(self):
        assert apply_transform([1, 2], Matrix.eye(2)) == Vec2(1, 2)

    def test_matches_numpy(self, rng):
        grid = rng.standard_normal((5, 4))
        coords = rng.standard_normal(4)
        out = apply_transform(VecN(coords), grid)
        np.testing.assert_allclose(out.components, grid @ coords)
