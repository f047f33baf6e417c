"""
Tests for the Padé matrix exponential (Matrix.exp, Matrix.pow, expm, powm).

scipy.linalg.expm (scaling-and-squaring Padé) is the reference.
"""

import math
import warnings

import numpy as np
import pytest
from scipy import linalg

from pyvector import InvalidArgumentError, Matrix, NotSquareError, expm, powm
from pyvector.core.tolerances import LOOSE, PADE_DEFAULT_DEGREE
from pyvector.matrix._pade import one_norm, pade_coefficients, pade_expm


# ═══════════════════════════════════════════════════════════════════════
# Kernel
# ═══════════════════════════════════════════════════════════════════════


class TestPadeCoefficients:

    def test_degree_one(self):
        assert pade_coefficients(1) == pytest.approx([1.0, 0.5])

    def test_degree_two(self):
        assert pade_coefficients(2) == pytest.approx([1.0, 0.5, 1.0 / 12.0])

    def test_degree_three(self):
        assert pade_coefficients(3) == pytest.approx([1.0, 0.5, 0.1, 1.0 / 120.0])

    def test_leading_coefficient_is_one(self):
        for k in range(1, 10):
            assert pade_coefficients(k)[0] == pytest.approx(1.0)


class TestPadeKernel:

    def test_degree_one_closed_form(self):
        a = np.array([[0.1, 0.2], [0.0, -0.3]])
        i = np.eye(2)
        expected = np.linalg.solve(i - a / 2, i + a / 2)
        np.testing.assert_allclose(pade_expm(a, 1), expected, rtol=1e-12)

    def test_scalar(self):
        result = pade_expm(np.array([[0.5]]), PADE_DEFAULT_DEGREE)
        assert result[0, 0] == pytest.approx(math.exp(0.5), rel=1e-12)

    def test_one_norm(self):
        assert one_norm(np.array([[1.0, -2.0], [3.0, 4.0]])) == 6.0


# ═══════════════════════════════════════════════════════════════════════
# Matrix.exp
# ═══════════════════════════════════════════════════════════════════════


class TestExp:

    def test_zero_matrix_gives_identity(self):
        np.testing.assert_allclose(Matrix.zeros(3).exp().grid, np.eye(3))

    def test_diagonal(self):
        m = Matrix([[0.5, 0], [0, -1.0]]).exp()
        np.testing.assert_allclose(m.grid, np.diag([math.exp(0.5), math.exp(-1.0)]), rtol=1e-10)

    def test_matches_scipy(self, small_matrix):
        np.testing.assert_allclose(
            small_matrix.clone().exp().grid,
            linalg.expm(small_matrix.grid),
            rtol=LOOSE.rtol,
            atol=LOOSE.atol,
        )

    def test_nilpotent(self):
        m = Matrix([[0, 1], [0, 0]]).exp()
        np.testing.assert_allclose(m.grid, [[1, 1], [0, 1]], atol=1e-12)

    def test_in_place(self):
        m = Matrix([[0.1]])
        assert m.exp() is m
        assert m[0, 0] == pytest.approx(math.exp(0.1))

    def test_low_degree_is_less_accurate(self, small_matrix):
        reference = linalg.expm(small_matrix.grid)
        err1 = np.abs(small_matrix.clone().exp(1).grid - reference).max()
        err6 = np.abs(small_matrix.clone().exp(6).grid - reference).max()
        assert err6 < err1

    def test_not_square(self):
        with pytest.raises(NotSquareError):
            Matrix([[1, 2]]).exp()

    @pytest.mark.parametrize("degree", [0, -1, 2.5])
    def test_bad_degree(self, degree):
        with pytest.raises(InvalidArgumentError):
            Matrix([[0.1]]).exp(degree)

    def test_large_norm_warns(self):
        with pytest.warns(RuntimeWarning, match="Padé"):
            Matrix([[5.0, 0], [0, 1.0]]).exp()

    def test_small_norm_is_silent(self, small_matrix):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            small_matrix.exp()


# ═══════════════════════════════════════════════════════════════════════
# Matrix.pow
# ═══════════════════════════════════════════════════════════════════════


class TestPow:

    def test_base_e_is_exp(self, small_matrix):
        np.testing.assert_allclose(
            small_matrix.clone().pow(math.e).grid,
            small_matrix.clone().exp().grid,
            rtol=1e-12,
        )

    def test_base_two_diagonal(self):
        m = Matrix([[1.0, 0], [0, 2.0]]).pow(2)
        np.testing.assert_allclose(m.grid, [[2.0, 0], [0, 4.0]], rtol=1e-8)

    def test_base_one_is_identity(self):
        np.testing.assert_allclose(Matrix([[1, 2], [3, 4]]).pow(1).grid, np.eye(2))

    @pytest.mark.parametrize("base", [0, -2])
    def test_non_positive_base(self, base):
        with pytest.raises(InvalidArgumentError) as exc_info:
            Matrix([[0.1]]).pow(base)
        assert exc_info.value.name == 'base'

    def test_not_square(self):
        with pytest.raises(NotSquareError):
            Matrix([[1, 2]]).pow(2)


# ═══════════════════════════════════════════════════════════════════════
# Module functions
# ═══════════════════════════════════════════════════════════════════════


class TestModuleFunctions:

    def test_expm_does_not_mutate(self, small_matrix):
        before = small_matrix.grid
        result = expm(small_matrix)
        np.testing.assert_array_equal(small_matrix.grid, before)
        assert result is not small_matrix

    def test_expm_accepts_grid(self):
        np.testing.assert_allclose(expm([[0.0]]).grid, [[1.0]])

    def test_powm(self, small_matrix):
        np.testing.assert_allclose(
            powm(small_matrix, 3).grid,
            linalg.expm(math.log(3) * small_matrix.grid),
            rtol=LOOSE.rtol,
            atol=LOOSE.atol,
        )
