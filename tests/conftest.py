"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pyvector import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def random_square(rng):
    """Well-conditioned 4x4 matrix (diagonally dominant)."""
    a = rng.standard_normal((4, 4))
    return a + 4.0 * np.eye(4)


@pytest.fixture
def small_matrix(rng):
    """3x3 matrix with a 1-norm below the Padé warning threshold."""
    return Matrix(rng.uniform(-0.4, 0.4, size=(3, 3)))


@pytest.fixture
def singular_grid():
    """3x3 grid with linearly dependent rows."""
    return [[1.0, 2.0, 3.0], [2.0, 4.0, 6.0], [1.0, 0.0, 1.0]]
