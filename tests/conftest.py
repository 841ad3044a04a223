"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from densematrix import Matrix


SAMPLE_ROWS = [
    [2.0, 5.0, 7.0],
    [6.0, 3.0, 4.0],
    [5.0, -2.0, -3.0],
]


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def sample_matrix():
    """3x3 integer matrix with determinant -1 and an integer inverse."""
    return Matrix.from_rows(SAMPLE_ROWS)


@pytest.fixture
def identity3():
    return Matrix.identity(3)


@pytest.fixture
def well_conditioned(rng):
    """Random 4x4 matrix made diagonally dominant so it is safely invertible."""
    a = rng.standard_normal((4, 4)) + 4.0 * np.eye(4)
    return Matrix.from_array(a)
