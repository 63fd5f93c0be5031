"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from mplinalg.core.compute.precision import DEFAULT_DPS, working_precision


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def precision():
    """Run the test at DEFAULT_DPS decimal digits."""
    with working_precision(DEFAULT_DPS):
        yield DEFAULT_DPS


@pytest.fixture
def symmetric_indefinite(rng):
    """Random 6x6 symmetric matrix with eigenvalues of both signs."""
    n = 6
    M = rng.standard_normal((n, n))
    A = M + M.T
    A[np.diag_indices(n)] = rng.uniform(-0.5, 0.5, n)
    return A


@pytest.fixture
def diagonally_dominant(rng):
    """Symmetric positive definite integer matrix, strictly diagonally dominant."""
    n = 5
    M = rng.integers(-2, 3, size=(n, n))
    A = (M + M.T).astype(float)
    A[np.diag_indices(n)] = 20.0 + np.arange(n)
    return A
