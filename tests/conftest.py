"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def exp_samples():
    """e^x sampled at x = 0..3, rounded as a user would type it."""
    x = np.array([0.0, 1.0, 2.0, 3.0])
    y = np.array([1.0, 2.71828, 7.38906, 20.0855])
    return x, y


@pytest.fixture
def noisy_exponential_data(rng):
    """y = 2·exp(0.5·x) plus small Gaussian noise."""
    x = np.linspace(0.0, 4.0, 25)
    c_true = np.array([2.0, 0.5])
    y = c_true[0] * np.exp(c_true[1] * x) + rng.standard_normal(x.size) * 0.05
    return x, y, c_true


@pytest.fixture
def well_conditioned_system(rng):
    """Random diagonally dominant 5x5 system."""
    M = rng.standard_normal((5, 5)) + 5.0 * np.eye(5)
    A = rng.standard_normal((5, 1))
    return M, A
