"""conftest module."""

import numpy as np
import pytest


def pytest_configure(config):
    # globally turn off scientific notation in every test session
    np.set_printoptions(suppress=True, precision=6)


@pytest.fixture
def random_data():
    """Fixture that returns a random numpy array in [0,1] of shape (2, 100)."""
    rng = np.random.default_rng(seed=42)
    return rng.random((2, 100))


@pytest.fixture(scope="module")
def sigma():
    """Population covariance with unequal variances and correlated variables."""
    std = np.array([1.0, 2.0, 0.5, 1.5, 3.0, 1.0, 0.8, 2.5])
    idx = np.arange(len(std))
    corr = 0.4 ** np.abs(idx[:, None] - idx[None, :])
    return corr * std * std[:, None]


@pytest.fixture(scope="module")
def data(sigma):
    """High dimensional data of shape (n_variables, n_observations) = (40, 12)."""
    rng = np.random.default_rng(seed=42)
    p, n = 40, 12
    cov = np.kron(np.eye(p // len(sigma)), sigma)
    return rng.multivariate_normal(np.full(p, 0.5), cov, size=n).T


@pytest.fixture(scope="module")
def centered_data(sigma):
    """Zero-mean data of shape (n_variables, n_observations) = (8, 6)."""
    rng = np.random.default_rng(seed=7)
    return rng.multivariate_normal(np.zeros(len(sigma)), sigma, size=6).T


@pytest.fixture(scope="module")
def X(data):
    """Returns of shape (n_observations, n_assets) as in scikit-learn."""
    return data.T.copy()
