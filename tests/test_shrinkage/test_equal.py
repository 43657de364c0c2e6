import numpy as np
import pandas as pd
import pytest

from steinshrink.exceptions import InvalidInputError
from steinshrink.shrinkage import (
    ShrinkageTarget,
    ShrinkCovMatResult,
    shrinkcovmat_equal,
)


def _reference_equal(data, centered):
    """Direct evaluation of the estimator with an explicit loop over column pairs."""
    p, n = data.shape
    if not centered:
        x = data - data.mean(axis=1)[:, None]
        s = x @ x.T / (n - 1)
        trace = np.trace(s)
        q = sum(np.sum(x[:, j] ** 2) ** 2 for j in range(n)) / (n - 1)
        trace_sq = (
            (n - 1)
            / (n * (n - 2) * (n - 3))
            * ((n - 1) * (n - 2) * np.sum(s**2) + trace**2 - n * q)
        )
        lam = (trace**2 + trace_sq) / (n * trace_sq + (p - n + 1) / p * trace**2)
    else:
        s = data @ data.T / n
        trace = np.trace(s)
        trace_sq = 0.0
        for i in range(n - 1):
            for j in range(i + 1, n):
                trace_sq += (data[:, i] @ data[:, j]) ** 2
        trace_sq = 2 * trace_sq / n / (n - 1)
        lam = (trace**2 + trace_sq) / ((n + 1) * trace_sq + (p - n) / p * trace**2)
    lam = min(lam, 1)
    nu = trace / p
    if lam < 1:
        shrunk = (1 - lam) * s + lam * nu * np.eye(p)
    else:
        shrunk = lam * nu * np.eye(p)
    return shrunk, lam, s


@pytest.mark.parametrize("centered", [False, True])
def test_shrinkcovmat_equal_reference(data, centered):
    res = shrinkcovmat_equal(data, centered=centered)
    shrunk, lam, s = _reference_equal(data, centered)

    assert isinstance(res, ShrinkCovMatResult)
    assert res.target_type == ShrinkageTarget.EQUAL
    assert res.centered is centered
    np.testing.assert_almost_equal(res.shrinkage_intensity, lam)
    np.testing.assert_almost_equal(res.sample_covariance, s)
    np.testing.assert_almost_equal(res.shrunk_covariance, shrunk)


@pytest.mark.parametrize("centered", [False, True])
def test_shrinkcovmat_equal_properties(data, centered):
    p = data.shape[0]
    res = shrinkcovmat_equal(data, centered=centered)

    assert 0 <= res.shrinkage_intensity <= 1
    assert res.shrunk_covariance.shape == (p, p)
    np.testing.assert_almost_equal(res.shrunk_covariance, res.shrunk_covariance.T)

    # target
    nu = np.trace(res.sample_covariance) / p
    np.testing.assert_almost_equal(np.diag(res.target), np.full(p, nu))
    assert np.all(np.diag(res.target) == res.target[0, 0])
    np.testing.assert_almost_equal(res.target, np.diag(np.diag(res.target)))

    lam = res.shrinkage_intensity
    np.testing.assert_almost_equal(
        res.shrunk_covariance, (1 - lam) * res.sample_covariance + lam * res.target
    )


def test_shrinkcovmat_equal_sample_covariance(data):
    res = shrinkcovmat_equal(data)
    np.testing.assert_almost_equal(res.sample_covariance, np.cov(data))

    res = shrinkcovmat_equal(data, centered=True)
    np.testing.assert_almost_equal(
        res.sample_covariance, data @ data.T / data.shape[1]
    )


def test_shrinkcovmat_equal_high_dimension_is_positive_definite(data):
    p, n = data.shape
    assert p > n
    res = shrinkcovmat_equal(data)
    assert np.linalg.matrix_rank(res.sample_covariance) < p
    assert 0 < res.shrinkage_intensity <= 1
    assert np.all(np.linalg.eigvalsh(res.shrunk_covariance) > 0)


def test_shrinkcovmat_equal_small_p():
    rng = np.random.default_rng(seed=0)
    sigma = np.array([[2.0, 0.6], [0.6, 1.0]])
    data = rng.multivariate_normal(np.zeros(2), sigma, size=5).T
    assert data.shape == (2, 5)

    res = shrinkcovmat_equal(data)
    lam = res.shrinkage_intensity
    assert lam <= 1
    np.testing.assert_allclose(
        res.shrunk_covariance,
        (1 - lam) * res.sample_covariance + lam * res.target,
        rtol=1e-12,
        atol=1e-12,
    )


def test_shrinkcovmat_equal_constant_data():
    data = np.ones((5, 10))
    res = shrinkcovmat_equal(data)
    np.testing.assert_array_equal(res.sample_covariance, np.zeros((5, 5)))
    np.testing.assert_array_equal(res.target, np.zeros((5, 5)))
    np.testing.assert_array_equal(res.shrunk_covariance, np.zeros((5, 5)))
    assert res.shrinkage_intensity == 1
    # at full intensity the estimator is exactly the target
    np.testing.assert_array_equal(res.shrunk_covariance, res.target)


def test_shrinkcovmat_equal_min_observations():
    rng = np.random.default_rng(seed=1)
    with pytest.raises(InvalidInputError, match="greater than 3"):
        shrinkcovmat_equal(rng.normal(size=(6, 3)))
    res = shrinkcovmat_equal(rng.normal(size=(6, 4)))
    assert res.shrinkage_intensity <= 1

    with pytest.raises(InvalidInputError, match="greater than 1"):
        shrinkcovmat_equal(rng.normal(size=(6, 1)), centered=True)
    res = shrinkcovmat_equal(rng.normal(size=(6, 2)), centered=True)
    assert res.shrinkage_intensity <= 1


@pytest.mark.parametrize("centered", ["yes", "TRUE", 1, 0, None, 1.0])
def test_shrinkcovmat_equal_non_boolean_centered(data, centered):
    with pytest.raises(InvalidInputError, match="'centered'"):
        shrinkcovmat_equal(data, centered=centered)


def test_shrinkcovmat_equal_numpy_bool(data):
    res = shrinkcovmat_equal(data, centered=np.True_)
    assert res.centered is True


def test_shrinkcovmat_equal_does_not_mutate_input(data):
    data_copy = data.copy()
    res = shrinkcovmat_equal(data)
    np.testing.assert_array_equal(data, data_copy)
    assert not np.shares_memory(res.sample_covariance, data)

    res = shrinkcovmat_equal(data, centered=True)
    np.testing.assert_array_equal(data, data_copy)


def test_shrinkcovmat_equal_array_like(data):
    ref = shrinkcovmat_equal(data)
    res = shrinkcovmat_equal(data.tolist())
    np.testing.assert_almost_equal(res.shrunk_covariance, ref.shrunk_covariance)
    res = shrinkcovmat_equal(pd.DataFrame(data))
    np.testing.assert_almost_equal(res.shrunk_covariance, ref.shrunk_covariance)


def test_shrinkcovmat_equal_invalid_data():
    with pytest.raises(InvalidInputError):
        shrinkcovmat_equal(np.ones(10))
    with pytest.raises(InvalidInputError):
        shrinkcovmat_equal([["a", "b", "c", "d"]])
    data = np.ones((3, 5))
    data[1, 2] = np.nan
    with pytest.raises(InvalidInputError):
        shrinkcovmat_equal(data)
