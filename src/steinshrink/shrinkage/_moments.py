"""Moment estimators shared by the Stein-type shrinkage covariance estimators."""

# Copyright (c) 2025
# Author: The steinshrink developers
# SPDX-License-Identifier: BSD-3-Clause

import warnings
from enum import auto

import numpy as np
import numpy.typing as npt

from steinshrink.exceptions import InvalidInputError
from steinshrink.utils.tools import AutoEnum, check_centered, check_data_matrix

__all__ = [
    "CenteringMode",
    "check_n_observations",
    "optimal_intensity",
    "sample_covariance",
    "shrink_toward_diagonal",
    "trace_diagonal_sigma_squared",
    "trace_sigma_squared",
    "validate_inputs",
]


class CenteringMode(AutoEnum):
    """Centering mode of the data matrix.

    Parameters
    ----------
    CENTERED : str
        The mean vector is assumed to be the zero vector. The data are used as is
        and the sample covariance is normalized by `N`.

    NOT_CENTERED : str
        The rows are centered by their sample mean and the sample covariance is
        normalized by `N - 1`.
    """

    CENTERED = auto()
    NOT_CENTERED = auto()

    @classmethod
    def from_centered(cls, centered: bool) -> "CenteringMode":
        """Convert a strictly boolean `centered` flag into a CenteringMode."""
        return cls.CENTERED if check_centered(centered) else cls.NOT_CENTERED

    @property
    def min_observations(self) -> int:
        """Minimum number of observations required by the moment estimators."""
        match self:
            case CenteringMode.CENTERED:
                return 2
            case CenteringMode.NOT_CENTERED:
                return 4
            case _:
                raise ValueError(f"Centering mode {self} is not valid")


def check_n_observations(n_observations: int, mode: CenteringMode) -> None:
    """Raise an InvalidInputError when there are too few observations to form
    the unbiased trace estimators of `mode`.
    """
    if n_observations < mode.min_observations:
        raise InvalidInputError(
            "The number of columns should be greater than"
            f" {mode.min_observations - 1}, got {n_observations}"
        )


def validate_inputs(
    data: npt.ArrayLike, centered: bool
) -> tuple[np.ndarray, CenteringMode]:
    """Validate the centering flag, the data matrix and its number of columns.

    Parameters
    ----------
    data : array-like of shape (n_variables, n_observations)
        Data matrix.

    centered : bool
        If True, the mean vector is assumed to be the zero vector.

    Returns
    -------
    data, mode : tuple[ndarray of shape (n_variables, n_observations), CenteringMode]
        Validated data and centering mode.
    """
    mode = CenteringMode.from_centered(centered)
    data = check_data_matrix(data)
    check_n_observations(data.shape[1], mode)
    return data, mode


def sample_covariance(
    data: np.ndarray, mode: CenteringMode
) -> tuple[np.ndarray, np.ndarray]:
    """Compute the sample covariance matrix of the data.

    Parameters
    ----------
    data : ndarray of shape (n_variables, n_observations)
        Data matrix.

    mode : CenteringMode
        Centering mode.

    Returns
    -------
    covariance : ndarray of shape (n_variables, n_variables)
        Sample covariance.

    x : ndarray of shape (n_variables, n_observations)
        Data used to compute it, row-centered when `NOT_CENTERED`.
    """
    n_observations = data.shape[1]
    match mode:
        case CenteringMode.NOT_CENTERED:
            x = data - data.mean(axis=1, keepdims=True)
            covariance = x @ x.T / (n_observations - 1)
        case CenteringMode.CENTERED:
            x = data
            covariance = x @ x.T / n_observations
        case _:
            raise ValueError(f"Centering mode {mode} is not valid")
    return covariance, x


def trace_sigma_squared(
    x: np.ndarray, covariance: np.ndarray, mode: CenteringMode
) -> float:
    r"""Unbiased estimator of :math:`tr(\Sigma^2)`.

    The plug-in estimator :math:`tr(S^2)` is biased upward when the number of
    variables is comparable to or larger than the number of observations. Both
    forms below are U-statistics free of fourth moments.

    In the `NOT_CENTERED` mode:

    .. math:: \frac{N-1}{N(N-2)(N-3)}\left[(N-1)(N-2)tr(S^2)+tr^2(S)-NQ\right]

    with :math:`Q=\frac{1}{N-1}\sum_{j}\left(\sum_{i}x_{ij}^2\right)^2`.

    In the `CENTERED` mode:

    .. math:: \frac{2}{N(N-1)}\sum_{i<j}(X_i^T X_j)^2

    where :math:`X_i` is the i-th column of the data.

    Parameters
    ----------
    x : ndarray of shape (n_variables, n_observations)
        Data returned by :func:`sample_covariance`.

    covariance : ndarray of shape (n_variables, n_variables)
        Sample covariance.

    mode : CenteringMode
        Centering mode.

    Returns
    -------
    value : float
        Estimate of :math:`tr(\Sigma^2)`.
    """
    n = x.shape[1]
    match mode:
        case CenteringMode.NOT_CENTERED:
            trace_sigma = np.trace(covariance)
            q = np.sum(np.sum(x**2, axis=0) ** 2) / (n - 1)
            value = (
                (n - 1)
                / (n * (n - 2) * (n - 3))
                * ((n - 1) * (n - 2) * np.sum(covariance**2) + trace_sigma**2 - n * q)
            )
        case CenteringMode.CENTERED:
            # inner products between distinct columns only
            gram = x.T @ x
            value = 2 * np.sum(np.triu(gram, k=1) ** 2) / (n * (n - 1))
        case _:
            raise ValueError(f"Centering mode {mode} is not valid")
    return float(value)


def trace_diagonal_sigma_squared(
    x: np.ndarray, covariance: np.ndarray, mode: CenteringMode
) -> float:
    r"""Unbiased estimator of :math:`\sum_i \sigma_{ii}^2`.

    Each variance is estimated with the single-variable case of
    :func:`trace_sigma_squared`.

    Parameters
    ----------
    x : ndarray of shape (n_variables, n_observations)
        Data returned by :func:`sample_covariance`.

    covariance : ndarray of shape (n_variables, n_variables)
        Sample covariance.

    mode : CenteringMode
        Centering mode.

    Returns
    -------
    value : float
        Estimate of the sum of the squared variances.
    """
    n = x.shape[1]
    match mode:
        case CenteringMode.NOT_CENTERED:
            variances = np.diag(covariance)
            q = np.sum(x**4, axis=1) / (n - 1)
            value = (
                (n - 1)
                / (n * (n - 2) * (n - 3))
                * np.sum(((n - 1) * (n - 2) + 1) * variances**2 - n * q)
            )
        case CenteringMode.CENTERED:
            x2 = x**2
            value = np.sum(np.sum(x2, axis=1) ** 2 - np.sum(x2**2, axis=1)) / (
                n * (n - 1)
            )
        case _:
            raise ValueError(f"Centering mode {mode} is not valid")
    return float(value)


def optimal_intensity(numerator: float, denominator: float) -> float:
    """Ratio of the risk estimators, clamped to at most one.

    The ratio is not floored at zero: a negative value is returned as is with a
    warning. When both estimators are null, as with constant data, the target
    equals the sample covariance and the intensity is one. A null denominator with
    a non-null numerator gives an infinite ratio that goes through the same clamp.

    Parameters
    ----------
    numerator : float
        Estimated expected loss of the sample covariance.

    denominator : float
        Estimated expected distance between the sample covariance and the target.

    Returns
    -------
    intensity : float
        Shrinkage intensity.
    """
    if numerator == 0 and denominator == 0:
        return 1.0
    with np.errstate(divide="ignore"):
        intensity = np.float64(numerator) / np.float64(denominator)
    if intensity < 0:
        warnings.warn(
            f"The estimated shrinkage intensity is negative ({intensity:.6g}). "
            "It is reported as is and not floored at zero.",
            stacklevel=3,
        )
    return float(min(intensity, 1.0))


def shrink_toward_diagonal(
    covariance: np.ndarray, intensity: float, target_diagonal: np.ndarray
) -> np.ndarray:
    """Blend the sample covariance with a diagonal target.

    Computes `(1 - intensity) * covariance + intensity * diag(target_diagonal)`
    without building the target. When the intensity is one, the scaled target is
    returned directly.

    Parameters
    ----------
    covariance : ndarray of shape (n_variables, n_variables)
        Sample covariance.

    intensity : float
        Shrinkage intensity.

    target_diagonal : ndarray of shape (n_variables,)
        Diagonal of the target matrix.

    Returns
    -------
    shrunk_covariance : ndarray of shape (n_variables, n_variables)
        Shrunk covariance.
    """
    if intensity < 1:
        shrunk = (1 - intensity) * covariance
        shrunk[np.diag_indices_from(shrunk)] += intensity * target_diagonal
    else:
        shrunk = np.diag(intensity * target_diagonal)
    return shrunk
