"""Shrinkage toward a diagonal matrix with equal diagonal elements."""

# Copyright (c) 2025
# Author: The steinshrink developers
# SPDX-License-Identifier: BSD-3-Clause

import numpy as np
import numpy.typing as npt

from steinshrink.shrinkage._moments import (
    CenteringMode,
    optimal_intensity,
    sample_covariance,
    shrink_toward_diagonal,
    trace_sigma_squared,
    validate_inputs,
)
from steinshrink.shrinkage._result import ShrinkageTarget, ShrinkCovMatResult


def shrinkcovmat_equal(
    data: npt.ArrayLike, centered: bool = False
) -> ShrinkCovMatResult:
    r"""Shrink the sample covariance matrix toward a diagonal matrix with equal
    diagonal elements.

    Nonparametric Stein-type shrinkage estimator of the covariance matrix [1]_:

        .. math:: \hat{\Sigma} = (1-\hat{\lambda})S + \hat{\lambda}\hat{\nu}I

    with :math:`S` the sample covariance, :math:`\hat{\nu}=tr(S)/p` the average of
    the sample variances and :math:`\hat{\lambda}` the estimated optimal shrinkage
    intensity, computed from unbiased estimators of :math:`tr(\Sigma)` and
    :math:`tr(\Sigma^2)`. The estimator is well defined when the number of
    variables `p` exceeds the number of observations `N`.

    Parameters
    ----------
    data : array-like of shape (n_variables, n_observations)
        Data matrix. Rows correspond to variables and columns to observations.

    centered : bool, default=False
        If this is set to True, the mean vector is assumed to be the zero vector and
        the data are not centered. At least two columns are required. Otherwise, the
        rows are centered by their sample mean and at least four columns are
        required.

    Returns
    -------
    result : ShrinkCovMatResult
        Shrunk covariance, shrinkage intensity, sample covariance and target.

    Raises
    ------
    InvalidInputError
        If `centered` is not a boolean, if `data` is not a finite numeric matrix or
        if it has too few columns.

    References
    ----------
    .. [1] "Nonparametric Stein-type shrinkage covariance matrix estimators in
        high-dimensional settings",
        Touloumis, Computational Statistics & Data Analysis 83 (2015), 251-261.
    """
    data, mode = validate_inputs(data, centered)
    p, n = data.shape

    covariance, x = sample_covariance(data, mode)
    trace_sigma = np.trace(covariance)
    nu = trace_sigma / p
    trace_sigma_sq = trace_sigma_squared(x, covariance, mode)

    match mode:
        case CenteringMode.NOT_CENTERED:
            denominator = n * trace_sigma_sq + (p - n + 1) / p * trace_sigma**2
        case CenteringMode.CENTERED:
            denominator = (n + 1) * trace_sigma_sq + (p - n) / p * trace_sigma**2
        case _:
            raise ValueError(f"Centering mode {mode} is not valid")
    intensity = optimal_intensity(trace_sigma**2 + trace_sigma_sq, denominator)

    target_diagonal = np.full(p, nu)
    return ShrinkCovMatResult(
        shrunk_covariance=shrink_toward_diagonal(
            covariance, intensity, target_diagonal
        ),
        shrinkage_intensity=intensity,
        sample_covariance=covariance,
        target=np.diag(target_diagonal),
        centered=mode == CenteringMode.CENTERED,
        target_type=ShrinkageTarget.EQUAL,
    )
