"""Shrinkage toward a diagonal matrix with unequal diagonal elements."""

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
    trace_diagonal_sigma_squared,
    trace_sigma_squared,
    validate_inputs,
)
from steinshrink.shrinkage._result import ShrinkageTarget, ShrinkCovMatResult


def shrinkcovmat_unequal(
    data: npt.ArrayLike, centered: bool = False
) -> ShrinkCovMatResult:
    r"""Shrink the sample covariance matrix toward the diagonal matrix of the sample
    variances.

        .. math:: \hat{\Sigma} = (1-\hat{\lambda})S + \hat{\lambda}D_S

    with :math:`D_S` the diagonal matrix of the sample variances. Only the
    covariances are shrunk, the variances are left unchanged.

    Parameters
    ----------
    data : array-like of shape (n_variables, n_observations)
        Data matrix. Rows correspond to variables and columns to observations.

    centered : bool, default=False
        If this is set to True, the mean vector is assumed to be the zero vector.

    Returns
    -------
    result : ShrinkCovMatResult
        Shrunk covariance, shrinkage intensity, sample covariance and target.

    References
    ----------
    .. [1] "Nonparametric Stein-type shrinkage covariance matrix estimators in
        high-dimensional settings",
        Touloumis, Computational Statistics & Data Analysis 83 (2015), 251-261.
    """
    data, mode = validate_inputs(data, centered)
    n = data.shape[1]

    covariance, x = sample_covariance(data, mode)
    variances = np.diag(covariance).copy()
    trace_sigma = np.trace(covariance)
    trace_sigma_sq = trace_sigma_squared(x, covariance, mode)
    trace_diag_sq = trace_diagonal_sigma_squared(x, covariance, mode)

    numerator = trace_sigma**2 + trace_sigma_sq - 2 * trace_diag_sq
    match mode:
        case CenteringMode.NOT_CENTERED:
            denominator = n * trace_sigma_sq + trace_sigma**2 - (n + 1) * trace_diag_sq
        case CenteringMode.CENTERED:
            denominator = (
                (n + 1) * trace_sigma_sq + trace_sigma**2 - (n + 2) * trace_diag_sq
            )
        case _:
            raise ValueError(f"Centering mode {mode} is not valid")
    intensity = optimal_intensity(numerator, denominator)

    shrunk = shrink_toward_diagonal(covariance, intensity, variances)
    # (1 - l) * s_ii + l * s_ii is not exactly s_ii in floating point
    np.fill_diagonal(shrunk, variances)
    return ShrinkCovMatResult(
        shrunk_covariance=shrunk,
        shrinkage_intensity=intensity,
        sample_covariance=covariance,
        target=np.diag(variances),
        centered=mode == CenteringMode.CENTERED,
        target_type=ShrinkageTarget.UNEQUAL,
    )
