"""Shrinkage toward the identity matrix."""

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


def shrinkcovmat_identity(
    data: npt.ArrayLike, centered: bool = False
) -> ShrinkCovMatResult:
    r"""Shrink the sample covariance matrix toward the identity matrix.

        .. math:: \hat{\Sigma} = (1-\hat{\lambda})S + \hat{\lambda}I

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
    """
    data, mode = validate_inputs(data, centered)
    p, n = data.shape

    covariance, x = sample_covariance(data, mode)
    trace_sigma = np.trace(covariance)
    trace_sigma_sq = trace_sigma_squared(x, covariance, mode)

    match mode:
        case CenteringMode.NOT_CENTERED:
            denominator = (
                n * trace_sigma_sq
                + trace_sigma**2
                - 2 * (n - 1) * trace_sigma
                + p * (n - 1)
            )
        case CenteringMode.CENTERED:
            denominator = (
                (n + 1) * trace_sigma_sq + trace_sigma**2 - 2 * n * trace_sigma + p * n
            )
        case _:
            raise ValueError(f"Centering mode {mode} is not valid")
    intensity = optimal_intensity(trace_sigma**2 + trace_sigma_sq, denominator)

    target_diagonal = np.ones(p)
    return ShrinkCovMatResult(
        shrunk_covariance=shrink_toward_diagonal(
            covariance, intensity, target_diagonal
        ),
        shrinkage_intensity=intensity,
        sample_covariance=covariance,
        target=np.diag(target_diagonal),
        centered=mode == CenteringMode.CENTERED,
        target_type=ShrinkageTarget.IDENTITY,
    )
