"""Stats module."""

# Copyright (c) 2025
# Author: The steinshrink developers
# SPDX-License-Identifier: BSD-3-Clause

import warnings

import numpy as np

__all__ = [
    "is_positive_definite",
    "nearest_positive_definite",
]

# smallest eigenvalue kept in the correlation matrix
_EIGENVALUE_FLOOR = 1e-13


def is_positive_definite(x: np.ndarray) -> bool:
    """Returns True if the Cholesky factorization of the symmetric matrix exists."""
    try:
        np.linalg.cholesky(x)
    except np.linalg.LinAlgError:
        return False
    return True


def nearest_positive_definite(covariance: np.ndarray, warn: bool = False) -> np.ndarray:
    """Replace a shrunk covariance that is not positive definite by a close positive
    definite matrix with the same variances.

    A shrunk covariance is positive definite whenever its shrinkage intensity is in
    (0, 1] and its target is positive definite. A null or negative intensity applied
    to a singular sample covariance (more variables than observations) can leave it
    singular or indefinite.

    The eigenvalues of the associated correlation matrix are floored at 1e-13, the
    correlation is rescaled to a unit diagonal and the variances are restored.

    Parameters
    ----------
    covariance : ndarray of shape (n, n)
        Symmetric covariance with strictly positive variances.

    warn : bool, default=False
        If this is set to True, a user warning is emitted when the covariance is
        replaced.

    Returns
    -------
    covariance : ndarray of shape (n, n)
        The input itself when it is already positive definite, otherwise a new
        positive definite matrix.
    """
    if covariance.ndim != 2 or covariance.shape[0] != covariance.shape[1]:
        raise ValueError("The covariance must be a square matrix")
    if is_positive_definite(covariance):
        return covariance

    if warn:
        warnings.warn(
            "The shrunk covariance is not positive definite and is replaced by the "
            "nearest positive definite matrix with the same variances.",
            stacklevel=3,
        )
    std = np.sqrt(np.diag(covariance))
    scale = np.outer(std, std)
    eigenvalues, eigenvectors = np.linalg.eigh(covariance / scale)
    corr = eigenvectors * np.maximum(eigenvalues, _EIGENVALUE_FLOOR) @ eigenvectors.T
    corr = (corr + corr.T) / 2
    diag = np.sqrt(np.diag(corr))
    return corr / np.outer(diag, diag) * scale
