"""Stein-type Shrinkage Covariance Estimator."""

# Copyright (c) 2025
# Author: The steinshrink developers
# SPDX-License-Identifier: BSD-3-Clause

import numpy as np
import numpy.typing as npt
import sklearn.base as skb
import sklearn.utils.validation as skv

from steinshrink.exceptions import InvalidInputError, NonPositiveVarianceError
from steinshrink.shrinkage import (
    ShrinkageTarget,
    ShrinkCovMatResult,
    shrinkcovmat_equal,
    shrinkcovmat_identity,
    shrinkcovmat_unequal,
)
from steinshrink.utils.stats import nearest_positive_definite


class SteinShrinkageCovariance(skb.BaseEstimator):
    r"""Nonparametric Stein-type Shrinkage Covariance estimator.

    The covariance is a convex combination of the sample covariance :math:`S` and
    of a target matrix :math:`T`:

        .. math:: \hat{\Sigma} = (1-\hat{\lambda})S + \hat{\lambda}T

    where the shrinkage intensity :math:`\hat{\lambda}` minimizes an unbiased
    estimate of the expected squared Frobenius loss [1]_. The estimator remains well
    conditioned when the number of assets is larger than the number of
    observations.

    Parameters
    ----------
    target : ShrinkageTarget | str, default=ShrinkageTarget.EQUAL
        Target matrix :class:`~steinshrink.shrinkage.ShrinkageTarget`.

        Possible values are:

            * EQUAL: average of the sample variances times the identity
            * UNEQUAL: diagonal matrix of the sample variances
            * IDENTITY: identity matrix

        The default value is `ShrinkageTarget.EQUAL`.

    assume_centered : bool, default=False
        If this is set to True, the mean vector is assumed to be the zero vector and
        the data are not centered. At least two observations are required.
        Otherwise, at least four observations are required.

    nearest : bool, default=True
        If this is set to True and the shrunk covariance is not positive definite,
        it is replaced by the nearest positive definite matrix with the same
        variances (see :func:`~steinshrink.utils.stats.nearest_positive_definite`).
        This only happens with a null or negative shrinkage intensity and more
        assets than observations. `result_` always keeps the unmodified estimate.
        The default is `True`.

    Attributes
    ----------
    covariance_ : ndarray of shape (n_assets, n_assets)
        Estimated covariance.

    location_ : ndarray of shape (n_assets,)
        Estimated location, i.e. the estimated mean (zeros when `assume_centered`
        is True).

    shrinkage_ : float
        Estimated shrinkage intensity. It never exceeds one.

    sample_covariance_ : ndarray of shape (n_assets, n_assets)
        Sample covariance.

    target_ : ndarray of shape (n_assets, n_assets)
        Target matrix.

    result_ : ShrinkCovMatResult
        Full estimation result.

    n_features_in_ : int
       Number of assets seen during `fit`.

    feature_names_in_ : ndarray of shape (`n_features_in_`,)
       Names of features seen during `fit`. Defined only when `X`
       has feature names that are all strings.

    References
    ----------
    .. [1] "Nonparametric Stein-type shrinkage covariance matrix estimators in
        high-dimensional settings",
        Touloumis, Computational Statistics & Data Analysis 83 (2015), 251-261.
    """

    covariance_: np.ndarray
    location_: np.ndarray
    shrinkage_: float
    sample_covariance_: np.ndarray
    target_: np.ndarray
    result_: ShrinkCovMatResult

    def __init__(
        self,
        target: ShrinkageTarget = ShrinkageTarget.EQUAL,
        assume_centered: bool = False,
        nearest: bool = True,
    ):
        self.target = target
        self.assume_centered = assume_centered
        self.nearest = nearest

    def fit(self, X: npt.ArrayLike, y=None) -> "SteinShrinkageCovariance":
        """Fit the Stein-type Shrinkage Covariance estimator.

        Parameters
        ----------
        X : array-like of shape (n_observations, n_assets)
           Price returns of the assets.

        y : Ignored
            Not used, present for API consistency by convention.

        Returns
        -------
        self : SteinShrinkageCovariance
            Fitted estimator.
        """
        if not ShrinkageTarget.has(self.target):
            raise InvalidInputError(
                f"`target` must be one of {[e.value for e in ShrinkageTarget]}, got"
                f" {self.target!r}"
            )
        target = ShrinkageTarget(self.target)

        X = skv.validate_data(self, X)

        # data matrix convention is (n_variables, n_observations)
        match target:
            case ShrinkageTarget.EQUAL:
                result = shrinkcovmat_equal(X.T, centered=self.assume_centered)
            case ShrinkageTarget.UNEQUAL:
                result = shrinkcovmat_unequal(X.T, centered=self.assume_centered)
            case ShrinkageTarget.IDENTITY:
                result = shrinkcovmat_identity(X.T, centered=self.assume_centered)
            case _:
                raise ValueError(f"Target {target} is not valid")

        self.result_ = result
        self.shrinkage_ = result.shrinkage_intensity
        self.sample_covariance_ = result.sample_covariance
        self.target_ = result.target
        if result.centered:
            self.location_ = np.zeros(X.shape[1])
        else:
            self.location_ = X.mean(axis=0)
        self.covariance_ = self._checked_covariance(result)
        return self

    def _checked_covariance(self, result: ShrinkCovMatResult) -> np.ndarray:
        """Reject invalid shrunk variances and make the shrunk covariance positive
        definite when `nearest` is True."""
        covariance = result.shrunk_covariance
        variances = np.diag(covariance)
        (idx,) = np.nonzero(~np.isfinite(variances) | (variances <= 0))
        if idx.size:
            if hasattr(self, "feature_names_in_"):
                names = self.feature_names_in_[idx]
            else:
                names = idx
            raise NonPositiveVarianceError(
                "The following assets have a non positive or non finite shrunk"
                f" variance: {names}."
                f" Their sample variances are {np.diag(result.sample_covariance)[idx]}"
                f" and the shrinkage intensity is {result.shrinkage_intensity:.6g}."
            )
        if self.nearest:
            covariance = nearest_positive_definite(covariance, warn=True)
        return covariance
