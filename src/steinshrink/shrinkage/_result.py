"""Shrinkage estimation result."""

# Copyright (c) 2025
# Author: The steinshrink developers
# SPDX-License-Identifier: BSD-3-Clause

from dataclasses import dataclass
from enum import auto

import numpy as np
import pandas as pd

from steinshrink.utils.tools import AutoEnum, format_intensity

__all__ = ["ShrinkCovMatResult", "ShrinkageTarget"]


class ShrinkageTarget(AutoEnum):
    """Target matrices of the Stein-type shrinkage estimators.

    Parameters
    ----------
    EQUAL : str
        Diagonal matrix with the average of the sample variances on the diagonal.

    UNEQUAL : str
        Diagonal matrix with the sample variances on the diagonal.

    IDENTITY : str
        Identity matrix.
    """

    EQUAL = auto()
    UNEQUAL = auto()
    IDENTITY = auto()

    @property
    def description(self) -> str:
        """Human readable description of the target matrix."""
        match self:
            case ShrinkageTarget.EQUAL:
                return "Diagonal matrix with average of sample variances as elements"
            case ShrinkageTarget.UNEQUAL:
                return "Diagonal matrix with sample variances as elements"
            case ShrinkageTarget.IDENTITY:
                return "Identity matrix"
            case _:
                raise ValueError(f"Target {self} is not valid")


@dataclass(frozen=True, eq=False)
class ShrinkCovMatResult:
    """Result of a Stein-type shrinkage covariance estimation.

    Attributes
    ----------
    shrunk_covariance : ndarray of shape (n_variables, n_variables)
        Stein-type shrinkage estimator of the covariance matrix.

    shrinkage_intensity : float
        Estimated optimal shrinkage intensity, i.e. the weight of the target.
        It never exceeds one.

    sample_covariance : ndarray of shape (n_variables, n_variables)
        Sample covariance matrix.

    target : ndarray of shape (n_variables, n_variables)
        Target matrix.

    centered : bool
        True if the data were assumed centered around a zero mean vector.

    target_type : ShrinkageTarget
        Structure of the target matrix.
    """

    shrunk_covariance: np.ndarray
    shrinkage_intensity: float
    sample_covariance: np.ndarray
    target: np.ndarray
    centered: bool
    target_type: ShrinkageTarget

    @property
    def n_variables(self) -> int:
        """Number of variables."""
        return self.sample_covariance.shape[0]

    def summary(self, formatted: bool = True) -> pd.Series:
        """Summary of the estimation.

        Parameters
        ----------
        formatted : bool, default=True
            If this is set to True, the shrinkage intensity is formatted into a
            rounded string.

        Returns
        -------
        summary : pandas Series
            The estimation summary.
        """
        intensity = self.shrinkage_intensity
        if formatted:
            intensity = format_intensity(intensity)
        return pd.Series(
            {
                "Target": self.target_type.description,
                "Shrinkage Intensity": intensity,
                "Centered": self.centered,
                "Number of Variables": self.n_variables,
            }
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(target_type={self.target_type!r}, "
            f"shrinkage_intensity={format_intensity(self.shrinkage_intensity)}, "
            f"centered={self.centered}, n_variables={self.n_variables})"
        )

    def __str__(self) -> str:
        return (
            "Shrinkage Estimator\n"
            "Estimated Optimal Shrinkage Intensity = "
            f"{format_intensity(self.shrinkage_intensity)}\n"
            f"Target Matrix: {self.target_type.description}"
        )
