"""Stein-type shrinkage covariance estimators module."""

from steinshrink.shrinkage._equal import shrinkcovmat_equal
from steinshrink.shrinkage._identity import shrinkcovmat_identity
from steinshrink.shrinkage._moments import (
    CenteringMode,
    optimal_intensity,
    sample_covariance,
    shrink_toward_diagonal,
    trace_diagonal_sigma_squared,
    trace_sigma_squared,
)
from steinshrink.shrinkage._result import ShrinkageTarget, ShrinkCovMatResult
from steinshrink.shrinkage._unequal import shrinkcovmat_unequal

__all__ = [
    "CenteringMode",
    "ShrinkCovMatResult",
    "ShrinkageTarget",
    "optimal_intensity",
    "sample_covariance",
    "shrink_toward_diagonal",
    "shrinkcovmat_equal",
    "shrinkcovmat_identity",
    "shrinkcovmat_unequal",
    "trace_diagonal_sigma_squared",
    "trace_sigma_squared",
]
