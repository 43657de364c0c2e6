"""steinshrink package."""

# Author: The steinshrink developers
# SPDX-License-Identifier: BSD-3-Clause
import importlib.metadata

from steinshrink.covariance import SteinShrinkageCovariance
from steinshrink.shrinkage import (
    CenteringMode,
    ShrinkageTarget,
    ShrinkCovMatResult,
    shrinkcovmat_equal,
    shrinkcovmat_identity,
    shrinkcovmat_unequal,
)

__version__ = importlib.metadata.version("steinshrink")

__all__ = [
    "CenteringMode",
    "ShrinkCovMatResult",
    "ShrinkageTarget",
    "SteinShrinkageCovariance",
    "shrinkcovmat_equal",
    "shrinkcovmat_identity",
    "shrinkcovmat_unequal",
]
