"""
The :mod:`steinshrink.exceptions` module includes all custom warnings and error
classes used across steinshrink.
"""

# Copyright (c) 2025
# Author: The steinshrink developers
# SPDX-License-Identifier: BSD-3-Clause

__all__ = [
    "InvalidInputError",
    "NonPositiveVarianceError",
]


class InvalidInputError(ValueError):
    """Input data or parameters cannot be used by the estimator."""


class NonPositiveVarianceError(Exception):
    """Variance negative or null."""
