"""Tools module."""

# Copyright (c) 2025
# Author: The steinshrink developers
# SPDX-License-Identifier: BSD-3-Clause

from enum import Enum
from typing import Any

import numpy as np
import numpy.typing as npt

from steinshrink.exceptions import InvalidInputError

__all__ = [
    "AutoEnum",
    "check_centered",
    "check_data_matrix",
    "format_intensity",
]


class AutoEnum(str, Enum):
    """Base Enum class used in `steinshrink`."""

    @staticmethod
    def _generate_next_value_(
        name: str, start: int, count: int, last_values: Any
    ) -> str:
        """Overriding `auto()`."""
        return name.lower()

    @classmethod
    def has(cls, value: str) -> bool:
        """Check if a value is in the Enum.

        Parameters
        ----------
        value : str
            Input value.

        Returns
        -------
        x : bool
            True if the value is in the Enum, False otherwise.
        """
        return value in cls._value2member_map_

    def __repr__(self) -> str:
        """Representation of the Enum."""
        return self.name


def check_centered(centered: Any) -> bool:
    """Check that the `centered` flag is strictly boolean.

    Only `bool` and `numpy.bool_` are accepted; strings, numbers and `None` are
    rejected because their truth value is ambiguous.

    Parameters
    ----------
    centered : Any
        Flag indicating whether the mean vector is the zero vector.

    Returns
    -------
    centered : bool
        The validated flag.

    Raises
    ------
    InvalidInputError: if `centered` is not a boolean.
    """
    if not isinstance(centered, bool | np.bool_):
        raise InvalidInputError(
            "'centered' must be either 'True' or 'False', got"
            f" {type(centered).__name__} {centered!r}"
        )
    return bool(centered)


def check_data_matrix(data: npt.ArrayLike) -> np.ndarray:
    """Convert the data to a 2D float array of shape (n_variables, n_observations)
    and verify that all values are finite.

    Parameters
    ----------
    data : array-like of shape (n_variables, n_observations)
        Data matrix. Rows are variables and columns are observations.

    Returns
    -------
    data : ndarray of shape (n_variables, n_observations)
        The validated data. The input is never modified in place.

    Raises
    ------
    InvalidInputError: if the data cannot be converted to a finite 2D float array.
    """
    try:
        arr = np.asarray(data, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(
            f"`data` must be coercible to a numeric matrix: {e}"
        ) from e
    if arr.ndim != 2:
        raise InvalidInputError(f"`data` must be a 2D array, got a {arr.ndim}D array")
    if arr.shape[0] == 0:
        raise InvalidInputError("`data` must have at least one row")
    if not np.all(np.isfinite(arr)):
        raise InvalidInputError("`data` contains NaN or infinite values")
    return arr


def format_intensity(x: float) -> str:
    """Format a shrinkage intensity into a user-friendly string.

    Values in [1e-4, 1] are rounded to two decimals after their leading zeros
    (at most six decimals). Smaller non-zero values use scientific notation
    so that they are never displayed as zero. Zero, NaN and infinite values are
    returned as is.

    Parameters
    ----------
    x : float
        Shrinkage intensity.

    Returns
    -------
    formatted : str
        Formatted string.
    """
    if x == 0 or not np.isfinite(x):
        return str(x)
    if abs(x) < 1e-4:
        return f"{x:.2e}"
    n = min(6, max(int(-np.log10(abs(x))) + 2, 2))
    return f"{x:.{n}f}"
