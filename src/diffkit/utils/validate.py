"""Validation utilities for DiffKit."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

__all__ = [
    "validate_coefficients",
    "validate_scalar",
    "validate_num_samples",
]


def validate_coefficients(
    coefficients: ArrayLike,
    *,
    degree: int | None = None,
    dtype: DTypeLike = np.float64,
) -> NDArray[np.floating]:
    """Validates and converts polynomial coefficients into a NumPy array.

    Requirements:
      - ``coefficients`` is 1D with at least one entry.
      - If ``degree`` is given, ``len(coefficients) == degree + 1``.

    Only the structure is checked. Non-finite coefficients are accepted and
    propagate through evaluation like any other floating-point value.

    Args:
        coefficients: Array-like of coefficients, index ``i`` holding the
            coefficient of ``x**i``.
        degree: Optional expected polynomial degree.
        dtype: Floating dtype the coefficients are stored in.

    Returns:
        A new 1D array of the coefficients converted to ``dtype``.

    Raises:
        ValueError: If the input does not meet the required conditions.
    """
    if not np.issubdtype(np.dtype(dtype), np.floating):
        raise ValueError(f"dtype must be a floating dtype; got {np.dtype(dtype)}.")

    arr = np.array(coefficients, dtype=dtype)
    if arr.ndim != 1:
        raise ValueError(f"coefficients must be 1D, got shape {arr.shape}.")
    if arr.size == 0:
        raise ValueError("coefficients must contain at least one value.")

    if degree is not None:
        if int(degree) != degree or degree < 0:
            raise ValueError(f"degree must be a non-negative integer; got {degree!r}.")
        if arr.size != degree + 1:
            raise ValueError(
                f"a polynomial of degree {degree} needs {degree + 1} coefficients; "
                f"got {arr.size}."
            )
    return arr


def validate_scalar(value: float, *, name: str = "x") -> float:
    """Checks that ``value`` is a scalar.

    Non-finite values pass; they propagate through the arithmetic like any
    other floating-point value.

    Args:
        value: Value to check.
        name: Name used in error messages.

    Returns:
        The input unchanged.

    Raises:
        ValueError: If ``value`` is not a scalar.
    """
    if np.ndim(value) != 0:
        raise ValueError(f"{name} must be a scalar, got shape {np.shape(value)}.")
    return value


def validate_num_samples(num_samples: int) -> int:
    """Checks that a sample count is a non-negative integer.

    Args:
        num_samples: Requested number of samples.

    Returns:
        The sample count as a Python ``int``.

    Raises:
        ValueError: If ``num_samples`` is negative or not integral.
    """
    if isinstance(num_samples, bool) or not isinstance(num_samples, (int, np.integer)):
        raise ValueError(f"num_samples must be an integer; got {num_samples!r}.")
    if num_samples < 0:
        raise ValueError(f"num_samples must be non-negative; got {num_samples}.")
    return int(num_samples)
