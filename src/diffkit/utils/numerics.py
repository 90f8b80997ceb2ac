"""Numerical utilities."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from diffkit.utils.types import FloatArray

__all__ = [
    "signed_error",
    "relative_error_percent",
    "relative_error",
]


def signed_error(approx: ArrayLike, exact: ArrayLike) -> FloatArray:
    """Computes ``approx - exact`` in double precision.

    The approximation is widened to ``float64`` before subtracting, so the
    result reflects the error of the compact value and not a second rounding.

    Args:
        approx: Approximate values (e.g. iterative samples).
        exact: Reference values (e.g. direct polynomial evaluations).

    Returns:
        The signed error, with the broadcast shape of the inputs.
    """
    a = np.asarray(approx, dtype=np.float64)
    b = np.asarray(exact, dtype=np.float64)
    return a - b


def relative_error_percent(approx: ArrayLike, exact: ArrayLike) -> FloatArray:
    """Computes ``100 * (approx - exact) / exact``.

    Division by a zero reference yields ``inf`` or ``nan`` without a warning;
    callers near a root of the reference should look at the absolute error.

    Args:
        approx: Approximate values.
        exact: Reference values.

    Returns:
        The signed relative error in percent.
    """
    b = np.asarray(exact, dtype=np.float64)
    with np.errstate(divide="ignore", invalid="ignore"):
        return 100.0 * signed_error(approx, b) / b


def relative_error(a: ArrayLike, b: ArrayLike) -> float:
    """Computes the relative error metric between a and b.

    This metric is defined as the maximum over all components of a and b of
    the absolute difference divided by the maximum of 1.0 and the absolute values of
    a and b.

    Args:
        a: First array-like input.
        b: Second array-like input.

    Returns:
        The relative error metric as a float.
    """
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    denom = np.maximum(1.0, np.maximum(np.abs(a), np.abs(b)))
    return float(np.max(np.abs(a - b) / denom))
