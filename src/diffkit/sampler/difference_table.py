"""High-resolution setup of the forward-difference registers."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from diffkit.polynomial import Polynomial

__all__ = [
    "setup_offsets",
    "setup_points",
    "forward_difference_table",
    "initial_differences",
]


def setup_offsets(degree: int) -> NDArray[np.int64]:
    """Returns the step offsets of the setup samples for a given degree.

    The sampler is primed with the ``degree + 1`` samples that precede the
    start point, i.e. offsets ``-(degree + 1), ..., -1``.

    Args:
        degree: Polynomial degree ``N``.

    Returns:
        Integer offsets ``i - N - 1`` for ``i = 0..N``.
    """
    return np.arange(degree + 1, dtype=np.int64) - degree - 1


def setup_points(
    x: float,
    dx: float,
    degree: int,
    dtype=np.float64,
) -> NDArray[np.floating]:
    """Returns the positions ``x + (i - N - 1) * dx`` of the setup samples."""
    x = dtype(x)
    dx = dtype(dx)
    offsets = setup_offsets(degree).astype(dtype)
    with np.errstate(over="ignore", invalid="ignore"):
        return np.array([x + i * dx for i in offsets], dtype=dtype)


def forward_difference_table(values: NDArray[np.floating]) -> NDArray[np.floating]:
    """Computes the forward-difference registers of equally spaced samples.

    For ``N + 1`` samples ``s[0..N]`` the table is built in place: pass ``i``
    replaces ``reg[j]`` with ``reg[j + 1] - reg[j]`` for ``j = 0..N-i-1``.
    Afterwards ``reg[0]`` is the ``N``-th difference, ``reg[k]`` the
    ``(N-k)``-th difference ending at ``s[N]``, and ``reg[N] == s[N]``.

    Args:
        values: 1D array of samples. It is not modified.

    Returns:
        A new array holding the difference registers, same dtype as ``values``.
    """
    registers = np.array(values, copy=True)
    if registers.ndim != 1:
        raise ValueError(f"values must be 1D, got shape {registers.shape}.")

    n = registers.size - 1
    with np.errstate(over="ignore", invalid="ignore"):
        for i in range(n):
            for j in range(n - i):
                registers[j] = registers[j + 1] - registers[j]
    return registers


def initial_differences(
    polynomial: Polynomial,
    x: float,
    dx: float,
) -> NDArray[np.floating]:
    """Evaluates ``polynomial`` at the setup points and differences the samples.

    All arithmetic happens in the polynomial's high-resolution dtype.

    Args:
        polynomial: The polynomial to be sampled.
        x: Start point; the first value produced by the sampler is ``P(x)``.
        dx: Step between consecutive samples.

    Returns:
        The ``N + 1`` high-resolution difference registers.
    """
    points = setup_points(x, dx, polynomial.degree, dtype=polynomial.dtype.type)
    return forward_difference_table(polynomial.evaluate(points))
