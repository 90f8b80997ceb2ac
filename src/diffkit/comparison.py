"""Compares iterative samples with direct polynomial evaluation.

:func:`compare` runs a fresh :class:`IterativePolynomialSampler` next to
:meth:`Polynomial.evaluate` and records, per sample, the abscissa, both
values and the signed absolute and relative errors. :func:`format_header`
and :func:`format_table` render the result as a tab-separated table that
can be plotted directly, e.g. with gnuplot::

    plot "out.data" with lines, "" using 1:3 with lines, "" using 1:5 axes x1y2

Examples:
--------
>>> from diffkit.comparison import compare
>>> from diffkit.polynomial import Polynomial
>>> cmp = compare(Polynomial([-7.0, 10.0, -0.8, 0.01]), x=3.0, dx=0.1, num_samples=500)
>>> bool(cmp.max_scaled_error < 1e-2)
True
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

import numpy as np

from diffkit.polynomial import Polynomial
from diffkit.sampler.iterative import IterativePolynomialSampler
from diffkit.sampler.registers import FixedPointRegisters, FloatRegisters
from diffkit.utils.numerics import relative_error, relative_error_percent, signed_error
from diffkit.utils.validate import validate_num_samples

__all__ = [
    "SampleComparison",
    "compare",
    "format_header",
    "format_table",
]


@dataclass(frozen=True)
class SampleComparison:
    """Per-sample comparison of iterative and direct evaluation.

    All fields are 1D arrays of equal length, one entry per sample.
    """

    x: np.ndarray
    iterative: np.ndarray
    direct: np.ndarray
    absolute_error: np.ndarray
    relative_error_percent: np.ndarray

    def __len__(self) -> int:
        return self.x.size

    def rows(self) -> Iterator[tuple[float, float, float, float, float]]:
        """Yields ``(x, iterative, direct, absolute_error, relative_error_percent)``."""
        for row in zip(
            self.x,
            self.iterative,
            self.direct,
            self.absolute_error,
            self.relative_error_percent,
        ):
            yield tuple(float(v) for v in row)

    @property
    def max_abs_error(self) -> float:
        if len(self) == 0:
            return 0.0
        return float(np.max(np.abs(self.absolute_error)))

    @property
    def max_abs_relative_error_percent(self) -> float:
        if len(self) == 0:
            return 0.0
        return float(np.max(np.abs(self.relative_error_percent)))

    @property
    def max_scaled_error(self) -> float:
        """Largest error relative to ``max(1, |value|)``, robust near roots."""
        if len(self) == 0:
            return 0.0
        return relative_error(self.iterative, self.direct)


def compare(
    polynomial: Polynomial,
    x: float,
    dx: float,
    num_samples: int,
    *,
    register_format: FloatRegisters | FixedPointRegisters | None = None,
) -> SampleComparison:
    """Samples ``polynomial`` iteratively and evaluates it directly at the same points.

    Args:
        polynomial: The polynomial to sample.
        x: Start point.
        dx: Step size.
        num_samples: Number of samples.
        register_format: Register representation for the sampler. Default is
            ``float32``.

    Returns:
        A :class:`SampleComparison` where ``x[i] = x + i * dx``.

    Raises:
        ValueError: If any argument is invalid (see
            :class:`IterativePolynomialSampler`).
    """
    n = validate_num_samples(num_samples)
    sampler = IterativePolynomialSampler(
        polynomial, x, dx, register_format=register_format
    )

    xs = np.array([sampler.x0 + i * sampler.dx for i in range(n)], dtype=polynomial.dtype)
    iterative = sampler.sample(n)
    direct = np.asarray(polynomial.evaluate(xs))

    return SampleComparison(
        x=xs,
        iterative=iterative,
        direct=direct,
        absolute_error=signed_error(iterative, direct),
        relative_error_percent=relative_error_percent(iterative, direct),
    )


def format_header(
    register_format: FloatRegisters | FixedPointRegisters,
    hires_dtype=np.float64,
) -> str:
    """Returns the two header lines of the comparison table."""
    hires_size = np.dtype(hires_dtype).itemsize
    return (
        f"Register number representation: {register_format.itemsize} bytes; "
        f"hi-res polynomial coefficient size: {hires_size} bytes\n"
        f"{'x':>3s}\t{'iterative':>12s}\t{'actual':>12s}\t{'error':>10s}\terr%\n"
    )


def format_table(comparison: SampleComparison) -> str:
    """Renders one tab-separated line per sample."""
    lines = [
        f"{x:3.1f}\t{it:12.6f}\t{actual:12.6f}\t{err:10g}\t{pct:.5f}\n"
        for x, it, actual, err, pct in comparison.rows()
    ]
    return "".join(lines)
