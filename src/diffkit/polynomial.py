"""Provides the Polynomial class.

A :class:`Polynomial` holds the coefficients of a fixed-degree polynomial in
high resolution and evaluates it directly. It is used to set up an
:class:`~diffkit.sampler.iterative.IterativePolynomialSampler` and as the
reference the iterative samples are compared against.

Examples:
--------
>>> from diffkit.polynomial import Polynomial
>>> p = Polynomial([-7.0, 10.0, -0.8, 0.01])
>>> p.degree
3
>>> round(float(p(3.0)), 6)
16.07
>>> [round(v, 6) for v in p.evaluate([0.0, 1.0]).tolist()]
[-7.0, 2.21]
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from diffkit.utils.validate import validate_coefficients

__all__ = [
    "Polynomial",
]


class Polynomial:
    """Represents a polynomial of fixed degree with high-resolution coefficients.

    The coefficients are ordered by ascending power: ``coefficients[i]`` is
    the coefficient of ``x**i``. They are copied on construction and stored
    read-only, so a polynomial can be shared freely between samplers.

    Attributes:
        coefficients: Read-only 1D array of ``degree + 1`` coefficients.
        degree: The polynomial degree ``N``.
        dtype: The high-resolution floating dtype used for evaluation.
    """

    def __init__(
        self,
        coefficients: ArrayLike,
        *,
        degree: int | None = None,
        dtype: DTypeLike = np.float64,
    ) -> None:
        """Initialises the polynomial from its coefficients.

        Args:
            coefficients: Sequence of ``N + 1`` coefficients, constant term first.
            degree: Optional degree ``N``. If given, the number of coefficients
                must be ``degree + 1``.
            dtype: High-resolution floating dtype. Default is ``float64``.

        Raises:
            ValueError: If the coefficients are not 1D, are empty, or do not
                match ``degree``.
        """
        coeffs = validate_coefficients(coefficients, degree=degree, dtype=dtype)
        coeffs.flags.writeable = False
        self._coefficients = coeffs

    @property
    def coefficients(self) -> NDArray[np.floating]:
        return self._coefficients

    @property
    def degree(self) -> int:
        return self._coefficients.size - 1

    @property
    def dtype(self) -> np.dtype:
        return self._coefficients.dtype

    def evaluate(self, x: ArrayLike) -> np.floating | NDArray[np.floating]:
        """Evaluates the polynomial at ``x`` in high resolution.

        Computes ``c[0] + sum_i c[i] * x**i`` where each power is built by
        repeated multiplication. Overflow and invalid operations produce
        ``inf`` and ``nan`` silently.

        Args:
            x: A scalar or array-like of evaluation points.

        Returns:
            A scalar of the polynomial's dtype for scalar input, otherwise an
            array with the shape of ``x``.
        """
        xs = np.asarray(x, dtype=self.dtype)
        coeffs = self._coefficients

        with np.errstate(over="ignore", invalid="ignore"):
            result = np.full(xs.shape, coeffs[0], dtype=self.dtype)
            power = np.ones(xs.shape, dtype=self.dtype)
            for c in coeffs[1:]:
                power = power * xs
                result = result + c * power

        if result.ndim == 0:
            return result[()]
        return result

    def __call__(self, x: ArrayLike) -> np.floating | NDArray[np.floating]:
        return self.evaluate(x)

    def __len__(self) -> int:
        return self._coefficients.size

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.dtype == other.dtype and np.array_equal(
            self._coefficients, other._coefficients, equal_nan=True
        )

    def __hash__(self) -> int:
        # Adding 0.0 maps -0.0 to 0.0 so equal polynomials hash alike.
        return hash((self.dtype.str, (self._coefficients + 0.0).tobytes()))

    def __repr__(self) -> str:
        return f"Polynomial({self._coefficients.tolist()!r}, dtype={self.dtype.name})"
