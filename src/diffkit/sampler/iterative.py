"""Provides the IterativePolynomialSampler class.

The sampler evaluates a polynomial of degree ``N`` at ``x, x + dx, x + 2dx,
...`` using only ``N`` additions per sample: Babbage's difference engine.
Construction evaluates the polynomial at the ``N + 1`` points preceding
``x`` in high resolution, builds the forward-difference table and converts
it once into compact registers. From then on the polynomial is never
consulted again, so rounding errors accumulate with the number of steps.
There is no resynchronisation; construct a new sampler at the current
position to start from fresh registers.

Examples:
--------
>>> from diffkit.polynomial import Polynomial
>>> from diffkit.sampler.iterative import IterativePolynomialSampler
>>> p = Polynomial([1.0, 0.5])
>>> s = IterativePolynomialSampler(p, x=2.0, dx=0.25)
>>> [float(s.advance()) for _ in range(3)]
[2.0, 2.125, 2.25]

Using exact fixed point additions instead of ``float32`` registers:

>>> from diffkit.sampler.registers import FixedPointRegisters
>>> p = Polynomial([-7.0, 10.0, -0.8, 0.01])
>>> s = IterativePolynomialSampler(
...     p, x=3.0, dx=0.1, register_format=FixedPointRegisters(32)
... )
>>> values = s.sample(1000)
>>> values.shape
(1000,)
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from diffkit.logger import diffkit_logger
from diffkit.polynomial import Polynomial
from diffkit.sampler.difference_table import initial_differences
from diffkit.sampler.registers import (
    DEFAULT_REGISTER_FORMAT,
    FixedPointRegisters,
    FloatRegisters,
)
from diffkit.utils.types import RegisterArray
from diffkit.utils.validate import validate_num_samples, validate_scalar

__all__ = [
    "IterativePolynomialSampler",
]


class IterativePolynomialSampler:
    """Samples a polynomial at equally spaced points using only additions.

    The state is ``N + 1`` registers. ``registers[0]`` holds the constant
    ``N``-th forward difference, ``registers[k]`` the ``(N-k)``-th difference
    and ``registers[N]`` the most recently produced value. Each call to
    :meth:`advance` propagates the differences with ``N`` additions and
    returns the next value.

    Samplers are independent of each other and of the polynomial they were
    built from. Two samplers built from the same ``(polynomial, x, dx)``
    produce bit-identical sequences.

    Attributes:
        degree: The polynomial degree ``N``.
        register_format: The compact representation of the registers.
        x0: The start point; the first call to :meth:`advance` returns ``P(x0)``.
        dx: The step between consecutive samples.
        steps: Number of values produced so far.
    """

    def __init__(
        self,
        polynomial: Polynomial,
        x: float,
        dx: float,
        *,
        register_format: FloatRegisters | FixedPointRegisters | None = None,
    ) -> None:
        """Initialises the registers from high-resolution evaluations.

        Args:
            polynomial: The polynomial to sample. Only read during
                construction.
            x: Start point.
            dx: Step size. May be negative (sampling backwards) or zero.
            register_format: Compact register representation. Default is
                ``FloatRegisters(numpy.float32)``.

        Raises:
            TypeError: If ``polynomial`` is not a :class:`Polynomial`.
            ValueError: If ``x`` or ``dx`` is not a scalar, or the register
                format cannot hold the initial differences (e.g. non-finite
                values in fixed point).
        """
        if not isinstance(polynomial, Polynomial):
            raise TypeError(
                f"IterativePolynomialSampler expects a Polynomial; got {type(polynomial).__name__}."
            )
        validate_scalar(x, name="x")
        validate_scalar(dx, name="dx")

        fmt = DEFAULT_REGISTER_FORMAT if register_format is None else register_format
        hires = polynomial.dtype.type

        self.degree = polynomial.degree
        self.register_format = fmt
        self.x0 = hires(x)
        self.dx = hires(dx)
        self.steps = 0

        hi_res_registers = initial_differences(polynomial, self.x0, self.dx)
        if not np.all(np.isfinite(hi_res_registers)):
            diffkit_logger.warning(
                "Difference registers contain non-finite values "
                "(degree=%d, x=%r, dx=%r); samples will be inf or nan.",
                self.degree,
                float(self.x0),
                float(self.dx),
            )

        # The only place where precision is lost before the additions start.
        self._registers: RegisterArray = fmt.encode(hi_res_registers)

        diffkit_logger.debug(
            "Initialised sampler: degree=%d, x=%r, dx=%r, registers=%r (%d bytes), "
            "hi-res=%s (%d bytes).",
            self.degree,
            float(self.x0),
            float(self.dx),
            fmt,
            fmt.itemsize,
            polynomial.dtype.name,
            polynomial.dtype.itemsize,
        )

    @property
    def registers(self) -> RegisterArray:
        """Copy of the raw register contents."""
        return self._registers.copy()

    @property
    def x(self) -> np.floating:
        """Abscissa of the value the next :meth:`advance` call returns."""
        with np.errstate(over="ignore", invalid="ignore"):
            return self.x0 + self.steps * self.dx

    def _step(self):
        regs = self._registers
        for i in range(self.degree):
            regs[i + 1] += regs[i]
        self.steps += 1
        return self.register_format.decode(regs[self.degree])

    def advance(self) -> np.floating:
        """Advances the sampler by one step and returns the next value.

        Performs ``registers[i + 1] += registers[i]`` for ``i = 0..N-1`` in
        ascending order and returns ``registers[N]``. Overflow follows the
        register representation (``inf`` for floats, wrap-around for fixed
        point) without raising or warning.

        Returns:
            ``P(x0 + steps * dx)`` up to the accumulated rounding error, in
            the register format's value dtype.
        """
        with np.errstate(over="ignore", invalid="ignore"):
            return self._step()

    def sample(self, num_samples: int) -> NDArray:
        """Advances the sampler ``num_samples`` times and collects the values.

        Args:
            num_samples: Number of values to produce.

        Returns:
            1D array of the produced values.

        Raises:
            ValueError: If ``num_samples`` is not a non-negative integer.
        """
        n = validate_num_samples(num_samples)
        out = np.empty(n, dtype=self.register_format.value_dtype)
        with np.errstate(over="ignore", invalid="ignore"):
            for k in range(n):
                out[k] = self._step()
        return out

    def __iter__(self):
        return self

    def __next__(self):
        return self.advance()

    def __repr__(self) -> str:
        return (
            f"IterativePolynomialSampler(degree={self.degree}, x={float(self.x)!r}, "
            f"dx={float(self.dx)!r}, register_format={self.register_format!r})"
        )
