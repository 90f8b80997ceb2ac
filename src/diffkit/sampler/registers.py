"""Register representations for the iterative sampler.

After the high-resolution setup the difference registers are converted once
into a compact representation that only needs to support addition. Two
representations are provided:

* :class:`FloatRegisters`: a narrow floating type, ``float32`` by default.
* :class:`FixedPointRegisters`: signed 64-bit integers scaled by
  ``2**-fraction_bits`` (a 32.32 fixed point number by default), the kind of
  register one would use on an FPGA or ASIC. Additions are exact; the only
  rounding happens when the registers are encoded.

Examples:
--------
>>> import numpy as np
>>> from diffkit.sampler.registers import FixedPointRegisters
>>> fmt = FixedPointRegisters(fraction_bits=4)
>>> raw = fmt.encode(np.array([1.5, -0.25]))
>>> raw.tolist()
[24, -4]
>>> float(fmt.decode(raw[0]))
1.5
"""

from __future__ import annotations

import numpy as np
from numpy.typing import DTypeLike, NDArray

__all__ = [
    "FloatRegisters",
    "FixedPointRegisters",
    "DEFAULT_REGISTER_FORMAT",
]


class FloatRegisters:
    """Registers stored in a compact floating dtype.

    Attributes:
        dtype: The register dtype, ``float32`` by default.
    """

    def __init__(self, dtype: DTypeLike = np.float32) -> None:
        """Initialises the format.

        Args:
            dtype: A NumPy floating dtype for the registers.

        Raises:
            ValueError: If ``dtype`` is not a floating dtype.
        """
        dt = np.dtype(dtype)
        if not np.issubdtype(dt, np.floating):
            raise ValueError(f"FloatRegisters needs a floating dtype; got {dt}.")
        self.dtype = dt

    @property
    def value_dtype(self) -> np.dtype:
        """Dtype of the values returned by :meth:`decode`."""
        return self.dtype

    @property
    def itemsize(self) -> int:
        return self.dtype.itemsize

    def encode(self, values: NDArray[np.floating]) -> NDArray[np.floating]:
        """Casts high-resolution values to the register dtype."""
        with np.errstate(over="ignore", invalid="ignore"):
            return np.asarray(values).astype(self.dtype)

    def decode(self, raw: np.floating) -> np.floating:
        return raw

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FloatRegisters):
            return NotImplemented
        return self.dtype == other.dtype

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.dtype))

    def __repr__(self) -> str:
        return f"FloatRegisters({self.dtype.name})"


class FixedPointRegisters:
    """Registers stored as scaled signed 64-bit integers.

    A register value ``v`` is held as ``round(v * 2**fraction_bits)``. Sums
    wrap around on overflow like the integer hardware they model.

    Attributes:
        fraction_bits: Number of fractional bits.
        scale: ``2.0**fraction_bits``.
    """

    dtype = np.dtype(np.int64)

    def __init__(self, fraction_bits: int = 32) -> None:
        """Initialises the format.

        Args:
            fraction_bits: Number of fractional bits, between 0 and 62.
                Default is 32 (a 32.32 fixed point number).

        Raises:
            ValueError: If ``fraction_bits`` is out of range.
        """
        if isinstance(fraction_bits, bool) or int(fraction_bits) != fraction_bits:
            raise ValueError(f"fraction_bits must be an integer; got {fraction_bits!r}.")
        if not 0 <= fraction_bits <= 62:
            raise ValueError(f"fraction_bits must be in [0, 62]; got {fraction_bits}.")
        self.fraction_bits = int(fraction_bits)
        self.scale = 2.0**self.fraction_bits

    @property
    def value_dtype(self) -> np.dtype:
        """Dtype of the values returned by :meth:`decode`."""
        return np.dtype(np.float64)

    @property
    def itemsize(self) -> int:
        return self.dtype.itemsize

    @property
    def resolution(self) -> float:
        """Smallest representable increment."""
        return 1.0 / self.scale

    def encode(self, values: NDArray[np.floating]) -> NDArray[np.int64]:
        """Rounds high-resolution values to the nearest fixed point number.

        Raises:
            ValueError: If a value is not finite or does not fit into the
                integer range at this scale.
        """
        scaled = np.rint(np.asarray(values) * self.scale)
        if not np.all(np.isfinite(scaled)):
            raise ValueError("fixed point registers cannot hold non-finite values.")
        # 2**63 itself is not representable as int64.
        if np.any(np.abs(scaled) >= 2.0**63):
            raise ValueError(
                f"value out of range for {64 - self.fraction_bits}."
                f"{self.fraction_bits} fixed point registers."
            )
        return scaled.astype(self.dtype)

    def decode(self, raw: np.integer) -> np.float64:
        return np.float64(raw) / self.scale

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedPointRegisters):
            return NotImplemented
        return self.fraction_bits == other.fraction_bits

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.fraction_bits))

    def __repr__(self) -> str:
        return f"FixedPointRegisters(fraction_bits={self.fraction_bits})"


DEFAULT_REGISTER_FORMAT = FloatRegisters(np.float32)
