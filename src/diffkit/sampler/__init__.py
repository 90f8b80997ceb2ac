"""Difference-engine sampling of polynomials."""

from diffkit.sampler.iterative import IterativePolynomialSampler
from diffkit.sampler.registers import (
    DEFAULT_REGISTER_FORMAT,
    FixedPointRegisters,
    FloatRegisters,
)

__all__ = [
    "IterativePolynomialSampler",
    "FloatRegisters",
    "FixedPointRegisters",
    "DEFAULT_REGISTER_FORMAT",
]
