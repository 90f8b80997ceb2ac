"""Provides all diffkit classes."""

from importlib.metadata import PackageNotFoundError, version

from diffkit.comparison import SampleComparison, compare
from diffkit.polynomial import Polynomial
from diffkit.sampler.iterative import IterativePolynomialSampler
from diffkit.sampler.registers import FixedPointRegisters, FloatRegisters

try:
    __version__ = version("diffkit")
except PackageNotFoundError:
    pass

__all__ = [
    "Polynomial",
    "IterativePolynomialSampler",
    "FloatRegisters",
    "FixedPointRegisters",
    "SampleComparison",
    "compare",
]
