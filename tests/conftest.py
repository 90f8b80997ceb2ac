"""Pytest configuration file with shared polynomials for the sampler tests."""

import pytest

from diffkit.polynomial import Polynomial

__all__ = ["cubic", "cubic_setup"]

CUBIC_COEFFICIENTS = [-7.0, 10.0, -0.8, 0.01]


@pytest.fixture
def cubic():
    """Return the cubic ``-7 + 10x - 0.8x^2 + 0.01x^3`` used across the tests."""
    return Polynomial(CUBIC_COEFFICIENTS, degree=3)


@pytest.fixture
def cubic_setup(cubic):
    """Return ``(polynomial, x, dx)`` of the reference sampling run."""
    return cubic, 3.0, 0.1
