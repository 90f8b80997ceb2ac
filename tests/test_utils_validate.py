"""Tests for diffkit.utils.validate."""

import numpy as np
import pytest
from numpy.testing import assert_array_equal

from diffkit.utils.validate import (
    validate_coefficients,
    validate_num_samples,
    validate_scalar,
)


def test_validate_coefficients_converts_and_copies():
    """Tests that a new float array is returned."""
    source = [1, 2, 3]
    out = validate_coefficients(source, degree=2)
    assert out.dtype == np.float64
    assert_array_equal(out, [1.0, 2.0, 3.0])

    arr = np.array([1.0, 2.0])
    assert validate_coefficients(arr) is not arr


@pytest.mark.parametrize("degree", [1.5, -2])
def test_validate_coefficients_bad_degree(degree):
    """Tests that the degree must be a non-negative integer."""
    with pytest.raises(ValueError):
        validate_coefficients([1.0, 2.0], degree=degree)


def test_validate_coefficients_scalar_input():
    """Tests that a bare scalar is not a coefficient sequence."""
    with pytest.raises(ValueError):
        validate_coefficients(3.0)


def test_validate_coefficients_accepts_non_finite():
    """Tests that only structure is validated."""
    out = validate_coefficients([np.inf, np.nan])
    assert np.isinf(out[0]) and np.isnan(out[1])


@pytest.mark.parametrize("value", [0.0, -3, np.float32(2.5), np.nan, np.inf])
def test_validate_scalar_passes(value):
    """Tests that scalars, finite or not, are returned unchanged."""
    assert validate_scalar(value) is value


@pytest.mark.parametrize("value", [[1.0], np.zeros((2, 2))])
def test_validate_scalar_rejects(value):
    """Tests that non-scalar input is rejected with the name."""
    with pytest.raises(ValueError, match="dx"):
        validate_scalar(value, name="dx")


@pytest.mark.parametrize("n", [0, 1, np.int64(7)])
def test_validate_num_samples_passes(n):
    """Tests accepted sample counts."""
    assert validate_num_samples(n) == int(n)
    assert type(validate_num_samples(n)) is int


@pytest.mark.parametrize("n", [-1, 1.0, True, None])
def test_validate_num_samples_rejects(n):
    """Tests rejected sample counts."""
    with pytest.raises(ValueError):
        validate_num_samples(n)
