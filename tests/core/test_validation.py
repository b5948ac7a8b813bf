"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, float64 copy, non-numeric rejection
    - check_finite: NaN/Inf detection
    - check_ndim / check_1d / check_2d / check_square: shape checks
    - check_consistent_length / check_length: length matching
    - check_min_samples: minimum sample count
    - check_index: coefficient index range
"""

import numpy as np
import pytest

from pygaussnewton.core.exceptions import DimensionError, ValidationError
from pygaussnewton.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_consistent_length,
    check_finite,
    check_index,
    check_length,
    check_min_samples,
    check_ndim,
    check_square,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to a float64 copy and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "x")
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_float32_promoted(self):
        result = check_array(np.array([1.0, 2.0], dtype=np.float32), "x")
        assert result.dtype == np.float64

    def test_returns_copy(self):
        """Modifying the result must not touch the caller's array."""
        original = np.array([1.0, 2.0, 3.0])
        result = check_array(original, "x")
        result[0] = 99.0
        assert original[0] == 1.0

    def test_rejects_mixed_types(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1, 2.0], "x")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array(["a", "b"], "x")

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array([1 + 2j, 3], "x")

    def test_error_message_includes_name(self):
        with pytest.raises(ValidationError, match="my_var"):
            check_array(["a", "b"], "my_var")


# ═══════════════════════════════════════════════════════════════════════
# check_finite
# ═══════════════════════════════════════════════════════════════════════


class TestCheckFinite:
    """check_finite rejects NaN and Inf values."""

    def test_finite_passes(self):
        check_finite(np.array([1.0, 2.0, 3.0]), "x")

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="1 NaN"):
            check_finite(np.array([1.0, np.nan, 3.0]), "x")

    def test_inf_rejected(self):
        with pytest.raises(ValidationError, match="1 Inf"):
            check_finite(np.array([1.0, -np.inf, 3.0]), "x")


# ═══════════════════════════════════════════════════════════════════════
# Shape checks
# ═══════════════════════════════════════════════════════════════════════


class TestShapeChecks:
    """check_ndim, check_1d, check_2d, check_square enforce shapes."""

    def test_wrong_ndim_raises(self):
        with pytest.raises(DimensionError, match="expected 1D.*got 2D"):
            check_ndim(np.array([[1.0, 2.0]]), 1, "x")

    def test_check_1d_rejects_2d(self):
        with pytest.raises(DimensionError):
            check_1d(np.ones((2, 2)), "y")

    def test_check_2d_rejects_1d(self):
        with pytest.raises(DimensionError):
            check_2d(np.ones(3), "M")

    def test_square_passes(self):
        check_square(np.eye(3), "M")

    def test_non_square_rejected(self):
        with pytest.raises(DimensionError, match=r"square.*\(2, 3\)"):
            check_square(np.ones((2, 3)), "M")

    def test_square_rejects_1d(self):
        with pytest.raises(DimensionError):
            check_square(np.ones(4), "M")


# ═══════════════════════════════════════════════════════════════════════
# Length checks
# ═══════════════════════════════════════════════════════════════════════


class TestLengthChecks:
    """check_consistent_length, check_length and check_min_samples."""

    def test_same_length_passes(self):
        check_consistent_length(np.ones(3), np.ones(3), names=("x", "y"))

    def test_different_length_raises(self):
        with pytest.raises(DimensionError, match=r"x=3.*y=2"):
            check_consistent_length(np.ones(3), np.ones(2), names=("x", "y"))

    def test_wrong_number_of_names(self):
        with pytest.raises(ValueError, match="Number of arrays"):
            check_consistent_length(np.ones(3), np.ones(3), names=("x",))

    def test_exact_length_passes(self):
        check_length(np.ones(2), 2, "coefficients")

    def test_wrong_length_raises(self):
        with pytest.raises(DimensionError, match="expected length 3, got 2"):
            check_length(np.ones(2), 3, "coefficients")

    def test_min_samples_empty_raises(self):
        with pytest.raises(ValidationError, match="at least 1.*got 0"):
            check_min_samples(np.array([]), 1, "x")


# ═══════════════════════════════════════════════════════════════════════
# check_index
# ═══════════════════════════════════════════════════════════════════════


class TestCheckIndex:
    """check_index accepts [0, size) and nothing else."""

    @pytest.mark.parametrize("index", [0, 1, 2, np.int64(2)])
    def test_in_range_passes(self, index):
        check_index(index, 3, "index")

    @pytest.mark.parametrize("index", [3, 10, -1])
    def test_out_of_range_raises(self, index):
        with pytest.raises(ValidationError, match="out of range"):
            check_index(index, 3, "index")

    @pytest.mark.parametrize("index", [1.0, "1", True, None])
    def test_non_integer_raises(self, index):
        with pytest.raises(ValidationError, match="expected integer"):
            check_index(index, 3, "index")
