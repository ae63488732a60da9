"""Tests for shape and stride arithmetic."""

import math
import pytest
import tensorlib as tl
from tensorlib.core import check_shape, flat_offset


class TestTotalElements:
    """Tests for total_elements."""

    def test_product(self, shape):
        """Total is the product of all dimensions."""
        assert tl.total_elements(shape) == math.prod(shape)

    def test_empty_shape(self):
        """Empty shape raises InvalidShape."""
        with pytest.raises(tl.InvalidShape):
            tl.total_elements([])

    def test_invalid_shape_is_value_error(self):
        """InvalidShape can be caught as ValueError."""
        with pytest.raises(ValueError):
            tl.total_elements(())

    def test_zero_dimension_propagates(self):
        """Non-positive entries are not rejected here."""
        assert tl.total_elements([2, 0, 3]) == 0
        assert tl.total_elements([2, -3]) == -6


class TestComputeStrides:
    """Tests for compute_strides."""

    def test_row_major(self):
        """Outermost dimension has the largest stride, innermost has 1."""
        assert tl.compute_strides([2, 3]) == (3, 1)
        assert tl.compute_strides((2, 3, 4)) == (12, 4, 1)
        assert tl.compute_strides([7]) == (1,)

    def test_length_matches_rank(self, shape):
        """One stride per dimension."""
        assert len(tl.compute_strides(shape)) == len(shape)

    def test_max_position_offset(self, shape):
        """The last position maps to total - 1."""
        strides = tl.compute_strides(shape)
        last = [dim - 1 for dim in shape]
        assert flat_offset(last, strides) == tl.total_elements(shape) - 1

    def test_precomputed_total(self):
        """A supplied total is used as-is."""
        assert tl.compute_strides([2, 3], total=6) == (3, 1)

    def test_non_dividing_total(self):
        """A total that does not divide evenly uses floor division without failing."""
        assert tl.compute_strides([2, 3], total=7) == (3, 1)
        assert tl.compute_strides([4, 3], total=5) == (1, 0)

    def test_empty_shape(self):
        """Empty shape raises InvalidShape."""
        with pytest.raises(tl.InvalidShape):
            tl.compute_strides([])

    def test_zero_dimension(self):
        """A zero entry raises InvalidShape rather than ZeroDivisionError."""
        with pytest.raises(tl.InvalidShape):
            tl.compute_strides([3, 0], total=6)


class TestCheckShape:
    """Tests for check_shape."""

    def test_normalizes_to_tuple(self):
        assert check_shape([2, 3]) == (2, 3)

    @pytest.mark.parametrize("bad", [[], [0], [2, -1], [2.5], 3, None])
    def test_rejects(self, bad):
        """Empty, non-positive, non-integer and scalar shapes are rejected."""
        with pytest.raises(tl.InvalidShape):
            check_shape(bad)
