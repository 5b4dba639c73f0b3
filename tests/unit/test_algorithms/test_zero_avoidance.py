"""Tests for the zero-avoidance transform."""

from decimal import Decimal

import pytest

from pyphystools.algorithms.zero_avoidance import avoid_zeros
from pyphystools.data.constants import ProcessingConstants

MAGNITUDE = ProcessingConstants.ZERO_REPLACEMENT_MAGNITUDE


def _transform(values):
    abscissa = tuple(Decimal(i) for i in range(len(values)))
    points = {position: Decimal(value) for position, value in zip(abscissa, values)}
    return list(avoid_zeros(abscissa, points).values())


class TestAvoidZeros:
    """Test the sign inference of replaced zeros."""

    def test_magnitude_is_smallest_subnormal_double(self):
        assert MAGNITUDE > 0
        assert float(MAGNITUDE) == 5e-324

    def test_single_zero_point_is_positive(self):
        assert _transform([0]) == [MAGNITUDE]

    def test_zeros_at_both_ends(self):
        assert _transform([0, 5, 0]) == [MAGNITUDE, 5, MAGNITUDE]

    def test_first_point_takes_sign_of_next(self):
        assert _transform([0, -3, -4]) == [-MAGNITUDE, -3, -4]

    def test_last_point_takes_sign_of_previous(self):
        assert _transform([2, -3, 0]) == [2, -3, -MAGNITUDE]

    def test_interior_takes_sign_of_closer_neighbour(self):
        """The neighbour closer to zero decides."""
        assert _transform([-1, 0, 5]) == [-1, -MAGNITUDE, 5]
        assert _transform([-5, 0, 1]) == [-5, MAGNITUDE, 1]

    def test_interior_tie_takes_sign_of_next(self):
        assert _transform([-2, 0, 2]) == [-2, MAGNITUDE, 2]

    def test_run_of_zeros_follows_previous_decision(self):
        assert _transform([-4, 0, 0, 0, 7]) == [-4, -MAGNITUDE, -MAGNITUDE, -MAGNITUDE, 7]

    def test_leading_run_of_zeros_is_positive(self):
        assert _transform([0, 0, -1]) == [MAGNITUDE, MAGNITUDE, -1]

    @pytest.mark.parametrize("values", [[1, 2, 3], [-1, 4, -2], [7]])
    def test_nonzero_values_unchanged(self, values):
        assert _transform(values) == values

    def test_no_zero_left(self):
        result = _transform([0, 0, 3, 0, -2, 0, 0])
        assert all(not value.is_zero() for value in result)
