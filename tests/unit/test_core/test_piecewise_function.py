"""Tests for construction, queries and interpolation of piecewise functions."""

import copy
from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal

import pytest

from pyphystools.core.exceptions import FunctionArgumentError, FunctionRangeError, FunctionStateError
from pyphystools.core.piecewise_function import FunctionPoint, PiecewiseFunction
from pyphystools.data.constants import DECIMAL_CONTEXT


class TestConstruction:
    """Test the ways of building a function."""

    def test_empty_function(self):
        """An empty function has no points and no range."""
        function = PiecewiseFunction()
        assert len(function) == 0
        assert function.abscissa == ()
        assert not function.is_in_range(0)

    def test_abscissas_are_sorted(self):
        """Abscissas come out in ascending order whatever the input order."""
        function = PiecewiseFunction({3: 1, 1: 2, 2: 3})
        assert function.abscissa == (Decimal(1), Decimal(2), Decimal(3))

    def test_numerically_equal_keys_collapse(self):
        """Decimals differing only by trailing zeros are the same abscissa."""
        function = PiecewiseFunction({Decimal("1.50"): 1})
        assert Decimal("1.5") in function
        assert function.value_at("1.500") == Decimal(1)

    def test_float_inputs_use_shortest_repr(self):
        """Floats are read through their repr, not their binary expansion."""
        function = PiecewiseFunction({0.1: 0.2})
        assert function.abscissa == (Decimal("0.1"),)
        assert function.value_at(Decimal("0.1")) == Decimal("0.2")

    def test_copy_constructor_is_independent(self, linear_function):
        """Copies compare equal and do not share state."""
        clone = PiecewiseFunction(linear_function)
        assert clone == linear_function
        assert clone is not linear_function
        assert copy.deepcopy(linear_function) == linear_function
        mapping = linear_function.as_dict()
        mapping[Decimal(5)] = Decimal(5)
        assert len(linear_function) == 3

    def test_invalid_value_raises(self):
        """Non-numeric samples are rejected."""
        with pytest.raises(FunctionArgumentError):
            PiecewiseFunction({0: "abc"})

    def test_non_finite_value_raises(self):
        """Infinite samples are rejected."""
        with pytest.raises(FunctionArgumentError):
            PiecewiseFunction({0: float("inf")})


class TestRangeQueries:
    """Test is_in_range, start, end and value_at."""

    def test_start_and_end(self, ramp_function):
        assert ramp_function.start() == Decimal(0)
        assert ramp_function.end() == Decimal(3)

    def test_start_on_empty_function_raises(self):
        """An empty function has no start nor end."""
        with pytest.raises(FunctionStateError, match="not initialized"):
            PiecewiseFunction().start()
        with pytest.raises(FunctionStateError):
            PiecewiseFunction().end()

    def test_is_in_range_includes_bounds(self, linear_function):
        assert linear_function.is_in_range(0)
        assert linear_function.is_in_range(2)
        assert linear_function.is_in_range("1.3")
        assert not linear_function.is_in_range("-0.001")
        assert not linear_function.is_in_range("2.000001")

    def test_exact_key_returns_stored_value(self, ramp_function):
        """A sampled abscissa returns exactly its stored value."""
        for point in ramp_function.items():
            assert ramp_function.value_at(point.abscissa) == point.value

    def test_interpolation_is_linear(self, ramp_function):
        """Between two samples the value lies on the joining segment."""
        assert ramp_function.value_at("0.25") == Decimal("1.5")
        assert ramp_function.value_at("1.25") == Decimal("3.5")
        assert ramp_function.value_at("2.5") == Decimal("4.5")

    def test_linear_function_interpolates_identity(self, linear_function):
        """f(x) = x is reproduced exactly between the samples."""
        for position in ("0.1", "0.5", "1.75", "1.999"):
            assert linear_function.value_at(position) == Decimal(position)

    def test_call_is_value_at(self, linear_function):
        assert linear_function("0.5") == linear_function.value_at("0.5")

    def test_single_point_function(self):
        """A one-point function is defined on that point only."""
        function = PiecewiseFunction({1: 7})
        assert function.value_at(1) == Decimal(7)
        with pytest.raises(FunctionRangeError):
            function.value_at("1.1")

    @pytest.mark.parametrize("position", ["-1", "2.5", "1e10"])
    def test_out_of_range_raises(self, linear_function, position):
        """Positions outside [start, end] raise a range error."""
        with pytest.raises(FunctionRangeError, match="No function value"):
            linear_function.value_at(position)

    def test_out_of_range_error_is_index_error(self, linear_function):
        """Range errors can be caught as IndexError."""
        with pytest.raises(IndexError):
            linear_function.value_at(3)

    def test_empty_function_value_raises(self):
        with pytest.raises(FunctionRangeError):
            PiecewiseFunction().value_at(0)

    def test_concurrent_reads_agree(self, ramp_function):
        """Concurrent readers see the same values as a sequential reader."""
        positions = [Decimal(i) / 100 for i in range(301)]
        expected = [ramp_function.value_at(position) for position in positions]
        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(ramp_function.value_at, positions))
        assert results == expected


class TestAccessors:
    """Test maximum, mean interval size and the copy-out accessors."""

    def test_maximum(self, ramp_function):
        assert ramp_function.maximum() == FunctionPoint(Decimal(2), Decimal(5))

    def test_maximum_first_wins_on_ties(self):
        function = PiecewiseFunction({0: 1, 1: 3, 2: 3})
        assert function.maximum().abscissa == Decimal(1)

    def test_maximum_on_empty_function_raises(self):
        with pytest.raises(FunctionStateError):
            PiecewiseFunction().maximum()

    def test_mean_interval_size(self, linear_function):
        """The span is divided by the number of points."""
        assert linear_function.mean_interval_size() == DECIMAL_CONTEXT.divide(Decimal(2), Decimal(3))

    def test_items_and_iteration(self, linear_function):
        assert list(linear_function) == [Decimal(0), Decimal(1), Decimal(2)]
        assert linear_function.items()[1] == FunctionPoint(Decimal(1), Decimal(1))

    def test_string_representation(self):
        function = PiecewiseFunction({0: 1, "2.50": 3})
        assert str(function) == "0\t=> 1\n2.5\t=> 3\n"
        assert "2 points" in repr(function)


class TestEquality:
    """Test equality and hashing."""

    def test_equal_functions(self):
        assert PiecewiseFunction({0: 1, 1: 2}) == PiecewiseFunction({"0.0": "1.00", 1: 2})

    def test_different_values(self):
        assert PiecewiseFunction({0: 1, 1: 2}) != PiecewiseFunction({0: 1, 1: 3})

    def test_different_abscissas(self):
        assert PiecewiseFunction({0: 1, 1: 2}) != PiecewiseFunction({0: 1, 2: 2})

    def test_different_sizes(self):
        assert PiecewiseFunction({0: 1}) != PiecewiseFunction({0: 1, 1: 1})

    def test_not_equal_to_other_types(self, linear_function):
        assert linear_function != {0: 0, 1: 1, 2: 2}

    def test_equal_functions_hash_alike(self):
        first = PiecewiseFunction({0: 1, 1: 2})
        second = PiecewiseFunction({1: "2.0", 0: 1})
        assert hash(first) == hash(second)
        assert len({first, second}) == 1
