"""Tests for allenalgebra.enclosing."""

from __future__ import annotations

import itertools
from datetime import date
from enum import Enum

import pytest

from allenalgebra import PreconditionError
from allenalgebra.allen import AllenRelation
from allenalgebra.enclosing import is_enclosing, is_minimal_enclosing, minimal_enclosing
from allenalgebra.interval import Interval as I


class Color(Enum):
    RED = 1
    GREEN = 2
    BLUE = 3


def by_value(c1: Color, c2: Color) -> int:
    return c1.value - c2.value


SAMPLE = [I(2, 4), I(1, 3)]


class TestIsEnclosing:
    """Test is_enclosing."""

    def test_encloses(self):
        assert is_enclosing(I(0, 10), SAMPLE)
        assert is_enclosing(I(1, 4), SAMPLE)

    def test_starts_too_late(self):
        assert not is_enclosing(I(2, 10), [I(1, 3)])

    def test_ends_too_early(self):
        assert not is_enclosing(I(0, 3), SAMPLE)

    def test_equal_interval_encloses(self):
        assert is_enclosing(I(1, 3), [I(1, 3)])

    def test_empty_is_vacuously_enclosed(self):
        """Test that any interval encloses nothing, even an indefinite one."""
        assert is_enclosing(I(0, 1), [])
        assert is_enclosing(I(), [])
        assert is_enclosing(I(0, None), [])

    def test_indefinite_enclosing_interval(self):
        assert not is_enclosing(I(None, 10), SAMPLE)
        assert not is_enclosing(I(0, None), SAMPLE)
        assert not is_enclosing(I(), SAMPLE)

    def test_indefinite_enclosed_interval(self):
        assert not is_enclosing(I(0, 10), [I(None, 3)])
        assert not is_enclosing(I(0, 10), [I(2, None)])
        assert not is_enclosing(I(0, 10), [I(2, 4), I()])

    def test_dates(self):
        year = I(date(2024, 1, 1), date(2025, 1, 1))
        assert is_enclosing(year, [I(date(2024, 3, 1), date(2024, 4, 1))])

    def test_compare_fn(self):
        assert is_enclosing(I(Color.RED, Color.BLUE), [I(Color.RED, Color.GREEN)], by_value)

    def test_no_common_type(self):
        with pytest.raises(PreconditionError):
            is_enclosing(I(0, 10), [I("a", "b")])

    def test_not_a_sequence(self):
        with pytest.raises(PreconditionError):
            is_enclosing(I(0, 10), {I(1, 2)})  # type: ignore[arg-type]


class TestIsMinimalEnclosing:
    """Test is_minimal_enclosing."""

    def test_minimal(self):
        assert is_minimal_enclosing(I(1, 4), SAMPLE)

    def test_start_too_loose(self):
        assert not is_minimal_enclosing(I(0, 4), SAMPLE)

    def test_end_too_loose(self):
        assert not is_minimal_enclosing(I(1, 5), SAMPLE)

    def test_not_enclosing(self):
        assert not is_minimal_enclosing(I(2, 4), SAMPLE)
        assert not is_minimal_enclosing(I(1, 3), SAMPLE)

    def test_single(self):
        assert is_minimal_enclosing(I(1, 3), [I(1, 3)])

    def test_empty_is_never_minimal(self):
        """Test the asymmetry with is_enclosing for an empty collection."""
        assert not is_minimal_enclosing(I(), [])
        assert not is_minimal_enclosing(I(0, 1), [])
        assert is_enclosing(I(), [])

    def test_indefinite_candidate(self):
        assert not is_minimal_enclosing(I(None, 4), SAMPLE)
        assert not is_minimal_enclosing(I(1, None), SAMPLE)

    def test_indefinite_element(self):
        assert not is_minimal_enclosing(I(1, 4), [I(None, 3), I(1, 4)])
        assert not is_minimal_enclosing(I(1, 4), [I(1, None), I(1, 4)])

    def test_compare_fn(self):
        intervals = [I(Color.RED, Color.GREEN), I(Color.GREEN, Color.BLUE)]
        assert is_minimal_enclosing(I(Color.RED, Color.BLUE), intervals, by_value)


class TestMinimalEnclosing:
    """Test minimal_enclosing."""

    def test_empty_is_fully_indefinite(self):
        assert minimal_enclosing([]) == I()

    def test_minimum_start_and_maximum_end(self):
        assert minimal_enclosing(SAMPLE) == I(1, 4)
        assert minimal_enclosing([I(5, 6), I(-3, 0), I(2, 9)]) == I(-3, 9)

    def test_single(self):
        assert minimal_enclosing([I(1, 3)]) == I(1, 3)

    def test_result_is_a_new_interval(self):
        only = I(1, 3)
        assert minimal_enclosing([only]) is not only

    def test_order_independent(self):
        intervals = [I(5, 6), I(-3, 0), I(2, 9), I(1, 2)]
        for permutation in itertools.permutations(intervals):
            assert minimal_enclosing(list(permutation)) == I(-3, 9)

    @pytest.mark.parametrize(
        ("intervals", "expected"),
        [
            ([I(None, 3), I(1, 4)], I(None, 4)),
            ([I(1, 4), I(None, 3)], I(None, 4)),
            ([I(0, 1), I(1, None)], I(0, None)),
            ([I(2, None), I(0, 1)], I(0, None)),
            ([I(None, 1), I(3, None)], I()),
            ([I(), I(1, 2)], I()),
            ([I(1, 2), I()], I()),
        ],
    )
    def test_indefinite_bounds_win(self, intervals, expected):
        assert minimal_enclosing(intervals) == expected

    def test_indefinite_start_defeats_any_candidate(self):
        intervals = [I(1, 4), I(None, 3), I(2, 5)]
        assert minimal_enclosing(intervals).start is None
        for start in range(-2, 3):
            assert not is_minimal_enclosing(I(start, 5), intervals)

    def test_result_is_minimal_and_encloses_each_element(self):
        intervals = [I(3, 7), I(1, 4), I(6, 8), I(2, 3)]
        result = minimal_enclosing(intervals)
        assert is_minimal_enclosing(result, intervals)
        assert is_enclosing(result, intervals)
        for i in intervals:
            assert AllenRelation.relation(result, i).implies(AllenRelation.ENCLOSES)

    def test_dates(self):
        intervals = [
            I(date(2024, 3, 1), date(2024, 4, 1)),
            I(date(2024, 1, 15), date(2024, 2, 1)),
        ]
        assert minimal_enclosing(intervals) == I(date(2024, 1, 15), date(2024, 4, 1))

    def test_compare_fn(self):
        intervals = [I(Color.GREEN, Color.BLUE), I(Color.RED, Color.GREEN)]
        assert minimal_enclosing(intervals, by_value) == I(Color.RED, Color.BLUE)

    def test_invalid_element(self):
        with pytest.raises(PreconditionError):
            minimal_enclosing([I(1, 2), I(4, 3)])


class TestStructuralPreconditions:
    """Test that None and non-sequence arguments are rejected."""

    def test_none_interval(self):
        with pytest.raises(PreconditionError, match="cannot be None"):
            is_enclosing(None, [])
        with pytest.raises(PreconditionError, match="cannot be None"):
            is_enclosing(I(0, 10), [I(1, 2), None])
        with pytest.raises(PreconditionError, match="cannot be None"):
            is_minimal_enclosing(None, SAMPLE)
        with pytest.raises(PreconditionError, match="cannot be None"):
            minimal_enclosing([None])

    def test_minimal_enclosing_needs_a_sequence(self):
        with pytest.raises(PreconditionError, match="must be a sequence"):
            minimal_enclosing(i for i in SAMPLE)  # type: ignore[arg-type]
