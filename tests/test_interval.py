"""Tests for allenalgebra.interval."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from functools import cmp_to_key
from types import SimpleNamespace

import pytest

from allenalgebra import PreconditionError
from allenalgebra.ancestry import RegisteredAncestry
from allenalgebra.compare import lt_compare
from allenalgebra.interval import Interval, compare_intervals, get_compare_if_ok, is_interval
from allenalgebra.typerepr import NUMBER, STRING, SYMBOL, ClassRep


class Color(Enum):
    RED = 1
    GREEN = 2
    BLUE = 3


def by_value(c1: Color, c2: Color) -> int:
    return c1.value - c2.value


def numeric(n1: float, n2: float) -> float:
    return n1 - n2


class TestInterval:
    """Test the Interval value type."""

    def test_defaults_are_indefinite(self):
        i = Interval()
        assert i.start is None
        assert i.end is None

    def test_equality(self):
        assert Interval(1, 2) == Interval(start=1, end=2)
        assert Interval(1, 2) != Interval(1, 3)
        assert Interval() == Interval(None, None)

    def test_frozen(self):
        i = Interval(1, 2)
        with pytest.raises((AttributeError, TypeError)):
            i.start = 0  # type: ignore[misc]

    def test_hashable(self):
        assert len({Interval(1, 2), Interval(1, 2), Interval(2, 3)}) == 2


class TestIsInterval:
    """Test is_interval."""

    def test_definite(self):
        assert is_interval(Interval(1, 2), NUMBER)
        assert is_interval(Interval("a", "b"), STRING)
        assert is_interval(Interval(date(2024, 1, 1), date(2024, 2, 1)), ClassRep(date))

    def test_partially_indefinite(self):
        assert is_interval(Interval(1, None), NUMBER)
        assert is_interval(Interval(None, 2), NUMBER)

    def test_fully_indefinite_is_an_interval_of_any_type(self):
        assert is_interval(Interval(), NUMBER)
        assert is_interval(Interval(), None)

    def test_none_is_not_an_interval(self):
        assert not is_interval(None, NUMBER)

    def test_start_must_be_before_end(self):
        assert not is_interval(Interval(2, 1), NUMBER)
        assert not is_interval(Interval(1, 1), NUMBER)

    def test_bounds_of_different_types(self):
        assert not is_interval(Interval(1, "b"), NUMBER)

    def test_wrong_point_type(self):
        assert not is_interval(Interval(1, 2), STRING)
        assert not is_interval(Interval(1, 2), None)

    def test_super_point_type(self):
        assert is_interval(Interval(date(2024, 1, 1), date(2024, 2, 1)), ClassRep(object))

    def test_duck_typed_intervals(self):
        assert is_interval(SimpleNamespace(start=1, end=2), NUMBER)
        assert is_interval(SimpleNamespace(start=1), NUMBER)
        assert is_interval(object(), NUMBER)

    def test_symbols_with_compare_fn(self):
        assert is_interval(Interval(Color.RED, Color.BLUE), SYMBOL, by_value)
        assert not is_interval(Interval(Color.BLUE, Color.RED), SYMBOL, by_value)
        with pytest.raises(PreconditionError, match="compare_fn is mandatory"):
            is_interval(Interval(Color.RED, Color.BLUE), SYMBOL)

    def test_invalid_point_type(self):
        with pytest.raises(PreconditionError):
            is_interval(Interval(1, 2), "number")  # type: ignore[arg-type]


class TestGetCompareIfOk:
    """Test get_compare_if_ok."""

    def test_returns_default_comparator(self):
        assert get_compare_if_ok([Interval(1, 2), Interval(None, 3)]) is lt_compare

    def test_returns_given_comparator(self):
        assert get_compare_if_ok([Interval(1, 2)], numeric) is numeric

    def test_empty(self):
        assert get_compare_if_ok([]) is lt_compare

    def test_fully_indefinite(self):
        assert get_compare_if_ok([Interval(), Interval()]) is lt_compare

    def test_no_common_type(self):
        with pytest.raises(PreconditionError, match="common type"):
            get_compare_if_ok([Interval(1, 2), Interval("a", "b")])

    def test_invalid_interval(self):
        with pytest.raises(PreconditionError, match="start < end"):
            get_compare_if_ok([Interval(1, 2), Interval(4, 3)])

    def test_symbols_need_a_compare_fn(self):
        with pytest.raises(PreconditionError, match="compare_fn is mandatory"):
            get_compare_if_ok([Interval(Color.RED, Color.BLUE)])

    def test_nan_needs_a_compare_fn(self):
        with pytest.raises(PreconditionError, match="compare_fn is mandatory"):
            get_compare_if_ok([Interval(float("nan"), 1.0)])

    def test_none_elements_are_rejected(self):
        with pytest.raises(PreconditionError, match="cannot be None"):
            get_compare_if_ok([None])
        with pytest.raises(PreconditionError, match="cannot be None"):
            get_compare_if_ok([Interval(1, 2), None])
        with pytest.raises(PreconditionError):
            compare_intervals(None, Interval(1, 2))


class Length:
    """Declared parent of `Meters` and `Feet` in a registered ancestry."""


@dataclass(frozen=True)
class Meters:
    value: float

    def to_primitive(self) -> float:
        return self.value


@dataclass(frozen=True)
class Feet:
    value: float

    def to_primitive(self) -> float:
        return self.value * 0.3048


def length_ancestry() -> RegisteredAncestry:
    ancestry = RegisteredAncestry()
    ancestry.register(Meters, Length)
    ancestry.register(Feet, Length)
    return ancestry


class TestRegisteredAncestry:
    """Test that interval validation follows an explicit ancestry graph."""

    def test_subtype_of_registered_parent(self):
        i = Interval(Meters(1), Meters(2))
        assert is_interval(i, ClassRep(Length), ancestry=length_ancestry())
        assert not is_interval(i, ClassRep(Length))

    def test_mixed_bounds_meet_at_registered_parent(self):
        i = Interval(Meters(1), Feet(10))
        assert is_interval(i, ClassRep(Length), ancestry=length_ancestry())
        assert not is_interval(i, ClassRep(Length))
        assert is_interval(i, ClassRep(object))

    def test_get_compare_if_ok(self):
        intervals = [Interval(Meters(1), Feet(10)), Interval(Feet(1), Meters(2))]
        assert get_compare_if_ok(intervals, ancestry=length_ancestry()) is lt_compare

    def test_compare_intervals(self):
        i1, i2 = Interval(Meters(1), Feet(10)), Interval(Feet(10), Meters(4))
        assert compare_intervals(i1, i2, ancestry=length_ancestry()) == -1


@dataclass(frozen=True)
class Case:
    i1: Interval[int]
    i2: Interval[int]
    expected: int


class TestCompareIntervals:
    """Test compare_intervals."""

    @pytest.mark.parametrize(
        "case",
        [
            Case(Interval(1, 2), Interval(1, 2), 0),
            Case(Interval(1, 2), Interval(2, 3), -1),
            Case(Interval(1, 2), Interval(1, 3), -1),
            Case(Interval(1, 3), Interval(1, 2), +1),
            Case(Interval(None, 2), Interval(1, 2), -1),
            Case(Interval(1, 2), Interval(None, 2), +1),
            Case(Interval(1, None), Interval(1, 5), +1),
            Case(Interval(1, 5), Interval(1, None), -1),
            Case(Interval(1, None), Interval(1, None), 0),
            Case(Interval(None, None), Interval(None, None), 0),
            Case(Interval(None, None), Interval(None, 4), +1),
        ],
    )
    def test_order(self, case: Case) -> None:
        assert compare_intervals(case.i1, case.i2) == case.expected

    def test_sorting(self):
        intervals = [Interval(3, 4), Interval(1, None), Interval(None, 2), Interval(1, 2)]
        ordered = sorted(intervals, key=cmp_to_key(compare_intervals))
        assert ordered == [Interval(None, 2), Interval(1, 2), Interval(1, None), Interval(3, 4)]

    def test_with_compare_fn(self):
        i1 = Interval(Color.RED, Color.GREEN)
        i2 = Interval(Color.GREEN, Color.BLUE)
        assert compare_intervals(i1, i2, by_value) < 0
        assert compare_intervals(i2, i1, by_value) > 0
