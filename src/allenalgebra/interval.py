"""Intervals with independently indefinite bounds."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from allenalgebra.ancestry import TypeAncestry
from allenalgebra.compare import Comparator, is_lt_comparable_or_indefinite, lt_compare
from allenalgebra.errors import require
from allenalgebra.typerepr import (
    NO_COMMON_TYPE,
    TypeRepresentation,
    common_type_representation,
    is_type_representation,
    represents_super_type,
)


@dataclass(frozen=True)
class Interval[T]:
    """A `start` and an `end` of a common type, either of which can be `None`.

    `None` means the bound is indefinite: unknown, or unbounded in that
    direction. When both are definite, `start` must be before `end` under
    the comparator used where the interval is involved; see `is_interval`.

    Any object with `start` and `end` attributes can be used where an
    `Interval` is expected. A missing attribute counts as indefinite.
    """

    start: T | None = None
    end: T | None = None


def start_of(i: Any) -> Any:
    return getattr(i, "start", None)


def end_of(i: Any) -> Any:
    return getattr(i, "end", None)


def is_interval(
    candidate: object,
    point_type: TypeRepresentation | None,
    compare_fn: Comparator[Any] | None = None,
    *,
    ancestry: TypeAncestry | None = None,
) -> bool:
    """Check that `candidate` is an interval of points of `point_type`.

    Args:
        candidate: The candidate interval
        point_type: `start` and `end` must be of this type, or a subtype. If
            this is `None`, `candidate` must be fully indefinite; `None` does
            not mean "don't care".
        compare_fn: Optional comparator used to check that `start < end`.
            Mandatory when a bound is a symbol or NaN.
        ancestry: Ancestry graph that decides subtyping of structured points

    Returns:
        True when both definite bounds have a common type represented by
        `point_type` and `start` is strictly before `end`

    """
    require(
        point_type is None or is_type_representation(point_type),
        f"{point_type!r} is not a type representation",
    )

    if candidate is None:
        return False

    start, end = start_of(candidate), end_of(candidate)
    common = common_type_representation(start, end, ancestry=ancestry)
    if common is NO_COMMON_TYPE:
        return False
    if common is None:
        return True
    if point_type is None or not represents_super_type(point_type, common, ancestry):
        return False

    require(
        (is_lt_comparable_or_indefinite(start) and is_lt_comparable_or_indefinite(end))
        or compare_fn is not None,
        "compare_fn is mandatory when start or end is a symbol or NaN",
    )

    if start is None or end is None:
        return True
    compare = compare_fn if compare_fn is not None else lt_compare
    return compare(start, end) < 0


def get_compare_if_ok[T](
    intervals: Sequence[Any],
    compare_fn: Comparator[T] | None = None,
    *,
    ancestry: TypeAncestry | None = None,
) -> Comparator[T]:
    """Check that `intervals` can be compared, and return the comparator to use.

    No element can be `None`. All bounds of all intervals must be of a common
    type, and every element must be a valid interval of that type.

    Raises:
        PreconditionError: when the intervals cannot be compared

    """
    require(all(i is not None for i in intervals), "intervals cannot be None")
    require(
        compare_fn is not None
        or all(
            is_lt_comparable_or_indefinite(start_of(i))
            and is_lt_comparable_or_indefinite(end_of(i))
            for i in intervals
        ),
        "compare_fn is mandatory when a start or end is a symbol or NaN",
    )

    common = common_type_representation(
        *(bound for i in intervals for bound in (start_of(i), end_of(i))),
        ancestry=ancestry,
    )
    require(common is not NO_COMMON_TYPE, "all starts and ends must be of a common type")
    require(
        common is None
        or all(is_interval(i, common, compare_fn, ancestry=ancestry) for i in intervals),
        "intervals must have start and end of the same type, and start < end",
    )

    return compare_fn if compare_fn is not None else lt_compare


def compare_intervals[T](
    i1: Any,
    i2: Any,
    compare_fn: Comparator[T] | None = None,
    *,
    ancestry: TypeAncestry | None = None,
) -> int:
    """Order intervals by `start`, then by `end`.

    An indefinite `start` comes before any definite one; an indefinite `end`
    comes after any definite one.
    """
    compare = get_compare_if_ok([i1, i2], compare_fn, ancestry=ancestry)

    def compare_end() -> int:
        end1, end2 = end_of(i1), end_of(i2)
        if end1 is None:
            return 0 if end2 is None else +1
        if end2 is None:
            return -1
        return compare(end1, end2)

    start1, start2 = start_of(i1), start_of(i2)
    if start1 is None:
        return -1 if start2 is not None else compare_end()
    if start2 is None:
        return +1

    return compare(start1, start2) or compare_end()
