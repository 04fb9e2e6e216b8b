"""Bounding intervals of collections of intervals."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from allenalgebra.allen import AllenRelation
from allenalgebra.compare import Comparator
from allenalgebra.errors import require
from allenalgebra.interval import Interval, end_of, get_compare_if_ok, start_of


def is_enclosing(
    i: Any,
    intervals: Sequence[Any],
    compare_fn: Comparator[Any] | None = None,
) -> bool:
    """Does `i` enclose all `intervals`?

    When any interval is fully or partially indefinite, this cannot be
    guaranteed, and False is returned. When `intervals` is empty, the answer
    is vacuously True, whatever `i` is.
    """
    require(isinstance(intervals, Sequence), "intervals must be a sequence")
    compare = get_compare_if_ok([*intervals, i], compare_fn)

    return all(
        AllenRelation.relation(i, j, compare).implies(AllenRelation.ENCLOSES)
        for j in intervals
    )


def is_minimal_enclosing(
    i: Any,
    intervals: Sequence[Any],
    compare_fn: Comparator[Any] | None = None,
) -> bool:
    """Does `i` enclose all `intervals`, and is it no larger than necessary to do that?

    `i` and every element of `intervals` must be fully definite, some element
    must start at `i.start`, and some element must end at `i.end`.

    When `intervals` is empty, there is no minimal enclosing interval, and
    False is returned. Note that `is_enclosing` is True in that case.
    """
    require(isinstance(intervals, Sequence), "intervals must be a sequence")
    compare = get_compare_if_ok([*intervals, i], compare_fn)

    start, end = start_of(i), end_of(i)
    if start is None or end is None or not intervals:
        return False

    found_start = found_end = False
    for j in intervals:
        j_start, j_end = start_of(j), end_of(j)
        if j_start is None or j_end is None:
            return False

        start_vs = compare(j_start, start)
        if start_vs < 0:
            return False
        found_start = found_start or start_vs == 0

        end_vs = compare(end, j_end)
        if end_vs < 0:
            return False
        found_end = found_end or end_vs == 0

    return found_start and found_end


def minimal_enclosing[T](
    intervals: Sequence[Any],
    compare_fn: Comparator[T] | None = None,
) -> Interval[T]:
    """The minimal interval that encloses all `intervals`.

    The result has an indefinite `start` when any element has an indefinite
    `start`, and the smallest `start` otherwise; likewise, it has an
    indefinite `end` when any element has an indefinite `end`, and the
    largest `end` otherwise. The minimal enclosing interval of no intervals
    is fully indefinite.
    """
    require(isinstance(intervals, Sequence), "intervals must be a sequence")
    compare = get_compare_if_ok(intervals, compare_fn)

    if not intervals:
        return Interval()

    start, end = start_of(intervals[0]), end_of(intervals[0])
    start_indefinite, end_indefinite = start is None, end is None
    for j in intervals[1:]:
        j_start, j_end = start_of(j), end_of(j)

        if j_start is None:
            start_indefinite = True
        elif not start_indefinite and compare(j_start, start) < 0:
            start = j_start

        if j_end is None:
            end_indefinite = True
        elif not end_indefinite and compare(end, j_end) < 0:
            end = j_end

    return Interval(
        start=None if start_indefinite else start,
        end=None if end_indefinite else end,
    )
