"""Relations between a point and an interval.

A point is in exactly one of 5 basic relations with an interval:

    b  before      the point is before the start
    c  commences   the point is the start
    i  in          the point is strictly between start and end
    t  terminates  the point is the end
    a  after       the point is after the end

When the point or a bound of the interval is indefinite, the relation can
only be expressed as a general relation.
"""

from __future__ import annotations

from typing import Any, ClassVar

from allenalgebra.ancestry import TypeAncestry
from allenalgebra.compare import Comparator, is_lt_comparable_or_indefinite, lt_compare
from allenalgebra.errors import require
from allenalgebra.interval import end_of, is_interval, start_of
from allenalgebra.relation import Relation
from allenalgebra.typerepr import NO_COMMON_TYPE, common_type_representation


class PointIntervalRelation(Relation):
    """General relation between a point and an interval."""

    NR_OF_BITS: ClassVar[int] = 5
    BASIC_REPRESENTATIONS: ClassVar[tuple[str, ...]] = ("b", "c", "i", "t", "a")

    BEFORE: ClassVar[PointIntervalRelation]
    COMMENCES: ClassVar[PointIntervalRelation]
    IN: ClassVar[PointIntervalRelation]
    TERMINATES: ClassVar[PointIntervalRelation]
    AFTER: ClassVar[PointIntervalRelation]

    CONCURS_WITH: ClassVar[PointIntervalRelation]
    BEFORE_END: ClassVar[PointIntervalRelation]
    AFTER_BEGIN: ClassVar[PointIntervalRelation]

    @classmethod
    def relation(
        cls,
        t: Any,
        i: Any,
        compare_fn: Comparator[Any] | None = None,
        *,
        ancestry: TypeAncestry | None = None,
    ) -> PointIntervalRelation:
        """The most specific relation between the point `t` and the interval `i`.

        An indefinite `t` is in `full_relation()` with any interval.

        Raises:
            PreconditionError: when `t` and `i` cannot be compared

        """
        require(i is not None, "i cannot be None")
        start, end = start_of(i), end_of(i)
        require(
            compare_fn is not None
            or all(is_lt_comparable_or_indefinite(p) for p in (t, start, end)),
            "compare_fn is mandatory when t, i.start or i.end is a symbol or NaN",
        )

        common = common_type_representation(t, start, end, ancestry=ancestry)
        require(common is not NO_COMMON_TYPE, "t, i.start and i.end must be of a common type")
        require(
            common is None or is_interval(i, common, compare_fn, ancestry=ancestry),
            "i must be a valid interval",
        )

        if t is None:
            return cls.full_relation()

        compare = compare_fn if compare_fn is not None else lt_compare
        result = cls.full_relation()
        if start is not None:
            c = compare(t, start)
            if c < 0:
                return cls.BEFORE
            if c == 0:
                return cls.COMMENCES
            result = result.min(cls.BEFORE).min(cls.COMMENCES)
        if end is not None:
            c = compare(t, end)
            if c == 0:
                return cls.TERMINATES
            if c > 0:
                return cls.AFTER
            result = result.min(cls.TERMINATES).min(cls.AFTER)

        return result


def _init_relations() -> None:
    (
        PointIntervalRelation.BEFORE,
        PointIntervalRelation.COMMENCES,
        PointIntervalRelation.IN,
        PointIntervalRelation.TERMINATES,
        PointIntervalRelation.AFTER,
    ) = PointIntervalRelation.basic_relations()

    PointIntervalRelation.CONCURS_WITH = PointIntervalRelation.from_string("ci")
    PointIntervalRelation.BEFORE_END = PointIntervalRelation.from_string("bci")
    PointIntervalRelation.AFTER_BEGIN = PointIntervalRelation.from_string("ita")


_init_relations()
