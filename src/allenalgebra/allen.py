"""Allen's Interval Algebra.

Any two intervals are in exactly one of 13 basic relations. When one or more
bounds are indefinite, the relation between two intervals can only be
expressed as a general relation: the set of basic relations that might hold.

Basic relations and their one-letter representations, as seen from the
first interval:

    p  precedes          P  preceded by
    m  meets             M  met by
    o  overlaps          O  overlapped by
    F  finished by       f  finishes
    D  contains          d  during
    s  starts            S  started by
    e  equals

Basic relations are ordered so that the converse of a relation is the
reversed bit pattern.
"""

from __future__ import annotations

from typing import Any, ClassVar

from allenalgebra.compare import Comparator
from allenalgebra.interval import end_of, get_compare_if_ok, start_of
from allenalgebra.relation import Relation, reverse


class AllenRelation(Relation):
    """General relation between two intervals."""

    NR_OF_BITS: ClassVar[int] = 13
    BASIC_REPRESENTATIONS: ClassVar[tuple[str, ...]] = (
        "p", "m", "o", "F", "D", "s", "e", "S", "d", "f", "O", "M", "P",
    )  # fmt: skip

    PRECEDES: ClassVar[AllenRelation]
    MEETS: ClassVar[AllenRelation]
    OVERLAPS: ClassVar[AllenRelation]
    FINISHED_BY: ClassVar[AllenRelation]
    CONTAINS: ClassVar[AllenRelation]
    STARTS: ClassVar[AllenRelation]
    EQUALS: ClassVar[AllenRelation]
    STARTED_BY: ClassVar[AllenRelation]
    DURING: ClassVar[AllenRelation]
    FINISHES: ClassVar[AllenRelation]
    OVERLAPPED_BY: ClassVar[AllenRelation]
    MET_BY: ClassVar[AllenRelation]
    PRECEDED_BY: ClassVar[AllenRelation]

    CONCURS_WITH: ClassVar[AllenRelation]
    STARTS_EARLIER: ClassVar[AllenRelation]
    START_TOGETHER: ClassVar[AllenRelation]
    STARTS_LATER: ClassVar[AllenRelation]
    STARTS_IN: ClassVar[AllenRelation]
    STARTS_EARLIER_AND_ENDS_EARLIER: ClassVar[AllenRelation]
    STARTS_LATER_AND_ENDS_LATER: ClassVar[AllenRelation]
    ENDS_EARLIER: ClassVar[AllenRelation]
    ENDS_IN: ClassVar[AllenRelation]
    END_TOGETHER: ClassVar[AllenRelation]
    ENDS_LATER: ClassVar[AllenRelation]
    CONTAINS_START: ClassVar[AllenRelation]
    CONTAINS_END: ClassVar[AllenRelation]
    ENCLOSES: ClassVar[AllenRelation]

    def converse(self) -> AllenRelation:
        """The relation from the second interval's point of view."""
        return self.general_relation(reverse(self.NR_OF_BITS, self.bit_pattern))

    @classmethod
    def relation(
        cls,
        i1: Any,
        i2: Any,
        compare_fn: Comparator[Any] | None = None,
    ) -> AllenRelation:
        """The most specific relation between `i1` and `i2`.

        Indefinite bounds make the result less specific: a fully indefinite
        interval is in `full_relation()` with any other interval.

        Raises:
            PreconditionError: when the intervals cannot be compared

        """
        compare = get_compare_if_ok([i1, i2], compare_fn)
        start1, end1 = start_of(i1), end_of(i1)
        start2, end2 = start_of(i2), end_of(i2)

        result = cls.full_relation()
        if start1 is not None:
            if start2 is not None:
                c = compare(start1, start2)
                if c < 0:
                    result = result.min(cls.STARTS_EARLIER.complement())
                elif c == 0:
                    result = result.min(cls.START_TOGETHER.complement())
                else:
                    result = result.min(cls.STARTS_LATER.complement())
            if end2 is not None:
                c = compare(start1, end2)
                if c == 0:
                    return cls.MET_BY
                if c > 0:
                    return cls.PRECEDED_BY
                # starts before i2 ends: not M, not P
                result = result.min(cls.MET_BY).min(cls.PRECEDED_BY)

        if end1 is not None:
            if start2 is not None:
                c = compare(end1, start2)
                if c < 0:
                    return cls.PRECEDES
                if c == 0:
                    return cls.MEETS
                # ends after i2 starts: not p, not m
                result = result.min(cls.PRECEDES).min(cls.MEETS)
            if end2 is not None:
                c = compare(end1, end2)
                if c < 0:
                    result = result.min(cls.ENDS_EARLIER.complement())
                elif c == 0:
                    result = result.min(cls.END_TOGETHER.complement())
                else:
                    result = result.min(cls.ENDS_LATER.complement())

        return result


def _init_relations() -> None:
    (
        AllenRelation.PRECEDES,
        AllenRelation.MEETS,
        AllenRelation.OVERLAPS,
        AllenRelation.FINISHED_BY,
        AllenRelation.CONTAINS,
        AllenRelation.STARTS,
        AllenRelation.EQUALS,
        AllenRelation.STARTED_BY,
        AllenRelation.DURING,
        AllenRelation.FINISHES,
        AllenRelation.OVERLAPPED_BY,
        AllenRelation.MET_BY,
        AllenRelation.PRECEDED_BY,
    ) = AllenRelation.basic_relations()

    def of(reps: str) -> AllenRelation:
        return AllenRelation.from_string(reps)

    AllenRelation.CONCURS_WITH = of("oFDseSdfO")
    AllenRelation.STARTS_EARLIER = of("pmoFD")
    AllenRelation.START_TOGETHER = of("seS")
    AllenRelation.STARTS_LATER = of("dfOMP")
    AllenRelation.STARTS_IN = of("dfO")
    AllenRelation.STARTS_EARLIER_AND_ENDS_EARLIER = of("pmo")
    AllenRelation.STARTS_LATER_AND_ENDS_LATER = of("OMP")
    AllenRelation.ENDS_EARLIER = of("pmosd")
    AllenRelation.ENDS_IN = of("osd")
    AllenRelation.END_TOGETHER = of("Fef")
    AllenRelation.ENDS_LATER = of("DSOMP")
    AllenRelation.CONTAINS_START = of("oFD")
    AllenRelation.CONTAINS_END = of("DSO")
    AllenRelation.ENCLOSES = of("FDeS")


_init_relations()
