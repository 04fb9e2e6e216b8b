"""Chains: sets of start points that partition the point line.

A gapless sequence whose only indefinite bound is the end of its last
element is often represented in business logic as a collection of records
that only have a `start`. The `end` of each record is implicitly the `start`
of the record with the next larger `start`, and the last record implicitly
runs on indefinitely.

Such records are `ChainInterval`s. The attribute name `end` is reserved.
The attribute name `link` is reserved too: `chain_to_gapless_left_definite_sequence`
returns `ChainedInterval`s whose `link` is the originating record, so a payload
field named `link` would be hidden behind it. A `ChainedInterval` is never
equal to a plain `Interval` with the same bounds.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Any

from allenalgebra.ancestry import TypeAncestry
from allenalgebra.compare import Comparator, is_lt_comparable_or_indefinite, lt_compare
from allenalgebra.errors import require
from allenalgebra.interval import Interval
from allenalgebra.typerepr import (
    NO_COMMON_TYPE,
    TypeRepresentation,
    common_type_representation,
    is_type_representation,
    represents_super_type,
    type_representation_of,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChainInterval[T]:
    """One link of a chain: a definite `start` and no `end`.

    Subclass to attach payload fields:

        @dataclass(frozen=True)
        class Tariff(ChainInterval[date]):
            price: Decimal

    """

    start: T


@dataclass(frozen=True)
class ChainedInterval[T](Interval[T]):
    """A `ChainInterval` with the `end` its chain implies.

    Attributes that are not found on the interval itself are looked up on
    `link`, the chain interval this interval was derived from.
    """

    link: Any = None

    def __getattr__(self, name: str) -> Any:
        if name == "link":
            raise AttributeError(name)
        return getattr(self.link, name)


type Chain[T] = Sequence[ChainInterval[T]]


def is_chain_interval(
    candidate: object,
    point_type: TypeRepresentation,
    *,
    ancestry: TypeAncestry | None = None,
) -> bool:
    """Check that `candidate` has a definite `start` of `point_type`, and no `end`."""
    require(is_type_representation(point_type), f"{point_type!r} is not a type representation")

    if candidate is None or hasattr(candidate, "end"):
        return False

    start_type = type_representation_of(getattr(candidate, "start", None))
    return start_type is not None and represents_super_type(point_type, start_type, ancestry)


def get_chain_compare_if_ok[T](
    chain_intervals: Sequence[Any],
    compare_fn: Comparator[T] | None = None,
    *,
    ancestry: TypeAncestry | None = None,
) -> Comparator[T]:
    """Check that `chain_intervals` can be compared, and return the comparator to use.

    Raises:
        PreconditionError: when the starts cannot be compared

    """
    require(
        all(ci is not None for ci in chain_intervals),
        "chain intervals cannot be None",
    )
    require(
        compare_fn is not None
        or all(
            is_lt_comparable_or_indefinite(getattr(ci, "start", None)) for ci in chain_intervals
        ),
        "compare_fn is mandatory when a start is a symbol or NaN",
    )

    common = common_type_representation(
        *(getattr(ci, "start", None) for ci in chain_intervals),
        ancestry=ancestry,
    )
    require(common is not NO_COMMON_TYPE, "chain interval starts must be of a common type")
    require(
        common is None
        or all(is_chain_interval(ci, common, ancestry=ancestry) for ci in chain_intervals),
        "chain intervals must have a start of the same type, and no end",
    )

    return compare_fn if compare_fn is not None else lt_compare


def compare_chain_intervals[T](
    ci1: ChainInterval[T],
    ci2: ChainInterval[T],
    compare_fn: Comparator[T] | None = None,
    *,
    ancestry: TypeAncestry | None = None,
) -> int:
    """Order chain intervals on their (mandatory) `start`."""
    compare = get_chain_compare_if_ok([ci1, ci2], compare_fn, ancestry=ancestry)

    return compare(ci1.start, ci2.start)


def _sorted_by_start[T](
    chain: Sequence[ChainInterval[T]],
    compare_fn: Comparator[T] | None,
    ancestry: TypeAncestry | None,
) -> list[ChainInterval[T]]:
    return sorted(
        chain,
        key=cmp_to_key(
            lambda ci1, ci2: compare_chain_intervals(ci1, ci2, compare_fn, ancestry=ancestry)
        ),
    )


def is_chain(
    candidate: object,
    compare_fn: Comparator[Any] | None = None,
    *,
    point_type: TypeRepresentation | None = None,
    ancestry: TypeAncestry | None = None,
) -> bool:
    """Check that `candidate` is a chain.

    A chain is a list or tuple of chain intervals whose starts are of a
    common type and pairwise different. The elements do not have to be
    ordered.

    Args:
        candidate: The candidate chain
        compare_fn: Optional comparator for the starts; `lt_compare` when
            omitted. Mandatory when starts are symbols or NaN.
        point_type: When given, the common type of the starts must be
            exactly this type
        ancestry: Ancestry graph used to find the common type of structured
            starts; the method resolution order when omitted

    Returns:
        True when `candidate` is a chain

    """
    if not isinstance(candidate, (list, tuple)):
        return False
    if not candidate:
        return True

    common = common_type_representation(
        *(getattr(ci, "start", None) for ci in candidate),
        ancestry=ancestry,
    )
    if not common:
        logger.debug("is_chain: starts have no common type")
        return False
    if point_type is not None and common != point_type:
        logger.debug("is_chain: starts are %r, expected %r", common, point_type)
        return False

    if not all(is_chain_interval(ci, common, ancestry=ancestry) for ci in candidate):
        logger.debug("is_chain: not all elements are chain intervals of %r", common)
        return False

    ordered = _sorted_by_start(candidate, compare_fn, ancestry)
    compare = compare_fn if compare_fn is not None else lt_compare
    for previous, current in zip(ordered, ordered[1:]):
        if compare(previous.start, current.start) >= 0:
            logger.debug("is_chain: duplicate start %r", current.start)
            return False
    return True


def chain_to_gapless_left_definite_sequence[T](
    chain: Chain[T],
    compare_fn: Comparator[T] | None = None,
    *,
    ancestry: TypeAncestry | None = None,
) -> list[ChainedInterval[T]]:
    """Turn a chain into an ordered, gapless sequence of intervals.

    The result is sorted on `start`. The `end` of each element is the `start`
    of the next one; the last element has an indefinite `end`. Every element
    links back to the chain interval it represents.

    Raises:
        PreconditionError: when `chain` is not a chain

    """
    require(isinstance(chain, (list, tuple)), "chain must be a list or a tuple")
    require(is_chain(chain, compare_fn, ancestry=ancestry), "chain must be a chain")

    ordered = _sorted_by_start(chain, compare_fn, ancestry)
    ends = [ci.start for ci in ordered[1:]] + [None]
    return [
        ChainedInterval(start=ci.start, end=end, link=ci)
        for ci, end in zip(ordered, ends, strict=True)
    ]
