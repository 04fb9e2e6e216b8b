"""Sequences: collections of intervals that do not concur."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Any

from allenalgebra.compare import Comparator
from allenalgebra.errors import require
from allenalgebra.interval import compare_intervals, end_of, get_compare_if_ok, start_of


@dataclass(frozen=True)
class SequenceOptions:
    """Constraints checked by `is_sequence`.

    Attributes:
        compare_fn: Optional comparator. Mandatory when any point is NaN or a
            symbol.
        left_definite: The first interval, if any, must have a definite start.
        right_definite: The last interval, if any, must have a definite end.
        ordered: The candidate must already be ordered.
        gaps: Tristate. False: consecutive intervals must meet. True: they
            must be separated by a gap. None: either is fine, as long as they
            do not concur.

    """

    compare_fn: Comparator[Any] | None = None
    left_definite: bool = False
    right_definite: bool = False
    ordered: bool = False
    gaps: bool | None = None


def is_sequence(candidate: Sequence[Any], options: SequenceOptions | None = None) -> bool:
    """Check that `candidate`, ordered, is a sequence under `options`.

    Each interval must end at or before the start of the next one. Only the
    first interval can have an indefinite start, and only the last one an
    indefinite end.
    """
    require(isinstance(candidate, Sequence), "candidate must be a sequence")
    opts = options if options is not None else SequenceOptions()
    compare = get_compare_if_ok(candidate, opts.compare_fn)

    if not candidate:
        return True

    ordered = (
        candidate
        if opts.ordered
        else sorted(
            candidate,
            key=cmp_to_key(lambda i1, i2: compare_intervals(i1, i2, opts.compare_fn)),
        )
    )

    if opts.left_definite and start_of(ordered[0]) is None:
        return False
    if opts.right_definite and end_of(ordered[-1]) is None:
        return False

    def ends_before(i1: Any, i2: Any) -> bool:
        end, start = end_of(i1), start_of(i2)
        if end is None or start is None:
            return False
        c = compare(end, start)
        match opts.gaps:
            case None:
                return c <= 0
            case True:
                return c < 0
            case False:
                return c == 0

    return all(ends_before(i1, i2) for i1, i2 in zip(ordered, ordered[1:]))
