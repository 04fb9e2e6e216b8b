"""Default ordering of points.

A `Comparator` has the traditional comparison semantics: negative when the
first argument is considered smaller, positive when it is considered larger,
and `0` when both are considered equal. Comparators are never called with
indefinite (`None`) points.

`lt_compare` is the default comparator. It orders any two points of a common
type, and refuses points that have no natural order.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from decimal import Decimal
from typing import Any, Protocol, runtime_checkable

from allenalgebra.errors import fail, require
from allenalgebra.typerepr import (
    ClassRep,
    common_type_representation,
    is_symbol,
    type_representation_of,
)

type Comparator[T] = Callable[[T, T], int]


@runtime_checkable
class HasCompare(Protocol):
    """Structured points that order themselves."""

    def compare(self, other: Any) -> int: ...


@runtime_checkable
class HasPrimitive(Protocol):
    """Structured points that are ordered by a primitive stand-in."""

    def to_primitive(self) -> Any: ...


def is_nan(value: object) -> bool:
    """Check for the float and Decimal not-a-number values."""
    match value:
        case float():
            return math.isnan(value)
        case Decimal():
            return value.is_nan()
        case _:
            return False


def is_lt_comparable_or_indefinite(value: object) -> bool:
    """`None` is acceptable by convention; symbols and NaN are not."""
    return value is None or (not is_symbol(value) and not is_nan(value))


_NO_NONE = "default lt_compare cannot compare None"
_NO_NAN = "default lt_compare cannot compare NaN"
_NO_SYMBOL = "default lt_compare cannot compare symbols"
_COMMON_TYPE = "t1 and t2 must be of a common type"


def _sign(n: Any) -> int:
    return -1 if n < 0 else +1 if n > 0 else 0


def _native_compare(t1: Any, t2: Any) -> int:
    try:
        return -1 if t1 < t2 else +1 if t2 < t1 else 0
    except TypeError as e:
        fail(f"{type(t1).__name__} values have no natural order: {e}")


def lt_compare(t1: Any, t2: Any) -> int:
    """Compare `t1` and `t2` with their natural order.

    Structured points are compared with their `compare` method when they have
    one, else through `to_primitive` when they have that, else with `<`.

    Args:
        t1: First definite point
        t2: Second definite point, of a common type with `t1`

    Returns:
        -1, 0 or +1

    Raises:
        PreconditionError: when a point is None, NaN or a symbol, when the
            points have no common type, or when they cannot be ordered

    """
    require(t1 is not None and t2 is not None, _NO_NONE)
    require(not is_nan(t1) and not is_nan(t2), _NO_NAN)
    require(not is_symbol(t1) and not is_symbol(t2), _NO_SYMBOL)
    require(common_type_representation(t1, t2), _COMMON_TYPE)

    if isinstance(type_representation_of(t1), ClassRep):
        if isinstance(t1, HasCompare):
            return _sign(t1.compare(t2))
        if isinstance(t1, HasPrimitive) and isinstance(t2, HasPrimitive):
            return _native_compare(t1.to_primitive(), t2.to_primitive())

    return _native_compare(t1, t2)
