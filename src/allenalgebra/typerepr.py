"""Dynamic type representation of points.

Points of an interval can be of any type, as long as all points that are
compared with each other are of a common type. This module determines the
type of a value at runtime and the narrowest type a set of values has in
common.

A type representation is either a `PrimitiveKind` (numbers, decimals, strings,
booleans and symbols) or a `ClassRep` wrapping the class of a structured
value. `None` has no representation: it means "don't know".
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, ClassVar, dataclass_transform

from allenalgebra.ancestry import DEFAULT_ANCESTRY, TypeAncestry
from allenalgebra.errors import fail, require


@dataclass(frozen=True)
@dataclass_transform(frozen_default=True)
class PrimitiveKind:
    """Base for the fixed set of primitive point kinds."""

    tag: ClassVar[str]
    registry: ClassVar[dict[str, type[PrimitiveKind]]] = {}

    def __init_subclass__(cls, tag: str | None = None) -> None:
        """Register kind subclass with automatic tag derivation."""
        dataclass(frozen=True)(cls)
        cls.tag = tag if tag is not None else cls.__name__.lower().removesuffix("kind")

        if (existing := PrimitiveKind.registry.get(cls.tag)) and existing is not cls:
            msg = (
                f"Tag '{cls.tag}' already registered to {existing}. "
                "Choose a different tag."
            )
            raise ValueError(msg)

        PrimitiveKind.registry[cls.tag] = cls


class NumberKind(PrimitiveKind, tag="number"):
    """Real numbers: int, float, Fraction, IntEnum members."""


class DecimalKind(PrimitiveKind, tag="decimal"):
    """Arbitrary precision decimals. Does not unify with `NumberKind`."""


class StringKind(PrimitiveKind, tag="string"):
    """Text."""


class BooleanKind(PrimitiveKind, tag="boolean"):
    """Booleans."""


class SymbolKind(PrimitiveKind, tag="symbol"):
    """Plain enum members: unique, named, and without natural order."""


NUMBER = NumberKind()
DECIMAL = DecimalKind()
STRING = StringKind()
BOOLEAN = BooleanKind()
SYMBOL = SymbolKind()


@dataclass(frozen=True)
class ClassRep:
    """Representation of a structured type by its class."""

    con: type[Any]

    def __repr__(self) -> str:
        return f"ClassRep({self.con.__name__})"


type TypeRepresentation = PrimitiveKind | ClassRep


class _NoCommonType(Enum):
    NO_COMMON_TYPE = "no common type"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NO_COMMON_TYPE"


NO_COMMON_TYPE = _NoCommonType.NO_COMMON_TYPE
"""Result of `common_type_representation` when values cannot be unified."""


def is_symbol(value: object) -> bool:
    """Plain enum members are symbols; int, str and float enums are not."""
    return isinstance(value, Enum) and not isinstance(value, (int, str, float))


def type_representation_of(value: object) -> TypeRepresentation | None:
    """The dynamic representation of the precise type of `value`.

    Returns `None` when `value` is `None`, expressing "don't know".
    """
    match value:
        case None:
            return None
        case bool():
            return BOOLEAN
        case Enum() if is_symbol(value):
            return SYMBOL
        case Decimal():
            return DECIMAL
        case numbers.Real():
            return NUMBER
        case str():
            return STRING
        case _:
            return ClassRep(type(value))


def is_type_representation(candidate: object) -> bool:
    """Check whether `candidate` is a `PrimitiveKind` or a `ClassRep`."""
    return isinstance(candidate, (PrimitiveKind, ClassRep))


def most_specialized_common_type(
    rep1: ClassRep,
    rep2: ClassRep,
    ancestry: TypeAncestry | None = None,
) -> ClassRep:
    """The most specific class that is `rep2`'s class or one of its ancestors.

    Walks the lineage of `rep1` until it reaches an ancestor of (or the same
    class as) `rep2`. There always is one: every lineage ends at `object`.

    Args:
        rep1: First structured type
        rep2: Second structured type
        ancestry: Ancestry graph to use; `DEFAULT_ANCESTRY` when omitted

    Returns:
        The narrowest common structured type

    """
    require(
        isinstance(rep1, ClassRep) and isinstance(rep2, ClassRep),
        "most_specialized_common_type is only defined for structured types",
    )
    graph = ancestry if ancestry is not None else DEFAULT_ANCESTRY

    for candidate in graph.lineage(rep1.con):
        if graph.is_ancestor(candidate, rep2.con):
            return ClassRep(candidate)

    fail(f"lineage of {rep1.con.__name__} does not end at object")


def common_type_representation(
    *values: object,
    ancestry: TypeAncestry | None = None,
) -> TypeRepresentation | None | _NoCommonType:
    """Return the representation of the type all `values` have in common.

    `None` values do not take part. If all values are `None`, or there are no
    values, `None` is returned. If there is no common type, `NO_COMMON_TYPE`
    is returned.
    """
    common: TypeRepresentation | None = None
    for value in values:
        rep = type_representation_of(value)
        if rep is None:
            continue
        if common is None:
            common = rep
            continue
        match (common, rep):
            case (ClassRep(), ClassRep()):
                common = most_specialized_common_type(rep, common, ancestry)
            case _ if common != rep:
                return NO_COMMON_TYPE
    return common


def represents_super_type(
    super_rep: TypeRepresentation,
    rep: TypeRepresentation,
    ancestry: TypeAncestry | None = None,
) -> bool:
    """`super_rep` is, or is a super type of, `rep`.

    Neither argument may be `None`. Whether an indefinite value is acceptable
    is context dependent, and must be decided before calling this function.
    """
    require(is_type_representation(super_rep), f"{super_rep!r} is not a type representation")
    require(is_type_representation(rep), f"{rep!r} is not a type representation")

    if super_rep == rep:
        return True
    if isinstance(super_rep, ClassRep) and isinstance(rep, ClassRep):
        return most_specialized_common_type(super_rep, rep, ancestry) == super_rep
    return False
