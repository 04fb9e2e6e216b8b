"""Relations as sets of basic relations.

A relation algebra has a fixed number of mutually exclusive basic relations.
A general relation is a set of basic relations, and expresses uncertainty:
the actual relation is one of the basic relations in the set.

A relation with `n` basic relations is stored as an `n`-bit bit pattern.
Each bit represents a basic relation, being in the general relation (`1`)
or not (`0`). The order of the basic relations in the bit pattern matters for
some algorithms (see `AllenRelation.converse`).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Self

from allenalgebra.errors import require

LARGEST_NR_OF_BITS = 16
EMPTY_BIT_PATTERN = 0


def _require_nr_of_bits(nr_of_bits: int) -> None:
    require(
        isinstance(nr_of_bits, int) and 0 <= nr_of_bits <= LARGEST_NR_OF_BITS,
        f"nr_of_bits must be an int in [0, {LARGEST_NR_OF_BITS}], got {nr_of_bits!r}",
    )


def nr_of_relations(nr_of_bits: int) -> int:
    """Number of general relations in an algebra with `nr_of_bits` basic relations."""
    _require_nr_of_bits(nr_of_bits)
    return 2**nr_of_bits


def full_bit_pattern(nr_of_bits: int) -> int:
    return nr_of_relations(nr_of_bits) - 1


def is_relation_bit_pattern(nr_of_bits: int, candidate: object) -> bool:
    return (
        isinstance(candidate, int)
        and not isinstance(candidate, bool)
        and EMPTY_BIT_PATTERN <= candidate <= full_bit_pattern(nr_of_bits)
    )


def basic_relation_bit_patterns(nr_of_bits: int) -> tuple[int, ...]:
    _require_nr_of_bits(nr_of_bits)
    return tuple(1 << nr for nr in range(nr_of_bits))


def is_basic_relation_bit_pattern(nr_of_bits: int, candidate: object) -> bool:
    """A basic relation has exactly one bit set."""
    return is_relation_bit_pattern(nr_of_bits, candidate) and candidate.bit_count() == 1  # type: ignore[union-attr]


def reverse(nr_of_bits: int, n: int) -> int:
    """Reverse the lowest `nr_of_bits` bits of `n`."""
    require(is_relation_bit_pattern(nr_of_bits, n), f"{n!r} is not a {nr_of_bits}-bit pattern")

    rev = 0
    for _ in range(nr_of_bits):
        rev = (rev << 1) | (n & 1)
        n >>= 1
    return rev


def bit_count(n: int) -> int:
    require(isinstance(n, int) and n >= 0, f"bit_count needs a non-negative int, got {n!r}")
    return n.bit_count()


@dataclass(frozen=True)
class Relation:
    """Base for relation algebras.

    Subclasses define `NR_OF_BITS` and `BASIC_REPRESENTATIONS`. Instances are
    cached per subclass: obtain them with `general_relation`, never with the
    constructor.
    """

    NR_OF_BITS: ClassVar[int]
    BASIC_REPRESENTATIONS: ClassVar[tuple[str, ...]]
    _cache: ClassVar[dict[type[Relation], tuple[Relation, ...]]] = {}

    bit_pattern: int

    def __post_init__(self) -> None:
        require(
            is_relation_bit_pattern(self.NR_OF_BITS, self.bit_pattern),
            f"{self.bit_pattern!r} is not a {self.NR_OF_BITS}-bit pattern",
        )

    # region definitions

    @classmethod
    def relations(cls) -> tuple[Self, ...]:
        """All general relations, indexed by bit pattern."""
        if (cached := Relation._cache.get(cls)) is None:
            cached = tuple(cls(bp) for bp in range(nr_of_relations(cls.NR_OF_BITS)))
            Relation._cache[cls] = cached
        return cached  # type: ignore[return-value]

    @classmethod
    def general_relation(cls, index: int) -> Self:
        require(is_relation_bit_pattern(cls.NR_OF_BITS, index), f"{index!r} is not a relation index")
        return cls.relations()[index]

    @classmethod
    def basic_relations(cls) -> tuple[Self, ...]:
        return tuple(cls.general_relation(bp) for bp in basic_relation_bit_patterns(cls.NR_OF_BITS))

    # endregion

    # region special relations

    @classmethod
    def empty_relation(cls) -> Self:
        """The relation that holds between nothing. Bit pattern `0...0`."""
        return cls.general_relation(EMPTY_BIT_PATTERN)

    @classmethod
    def full_relation(cls) -> Self:
        """The relation that expresses we know nothing. Bit pattern `1...1`."""
        return cls.general_relation(full_bit_pattern(cls.NR_OF_BITS))

    # endregion

    # region selection

    @classmethod
    def or_(cls, *relations: Self) -> Self:
        """The union of `relations`."""
        require(all(isinstance(r, cls) for r in relations), f"all relations must be {cls.__name__}s")
        pattern = EMPTY_BIT_PATTERN
        for r in relations:
            pattern |= r.bit_pattern
        return cls.general_relation(pattern)

    @classmethod
    def and_(cls, *relations: Self) -> Self:
        """The intersection of `relations`."""
        require(all(isinstance(r, cls) for r in relations), f"all relations must be {cls.__name__}s")
        pattern = full_bit_pattern(cls.NR_OF_BITS)
        for r in relations:
            pattern &= r.bit_pattern
        return cls.general_relation(pattern)

    @classmethod
    def from_string(cls, s: str) -> Self:
        """The relation containing every basic relation whose representation occurs in `s`."""
        if not isinstance(s, str):
            msg = f"Expected a string, got {type(s).__name__}"
            raise TypeError(msg)
        basics = cls.basic_relations()
        return cls.or_(
            cls.empty_relation(),
            *(basics[i] for i, rep in enumerate(cls.BASIC_REPRESENTATIONS) if rep in s),
        )

    # endregion

    # region instance methods

    def is_basic(self) -> bool:
        return is_basic_relation_bit_pattern(self.NR_OF_BITS, self.bit_pattern)

    def ordinal(self) -> int | None:
        """Index of a basic relation in `basic_relations()`; `None` for general relations."""
        if not self.is_basic():
            return None
        return self.bit_pattern.bit_length() - 1

    def uncertainty(self) -> float:
        """0 for a basic relation, 1 for the full relation, NaN for the empty relation."""
        count = bit_count(self.bit_pattern)
        if count == 0:
            return float("nan")
        return (count - 1) / (self.NR_OF_BITS - 1)

    def _require_same_algebra(self, other: Relation) -> None:
        require(isinstance(other, type(self)), f"{other!r} is not a {type(self).__name__}")

    def implied_by(self, other: Self) -> bool:
        """Every basic relation of `other` is in this relation."""
        self._require_same_algebra(other)
        return (self.bit_pattern & other.bit_pattern) == other.bit_pattern

    def implies(self, other: Self) -> bool:
        """Every basic relation of this relation is in `other`."""
        self._require_same_algebra(other)
        return (other.bit_pattern & self.bit_pattern) == self.bit_pattern

    def complement(self) -> Self:
        return self.general_relation(full_bit_pattern(self.NR_OF_BITS) ^ self.bit_pattern)

    def min(self, other: Self) -> Self:
        """This relation without the basic relations of `other`."""
        self._require_same_algebra(other)
        return self.general_relation(self.bit_pattern & ~other.bit_pattern)

    # endregion

    def __str__(self) -> str:
        reps = (
            self.BASIC_REPRESENTATIONS[i]
            for i, basic in enumerate(self.basic_relations())
            if self.implied_by(basic)
        )
        return f"({''.join(reps)})"

    def __repr__(self) -> str:
        return f"{type(self).__name__}{self}"
