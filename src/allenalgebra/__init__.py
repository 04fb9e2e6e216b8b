"""allenalgebra - Allen's Interval Algebra over any ordered point type."""

from allenalgebra.allen import AllenRelation
from allenalgebra.ancestry import (
    DEFAULT_ANCESTRY,
    MroAncestry,
    RegisteredAncestry,
    TypeAncestry,
)
from allenalgebra.chain import (
    Chain,
    ChainedInterval,
    ChainInterval,
    chain_to_gapless_left_definite_sequence,
    compare_chain_intervals,
    is_chain,
    is_chain_interval,
)
from allenalgebra.compare import (
    Comparator,
    HasCompare,
    HasPrimitive,
    is_lt_comparable_or_indefinite,
    lt_compare,
)
from allenalgebra.enclosing import (
    is_enclosing,
    is_minimal_enclosing,
    minimal_enclosing,
)
from allenalgebra.errors import PreconditionError
from allenalgebra.interval import (
    Interval,
    compare_intervals,
    get_compare_if_ok,
    is_interval,
)
from allenalgebra.point_interval import PointIntervalRelation
from allenalgebra.relation import Relation
from allenalgebra.sequence import SequenceOptions, is_sequence
from allenalgebra.typerepr import (
    BOOLEAN,
    DECIMAL,
    NO_COMMON_TYPE,
    NUMBER,
    STRING,
    SYMBOL,
    ClassRep,
    PrimitiveKind,
    TypeRepresentation,
    common_type_representation,
    is_type_representation,
    most_specialized_common_type,
    represents_super_type,
    type_representation_of,
)

__all__ = [
    # Type representation
    "BOOLEAN",
    "DECIMAL",
    "DEFAULT_ANCESTRY",
    "NO_COMMON_TYPE",
    "NUMBER",
    "STRING",
    "SYMBOL",
    # Relations
    "AllenRelation",
    # Intervals and chains
    "Chain",
    "ChainInterval",
    "ChainedInterval",
    "ClassRep",
    # Comparison
    "Comparator",
    "HasCompare",
    "HasPrimitive",
    "Interval",
    "MroAncestry",
    "PointIntervalRelation",
    # Errors
    "PreconditionError",
    "PrimitiveKind",
    "RegisteredAncestry",
    "Relation",
    "SequenceOptions",
    "TypeAncestry",
    "TypeRepresentation",
    "chain_to_gapless_left_definite_sequence",
    "common_type_representation",
    "compare_chain_intervals",
    "compare_intervals",
    "get_compare_if_ok",
    "is_chain",
    "is_chain_interval",
    "is_enclosing",
    "is_interval",
    "is_lt_comparable_or_indefinite",
    "is_minimal_enclosing",
    "is_sequence",
    "is_type_representation",
    "lt_compare",
    "minimal_enclosing",
    "most_specialized_common_type",
    "represents_super_type",
    "type_representation_of",
]
