"""Type ancestry graphs for structured point types.

Common-type inference for structured values needs to know which classes are
ancestors of which. That knowledge is supplied through a `TypeAncestry`
rather than read implicitly off the runtime, so callers can describe
hierarchies the interpreter does not know about (for instance, value objects
that are related by convention but not by inheritance).

Every lineage ends at `object`, the universal root.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


class TypeAncestry(ABC):
    """Source of the ancestor chain of a class."""

    @abstractmethod
    def lineage(self, con: type) -> tuple[type, ...]:
        """Return `con` followed by its ancestors, most specific first.

        The last element is always `object`.
        """

    def is_ancestor(self, ancestor: type, con: type) -> bool:
        """Check whether `ancestor` is `con` or one of its ancestors."""
        return ancestor in self.lineage(con)


class MroAncestry(TypeAncestry):
    """Ancestry read from the method resolution order of each class."""

    def lineage(self, con: type) -> tuple[type, ...]:
        return con.__mro__

    def __repr__(self) -> str:
        return "MroAncestry()"


@dataclass
class RegisteredAncestry(TypeAncestry):
    """Ancestry described by an explicit child -> parent graph.

    Classes that were never registered have `object` as their only ancestor.

    Example:
        >>> ancestry = RegisteredAncestry()
        >>> ancestry.register(Meters, Length)
        >>> ancestry.lineage(Meters)
        (Meters, Length, object)

    """

    parents: dict[type, type] = field(default_factory=dict)

    def register(self, child: type, parent: type) -> None:
        """Declare `parent` as the direct ancestor of `child`."""
        if child is object:
            msg = "object is the root of every lineage and cannot have a parent"
            raise ValueError(msg)
        if child in self.parents and self.parents[child] is not parent:
            msg = (
                f"{child.__name__} already has parent "
                f"{self.parents[child].__name__}"
            )
            raise ValueError(msg)
        if parent is child or child in self.lineage(parent):
            msg = f"Registering {parent.__name__} as parent of {child.__name__} creates a cycle"
            raise ValueError(msg)

        self.parents[child] = parent

    def lineage(self, con: type) -> tuple[type, ...]:
        chain = [con]
        while (parent := self.parents.get(chain[-1])) is not None:
            chain.append(parent)
        if chain[-1] is not object:
            chain.append(object)
        return tuple(chain)


DEFAULT_ANCESTRY: TypeAncestry = MroAncestry()
