"""Order relations on integers and partially ordered sets."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from itertools import product
from typing import Iterable

from weaves.fake import random_ints

__all__ = [
    "Relation",
    "SortStrategy",
    "Leq",
    "Lt",
    "Poset",
    "random_poset",
]

_RANDOM_POSET_SIZE = 100


class Relation(ABC):
    """A binary relation on integers with checks for partial order laws."""

    @abstractmethod
    def compare(self, a: int, b: int) -> bool:
        """Return whether ``a`` is related to ``b``."""

    @abstractmethod
    def reflexivity(self, a: int) -> bool:
        """Return whether ``a`` is related to itself."""

    @abstractmethod
    def antisymmetry(self, a: int, b: int) -> bool:
        """Return whether antisymmetry holds for ``a`` and ``b``."""

    @abstractmethod
    def transitivity(self, a: int, b: int, c: int) -> bool:
        """Return whether transitivity holds for ``a``, ``b`` and ``c``."""


class SortStrategy(ABC):
    """A way of sorting a poset by its order relation."""

    @abstractmethod
    def strategy(self) -> str:
        """Return the name of the strategy."""

    @abstractmethod
    def run(self, poset: Poset) -> Poset:
        """Return a new poset with the members sorted."""


class Leq(Relation):
    """The "less than or equal" relation."""

    def compare(self, a: int, b: int) -> bool:
        return a <= b

    def reflexivity(self, a: int) -> bool:
        return self.compare(a, a)

    def antisymmetry(self, a: int, b: int) -> bool:
        return not (self.compare(a, b) and self.compare(b, a) and a != b)

    def transitivity(self, a: int, b: int, c: int) -> bool:
        return not (self.compare(a, b) and self.compare(b, c) and not a <= c)


class Lt(Relation):
    """The strict "less than" relation."""

    def compare(self, a: int, b: int) -> bool:
        return a < b

    def reflexivity(self, a: int) -> bool:
        return self.compare(a, a)

    def antisymmetry(self, a: int, b: int) -> bool:
        return not (self.compare(a, b) and self.compare(b, a) and a != b)

    def transitivity(self, a: int, b: int, c: int) -> bool:
        return not (
            self.compare(a, b) and self.compare(b, c) and not self.compare(a, c)
        )


@dataclass(frozen=True)
class Poset:
    """A collection of integers together with an order relation."""

    members: tuple[int, ...]
    order: Relation

    def __init__(self, members: Iterable[int], order: Relation) -> None:
        object.__setattr__(self, "members", tuple(members))
        object.__setattr__(self, "order", order)

    def is_partially_ordered(self) -> bool:
        """Return whether the relation is a partial order on the members."""
        order = self.order
        return all(
            order.reflexivity(a)
            and order.antisymmetry(a, b)
            and order.transitivity(a, b, c)
            for a, b, c in product(self.members, repeat=3)
        )

    def sort(self, strategy: SortStrategy) -> Poset:
        """Sort this poset using ``strategy``."""
        return strategy.run(self)


def random_poset(order: Relation) -> Poset:
    """Return a poset of random integers under ``order``."""
    return Poset(random_ints(_RANDOM_POSET_SIZE), order)