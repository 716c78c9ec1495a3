"""Merge sort over posets."""

from __future__ import annotations

from typing import Sequence

from weaves.order import Poset, Relation, SortStrategy

__all__ = ["Mergesort", "merge", "merge_sort"]


def merge(xs: Sequence[int], ys: Sequence[int], order: Relation) -> list[int]:
    """Merge two sorted sequences into one sorted list."""
    out: list[int] = []
    i = j = 0
    while i < len(xs) and j < len(ys):
        if order.compare(xs[i], ys[j]):
            out.append(xs[i])
            i += 1
        else:
            out.append(ys[j])
            j += 1
    out.extend(xs[i:])
    out.extend(ys[j:])
    return out


def merge_sort(xs: Sequence[int], order: Relation) -> list[int]:
    """Return the items of ``xs`` sorted by ``order``."""
    if len(xs) < 2:
        return list(xs)
    middle = len(xs) // 2
    return merge(merge_sort(xs[:middle], order), merge_sort(xs[middle:], order), order)


class Mergesort(SortStrategy):
    """Sorts a poset by merge sort."""

    def strategy(self) -> str:
        return "Mergesort"

    def run(self, poset: Poset) -> Poset:
        return Poset(merge_sort(poset.members, poset.order), poset.order)