"""Work out which leaves are joined by connector arrows.

A walk over the visual tree carries a *frontier*: the leaves that may have
matched immediately before the current position. A leaf links every
frontier leaf to itself and becomes the new frontier. A choice runs each
alternative from the same frontier and unions the results. A sequence
feeds each child's frontier into the next.
"""
from __future__ import annotations

from typing import List, Sequence as Seq, Tuple

from .errors import unsupported
from .visual import Choice, Element, Leaf, Sequence

Pair = Tuple[Leaf, Leaf]


def thread(
    element: Element, frontier: Seq[Leaf], pairs: Seq[Pair] = ()
) -> Tuple[List[Leaf], List[Pair]]:
    """Return the outgoing frontier and ``pairs`` plus the arrows into ``element``.

    Neither ``frontier`` nor ``pairs`` is modified.
    """
    accumulated = list(pairs)
    outgoing = _thread(element, frontier, accumulated)
    return outgoing, accumulated


def _thread(element: Element, frontier: Seq[Leaf], pairs: List[Pair]) -> List[Leaf]:
    # ``pairs`` is the walk's own accumulator.
    if isinstance(element, Leaf):
        pairs.extend((previous, element) for previous in frontier)
        return [element]
    if isinstance(element, Choice):
        outgoing: List[Leaf] = []
        for child in element.children:
            outgoing.extend(_thread(child, frontier, pairs))
        return outgoing
    if isinstance(element, Sequence):
        current = list(frontier)
        for child in element.children:
            current = _thread(child, current, pairs)
        return current
    raise unsupported(element, "visual")


def arrow_pairs(element: Element) -> List[Pair]:
    """Return ``(earlier, later)`` leaf pairs in walk order."""
    _, pairs = thread(element, [])
    return pairs


def frontier_of(element: Element) -> List[Leaf]:
    """Leaves that a following atom would be linked from."""
    frontier, _ = thread(element, [])
    return frontier


__all__ = ["Pair", "arrow_pairs", "frontier_of", "thread"]
