"""Visual tree: leaves, horizontal sequences and vertical choices.

The three element kinds share no base class. Every traversal handles all
three explicitly and rejects anything else.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional, Tuple, Union

from .errors import unsupported
from .style import COLOR_DEFAULT


@dataclass(frozen=True)
class Leaf:
    label: str
    annotation: str = ""
    width: int = 0
    height: int = 0
    x: int = 0
    y: int = 0
    border_color: str = COLOR_DEFAULT
    node_id: Optional[int] = None
    on_enter: Any = None
    on_leave: Any = None


@dataclass(frozen=True)
class Sequence:
    children: Tuple["Element", ...]
    group_label: Optional[str] = None
    annotation: str = ""
    border: int = 0
    width: int = 0
    height: int = 0
    x: int = 0
    y: int = 0
    node_id: Optional[int] = None
    on_enter: Any = None
    on_leave: Any = None


@dataclass(frozen=True)
class Choice:
    children: Tuple["Element", ...]
    width: int = 0
    height: int = 0
    x: int = 0
    y: int = 0


Element = Union[Leaf, Sequence, Choice]


def iter_elements(element: Element) -> Iterator[Element]:
    """Yield ``element`` and its descendants in pre-order."""
    yield element
    if isinstance(element, Leaf):
        return
    if isinstance(element, (Sequence, Choice)):
        for child in element.children:
            yield from iter_elements(child)
        return
    raise unsupported(element, "visual")


def leaves(element: Element) -> Iterator[Leaf]:
    for item in iter_elements(element):
        if isinstance(item, Leaf):
            yield item


def bounds(element: Element) -> Tuple[int, int, int, int]:
    return (
        element.x,
        element.y,
        element.x + element.width,
        element.y + element.height,
    )


__all__ = [
    "Choice",
    "Element",
    "Leaf",
    "Sequence",
    "bounds",
    "iter_elements",
    "leaves",
]
