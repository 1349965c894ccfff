"""Three-pass box layout for visual trees.

1. ``infer_dimensions`` sizes every element bottom-up.
2. ``resize`` stretches (or squeezes) elements top-down to a target size,
   sharing any surplus evenly between children.
3. ``assign_positions`` converts the sized tree to absolute coordinates.

Every pass returns a new tree. A bordered sequence only reserves half of its
border when sizing its height but hands its children the target minus the
full border, in both axes. Surplus shares truncate toward zero, so a
squeezed sequence can overhang its target by up to one pixel per extra
child.
"""
from __future__ import annotations

from dataclasses import replace
from typing import List, Tuple

from .errors import unsupported
from .style import LEAF_BASE_WIDTH, LEAF_CHAR_WIDTH, LEAF_HEIGHT, LEAF_MIN_WIDTH, ROOT_MARGIN
from .visual import Choice, Element, Leaf, Sequence


def layout(root: Element) -> Element:
    """Run all three passes, using the root's own size as the target."""
    sized = infer_dimensions(root)
    resized = resize(sized, sized.width, sized.height)
    return assign_positions(resized, ROOT_MARGIN, ROOT_MARGIN)


def leaf_width(label: str) -> int:
    return max(LEAF_BASE_WIDTH + LEAF_CHAR_WIDTH * len(label), LEAF_MIN_WIDTH)


def infer_dimensions(element: Element) -> Element:
    if isinstance(element, Leaf):
        return replace(element, width=leaf_width(element.label), height=LEAF_HEIGHT)
    if isinstance(element, Choice):
        children = tuple(infer_dimensions(child) for child in element.children)
        return replace(
            element,
            children=children,
            width=max((child.width for child in children), default=0),
            height=sum(child.height for child in children),
        )
    if isinstance(element, Sequence):
        children = tuple(infer_dimensions(child) for child in element.children)
        return replace(
            element,
            children=children,
            width=sum(child.width for child in children),
            height=max((child.height for child in children), default=0) + element.border // 2,
        )
    raise unsupported(element, "visual")


def resize(element: Element, width: int, height: int) -> Element:
    width = max(width, 0)
    height = max(height, 0)
    if isinstance(element, Leaf):
        return replace(element, width=width, height=height)
    if isinstance(element, Choice):
        share = _share(height - element.height, len(element.children))
        children = tuple(
            resize(child, width, child.height + share) for child in element.children
        )
        return replace(element, children=children, width=width, height=height)
    if isinstance(element, Sequence):
        share = _share(width - element.width - element.border, len(element.children))
        child_height = height - element.border
        children = tuple(
            resize(child, child.width + share, child_height) for child in element.children
        )
        return replace(element, children=children, width=width, height=height)
    raise unsupported(element, "visual")


def assign_positions(element: Element, x: int, y: int) -> Element:
    if isinstance(element, Leaf):
        return replace(element, x=x, y=y)
    if isinstance(element, Choice):
        placed: List[Element] = []
        cursor_y = y
        for child in element.children:
            positioned = assign_positions(child, x, cursor_y)
            placed.append(positioned)
            cursor_y += positioned.height
        return replace(element, children=tuple(placed), x=x, y=y)
    if isinstance(element, Sequence):
        half = element.border // 2
        placed = []
        cursor_x = x + half
        for child in element.children:
            positioned = assign_positions(child, cursor_x, y + half)
            placed.append(positioned)
            cursor_x += positioned.width
        return replace(element, children=tuple(placed), x=x, y=y)
    raise unsupported(element, "visual")


def canvas_size(root: Element) -> Tuple[int, int]:
    return root.width + 2 * ROOT_MARGIN, root.height + 2 * ROOT_MARGIN


def _share(surplus: int, count: int) -> int:
    # Truncates toward zero. A negative share can leave the children up to
    # count - 1 px wider than the target.
    if count == 0:
        return 0
    share = abs(surplus) // count
    return share if surplus >= 0 else -share


__all__ = ["assign_positions", "canvas_size", "infer_dimensions", "layout", "leaf_width", "resize"]
