"""Turn a positioned visual tree and its arrow pairs into SVG."""
from __future__ import annotations

import math
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence as Seq, Tuple

from .arrows import Pair
from .errors import unsupported
from .hooks import script_of
from .style import (
    ANNOTATION_FONT_SIZE,
    ANNOTATION_GAP,
    ARROW_HEAD_LENGTH,
    ARROW_HEAD_SPREAD,
    ARROW_STROKE,
    ARROW_STROKE_WIDTH,
    BOX_BASE_WIDTH,
    BOX_CHAR_WIDTH,
    BOX_HEIGHT,
    BOX_MIN_WIDTH,
    DEFAULT_FONT_FAMILY,
    GROUP_LABEL_FONT_SIZE,
    GROUP_LABEL_INSET_X,
    GROUP_LABEL_INSET_Y,
    GROUP_RADIUS,
    GROUP_STROKE,
    GROUP_STROKE_WIDTH,
    LABEL_FONT_SIZE,
    LEAF_RADIUS,
    PALETTE,
    TEXT_FILL,
)
from .visual import Choice, Element, Leaf, Sequence

SVG_NS = "http://www.w3.org/2000/svg"
ET.register_namespace("", SVG_NS)

Point = Tuple[float, float]


@dataclass(frozen=True)
class Box:
    x: float
    y: float
    width: float
    height: float
    radius: int
    stroke: str
    stroke_width: int = 1
    node_id: Optional[int] = None
    on_enter: Any = None
    on_leave: Any = None


@dataclass(frozen=True)
class Label:
    x: float
    y: float
    text: str
    font_size: int
    anchor: str = "middle"


@dataclass(frozen=True)
class Arrow:
    """Cubic connector from ``start`` to ``end`` plus a head at ``end``."""

    start: Point
    control1: Point
    control2: Point
    end: Point

    @property
    def head(self) -> Tuple[Point, Point, Point]:
        tip_x, tip_y = self.end
        return (
            (tip_x - ARROW_HEAD_LENGTH, tip_y - ARROW_HEAD_SPREAD),
            (tip_x, tip_y),
            (tip_x - ARROW_HEAD_LENGTH, tip_y + ARROW_HEAD_SPREAD),
        )


@dataclass
class Shapes:
    boxes: List[Box] = field(default_factory=list)
    labels: List[Label] = field(default_factory=list)
    arrows: List[Arrow] = field(default_factory=list)


def box_width(label: str) -> int:
    return max(BOX_BASE_WIDTH + BOX_CHAR_WIDTH * len(label), BOX_MIN_WIDTH)


def leaf_center(leaf: Leaf) -> Point:
    return leaf.x + leaf.width / 2, leaf.y + leaf.height / 2


def leaf_left(leaf: Leaf) -> Point:
    cx, cy = leaf_center(leaf)
    return cx - box_width(leaf.label) / 2, cy


def leaf_right(leaf: Leaf) -> Point:
    cx, cy = leaf_center(leaf)
    return cx + box_width(leaf.label) / 2, cy


def connector(source: Leaf, target: Leaf) -> Arrow:
    start = leaf_right(source)
    end = leaf_left(target)
    dx = end[0] - start[0]
    return Arrow(
        start=start,
        control1=(start[0] + dx * 2 / 3, start[1]),
        control2=(end[0] - dx * 2 / 3, end[1]),
        end=end,
    )


def emit_shapes(root: Element, pairs: Seq[Pair]) -> Shapes:
    """Collect drawing primitives: boxes and labels in tree order, then arrows."""
    shapes = Shapes()
    _collect(root, shapes)
    shapes.arrows.extend(connector(source, target) for source, target in pairs)
    return shapes


def _collect(element: Element, shapes: Shapes) -> None:
    if isinstance(element, Leaf):
        cx, cy = leaf_center(element)
        width = box_width(element.label)
        shapes.boxes.append(
            Box(
                x=cx - width / 2,
                y=cy - BOX_HEIGHT / 2,
                width=width,
                height=BOX_HEIGHT,
                radius=LEAF_RADIUS,
                stroke=PALETTE.get(element.border_color, PALETTE["default"]),
                node_id=element.node_id,
                on_enter=element.on_enter,
                on_leave=element.on_leave,
            )
        )
        shapes.labels.append(Label(cx, cy, element.label, LABEL_FONT_SIZE))
        if element.annotation:
            shapes.labels.append(
                Label(
                    cx,
                    cy - BOX_HEIGHT / 2 - ANNOTATION_GAP,
                    element.annotation,
                    ANNOTATION_FONT_SIZE,
                )
            )
        return
    if isinstance(element, Sequence):
        if element.border > 0:
            shapes.boxes.append(
                Box(
                    x=element.x,
                    y=element.y,
                    width=element.width,
                    height=element.height,
                    radius=GROUP_RADIUS,
                    stroke=GROUP_STROKE,
                    stroke_width=GROUP_STROKE_WIDTH,
                    node_id=element.node_id,
                    on_enter=element.on_enter,
                    on_leave=element.on_leave,
                )
            )
            label_y = element.y + GROUP_LABEL_INSET_Y
            if element.group_label:
                shapes.labels.append(
                    Label(
                        element.x + GROUP_LABEL_INSET_X,
                        label_y,
                        element.group_label,
                        GROUP_LABEL_FONT_SIZE,
                        anchor="start",
                    )
                )
            if element.annotation:
                shapes.labels.append(
                    Label(
                        element.x + element.width - GROUP_LABEL_INSET_X,
                        label_y,
                        element.annotation,
                        ANNOTATION_FONT_SIZE,
                        anchor="end",
                    )
                )
        for child in element.children:
            _collect(child, shapes)
        return
    if isinstance(element, Choice):
        for child in element.children:
            _collect(child, shapes)
        return
    raise unsupported(element, "visual")


def to_svg(shapes: Shapes, width: int, height: int, title: Optional[str] = None) -> ET.Element:
    svg_root = ET.Element(
        _q("svg"),
        {
            "width": _fmt(width),
            "height": _fmt(height),
            "viewBox": f"0 0 {_fmt(width)} {_fmt(height)}",
        },
    )
    if title:
        ET.SubElement(svg_root, _q("title")).text = title

    for box in shapes.boxes:
        rect = ET.Element(
            _q("rect"),
            {
                "x": _fmt(box.x),
                "y": _fmt(box.y),
                "width": _fmt(box.width),
                "height": _fmt(box.height),
                "rx": str(box.radius),
                "ry": str(box.radius),
                "fill": "none",
                "stroke": box.stroke,
                "stroke-width": str(box.stroke_width),
                "pointer-events": "all",
            },
        )
        if box.node_id is None:
            svg_root.append(rect)
            continue
        group = ET.SubElement(svg_root, _q("g"), _hover_attrs(box))
        group.append(rect)

    for label in shapes.labels:
        text = ET.SubElement(
            svg_root,
            _q("text"),
            {
                "x": _fmt(label.x),
                "y": _fmt(label.y),
                "font-family": DEFAULT_FONT_FAMILY,
                "font-size": f"{label.font_size}px",
                "text-anchor": label.anchor,
                "dominant-baseline": "central",
                "fill": TEXT_FILL,
                "pointer-events": "none",
            },
        )
        text.text = label.text

    for arrow in shapes.arrows:
        first, tip, last = arrow.head
        ET.SubElement(
            svg_root,
            _q("path"),
            {
                "d": f"M {_pt(first)} L {_pt(tip)} L {_pt(last)} Z",
                "fill": ARROW_STROKE,
                "stroke": ARROW_STROKE,
                "stroke-width": "1",
            },
        )
        ET.SubElement(
            svg_root,
            _q("path"),
            {
                "d": (
                    f"M {_pt(arrow.start)} C {_pt(arrow.control1)} "
                    f"{_pt(arrow.control2)} {_pt(arrow.end)}"
                ),
                "fill": "none",
                "stroke": ARROW_STROKE,
                "stroke-width": str(ARROW_STROKE_WIDTH),
            },
        )
    return svg_root


def hover_bindings(shapes: Shapes) -> Dict[int, Tuple[Any, Any]]:
    """Map node ids to their ``(on_enter, on_leave)`` hooks."""
    return {
        box.node_id: (box.on_enter, box.on_leave)
        for box in shapes.boxes
        if box.node_id is not None
    }


def pretty_xml(element: ET.Element) -> str:
    ET.indent(element, space="  ")
    return ET.tostring(element, encoding="unicode")


def _hover_attrs(box: Box) -> Dict[str, str]:
    attrs = {"class": "regex-node", "data-node-id": str(box.node_id)}
    enter = script_of(box.on_enter)
    if enter is not None:
        attrs["onmouseenter"] = enter
    leave = script_of(box.on_leave)
    if leave is not None:
        attrs["onmouseleave"] = leave
    return attrs


def _q(tag: str) -> str:
    return f"{{{SVG_NS}}}{tag}"


def _pt(point: Point) -> str:
    return f"{_fmt(point[0])} {_fmt(point[1])}"


def _fmt(value: float) -> str:
    if math.isclose(value, round(value)):
        return str(int(round(value)))
    return f"{value:.3f}".rstrip("0").rstrip(".")


__all__ = [
    "Arrow",
    "Box",
    "Label",
    "SVG_NS",
    "Shapes",
    "box_width",
    "connector",
    "emit_shapes",
    "hover_bindings",
    "leaf_center",
    "leaf_left",
    "leaf_right",
    "pretty_xml",
    "to_svg",
]
