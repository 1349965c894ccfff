"""Regex syntax tree to SVG/PNG diagram pipeline."""
from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from .arrows import Pair, arrow_pairs
from .builder import build
from .hooks import HookFactory
from .layout import canvas_size, layout
from .markup import Shapes, emit_shapes, hover_bindings, pretty_xml, to_svg
from .printer import pattern_text
from .raster import draw_png
from .syntax import Regex
from .visual import Element, leaves

logger = logging.getLogger(__name__)


@dataclass
class Rendering:
    """Everything produced by one render; nothing is kept between renders."""

    tree: Element
    pairs: List[Pair]
    shapes: Shapes
    svg: ET.Element
    width: int
    height: int
    bindings: Dict[int, Tuple[Any, Any]]


def render_diagram(regex: Regex, hooks: Optional[HookFactory] = None) -> Rendering:
    tree = layout(build(regex, hooks))
    pairs = arrow_pairs(tree)
    shapes = emit_shapes(tree, pairs)
    width, height = canvas_size(tree)
    svg = to_svg(shapes, width, height, title=pattern_text(regex))
    logger.debug(
        "Rendered %d leaves, %d arrows on a %dx%d canvas",
        sum(1 for _ in leaves(tree)),
        len(pairs),
        width,
        height,
    )
    return Rendering(
        tree=tree,
        pairs=pairs,
        shapes=shapes,
        svg=svg,
        width=width,
        height=height,
        bindings=hover_bindings(shapes),
    )


def regex_diagram(regex: Regex, hooks: Optional[HookFactory] = None) -> str:
    """Return the diagram for ``regex`` as SVG text."""
    return pretty_xml(render_diagram(regex, hooks).svg)


def render_png(regex: Regex, scale: float = 1.0) -> bytes:
    rendering = render_diagram(regex)
    logger.debug("Rasterizing at scale %.2f", scale)
    return draw_png(rendering.shapes, rendering.width, rendering.height, scale=scale)


__all__ = ["Rendering", "regex_diagram", "render_diagram", "render_png"]
