"""PNG output drawn with Pillow from the same shapes as the SVG output."""
from __future__ import annotations

import io
from typing import Dict, List, Tuple

from PIL import Image, ImageDraw, ImageFont

from .errors import RegexDiagramError
from .markup import Arrow, Label, Shapes
from .style import ARROW_STROKE, ARROW_STROKE_WIDTH, BACKGROUND, TEXT_FILL

CURVE_STEPS = 24
FONT_CANDIDATES = [
    "DejaVuSans.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "Arial.ttf",
    "/System/Library/Fonts/Supplemental/Arial.ttf",
    "C:/Windows/Fonts/arial.ttf",
]


def draw_png(shapes: Shapes, width: int, height: int, scale: float = 1.0) -> bytes:
    if scale <= 0:
        raise RegexDiagramError("E_RENDER_ARGS", f"scale must be > 0, got {scale!r}")
    size = (max(1, round(width * scale)), max(1, round(height * scale)))
    image = Image.new("RGB", size, BACKGROUND)
    draw = ImageDraw.Draw(image)
    fonts: Dict[int, "ImageFont.ImageFont"] = {}

    for box in shapes.boxes:
        draw.rounded_rectangle(
            [
                box.x * scale,
                box.y * scale,
                (box.x + box.width) * scale,
                (box.y + box.height) * scale,
            ],
            radius=box.radius * scale,
            outline=box.stroke,
            width=max(1, round(box.stroke_width * scale)),
        )
    for label in shapes.labels:
        _draw_label(draw, label, scale, fonts)
    for arrow in shapes.arrows:
        _draw_arrow(draw, arrow, scale)

    buffer = io.BytesIO()
    image.save(buffer, "PNG")
    return buffer.getvalue()


def _draw_label(
    draw: "ImageDraw.ImageDraw",
    label: Label,
    scale: float,
    fonts: Dict[int, "ImageFont.ImageFont"],
) -> None:
    font = font_for(fonts, max(1, round(label.font_size * scale)))
    text = label.text
    if not isinstance(font, ImageFont.FreeTypeFont):
        # Bitmap fallback font only covers latin-1.
        text = text.encode("latin-1", "replace").decode("latin-1")
    left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
    text_width = right - left
    x = label.x * scale
    if label.anchor == "middle":
        x -= text_width / 2
    elif label.anchor == "end":
        x -= text_width
    y = label.y * scale - (top + bottom) / 2
    draw.text((x - left, y), text, font=font, fill=TEXT_FILL)


def _draw_arrow(draw: "ImageDraw.ImageDraw", arrow: Arrow, scale: float) -> None:
    points = [(x * scale, y * scale) for x, y in _sample_curve(arrow)]
    draw.line(points, fill=ARROW_STROKE, width=max(1, round(ARROW_STROKE_WIDTH * scale)))
    draw.polygon([(x * scale, y * scale) for x, y in arrow.head], fill=ARROW_STROKE)


def _sample_curve(arrow: Arrow) -> List[Tuple[float, float]]:
    (x0, y0), (x1, y1), (x2, y2), (x3, y3) = arrow.start, arrow.control1, arrow.control2, arrow.end
    points = []
    for step in range(CURVE_STEPS + 1):
        t = step / CURVE_STEPS
        u = 1 - t
        points.append(
            (
                u**3 * x0 + 3 * u**2 * t * x1 + 3 * u * t**2 * x2 + t**3 * x3,
                u**3 * y0 + 3 * u**2 * t * y1 + 3 * u * t**2 * y2 + t**3 * y3,
            )
        )
    return points


def font_for(fonts: Dict[int, "ImageFont.ImageFont"], size: int) -> "ImageFont.ImageFont":
    """Load a font of ``size`` pixels, caching it in the per-render ``fonts``."""
    if size in fonts:
        return fonts[size]
    font = None
    for candidate in FONT_CANDIDATES:
        try:
            font = ImageFont.truetype(candidate, size)
            break
        except OSError:
            continue
    if font is None:
        font = ImageFont.load_default(size=size)
    fonts[size] = font
    return font


__all__ = ["draw_png"]
