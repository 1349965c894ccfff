"""Fixed visual constants shared by layout, SVG and PNG output."""
from __future__ import annotations

# Layout box of a leaf: max(LEAF_BASE_WIDTH + LEAF_CHAR_WIDTH * len(label), LEAF_MIN_WIDTH)
LEAF_BASE_WIDTH = 70
LEAF_CHAR_WIDTH = 7
LEAF_MIN_WIDTH = 90
LEAF_HEIGHT = 80

# Drawn box inside a leaf's layout box
BOX_BASE_WIDTH = 10
BOX_CHAR_WIDTH = 7
BOX_MIN_WIDTH = 30
BOX_HEIGHT = 30
LEAF_RADIUS = 20

GROUP_BORDER = 20
GROUP_RADIUS = 5
GROUP_STROKE = "#3b7dd8"
GROUP_STROKE_WIDTH = 1

ROOT_MARGIN = 1

DEFAULT_FONT_FAMILY = "sans-serif"
LABEL_FONT_SIZE = 15
ANNOTATION_FONT_SIZE = 10
GROUP_LABEL_FONT_SIZE = 12

ANNOTATION_GAP = 6
GROUP_LABEL_INSET_X = 5
GROUP_LABEL_INSET_Y = 10

ARROW_STROKE = "#000000"
ARROW_STROKE_WIDTH = 2
ARROW_HEAD_LENGTH = 6
ARROW_HEAD_SPREAD = 4

# Leaf border color tags
COLOR_DEFAULT = "default"
COLOR_META = "meta"

PALETTE = {
    COLOR_DEFAULT: "#000000",
    COLOR_META: "#8c8c8c",
}

TEXT_FILL = "#000000"
BACKGROUND = "#ffffff"

SPACE_GLYPH = "␣"
EMPTY_GLYPH = "∅"
INFINITY = "∞"
