from __future__ import annotations

import logging
import unittest
import xml.etree.ElementTree as ET

from helpers import alt, char, group, literal, rx

import regexdiagram
from regexdiagram import RegexDiagramError, highlight_hooks, regex_diagram, render_diagram, render_png
from regexdiagram.markup import SVG_NS
from regexdiagram.raster import font_for
from regexdiagram.syntax import Regex, Star


class RenderDiagramTests(unittest.TestCase):
    def test_public_api(self) -> None:
        for name in regexdiagram.__all__:
            self.assertTrue(hasattr(regexdiagram, name), name)

    def test_rendering_fields(self) -> None:
        regex = rx(alt(group(alt(char("a")), alt(char("b")), quantifier=Star()), char("c")))
        rendering = render_diagram(regex, hooks=highlight_hooks())
        self.assertEqual((rendering.width, rendering.height), (rendering.tree.width + 2, rendering.tree.height + 2))
        self.assertEqual(len(rendering.pairs), 2)
        self.assertEqual(len(rendering.shapes.arrows), 2)
        self.assertEqual(len(rendering.bindings), 4)
        title = rendering.svg.find(f"{{{SVG_NS}}}title")
        self.assertEqual(title.text, "(a|b)*c")

    def test_regex_diagram_returns_svg_text(self) -> None:
        text = regex_diagram(literal("ab"))
        root = ET.fromstring(text)
        self.assertEqual(root.tag, f"{{{SVG_NS}}}svg")
        self.assertEqual((root.get("width"), root.get("height")), ("182", "82"))

    def test_renders_are_independent(self) -> None:
        regex = literal("abc")
        first = regex_diagram(regex)
        regex_diagram(rx(alt(char("x")), alt()))
        self.assertEqual(regex_diagram(regex), first)

    def test_logs_summary(self) -> None:
        with self.assertLogs("regexdiagram.diagram", level=logging.DEBUG) as logs:
            render_diagram(literal("ab"))
        self.assertIn("2 leaves, 1 arrows", logs.output[0])

    def test_errors_propagate(self) -> None:
        with self.assertRaises(RegexDiagramError) as ctx:
            regex_diagram(Regex(()))
        self.assertEqual(ctx.exception.code, "E_AST_EMPTY")


class RenderPngTests(unittest.TestCase):
    @staticmethod
    def _png_size(blob: bytes) -> tuple:
        # PNG IHDR width/height are big-endian u32 at fixed offsets.
        if len(blob) < 24 or blob[:8] != b"\x89PNG\r\n\x1a\n":
            raise AssertionError("not a PNG payload")
        return int.from_bytes(blob[16:20], "big"), int.from_bytes(blob[20:24], "big")

    def test_png_matches_canvas(self) -> None:
        self.assertEqual(self._png_size(render_png(literal("ab"))), (182, 82))

    def test_png_scale(self) -> None:
        self.assertEqual(self._png_size(render_png(literal("ab"), scale=2)), (364, 164))

    def test_png_with_groups_and_annotations(self) -> None:
        regex = rx(alt(group(alt(char("a")), alt(char("b")), quantifier=Star()), char("c")), alt())
        blob = render_png(regex)
        self.assertEqual(blob[:8], b"\x89PNG\r\n\x1a\n")

    def test_fonts_are_cached_per_render(self) -> None:
        fonts = {}
        font = font_for(fonts, 15)
        self.assertIs(font_for(fonts, 15), font)
        self.assertEqual(list(fonts), [15])
        other = {}
        font_for(other, 10)
        self.assertEqual(list(other), [10])
        self.assertEqual(list(fonts), [15])

    def test_invalid_scale(self) -> None:
        with self.assertRaises(RegexDiagramError) as ctx:
            render_png(literal("a"), scale=0)
        self.assertEqual(ctx.exception.code, "E_RENDER_ARGS")


if __name__ == "__main__":
    unittest.main()
