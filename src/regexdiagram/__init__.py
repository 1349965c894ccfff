"""Public API for regexdiagram."""
from .diagram import Rendering, regex_diagram, render_diagram, render_png
from .errors import RegexDiagramError
from .hooks import ScriptHook, highlight_hooks
from .printer import pattern_text

__all__ = [
    "RegexDiagramError",
    "Rendering",
    "ScriptHook",
    "highlight_hooks",
    "pattern_text",
    "regex_diagram",
    "render_diagram",
    "render_png",
]
