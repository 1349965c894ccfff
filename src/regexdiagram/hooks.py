"""Hover hooks attached to interactive diagram elements.

The diagram code only stores hooks and hands them to the SVG writer or the
caller; it never calls them. A hook factory maps a syntax node id to an
``(on_enter, on_leave)`` pair of opaque values.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple

HoverHooks = Tuple[Any, Any]
HookFactory = Callable[[int], HoverHooks]


@dataclass(frozen=True)
class ScriptHook:
    """Inline script emitted as an ``onmouseenter``/``onmouseleave`` attribute."""

    script: str


def highlight_hooks(id_prefix: str = "regex_", css_class: str = "highlight") -> HookFactory:
    """Toggle ``css_class`` on the page element ``{id_prefix}{node_id}``."""

    def factory(node_id: int) -> HoverHooks:
        target = f"document.getElementById('{id_prefix}{node_id}')"
        return (
            ScriptHook(f"{target}.classList.add('{css_class}')"),
            ScriptHook(f"{target}.classList.remove('{css_class}')"),
        )

    return factory


def script_of(hook: Any) -> Optional[str]:
    if isinstance(hook, ScriptHook):
        return hook.script
    return None


__all__ = ["HookFactory", "HoverHooks", "ScriptHook", "highlight_hooks", "script_of"]
