"""Exceptions raised while turning a syntax tree into a diagram."""
from __future__ import annotations


class RegexDiagramError(ValueError):
    """Structured render error with a stable code for callers to map."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return self.message


def unsupported(node: object, where: str) -> RegexDiagramError:
    return RegexDiagramError(
        "E_AST_UNSUPPORTED",
        f"unsupported {where} node {type(node).__name__!s}: {node!r}",
    )
