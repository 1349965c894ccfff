"""Map a regex syntax tree onto an unsized visual tree."""
from __future__ import annotations

from typing import List, Optional, Tuple

from .errors import RegexDiagramError, unsupported
from .hooks import HookFactory
from .printer import assertion_text, char_set_text
from .style import (
    COLOR_DEFAULT,
    COLOR_META,
    EMPTY_GLYPH,
    GROUP_BORDER,
    INFINITY,
    SPACE_GLYPH,
)
from .syntax import (
    Alternative,
    AnyChar,
    Assertion,
    AtLeast,
    Atom,
    BackReference,
    Between,
    Char,
    CharSet,
    ClassEscape,
    EscapedChar,
    Exactly,
    Group,
    Lookahead,
    NonCapturingGroup,
    Plus,
    Quantified,
    Quantifier,
    QuestionMark,
    Regex,
    Star,
    Term,
)
from .visual import Choice, Element, Leaf, Sequence


def build(regex: Regex, hooks: Optional[HookFactory] = None) -> Choice:
    """Return the visual tree for ``regex``; all geometry is left at zero."""
    return _build_regex(regex, hooks)


def quantifier_annotation(quantifier: Optional[Quantifier], greedy: bool = True) -> str:
    """Render a quantifier as ``low-high`` (greedy) or ``high-low`` (lazy)."""
    if quantifier is None:
        return ""
    if isinstance(quantifier, Exactly):
        return str(quantifier.count)
    if isinstance(quantifier, Star):
        low, high = "0", INFINITY
    elif isinstance(quantifier, Plus):
        low, high = "1", INFINITY
    elif isinstance(quantifier, QuestionMark):
        low, high = "0", "1"
    elif isinstance(quantifier, AtLeast):
        low, high = str(quantifier.count), INFINITY
    elif isinstance(quantifier, Between):
        low, high = str(quantifier.low), str(quantifier.high)
    else:
        raise unsupported(quantifier, "quantifier")
    if greedy:
        return f"{low}-{high}"
    return f"{high}-{low}"


def _build_regex(regex: Regex, hooks: Optional[HookFactory]) -> Choice:
    if not regex.alternatives:
        raise RegexDiagramError("E_AST_EMPTY", "regex has no alternatives")
    return Choice(children=tuple(_build_alternative(alt, hooks) for alt in regex.alternatives))


def _build_alternative(alternative: Alternative, hooks: Optional[HookFactory]) -> Element:
    if not alternative.terms:
        return Leaf(label=EMPTY_GLYPH)
    children: List[Element] = [_build_term(term, hooks) for term in alternative.terms]
    return Sequence(children=tuple(children))


def _build_term(term: Term, hooks: Optional[HookFactory]) -> Element:
    if isinstance(term, Assertion):
        return _leaf(assertion_text(term), "", COLOR_META, term.id, hooks)
    if isinstance(term, Quantified):
        annotation = quantifier_annotation(term.quantifier, term.greedy)
        return _build_atom(term.atom, annotation, hooks)
    raise unsupported(term, "term")


def _build_atom(atom: Atom, annotation: str, hooks: Optional[HookFactory]) -> Element:
    if isinstance(atom, Char):
        label = SPACE_GLYPH if atom.value == " " else atom.value
        return _leaf(label, annotation, COLOR_DEFAULT, atom.id, hooks)
    if isinstance(atom, AnyChar):
        return _leaf(".", annotation, COLOR_META, atom.id, hooks)
    if isinstance(atom, ClassEscape):
        return _leaf("\\" + atom.letter, annotation, COLOR_META, atom.id, hooks)
    if isinstance(atom, EscapedChar):
        return _leaf("\\" + atom.value, annotation, COLOR_META, atom.id, hooks)
    if isinstance(atom, BackReference):
        return _leaf(f"\\{atom.index}", annotation, COLOR_DEFAULT, atom.id, hooks)
    if isinstance(atom, CharSet):
        return _leaf(char_set_text(atom), annotation, COLOR_DEFAULT, atom.id, hooks)
    if isinstance(atom, Group):
        return _group(atom.regex, str(atom.index), annotation, atom.id, hooks)
    if isinstance(atom, NonCapturingGroup):
        return _group(atom.regex, None, annotation, atom.id, hooks)
    if isinstance(atom, Lookahead):
        marker = "?!" if atom.negated else "?="
        return _group(atom.regex, marker, annotation, atom.id, hooks)
    raise unsupported(atom, "atom")


def _leaf(
    label: str,
    annotation: str,
    color: str,
    node_id: int,
    hooks: Optional[HookFactory],
) -> Leaf:
    on_enter, on_leave = _hooks_for(node_id, hooks)
    return Leaf(
        label=label,
        annotation=annotation,
        border_color=color,
        node_id=node_id,
        on_enter=on_enter,
        on_leave=on_leave,
    )


def _group(
    regex: Regex,
    group_label: Optional[str],
    annotation: str,
    node_id: int,
    hooks: Optional[HookFactory],
) -> Sequence:
    on_enter, on_leave = _hooks_for(node_id, hooks)
    return Sequence(
        children=(_build_regex(regex, hooks),),
        group_label=group_label,
        annotation=annotation,
        border=GROUP_BORDER,
        node_id=node_id,
        on_enter=on_enter,
        on_leave=on_leave,
    )


def _hooks_for(node_id: int, hooks: Optional[HookFactory]) -> Tuple[object, object]:
    if hooks is None:
        return None, None
    return hooks(node_id)


__all__ = ["build", "quantifier_annotation"]
