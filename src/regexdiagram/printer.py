"""Serialize a syntax tree back to regex source text."""
from __future__ import annotations

from typing import Optional

from .errors import unsupported
from .syntax import (
    Alternative,
    AnyChar,
    Assertion,
    AtLeast,
    Atom,
    BackReference,
    Between,
    Char,
    CharRange,
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
    SetItem,
    Star,
    Term,
)

_ASSERTION_TEXT = {
    "start": "^",
    "end": "$",
    "word_boundary": "\\b",
    "not_word_boundary": "\\B",
}


def pattern_text(regex: Regex) -> str:
    """Return the source text for ``regex``."""
    return "|".join(alternative_text(alt) for alt in regex.alternatives)


def alternative_text(alternative: Alternative) -> str:
    return "".join(term_text(term) for term in alternative.terms)


def term_text(term: Term) -> str:
    if isinstance(term, Assertion):
        return assertion_text(term)
    if isinstance(term, Quantified):
        text = atom_text(term.atom) + quantifier_text(term.quantifier)
        if term.quantifier is not None and not term.greedy:
            text += "?"
        return text
    raise unsupported(term, "term")


def assertion_text(assertion: Assertion) -> str:
    try:
        return _ASSERTION_TEXT[assertion.kind]
    except KeyError:
        raise unsupported(assertion, "assertion") from None


def atom_text(atom: Atom) -> str:
    if isinstance(atom, Char):
        return atom.value
    if isinstance(atom, AnyChar):
        return "."
    if isinstance(atom, ClassEscape):
        return "\\" + atom.letter
    if isinstance(atom, EscapedChar):
        return "\\" + atom.value
    if isinstance(atom, BackReference):
        return f"\\{atom.index}"
    if isinstance(atom, CharSet):
        return char_set_text(atom)
    if isinstance(atom, Group):
        return "(" + pattern_text(atom.regex) + ")"
    if isinstance(atom, NonCapturingGroup):
        return "(?:" + pattern_text(atom.regex) + ")"
    if isinstance(atom, Lookahead):
        marker = "?!" if atom.negated else "?="
        return "(" + marker + pattern_text(atom.regex) + ")"
    raise unsupported(atom, "atom")


def char_set_text(char_set: CharSet) -> str:
    body = "".join(set_item_text(item) for item in char_set.items)
    return ("[^" if char_set.negated else "[") + body + "]"


def set_item_text(item: SetItem) -> str:
    if isinstance(item, CharRange):
        return set_item_text(item.first) + "-" + set_item_text(item.last)
    if isinstance(item, (Char, EscapedChar, ClassEscape)):
        return atom_text(item)
    raise unsupported(item, "character set")


def quantifier_text(quantifier: Optional[Quantifier]) -> str:
    if quantifier is None:
        return ""
    if isinstance(quantifier, Star):
        return "*"
    if isinstance(quantifier, Plus):
        return "+"
    if isinstance(quantifier, QuestionMark):
        return "?"
    if isinstance(quantifier, Exactly):
        return f"{{{quantifier.count}}}"
    if isinstance(quantifier, AtLeast):
        return f"{{{quantifier.count},}}"
    if isinstance(quantifier, Between):
        return f"{{{quantifier.low},{quantifier.high}}}"
    raise unsupported(quantifier, "quantifier")


__all__ = ["pattern_text", "char_set_text", "quantifier_text"]
