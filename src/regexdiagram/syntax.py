"""Regex syntax tree consumed by the diagram builder.

Trees are produced by an upstream parser that also numbers every hoverable
node. Node ids must be non-negative and unique within one render.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union


# Quantifiers


@dataclass(frozen=True)
class Star:
    pass


@dataclass(frozen=True)
class Plus:
    pass


@dataclass(frozen=True)
class QuestionMark:
    pass


@dataclass(frozen=True)
class Exactly:
    count: int


@dataclass(frozen=True)
class AtLeast:
    count: int


@dataclass(frozen=True)
class Between:
    low: int
    high: int


Quantifier = Union[Star, Plus, QuestionMark, Exactly, AtLeast, Between]


# Atoms


@dataclass(frozen=True)
class Char:
    value: str
    id: int = 0


@dataclass(frozen=True)
class AnyChar:
    id: int = 0


@dataclass(frozen=True)
class ClassEscape:
    """``\\d``, ``\\w``, ``\\s`` and their negations; ``letter`` excludes the backslash."""

    letter: str
    id: int = 0


@dataclass(frozen=True)
class EscapedChar:
    value: str
    id: int = 0


@dataclass(frozen=True)
class BackReference:
    index: int
    id: int = 0


SetAtom = Union[Char, EscapedChar, ClassEscape]


@dataclass(frozen=True)
class CharRange:
    first: SetAtom
    last: SetAtom


SetItem = Union[Char, EscapedChar, ClassEscape, CharRange]


@dataclass(frozen=True)
class CharSet:
    negated: bool
    items: Tuple[SetItem, ...]
    id: int = 0


@dataclass(frozen=True)
class Group:
    regex: "Regex"
    index: int
    id: int = 0


@dataclass(frozen=True)
class NonCapturingGroup:
    regex: "Regex"
    id: int = 0


@dataclass(frozen=True)
class Lookahead:
    regex: "Regex"
    negated: bool = False
    id: int = 0


Atom = Union[
    Char,
    AnyChar,
    ClassEscape,
    EscapedChar,
    BackReference,
    CharSet,
    Group,
    NonCapturingGroup,
    Lookahead,
]


# Terms


@dataclass(frozen=True)
class Quantified:
    atom: Atom
    quantifier: Optional[Quantifier] = None
    greedy: bool = True


@dataclass(frozen=True)
class Assertion:
    kind: str
    id: int = 0


Term = Union[Quantified, Assertion]


@dataclass(frozen=True)
class Alternative:
    terms: Tuple[Term, ...] = ()


@dataclass(frozen=True)
class Regex:
    alternatives: Tuple[Alternative, ...]


__all__ = [
    "Alternative",
    "AnyChar",
    "Assertion",
    "AtLeast",
    "Atom",
    "BackReference",
    "Between",
    "Char",
    "CharRange",
    "CharSet",
    "ClassEscape",
    "EscapedChar",
    "Exactly",
    "Group",
    "Lookahead",
    "NonCapturingGroup",
    "Plus",
    "Quantified",
    "Quantifier",
    "QuestionMark",
    "Regex",
    "SetAtom",
    "SetItem",
    "Star",
    "Term",
]
