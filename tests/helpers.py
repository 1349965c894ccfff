"""Small constructors for hand-built syntax trees used across tests."""
from __future__ import annotations

import itertools
import sys
from pathlib import Path

TESTS_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = TESTS_DIR.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from regexdiagram.syntax import (  # noqa: E402
    Alternative,
    Assertion,
    Char,
    Group,
    Quantified,
    Regex,
)

_ids = itertools.count(1)


def next_id() -> int:
    return next(_ids)


def char(value: str, quantifier=None, greedy: bool = True) -> Quantified:
    return Quantified(Char(value, id=next_id()), quantifier, greedy)


def atom(node, quantifier=None, greedy: bool = True) -> Quantified:
    return Quantified(node, quantifier, greedy)


def anchor(kind: str) -> Assertion:
    return Assertion(kind, id=next_id())


def alt(*terms) -> Alternative:
    return Alternative(tuple(terms))


def rx(*alternatives) -> Regex:
    return Regex(tuple(alternatives))


def literal(text: str) -> Regex:
    """``literal("ab")`` is the single-alternative regex ``ab``."""
    return rx(alt(*(char(ch) for ch in text)))


def group(*alternatives, index: int = 1, quantifier=None, greedy: bool = True) -> Quantified:
    return Quantified(Group(rx(*alternatives), index, id=next_id()), quantifier, greedy)
