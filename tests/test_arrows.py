from __future__ import annotations

import unittest

from helpers import alt, char, group, literal, rx

from regexdiagram.arrows import arrow_pairs, frontier_of, thread
from regexdiagram.builder import build
from regexdiagram.layout import layout
from regexdiagram.syntax import Star
from regexdiagram.visual import Choice, Leaf, Sequence


def _labels(pairs):
    return [(earlier.label, later.label) for earlier, later in pairs]


class ThreadTests(unittest.TestCase):
    def test_leaf_links_whole_frontier(self) -> None:
        x, y, z = Leaf("x"), Leaf("y"), Leaf("z")
        frontier, pairs = thread(z, [x, y], [])
        self.assertEqual(frontier, [z])
        self.assertEqual(_labels(pairs), [("x", "z"), ("y", "z")])

    def test_two_leaf_sequence(self) -> None:
        a, b = Leaf("a"), Leaf("b")
        pairs = arrow_pairs(Sequence(children=(a, b)))
        self.assertEqual(len(pairs), 1)
        self.assertIs(pairs[0][0], a)
        self.assertIs(pairs[0][1], b)

    def test_choice_then_leaf_unions_frontier(self) -> None:
        a, b, c = Leaf("a"), Leaf("b"), Leaf("c")
        tree = Sequence(children=(Choice(children=(a, b)), c))
        self.assertEqual(_labels(arrow_pairs(tree)), [("a", "c"), ("b", "c")])

    def test_choice_branches_start_from_same_frontier(self) -> None:
        start = Leaf("s")
        tree = Choice(children=(Leaf("a"), Sequence(children=(Leaf("b"), Leaf("c")))))
        frontier, pairs = thread(tree, [start], [])
        self.assertEqual(_labels(pairs), [("s", "a"), ("s", "b"), ("b", "c")])
        self.assertEqual([leaf.label for leaf in frontier], ["a", "c"])

    def test_inputs_are_left_untouched(self) -> None:
        earlier = (Leaf("p"), Leaf("q"))
        start = [Leaf("s")]
        pairs = [earlier]
        frontier, result = thread(Sequence(children=(Leaf("a"), Leaf("b"))), start, pairs)
        self.assertEqual(pairs, [earlier])
        self.assertEqual([leaf.label for leaf in start], ["s"])
        self.assertEqual(_labels(result), [("p", "q"), ("s", "a"), ("a", "b")])
        self.assertEqual([leaf.label for leaf in frontier], ["b"])

    def test_empty_containers_pass_frontier_through(self) -> None:
        start = Leaf("s")
        frontier, pairs = thread(Sequence(children=()), [start], [])
        self.assertEqual(frontier, [start])
        self.assertEqual(pairs, [])
        frontier, _ = thread(Choice(children=()), [start], [])
        self.assertEqual(frontier, [])


class BuiltTreeTests(unittest.TestCase):
    def test_ab(self) -> None:
        self.assertEqual(_labels(arrow_pairs(build(literal("ab")))), [("a", "b")])

    def test_group_followed_by_atom(self) -> None:
        regex = rx(alt(group(alt(char("a")), alt(char("b"))), char("c")))
        self.assertEqual(_labels(arrow_pairs(build(regex))), [("a", "c"), ("b", "c")])

    def test_trailing_group_exposes_both_alternatives(self) -> None:
        tree = build(rx(alt(group(alt(char("a")), alt(char("b"))))))
        self.assertEqual(arrow_pairs(tree), [])
        self.assertEqual([leaf.label for leaf in frontier_of(tree)], ["a", "b"])

    def test_top_level_alternatives_are_not_linked(self) -> None:
        tree = build(rx(alt(char("a"), char("b")), alt(char("c"), char("d"))))
        self.assertEqual(_labels(arrow_pairs(tree)), [("a", "b"), ("c", "d")])

    def test_nested_groups(self) -> None:
        regex = rx(
            alt(
                char("x"),
                group(alt(char("a"), char("b")), alt(char("c")), quantifier=Star()),
                char("y"),
            )
        )
        self.assertEqual(
            _labels(arrow_pairs(build(regex))),
            [("x", "a"), ("a", "b"), ("x", "c"), ("b", "y"), ("c", "y")],
        )

    def test_positioned_tree_gives_same_pairs(self) -> None:
        regex = rx(alt(group(alt(char("a")), alt(char("b"))), char("c")))
        positioned = layout(build(regex))
        pairs = arrow_pairs(positioned)
        self.assertEqual(_labels(pairs), [("a", "c"), ("b", "c")])
        self.assertTrue(all(earlier.x < later.x for earlier, later in pairs))


if __name__ == "__main__":
    unittest.main()
