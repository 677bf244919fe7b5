# regex_engine/ast.py

from typing import Iterator, Optional, Tuple


class RegexNode:
    """Base interface. Subclasses fix `kind` and `symbol`."""

    kind = ""
    symbol = ""

    @property
    def children(self) -> Tuple[Optional["RegexNode"], Optional["RegexNode"]]:
        return (None, None)

    def preorder(self) -> Iterator["RegexNode"]:
        yield self
        for child in self.children:
            if child is not None:
                yield from child.preorder()


class CharNode(RegexNode):
    """Single literal character."""
    kind = "Literal"

    def __init__(self, ch: str):
        self.ch = ch  # a single character

    @property
    def symbol(self):
        return self.ch

    def __repr__(self):
        return f"'{self.ch}'"


class ConcatNode(RegexNode):
    """Concatenation: left · right"""
    kind = "Concat"
    symbol = "."

    def __init__(self, left: RegexNode, right: RegexNode):
        self.left = left
        self.right = right

    @property
    def children(self):
        return (self.left, self.right)

    def __repr__(self):
        return f"({self.left}·{self.right})"


class StarNode(RegexNode):
    """Kleene star: (child)*"""
    kind = "Star"
    symbol = "*"

    def __init__(self, child: RegexNode):
        self.child = child

    @property
    def children(self):
        return (self.child, None)

    def __repr__(self):
        return f"({self.child})*"


class UnionNode(RegexNode):
    """Union (OR): left | right"""
    kind = "Union"
    symbol = "|"

    def __init__(self, left: RegexNode, right: RegexNode):
        self.left = left
        self.right = right

    @property
    def children(self):
        return (self.left, self.right)

    def __repr__(self):
        return f"({self.left}|{self.right})"
