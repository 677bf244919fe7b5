# regex_engine/parser.py

from .lexer import Lexer, TokenType
from .ast import RegexNode, CharNode, StarNode, ConcatNode, UnionNode
from .errors import RegexSyntaxException, RegexDepthError


MISSING_OPERAND = "Missing operand"
MISSING_OPERATOR = "Missing operator"
MISSING_CLOSING_PAREN = "Missing closing parenthesis"
TRAILING_INPUT = "Unexpected trailing input"

DEFAULT_MAX_DEPTH = 256


class RegexParser:
    """
    Recursive-descent parser with one token of lookahead.

    Each expression level applies at most one operator to its left operand,
    so ``abc`` parses as ``ab`` and leaves ``c`` behind; longer sequences
    need explicit parentheses, e.g. ``(ab)c``.
    """

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH):
        self.max_depth = max_depth
        self.tokens = []
        self.pos = 0
        self.depth = 0

    # ========= PUBLIC ==============
    def parse(self, pattern: str, strict: bool = False) -> RegexNode:
        self.tokens = Lexer().lex(pattern)
        self.pos = 0
        self.depth = 0
        node = self.parse_expr()
        if strict and self.peek().type != TokenType.END:
            raise self.error(TRAILING_INPUT, self.cursor)
        return node

    @property
    def cursor(self) -> int:
        """Offset of the first character not consumed by the last parse."""
        return self.peek().index

    # ========= Grammar ==========
    # expr := operand [ '*' | binop operand ]?
    def parse_expr(self):
        lhs = self.parse_operand()

        t = self.peek()
        if t.type in (TokenType.END, TokenType.RPAREN):
            return lhs

        if t.type == TokenType.STAR:
            self.next()
            return StarNode(lhs)

        if t.type == TokenType.UNION:
            self.next()
            op = UnionNode
        elif self.can_start_operand(t.type):
            # implicit concatenation, nothing consumed
            op = ConcatNode
        else:
            raise self.error(MISSING_OPERATOR, t.index)

        rhs = self.parse_operand()
        return op(lhs, rhs)

    # operand := CHAR | '(' expr ')'
    def parse_operand(self):
        t = self.peek()
        if t.type == TokenType.CHAR:
            self.next()
            return CharNode(t.ch)
        elif t.type == TokenType.LPAREN:
            self.next()  # consume '('
            self.enter_group(t.index)
            inside = self.parse_expr()
            if self.peek().type != TokenType.RPAREN:
                raise self.error(MISSING_CLOSING_PAREN, self.peek().index)
            self.next()  # consume ')'
            self.depth -= 1
            return inside
        else:
            raise self.error(MISSING_OPERAND, t.index)

    # ========= Helpers ==========

    def peek(self):
        return self.tokens[self.pos]

    def next(self):
        t = self.tokens[self.pos]
        self.pos = min(self.pos + 1, len(self.tokens) - 1)
        return t

    def enter_group(self, index: int):
        self.depth += 1
        if self.depth > self.max_depth:
            raise RegexDepthError(
                f"Group nesting exceeds {self.max_depth} levels", index
            )

    @staticmethod
    def can_start_operand(ttype: TokenType):
        return ttype in (TokenType.CHAR, TokenType.LPAREN)

    def error(self, msg, index):
        return RegexSyntaxException(msg, index)


def parse(pattern: str, strict: bool = False) -> RegexNode:
    return RegexParser().parse(pattern, strict)
