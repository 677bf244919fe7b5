from django.test import SimpleTestCase
from automata.backend.regex_engine.lexer import Lexer, TokenType
from automata.backend.regex_engine.parser import (
    RegexParser,
    parse,
    MISSING_OPERAND,
    MISSING_CLOSING_PAREN,
    TRAILING_INPUT,
)
from automata.backend.regex_engine.ast import CharNode, ConcatNode, StarNode, UnionNode
from automata.backend.regex_engine.errors import RegexSyntaxException, RegexDepthError


class TestLexer(SimpleTestCase):
    """Test cases for the pattern lexer"""

    def test_one_token_per_character(self):
        """Token index equals character offset, END sits at len(pattern)"""
        tokens = Lexer().lex("(a|b)*c")
        self.assertEqual(
            [t.type for t in tokens],
            [TokenType.LPAREN, TokenType.CHAR, TokenType.UNION, TokenType.CHAR,
             TokenType.RPAREN, TokenType.STAR, TokenType.CHAR, TokenType.END],
        )
        self.assertEqual([t.index for t in tokens], list(range(8)))

    def test_non_metacharacters_are_literals(self):
        """'.', '+', '$' and spaces are plain literals"""
        tokens = Lexer().lex(".+$ ")
        self.assertTrue(all(t.type == TokenType.CHAR for t in tokens[:-1]))
        self.assertEqual("".join(t.ch for t in tokens[:-1]), ".+$ ")

    def test_unsupported_characters(self):
        """Tabs and non-ASCII characters are rejected with their offset"""
        with self.assertRaises(RegexSyntaxException) as ctx:
            Lexer().lex("ab\tc")
        self.assertEqual(ctx.exception.index, 2)

        with self.assertRaises(RegexSyntaxException) as ctx:
            Lexer().lex("aé")
        self.assertEqual(ctx.exception.index, 1)

    def test_token_repr(self):
        tokens = Lexer().lex("a*")
        self.assertEqual([repr(t) for t in tokens], ["<a@0>", "<STAR@1>", "<END@2>"])

    def test_none_pattern(self):
        with self.assertRaises(ValueError):
            Lexer().lex(None)


class TestParser(SimpleTestCase):
    """Test cases for the recursive-descent parser"""

    def test_single_literal(self):
        tree = parse("x")
        self.assertIsInstance(tree, CharNode)
        self.assertEqual(tree.symbol, "x")
        self.assertEqual(tree.children, (None, None))

    def test_concatenation(self):
        """'ab' is Concat(Literal a, Literal b)"""
        tree = parse("ab")
        self.assertIsInstance(tree, ConcatNode)
        self.assertEqual(tree.kind, "Concat")
        self.assertEqual(tree.symbol, ".")
        self.assertIsInstance(tree.left, CharNode)
        self.assertIsInstance(tree.right, CharNode)
        self.assertEqual((tree.left.ch, tree.right.ch), ("a", "b"))

    def test_union(self):
        """'a|b' is Union(Literal a, Literal b)"""
        tree = parse("a|b")
        self.assertIsInstance(tree, UnionNode)
        self.assertEqual(tree.symbol, "|")
        self.assertEqual(repr(tree), "('a'|'b')")

    def test_star_scoping(self):
        """Star wraps the operand directly to its left"""
        tree = parse("a*")
        self.assertIsInstance(tree, StarNode)
        self.assertEqual(tree.children, (tree.child, None))
        self.assertEqual(repr(tree), "('a')*")

        tree = parse("(ab)*")
        self.assertIsInstance(tree, StarNode)
        self.assertIsInstance(tree.child, ConcatNode)
        self.assertEqual(repr(tree), "(('a'·'b'))*")

    def test_group_then_concat(self):
        tree = parse("(a|b)c")
        self.assertEqual(repr(tree), "(('a'|'b')·'c')")

    def test_reference_pattern(self):
        """The heavily parenthesized reference pattern is consumed in full"""
        parser = RegexParser()
        pattern = "(((((a|b)*)|(c*))|(v|((m*)*)))*)p"
        tree = parser.parse(pattern)
        self.assertEqual(parser.cursor, len(pattern))
        self.assertEqual(
            [n.symbol for n in tree.preorder()],
            [".", "*", "|", "|", "*", "|", "a", "b", "*", "c", "|", "v", "*", "*", "m", "p"],
        )

    def test_single_operator_per_level(self):
        """Only one operator is applied per level; the rest is left unconsumed"""
        parser = RegexParser()
        tree = parser.parse("a*b*")
        self.assertEqual(repr(tree), "('a')*")
        self.assertEqual(parser.cursor, 2)

        tree = parser.parse("abc")
        self.assertEqual(repr(tree), "('a'·'b')")
        self.assertEqual(parser.cursor, 2)

        tree = parser.parse("a|b|c")
        self.assertEqual(repr(tree), "('a'|'b')")
        self.assertEqual(parser.cursor, 3)

    def test_strict_mode_rejects_trailing_input(self):
        with self.assertRaises(RegexSyntaxException) as ctx:
            RegexParser().parse("a*b*", strict=True)
        self.assertEqual(ctx.exception.message, TRAILING_INPUT)
        self.assertEqual(ctx.exception.index, 2)

        # fully consumed patterns are unaffected
        self.assertEqual(repr(parse("(a*)(b*)", strict=True)), "(('a')*·('b')*)")

    def test_missing_operand(self):
        """Operand expected but input ends or a metacharacter follows"""
        for pattern, index in [("|a", 0), ("", 0), ("*", 0), (")", 0),
                               ("a|", 2), ("()", 1), ("(|a)", 1)]:
            with self.assertRaises(RegexSyntaxException) as ctx:
                parse(pattern)
            self.assertEqual(ctx.exception.message, MISSING_OPERAND, pattern)
            self.assertEqual(ctx.exception.index, index, pattern)

    def test_missing_closing_parenthesis(self):
        with self.assertRaises(RegexSyntaxException) as ctx:
            parse("(a")
        self.assertEqual(ctx.exception.message, MISSING_CLOSING_PAREN)
        self.assertEqual(str(ctx.exception), "Missing closing parenthesis at index 2")

        # inner group succeeded, its single operator consumed, then 'c' is not ')'
        with self.assertRaises(RegexSyntaxException) as ctx:
            parse("(abc)")
        self.assertEqual(ctx.exception.message, MISSING_CLOSING_PAREN)
        self.assertEqual(ctx.exception.index, 3)

    def test_nesting_limit(self):
        """Groups deeper than max_depth raise a resource error, not RecursionError"""
        parser = RegexParser(max_depth=10)
        self.assertIsInstance(parser.parse("(" * 10 + "a" + ")" * 10), CharNode)

        with self.assertRaises(RegexDepthError) as ctx:
            parser.parse("(" * 11 + "a" + ")" * 11)
        self.assertEqual(ctx.exception.index, 10)

    def test_parser_is_reusable(self):
        parser = RegexParser()
        parser.parse("a*b")
        self.assertEqual(parser.cursor, 2)
        parser.parse("ab")
        self.assertEqual(parser.cursor, 2)
        self.assertEqual(parser.depth, 0)
