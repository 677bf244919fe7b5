# regex_engine/lexer.py

from enum import Enum, auto
from typing import NamedTuple

from .errors import RegexSyntaxException


class TokenType(Enum):
    LPAREN = auto()   # (
    RPAREN = auto()   # )
    STAR = auto()     # *
    UNION = auto()    # |
    CHAR = auto()     # literal character
    END = auto()      # end of pattern


UNSUPPORTED_CHARACTER = "Unsupported character"


class Token(NamedTuple):
    """A lexed pattern character; `ch` is meaningful for CHAR tokens only."""
    type: TokenType
    ch: str
    index: int

    def __repr__(self):
        shown = self.ch if self.type == TokenType.CHAR else self.type.name
        return f"<{shown}@{self.index}>"


class Lexer:
    """
    One token per pattern character plus a trailing END token, so a
    token's index is always the character offset it came from.
    """

    def lex(self, pattern: str):
        if pattern is None:
            raise ValueError("pattern == None")

        out = []
        n = len(pattern)

        for i, c in enumerate(pattern):
            if c == '(':
                out.append(Token(TokenType.LPAREN, '\0', i))
            elif c == ')':
                out.append(Token(TokenType.RPAREN, '\0', i))
            elif c == '*':
                out.append(Token(TokenType.STAR, '\0', i))
            elif c == '|':
                out.append(Token(TokenType.UNION, '\0', i))
            else:
                # printable ASCII 0x20 ~ 0x7E only
                if '\x20' <= c <= '\x7E':
                    out.append(Token(TokenType.CHAR, c, i))
                else:
                    raise RegexSyntaxException(UNSUPPORTED_CHARACTER, i)

        out.append(Token(TokenType.END, '\0', n))
        return out
