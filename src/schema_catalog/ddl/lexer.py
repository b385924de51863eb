"""Regex tokenizer for GoogleSQL DDL."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    """Lexical token categories."""
    IDENT = "ident"            # plain identifier or keyword
    QUOTED_IDENT = "quoted"    # `back-quoted` identifier
    STRING = "string"
    NUMBER = "number"
    PUNCT = "punct"
    EOF = "eof"


@dataclass(frozen=True, slots=True)
class Token:
    """A single token with its position in the source text."""
    kind: TokenKind
    value: str
    pos: int
    end: int

    @property
    def upper(self) -> str:
        """Keyword form of the token (only meaningful for plain identifiers)."""
        return self.value.upper() if self.kind is TokenKind.IDENT else ""

    @property
    def name(self) -> str:
        """Identifier text with back-quotes removed."""
        if self.kind is TokenKind.QUOTED_IDENT:
            return self.value[1:-1]
        return self.value


class LexError(ValueError):
    """Raised on a character sequence that is not a valid token."""

    def __init__(self, message: str, pos: int):
        super().__init__(message)
        self.pos = pos


# Order matters: strings before identifiers (b'..' / r'..' prefixes),
# hex before decimal numbers, multi-char operators before single chars.
TOKEN_PATTERN = re.compile(
    r"""
    (?P<ws>\s+)
  | (?P<comment>--[^\n]*|\#[^\n]*|/\*.*?\*/)
  | (?P<quoted>`(?:[^`\\]|\\.)*`)
  | (?P<string>(?:[rR][bB]?|[bB][rR]?)?(?:'(?:[^'\\\n]|\\.)*'|"(?:[^"\\\n]|\\.)*"))
  | (?P<number>0[xX][0-9a-fA-F]+|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)
  | (?P<ident>[A-Za-z_][A-Za-z0-9_]*)
  | (?P<punct><=|>=|<>|!=|\|\||<<|>>|[-+*/%<>=(),;.\[\]{}&|^~@?:!])
    """,
    re.VERBOSE | re.DOTALL,
)

_KINDS = {
    "quoted": TokenKind.QUOTED_IDENT,
    "string": TokenKind.STRING,
    "number": TokenKind.NUMBER,
    "ident": TokenKind.IDENT,
    "punct": TokenKind.PUNCT,
}


def tokenize(text: str) -> list[Token]:
    """
    Split DDL text into tokens, dropping whitespace and comments.

    The returned list always ends with a single EOF token.

    Raises:
        LexError: On an unterminated string/identifier or a stray character.
    """
    tokens: list[Token] = []
    pos = 0
    length = len(text)

    while pos < length:
        match = TOKEN_PATTERN.match(text, pos)
        if match is None:
            raise LexError(f"unexpected character {text[pos]!r}", pos)

        group = match.lastgroup
        if group not in ("ws", "comment"):
            tokens.append(Token(_KINDS[group], match.group(), pos, match.end()))
        pos = match.end()

    tokens.append(Token(TokenKind.EOF, "", length, length))
    return tokens


def line_and_column(text: str, pos: int) -> tuple[int, int]:
    """Convert an offset into 1-based (line, column)."""
    line = text.count("\n", 0, pos) + 1
    column = pos - (text.rfind("\n", 0, pos) + 1) + 1
    return line, column
