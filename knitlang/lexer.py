"""Tokenizer for Knitlang source text.

The lexer turns raw source into a flat list of tokens that always ends
with a single ``EOF`` token, so the parser never has to check for the
end of the list. Keywords and punctuation use their own text as the
token type; identifiers and integers use ``IDENT`` and ``INT``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .errors import LexError

KEYWORDS = ('cast_on', 'knit', 'purl', 'repeat', 'bind_off')
SINGLE_CHARS = {'+', '-', '*', '/', '=', ';', '{', '}'}
WHITESPACE = {' ', '\t', '\r', '\n'}


@dataclass(frozen=True)
class Token:
    type: str
    value: str
    line: int
    column: int
    offset: int

    def describe(self) -> str:
        if self.type == 'EOF':
            return 'end of input'
        if self.type in ('IDENT', 'INT'):
            return f"{self.type} {self.value!r}"
        return repr(self.value)


def is_ident_start(c: str) -> bool:
    return c == '_' or ('a' <= c <= 'z') or ('A' <= c <= 'Z')


def is_ident_char(c: str) -> bool:
    return is_ident_start(c) or '0' <= c <= '9'


def tokenize(source: str) -> List[Token]:
    """Convert source code into a list of tokens.

    Raises LexError on the first character that starts no token.
    """
    tokens: List[Token] = []
    i = 0
    line = 1
    col = 1
    length = len(source)

    def advance():
        nonlocal i, col, line
        if source[i] == '\n':
            line += 1
            col = 1
        else:
            col += 1
        i += 1

    while i < length:
        c = source[i]
        if c in WHITESPACE:
            advance()
            continue
        start_i, start_col = i, col
        if is_ident_start(c):
            while i < length and is_ident_char(source[i]):
                advance()
            value = source[start_i:i]
            kind = value if value in KEYWORDS else 'IDENT'
            tokens.append(Token(kind, value, line, start_col, start_i))
            continue
        if '0' <= c <= '9':
            while i < length and '0' <= source[i] <= '9':
                advance()
            tokens.append(Token('INT', source[start_i:i], line, start_col, start_i))
            continue
        if c in SINGLE_CHARS:
            tokens.append(Token(c, c, line, col, i))
            advance()
            continue
        raise LexError(c, line, col, i)
    tokens.append(Token('EOF', '', line, col, length))
    return tokens
