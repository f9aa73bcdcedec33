"""Lark grammar for Knitlang.

This is a second, table-driven front end for the language. It accepts
exactly the programs the recursive-descent parser accepts and transforms
the Lark parse tree into the same AST, so the two can be checked against
each other. Lark's own exceptions are translated into LexError and
ParseError.
"""

from __future__ import annotations

from typing import Optional, Tuple

from lark import Lark, Transformer, v_args
from lark.exceptions import UnexpectedCharacters, UnexpectedEOF, UnexpectedToken

from .ast import (
    Program, CastOn, Knit, Purl, Repeat, BindOff,
    IntegerLiteral, Variable, BinaryOp,
)
from .errors import LexError, ParseError


KNIT_GRAMMAR = r"""
    start: statement*

    ?statement: cast_on
              | knit
              | purl
              | repeat
              | bind_off

    cast_on: "cast_on" IDENT "=" expr ";"
    knit: "knit" IDENT "=" expr ";"
    purl: "purl" expr ";"
    repeat: "repeat" expr "{" statement* "}"
    bind_off: "bind_off" ";"

    // Expressions with precedence, left-associative
    ?expr: term
         | expr ADD_OP term    -> binary
    ?term: factor
         | term MUL_OP factor  -> binary
    ?factor: integer
           | variable
    integer: INT
    variable: IDENT

    ADD_OP: "+" | "-"
    MUL_OP: "*" | "/"
    IDENT: /[a-zA-Z_][a-zA-Z0-9_]*/
    INT: /[0-9]+/

    %ignore /[ \t\r\n]+/
"""


KNIT_PARSER = Lark(
    KNIT_GRAMMAR,
    parser='lalr',
    lexer='basic',
    propagate_positions=True,
    maybe_placeholders=False,
)


def _line(meta) -> Optional[int]:
    return None if meta.empty else meta.line


@v_args(meta=True)
class ASTTransformer(Transformer):
    """Transforms the raw parse tree into an AST."""

    def start(self, meta, items):
        return Program(tuple(items))

    def cast_on(self, meta, items):
        return CastOn(str(items[0]), items[1], line=_line(meta))

    def knit(self, meta, items):
        return Knit(str(items[0]), items[1], line=_line(meta))

    def purl(self, meta, items):
        return Purl(items[0], line=_line(meta))

    def repeat(self, meta, items):
        return Repeat(items[0], tuple(items[1:]), line=_line(meta))

    def bind_off(self, meta, items):
        return BindOff(line=_line(meta))

    def binary(self, meta, items):
        left, op, right = items
        return BinaryOp(str(op), left, right, line=op.line)

    def integer(self, meta, items):
        return IntegerLiteral(int(items[0]), line=items[0].line)

    def variable(self, meta, items):
        return Variable(str(items[0]), line=items[0].line)


def _end_position(source: str) -> Tuple[int, int]:
    """Line and column just past the last character of the source."""
    return source.count('\n') + 1, len(source) - source.rfind('\n')


def _describe(token) -> str:
    if token.type == '$END':
        return 'end of input'
    return repr(str(token))


def parse_with_lark(source: str) -> Program:
    """Parse Knitlang source with the Lark grammar."""
    try:
        tree = KNIT_PARSER.parse(source)
    except UnexpectedCharacters as e:
        raise LexError(e.char, e.line, e.column, e.pos_in_stream) from None
    except UnexpectedToken as e:
        expected = 'one of ' + ', '.join(sorted(e.expected))
        if e.token.type == '$END':
            line, column = _end_position(source)
        else:
            line, column = e.line, e.column
        raise ParseError(expected, _describe(e.token), line, column) from None
    except UnexpectedEOF as e:
        expected = 'one of ' + ', '.join(sorted(e.expected))
        raise ParseError(expected, 'end of input', *_end_position(source)) from None
    return ASTTransformer().transform(tree)
