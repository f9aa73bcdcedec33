"""Recursive-descent parser for Knitlang.

The parser reads the token list produced by :func:`knitlang.lexer.tokenize`
with a single token of lookahead. Statements are keyword-led, so the
current token alone decides which rule applies; expressions use the usual
two precedence levels with left-associative operators::

    expr    := term (("+" | "-") term)*
    term    := factor (("*" | "/") factor)*
    factor  := INT | IDENT

:func:`parse_program` is the public entry point. It can also hand the
source to the Lark grammar in :mod:`knitlang.grammar`, which builds the
same tree.
"""

from __future__ import annotations

from typing import List, Union

from .ast import (
    Program, CastOn, Knit, Purl, Repeat, BindOff,
    IntegerLiteral, Variable, BinaryOp, Expression, Statement,
)
from .errors import ParseError
from .grammar import parse_with_lark
from .lexer import KEYWORDS, Token, tokenize

BACKENDS = ('recursive', 'lark')


class Parser:
    def __init__(self, tokens: List[Token]):
        if not tokens or tokens[-1].type != 'EOF':
            raise ValueError('token list must end with an EOF token')
        self.tokens = tokens
        self.pos = 0

    def peek(self) -> Token:
        return self.tokens[self.pos]

    def advance(self) -> Token:
        token = self.tokens[self.pos]
        # EOF is never consumed past
        if token.type != 'EOF':
            self.pos += 1
        return token

    def match(self, expected: Union[str, List[str]]) -> bool:
        token = self.peek()
        if isinstance(expected, list):
            return token.type in expected
        return token.type == expected

    def consume(self, expected: Union[str, List[str]], description: str = '') -> Token:
        if not self.match(expected):
            if not description:
                if isinstance(expected, list):
                    description = 'one of ' + ', '.join(repr(e) for e in expected)
                else:
                    description = expected if expected in ('IDENT', 'INT') else repr(expected)
            self.error(description)
        return self.advance()

    def error(self, expected: str):
        token = self.peek()
        raise ParseError(expected, token.describe(), token.line, token.column)

    def parse_program(self) -> Program:
        statements: List[Statement] = []
        while not self.match('EOF'):
            statements.append(self.parse_statement())
        return Program(tuple(statements))

    def parse_statement(self) -> Statement:
        token = self.peek()
        if token.type == 'cast_on':
            return self.parse_cast_on()
        if token.type == 'knit':
            return self.parse_knit()
        if token.type == 'purl':
            return self.parse_purl()
        if token.type == 'repeat':
            return self.parse_repeat()
        if token.type == 'bind_off':
            return self.parse_bind_off()
        self.error('a statement (' + ', '.join(KEYWORDS) + ')')

    def parse_cast_on(self) -> CastOn:
        keyword = self.consume('cast_on')
        name = self.consume('IDENT', 'identifier').value
        self.consume('=')
        expr = self.parse_expression()
        self.consume(';')
        return CastOn(name, expr, line=keyword.line)

    def parse_knit(self) -> Knit:
        keyword = self.consume('knit')
        name = self.consume('IDENT', 'identifier').value
        self.consume('=')
        expr = self.parse_expression()
        self.consume(';')
        return Knit(name, expr, line=keyword.line)

    def parse_purl(self) -> Purl:
        keyword = self.consume('purl')
        expr = self.parse_expression()
        self.consume(';')
        return Purl(expr, line=keyword.line)

    def parse_repeat(self) -> Repeat:
        keyword = self.consume('repeat')
        count = self.parse_expression()
        self.consume('{')
        body: List[Statement] = []
        while not self.match(['}', 'EOF']):
            body.append(self.parse_statement())
        self.consume('}')
        return Repeat(count, tuple(body), line=keyword.line)

    def parse_bind_off(self) -> BindOff:
        keyword = self.consume('bind_off')
        self.consume(';')
        return BindOff(line=keyword.line)

    def parse_expression(self) -> Expression:
        node = self.parse_term()
        while self.match(['+', '-']):
            op_token = self.advance()
            right = self.parse_term()
            node = BinaryOp(op_token.value, node, right, line=op_token.line)
        return node

    def parse_term(self) -> Expression:
        node = self.parse_factor()
        while self.match(['*', '/']):
            op_token = self.advance()
            right = self.parse_factor()
            node = BinaryOp(op_token.value, node, right, line=op_token.line)
        return node

    def parse_factor(self) -> Expression:
        token = self.peek()
        if token.type == 'INT':
            self.advance()
            return IntegerLiteral(int(token.value), line=token.line)
        if token.type == 'IDENT':
            self.advance()
            return Variable(token.value, line=token.line)
        self.error('integer or identifier')


def parse_program(source: str, backend: str = 'recursive') -> Program:
    """Parse Knitlang source into a Program AST.

    ``backend`` selects the hand-written parser (``'recursive'``) or the
    Lark grammar (``'lark'``). Both raise LexError or ParseError on bad
    input.
    """
    if backend == 'recursive':
        return Parser(tokenize(source)).parse_program()
    if backend == 'lark':
        return parse_with_lark(source)
    raise ValueError(f"unknown parser backend {backend!r}; expected one of {BACKENDS}")
