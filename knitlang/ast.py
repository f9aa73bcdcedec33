"""Abstract Syntax Tree (AST) definitions for Knitlang.

Nodes are immutable so the interpreter can run a ``repeat`` body any
number of times without copying it. Each node remembers the source line
of its leading token for diagnostics; the line does not take part in
equality, which lets tests compare parser output against hand-built
trees.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class Node:
    """Base class for all AST nodes."""
    pass


@dataclass(frozen=True)
class IntegerLiteral(Node):
    value: int
    line: Optional[int] = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class Variable(Node):
    name: str
    line: Optional[int] = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class BinaryOp(Node):
    op: str  # one of + - * /
    left: 'Expression'
    right: 'Expression'
    line: Optional[int] = field(default=None, compare=False, repr=False)


Expression = Union[IntegerLiteral, Variable, BinaryOp]


@dataclass(frozen=True)
class CastOn(Node):
    name: str
    initializer: Expression
    line: Optional[int] = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class Knit(Node):
    name: str
    value: Expression
    line: Optional[int] = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class Purl(Node):
    value: Expression
    line: Optional[int] = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class Repeat(Node):
    count: Expression
    body: Tuple['Statement', ...]
    line: Optional[int] = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class BindOff(Node):
    line: Optional[int] = field(default=None, compare=False, repr=False)


Statement = Union[CastOn, Knit, Purl, Repeat, BindOff]


@dataclass(frozen=True)
class Program(Node):
    body: Tuple[Statement, ...]
