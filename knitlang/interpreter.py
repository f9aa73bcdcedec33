"""Tree-walking interpreter for Knitlang.

The interpreter executes a parsed :class:`~knitlang.ast.Program` against a
single flat :class:`~knitlang.environment.Environment`. Expressions evaluate
to Python ints; statements are executed for effect. Values printed by
``purl`` are collected, in order, in :attr:`Interpreter.output` and can also
be echoed to a text stream as they are produced.

``bind_off`` is modelled as a control value returned from
:meth:`Interpreter.execute`. :meth:`Interpreter.execute_block` stops at the
first one it sees and hands it back to its caller; a ``repeat`` absorbs it
and ends its loop, and :meth:`Interpreter.run` absorbs it and ends the
program.

Two convenience entry points sit on top: :func:`run_source` for one-shot
execution of a whole file and :func:`run_line` for REPL-style evaluation
against a persistent interpreter.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, TextIO

from .ast import (
    Program, CastOn, Knit, Purl, Repeat, BindOff,
    IntegerLiteral, Variable, BinaryOp, Node,
)
from .environment import Environment
from .errors import (
    BIND_OFF, BindOffSignal, DivisionByZero, KnitError, KnitRuntimeError,
)
from .parser import parse_program


def truncating_div(a: int, b: int) -> int:
    """Integer division rounding toward zero, as in C and Rust."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


class Interpreter:
    """Core interpreter that executes Knitlang AST."""
    def __init__(self, environment: Optional[Environment] = None, stdout: Optional[TextIO] = None,
                 debug_level: int = 0, debug_file: str = 'debug.txt'):
        self.environment = environment if environment is not None else Environment()
        self.output: List[str] = []
        self.stdout = stdout
        self.debug_level = debug_level
        self.debug_fp = open(debug_file, 'w', encoding='utf-8') if debug_level > 0 else None

    def debug(self, msg: str):
        if self.debug_fp:
            self.debug_fp.write(msg + '\n')
            self.debug_fp.flush()

    def close(self):
        if self.debug_fp:
            self.debug_fp.close()
            self.debug_fp = None

    def __enter__(self) -> 'Interpreter':
        return self

    def __exit__(self, *exc_info):
        self.close()

    # Public API
    def run(self, program: Program) -> None:
        self.debug(f"run: {len(program.body)} top-level statements")
        result = self.execute_block(program.body)
        if isinstance(result, BindOffSignal):
            self.debug('run: bind_off halted the program')
        self.debug(f"run: finished with {self.environment.as_dict()}")

    def execute_block(self, statements: Sequence[Node]) -> Optional[BindOffSignal]:
        for stmt in statements:
            result = self.execute(stmt)
            if isinstance(result, BindOffSignal):
                return result
        return None

    def execute(self, node: Node) -> Optional[BindOffSignal]:
        if isinstance(node, CastOn):
            value = self.evaluate(node.initializer)
            self.environment.define(node.name, value)
            if self.debug_level >= 2:
                self.debug(f"cast_on {node.name} = {value}")
            return None
        if isinstance(node, Knit):
            value = self.evaluate(node.value)
            self.environment.assign(node.name, value, node.line)
            if self.debug_level >= 2:
                self.debug(f"knit {node.name} = {value}")
            return None
        if isinstance(node, Purl):
            text = str(self.evaluate(node.value))
            self.output.append(text)
            if self.stdout is not None:
                print(text, file=self.stdout)
            if self.debug_level >= 2:
                self.debug(f"purl {text}")
            return None
        if isinstance(node, Repeat):
            count = self.evaluate(node.count)
            if count < 0:
                raise KnitRuntimeError(f"repeat count must not be negative, got {count}", node.line)
            for iteration in range(count):
                if self.debug_level >= 3:
                    self.debug(f"repeat iteration {iteration + 1}/{count}")
                if isinstance(self.execute_block(node.body), BindOffSignal):
                    if self.debug_level >= 3:
                        self.debug(f"bind_off ended repeat after {iteration + 1} iteration(s)")
                    break
            return None
        if isinstance(node, BindOff):
            return BIND_OFF
        raise NotImplementedError(f"execute: unexpected node type {type(node)}")

    def evaluate(self, node: Node) -> int:
        if isinstance(node, IntegerLiteral):
            return node.value
        if isinstance(node, Variable):
            return self.environment.lookup(node.name, node.line)
        if isinstance(node, BinaryOp):
            # left operand first
            a = self.evaluate(node.left)
            b = self.evaluate(node.right)
            return self.apply_binary_op(node.op, a, b, node.line)
        raise NotImplementedError(f"evaluate: unexpected node type {type(node)}")

    def apply_binary_op(self, op: str, a: int, b: int, line: Optional[int] = None) -> int:
        if op == '+':
            return a + b
        if op == '-':
            return a - b
        if op == '*':
            return a * b
        if op == '/':
            if b == 0:
                raise DivisionByZero(line)
            return truncating_div(a, b)
        raise KnitRuntimeError(f"unknown operator {op!r}", line)


@dataclass
class RunResult:
    """Outcome of :func:`run_source`.

    On failure ``output`` is empty, ``environment`` is None and ``error``
    holds the exception; partial results are never reported.
    """
    output: List[str] = field(default_factory=list)
    environment: Optional[Environment] = None
    error: Optional[KnitError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def run_source(source: str, backend: str = 'recursive', debug_level: int = 0,
               debug_file: str = 'debug.txt') -> RunResult:
    """Lex, parse and run a whole Knitlang program."""
    try:
        program = parse_program(source, backend)
        with Interpreter(debug_level=debug_level, debug_file=debug_file) as interpreter:
            interpreter.run(program)
    except KnitError as e:
        return RunResult(error=e)
    return RunResult(list(interpreter.output), interpreter.environment)


def run_line(source: str, interpreter: Interpreter, backend: str = 'recursive') -> List[str]:
    """Run one line of statements against a persistent interpreter.

    Returns the values printed by this line. Only this line's values are
    kept in ``interpreter.output``. Errors propagate to the caller; values
    printed and bindings made before the failing statement are kept.
    """
    program = parse_program(source, backend)
    interpreter.output.clear()
    interpreter.run(program)
    return list(interpreter.output)
