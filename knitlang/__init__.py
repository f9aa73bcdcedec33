# Knitlang language package
# This package provides a lexer, parsers and a tree-walking interpreter for Knitlang.
from .errors import (
    KnitError, LexError, ParseError, KnitNameError, DivisionByZero, KnitRuntimeError,
)
from .environment import Environment
from .interpreter import Interpreter, RunResult, run_line, run_source
from .lexer import Token, tokenize
from .parser import Parser, parse_program

__all__ = [
    'KnitError',
    'LexError',
    'ParseError',
    'KnitNameError',
    'DivisionByZero',
    'KnitRuntimeError',
    'Environment',
    'Interpreter',
    'RunResult',
    'run_line',
    'run_source',
    'Token',
    'tokenize',
    'Parser',
    'parse_program',
]
