from typing import Optional


class KnitError(Exception):
    """Base class for every error raised while lexing, parsing or running Knitlang."""
    kind = 'KnitError'

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        self.message = message
        self.line = line
        self.column = column
        super().__init__(self.format())

    def format(self) -> str:
        where = ''
        if self.line is not None:
            where = f" at line {self.line}"
            if self.column is not None:
                where += f", column {self.column}"
        return f"{self.kind}{where}: {self.message}"


class LexError(KnitError):
    kind = 'LexError'

    def __init__(self, character: str, line: int, column: int, offset: int):
        self.character = character
        self.offset = offset
        super().__init__(f"unexpected character {character!r}", line, column)


class ParseError(KnitError):
    kind = 'ParseError'

    def __init__(self, expected: str, found: str, line: Optional[int] = None, column: Optional[int] = None):
        self.expected = expected
        self.found = found
        super().__init__(f"expected {expected}, found {found}", line, column)


class KnitNameError(KnitError):
    kind = 'NameError'

    def __init__(self, name: str, line: Optional[int] = None):
        self.name = name
        super().__init__(f"undefined variable {name}", line)


class DivisionByZero(KnitError):
    kind = 'DivisionByZero'

    def __init__(self, line: Optional[int] = None):
        super().__init__('division by zero', line)


class KnitRuntimeError(KnitError):
    kind = 'RuntimeError'


class BindOffSignal:
    """Returned through the statement executor when `bind_off` runs."""
    def __repr__(self) -> str:
        return '<bind_off>'


BIND_OFF = BindOffSignal()
