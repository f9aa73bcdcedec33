from typing import Dict, Iterator, Optional

from .errors import KnitNameError


class Environment:
    """The single flat table of variable bindings for a Knitlang run.

    Loop bodies read and write the same bindings as the top level, so there
    is no parent chain. ``knit`` is strict: assigning to a name that was
    never cast on is an error.
    """
    def __init__(self, values: Optional[Dict[str, int]] = None):
        self.values: Dict[str, int] = dict(values) if values else {}

    def define(self, name: str, value: int) -> None:
        self.values[name] = value

    def assign(self, name: str, value: int, line: Optional[int] = None) -> None:
        if name not in self.values:
            raise KnitNameError(name, line)
        self.values[name] = value

    def lookup(self, name: str, line: Optional[int] = None) -> int:
        try:
            return self.values[name]
        except KeyError:
            raise KnitNameError(name, line) from None

    def as_dict(self) -> Dict[str, int]:
        return dict(self.values)

    def __contains__(self, name: str) -> bool:
        return name in self.values

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __repr__(self) -> str:
        return f"Environment({self.values!r})"
