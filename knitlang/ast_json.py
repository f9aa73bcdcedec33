"""JSON serialization/deserialization for Knitlang AST.

This module converts between the AST dataclasses and plain Python
dict/list structures suitable for JSON encoding. Source lines are kept
under a ``line`` key when known so diagnostics survive a round trip.
"""

from __future__ import annotations

from typing import Any, Dict

from .ast import (
    Program,
    CastOn,
    Knit,
    Purl,
    Repeat,
    BindOff,
    IntegerLiteral,
    Variable,
    BinaryOp,
)


def _with_line(obj: Dict[str, Any], node: Any) -> Dict[str, Any]:
    if getattr(node, 'line', None) is not None:
        obj["line"] = node.line
    return obj


def ast_to_obj(node: Any) -> Any:
    if isinstance(node, Program):
        return {"type": "Program", "body": [ast_to_obj(n) for n in node.body]}
    if isinstance(node, CastOn):
        return _with_line({"type": "CastOn", "name": node.name, "initializer": ast_to_obj(node.initializer)}, node)
    if isinstance(node, Knit):
        return _with_line({"type": "Knit", "name": node.name, "value": ast_to_obj(node.value)}, node)
    if isinstance(node, Purl):
        return _with_line({"type": "Purl", "value": ast_to_obj(node.value)}, node)
    if isinstance(node, Repeat):
        return _with_line({
            "type": "Repeat",
            "count": ast_to_obj(node.count),
            "body": [ast_to_obj(s) for s in node.body],
        }, node)
    if isinstance(node, BindOff):
        return _with_line({"type": "BindOff"}, node)
    if isinstance(node, IntegerLiteral):
        return _with_line({"type": "IntegerLiteral", "value": node.value}, node)
    if isinstance(node, Variable):
        return _with_line({"type": "Variable", "name": node.name}, node)
    if isinstance(node, BinaryOp):
        return _with_line({
            "type": "BinaryOp",
            "op": node.op,
            "left": ast_to_obj(node.left),
            "right": ast_to_obj(node.right),
        }, node)

    raise TypeError(f"Unsupported node for serialization: {type(node).__name__}")


def ast_from_obj(obj: Any) -> Any:
    if not isinstance(obj, dict):
        raise TypeError("Invalid AST object")
    t = obj.get("type")
    line = obj.get("line")
    if t == "Program":
        return Program(body=tuple(ast_from_obj(n) for n in obj["body"]))
    if t == "CastOn":
        return CastOn(name=obj["name"], initializer=ast_from_obj(obj["initializer"]), line=line)
    if t == "Knit":
        return Knit(name=obj["name"], value=ast_from_obj(obj["value"]), line=line)
    if t == "Purl":
        return Purl(value=ast_from_obj(obj["value"]), line=line)
    if t == "Repeat":
        return Repeat(
            count=ast_from_obj(obj["count"]),
            body=tuple(ast_from_obj(s) for s in obj["body"]),
            line=line,
        )
    if t == "BindOff":
        return BindOff(line=line)
    if t == "IntegerLiteral":
        return IntegerLiteral(value=int(obj["value"]), line=line)
    if t == "Variable":
        return Variable(name=obj["name"], line=line)
    if t == "BinaryOp":
        if obj["op"] not in ('+', '-', '*', '/'):
            raise ValueError(f"Unknown operator in AST: {obj['op']!r}")
        return BinaryOp(op=obj["op"], left=ast_from_obj(obj["left"]), right=ast_from_obj(obj["right"]), line=line)

    raise ValueError(f"Unknown AST node type: {t}")
