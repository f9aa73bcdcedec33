import json

import pytest

from knitlang.ast_json import ast_from_obj, ast_to_obj
from knitlang.parser import parse_program


def test_json_export_and_import_give_equal_program():
    program = parse_program('cast_on s = 0;\nrepeat 2 {\n knit s = s + 1 * 2;\n purl s / 1;\n bind_off;\n}\n')
    text = json.dumps(ast_to_obj(program))
    restored = ast_from_obj(json.loads(text))
    assert restored == program
    assert [stmt.line for stmt in restored.body] == [1, 2]
    assert restored.body[1].body[2].line == 5


def test_json_shape():
    obj = ast_to_obj(parse_program('purl x - 1;'))
    assert obj == {
        'type': 'Program',
        'body': [{
            'type': 'Purl',
            'line': 1,
            'value': {
                'type': 'BinaryOp',
                'op': '-',
                'line': 1,
                'left': {'type': 'Variable', 'name': 'x', 'line': 1},
                'right': {'type': 'IntegerLiteral', 'value': 1, 'line': 1},
            },
        }],
    }


def test_unknown_node_type():
    with pytest.raises(ValueError):
        ast_from_obj({'type': 'Cable'})


def test_unknown_operator():
    with pytest.raises(ValueError):
        ast_from_obj({'type': 'BinaryOp', 'op': '%',
                      'left': {'type': 'IntegerLiteral', 'value': 1},
                      'right': {'type': 'IntegerLiteral', 'value': 2}})


def test_not_a_node():
    with pytest.raises(TypeError):
        ast_from_obj([1, 2])
    with pytest.raises(TypeError):
        ast_to_obj('purl')
