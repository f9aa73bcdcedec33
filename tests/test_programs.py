from pathlib import Path

import pytest

from knitlang.__main__ import main
from knitlang.interpreter import run_source

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'

EXPECTED = {
    'hello': ['1', '2', '3'],
    'rows': ['1', '3', '6', '10', '19'],
    'frog': ['9', '90', '8', '80', '7', '70', '6', '60', '5', '50',
             '4', '40', '3', '30', '2', '20', '1', '10', '0', '0', '0'],
}


@pytest.mark.parametrize('name', sorted(EXPECTED))
def test_example_program(name, capsys):
    main([str(EXAMPLES / f'{name}.knit')])
    out = capsys.readouterr().out
    assert out.splitlines() == EXPECTED[name]


@pytest.mark.parametrize('name', sorted(EXPECTED))
def test_example_program_with_lark(name, capsys):
    main(['--parser', 'lark', str(EXAMPLES / f'{name}.knit')])
    assert capsys.readouterr().out.splitlines() == EXPECTED[name]


def test_hello_stops_before_statements_after_bind_off():
    source = (EXAMPLES / 'hello.knit').read_text(encoding='utf-8')
    assert 'purl 999;' in source
    result = run_source(source)
    assert result.output == ['1', '2', '3']


def test_named_example(monkeypatch, capsys):
    monkeypatch.chdir(EXAMPLES.parent)
    main(['--example', 'hello'])
    assert capsys.readouterr().out == '1\n2\n3\n'
