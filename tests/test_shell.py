import io

from knitlang.environment import Environment
from knitlang.interpreter import Interpreter
from knitlang.shell import Shell


def run_shell(text, **kwargs):
    stdout = io.StringIO()
    shell = Shell(stdin=io.StringIO(text), stdout=stdout, **kwargs)
    shell.use_rawinput = False
    shell.cmdloop()
    lines = stdout.getvalue().replace(Shell.prompt, '').splitlines()
    return shell, lines


def test_shell_keeps_bindings_and_reports_errors():
    shell, lines = run_shell(
        'cast_on x = 1;\n'
        'repeat 2 { knit x = x * 3; purl x; }\n'
        'purl y;\n'
        '\n'
        'purl x;\n'
        'exit\n'
        'purl 0;\n'
    )
    assert lines[0] == Shell.intro
    assert lines[1:] == ['3', '9', 'NameError at line 1: undefined variable y', '9']
    assert shell.interpreter.environment.as_dict() == {'x': 9}


def test_shell_quits_on_eof():
    _, lines = run_shell('purl 1;\n')
    assert '1' in lines


def test_shell_quit_command():
    _, lines = run_shell('quit\npurl 1;\n')
    assert lines == [Shell.intro]


def test_shell_uses_given_interpreter_and_backend():
    interpreter = Interpreter(environment=Environment({'yarn': 4}))
    shell, lines = run_shell('purl yarn * 2;\n', interpreter=interpreter, backend='lark')
    assert shell.interpreter is interpreter
    assert '8' in lines


def test_shell_reports_parse_errors_and_continues():
    _, lines = run_shell('purl 1 +;\npurl 2;\n')
    assert lines[1].startswith('ParseError')
    assert lines[2] == '2'


def test_shell_shows_values_printed_before_an_error():
    _, lines = run_shell('purl 1; purl 1/0;\n')
    assert lines[1:3] == ['1', 'DivisionByZero at line 1: division by zero']


def test_shell_echoes_through_interpreter_stream():
    shell, _ = run_shell('')
    assert shell.interpreter.stdout is shell.stdout
