"""CLI entry point for the Knitlang interpreter.

Usage:
    python -m knitlang [-v|-vv|-vvv] [--parser {recursive,lark}] <program_file>
    python -m knitlang --example NAME
    python -m knitlang [-r|--repl]
    python -m knitlang --emit-ast <program_file>
    python -m knitlang --ast <ast_json_file>

Options:
  -v            Increase debug verbosity (can be repeated)
  -r, --repl    Start the interactive interpreter (default with no file)
  --example     Run examples/NAME.knit from the current directory
  --parser      Parser front end to use (default: recursive)
  --emit-ast    Parse the given .knit file and emit an AST JSON file
  --ast         Execute a previously emitted AST JSON file

Debug information is written to `debug.txt` in the current directory when
verbosity is greater than zero. Printed values go to stdout, one per line;
errors go to stderr as a single line and the exit status is 1.
"""

import argparse
import json
import sys
from pathlib import Path

from .ast_json import ast_to_obj, ast_from_obj
from .errors import KnitError
from .interpreter import Interpreter, run_source
from .parser import BACKENDS, parse_program
from .shell import Shell


def read_source(path: Path) -> str:
    if not path.exists():
        print(f"Error: file {path} not found", file=sys.stderr)
        sys.exit(1)
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def run_file(path: Path, args) -> None:
    result = run_source(read_source(path), backend=args.parser, debug_level=args.v)
    if not result.ok:
        print(result.error.format(), file=sys.stderr)
        sys.exit(1)
    for text in result.output:
        print(text)


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(prog='knitlang', description="Knitlang interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    parser.add_argument('--parser', choices=BACKENDS, default='recursive', help='parser front end to use')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('-r', '--repl', action='store_true', help='run the REPL even if no file is provided')
    group.add_argument('--example', metavar='NAME', help='run a named example from the examples/ directory')
    group.add_argument('--emit-ast', metavar='KNIT_FILE', help='emit AST JSON for the given .knit file')
    group.add_argument('--ast', metavar='AST_JSON_FILE', help='execute AST from a JSON file')
    parser.add_argument('file', nargs='?', help='Knitlang source file (.knit) to execute')
    args = parser.parse_args(argv)

    if args.example:
        run_file(Path('examples') / f"{args.example}.knit", args)
        return

    # Emit AST mode
    if args.emit_ast:
        program_file = Path(args.emit_ast)
        source = read_source(program_file)
        try:
            program = parse_program(source, args.parser)
        except KnitError as e:
            print(e.format(), file=sys.stderr)
            sys.exit(1)
        out_path = program_file.with_name(program_file.name + '.ast.json')
        with open(out_path, 'w', encoding='utf-8') as out:
            json.dump(ast_to_obj(program), out, ensure_ascii=False, indent=2)
        print(str(out_path))
        return

    # Execute from AST JSON
    if args.ast:
        ast_path = Path(args.ast)
        try:
            program = ast_from_obj(json.loads(read_source(ast_path)))
        except (KeyError, TypeError, ValueError) as e:
            print(f"Error: invalid AST file {ast_path}: {e!r}", file=sys.stderr)
            sys.exit(1)
        with Interpreter(debug_level=args.v) as interpreter:
            try:
                interpreter.run(program)
            except KnitError as e:
                print(e.format(), file=sys.stderr)
                sys.exit(1)
        for text in interpreter.output:
            print(text)
        return

    if args.file and not args.repl:
        run_file(Path(args.file), args)
        return

    with Interpreter(debug_level=args.v) as interpreter:
        Shell(interpreter, backend=args.parser).cmdloop()


if __name__ == '__main__':
    main()
