"""Interactive mode for the Knitlang interpreter. Uses cmd as backend."""

import cmd

from .errors import KnitError
from .interpreter import Interpreter, run_line


class Shell(cmd.Cmd):
    """Knitlang REPL. Each line runs against the same environment."""
    intro = ("KNITLANG v2 - type 'exit' to quit. "
             "Try an example program as a .knit file and pass it as an argument.")
    prompt = "knit> "

    def __init__(self, interpreter=None, backend='recursive', *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.interpreter = interpreter if interpreter is not None else Interpreter()
        # purl values are echoed as each statement runs
        if self.interpreter.stdout is None:
            self.interpreter.stdout = self.stdout
        self.backend = backend

    def default(self, line):
        """Runs the statements on the line and prints what they purl."""
        try:
            run_line(line, self.interpreter, self.backend)
        except KnitError as e:
            print(e.format(), file=self.stdout)

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return ""

    def do_EOF(self, arg):
        """Exits interpreter."""
        print(file=self.stdout)
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True

    do_quit = do_exit
