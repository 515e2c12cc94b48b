"""Interactive read-eval-print loop for Lispy. Uses cmd as backend.

Every form on an input line is evaluated in one long-lived Interpreter and its
rendering printed verbatim; Error values are highlighted in red.
"""

from __future__ import annotations

import argparse
import cmd
import logging
import readline
from pathlib import Path
from typing import Optional

from termcolor import colored

from lispy import __version__
from lispy.config import get_history_file, get_log_level, get_prompt
from lispy.errors import LispySyntaxError
from lispy.interpreter import Interpreter
from lispy.types import Error, NoValue, render


class Repl(cmd.Cmd):
    """Lispy interpreter shell."""
    intro = f"Lispy Version {__version__}\nPress Ctrl+c to exit\n"
    ERROR = "red"

    def __init__(
        self,
        interpreter: Optional[Interpreter] = None,
        prompt: Optional[str] = None,
        history_file: Optional[Path] = None,
        *args,
        **kwargs,
    ):
        super().__init__(*args, **kwargs)
        self._logger = logging.getLogger(__name__)
        self.interp = interpreter if interpreter is not None else Interpreter()
        self.prompt = prompt if prompt is not None else get_prompt()
        self.history_file = history_file if history_file is not None else get_history_file()

    def evaluate_line(self, line: str) -> list[str]:
        """Evaluate every form on `line` and return the text to print for each."""
        try:
            results = self.interp.eval(line)
        except LispySyntaxError as exc:
            self._logger.info("Could not read %r: %s", line, exc)
            return [colored(f"Error: {exc}", Repl.ERROR)]
        except RecursionError:
            self._logger.warning("Recursion limit hit while evaluating %r", line)
            return [colored("Error: maximum recursion depth exceeded", Repl.ERROR)]
        return [
            colored(render(result), Repl.ERROR) if isinstance(result, Error) else render(result)
            for result in results
            if result is not NoValue
        ]

    def default(self, line):
        """Evaluates arbitrary Lispy input."""
        for text in self.evaluate_line(line):
            print(text)

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return False

    def do_EOF(self, arg):
        """Exits interpreter."""
        print("CTRL-D")
        return True

    def preloop(self):
        try:
            readline.read_history_file(self.history_file)
        except FileNotFoundError:
            print("No previous history.")
        except OSError as exc:
            self._logger.warning("Could not load history from %s: %s", self.history_file, exc)

    def postloop(self):
        try:
            readline.write_history_file(self.history_file)
        except OSError as exc:
            self._logger.warning("Could not save history to %s: %s", self.history_file, exc)


def _configure_logging() -> None:
    level = get_log_level()
    if not isinstance(logging.getLevelName(level), int):
        level = "WARNING"
    logging.basicConfig(level=level)


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="lispy", description="Lispy interpreter")
    parser.add_argument("-e", "--eval", dest="expr", help="evaluate EXPR, print the results and exit")
    args = parser.parse_args(argv)

    _configure_logging()

    repl = Repl()
    if args.expr is not None:
        for text in repl.evaluate_line(args.expr):
            print(text)
        return 0

    try:
        repl.cmdloop()
    except KeyboardInterrupt:
        print("CTRL-C")
        repl.postloop()
    return 0
