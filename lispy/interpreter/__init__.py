from __future__ import annotations
import logging
import sys

from lispy import LispValue
from lispy.config import get_recursion_limit
from lispy.reader.parser import read
from lispy.types import VOID, NoValue, render
from lispy.types.environment import Environment
from lispy.builtin.env_builtin import register
from lispy.evaluation.evaluator import evaluate


class Interpreter:
    """
    Orchestrates reading and evaluating Lispy code.
    Owns the root Environment, created once and kept across calls.
    """

    def __init__(self, env: Environment | None = None):
        self._logger = logging.getLogger(__name__)
        limit = get_recursion_limit()
        if sys.getrecursionlimit() < limit:
            self._logger.debug("Raising recursion limit to %d", limit)
            sys.setrecursionlimit(limit)
        if env is None:
            env = Environment()
            register(env)
        self.env: Environment = env

    def eval(self, code: str) -> list[LispValue]:
        """Evaluate every top-level form in `code`; one result per form.

        Raises LispySyntaxError if the source cannot be read.
        """
        forms = read(code)
        results: list[LispValue] = []
        for expr in forms:
            self._logger.debug("Evaluating %s", expr)
            results.append(evaluate(expr, self.env))
        return results

    def eval_one(self, code: str) -> LispValue:
        """Evaluate `code` and return the last result, or () for empty input."""
        results = self.eval(code)
        if not results:
            return VOID
        return results[-1]

    def run(self, code: str) -> list[str]:
        """Evaluate `code` and render each result the way the printer shows it.

        NoValue results (from print) produce no line.
        """
        return [render(result) for result in self.eval(code) if result is not NoValue]
