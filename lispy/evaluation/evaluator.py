"""Core evaluator for the Lispy interpreter.

Implements symbol resolution, special-form dispatch and generic application.
`evaluate` is total: every failure comes back as an Error value, and the first
Error met while evaluating a sequence is returned without touching the rest.
"""

from __future__ import annotations

from lispy import LispValue
from lispy.errors import LispyError, LispyUnboundSymbol
from lispy.types.environment import Environment
from lispy.types.error_value import Error
from lispy.types.expr import SExpr
from lispy.types.nil import Nil, T
from lispy.types.symbol import Symbol
from lispy.evaluation.apply import apply
from lispy.evaluation.special_forms import SPECIAL_FORMS

# Case-sensitive literal names resolved before any environment lookup
RESERVED_LITERALS = {
    Symbol("T"): T,
    Symbol("t"): T,
    Symbol("nil"): Nil,
}


def evaluate(expr: LispValue, env: Environment) -> LispValue:
    """Reduce `expr` to a value in `env`."""
    match expr:
        case Symbol():
            if expr in RESERVED_LITERALS:
                return RESERVED_LITERALS[expr]
            try:
                return env.lookup(expr)
            except LispyUnboundSymbol as exc:
                return Error(str(exc))
        case SExpr():
            return evaluate_sexpr(expr, env)

    # --- Everything else evaluates to itself ---
    return expr


def evaluate_sexpr(expr: SExpr, env: Environment) -> LispValue:
    cells = expr.cells
    if not cells:
        return expr

    # --- Special forms handling: operands are passed unevaluated ---
    head = cells[0]
    if isinstance(head, Symbol) and head in SPECIAL_FORMS:
        try:
            return SPECIAL_FORMS[head](cells[1:], env, evaluate)
        except LispyError as exc:
            return Error(str(exc))

    evaluated: list[LispValue] = []
    for cell in cells:
        val = evaluate(cell, env)
        if isinstance(val, Error):
            return val
        evaluated.append(val)

    # A singleton list evaluates to its only element, uncalled
    if len(evaluated) == 1:
        return evaluated[0]

    return apply(evaluated[0], evaluated[1:], env, evaluate)
