from lispy import LispValue, EvaluatorFn
from lispy.errors import LispyArityError
from lispy.types.environment import Environment
from lispy.types.expr import QExpr


def quote_form(tail: tuple[LispValue, ...], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """(quote x) -> 'x, with x left unevaluated."""
    if len(tail) != 1:
        raise LispyArityError("quote expects exactly 1 argument")
    return QExpr(tail)
