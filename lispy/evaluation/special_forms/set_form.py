from lispy import LispValue, EvaluatorFn
from lispy.errors import LispyArityError, LispyInvalidSymbol
from lispy.types import VOID
from lispy.types.environment import Environment
from lispy.types.error_value import Error
from lispy.types.symbol import Symbol


def setq_form(tail: tuple[LispValue, ...], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """(setq var expr): bind the value of expr to var in the current frame."""
    if len(tail) != 2:
        raise LispyArityError("setq requires exactly 2 arguments: (setq var value)")
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise LispyInvalidSymbol(f"setq first argument must be a Symbol, got {var_sym}")
    value = evaluate_fn(val_expr, env)
    if isinstance(value, Error):
        return value
    env.bind_local(var_sym, value)
    return VOID
