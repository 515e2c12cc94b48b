from lispy import LispValue, EvaluatorFn
from lispy.errors import LispyArityError, LispyInvalidSymbol
from lispy.types import VOID
from lispy.types.environment import Environment
from lispy.types.symbol import Symbol
from lispy.evaluation.special_forms.lambda_form import make_lambda


def defun_form(tail: tuple[LispValue, ...], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """
    (defun name (formals...) body)
    The Lambda is bound in the root environment, so it is visible everywhere.
    """
    if len(tail) != 3:
        raise LispyArityError("defun requires exactly 3 arguments: name, formals and body")
    name, formals, body = tail
    if not isinstance(name, Symbol):
        raise LispyInvalidSymbol(f"defun name must be a Symbol, got {name}")
    env.bind_global(name, make_lambda(env, formals, body))
    return VOID
