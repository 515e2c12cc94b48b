from lispy import LispValue, EvaluatorFn
from lispy.errors import LispyArityError, LispyTypeError
from lispy.types.environment import Environment
from lispy.types.expr import QExpr, SExpr
from lispy.types.lambda_fn import Lambda
from lispy.types.symbol import Symbol
from lispy.types.value import list_items


def make_lambda(env: Environment, formals: LispValue, body: LispValue) -> Lambda:
    """Build a Lambda capturing a fresh, empty frame under `env`.

    `formals` may be bare `(a b)`, quoted `'(a b)`, or one list wrapped in
    another; `body` may be an SExpr or a QExpr.
    """
    names = list_items(formals)
    if names is None:
        raise LispyTypeError(f"Formals must be a list, got {formals}")
    if len(names) == 1 and isinstance(names[0], (SExpr, QExpr)):
        names = list_items(names[0])
    for name in names:
        if not isinstance(name, Symbol):
            raise LispyTypeError(f"Formal should be a symbol, got {name}")

    if isinstance(body, SExpr):
        body = QExpr([body])
    elif not isinstance(body, QExpr):
        raise LispyTypeError(f"Body must be a list, got {body}")

    return Lambda(Environment(outer=env), QExpr(names), body)


def lambda_form(tail: tuple[LispValue, ...], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """(\\ (formals...) body)"""
    if len(tail) != 2:
        raise LispyArityError("lambda expects exactly 2 arguments: formals and body")
    return make_lambda(env, tail[0], tail[1])
