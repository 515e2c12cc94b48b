"""Application engine for Lispy.

This module centralizes function application semantics for the interpreter:
- Builtin procedures receive the calling environment and the evaluated args.
  Argument validation raised inside a builtin comes back as an Error value.
- Lambdas bind arguments positionally into a fresh frame under their captured
  environment. Supplying fewer arguments than formals returns a new Lambda
  closing over that frame (currying); supplying more is an arity Error.
"""

from __future__ import annotations

from lispy import LispValue, EvaluatorFn
from lispy.errors import LispyError
from lispy.types.builtin import Builtin
from lispy.types.environment import Environment
from lispy.types.error_value import Error
from lispy.types.expr import QExpr, SExpr
from lispy.types.lambda_fn import Lambda


def apply_lambda(fn: Lambda, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply a Lisp Lambda value to already-evaluated arguments."""
    formals = fn.formals.cells
    given = len(args)
    total = len(formals)
    if given > total:
        return Error(f"Function passed too many arguments. Got {given}, Expected {total}.")

    frame = Environment(outer=fn.env)
    for formal, arg in zip(formals, args):
        frame.bind_local(formal, arg)

    remaining = formals[given:]
    if remaining:
        return Lambda(frame, QExpr(remaining), fn.body)

    return evaluate_fn(SExpr(fn.body.cells), frame)


def apply(
    head: LispValue,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Builtin or a Lambda; anything else is not callable."""
    if isinstance(head, Builtin):
        try:
            return head(env, args)
        except LispyError as exc:
            return Error(str(exc))
    if isinstance(head, Lambda):
        return apply_lambda(head, args, evaluate_fn)
    return Error("S-expression starts with incorrect type")
