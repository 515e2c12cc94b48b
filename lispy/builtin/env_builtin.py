"""Built-in functions for the Lispy runtime environment.

This module defines arithmetic, variable binding, lambda construction, list
processing, equality predicates, conditionals and printing, plus the
registration utility that installs them in the root environment.

Every builtin has the signature (env, args) and validates its own arguments by
raising a LispyError; the application engine turns that into an Error value.
"""
from __future__ import annotations

from typing import Callable

from lispy import LispValue
from lispy.errors import (
    LispyArityError,
    LispyInvalidSymbol,
    LispyOverflowError,
    LispyTypeError,
    LispyZeroDivision,
)
from lispy.types import VOID
from lispy.types.builtin import Builtin
from lispy.types.environment import Environment
from lispy.types.expr import QExpr, SExpr
from lispy.types.nil import NilType, T, boolean
from lispy.types.no_value import NoValue
from lispy.types.number import Number, in_int64_range
from lispy.types.symbol import Symbol
from lispy.types.value import identity_equals, list_items, render, structural_equals
from lispy.evaluation.evaluator import evaluate
from lispy.evaluation.special_forms.cond_form import evaluate_clauses
from lispy.evaluation.special_forms.lambda_form import make_lambda


def _expect_arity(name: str, args: list[LispValue], n: int) -> None:
    if len(args) != n:
        plural = "argument" if n == 1 else "arguments"
        raise LispyArityError(f"{name} expects exactly {n} {plural}, got {len(args)}")


# -------------------------------
# Arithmetic
# -------------------------------
def _checked(n: int) -> int:
    if not in_int64_range(n):
        raise LispyOverflowError("Integer overflow")
    return n


def _trunc_div(x: int, y: int) -> int:
    # 64-bit integer division rounds toward zero, unlike Python's floor division
    q = abs(x) // abs(y)
    return q if (x < 0) == (y < 0) else -q


def _fold(op: str, args: list[LispValue]) -> Number:
    for arg in args:
        if not isinstance(arg, Number):
            raise LispyTypeError("Non-number")
    if not args:
        raise LispyArityError("No arguments")

    x = args[0].value
    if op == "-" and len(args) == 1:
        return Number(_checked(-x))

    for arg in args[1:]:
        y = arg.value
        if op == "+":
            x += y
        elif op == "-":
            x -= y
        elif op == "*":
            x *= y
        elif op == "/":
            if y == 0:
                raise LispyZeroDivision("Division by zero")
            x = _trunc_div(x, y)
        x = _checked(x)
    return Number(x)


def add(env: Environment, args: list[LispValue]) -> LispValue:
    """Return the sum of all arguments."""
    return _fold("+", args)


def sub(env: Environment, args: list[LispValue]) -> LispValue:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    return _fold("-", args)


def mul(env: Environment, args: list[LispValue]) -> LispValue:
    """Return the product of all arguments."""
    return _fold("*", args)


def div(env: Environment, args: list[LispValue]) -> LispValue:
    """Divide left-to-right, truncating; errors on a zero divisor at any step."""
    return _fold("/", args)


# -------------------------------
# Variables
# -------------------------------
def _bind_pairs(
    args: list[LispValue], bind: Callable[[Symbol, LispValue], None], name: str
) -> LispValue:
    if not args:
        raise LispyArityError(f"{name} expects a list of names followed by values")
    names = list_items(args[0])
    if names is None:
        raise LispyTypeError(f"{name} first argument must be a list of symbols, got {args[0]}")
    values = args[1:]
    if len(names) != len(values):
        raise LispyArityError(
            f"{name} got {len(names)} names but {len(values)} values"
        )
    # Validate every target before binding any of them
    for sym in names:
        if not isinstance(sym, Symbol):
            raise LispyInvalidSymbol(f"Cannot define non-symbol {sym}")
    for sym, value in zip(names, values):
        bind(sym, value)
    return VOID


def define(env: Environment, args: list[LispValue]) -> LispValue:
    """(def '(a b) 1 2): bind each name in the root environment."""
    return _bind_pairs(args, env.bind_global, "def")


def put(env: Environment, args: list[LispValue]) -> LispValue:
    """(set '(a b) 1 2): bind each name in the calling frame only."""
    return _bind_pairs(args, env.bind_local, "set")


def lambda_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    _expect_arity("lambda", args, 2)
    return make_lambda(env, args[0], args[1])


# -------------------------------
# List operations
# -------------------------------
def _items(name: str, value: LispValue) -> tuple[LispValue, ...]:
    items = list_items(value)
    if items is None:
        raise LispyTypeError(f"{name} expects a list, got {value}")
    if not items:
        raise LispyTypeError(f"{name} passed an empty list")
    return items


def car(env: Environment, args: list[LispValue]) -> LispValue:
    """Return the first element of a list."""
    _expect_arity("car", args, 1)
    return _items("car", args[0])[0]


def cdr(env: Environment, args: list[LispValue]) -> LispValue:
    """Return everything after the first element, as an SExpr."""
    _expect_arity("cdr", args, 1)
    return SExpr(_items("cdr", args[0])[1:])


def list_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """Wrap the (already evaluated) arguments into a quoted list."""
    return QExpr(args)


def eval_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """(eval 'expr): evaluate quoted data as code in the calling environment.

    Nested single quotes are peeled off first; a value that is not quoted is
    simply evaluated again, so atoms come back unchanged.
    """
    _expect_arity("eval", args, 1)
    expr = args[0]
    if not isinstance(expr, QExpr):
        return evaluate(expr, env)
    while len(expr.cells) == 1 and isinstance(expr.cells[0], QExpr):
        expr = expr.cells[0]
    return evaluate(SExpr(expr.cells), env)


def join(env: Environment, args: list[LispValue]) -> LispValue:
    """Concatenate quoted lists, keeping their cells as they are."""
    joined: list[LispValue] = []
    for arg in args:
        if not isinstance(arg, QExpr):
            raise LispyTypeError(f"join expects quoted list arguments, got {arg}")
        joined.extend(arg.cells)
    return QExpr(joined)


def cons(env: Environment, args: list[LispValue]) -> LispValue:
    """Concatenate lists like join, but splice nested SExpr cells and skip Nil.

    (cons '1 '(2 3)) => '1 2 3
    """
    joined: list[LispValue] = []
    for arg in args:
        if isinstance(arg, NilType):
            continue
        if not isinstance(arg, (QExpr, SExpr)):
            raise LispyTypeError(f"cons expects list or nil arguments, got {arg}")
        for cell in arg.cells:
            if isinstance(cell, SExpr):
                joined.extend(cell.cells)
            else:
                joined.append(cell)
    return QExpr(joined)


# -------------------------------
# Equality and predicates
# -------------------------------
def eq(env: Environment, args: list[LispValue]) -> LispValue:
    """T for matching atoms (numbers, symbols, T, NIL); lists are never eq."""
    _expect_arity("eq", args, 2)
    return boolean(identity_equals(args[0], args[1]))


def equal(env: Environment, args: list[LispValue]) -> LispValue:
    """T if both arguments are structurally equal, else NIL."""
    _expect_arity("equal", args, 2)
    return boolean(structural_equals(args[0], args[1]))


def neq(env: Environment, args: list[LispValue]) -> LispValue:
    _expect_arity("neq", args, 2)
    return boolean(not structural_equals(args[0], args[1]))


def null(env: Environment, args: list[LispValue]) -> LispValue:
    """T for NIL or an empty list, else NIL."""
    _expect_arity("null", args, 1)
    x = args[0]
    if isinstance(x, NilType):
        return T
    items = list_items(x)
    return boolean(items is not None and len(items) == 0)


def cond(env: Environment, args: list[LispValue]) -> LispValue:
    """Builtin cond over quoted clauses: (cond '(test body) ...)."""
    return evaluate_clauses(args, env, evaluate)


def print_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """Print space-separated renderings of args followed by newline; returns NoValue."""
    print(" ".join(render(a) for a in args))
    return NoValue


BUILTINS: dict[str, Callable[[Environment, list[LispValue]], LispValue]] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "def": define,
    "=": put,
    "set": put,
    "setq": put,
    "\\": lambda_builtin,
    "lambda": lambda_builtin,
    "defun": lambda_builtin,
    "car": car,
    "head": car,  # alias for car
    "cdr": cdr,
    "tail": cdr,  # alias for cdr
    "list": list_builtin,
    "eval": eval_builtin,
    "join": join,
    "cons": cons,
    "eq": eq,
    "equal": equal,
    "neq": neq,
    "null": null,
    "cond": cond,
    "print": print_builtin,
}


def register(env: Environment) -> None:
    """Register all builtin functions into the given environment."""
    env.update({Symbol(name): Builtin(name, fn) for name, fn in BUILTINS.items()})
