from lispy import LispValue, EvaluatorFn
from lispy.errors import LispyArityError, LispyTypeError
from lispy.types import VOID
from lispy.types.environment import Environment
from lispy.types.error_value import Error
from lispy.types.expr import QExpr, SExpr
from lispy.types.value import is_truthy, list_items


def _clause_cells(clause: LispValue) -> tuple[LispValue, ...]:
    if not isinstance(clause, (SExpr, QExpr)):
        raise LispyTypeError(f"Cond branches must be lists, got {clause}")
    cells = clause.cells
    # ('(test body)) and '(test body) wrap the clause one level deep
    if len(cells) == 1 and isinstance(cells[0], (SExpr, QExpr)):
        cells = list_items(cells[0])
    if len(cells) < 2:
        raise LispyArityError("Cond branch too short")
    return cells


def evaluate_clauses(clauses, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Evaluate the body of the first clause whose test is true.

    Nil and 0 are false. Returns the void () when no clause matches.
    """
    for clause in clauses:
        cells = _clause_cells(clause)
        test = evaluate_fn(cells[0], env)
        if isinstance(test, Error):
            return test
        if is_truthy(test):
            # forms after the body are never evaluated
            return evaluate_fn(cells[1], env)
    return VOID


def cond_form(tail: tuple[LispValue, ...], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """(cond (test body) ...)"""
    return evaluate_clauses(tail, env, evaluate_fn)
