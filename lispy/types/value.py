"""Equality and printing contract shared by the evaluator, builtins and printer."""

from __future__ import annotations

from typing import Optional

from lispy import LispValue
from lispy.types.expr import QExpr, SExpr
from lispy.types.nil import NilType, TrueType
from lispy.types.number import Number
from lispy.types.symbol import Symbol


def render(value: LispValue) -> str:
    """Canonical text form of a value. Printers must use this verbatim."""
    return str(value)


def structural_equals(a: LispValue, b: LispValue) -> bool:
    """Structural equality; procedures are never equal to anything."""
    return a == b


def identity_equals(a: LispValue, b: LispValue) -> bool:
    """Atom-only equality used by `eq`: composite values never match."""
    match a, b:
        case Number(), Number():
            return a.value == b.value
        case Symbol(), Symbol():
            return a.id == b.id
        case TrueType(), TrueType():
            return True
        case NilType(), NilType():
            return True
    return False


def list_items(value: LispValue) -> Optional[tuple[LispValue, ...]]:
    """Cells of a list-shaped value, or None when the value is not list-shaped.

    The reader turns `'(a b)` into a QExpr wrapping one SExpr; that wrapper is
    looked through. Other QExprs (e.g. built by `list`) and SExprs are used as-is.
    """
    if isinstance(value, QExpr):
        if len(value.cells) == 1 and isinstance(value.cells[0], SExpr):
            return value.cells[0].cells
        return value.cells
    if isinstance(value, SExpr):
        return value.cells
    return None


def is_truthy(value: LispValue) -> bool:
    # Nil and zero are false, everything else (T, (), symbols...) is true
    if isinstance(value, NilType):
        return False
    if isinstance(value, Number) and value.value == 0:
        return False
    return True
