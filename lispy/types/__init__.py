from lispy.types.symbol import Symbol
from lispy.types.nil import Nil, NilType, T, TrueType, boolean
from lispy.types.no_value import NoValue, NoValueType
from lispy.types.number import Number
from lispy.types.error_value import Error
from lispy.types.expr import SExpr, QExpr
from lispy.types.builtin import Builtin
from lispy.types.environment import Environment
from lispy.types.lambda_fn import Lambda
from lispy.types.value import render, structural_equals, identity_equals, list_items, is_truthy

# The empty SExpr doubles as the void result of definitions and `print`
VOID = SExpr()

__all__ = [
    "Symbol",
    "Nil",
    "NilType",
    "T",
    "TrueType",
    "boolean",
    "NoValue",
    "NoValueType",
    "Number",
    "Error",
    "SExpr",
    "QExpr",
    "Builtin",
    "Environment",
    "Lambda",
    "render",
    "structural_equals",
    "identity_equals",
    "list_items",
    "is_truthy",
    "VOID",
]
