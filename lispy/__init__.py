# Core type aliases for the Lispy data model.
# Every runtime value is an instance of one of the classes in lispy.types:
# Number, Symbol, Error, Builtin, Lambda, SExpr, QExpr and the T / Nil singletons.
#
# Naming guidance:
# - LispValue: use in evaluator/runtime code to denote any of the above.
# - BuiltinFn: the native signature every builtin procedure implements.

from typing import Any, Callable

__version__ = "0.1.0"

# Runtime value alias
LispValue = Any

# Native procedure signature: (env, evaluated args) -> value
BuiltinFn = Callable[..., LispValue]

# Evaluator function type: passed into special forms so they can recurse
EvaluatorFn = Callable[..., LispValue]
