"""User-defined closure values for Lispy."""

from __future__ import annotations

from lispy.types.environment import Environment
from lispy.types.expr import QExpr


class Lambda:
    """A first-class lambda with formal parameters, body, and closure env.

    ``formals`` is a QExpr of Symbols still waiting for an argument and
    ``body`` a QExpr whose cells are evaluated as an SExpr when the last
    formal is bound. ``env`` is the captured frame; partially applied lambdas
    capture the frame holding the arguments bound so far.
    """

    __slots__ = ("env", "formals", "body")

    def __init__(self, env: Environment, formals: QExpr, body: QExpr):
        self.env: Environment = env
        self.formals: QExpr = formals
        self.body: QExpr = body

    # Closures never compare equal, not even to themselves
    def __eq__(self, other) -> bool:
        return False

    __hash__ = object.__hash__

    def __str__(self) -> str:
        return f"(\\ {self.formals})"

    def __repr__(self) -> str:
        return f"Lambda(formals={self.formals!s}, body={self.body!s})"
