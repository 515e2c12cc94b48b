from __future__ import annotations

from lispy import BuiltinFn, LispValue


class Builtin:
    """A native, non-capturing procedure stored as an ordinary value."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: BuiltinFn):
        self.name = name
        self.fn = fn

    def __call__(self, env, args: list[LispValue]) -> LispValue:
        return self.fn(env, args)

    # Procedures never compare equal, not even to themselves
    def __eq__(self, other) -> bool:
        return False

    __hash__ = object.__hash__

    def __repr__(self):
        return f"<builtin {self.name}>"

    def __str__(self):
        return "<function>"
