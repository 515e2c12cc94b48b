from __future__ import annotations


class NoValueType:
    """Result of side-effecting builtins such as print. Printers skip it."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "NoValue"
    def __str__(self): return ""

    # Equal only to itself, never to () or Nil
    def __eq__(self, other):
        return other is self

    def __hash__(self):
        return hash("NoValue")


NoValue = NoValueType()
