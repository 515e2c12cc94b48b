from __future__ import annotations


class NilType:
    """Canonical empty/false value, printed as NIL."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "NIL"
    def __bool__(self): return False

    # Equal only to Nil
    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash("NIL")


class TrueType:
    """Canonical truth value, printed as T."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "T"

    def __eq__(self, other):
        return isinstance(other, TrueType)

    def __hash__(self):
        return hash("T")


Nil = NilType()
T = TrueType()


def boolean(flag: bool) -> TrueType | NilType:
    """Map a Python bool onto the T / Nil pair."""
    return T if flag else Nil
