"""List values: SExpr (code to evaluate) and QExpr (quoted data).

Both hold an immutable tuple of cells. Equality is element-wise through each
cell's own ``__eq__``, never through tuple comparison, so procedures nested
inside lists stay unequal even when the very same object appears on both sides.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from lispy import LispValue


class _ListValue:
    __slots__ = ("cells",)

    def __init__(self, cells: Iterable[LispValue] = ()):
        self.cells: tuple[LispValue, ...] = tuple(cells)

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[LispValue]:
        return iter(self.cells)

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return False
        if len(self.cells) != len(other.cells):
            return False
        return all(a == b for a, b in zip(self.cells, other.cells))

    def __hash__(self) -> int:
        return hash((type(self).__name__, len(self.cells)))

    def __repr__(self):
        return f"{type(self).__name__}({list(self.cells)!r})"


class SExpr(_ListValue):
    """Printed as ``(v1 v2 ...)``."""

    __slots__ = ()

    def __str__(self):
        return "(" + " ".join(str(c) for c in self.cells) + ")"


class QExpr(_ListValue):
    """Printed with a leading quote and no closing delimiter: ``'v1 v2 ...``."""

    __slots__ = ()

    def __str__(self):
        return "'" + " ".join(str(c) for c in self.cells)
