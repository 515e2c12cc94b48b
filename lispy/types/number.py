from __future__ import annotations

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


class Number:
    """A signed 64-bit integer value."""

    __slots__ = ("value",)

    def __init__(self, value: int):
        self.value = value

    def __eq__(self, other) -> bool:
        return isinstance(other, Number) and self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self):
        return f"Number({self.value})"

    def __str__(self):
        return str(self.value)


def in_int64_range(n: int) -> bool:
    return INT64_MIN <= n <= INT64_MAX
