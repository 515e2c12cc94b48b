from __future__ import annotations


class Error:
    """A propagating failure carried as data rather than raised."""

    __slots__ = ("message",)

    def __init__(self, message: str):
        self.message = message

    def __eq__(self, other) -> bool:
        return isinstance(other, Error) and self.message == other.message

    def __hash__(self) -> int:
        return hash(("Error", self.message))

    def __repr__(self):
        return f"Error({self.message!r})"

    def __str__(self):
        return f"Error: {self.message}"
