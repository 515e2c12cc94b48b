"""Runtime environment for Lispy.

The Environment stores bindings of Symbols to evaluated Lisp values and supports
nested scopes via an `outer` link. Frames are shared, never copied: several
closures may hold the same frame, and a rebinding made through any of them is
seen by all.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from lispy import LispValue
from lispy.errors import LispyInvalidSymbol, LispyUnboundSymbol
from lispy.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def root(self) -> Environment:
        """Return the outermost (parentless) frame of this chain."""
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def bind_local(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame only, overwriting any previous binding.

        Raises LispyInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise LispyInvalidSymbol(f"Cannot define non-symbol {name}")
        self.vars[name] = value

    def bind_global(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in the root frame, whatever the depth of this one."""
        self.root().bind_local(name, value)

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, searching outward through parents.

        Raises LispyUnboundSymbol if no frame in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise LispyUnboundSymbol(str(name))
        return env.vars[name]

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.bind_local(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"
