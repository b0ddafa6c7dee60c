"""Runtime environment for lispoo.

An Environment maps Symbols to evaluated values and links to at most one
parent (`outer`), fixed at construction. Lookups walk outward to the root;
insertions always land in the frame they are called on. Child frames are
created per lambda invocation and stay alive for as long as a closure
captured in that call references them.
"""

from __future__ import annotations

from typing import Optional

from lispoo import LispValue
from lispoo.errors import LispooTypeError
from lispoo.types.nil import Nil
from lispoo.types.symbol import Symbol


class Environment:
    """Chained mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer", "strict_unbound")

    def __init__(self, outer: Optional[Environment] = None, strict_unbound: bool | None = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer
        # Children inherit the lookup policy of the frame they extend
        if strict_unbound is None:
            strict_unbound = outer.strict_unbound if outer is not None else False
        self.strict_unbound: bool = strict_unbound

    def put(self, name: Symbol, value: LispValue) -> None:
        """Insert or overwrite `name` in this frame only."""
        if not isinstance(name, Symbol):
            raise LispooTypeError(f"Cannot bind {name!r}: not a symbol")
        self.vars[name] = value

    def find(self, name: Symbol) -> Optional[Environment]:
        """Return the nearest frame in the chain that binds `name`, or None."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def get(self, name: Symbol) -> LispValue:
        """Look up `name` from this frame outward; Nil when nothing binds it."""
        env = self.find(name)
        if env is None:
            return Nil
        return env.vars[name]

    def depth(self) -> int:
        n = 0
        env = self.outer
        while env is not None:
            n += 1
            env = env.outer
        return n

    def __repr__(self) -> str:
        return f"<Environment depth={self.depth()} vars={len(self.vars)}>"
