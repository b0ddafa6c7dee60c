"""Closure representation for lispoo."""

from __future__ import annotations

from io import StringIO

from lispoo import SExpression, LispValue
from lispoo.errors import LispooArityError
from lispoo.types.environment import Environment
from lispoo.types.symbol import Symbol


class Lambda:
    """A first-class function: formal parameters, body, and captured env."""

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: list[Symbol], body: SExpression, env: Environment):
        self.formals: list[Symbol] = list(formals)
        self.body: SExpression = body
        # Lexical environment active where the lambda form was evaluated
        self.env: Environment = env

    @property
    def arity(self) -> int:
        return len(self.formals)

    def extend_env(self, args: list[LispValue]) -> Environment:
        """Bind evaluated `args` to the formals in a fresh child of the captured env."""
        if len(args) != self.arity:
            raise LispooArityError(
                f"lambda expects {self.arity} argument(s), got {len(args)}"
            )
        new_env = Environment(outer=self.env)
        for name, value in zip(self.formals, args):
            new_env.put(name, value)
        return new_env

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(lambda (")
            buffer.write(" ".join(str(f) for f in self.formals))
            buffer.write(") ...)")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Lambda {self} at {id(self):#x}>"
