"""Built-in functions for the lispoo runtime environment.

Every builtin is a Python callable invoked as fn(env, args) with arguments
already evaluated in the caller's environment, so `and`/`or` never
short-circuit. Numeric operators are registered under a word name and under
the operator spelling.
"""
from __future__ import annotations

import sys
from typing import Callable, TextIO

from lispoo import LispValue
from lispoo.builtin import numeric
from lispoo.errors import LispooArityError
from lispoo.printer import to_lisp_string
from lispoo.types.environment import Environment
from lispoo.types.nil import Nil
from lispoo.types.symbol import Symbol

Builtin = Callable[[Environment, list[LispValue]], LispValue]

# (word name, operator name, implementation)
NUMERIC_BUILTINS: list[tuple[str, str, Callable[[LispValue, LispValue], LispValue]]] = [
    ("add", "+", numeric.add),
    ("subtract", "-", numeric.subtract),
    ("multiply", "*", numeric.multiply),
    ("divide", "/", numeric.divide),
    ("equal", "==", numeric.equal),
    ("greater", ">", numeric.greater),
    ("less", "<", numeric.less),
    ("greater-or-equal", ">=", numeric.greater_or_equal),
    ("less-or-equal", "<=", numeric.less_or_equal),
    ("and", "&&", numeric.logical_and),
    ("or", "||", numeric.logical_or),
]


def binary(name: str, fn: Callable[[LispValue, LispValue], LispValue]) -> Builtin:
    """Wrap a two-operand function as a builtin with an exact arity check."""

    def builtin(env: Environment, args: list[LispValue]) -> LispValue:
        if len(args) != 2:
            raise LispooArityError(f"{name} requires exactly 2 arguments, got {len(args)}")
        return fn(args[0], args[1])

    builtin.__name__ = f"builtin_{fn.__name__}"
    builtin.__qualname__ = builtin.__name__
    return builtin


def make_message(out: TextIO | None = None) -> Builtin:
    """Build the `message` builtin writing to `out` (stdout when None)."""

    def message(env: Environment, args: list[LispValue]) -> LispValue:
        """Print each argument on its own line in canonical form; returns nil."""
        if not args:
            raise LispooArityError("message requires at least 1 argument")
        sink = out if out is not None else sys.stdout
        for arg in args:
            sink.write(to_lisp_string(arg))
            sink.write("\n")
        return Nil

    return message


def car(env: Environment, args: list[LispValue]) -> LispValue:
    """Return the first evaluated argument."""
    if not args:
        raise LispooArityError("car requires at least 1 argument")
    return args[0]


def cdr(env: Environment, args: list[LispValue]) -> LispValue:
    """Return a fresh list of every evaluated argument but the first."""
    if not args:
        raise LispooArityError("cdr requires at least 1 argument")
    return list(args[1:])


def builtins(out: TextIO | None = None) -> dict[Symbol, Builtin]:
    table: dict[Symbol, Builtin] = {}
    for word, op, fn in NUMERIC_BUILTINS:
        wrapped = binary(word, fn)
        table[Symbol(word)] = wrapped
        table[Symbol(op)] = wrapped
    table[Symbol("message")] = make_message(out)
    table[Symbol("car")] = car
    table[Symbol("cdr")] = cdr
    return table


def register(env: Environment, out: TextIO | None = None) -> Environment:
    """Install every builtin into `env` (normally the root environment)."""
    for name, fn in builtins(out).items():
        env.put(name, fn)
    return env
