"""Core evaluator for the lispoo interpreter.

Dispatches special forms before ordinary function application. Evaluation is
plain direct recursion; depth is bounded only by the host stack.
"""

from __future__ import annotations

import logging

from lispoo import SExpression, LispValue
from lispoo.errors import LispooTypeError, LispooUnboundSymbol, LispooUnknownSymbol
from lispoo.evaluation.apply import apply
from lispoo.evaluation.special_forms import SPECIAL_FORMS
from lispoo.types.environment import Environment
from lispoo.types.lambda_fn import Lambda
from lispoo.types.nil import Nil, NilType
from lispoo.types.symbol import Symbol

logger = logging.getLogger("lispoo.evaluator")


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` in `env` and return the resulting value."""
    match expr:
        case bool():
            raise LispooTypeError(f"Cannot evaluate host boolean {expr!r}")
        case int() | float():
            return expr
        case Symbol():
            return lookup_value(expr, env)
        case []:
            raise LispooTypeError("Cannot evaluate an empty list")
        case [head, *tail]:
            if not isinstance(head, Symbol):
                raise LispooTypeError(
                    f"Head of a form must be a symbol, got {type(head).__name__}"
                )
            special = SPECIAL_FORMS.get(head)
            if special is not None:
                return special(tail, env, evaluate)
            fn = resolve_callable(head, env)
            # Arguments are evaluated in the caller's environment, left to right
            args = [evaluate(arg, env) for arg in tail]
            return apply(fn, args, env, evaluate)
        case NilType() | Lambda():
            return expr
        case _ if callable(expr):
            return expr
    raise LispooTypeError(f"Cannot evaluate {expr!r}")


def lookup_value(name: Symbol, env: Environment) -> LispValue:
    """Resolve a symbol in value position; unbound names yield Nil unless strict."""
    owner = env.find(name)
    if owner is None:
        if env.strict_unbound:
            raise LispooUnboundSymbol(f"Unbound symbol: {name}")
        return Nil
    return owner.vars[name]


def resolve_callable(head: Symbol, env: Environment) -> LispValue:
    """Resolve the head of a call, separating unbound names from non-callables."""
    owner = env.find(head)
    if owner is None:
        raise LispooUnknownSymbol(f"Unknown symbol: {head}")
    fn = owner.vars[head]
    if not (isinstance(fn, Lambda) or callable(fn)):
        raise LispooTypeError(f"Can't call symbol: {head} is not callable")
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("call %s (depth %d)", head, env.depth())
    return fn
