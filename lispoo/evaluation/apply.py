"""Application engine for lispoo.

Centralizes how evaluated arguments are handed to a callable value:
- Lambda: exact arity, fresh child of the captured environment, body
  evaluated there.
- Builtins: Python callables registered in the root environment, invoked as
  fn(env, args).
"""

from __future__ import annotations

from lispoo import LispValue, EvaluatorFn
from lispoo.errors import LispooTypeError
from lispoo.types.environment import Environment
from lispoo.types.lambda_fn import Lambda


def apply_lambda(fn: Lambda, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply a Lambda to already-evaluated arguments."""
    new_env = fn.extend_env(args)
    return evaluate_fn(fn.body, new_env)


def apply(
    fn: LispValue,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply `fn` to `args`; `env` is the caller's environment."""
    if isinstance(fn, Lambda):
        return apply_lambda(fn, args, evaluate_fn)
    if callable(fn):
        return fn(env, args)
    raise LispooTypeError(f"{fn!r} is not callable")
