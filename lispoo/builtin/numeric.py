"""Numeric coercion and the binary operators built on it.

Two Integers compute in the Integer domain, two Floats in the Float domain,
and a mixed pair promotes the Integer to Float. Comparison and logical
operators yield numeric truth values (1/0 or 1.0/0.0) in the coerced kind.
Integers are Python ints and do not wrap at 64 bits.
"""

from __future__ import annotations

import math
import operator
from typing import Callable

from lispoo import LispValue
from lispoo.errors import LispooArithmeticError, LispooTypeError
from lispoo.types.lambda_fn import Lambda
from lispoo.types.nil import NilType
from lispoo.types.symbol import Symbol

Number = int | float


def is_number(value: LispValue) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def type_name(value: LispValue) -> str:
    match value:
        case bool():
            return "boolean"
        case int():
            return "integer"
        case float():
            return "float"
        case Symbol():
            return "symbol"
        case list():
            return "list"
        case NilType():
            return "nil"
        case Lambda():
            return "lambda"
    return "builtin" if callable(value) else type(value).__name__


def is_true(value: LispValue, context: str = "condition") -> bool:
    """Numeric truthiness: nonzero is true. Anything non-numeric is an error."""
    if not is_number(value):
        raise LispooTypeError(f"{context} must be a number, got {type_name(value)}")
    return value != 0


def coerce(a: LispValue, b: LispValue, op_name: str) -> tuple[Number, Number, bool]:
    """Return (a, b, is_float) after applying the Integer/Float promotion rule."""
    if not is_number(a) or not is_number(b):
        raise LispooTypeError(
            f"{op_name} failed, type: {type_name(a)} {type_name(b)}"
        )
    if isinstance(a, float) or isinstance(b, float):
        return float(a), float(b), True
    return a, b, False


def _int_div(a: int, b: int) -> int:
    if b == 0:
        raise LispooArithmeticError("Integer division by zero")
    # Truncate toward zero
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _float_div(a: float, b: float) -> float:
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def arithmetic(op_name: str, int_op: Callable, float_op: Callable | None = None):
    """Build a binary arithmetic function over the coercion rule."""
    float_op = float_op or int_op

    def compute(a: LispValue, b: LispValue) -> Number:
        x, y, is_float = coerce(a, b, op_name)
        return float_op(x, y) if is_float else int_op(x, y)

    compute.__name__ = op_name
    return compute


def predicate(op_name: str, test: Callable[[Number, Number], bool]):
    """Build a binary comparison/logical function yielding a numeric truth value."""

    def compute(a: LispValue, b: LispValue) -> Number:
        x, y, is_float = coerce(a, b, op_name)
        result = test(x, y)
        return (1.0 if result else 0.0) if is_float else (1 if result else 0)

    compute.__name__ = op_name
    return compute


add = arithmetic("+", operator.add)
subtract = arithmetic("-", operator.sub)
multiply = arithmetic("*", operator.mul)
divide = arithmetic("/", _int_div, _float_div)

equal = predicate("==", operator.eq)
greater = predicate(">", operator.gt)
less = predicate("<", operator.lt)
greater_or_equal = predicate(">=", operator.ge)
less_or_equal = predicate("<=", operator.le)

logical_and = predicate("&&", lambda x, y: bool(x) and bool(y))
logical_or = predicate("||", lambda x, y: bool(x) or bool(y))
