"""Canonical textual form of lispoo values.

nil -> `nil`, integers as decimal digits, finite floats in positional
notation (repr digits, never an exponent, so the text reads back as a number),
symbols by name, callables as an opaque `<fn>: 0x...` marker, and lists as
parenthesized, space-separated renderings of their elements.
"""

from __future__ import annotations

import math
from decimal import Decimal
from io import StringIO

from lispoo import LispValue
from lispoo.types.lambda_fn import Lambda
from lispoo.types.nil import NilType
from lispoo.types.symbol import Symbol

CALLABLE_MARKER = "<fn>:"


def format_float(value: float) -> str:
    """Positional (never exponent) text for a float, always with a '.'."""
    if not math.isfinite(value):
        return repr(value)
    text = format(Decimal(repr(value)), "f")
    return text if "." in text else text + ".0"


def _write(value: LispValue, buffer: StringIO) -> None:
    match value:
        case NilType():
            buffer.write("nil")
        case int():
            buffer.write(str(value))
        case float():
            buffer.write(format_float(value))
        case Symbol():
            buffer.write(value.id)
        case list():
            buffer.write("(")
            for i, item in enumerate(value):
                if i > 0:
                    buffer.write(" ")
                _write(item, buffer)
            buffer.write(")")
        case Lambda():
            buffer.write(f"{CALLABLE_MARKER} {id(value):#x}")
        case _ if callable(value):
            buffer.write(f"{CALLABLE_MARKER} {id(value):#x}")
        case _:
            buffer.write(str(value))


def to_lisp_string(value: LispValue) -> str:
    """Render `value` in canonical form."""
    with StringIO() as buffer:
        _write(value, buffer)
        return buffer.getvalue()
