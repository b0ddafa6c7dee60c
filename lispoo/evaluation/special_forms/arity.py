from lispoo import SExpression
from lispoo.errors import LispooArityError, LispooTypeError
from lispoo.types.symbol import Symbol


def expect_length(form: str, tail: list[SExpression], length: int) -> None:
    """Check a form's length, counting the head symbol."""
    if len(tail) + 1 != length:
        raise LispooArityError(
            f"{form} requires a form of length {length}, got {len(tail) + 1}"
        )


def expect_symbol(form: str, value: SExpression) -> Symbol:
    if not isinstance(value, Symbol):
        raise LispooTypeError(f"{form} expects a symbol, got {value!r}")
    return value
