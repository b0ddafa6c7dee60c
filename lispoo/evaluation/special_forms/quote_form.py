from lispoo import SExpression, LispValue, EvaluatorFn
from lispoo.evaluation.special_forms.arity import expect_length
from lispoo.types.environment import Environment


def quote_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(quote expr) returns expr unevaluated."""
    expect_length("quote", tail, 2)
    return tail[0]
