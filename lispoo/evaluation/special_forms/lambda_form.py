from lispoo import EvaluatorFn
from lispoo import SExpression, LispValue
from lispoo.errors import LispooTypeError
from lispoo.evaluation.special_forms.arity import expect_length, expect_symbol
from lispoo.types.environment import Environment
from lispoo.types.lambda_fn import Lambda


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (params) body)
    expect_length("lambda", tail, 3)
    params, body = tail
    if not isinstance(params, list):
        raise LispooTypeError(f"lambda parameters must be a list, got {params!r}")
    formals = [expect_symbol("lambda parameter", p) for p in params]
    return Lambda(formals, body, env)
