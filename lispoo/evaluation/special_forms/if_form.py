from lispoo import EvaluatorFn
from lispoo import SExpression, LispValue
from lispoo.builtin.numeric import is_true
from lispoo.evaluation.special_forms.arity import expect_length
from lispoo.types.environment import Environment


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (if cond then else)
    expect_length("if", tail, 4)
    cond, then_expr, else_expr = tail

    if is_true(evaluate_fn(cond, env), "if condition"):
        return evaluate_fn(then_expr, env)
    return evaluate_fn(else_expr, env)
