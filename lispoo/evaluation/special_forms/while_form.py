from lispoo import EvaluatorFn
from lispoo import SExpression, LispValue
from lispoo.builtin.numeric import is_true
from lispoo.evaluation.special_forms.arity import expect_length
from lispoo.types.environment import Environment
from lispoo.types.nil import Nil


def while_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (while cond body)
    Re-evaluates cond before every iteration. There is no iteration cap.
    """
    expect_length("while", tail, 3)
    cond, body = tail
    while is_true(evaluate_fn(cond, env), "while condition"):
        evaluate_fn(body, env)
    return Nil
