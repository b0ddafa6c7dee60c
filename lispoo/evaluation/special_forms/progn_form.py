from lispoo import EvaluatorFn
from lispoo import SExpression, LispValue
from lispoo.types.environment import Environment
from lispoo.types.nil import Nil


def progn_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    result: LispValue = Nil
    for e in tail:
        result = evaluate_fn(e, env)
    return result
