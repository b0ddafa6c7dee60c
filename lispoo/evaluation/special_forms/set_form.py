from lispoo import EvaluatorFn
from lispoo import SExpression, LispValue
from lispoo.evaluation.special_forms.arity import expect_length, expect_symbol
from lispoo.types.environment import Environment
from lispoo.types.nil import Nil


def set_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (set! var value) writes to the current frame, shadowing any outer binding
    expect_length("set!", tail, 3)
    var_sym = expect_symbol("set!", tail[0])
    env.put(var_sym, evaluate_fn(tail[1], env))
    return Nil
