from lispoo import EvaluatorFn
from lispoo import SExpression, LispValue
from lispoo.errors import LispooDuplicateDefinition
from lispoo.evaluation.special_forms.arity import expect_length, expect_symbol
from lispoo.types.environment import Environment
from lispoo.types.nil import Nil


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    Binds in the current frame. A name that already resolves to a non-nil
    value anywhere up the scope chain cannot be defined again.
    """
    from lispoo.evaluation.special_forms import is_special_form

    expect_length("define", tail, 3)
    name = expect_symbol("define", tail[0])
    if is_special_form(name):
        raise LispooDuplicateDefinition(f"symbol defined: {name} is a special form")
    if env.get(name) is not Nil:
        raise LispooDuplicateDefinition(f"symbol defined: {name}")

    env.put(name, evaluate_fn(tail[1], env))
    return Nil
