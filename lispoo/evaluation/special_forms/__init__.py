"""Registry of special forms for the lispoo evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before resolving a head symbol as a callable.
Every handler is called as handler(tail, env, evaluate_fn), where `tail` is
the form without its head symbol.
"""

from lispoo.types.symbol import Symbol
from lispoo.evaluation.special_forms.quote_form import quote_form
from lispoo.evaluation.special_forms.define_form import define_form
from lispoo.evaluation.special_forms.set_form import set_form
from lispoo.evaluation.special_forms.progn_form import progn_form
from lispoo.evaluation.special_forms.if_form import if_form
from lispoo.evaluation.special_forms.while_form import while_form
from lispoo.evaluation.special_forms.lambda_form import lambda_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("define"): define_form,
    Symbol("set!"): set_form,
    Symbol("progn"): progn_form,
    Symbol("if"): if_form,
    Symbol("while"): while_form,
    Symbol("lambda"): lambda_form,
}


def is_special_form(name: Symbol) -> bool:
    return name in SPECIAL_FORMS
