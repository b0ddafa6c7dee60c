# Core type aliases for the lispoo data model.
# Expressions are plain Python values: int, float, Symbol, list, Nil and Lambda.
# The same objects serve as syntax (parser output) and as runtime values.
#
# - SExpression: use in reader/parser code to denote syntactic forms.
# - LispValue:  use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

LispValue = Any
SExpression = LispValue

# Evaluator function type handed to special forms
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.1.0"
