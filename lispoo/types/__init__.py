from lispoo.types.nil import Nil, NilType
from lispoo.types.symbol import Symbol
from lispoo.types.environment import Environment
from lispoo.types.lambda_fn import Lambda

__all__ = ["Nil", "NilType", "Symbol", "Environment", "Lambda"]
