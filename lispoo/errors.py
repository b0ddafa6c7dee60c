

class LispooError(Exception):
    """ Base class for all lispoo errors"""
    pass

class LispooStartupError(LispooError):
    """ Raised when the interpreter cannot be started (bad arguments, unreadable file)"""

class LispooSyntaxError(LispooError):
    """ Raised when the source text cannot be parsed"""

class LispooArityError(LispooError):
    """ Raised when a form or function receives the wrong number of arguments"""

class LispooTypeError(LispooError):
    """ Raised when a value has the wrong type for the operation applied to it"""

class LispooDuplicateDefinition(LispooError):
    """ Raised when define targets a name already bound in the scope chain"""

class LispooUnknownSymbol(LispooError):
    """ Raised when the head of a call has no binding at all"""

class LispooUnboundSymbol(LispooError):
    """ Raised on lookup of an unbound symbol when strict lookups are enabled"""

class LispooArithmeticError(LispooError):
    """ Raised on integer division by zero"""
