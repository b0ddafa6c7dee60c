from lispoo.reader.lexer import tokenize
from lispoo.reader.parser import TokenStream, parse, parse_all, parse_atom, read

__all__ = ["tokenize", "TokenStream", "parse", "parse_all", "parse_atom", "read"]
