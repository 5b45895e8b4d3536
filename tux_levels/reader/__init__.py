"""Document Access Layer: S-expression level documents as named key/value trees."""

from .document import ReaderDocument, ReaderMapping, ReaderObject
from .lexer import SList, Symbol, parse_sexpr

__all__ = [
    "ReaderDocument",
    "ReaderMapping",
    "ReaderObject",
    "SList",
    "Symbol",
    "parse_sexpr",
]
