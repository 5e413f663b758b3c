from .errors import GrammarError
from .parser import (
    ParsePolicy,
    parse,
    parse_lenient,
    parse_one,
    parse_strict,
    parse_with_unknown,
)

__all__ = [
    "GrammarError",
    "ParsePolicy",
    "parse",
    "parse_lenient",
    "parse_one",
    "parse_strict",
    "parse_with_unknown",
]
