"""
uciparse package bootstrap.

Subpackages:
- domain: Protocol message values and the line grammar that parses them.
- infrastructure: Configuration loading and the python-chess bridge.
- interface: Telemetry (structured logging).

The most used names are re-exported here.
"""

from .codec import UciCodec
from .domain.grammar import (
    GrammarError,
    ParsePolicy,
    parse,
    parse_lenient,
    parse_one,
    parse_strict,
    parse_with_unknown,
)
from .domain.messages import *  # noqa: F401,F403
from .domain.messages import __all__ as _message_names

__all__ = [
    "GrammarError",
    "ParsePolicy",
    "UciCodec",
    "domain",
    "infrastructure",
    "interface",
    "parse",
    "parse_lenient",
    "parse_one",
    "parse_strict",
    "parse_with_unknown",
    *_message_names,
]
