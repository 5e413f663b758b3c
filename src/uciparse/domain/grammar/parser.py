from __future__ import annotations

from enum import Enum
from typing import Iterator, Tuple

from ...interface.telemetry.logging import get_logger
from ..messages.message import MessageList, UciMessage, Unknown
from .builders import build_line
from .errors import GrammarError
from .scanner import LineScanner

logger = get_logger("uciparse.grammar")


class ParsePolicy(str, Enum):
    strict = "strict"
    lenient = "lenient"
    unknown = "unknown"


def _lines(text: str) -> Iterator[Tuple[int, str]]:
    for line_no, line in enumerate(text.split("\n"), start=1):
        yield line_no, line[:-1] if line.endswith("\r") else line


def parse_strict(text: str) -> MessageList:
    """Parse every line of ``text``; any rejected line aborts the whole call.

    Raises :class:`GrammarError` for the first line no rule accepts. Blank
    lines produce nothing.
    """
    messages: MessageList = []
    for line_no, line in _lines(text):
        message = build_line(LineScanner(line, line_no))
        if message is not None:
            messages.append(message)
    return messages


def parse_lenient(text: str, *, log_dropped: bool = True) -> MessageList:
    """Parse ``text``, silently dropping lines the grammar rejects."""
    messages: MessageList = []
    for line_no, line in _lines(text):
        try:
            message = build_line(LineScanner(line, line_no))
        except GrammarError as exc:
            if log_dropped:
                logger.debug(
                    "uci_line_dropped",
                    line=exc.line,
                    column=exc.column,
                    expected=list(exc.expected),
                )
            continue
        if message is not None:
            messages.append(message)
    return messages


def parse_with_unknown(text: str) -> MessageList:
    """Parse strictly, or wrap the entire input as one :class:`Unknown`.

    A single bad line anywhere discards every other line of the batch; there
    is no per-line recovery here.
    """
    try:
        return parse_strict(text)
    except GrammarError as exc:
        logger.debug("uci_input_wrapped_unknown", line=exc.line, column=exc.column)
        return [Unknown(text.rstrip(), exc)]


def parse_one(text: str) -> UciMessage:
    """Parse the first line of ``text`` into a single message.

    Failures come back as :class:`Unknown` values; a blank line gives
    ``Unknown("", None)``.
    """
    first_line = next(_lines(text))[1]
    try:
        message = build_line(LineScanner(first_line))
    except GrammarError as exc:
        logger.debug("uci_line_unrecognized", column=exc.column, expected=list(exc.expected))
        return Unknown(text.rstrip(), exc)
    if message is None:
        return Unknown("")
    return message


def parse(text: str, policy: ParsePolicy | str = ParsePolicy.lenient) -> MessageList:
    policy = ParsePolicy(policy)
    if policy is ParsePolicy.strict:
        return parse_strict(text)
    if policy is ParsePolicy.unknown:
        return parse_with_unknown(text)
    return parse_lenient(text)


__all__ = [
    "ParsePolicy",
    "parse",
    "parse_lenient",
    "parse_one",
    "parse_strict",
    "parse_with_unknown",
]
