from __future__ import annotations

from functools import lru_cache
import re
from typing import Iterable, List, Optional, Sequence

from ..messages.moves import MOVE_PATTERN, Move, move_from_match
from .errors import GrammarError

WHITESPACE = " \t"

DIGITS3 = re.compile(r"\d{1,3}")
DIGITS12 = re.compile(r"\d{1,12}")
SIGNED = re.compile(r"-?\d{1,19}")

_RANK = r"[pnbrqkPNBRQK1-8]+"
_END = r"(?=[ \t]|$)"
FEN_PATTERN = re.compile(
    rf"{_RANK}(?:/{_RANK})*{_END}"
    rf"[ \t]+[wb]{_END}"
    rf"(?:[ \t]+(?:-|[KQkqA-Ha-h]+){_END})?"
    rf"(?:[ \t]+(?:-|[a-h][1-8]){_END})?"
    rf"(?:[ \t]+\d+{_END}){{0,2}}"
)


@lru_cache(maxsize=None)
def _stop_pattern(stops: Sequence[str]) -> re.Pattern[str]:
    alternatives = "|".join(re.escape(stop) for stop in stops)
    return re.compile(rf"[ \t]+(?:{alternatives})(?=[ \t]|$)", re.IGNORECASE)


class LineScanner:
    """Cursor over a single protocol line.

    Every failed attempt is recorded; the furthest failure position and the
    rule names tried there become the :class:`GrammarError` for the line.
    """

    def __init__(self, text: str, line_no: int = 1) -> None:
        self.text = text
        self.line_no = line_no
        self.pos = 0
        self._failed_at = -1
        self._expected: List[str] = []

    # Position handling

    def skip_ws(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos] in WHITESPACE:
            self.pos += 1

    def at_end(self) -> bool:
        self.skip_ws()
        return self.pos >= len(self.text)

    def _at_boundary(self, pos: int) -> bool:
        return pos >= len(self.text) or self.text[pos] in WHITESPACE

    def mark(self) -> int:
        return self.pos

    def reset(self, mark: int) -> None:
        self.pos = mark

    # Failure tracking

    def expect(self, label: str, pos: Optional[int] = None) -> None:
        at = self.pos if pos is None else pos
        if at > self._failed_at:
            self._failed_at = at
            self._expected = [label]
        elif at == self._failed_at and label not in self._expected:
            self._expected.append(label)

    def error(self) -> GrammarError:
        column = max(self._failed_at, 0) + 1
        return GrammarError(
            line=self.line_no,
            column=column,
            expected=self._expected,
            line_text=self.text,
        )

    # Rules

    def keyword(self, word: str) -> bool:
        """Match ``word`` case-insensitively as a whole token."""
        self.skip_ws()
        end = self.pos + len(word)
        if self.text[self.pos:end].lower() == word and self._at_boundary(end):
            self.pos = end
            return True
        self.expect(word)
        return False

    def choose(self, words: Iterable[str]) -> Optional[str]:
        for word in words:
            if self.keyword(word):
                return word
        return None

    def token(self, pattern: re.Pattern[str], label: str) -> Optional[re.Match[str]]:
        self.skip_ws()
        match = pattern.match(self.text, self.pos)
        if match is not None and match.end() > self.pos and self._at_boundary(match.end()):
            self.pos = match.end()
            return match
        self.expect(label)
        return None

    def number(self, pattern: re.Pattern[str], label: str) -> Optional[int]:
        match = self.token(pattern, label)
        return None if match is None else int(match.group(0))

    def move(self) -> Optional[Move]:
        match = self.token(MOVE_PATTERN, "move")
        return None if match is None else move_from_match(match)

    def moves(self) -> List[Move]:
        """Zero or more moves, stopping at the first token that is not one."""
        found: List[Move] = []
        while not self.at_end():
            move = self.move()
            if move is None:
                break
            found.append(move)
        return found

    def text_until(self, stops: Sequence[str], label: str) -> Optional[str]:
        """Free text up to the next ``stops`` keyword or the end of the line."""
        self.skip_ws()
        found = _stop_pattern(tuple(stops)).search(self.text, self.pos)
        cut = found.start() if found is not None else len(self.text)
        value = self.text[self.pos:cut].rstrip()
        if not value:
            self.expect(label)
            return None
        self.pos = cut
        return value

    def rest(self) -> str:
        self.skip_ws()
        value = self.text[self.pos:].rstrip()
        self.pos = len(self.text)
        return value

    def finish(self) -> bool:
        if self.at_end():
            return True
        self.expect("end of line")
        return False


__all__ = [
    "DIGITS12",
    "DIGITS3",
    "FEN_PATTERN",
    "LineScanner",
    "SIGNED",
]
