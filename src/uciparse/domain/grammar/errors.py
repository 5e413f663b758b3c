from __future__ import annotations

from typing import Sequence


def _join_expected(expected: Sequence[str]) -> str:
    if not expected:
        return "nothing"
    if len(expected) == 1:
        return expected[0]
    if len(expected) == 2:
        return f"{expected[0]} or {expected[1]}"
    return f"{', '.join(expected[:-1])}, or {expected[-1]}"


class GrammarError(ValueError):
    """A line of input that no grammar rule accepts.

    ``line`` and ``column`` are 1-based and point at the furthest position the
    parser reached; ``expected`` lists the rules that were tried there.
    """

    code: str = "grammar_violation"

    def __init__(
        self,
        *,
        line: int,
        column: int,
        expected: Sequence[str],
        line_text: str,
    ) -> None:
        self.line = line
        self.column = column
        self.expected = tuple(expected)
        self.line_text = line_text
        super().__init__(self.render())

    @property
    def expected_text(self) -> str:
        return f"expected {_join_expected(self.expected)}"

    def render(self) -> str:
        gutter = " " * len(str(self.line))
        return "\n".join(
            [
                f"{gutter}--> {self.line}:{self.column}",
                f"{gutter} |",
                f"{self.line} | {self.line_text}",
                f"{gutter} | {' ' * (self.column - 1)}^---",
                f"{gutter} |",
                f"{gutter} = {self.expected_text}",
            ]
        )

    def _key(self) -> tuple:
        return (self.line, self.column, self.expected, self.line_text)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GrammarError):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __reduce__(self):
        return (_rebuild, self._key())


def _rebuild(line: int, column: int, expected: tuple, line_text: str) -> GrammarError:
    return GrammarError(line=line, column=column, expected=expected, line_text=line_text)


__all__ = ["GrammarError"]
