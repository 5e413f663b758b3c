from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import re

MOVE_PATTERN = re.compile(r"([a-h])([1-8])([a-h])([1-8])([pnbrqkPNBRQK])?")


class Piece(str, Enum):
    pawn = "p"
    knight = "n"
    bishop = "b"
    rook = "r"
    queen = "q"
    king = "k"

    def as_char(self) -> str | None:
        """Promotion letter in coordinate notation; pawns have none."""
        if self is Piece.pawn:
            return None
        return self.value

    @classmethod
    def from_char(cls, char: str) -> "Piece":
        try:
            return cls(char.lower())
        except ValueError as exc:
            raise ValueError(f"Not a piece letter: {char!r}") from exc


@dataclass(frozen=True, slots=True)
class Square:
    """A board square as a file letter and a rank number.

    The default value is the invalid sentinel square (file ``"\\0"``, rank 0).
    """

    file: str = "\0"
    rank: int = 0

    def __str__(self) -> str:
        return f"{self.file}{self.rank}"


@dataclass(frozen=True, slots=True)
class Move:
    """A move in coordinate notation. Legality is never checked."""

    from_square: Square
    to_square: Square
    promotion: Piece | None = None

    @classmethod
    def from_to(cls, from_square: Square, to_square: Square) -> "Move":
        return cls(from_square=from_square, to_square=to_square)

    @classmethod
    def from_uci(cls, text: str) -> "Move":
        match = MOVE_PATTERN.fullmatch(text.strip())
        if match is None:
            raise ValueError(f"Invalid move notation: {text!r}")
        return move_from_match(match)

    def __str__(self) -> str:
        letter = self.promotion.as_char() if self.promotion is not None else None
        return f"{self.from_square}{self.to_square}{letter or ''}"


@dataclass(frozen=True, slots=True)
class Fen:
    """Opaque FEN position string, carried verbatim."""

    value: str

    def as_str(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


def move_from_match(match: re.Match[str]) -> Move:
    from_file, from_rank, to_file, to_rank, promotion = match.groups()
    return Move(
        from_square=Square(from_file, int(from_rank)),
        to_square=Square(to_file, int(to_rank)),
        promotion=Piece.from_char(promotion) if promotion else None,
    )


def render_moves(moves) -> str:
    return " ".join(str(move) for move in moves)


__all__ = ["Fen", "MOVE_PATTERN", "Move", "Piece", "Square", "move_from_match", "render_moves"]
