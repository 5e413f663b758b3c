from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Iterable, Optional, Tuple

from .moves import Move, render_moves

MILLISECOND = timedelta(milliseconds=1)


def as_duration(value: timedelta | int | None) -> Optional[timedelta]:
    """Accept either a timedelta or a plain millisecond count."""
    if value is None or isinstance(value, timedelta):
        return value
    return timedelta(milliseconds=int(value))


def to_millis(value: timedelta) -> int:
    return value // MILLISECOND


class TimeControl:
    """Time-related half of a ``go`` command."""

    __slots__ = ()

    def serialize(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.serialize()


@dataclass(frozen=True, slots=True)
class Ponder(TimeControl):
    def serialize(self) -> str:
        return "ponder"


@dataclass(frozen=True, slots=True)
class Infinite(TimeControl):
    def serialize(self) -> str:
        return "infinite"


@dataclass(frozen=True, slots=True)
class MoveTime(TimeControl):
    time: timedelta

    def __post_init__(self) -> None:
        object.__setattr__(self, "time", as_duration(self.time))

    def serialize(self) -> str:
        return f"movetime {to_millis(self.time)}"


@dataclass(frozen=True, slots=True)
class TimeLeft(TimeControl):
    """Clock state for both sides; any subset of the fields may be known."""

    white_time: Optional[timedelta] = None
    black_time: Optional[timedelta] = None
    white_increment: Optional[timedelta] = None
    black_increment: Optional[timedelta] = None
    moves_to_go: Optional[int] = None

    def __post_init__(self) -> None:
        for name in ("white_time", "black_time", "white_increment", "black_increment"):
            object.__setattr__(self, name, as_duration(getattr(self, name)))

    def serialize(self) -> str:
        parts = []
        for keyword, value in (
            ("wtime", self.white_time),
            ("btime", self.black_time),
            ("winc", self.white_increment),
            ("binc", self.black_increment),
        ):
            if value is not None:
                parts.append(f"{keyword} {to_millis(value)}")
        if self.moves_to_go is not None:
            parts.append(f"movestogo {self.moves_to_go}")
        return " ".join(parts)


@dataclass(frozen=True, slots=True)
class SearchControl:
    """Non-time search limits of a ``go`` command."""

    search_moves: Tuple[Move, ...] = field(default_factory=tuple)
    mate: Optional[int] = None
    depth: Optional[int] = None
    nodes: Optional[int] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "search_moves", tuple(self.search_moves))

    @classmethod
    def with_depth(cls, depth: int) -> "SearchControl":
        return cls(depth=depth)

    @classmethod
    def with_mate(cls, mate: int) -> "SearchControl":
        return cls(mate=mate)

    @classmethod
    def with_nodes(cls, nodes: int) -> "SearchControl":
        return cls(nodes=nodes)

    @classmethod
    def with_moves(cls, moves: Iterable[Move]) -> "SearchControl":
        return cls(search_moves=tuple(moves))

    def is_empty(self) -> bool:
        return not self.search_moves and self.mate is None and self.depth is None and self.nodes is None

    def serialize(self) -> str:
        parts = []
        if self.depth is not None:
            parts.append(f"depth {self.depth}")
        if self.nodes is not None:
            parts.append(f"nodes {self.nodes}")
        if self.mate is not None:
            parts.append(f"mate {self.mate}")
        if self.search_moves:
            parts.append(f"searchmoves {render_moves(self.search_moves)}")
        return " ".join(parts)

    def __str__(self) -> str:
        return self.serialize()


__all__ = [
    "Infinite",
    "MoveTime",
    "Ponder",
    "SearchControl",
    "TimeControl",
    "TimeLeft",
    "as_duration",
    "to_millis",
]
