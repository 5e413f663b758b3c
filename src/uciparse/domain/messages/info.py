from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import ClassVar, Optional, Tuple

from .controls import as_duration, to_millis
from .moves import Move, render_moves


class InfoAttribute:
    """One attribute clause of an ``info`` line."""

    __slots__ = ()
    keyword: ClassVar[str] = ""

    @property
    def attribute_name(self) -> str:
        return self.keyword

    def _value_text(self) -> str:
        return str(getattr(self, "value"))

    def serialize(self) -> str:
        text = self._value_text()
        return f"{self.attribute_name} {text}" if text else self.attribute_name

    def __str__(self) -> str:
        return self.serialize()


@dataclass(frozen=True, slots=True)
class Depth(InfoAttribute):
    keyword: ClassVar[str] = "depth"
    value: int


@dataclass(frozen=True, slots=True)
class SelDepth(InfoAttribute):
    keyword: ClassVar[str] = "seldepth"
    value: int


@dataclass(frozen=True, slots=True)
class Time(InfoAttribute):
    keyword: ClassVar[str] = "time"
    value: timedelta

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", as_duration(self.value))

    def _value_text(self) -> str:
        return str(to_millis(self.value))


@dataclass(frozen=True, slots=True)
class Nodes(InfoAttribute):
    keyword: ClassVar[str] = "nodes"
    value: int


@dataclass(frozen=True, slots=True)
class Pv(InfoAttribute):
    keyword: ClassVar[str] = "pv"
    moves: Tuple[Move, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "moves", tuple(self.moves))

    def _value_text(self) -> str:
        return render_moves(self.moves)


@dataclass(frozen=True, slots=True)
class MultiPv(InfoAttribute):
    keyword: ClassVar[str] = "multipv"
    value: int


@dataclass(frozen=True, slots=True)
class Score(InfoAttribute):
    """Engine evaluation; ``mate`` is negative when the engine is being mated."""

    keyword: ClassVar[str] = "score"
    cp: Optional[int] = None
    mate: Optional[int] = None
    lower_bound: Optional[bool] = None
    upper_bound: Optional[bool] = None

    @classmethod
    def from_centipawns(cls, cp: int) -> "Score":
        return cls(cp=cp)

    @classmethod
    def from_mate(cls, mate: int) -> "Score":
        return cls(mate=mate)

    def _value_text(self) -> str:
        parts = []
        if self.cp is not None:
            parts.append(f"cp {self.cp}")
        if self.mate is not None:
            parts.append(f"mate {self.mate}")
        if self.lower_bound:
            parts.append("lowerbound")
        elif self.upper_bound:
            parts.append("upperbound")
        return " ".join(parts)


@dataclass(frozen=True, slots=True)
class CurrMove(InfoAttribute):
    keyword: ClassVar[str] = "currmove"
    move: Move

    def _value_text(self) -> str:
        return str(self.move)


@dataclass(frozen=True, slots=True)
class CurrMoveNum(InfoAttribute):
    keyword: ClassVar[str] = "currmovenum"
    value: int


@dataclass(frozen=True, slots=True)
class HashFull(InfoAttribute):
    """Hash table occupancy in permill."""

    keyword: ClassVar[str] = "hashfull"
    value: int


@dataclass(frozen=True, slots=True)
class Nps(InfoAttribute):
    keyword: ClassVar[str] = "nps"
    value: int


@dataclass(frozen=True, slots=True)
class TbHits(InfoAttribute):
    keyword: ClassVar[str] = "tbhits"
    value: int


@dataclass(frozen=True, slots=True)
class SbHits(InfoAttribute):
    keyword: ClassVar[str] = "sbhits"
    value: int


@dataclass(frozen=True, slots=True)
class CpuLoad(InfoAttribute):
    """CPU usage in permill."""

    keyword: ClassVar[str] = "cpuload"
    value: int


@dataclass(frozen=True, slots=True)
class InfoString(InfoAttribute):
    """Free text for the GUI; always consumes the rest of the line."""

    keyword: ClassVar[str] = "string"
    value: str


@dataclass(frozen=True, slots=True)
class Refutation(InfoAttribute):
    keyword: ClassVar[str] = "refutation"
    moves: Tuple[Move, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "moves", tuple(self.moves))

    def _value_text(self) -> str:
        return render_moves(self.moves)


@dataclass(frozen=True, slots=True)
class CurrLine(InfoAttribute):
    keyword: ClassVar[str] = "currline"
    cpu_nr: Optional[int] = None
    line: Tuple[Move, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "line", tuple(self.line))

    def _value_text(self) -> str:
        parts = [] if self.cpu_nr is None else [str(self.cpu_nr)]
        parts.extend(str(move) for move in self.line)
        return " ".join(parts)


@dataclass(frozen=True, slots=True)
class AnyAttribute(InfoAttribute):
    """An attribute name the protocol does not define, with its raw text."""

    name: str
    value: str

    @property
    def attribute_name(self) -> str:
        return self.name


# Keywords recognised by the info grammar; anything else becomes AnyAttribute.
INFO_KEYWORDS: Tuple[str, ...] = tuple(
    attribute.keyword
    for attribute in (
        Depth,
        SelDepth,
        Time,
        Nodes,
        Pv,
        MultiPv,
        Score,
        CurrMove,
        CurrMoveNum,
        HashFull,
        Nps,
        TbHits,
        SbHits,
        CpuLoad,
        InfoString,
        Refutation,
        CurrLine,
    )
)


__all__ = [
    "AnyAttribute",
    "CpuLoad",
    "CurrLine",
    "CurrMove",
    "CurrMoveNum",
    "Depth",
    "HashFull",
    "INFO_KEYWORDS",
    "InfoAttribute",
    "InfoString",
    "MultiPv",
    "Nodes",
    "Nps",
    "Pv",
    "Refutation",
    "SbHits",
    "Score",
    "SelDepth",
    "TbHits",
    "Time",
]
