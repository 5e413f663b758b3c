from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, ClassVar, List, Optional, Tuple

from .controls import Infinite, MoveTime, Ponder, SearchControl, TimeControl
from .info import InfoAttribute
from .moves import Fen, Move, render_moves
from .options import EMPTY_MARKER, OptionConfig

if TYPE_CHECKING:
    from ..grammar.errors import GrammarError


class CommunicationDirection(str, Enum):
    gui_to_engine = "gui_to_engine"
    engine_to_gui = "engine_to_gui"


class ProtectionState(str, Enum):
    checking = "checking"
    ok = "ok"
    error = "error"


class UciMessage:
    """Base class of every protocol message.

    Each subclass is an immutable value carrying one command or notification.
    ``serialize`` renders the canonical protocol text without a trailing
    newline; use :class:`FramedMessage` for the wire form.
    """

    __slots__ = ()
    keyword: ClassVar[str] = ""
    direction: ClassVar[CommunicationDirection] = CommunicationDirection.engine_to_gui

    def serialize(self) -> str:
        return self.keyword

    def is_unknown(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.serialize()


# Controller (GUI) to engine.


@dataclass(frozen=True, slots=True)
class Uci(UciMessage):
    keyword: ClassVar[str] = "uci"
    direction: ClassVar[CommunicationDirection] = CommunicationDirection.gui_to_engine


@dataclass(frozen=True, slots=True)
class Debug(UciMessage):
    keyword: ClassVar[str] = "debug"
    direction: ClassVar[CommunicationDirection] = CommunicationDirection.gui_to_engine

    on: bool

    def serialize(self) -> str:
        return "debug on" if self.on else "debug off"


@dataclass(frozen=True, slots=True)
class IsReady(UciMessage):
    keyword: ClassVar[str] = "isready"
    direction: ClassVar[CommunicationDirection] = CommunicationDirection.gui_to_engine


@dataclass(frozen=True, slots=True)
class Register(UciMessage):
    """``register later`` or ``register name <N> code <C>``.

    When ``later`` is true the name and code are ignored.
    """

    keyword: ClassVar[str] = "register"
    direction: ClassVar[CommunicationDirection] = CommunicationDirection.gui_to_engine

    later: bool = False
    name: Optional[str] = None
    code: Optional[str] = None

    @classmethod
    def register_later(cls) -> "Register":
        return cls(later=True)

    @classmethod
    def with_code(cls, name: str, code: str) -> "Register":
        return cls(later=False, name=name, code=code)

    def serialize(self) -> str:
        if self.later:
            return "register later"
        parts = ["register"]
        if self.name is not None:
            parts.append(f"name {self.name}")
        if self.code is not None:
            parts.append(f"code {self.code}")
        return " ".join(parts)


@dataclass(frozen=True, slots=True)
class Position(UciMessage):
    keyword: ClassVar[str] = "position"
    direction: ClassVar[CommunicationDirection] = CommunicationDirection.gui_to_engine

    startpos: bool = False
    fen: Optional[Fen] = None
    moves: Tuple[Move, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if isinstance(self.fen, str):
            object.__setattr__(self, "fen", Fen(self.fen))
        object.__setattr__(self, "moves", tuple(self.moves))

    def serialize(self) -> str:
        parts = ["position"]
        if self.startpos:
            parts.append("startpos")
        elif self.fen is not None:
            parts.append(f"fen {self.fen}")
        if self.moves:
            parts.append(f"moves {render_moves(self.moves)}")
        return " ".join(parts)


@dataclass(frozen=True, slots=True)
class SetOption(UciMessage):
    """``setoption name <N> [value <V>]``; the value is always kept as raw text."""

    keyword: ClassVar[str] = "setoption"
    direction: ClassVar[CommunicationDirection] = CommunicationDirection.gui_to_engine

    name: str
    value: Optional[str] = None

    def as_bool(self) -> Optional[bool]:
        if self.value is None:
            return None
        lowered = self.value.strip().lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False
        return None

    def as_int(self) -> Optional[int]:
        if self.value is None:
            return None
        try:
            return int(self.value.strip())
        except ValueError:
            return None

    def serialize(self) -> str:
        return f"setoption name {self.name} value {self.value or EMPTY_MARKER}"


@dataclass(frozen=True, slots=True)
class UciNewGame(UciMessage):
    keyword: ClassVar[str] = "ucinewgame"
    direction: ClassVar[CommunicationDirection] = CommunicationDirection.gui_to_engine


@dataclass(frozen=True, slots=True)
class Stop(UciMessage):
    keyword: ClassVar[str] = "stop"
    direction: ClassVar[CommunicationDirection] = CommunicationDirection.gui_to_engine


@dataclass(frozen=True, slots=True)
class PonderHit(UciMessage):
    keyword: ClassVar[str] = "ponderhit"
    direction: ClassVar[CommunicationDirection] = CommunicationDirection.gui_to_engine


@dataclass(frozen=True, slots=True)
class Quit(UciMessage):
    keyword: ClassVar[str] = "quit"
    direction: ClassVar[CommunicationDirection] = CommunicationDirection.gui_to_engine


@dataclass(frozen=True, slots=True)
class Go(UciMessage):
    """``go`` with optional time-control and search-control halves.

    ``search_control`` is ``None`` when no search clause was given, which is
    distinct from an empty :class:`SearchControl`.
    """

    keyword: ClassVar[str] = "go"
    direction: ClassVar[CommunicationDirection] = CommunicationDirection.gui_to_engine

    time_control: Optional[TimeControl] = None
    search_control: Optional[SearchControl] = None

    @classmethod
    def go_ponder(cls) -> "Go":
        return cls(time_control=Ponder())

    @classmethod
    def go_infinite(cls) -> "Go":
        return cls(time_control=Infinite())

    @classmethod
    def go_movetime(cls, milliseconds: int) -> "Go":
        return cls(time_control=MoveTime(milliseconds))

    def serialize(self) -> str:
        parts = ["go"]
        if self.time_control is not None:
            parts.append(self.time_control.serialize())
        if self.search_control is not None:
            parts.append(self.search_control.serialize())
        return " ".join(part for part in parts if part)


# Engine to controller (GUI).


@dataclass(frozen=True, slots=True)
class Id(UciMessage):
    """``id name <text>`` or ``id author <text>``; one field per message."""

    keyword: ClassVar[str] = "id"

    name: Optional[str] = None
    author: Optional[str] = None

    @classmethod
    def with_name(cls, name: str) -> "Id":
        return cls(name=name)

    @classmethod
    def with_author(cls, author: str) -> "Id":
        return cls(author=author)

    def serialize(self) -> str:
        if self.name is not None:
            return f"id name {self.name}"
        if self.author is not None:
            return f"id author {self.author}"
        return "id"


@dataclass(frozen=True, slots=True)
class UciOk(UciMessage):
    keyword: ClassVar[str] = "uciok"


@dataclass(frozen=True, slots=True)
class ReadyOk(UciMessage):
    keyword: ClassVar[str] = "readyok"


@dataclass(frozen=True, slots=True)
class BestMove(UciMessage):
    keyword: ClassVar[str] = "bestmove"

    best_move: Move
    ponder: Optional[Move] = None

    @classmethod
    def with_ponder(cls, best_move: Move, ponder: Move) -> "BestMove":
        return cls(best_move=best_move, ponder=ponder)

    def serialize(self) -> str:
        text = f"bestmove {self.best_move}"
        if self.ponder is not None:
            text += f" ponder {self.ponder}"
        return text


@dataclass(frozen=True, slots=True)
class CopyProtection(UciMessage):
    keyword: ClassVar[str] = "copyprotection"

    state: ProtectionState

    def serialize(self) -> str:
        return f"copyprotection {self.state.value}"


@dataclass(frozen=True, slots=True)
class Registration(UciMessage):
    keyword: ClassVar[str] = "registration"

    state: ProtectionState

    def serialize(self) -> str:
        return f"registration {self.state.value}"


@dataclass(frozen=True, slots=True)
class Option(UciMessage):
    keyword: ClassVar[str] = "option"

    config: OptionConfig

    def serialize(self) -> str:
        return self.config.serialize()


@dataclass(frozen=True, slots=True)
class Info(UciMessage):
    """``info`` line; attribute order is kept for serialization."""

    keyword: ClassVar[str] = "info"

    attributes: Tuple[InfoAttribute, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", tuple(self.attributes))

    def serialize(self) -> str:
        return " ".join(["info", *(attribute.serialize() for attribute in self.attributes)])


@dataclass(frozen=True, slots=True)
class Unknown(UciMessage):
    """A line the grammar did not accept, produced only by lenient parsing."""

    keyword: ClassVar[str] = ""

    text: str
    error: Optional["GrammarError"] = None

    def is_unknown(self) -> bool:
        return True

    def serialize(self) -> str:
        return self.text


MessageList = List[UciMessage]


@dataclass(frozen=True, slots=True)
class FramedMessage:
    """A message paired with its newline-terminated UTF-8 wire bytes."""

    message: UciMessage
    data: bytes = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", f"{self.message.serialize()}\n".encode("utf-8"))

    @property
    def text(self) -> str:
        return self.data.decode("utf-8")

    def __bytes__(self) -> bytes:
        return self.data

    def __str__(self) -> str:
        return self.message.serialize()


__all__ = [
    "BestMove",
    "CommunicationDirection",
    "CopyProtection",
    "Debug",
    "FramedMessage",
    "Go",
    "Id",
    "Info",
    "IsReady",
    "MessageList",
    "Option",
    "PonderHit",
    "Position",
    "ProtectionState",
    "Quit",
    "ReadyOk",
    "Register",
    "Registration",
    "SetOption",
    "Stop",
    "Uci",
    "UciMessage",
    "UciNewGame",
    "UciOk",
    "Unknown",
]
