"""Immutable protocol message values and their canonical text rendering."""

from .controls import Infinite, MoveTime, Ponder, SearchControl, TimeControl, TimeLeft
from .info import (
    AnyAttribute,
    CpuLoad,
    CurrLine,
    CurrMove,
    CurrMoveNum,
    Depth,
    HashFull,
    InfoAttribute,
    InfoString,
    MultiPv,
    Nodes,
    Nps,
    Pv,
    Refutation,
    SbHits,
    Score,
    SelDepth,
    TbHits,
    Time,
)
from .message import (
    BestMove,
    CommunicationDirection,
    CopyProtection,
    Debug,
    FramedMessage,
    Go,
    Id,
    Info,
    IsReady,
    MessageList,
    Option,
    PonderHit,
    Position,
    ProtectionState,
    Quit,
    ReadyOk,
    Register,
    Registration,
    SetOption,
    Stop,
    Uci,
    UciMessage,
    UciNewGame,
    UciOk,
    Unknown,
)
from .moves import Fen, Move, Piece, Square
from .options import ButtonOption, CheckOption, ComboOption, OptionConfig, SpinOption, StringOption

__all__ = [
    "AnyAttribute",
    "BestMove",
    "ButtonOption",
    "CheckOption",
    "ComboOption",
    "CommunicationDirection",
    "CopyProtection",
    "CpuLoad",
    "CurrLine",
    "CurrMove",
    "CurrMoveNum",
    "Debug",
    "Depth",
    "Fen",
    "FramedMessage",
    "Go",
    "HashFull",
    "Id",
    "Infinite",
    "Info",
    "InfoAttribute",
    "InfoString",
    "IsReady",
    "MessageList",
    "Move",
    "MoveTime",
    "MultiPv",
    "Nodes",
    "Nps",
    "Option",
    "OptionConfig",
    "Piece",
    "Ponder",
    "PonderHit",
    "Position",
    "ProtectionState",
    "Pv",
    "Quit",
    "ReadyOk",
    "Refutation",
    "Register",
    "Registration",
    "SbHits",
    "Score",
    "SearchControl",
    "SelDepth",
    "SetOption",
    "SpinOption",
    "Square",
    "Stop",
    "StringOption",
    "TbHits",
    "Time",
    "TimeControl",
    "TimeLeft",
    "Uci",
    "UciMessage",
    "UciNewGame",
    "UciOk",
    "Unknown",
]
