from __future__ import annotations

from datetime import timedelta
import re
from typing import Callable, Dict, List, Optional, Tuple

from ..messages.controls import Infinite, MoveTime, Ponder, SearchControl, TimeControl, TimeLeft
from ..messages.info import (
    AnyAttribute,
    CpuLoad,
    CurrLine,
    CurrMove,
    CurrMoveNum,
    Depth,
    HashFull,
    InfoAttribute,
    InfoString,
    INFO_KEYWORDS,
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
from ..messages.message import (
    BestMove,
    CopyProtection,
    Debug,
    Go,
    Id,
    Info,
    IsReady,
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
)
from ..messages.moves import Fen
from ..messages.options import (
    EMPTY_MARKER,
    ButtonOption,
    CheckOption,
    ComboOption,
    OptionConfig,
    SpinOption,
    StringOption,
)
from .scanner import DIGITS12, DIGITS3, FEN_PATTERN, SIGNED, LineScanner

Builder = Callable[[LineScanner], Optional[UciMessage]]

SWITCH = re.compile(r"on|off", re.IGNORECASE)
PROTECTION_STATE = re.compile(r"checking|ok|error", re.IGNORECASE)
OPTION_TYPE = re.compile(r"check|spin|combo|button|string", re.IGNORECASE)
ANY_NAME = re.compile(r"\S+")
INTEGER = re.compile(r"-?\d+")

TIME_CLAUSES = ("wtime", "btime", "winc", "binc")
GO_CLAUSES = ("searchmoves", "ponder", "infinite", "movetime", *TIME_CLAUSES, "movestogo", "depth", "mate", "nodes")
OPTION_CLAUSES = ("default", "min", "max", "var")

_TIME_FIELDS = {
    "wtime": "white_time",
    "btime": "black_time",
    "winc": "white_increment",
    "binc": "black_increment",
}


def _atomic(message_type: type[UciMessage]) -> Builder:
    def build(scanner: LineScanner) -> UciMessage:
        return message_type()

    return build


def _empty_to_blank(text: str) -> str:
    return "" if text.lower() == EMPTY_MARKER else text


def build_debug(scanner: LineScanner) -> Optional[UciMessage]:
    switch = scanner.token(SWITCH, "switch")
    if switch is None:
        return None
    return Debug(on=switch.group(0).lower() == "on")


def build_setoption(scanner: LineScanner) -> Optional[UciMessage]:
    if not scanner.keyword("name"):
        return None
    name = scanner.text_until(("value",), "option name")
    if name is None:
        return None
    if not scanner.keyword("value"):
        return SetOption(name=name)
    value = scanner.rest()
    if not value:
        scanner.expect("option value")
        return None
    return SetOption(name=name, value=_empty_to_blank(value))


def build_register(scanner: LineScanner) -> Optional[UciMessage]:
    if scanner.keyword("later"):
        return Register.register_later()

    first = scanner.choose(("name", "code"))
    if first is None:
        return None
    second = "code" if first == "name" else "name"
    leading = scanner.text_until((second,), f"register {first}")
    if leading is None or not scanner.keyword(second):
        return None
    trailing = scanner.rest()
    if not trailing:
        scanner.expect(f"register {second}")
        return None
    parts = {first: leading, second: trailing}
    return Register.with_code(parts["name"], parts["code"])


def build_position(scanner: LineScanner) -> Optional[UciMessage]:
    fen: Optional[Fen] = None
    startpos = scanner.keyword("startpos")
    if not startpos:
        if not scanner.keyword("fen"):
            return None
        match = scanner.token(FEN_PATTERN, "fen")
        if match is None:
            return None
        fen = Fen(match.group(0))

    moves = scanner.moves() if scanner.keyword("moves") else []
    return Position(startpos=startpos, fen=fen, moves=moves)


def build_go(scanner: LineScanner) -> Optional[UciMessage]:
    time_control: Optional[TimeControl] = None
    time_left: Dict[str, object] = {}
    search: Dict[str, object] = {}

    while not scanner.at_end():
        clause = scanner.choose(GO_CLAUSES)
        if clause is None:
            return None
        if clause == "ponder":
            time_control = Ponder()
        elif clause == "infinite":
            time_control = Infinite()
        elif clause == "movetime":
            millis = scanner.number(DIGITS12, "milliseconds")
            if millis is None:
                return None
            time_control = MoveTime(timedelta(milliseconds=millis))
        elif clause in TIME_CLAUSES:
            millis = scanner.number(DIGITS12, "milliseconds")
            if millis is None:
                return None
            time_left[_TIME_FIELDS[clause]] = timedelta(milliseconds=millis)
        elif clause == "movestogo":
            moves_to_go = scanner.number(DIGITS3, "movestogo value")
            if moves_to_go is None:
                return None
            time_left["moves_to_go"] = moves_to_go
        elif clause in ("depth", "mate"):
            value = scanner.number(DIGITS3, f"{clause} value")
            if value is None:
                return None
            search[clause] = value
        elif clause == "nodes":
            nodes = scanner.number(DIGITS12, "nodes value")
            if nodes is None:
                return None
            search["nodes"] = nodes
        else:
            first = scanner.move()
            if first is None:
                return None
            search["search_moves"] = [first, *scanner.moves()]

    # A clock clause turns the whole time control into TimeLeft.
    if time_left:
        time_control = TimeLeft(**time_left)

    search_control = SearchControl(**search)
    return Go(
        time_control=time_control,
        search_control=None if search_control.is_empty() else search_control,
    )


def build_id(scanner: LineScanner) -> Optional[UciMessage]:
    field = scanner.choose(("name", "author"))
    if field is None:
        return None
    text = scanner.rest()
    if not text:
        scanner.expect("id text")
        return None
    return Id.with_name(text) if field == "name" else Id.with_author(text)


def build_bestmove(scanner: LineScanner) -> Optional[UciMessage]:
    best_move = scanner.move()
    if best_move is None:
        return None
    if not scanner.keyword("ponder"):
        return BestMove(best_move=best_move)
    ponder = scanner.move()
    if ponder is None:
        return None
    return BestMove.with_ponder(best_move, ponder)


def _protection(message_type: type[UciMessage]) -> Builder:
    def build(scanner: LineScanner) -> Optional[UciMessage]:
        state = scanner.token(PROTECTION_STATE, "protection state")
        if state is None:
            return None
        return message_type(ProtectionState(state.group(0).lower()))

    return build


def _lenient_int(text: Optional[str]) -> Optional[int]:
    if text is None or INTEGER.fullmatch(text) is None:
        return None
    return int(text)


def _lenient_bool(text: Optional[str]) -> Optional[bool]:
    if text is None:
        return None
    return {"true": True, "false": False}.get(text.lower())


def make_option_config(option_type: str, name: str, clauses: List[Tuple[str, str]]) -> OptionConfig:
    """Keep only the clauses that make sense for ``option_type``.

    Values that do not coerce to the expected type become ``None``; clauses a
    type does not use are dropped.
    """
    latest = dict(clauses)
    default = latest.get("default")

    if option_type == "check":
        return CheckOption(name=name, default=_lenient_bool(default))
    if option_type == "spin":
        return SpinOption(
            name=name,
            default=_lenient_int(default),
            min=_lenient_int(latest.get("min")),
            max=_lenient_int(latest.get("max")),
        )
    if option_type == "combo":
        return ComboOption(
            name=name,
            default=None if default is None else _empty_to_blank(default),
            var=[value for keyword, value in clauses if keyword == "var"],
        )
    if option_type == "string":
        return StringOption(name=name, default=None if default is None else _empty_to_blank(default))
    return ButtonOption(name=name)


def build_option(scanner: LineScanner) -> Optional[UciMessage]:
    if not scanner.keyword("name"):
        return None
    name = scanner.text_until(("type",), "option name")
    if name is None or not scanner.keyword("type"):
        return None
    option_type = scanner.token(OPTION_TYPE, "option type")
    if option_type is None:
        return None

    clauses: List[Tuple[str, str]] = []
    while not scanner.at_end():
        keyword = scanner.choose(OPTION_CLAUSES)
        if keyword is None:
            return None
        value = scanner.text_until(OPTION_CLAUSES, f"{keyword} value")
        if value is None:
            return None
        clauses.append((keyword, value))

    return Option(make_option_config(option_type.group(0).lower(), name, clauses))


_COUNTERS: Dict[str, Tuple[type[InfoAttribute], object]] = {
    "depth": (Depth, DIGITS3),
    "seldepth": (SelDepth, DIGITS3),
    "nodes": (Nodes, DIGITS12),
    "multipv": (MultiPv, DIGITS12),
    "currmovenum": (CurrMoveNum, DIGITS12),
    "hashfull": (HashFull, DIGITS12),
    "nps": (Nps, DIGITS12),
    "tbhits": (TbHits, DIGITS12),
    "sbhits": (SbHits, DIGITS12),
    "cpuload": (CpuLoad, DIGITS12),
}


def _build_score(scanner: LineScanner) -> Optional[InfoAttribute]:
    values: Dict[str, int] = {}
    while True:
        unit = scanner.choose(("cp", "mate"))
        if unit is None:
            break
        value = scanner.number(SIGNED, f"{unit} value")
        if value is None:
            return None
        values[unit] = value
    if not values:
        return None

    bound = scanner.choose(("lowerbound", "upperbound"))
    return Score(
        cp=values.get("cp"),
        mate=values.get("mate"),
        lower_bound=True if bound == "lowerbound" else None,
        upper_bound=True if bound == "upperbound" else None,
    )


def build_info_attribute(scanner: LineScanner) -> Optional[InfoAttribute]:
    keyword = scanner.choose(INFO_KEYWORDS)
    if keyword is None:
        name = scanner.token(ANY_NAME, "attribute name")
        if name is None:
            return None
        return AnyAttribute(name=name.group(0), value=scanner.rest())

    if keyword in _COUNTERS:
        attribute_type, pattern = _COUNTERS[keyword]
        value = scanner.number(pattern, f"{keyword} value")
        return None if value is None else attribute_type(value)
    if keyword == "time":
        millis = scanner.number(DIGITS12, "milliseconds")
        return None if millis is None else Time(timedelta(milliseconds=millis))
    if keyword == "score":
        return _build_score(scanner)
    if keyword == "currmove":
        move = scanner.move()
        return None if move is None else CurrMove(move)
    if keyword == "string":
        return InfoString(scanner.rest())
    if keyword == "pv":
        return Pv(scanner.moves())
    if keyword == "refutation":
        return Refutation(scanner.moves())

    mark = scanner.mark()
    cpu_nr = scanner.number(DIGITS3, "cpunr")
    if cpu_nr is None:
        scanner.reset(mark)
    return CurrLine(cpu_nr=cpu_nr, line=scanner.moves())


def build_info(scanner: LineScanner) -> Optional[UciMessage]:
    attributes: List[InfoAttribute] = []
    while not scanner.at_end():
        attribute = build_info_attribute(scanner)
        if attribute is None:
            return None
        attributes.append(attribute)
    return Info(attributes)


# Keyword order matches the order alternatives are reported in errors.
COMMANDS: Tuple[Tuple[str, Builder], ...] = (
    ("uci", _atomic(Uci)),
    ("debug", build_debug),
    ("isready", _atomic(IsReady)),
    ("setoption", build_setoption),
    ("register", build_register),
    ("ucinewgame", _atomic(UciNewGame)),
    ("stop", _atomic(Stop)),
    ("quit", _atomic(Quit)),
    ("ponderhit", _atomic(PonderHit)),
    ("position", build_position),
    ("go", build_go),
    ("id", build_id),
    ("uciok", _atomic(UciOk)),
    ("readyok", _atomic(ReadyOk)),
    ("bestmove", build_bestmove),
    ("copyprotection", _protection(CopyProtection)),
    ("registration", _protection(Registration)),
    ("option", build_option),
    ("info", build_info),
)


def build_line(scanner: LineScanner) -> Optional[UciMessage]:
    """Parse one line; ``None`` for a blank line, :class:`GrammarError` if rejected."""
    if scanner.at_end():
        return None
    for keyword, build in COMMANDS:
        if scanner.keyword(keyword):
            message = build(scanner)
            if message is not None and scanner.finish():
                return message
            raise scanner.error()
    raise scanner.error()


__all__ = ["COMMANDS", "build_line", "make_option_config"]
