from __future__ import annotations

from datetime import timedelta

import pytest

from uciparse.domain.messages import (
    AnyAttribute,
    BestMove,
    ButtonOption,
    CheckOption,
    ComboOption,
    CommunicationDirection,
    CopyProtection,
    CpuLoad,
    CurrLine,
    CurrMove,
    CurrMoveNum,
    Debug,
    Depth,
    Fen,
    FramedMessage,
    Go,
    HashFull,
    Id,
    Info,
    InfoString,
    MultiPv,
    Move,
    Nodes,
    Nps,
    Option,
    Piece,
    Position,
    ProtectionState,
    Pv,
    ReadyOk,
    Refutation,
    Register,
    Registration,
    SbHits,
    Score,
    SearchControl,
    SelDepth,
    SetOption,
    SpinOption,
    Square,
    StringOption,
    TbHits,
    Time,
    TimeLeft,
    Uci,
    UciNewGame,
    UciOk,
    Unknown,
)


def _move(text: str) -> Move:
    return Move.from_uci(text)


def test_id_serialization() -> None:
    assert Id.with_name("Example Engine 0.5.0").serialize() == "id name Example Engine 0.5.0"
    assert Id.with_author("Zoë Kovač").serialize() == "id author Zoë Kovač"


def test_atomic_messages_serialize_to_keyword() -> None:
    assert UciOk().serialize() == "uciok"
    assert ReadyOk().serialize() == "readyok"
    assert Uci().serialize() == "uci"
    assert str(UciNewGame()) == "ucinewgame"


def test_bestmove_serialization() -> None:
    best = Move.from_to(Square("a", 1), Square("a", 7))
    assert BestMove(best).serialize() == "bestmove a1a7"

    with_ponder = BestMove.with_ponder(
        Move.from_to(Square("b", 4), Square("a", 5)),
        Move.from_to(Square("b", 4), Square("d", 6)),
    )
    assert with_ponder.serialize() == "bestmove b4a5 ponder b4d6"


def test_protection_states_serialize_lowercase() -> None:
    assert CopyProtection(ProtectionState.checking).serialize() == "copyprotection checking"
    assert Registration(ProtectionState.ok).serialize() == "registration ok"


def test_debug_and_register_serialization() -> None:
    assert Debug(True).serialize() == "debug on"
    assert Debug(False).serialize() == "debug off"
    assert Register.register_later().serialize() == "register later"
    assert Register.with_code("Zoë Kovač", "4359874324").serialize() == (
        "register name Zoë Kovač code 4359874324"
    )


def test_position_serialization() -> None:
    assert Position(startpos=True).serialize() == "position startpos"
    assert Position(startpos=True, moves=[_move("e2e4"), _move("e7e5")]).serialize() == (
        "position startpos moves e2e4 e7e5"
    )
    fen = "2k5/6PR/8/8/2b4P/8/6K1/8 w - - 0 53"
    position = Position(fen=fen, moves=[_move("g7g8q")])
    assert position.fen == Fen(fen)
    assert position.serialize() == f"position fen {fen} moves g7g8q"


def test_setoption_missing_and_blank_values_render_empty_marker() -> None:
    assert SetOption("Some option", "").serialize() == "setoption name Some option value <empty>"
    assert SetOption("ABC").serialize() == "setoption name ABC value <empty>"
    assert SetOption("Hash", "128").serialize() == "setoption name Hash value 128"


def test_setoption_typed_accessors() -> None:
    assert SetOption("Nullmove", "TRUE").as_bool() is True
    assert SetOption("Nullmove", "false").as_bool() is False
    assert SetOption("Nullmove", "3").as_bool() is None
    assert SetOption("Selectivity", "3").as_int() == 3
    assert SetOption("Path", "c:\\tb").as_int() is None
    assert SetOption("Clear Hash").as_bool() is None


def test_go_serialization_orders_clauses() -> None:
    assert Go().serialize() == "go"
    assert Go.go_ponder().serialize() == "go ponder"
    assert Go.go_infinite().serialize() == "go infinite"
    assert Go.go_movetime(55055).serialize() == "go movetime 55055"

    clock = TimeLeft(
        white_time=timedelta(milliseconds=903000),
        black_time=770908,
        white_increment=15000,
        black_increment=10000,
        moves_to_go=17,
    )
    go = Go(
        time_control=clock,
        search_control=SearchControl(search_moves=[_move("e2e4")], depth=6, nodes=500, mate=3),
    )
    assert go.serialize() == (
        "go wtime 903000 btime 770908 winc 15000 binc 10000 movestogo 17 "
        "depth 6 nodes 500 mate 3 searchmoves e2e4"
    )


def test_search_control_constructors() -> None:
    assert SearchControl.with_depth(6) == SearchControl(depth=6)
    assert SearchControl.with_mate(2).serialize() == "mate 2"
    assert SearchControl.with_nodes(10).serialize() == "nodes 10"
    assert SearchControl.with_moves([_move("a1h8")]).search_moves == (_move("a1h8"),)
    assert SearchControl().is_empty()
    assert not SearchControl.with_depth(1).is_empty()


def test_option_serialization() -> None:
    assert Option(CheckOption("Nullmove", False)).serialize() == (
        "option name Nullmove type check default false"
    )
    assert Option(SpinOption("Selectivity", 2, 0, 4)).serialize() == (
        "option name Selectivity type spin default 2 min 0 max 4"
    )
    assert Option(ComboOption("Style", "Normal", ["Solid", "Normal", "Risky"])).serialize() == (
        "option name Style type combo default Normal var Solid var Normal var Risky"
    )
    assert Option(StringOption("Nalimov Path", "c:\\")).serialize() == (
        "option name Nalimov Path type string default c:\\"
    )
    assert Option(StringOption("NP", "")).serialize() == "option name NP type string default <empty>"
    assert Option(ButtonOption("Clear Hash")).serialize() == "option name Clear Hash type button"


def test_info_serialization_keeps_attribute_order() -> None:
    info = Info(
        [
            Depth(2),
            Score.from_centipawns(214),
            Time(1242),
            Nodes(2124),
            Nps(34928),
            Pv([_move("e2e4"), _move("e7e5"), _move("g1f3")]),
        ]
    )
    assert info.serialize() == "info depth 2 score cp 214 time 1242 nodes 2124 nps 34928 pv e2e4 e7e5 g1f3"

    counters = Info([Depth(5), SelDepth(5), MultiPv(1), TbHits(0), SbHits(409), HashFull(455), CpuLoad(823)])
    assert counters.serialize() == "info depth 5 seldepth 5 multipv 1 tbhits 0 sbhits 409 hashfull 455 cpuload 823"


@pytest.mark.parametrize(
    ("attribute", "expected"),
    [
        (Score(cp=817, upper_bound=True), "info score cp 817 upperbound"),
        (Score(cp=-75, lower_bound=True), "info score cp -75 lowerbound"),
        (Score.from_mate(-3), "info score mate -3"),
        (CurrMove(Move.from_uci("a5c3")), "info currmove a5c3"),
        (InfoString("Invalid move: d6e1 - violates chess rules"), "info string Invalid move: d6e1 - violates chess rules"),
        (Refutation([Move.from_uci("d1h5"), Move.from_uci("g6h5")]), "info refutation d1h5 g6h5"),
        (CurrLine(1, [Move.from_uci("d1h5"), Move.from_uci("g6h5")]), "info currline 1 d1h5 g6h5"),
        (CurrLine(None, [Move.from_uci("e2e4")]), "info currline e2e4"),
        (AnyAttribute("other", "Some other message."), "info other Some other message."),
    ],
)
def test_info_attribute_serialization(attribute, expected: str) -> None:
    assert Info([attribute]).serialize() == expected


def test_currmove_followed_by_counter() -> None:
    info = Info([CurrMove(Move.from_uci("a2f2")), CurrMoveNum(2)])
    assert info.serialize() == "info currmove a2f2 currmovenum 2"


def test_move_notation() -> None:
    promotion = Move.from_uci("a7a8q")
    assert promotion.promotion is Piece.queen
    assert str(promotion) == "a7a8q"
    assert Move.from_uci("a7a8Q") == promotion
    assert str(Move(Square("e", 7), Square("e", 8), Piece.pawn)) == "e7e8"
    with pytest.raises(ValueError):
        Move.from_uci("z9a1")
    with pytest.raises(ValueError):
        Piece.from_char("x")


def test_square_default_is_sentinel() -> None:
    assert Square() == Square("\0", 0)


def test_message_directions() -> None:
    assert Uci.direction is CommunicationDirection.gui_to_engine
    assert Go().direction is CommunicationDirection.gui_to_engine
    assert UciOk.direction is CommunicationDirection.engine_to_gui
    assert Info().direction is CommunicationDirection.engine_to_gui


def test_unknown_serializes_raw_text() -> None:
    unknown = Unknown("not really a message")
    assert unknown.is_unknown()
    assert not Uci().is_unknown()
    assert unknown.serialize() == "not really a message"


def test_framed_message_appends_newline() -> None:
    framed = FramedMessage(UciOk())
    assert framed.data == b"uciok\n"
    assert bytes(FramedMessage(UciNewGame())) == b"ucinewgame\n"
    assert framed.text == "uciok\n"
    assert str(framed) == "uciok"
