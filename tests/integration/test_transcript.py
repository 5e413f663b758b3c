from __future__ import annotations

from datetime import timedelta

import chess
import pytest

from uciparse import UciCodec
from uciparse.domain.messages import (
    BestMove,
    CheckOption,
    CommunicationDirection,
    Depth,
    Go,
    Id,
    Info,
    IsReady,
    Move,
    Option,
    Position,
    Pv,
    ReadyOk,
    Score,
    SetOption,
    SpinOption,
    Stop,
    TimeLeft,
    Uci,
    UciNewGame,
    UciOk,
)
from uciparse.infrastructure.chess_adapter import best_move_from_chess, position_to_board

GUI_SIDE = (
    "uci\n"
    "setoption name Hash value 64\n"
    "setoption name Ponder value false\n"
    "isready\n"
    "ucinewgame\n"
    "position startpos moves e2e4 e7e5\n"
    "go wtime 300000 btime 300000 winc 2000 binc 2000\n"
    "stop\n"
)

ENGINE_SIDE = (
    "id name Example Engine 2.1\r\n"
    "id author Example Team\r\n"
    "option name Hash type spin default 16 min 1 max 33554432\r\n"
    "option name Ponder type check default false\r\n"
    "uciok\r\n"
    "readyok\r\n"
    "info depth 10 score cp 31 pv g1f3 b8c6\r\n"
    "bestmove g1f3 ponder b8c6\r\n"
)


@pytest.fixture()
def codec(parser_config) -> UciCodec:
    return UciCodec(parser_config, trace_id="transcript")


def test_gui_to_engine_transcript(codec: UciCodec) -> None:
    messages = codec.decode(GUI_SIDE)
    assert messages == [
        Uci(),
        SetOption("Hash", "64"),
        SetOption("Ponder", "false"),
        IsReady(),
        UciNewGame(),
        Position(startpos=True, moves=[Move.from_uci("e2e4"), Move.from_uci("e7e5")]),
        Go(
            time_control=TimeLeft(
                white_time=timedelta(minutes=5),
                black_time=timedelta(minutes=5),
                white_increment=timedelta(seconds=2),
                black_increment=timedelta(seconds=2),
            )
        ),
        Stop(),
    ]
    assert all(message.direction is CommunicationDirection.gui_to_engine for message in messages)
    assert codec.encode_all(messages).decode("utf-8") == GUI_SIDE


def test_engine_to_gui_transcript(codec: UciCodec) -> None:
    messages = codec.decode(ENGINE_SIDE)
    assert messages == [
        Id.with_name("Example Engine 2.1"),
        Id.with_author("Example Team"),
        Option(SpinOption("Hash", 16, 1, 33554432)),
        Option(CheckOption("Ponder", False)),
        UciOk(),
        ReadyOk(),
        Info([Depth(10), Score.from_centipawns(31), Pv([Move.from_uci("g1f3"), Move.from_uci("b8c6")])]),
        BestMove.with_ponder(Move.from_uci("g1f3"), Move.from_uci("b8c6")),
    ]
    assert all(message.direction is CommunicationDirection.engine_to_gui for message in messages)
    assert codec.encode_all(messages) == ENGINE_SIDE.replace("\r\n", "\n").encode("utf-8")


def test_engine_reply_is_legal_on_the_gui_board(codec: UciCodec) -> None:
    position = codec.decode_line("position startpos moves e2e4 e7e5")
    board = position_to_board(position)

    reply = codec.decode_line("bestmove g1f3 ponder b8c6")
    assert chess.Move.from_uci(str(reply.best_move)) in board.legal_moves

    # An engine built on python-chess answers with the same wire text.
    assert best_move_from_chess(chess.Move.from_uci("g1f3"), chess.Move.from_uci("b8c6")) == reply
