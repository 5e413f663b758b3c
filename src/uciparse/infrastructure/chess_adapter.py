from __future__ import annotations

from typing import Iterable, List, Optional

import chess

from ..domain.messages.message import BestMove, Position
from ..domain.messages.moves import Fen, Move, Piece, Square


def piece_to_chess(piece: Piece) -> chess.PieceType:
    return chess.PIECE_SYMBOLS.index(piece.value)


def piece_from_chess(piece_type: chess.PieceType) -> Piece:
    return Piece(chess.piece_symbol(piece_type))


def square_to_chess(square: Square) -> chess.Square:
    if square.file not in chess.FILE_NAMES or not 1 <= square.rank <= 8:
        raise ValueError(f"Square {square!r} is off the board.")
    return chess.square(chess.FILE_NAMES.index(square.file), square.rank - 1)


def square_from_chess(square: chess.Square) -> Square:
    return Square(
        file=chess.FILE_NAMES[chess.square_file(square)],
        rank=chess.square_rank(square) + 1,
    )


def move_to_chess(move: Move) -> chess.Move:
    promotion = piece_to_chess(move.promotion) if move.promotion is not None else None
    return chess.Move(
        square_to_chess(move.from_square),
        square_to_chess(move.to_square),
        promotion=promotion,
    )


def move_from_chess(move: chess.Move) -> Move:
    """Convert a python-chess move; null moves have no coordinate form."""
    if not move:
        raise ValueError("Null moves cannot be expressed in coordinate notation.")
    return Move(
        from_square=square_from_chess(move.from_square),
        to_square=square_from_chess(move.to_square),
        promotion=piece_from_chess(move.promotion) if move.promotion else None,
    )


def fen_to_board(fen: Fen) -> chess.Board:
    return chess.Board(fen.as_str())


def fen_from_board(board: chess.Board) -> Fen:
    return Fen(board.fen())


def position_to_board(position: Position) -> chess.Board:
    """Build the board a ``position`` command describes.

    Moves are replayed with legality checks, so an illegal sequence raises
    ``chess.IllegalMoveError``.
    """
    board = fen_to_board(position.fen) if position.fen is not None else chess.Board()
    for move in position.moves:
        board.push_uci(str(move))
    return board


def position_from_board(board: chess.Board) -> Position:
    """Describe ``board`` as its root position plus the played moves."""
    moves: List[Move] = [move_from_chess(move) for move in board.move_stack]
    root = board.root()
    if root.fen() == chess.STARTING_FEN:
        return Position(startpos=True, moves=moves)
    return Position(startpos=False, fen=fen_from_board(root), moves=moves)


def best_move_from_chess(best_move: chess.Move, ponder: Optional[chess.Move] = None) -> BestMove:
    return BestMove(
        best_move=move_from_chess(best_move),
        ponder=move_from_chess(ponder) if ponder is not None else None,
    )


def moves_to_chess(moves: Iterable[Move]) -> List[chess.Move]:
    return [move_to_chess(move) for move in moves]


__all__ = [
    "best_move_from_chess",
    "fen_from_board",
    "fen_to_board",
    "move_from_chess",
    "move_to_chess",
    "moves_to_chess",
    "piece_from_chess",
    "piece_to_chess",
    "position_from_board",
    "position_to_board",
    "square_from_chess",
    "square_to_chess",
]
