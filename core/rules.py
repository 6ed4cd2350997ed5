"""Move legality for regular pieces and kings.

Every function here is pure: it reads the board and the piece and returns
sets of destination cells. A piece's position is always resolved by scanning
the board, so the answers can never disagree with the grid.
"""

from __future__ import annotations

from typing import Optional

from .board import Board
from .pieces import Color, Piece
from .position import Direction, Position

DIAGONALS: tuple[Direction, ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))


def forward_direction(color: Color) -> int:
    # Light starts on row 0 and advances down the grid.
    return 1 if color is Color.LIGHT else -1


def within_boundaries(board: Board, row: int, col: int) -> bool:
    return 0 <= row < board.boardSize and 0 <= col < board.boardSize


def can_move_backward(piece: Piece) -> bool:
    return piece.is_king


def allowed_directions(piece: Piece) -> tuple[Direction, ...]:
    if can_move_backward(piece):
        return DIAGONALS
    forward = forward_direction(piece.color)
    return tuple((dr, dc) for dr, dc in DIAGONALS if dr == forward)


def is_jump(source: Position, target: Position) -> bool:
    return source.is_jump_to(target)


def _origin(board: Board, piece: Piece, origin: Optional[Position]) -> Optional[Position]:
    return origin if origin is not None else board.locate(piece)


def possible_standard_moves(
    board: Board,
    piece: Piece,
    origin: Optional[Position] = None,
) -> set[Position]:
    start = _origin(board, piece, origin)
    if start is None:
        return set()

    moves: set[Position] = set()
    for direction in allowed_directions(piece):
        target = start.offset(direction)
        if within_boundaries(board, target.row, target.col) and board.getPieceAt(target) is None:
            moves.add(target)
    return moves


def possible_jump_moves(
    board: Board,
    piece: Piece,
    origin: Optional[Position] = None,
) -> set[Position]:
    start = _origin(board, piece, origin)
    if start is None:
        return set()

    jumps: set[Position] = set()
    for direction in allowed_directions(piece):
        over = start.offset(direction)
        landing = start.offset(direction, 2)
        if not within_boundaries(board, landing.row, landing.col):
            continue
        if board.getPieceAt(landing) is not None:
            continue
        enemy = board.getPieceAt(over)
        if enemy is None or enemy.color == piece.color:
            continue
        jumps.add(landing)
    return jumps


def possible_moves(
    board: Board,
    piece: Piece,
    first_move_of_turn: bool = True,
    origin: Optional[Position] = None,
) -> set[Position]:
    """Return every legal destination for ``piece``.

    On the first move of a turn a capture is forced whenever one exists, so
    jump destinations replace the standard ones. Once a piece has captured in
    the current turn it may only keep jumping.
    """

    start = _origin(board, piece, origin)
    if start is None:
        return set()

    jumps = possible_jump_moves(board, piece, start)
    if jumps or not first_move_of_turn:
        return jumps
    return possible_standard_moves(board, piece, start)
