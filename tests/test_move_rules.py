from __future__ import annotations

import sys
import unittest
from pathlib import Path


ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))


from core import rules  # noqa: E402
from core.board import Board  # noqa: E402
from core.pieces import Color, Piece, Rank  # noqa: E402
from core.position import Position  # noqa: E402


def place(board: Board, row: int, col: int, piece: Piece) -> Piece:
    board.setPiece(row, col, piece)
    return piece


class StandardMoveTests(unittest.TestCase):
    def setUp(self) -> None:
        self.board = Board(8)

    def test_regular_pieces_step_forward_only(self) -> None:
        light = place(self.board, 2, 2, Piece(1, Color.LIGHT))
        dark = place(self.board, 5, 5, Piece(1, Color.DARK))

        self.assertEqual(rules.possible_moves(self.board, light), {Position(3, 1), Position(3, 3)})
        self.assertEqual(rules.possible_moves(self.board, dark), {Position(4, 4), Position(4, 6)})

    def test_edge_piece_has_single_step(self) -> None:
        light = place(self.board, 2, 0, Piece(1, Color.LIGHT))
        self.assertEqual(rules.possible_moves(self.board, light), {Position(3, 1)})

    def test_blocked_piece_has_no_moves(self) -> None:
        light = place(self.board, 0, 0, Piece(1, Color.LIGHT))
        place(self.board, 1, 1, Piece(2, Color.LIGHT))
        self.assertEqual(rules.possible_moves(self.board, light), set())

    def test_king_moves_in_every_direction(self) -> None:
        king = place(self.board, 3, 3, Piece(1, Color.LIGHT, Rank.KING))
        self.assertEqual(
            rules.possible_moves(self.board, king),
            {Position(2, 2), Position(2, 4), Position(4, 2), Position(4, 4)},
        )

    def test_piece_off_board_has_no_moves(self) -> None:
        self.assertEqual(rules.possible_moves(self.board, Piece(1, Color.LIGHT)), set())


class JumpMoveTests(unittest.TestCase):
    def setUp(self) -> None:
        self.board = Board(8)
        self.light = place(self.board, 2, 2, Piece(1, Color.LIGHT))

    def test_capture_is_forced_on_first_move(self) -> None:
        place(self.board, 3, 3, Piece(1, Color.DARK))
        moves = rules.possible_moves(self.board, self.light)
        self.assertEqual(moves, {Position(4, 4)})

    def test_cannot_jump_own_piece_or_onto_occupied_cell(self) -> None:
        place(self.board, 3, 1, Piece(2, Color.LIGHT))
        place(self.board, 3, 3, Piece(1, Color.DARK))
        place(self.board, 4, 4, Piece(2, Color.DARK))
        self.assertEqual(rules.possible_jump_moves(self.board, self.light), set())
        self.assertEqual(rules.possible_moves(self.board, self.light), set())

    def test_regular_piece_cannot_capture_backwards(self) -> None:
        place(self.board, 1, 1, Piece(1, Color.DARK))
        self.assertEqual(rules.possible_jump_moves(self.board, self.light), set())

    def test_king_captures_backwards(self) -> None:
        self.light.promote()
        place(self.board, 1, 1, Piece(1, Color.DARK))
        self.assertEqual(rules.possible_moves(self.board, self.light), {Position(0, 0)})

    def test_chain_continuation_only_offers_jumps(self) -> None:
        self.assertEqual(rules.possible_moves(self.board, self.light, first_move_of_turn=False), set())

        place(self.board, 3, 1, Piece(1, Color.DARK))
        moves = rules.possible_moves(self.board, self.light, first_move_of_turn=False)
        self.assertEqual(moves, {Position(4, 0)})
        source = Position(2, 2)
        self.assertTrue(all(rules.is_jump(source, target) for target in moves))


if __name__ == "__main__":
    unittest.main()
