from __future__ import annotations

import sys
import unittest
from pathlib import Path


ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))


from core.board import Board  # noqa: E402
from core.pieces import Color, Piece  # noqa: E402
from core.position import Position  # noqa: E402


class BoardConstructionTests(unittest.TestCase):
    def test_new_board_is_empty(self) -> None:
        board = Board(8)
        self.assertEqual(board.boardSize, 8)
        self.assertEqual(board.countOccupied(), 0)
        self.assertEqual(len(board.board), 8)
        self.assertTrue(all(len(row) == 8 for row in board.board))

    def test_rejects_odd_or_tiny_sizes(self) -> None:
        for size in (0, 2, 7, 9):
            with self.subTest(size=size):
                with self.assertRaises(ValueError):
                    Board(size)


class BoardAccessTests(unittest.TestCase):
    def setUp(self) -> None:
        self.board = Board(8)
        self.piece = Piece(3, Color.DARK)

    def test_set_and_get_piece(self) -> None:
        self.board.setPiece(5, 1, self.piece)
        self.assertIs(self.board.getPiece(5, 1), self.piece)
        self.assertIs(self.board.getPieceAt(Position(5, 1)), self.piece)
        self.assertEqual(self.board.locate(self.piece), Position(5, 1))

    def test_get_outside_board_returns_none(self) -> None:
        self.assertIsNone(self.board.getPiece(-1, 0))
        self.assertIsNone(self.board.getPiece(0, 8))

    def test_set_outside_board_raises(self) -> None:
        with self.assertRaises(ValueError):
            self.board.setPiece(8, 0, self.piece)

    def test_locate_missing_piece(self) -> None:
        self.assertIsNone(self.board.locate(self.piece))

    def test_occupied_cells_and_clear(self) -> None:
        other = Piece(1, Color.LIGHT)
        self.board.setPieceAt(Position(0, 0), other)
        self.board.setPieceAt(Position(5, 1), self.piece)

        cells = dict(self.board.occupiedCells())
        self.assertEqual(cells, {Position(0, 0): other, Position(5, 1): self.piece})
        self.assertEqual(self.board.getAllPieces(), [other, self.piece])

        self.board.clear()
        self.assertEqual(self.board.countOccupied(), 0)


if __name__ == "__main__":
    unittest.main()
