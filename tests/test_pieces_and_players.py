from __future__ import annotations

import sys
import unittest
from pathlib import Path


ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))


from core.pieces import Color, Piece, Rank  # noqa: E402
from core.player import Player  # noqa: E402
from core.position import Position  # noqa: E402


class PieceTests(unittest.TestCase):
    def test_identifier_must_be_positive(self) -> None:
        with self.assertRaises(ValueError):
            Piece(0, Color.LIGHT)

    def test_equality_uses_id_and_color(self) -> None:
        self.assertEqual(Piece(4, Color.LIGHT), Piece(4, Color.LIGHT, Rank.KING))
        self.assertNotEqual(Piece(4, Color.LIGHT), Piece(4, Color.DARK))
        self.assertEqual(len({Piece(4, Color.LIGHT), Piece(4, Color.LIGHT)}), 1)

    def test_promote_only_once(self) -> None:
        piece = Piece(1, Color.DARK)
        self.assertFalse(piece.is_king)
        self.assertTrue(piece.promote())
        self.assertTrue(piece.is_king)
        self.assertFalse(piece.promote())
        self.assertEqual(repr(piece), "K01(DARK)")

    def test_color_opponent(self) -> None:
        self.assertIs(Color.LIGHT.opponent, Color.DARK)
        self.assertIs(Color.DARK.opponent, Color.LIGHT)


class PlayerTests(unittest.TestCase):
    def test_players_compare_by_id(self) -> None:
        self.assertEqual(Player(1, "Alice"), Player(1, "Renamed"))
        self.assertNotEqual(Player(1, "Alice"), Player(2, "Alice"))
        self.assertEqual(str(Player(2, "Bob")), "Bob (2)")


class PositionTests(unittest.TestCase):
    def test_jump_geometry(self) -> None:
        source = Position(2, 2)
        self.assertTrue(source.is_jump_to(Position(4, 4)))
        self.assertFalse(source.is_jump_to(Position(3, 3)))
        self.assertFalse(source.is_jump_to(Position(4, 2)))
        self.assertEqual(source.midpoint(Position(0, 4)), Position(1, 3))
        self.assertEqual(source.offset((1, -1), 2), Position(4, 0))


if __name__ == "__main__":
    unittest.main()
