from __future__ import annotations

import contextlib
import io
import sys
import unittest
from pathlib import Path

from pydantic import ValidationError


ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))


import main  # noqa: E402
from ui.settings import GameSettings, PlayerSettings  # noqa: E402


class PlayerSettingsTests(unittest.TestCase):
    def test_name_is_stripped(self) -> None:
        self.assertEqual(PlayerSettings(name="  Alice ").name, "Alice")

    def test_name_length_bounds(self) -> None:
        for name in ("Al", "   ab   ", "x" * 21):
            with self.subTest(name=name):
                with self.assertRaises(ValidationError):
                    PlayerSettings(name=name)


class GameSettingsTests(unittest.TestCase):
    def test_defaults(self) -> None:
        settings = GameSettings()
        self.assertIsNone(settings.board_size)
        self.assertEqual(settings.player_names(), [])
        self.assertEqual(settings.frontend, "terminal")
        self.assertTrue(settings.color)
        self.assertEqual(settings.log_level, "WARNING")

    def test_board_size_must_be_supported(self) -> None:
        self.assertEqual(GameSettings(board_size=12).board_size, 12)
        with self.assertRaises(ValidationError):
            GameSettings(board_size=9)

    def test_player_names_must_differ(self) -> None:
        with self.assertRaises(ValidationError):
            GameSettings(players=[PlayerSettings(name="Alice"), PlayerSettings(name="alice")])

    def test_at_most_two_players(self) -> None:
        with self.assertRaises(ValidationError):
            GameSettings(players=[{"name": "Ann"}, {"name": "Bob"}, {"name": "Cid"}])

    def test_log_level_is_case_insensitive(self) -> None:
        self.assertEqual(GameSettings(log_level="debug").log_level, "DEBUG")
        with self.assertRaises(ValidationError):
            GameSettings(log_level="chatty")


class CommandLineTests(unittest.TestCase):
    def test_parse_full_command_line(self) -> None:
        settings = main.parse_settings(
            ["--board-size", "10", "--players", "Ann", "Bob", "--gui", "--no-color", "--log-level", "info"]
        )
        self.assertEqual(settings.board_size, 10)
        self.assertEqual(settings.player_names(), ["Ann", "Bob"])
        self.assertEqual(settings.frontend, "gui")
        self.assertFalse(settings.color)
        self.assertEqual(settings.log_level, "INFO")

    def test_invalid_arguments_exit(self) -> None:
        for argv in (["--board-size", "9"], ["--players", "Al", "Bob"], ["--players", "Ann", "ann"]):
            with self.subTest(argv=argv):
                with contextlib.redirect_stderr(io.StringIO()), self.assertRaises(SystemExit):
                    main.parse_settings(argv)

    def test_terminal_front_end_does_not_load_pygame(self) -> None:
        import ui

        self.assertTrue(hasattr(ui, "TerminalApp"))
        self.assertNotIn("pygame", sys.modules)


if __name__ == "__main__":
    unittest.main()
