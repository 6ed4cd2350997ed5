from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from pydantic import ValidationError

from ui.settings import BOARD_SIZES, GameSettings, PlayerSettings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(description="Two-player checkers in the terminal or a pygame window.")
	parser.add_argument("--board-size", type=int, choices=BOARD_SIZES, default=None, help="Board edge length")
	parser.add_argument("--players", nargs=2, metavar="NAME", default=None, help="Nicknames of both players")
	parser.add_argument("--gui", action="store_true", help="Play in a pygame window instead of the terminal")
	parser.add_argument("--no-color", action="store_true", help="Disable ANSI colours in the terminal")
	parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
	return parser


def parse_settings(argv: Optional[Sequence[str]] = None) -> GameSettings:
	parser = build_parser()
	args = parser.parse_args(argv)
	try:
		return GameSettings(
			board_size=args.board_size,
			players=[PlayerSettings(name=name) for name in args.players or ()],
			frontend="gui" if args.gui else "terminal",
			color=not args.no_color,
			log_level=args.log_level,
		)
	except ValidationError as exc:
		parser.error(str(exc))


def run_gui(settings: GameSettings) -> None:
	import pygame

	from ui.pygame_gui import CheckersGUI

	pygame.init()
	try:
		CheckersGUI(settings).run()
	finally:
		pygame.quit()


def run_terminal(settings: GameSettings) -> None:
	from ui.terminal import TerminalApp

	try:
		TerminalApp(settings).run()
	except (EOFError, KeyboardInterrupt):
		print()


def main(argv: Optional[Sequence[str]] = None) -> None:
	settings = parse_settings(argv)
	logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
	logging.getLogger(__name__).debug("Settings: %s", settings.model_dump())
	if settings.frontend == "gui":
		run_gui(settings)
	else:
		run_terminal(settings)


if __name__ == "__main__":
	main()
