from __future__ import annotations

import logging
import re
from typing import Callable, Iterable, Optional, Sequence

from pydantic import ValidationError

from core.board import Board
from core.events import GameListener
from core.game import GameController, GameStatus
from core.pieces import Color, Piece
from core.player import Player
from core.position import Position
from core.turn import StepResult, Turn

from .settings import BOARD_SIZES, GameSettings, PlayerSettings

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

_COORDINATE = re.compile(r"^\s*([A-Za-z])\s*(\d{1,2})\s*$")
RESIGN_COMMAND = "resign"


def parse_position(text: str, board_size: int) -> Optional[Position]:
    """Turn a square name like ``D5`` into a board position.

    Files are lettered from ``A`` on the left, ranks are numbered from 1 at
    the bottom row of the grid.
    """

    match = _COORDINATE.match(text)
    if not match:
        return None
    col = ord(match.group(1).upper()) - ord("A")
    rank = int(match.group(2))
    row = board_size - rank
    if not (0 <= row < board_size and 0 <= col < board_size):
        return None
    return Position(row, col)


def format_position(position: Position, board_size: int) -> str:
    return f"{chr(ord('A') + position.col)}{board_size - position.row}"


class Palette:
    RESET = "\u001b[0m"
    CODES = {
        Color.LIGHT: "\u001b[34m",
        Color.DARK: "\u001b[31m",
        "highlight": "\u001b[33m",
        "info": "\u001b[36m",
        "title": "\u001b[32m",
        "error": "\u001b[31m",
    }

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled

    def paint(self, text: str, key: object) -> str:
        if not self.enabled:
            return text
        return f"{self.CODES[key]}{text}{self.RESET}"


def piece_symbol(piece: Piece) -> str:
    return f"{'K' if piece.is_king else 'R'}{piece.id:02d}"


def render_board(board: Board, palette: Palette, highlights: Iterable[Position] = ()) -> str:
    size = board.boardSize
    marked = set(highlights)
    separator = palette.paint("-------" * size + "--", "highlight")
    lines: list[str] = []
    for row in range(size):
        lines.append(separator)
        cells = [palette.paint(f"{size - row:02d}", "highlight")]
        for col in range(size):
            piece = board.getPiece(row, col)
            if piece is not None:
                cells.append(palette.paint(f"| {piece_symbol(piece)} |", piece.color))
            elif Position(row, col) in marked:
                cells.append(palette.paint("|  X  |", "highlight"))
            else:
                cells.append("|     |")
        lines.append("".join(cells))
    lines.append(separator)
    files = "".join(f"   {chr(ord('A') + col)}   " for col in range(size))
    lines.append(palette.paint("  " + files, "highlight"))
    return "\n".join(lines)


class TerminalRenderer(GameListener):
    """Prints controller notifications as they happen."""

    def __init__(self, output: OutputFn, palette: Palette, board_size: Callable[[], int]) -> None:
        self.output = output
        self.palette = palette
        self.board_size = board_size

    def on_piece_moved(self, piece: Piece, position: Position) -> None:
        square = format_position(position, self.board_size())
        self.output(self.palette.paint(f"Piece {piece.id} moved to {square}", piece.color))

    def on_piece_captured(self, piece: Piece) -> None:
        self.output(self.palette.paint(f"Piece {piece.id} has been captured", piece.color))

    def on_piece_promoted(self, piece: Piece) -> None:
        self.output(self.palette.paint(f"Piece {piece.id} has been promoted to King", piece.color))

    def on_player_added(self, player: Player) -> None:
        self.output(f"New player added: {player.name}")


class TerminalApp:
    """Console front-end: setup menus, board drawing and the turn loop."""

    def __init__(
        self,
        settings: GameSettings,
        input_fn: InputFn = input,
        output: OutputFn = print,
    ) -> None:
        self.settings = settings
        self.input = input_fn
        self.output = output
        self.palette = Palette(settings.color)
        self.controller: Optional[GameController] = None

    def run(self) -> Optional[Player]:
        controller = self.setup()
        if controller is None:
            return None
        return self.play(controller)

    # setup --------------------------------------------------------------

    def setup(self) -> Optional[GameController]:
        while True:
            self.output(self.palette.paint("Welcome to Checkers", "title"))
            if self.choose("Main menu", ["Start", "Exit"]) == 1:
                return None

            controller = GameController()
            self._attach_renderer(controller)
            controller.setBoard(Board(self._board_size()))

            for index, name in enumerate(self._player_names(), start=1):
                controller.addPlayer(Player(index, name))

            for player, color in zip(controller.getActivePlayers(), (Color.LIGHT, Color.DARK)):
                pieces = controller.generatePieces(color, controller.maxPlayerPieces())
                controller.setPlayerPieces(player, pieces)
            controller.setPieceToBoard()

            self.output(self.palette.paint("Finalize setup", "title"))
            self.output(f"Board size: {controller.getBoardSize()}")
            for player in controller.getActivePlayers():
                self.output(f"Player {player.id}: {player.name}")
            if self.choose("Play checkers?", ["Yes", "No"]) == 0:
                self.controller = controller
                return controller
            controller.removeAllPlayers()

    def _attach_renderer(self, controller: GameController) -> None:
        controller.add_listener(TerminalRenderer(self.output, self.palette, controller.getBoardSize))

    def choose(self, title: str, options: Sequence[object]) -> int:
        self.output(self.palette.paint(title, "info"))
        for number, option in enumerate(options, start=1):
            self.output(f"  {number}. {option}")
        while True:
            answer = self.input(f"Select option (1-{len(options)}): ").strip()
            if answer.isdigit() and 1 <= int(answer) <= len(options):
                return int(answer) - 1
            self.output(self.palette.paint("Invalid option.", "error"))

    def _board_size(self) -> int:
        if self.settings.board_size is not None:
            return self.settings.board_size
        return BOARD_SIZES[self.choose("Select the board size", BOARD_SIZES)]

    def _player_names(self) -> list[str]:
        names = self.settings.player_names()
        while len(names) < 2:
            name = self.ask_name(len(names) + 1)
            if name.casefold() in (existing.casefold() for existing in names):
                self.output(self.palette.paint("That name is already taken.", "error"))
                continue
            names.append(name)
        return names

    def ask_name(self, number: int) -> str:
        while True:
            raw = self.input(f"Player {number} nickname: ")
            try:
                return PlayerSettings(name=raw).name
            except ValidationError as exc:
                self.output(self.palette.paint(exc.errors()[0]["msg"], "error"))

    # game loop ----------------------------------------------------------

    def play(self, controller: GameController) -> Optional[Player]:
        if controller is not self.controller:
            self._attach_renderer(controller)
            self.controller = controller
        if controller.status is GameStatus.NOT_READY and not controller.start():
            self.output(self.palette.paint("The game could not be started.", "error"))
            return None

        turn = Turn(controller)
        while not controller.gameOver():
            player = controller.current_player
            if not turn.in_chain and not controller.getMovablePieces(player):
                self.output(f"{player.name} has no legal move left.")
                controller.resign(player)
                continue

            self.draw(controller, turn)
            if turn.piece is None:
                if not self.select_piece(controller, turn):
                    controller.resign(player)
                    continue
                self.draw(controller, turn)

            self.move_selected(controller, turn)

        return self.announce_winner(controller)

    def draw(self, controller: GameController, turn: Turn) -> None:
        for player in controller.getActivePlayers():
            self.output(self._player_panel(controller, player))
        self.output(render_board(controller.board, self.palette, turn.destinations()))
        current = controller.current_player
        color = self._player_color(controller, current)
        self.output(self.palette.paint(f"PLAYER {current.id} TURN: {current.name}", color))
        if turn.piece is not None:
            self.output(self.palette.paint(f"Piece selected: {piece_symbol(turn.piece)}", "title"))

    def select_piece(self, controller: GameController, turn: Turn) -> bool:
        """Ask for a piece number; returns ``False`` when the player resigns."""

        player = controller.current_player
        while True:
            answer = self.input(f"Choose piece to move (e.g. 2) or '{RESIGN_COMMAND}': ").strip()
            if answer.lower() == RESIGN_COMMAND:
                return False
            if not answer.isdigit() or not 0 < int(answer) <= controller.maxPlayerPieces():
                continue
            piece = controller.getPiece(player, int(answer))
            if piece is None:
                continue
            if turn.select(piece):
                return True
            self.output(self.palette.paint("Piece can't be moved, please select another piece!", "error"))

    def move_selected(self, controller: GameController, turn: Turn) -> StepResult:
        while True:
            answer = self.input("Select new position (e.g. D5): ")
            target = parse_position(answer, controller.getBoardSize())
            if target is None:
                continue
            result = turn.advance(target)
            if result is not StepResult.INVALID:
                logger.debug("Step to %s: %s", target, result.name)
                return result
            self.output(self.palette.paint("Invalid move!", "error"))

    def announce_winner(self, controller: GameController) -> Optional[Player]:
        winner = controller.getWinner()
        if winner is None:
            self.output("END RESULT: DRAW")
        else:
            color = self._player_color(controller, winner)
            self.output(self.palette.paint(f"Congratulations {winner.name}, you have won!", color))
        return winner

    def _player_color(self, controller: GameController, player: Player) -> Color:
        players = controller.getActivePlayers()
        return Color.LIGHT if players and players[0] == player else Color.DARK

    def _player_panel(self, controller: GameController, player: Player) -> str:
        color = self._player_color(controller, player)
        remaining = len(controller.getPlayerPieces(player))
        lines = [
            f"======================== PLAYER {player.id} ========================",
            f"NICKNAME: {player.name.upper()}",
            f"PIECE COLOR: {color.name}",
            f"PIECE REMAINING: {remaining} Pieces",
        ]
        return self.palette.paint("\n".join(lines), color)
