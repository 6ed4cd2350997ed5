from __future__ import annotations

from collections import deque

import pygame
from pygame import gfxdraw

from core.events import GameListener
from core.game import GameController
from core.pieces import Color, Piece
from core.player import Player
from core.position import Position
from core.turn import StepResult, Turn

from .settings import GameSettings

DEFAULT_NAMES = ("Player 1", "Player 2")


class CheckersGUI(GameListener):
    def __init__(self, settings: GameSettings, square_size: int = 72, info_height: int = 210) -> None:
        self.settings = settings
        self.board_size = settings.board_size or 8
        names = settings.player_names()
        self.names = [*names, *DEFAULT_NAMES[len(names):]]

        self.square_size = square_size
        self.board_pixels = self.square_size * self.board_size
        self.info_height = info_height
        self.margin = 40
        self.window_width = self.board_pixels + self.margin * 2
        self.window_height = self.board_pixels + self.info_height + self.margin * 2

        self.screen = pygame.display.set_mode((self.window_width, self.window_height))
        pygame.display.set_caption("Checkers")

        self.font = pygame.font.SysFont("arial", 22)
        self.small_font = pygame.font.SysFont("arial", 16)
        self.title_font = pygame.font.SysFont("arial", 26, bold=True)
        self.king_font = pygame.font.SysFont("arial", 22, bold=True)
        self.clock = pygame.time.Clock()

        self.colors = {
            "light": (233, 210, 173),
            "dark": (145, 104, 66),
            "highlight": (246, 227, 90),
            "selected": (252, 142, 80),
            Color.LIGHT: (70, 110, 200),
            Color.DARK: (190, 50, 50),
            "outline": (25, 25, 25),
            "background": (30, 34, 45),
            "info_bg": (40, 46, 60),
            "panel_border": (86, 94, 110),
            "text": (230, 230, 230),
            "king": (255, 215, 0),
        }

        self.hover_cell: Position | None = None
        self.messages: deque[str] = deque(maxlen=3)
        self.new_game()

    def new_game(self) -> None:
        first, second = Player(1, self.names[0]), Player(2, self.names[1])
        self.controller = GameController.standard(first, second, self.board_size, listeners=(self,))
        self.controller.start()
        self.turn = Turn(self.controller)
        self.winner: Player | None = None
        self.finished = False
        self.messages.clear()

    # listener callbacks -------------------------------------------------

    def on_piece_captured(self, piece: Piece) -> None:
        self.messages.append(f"Piece {piece.id} ({piece.color.value}) captured")

    def on_piece_promoted(self, piece: Piece) -> None:
        self.messages.append(f"Piece {piece.id} ({piece.color.value}) promoted to King")

    def on_turn_changed(self, player: Player) -> None:
        self.messages.append(f"{player.name} to move")

    # event loop ---------------------------------------------------------

    def run(self) -> None:
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key in (pygame.K_ESCAPE, pygame.K_q):
                        running = False
                    elif event.key == pygame.K_r:
                        self.new_game()
                elif event.type == pygame.MOUSEMOTION:
                    self.hover_cell = self._board_coords_from_pos(event.pos)
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    self._handle_click(event.pos)

            self._draw()
            pygame.display.flip()
            self.clock.tick(60)

    def _handle_click(self, pos: tuple[int, int]) -> None:
        cell = self._board_coords_from_pos(pos)
        if cell is None or self.finished:
            return

        if self.turn.piece is not None and cell in self.turn.destinations():
            if self.turn.advance(cell) is StepResult.TURN_ENDED:
                self._check_game_over()
            return

        piece = self.controller.getPieceAt(cell)
        if piece is None or not self.turn.select(piece):
            self.turn.cancel()

    def _check_game_over(self) -> None:
        player = self.controller.current_player
        if player is not None and not self.controller.getMovablePieces(player):
            self.messages.append(f"{player.name} has no legal move left")
            self.controller.resign(player)
        if self.controller.gameOver():
            self.finished = True
            self.winner = self.controller.getWinner()

    def _board_coords_from_pos(self, pos: tuple[int, int]) -> Position | None:
        x, y = pos
        x -= self.margin
        y -= self.margin
        if x < 0 or y < 0 or x >= self.board_pixels or y >= self.board_pixels:
            return None
        return Position(y // self.square_size, x // self.square_size)

    # drawing ------------------------------------------------------------

    def _draw(self) -> None:
        self.screen.fill(self.colors["background"])
        self._draw_board()
        self._draw_selection()
        self._draw_pieces()
        self._draw_info_panel()

    def _cell_rect(self, position: Position) -> pygame.Rect:
        return pygame.Rect(
            self.margin + position.col * self.square_size,
            self.margin + position.row * self.square_size,
            self.square_size,
            self.square_size,
        )

    def _center_for_cell(self, position: Position) -> tuple[int, int]:
        return self._cell_rect(position).center

    def _draw_board(self) -> None:
        for row in range(self.board_size):
            for col in range(self.board_size):
                # Pieces stand on the squares where row + col is even.
                color = self.colors["dark"] if (row + col) % 2 == 0 else self.colors["light"]
                pygame.draw.rect(self.screen, color, self._cell_rect(Position(row, col)))

        for idx in range(self.board_size):
            letter = self.small_font.render(chr(ord("A") + idx), True, self.colors["text"])
            number = self.small_font.render(str(self.board_size - idx), True, self.colors["text"])
            cx = self.margin + idx * self.square_size + self.square_size // 2
            cy = self.margin + idx * self.square_size + self.square_size // 2
            self.screen.blit(letter, letter.get_rect(center=(cx, self.margin + self.board_pixels + 18)))
            self.screen.blit(number, number.get_rect(center=(self.margin - 18, cy)))

    def _draw_selection(self) -> None:
        if self.turn.piece is None:
            return
        position = self.controller.getPosition(self.turn.piece)
        if position is not None:
            pygame.draw.rect(self.screen, self.colors["selected"], self._cell_rect(position), 4, border_radius=8)

        for destination in self.turn.destinations():
            cx, cy = self._center_for_cell(destination)
            radius = 16 if destination == self.hover_cell else 12
            gfxdraw.filled_circle(self.screen, cx, cy, radius, (*self.colors["highlight"], 140))
            gfxdraw.aacircle(self.screen, cx, cy, radius, self.colors["outline"])

    def _draw_pieces(self) -> None:
        radius = (self.square_size - 14) // 2
        for position, piece in self.controller.board.occupiedCells():
            cx, cy = self._center_for_cell(position)
            pygame.draw.circle(self.screen, self.colors[piece.color], (cx, cy), radius)
            pygame.draw.circle(self.screen, self.colors["outline"], (cx, cy), radius, 2)
            label = "K" if piece.is_king else str(piece.id)
            text_color = self.colors["king"] if piece.is_king else self.colors["text"]
            text = self.king_font.render(label, True, text_color)
            self.screen.blit(text, text.get_rect(center=(cx, cy)))

    def _draw_info_panel(self) -> None:
        panel_top = self.margin + self.board_pixels + 40
        info_rect = pygame.Rect(self.margin, panel_top, self.board_pixels, self.info_height - 20)
        pygame.draw.rect(self.screen, self.colors["info_bg"], info_rect, border_radius=16)
        pygame.draw.rect(self.screen, self.colors["panel_border"], info_rect, 2, border_radius=16)

        y_offset = info_rect.top + 12
        for player, color in zip(self.controller.getActivePlayers(), (Color.LIGHT, Color.DARK)):
            pieces = self.controller.getPlayerPieces(player)
            kings = sum(1 for piece in pieces if piece.is_king)
            marker = "> " if player == self.controller.current_player and not self.finished else "  "
            line = f"{marker}{player.name}: {len(pieces)} pieces, {kings} kings"
            self.screen.blit(self.font.render(line, True, self.colors[color]), (info_rect.left + 16, y_offset))
            y_offset += 28

        if self.finished:
            result = f"Winner: {self.winner.name}" if self.winner else "Result: draw"
            self.screen.blit(self.title_font.render(result, True, self.colors["king"]), (info_rect.left + 16, y_offset))
            y_offset += 32
        elif self.turn.in_chain:
            text = self.small_font.render("Keep jumping with the same piece", True, self.colors["highlight"])
            self.screen.blit(text, (info_rect.left + 16, y_offset))
            y_offset += 22

        status = self.controller.status.name.replace("_", " ").title()
        for message in [*self.messages, f"Status: {status}  |  R: Restart  |  Esc/Q: Quit"]:
            self.screen.blit(self.small_font.render(message, True, self.colors["text"]), (info_rect.left + 16, y_offset))
            y_offset += 20
