from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .game import GameStatus
    from .pieces import Piece
    from .player import Player
    from .position import Position


class GameListener:
    """Observer for controller notifications.

    Callbacks run synchronously inside the controller call that triggered
    them. Subclasses override only the events they care about.
    """

    def on_piece_moved(self, piece: "Piece", position: "Position") -> None:
        pass

    def on_piece_captured(self, piece: "Piece") -> None:
        pass

    def on_piece_promoted(self, piece: "Piece") -> None:
        pass

    def on_player_added(self, player: "Player") -> None:
        pass

    def on_status_changed(self, status: "GameStatus") -> None:
        pass

    def on_turn_changed(self, player: "Player") -> None:
        pass


class LoggingListener(GameListener):
    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.INFO) -> None:
        self.logger = logger or logging.getLogger(__name__)
        self.level = level

    def on_piece_moved(self, piece: "Piece", position: "Position") -> None:
        self.logger.log(self.level, "Piece %r moved to %s", piece, position)

    def on_piece_captured(self, piece: "Piece") -> None:
        self.logger.log(self.level, "Piece %r captured", piece)

    def on_piece_promoted(self, piece: "Piece") -> None:
        self.logger.log(self.level, "Piece %r promoted to king", piece)

    def on_player_added(self, player: "Player") -> None:
        self.logger.log(self.level, "Player %s joined", player)

    def on_status_changed(self, status: "GameStatus") -> None:
        self.logger.log(self.level, "Game status is now %s", status.name)

    def on_turn_changed(self, player: "Player") -> None:
        self.logger.log(self.level, "Turn passes to %s", player)
