"""Core checkers engine package."""

from .board import Board
from .events import GameListener, LoggingListener
from .game import GameController, GameStatus
from .pieces import Color, Piece, Rank
from .player import Player
from .position import Position
from .turn import StepResult, Turn

__all__ = [
	"Board",
	"GameController",
	"GameStatus",
	"GameListener",
	"LoggingListener",
	"Color",
	"Piece",
	"Rank",
	"Player",
	"Position",
	"StepResult",
	"Turn",
]
