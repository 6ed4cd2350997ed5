from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from . import rules
from .game import GameController
from .pieces import Piece
from .position import Position


class StepResult(Enum):
    INVALID = "invalid"
    CONTINUE = "continue"
    TURN_ENDED = "turn_ended"


@dataclass
class Turn:
    """Selection and multi-jump bookkeeping for the player on move.

    A turn starts with ``select``. Each ``advance`` moves the selected piece;
    after a capture the same piece keeps jumping while it can, and when the
    chain is over the piece is promoted if it reached the far row and the
    controller hands the move to the other player.
    """

    controller: GameController
    piece: Optional[Piece] = None
    first_move: bool = True

    @property
    def in_chain(self) -> bool:
        return not self.first_move

    def select(self, piece: Piece) -> bool:
        if self.in_chain:
            return False
        player = self.controller.current_player
        if player is None or self.controller.getPlayerByPiece(piece) != player:
            return False
        if not self.controller.getPossibleMoves(piece):
            return False
        self.piece = piece
        return True

    def cancel(self) -> bool:
        if self.in_chain:
            return False
        self.piece = None
        return True

    def destinations(self) -> set[Position]:
        if self.piece is None:
            return set()
        return self.controller.getPossibleMoves(self.piece, self.first_move)

    def advance(self, target: Position) -> StepResult:
        if self.piece is None:
            return StepResult.INVALID
        source = self.controller.getPosition(self.piece)
        if source is None or not self.controller.movePiece(self.piece, target, self.first_move):
            return StepResult.INVALID

        if rules.is_jump(source, target) and self.controller.getPossibleMoves(self.piece, False):
            self.first_move = False
            return StepResult.CONTINUE

        self.controller.promotePiece(self.piece)
        self.piece = None
        self.first_move = True
        self.controller.nextTurn()
        return StepResult.TURN_ENDED
