from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable, Optional

from . import rules
from .board import Board
from .events import GameListener
from .pieces import Color, Piece
from .player import Player
from .position import Position


class GameStatus(Enum):
    NOT_READY = "not_ready"
    READY = "ready"
    ON_GOING = "on_going"
    GAME_OVER = "game_over"


_PLAYABLE = (GameStatus.READY, GameStatus.ON_GOING)


class GameController:
    """Two-player checkers game: board, players, pieces, turns and status.

    Mutating operations return ``True`` on success and ``False`` when a
    precondition does not hold; a rejected call leaves the game untouched.
    """

    def __init__(self, board: Optional[Board] = None, *, logger: Optional[logging.Logger] = None) -> None:
        self.board = board
        self.logger = logger or logging.getLogger(__name__)
        self._player_pieces: dict[Player, list[Piece]] = {}
        self._status = GameStatus.NOT_READY
        self._current_player: Optional[Player] = None
        self._listeners: list[GameListener] = []

    @classmethod
    def standard(
        cls,
        first: Player,
        second: Player,
        board_size: int = 8,
        *,
        listeners: Iterable[GameListener] = (),
        logger: Optional[logging.Logger] = None,
    ) -> "GameController":
        """Build a game ready to ``start()``: light pieces for ``first``, dark for ``second``."""

        if first == second:
            raise ValueError("A game needs two players with different ids.")
        controller = cls(logger=logger)
        for listener in listeners:
            controller.add_listener(listener)
        controller.setBoard(Board(board_size))
        for player, color in ((first, Color.LIGHT), (second, Color.DARK)):
            controller.addPlayer(player)
            controller.setPlayerPieces(player, controller.generatePieces(color, controller.maxPlayerPieces()))
        controller.setPieceToBoard()
        return controller

    # listeners ----------------------------------------------------------

    def add_listener(self, listener: GameListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: GameListener) -> None:
        self._listeners.remove(listener)

    def _notify(self, callback: str, *payload: object) -> None:
        self.logger.debug("%s%r", callback, payload)
        for listener in list(self._listeners):
            getattr(listener, callback)(*payload)

    # players ------------------------------------------------------------

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def current_player(self) -> Optional[Player]:
        return self._current_player

    def addPlayer(self, player: Player) -> bool:
        if player in self._player_pieces:
            return False
        self._player_pieces[player] = []
        self.logger.info("Player %s registered", player)
        self._notify("on_player_added", player)
        return True

    def getActivePlayers(self) -> list[Player]:
        return list(self._player_pieces)

    def removeAllPlayers(self) -> None:
        self._player_pieces.clear()
        self._current_player = None
        if self.board is not None:
            self.board.clear()
        self._set_status(GameStatus.NOT_READY)

    def setPlayerPieces(self, player: Player, pieces: Iterable[Piece]) -> bool:
        if player not in self._player_pieces:
            return False
        self._player_pieces[player] = list(pieces)
        return True

    def getPlayerPieces(self, player: Player) -> list[Piece]:
        return list(self._player_pieces.get(player, ()))

    def getPlayerByPiece(self, piece: Piece) -> Optional[Player]:
        for player, pieces in self._player_pieces.items():
            if piece in pieces:
                return player
        return None

    def setCurrentPlayer(self, player: Player) -> bool:
        if player not in self._player_pieces:
            return False
        self._current_player = player
        self._notify("on_turn_changed", player)
        return True

    # pieces and board ---------------------------------------------------

    @staticmethod
    def generatePieces(color: Color, quantity: int = 12) -> list[Piece]:
        return [Piece(identifier, color) for identifier in range(1, quantity + 1)]

    def setBoard(self, board: Board) -> bool:
        if self._status is not GameStatus.NOT_READY:
            return False
        self.board = board
        return True

    def getBoardSize(self) -> int:
        return self.board.boardSize if self.board is not None else 0

    def maxPlayerPieces(self) -> int:
        size = self.getBoardSize()
        return size * (size - 2) // 4 + size % 2

    def countPieceOnBoard(self) -> int:
        return self.board.countOccupied() if self.board is not None else 0

    def setPieceToBoard(self, player: Optional[Player] = None) -> bool:
        """Lay out pieces in the starting formation.

        Without ``player`` every registered player's pieces are placed. A
        piece whose cell is already taken, or which already stands on the
        board, is left off the board.
        """

        if self._status is not GameStatus.NOT_READY or self.board is None or not self._player_pieces:
            return False
        if player is not None and player not in self._player_pieces:
            return False

        targets = [player] if player is not None else list(self._player_pieces)
        for target in targets:
            self._place_formation(self._player_pieces[target])
        return True

    def _place_formation(self, pieces: list[Piece]) -> None:
        if not pieces:
            return
        for piece, cell in zip(pieces, self._home_cells(pieces[0].color)):
            if self.board.getPieceAt(cell) is not None or self.board.locate(piece) is not None:
                self.logger.debug("Skipping placement of %r on %s", piece, cell)
                continue
            self.board.setPieceAt(cell, piece)

    def _home_cells(self, color: Color) -> list[Position]:
        size = self.board.boardSize
        rows = (size - 2) // 2
        first_row = 0 if color is Color.LIGHT else size - rows
        return [
            Position(row, col)
            for row in range(first_row, first_row + rows)
            for col in range(size)
            if (row + col) % 2 == 0
        ]

    def getPiece(self, player: Player, identifier: int) -> Optional[Piece]:
        for piece in self._player_pieces.get(player, ()):
            if piece.id == identifier:
                return piece
        return None

    def getPieceAt(self, position: Position) -> Optional[Piece]:
        return self.board.getPieceAt(position) if self.board is not None else None

    def getPosition(self, piece: Piece) -> Optional[Position]:
        return self.board.locate(piece) if self.board is not None else None

    def removePiece(self, player: Player, identifier: int) -> bool:
        piece = self.getPiece(player, identifier)
        if piece is None:
            return False
        position = self.getPosition(piece)
        if position is None:
            return False
        self.board.setPieceAt(position, None)
        self._player_pieces[player].remove(piece)
        return True

    def getPossibleMoves(self, piece: Piece, first_move_of_turn: bool = True) -> set[Position]:
        source = self.getPosition(piece)
        if source is None:
            return set()
        occupant = self.board.getPieceAt(source)
        return rules.possible_moves(self.board, occupant, first_move_of_turn, origin=source)

    def getMovablePieces(self, player: Player) -> list[Piece]:
        return [piece for piece in self._player_pieces.get(player, ()) if self.getPossibleMoves(piece)]

    # moves --------------------------------------------------------------

    def movePiece(self, piece: Piece, target: Position, first_move_of_turn: bool = True) -> bool:
        if self._status not in _PLAYABLE or self.board is None:
            return False
        if self.getPlayerByPiece(piece) is None:
            return False
        source = self.getPosition(piece)
        if source is None:
            return False
        piece = self.board.getPieceAt(source)
        if target not in rules.possible_moves(self.board, piece, first_move_of_turn, origin=source):
            return False

        captured: Optional[Piece] = None
        middle: Optional[Position] = None
        if rules.is_jump(source, target):
            middle = source.midpoint(target)
            captured = self.board.getPieceAt(middle)
            if captured is None:
                self.logger.warning("Jump %s -> %s has no piece to capture", source, target)
                return False

        self.board.setPieceAt(target, piece)
        self.board.setPieceAt(source, None)
        if captured is not None:
            self._capture(captured, middle)

        self._notify("on_piece_moved", piece, target)
        self._set_status(GameStatus.ON_GOING)
        return True

    def _capture(self, piece: Piece, position: Position) -> None:
        self.board.setPieceAt(position, None)
        owner = self.getPlayerByPiece(piece)
        if owner is not None:
            self._player_pieces[owner].remove(piece)
        self._notify("on_piece_captured", piece)

    def promotionRow(self, color: Color) -> int:
        return self.getBoardSize() - 1 if color is Color.LIGHT else 0

    def promotePiece(self, piece: Piece) -> bool:
        if self.board is None or self.getPlayerByPiece(piece) is None:
            return False
        position = self.getPosition(piece)
        if position is None:
            return False
        occupant = self.board.getPieceAt(position)
        if position.row != self.promotionRow(occupant.color):
            return False
        if not occupant.promote():
            return False
        self._notify("on_piece_promoted", occupant)
        return True

    # status -------------------------------------------------------------

    def _set_status(self, status: GameStatus) -> bool:
        if status is self._status:
            return False
        self.logger.info("Status %s -> %s", self._status.name, status.name)
        self._status = status
        self._notify("on_status_changed", status)
        return True

    def start(self) -> bool:
        if len(self._player_pieces) != 2 or self._status is not GameStatus.NOT_READY or self.board is None:
            return False
        self._set_status(GameStatus.READY)
        return self.setCurrentPlayer(next(iter(self._player_pieces)))

    def nextTurn(self) -> bool:
        if self._current_player is None or self._current_player not in self._player_pieces:
            return False
        players = list(self._player_pieces)
        index = players.index(self._current_player)
        return self.setCurrentPlayer(players[(index + 1) % len(players)])

    def resign(self, player: Player) -> bool:
        if self._status not in _PLAYABLE or player not in self._player_pieces:
            return False
        for piece in self._player_pieces[player]:
            position = self.getPosition(piece)
            if position is not None:
                self.board.setPieceAt(position, None)
        self._player_pieces[player] = []
        self.logger.info("Player %s resigned", player)
        # Ready never moves straight to GameOver.
        self._set_status(GameStatus.ON_GOING)
        return True

    def gameOver(self) -> bool:
        if self._status is GameStatus.GAME_OVER:
            return True
        if self._status not in _PLAYABLE:
            return False
        if any(not pieces for pieces in self._player_pieces.values()):
            self._set_status(GameStatus.GAME_OVER)
            return True
        return False

    def getWinner(self) -> Optional[Player]:
        if not self.gameOver():
            return None
        for player, pieces in self._player_pieces.items():
            if pieces:
                return player
        return None
