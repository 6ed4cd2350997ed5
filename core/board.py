from __future__ import annotations

from typing import Iterator, Optional

from .pieces import Piece
from .position import Position


MIN_BOARD_SIZE = 4


class Board:
    def __init__(self, boardSize: int = 8) -> None:
        if boardSize < MIN_BOARD_SIZE or boardSize % 2:
            raise ValueError(f"Board size must be an even number of at least {MIN_BOARD_SIZE}.")
        self.boardSize = boardSize
        self.board: list[list[Optional[Piece]]] = [
            [None for _ in range(boardSize)] for _ in range(boardSize)
        ]

    def getPiece(self, row: int, col: int) -> Optional[Piece]:
        if self.isWithinBounds(row, col):
            return self.board[row][col]
        return None

    def setPiece(self, row: int, col: int, piece: Optional[Piece]) -> None:
        if not self.isWithinBounds(row, col):
            raise ValueError(f"Cell ({row},{col}) is outside a {self.boardSize}x{self.boardSize} board.")
        self.board[row][col] = piece

    def getPieceAt(self, position: Position) -> Optional[Piece]:
        return self.getPiece(position.row, position.col)

    def setPieceAt(self, position: Position, piece: Optional[Piece]) -> None:
        self.setPiece(position.row, position.col, piece)

    def isWithinBounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.boardSize and 0 <= col < self.boardSize

    def occupiedCells(self) -> Iterator[tuple[Position, Piece]]:
        for row in range(self.boardSize):
            for col in range(self.boardSize):
                piece = self.board[row][col]
                if piece is not None:
                    yield Position(row, col), piece

    def getAllPieces(self) -> list[Piece]:
        return [piece for _, piece in self.occupiedCells()]

    def locate(self, piece: Piece) -> Optional[Position]:
        for position, occupant in self.occupiedCells():
            if occupant == piece:
                return position
        return None

    def countOccupied(self) -> int:
        return sum(1 for _ in self.occupiedCells())

    def clear(self) -> None:
        for row in self.board:
            for col in range(self.boardSize):
                row[col] = None
