from __future__ import annotations

from enum import Enum


class Color(Enum):
    LIGHT = "light"
    DARK = "dark"

    @property
    def opponent(self) -> "Color":
        return Color.DARK if self is Color.LIGHT else Color.LIGHT


class Rank(Enum):
    REGULAR = "regular"
    KING = "king"


class Piece:
    """A checkers piece identified by its number and color.

    The piece knows nothing about where it stands or who owns it; the board
    and the controller answer those questions.
    """

    def __init__(self, identifier: int, color: Color, rank: Rank = Rank.REGULAR) -> None:
        if identifier <= 0:
            raise ValueError("Piece id must be a positive integer.")
        self._id = identifier
        self._color = color
        self.rank = rank

    @property
    def id(self) -> int:
        return self._id

    @property
    def color(self) -> Color:
        return self._color

    @property
    def is_king(self) -> bool:
        return self.rank is Rank.KING

    def promote(self) -> bool:
        if self.is_king:
            return False
        self.rank = Rank.KING
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Piece):
            return NotImplemented
        return self._id == other._id and self._color == other._color

    def __hash__(self) -> int:
        return hash((self._id, self._color))

    def __repr__(self) -> str:
        piece_type = "K" if self.is_king else "R"
        return f"{piece_type}{self._id:02d}({self._color.name})"
