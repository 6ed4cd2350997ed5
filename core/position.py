from __future__ import annotations

from dataclasses import dataclass

Direction = tuple[int, int]


@dataclass(frozen=True, slots=True)
class Position:
    row: int
    col: int

    def offset(self, direction: Direction, steps: int = 1) -> "Position":
        dr, dc = direction
        return Position(self.row + dr * steps, self.col + dc * steps)

    def is_jump_to(self, other: "Position") -> bool:
        return abs(other.row - self.row) == 2 and abs(other.col - self.col) == 2

    def midpoint(self, other: "Position") -> "Position":
        return Position((self.row + other.row) // 2, (self.col + other.col) // 2)

    def as_tuple(self) -> tuple[int, int]:
        return (self.row, self.col)

    def __str__(self) -> str:
        return f"({self.row},{self.col})"
