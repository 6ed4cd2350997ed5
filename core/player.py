from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Player:
    id: int
    name: str = field(compare=False)

    def __str__(self) -> str:
        return f"{self.name} ({self.id})"
