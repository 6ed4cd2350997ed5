from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

BOARD_SIZES = (8, 10, 12)
NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 20

BoardSize = Literal[8, 10, 12]


class PlayerSettings(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH)


class GameSettings(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    board_size: Optional[BoardSize] = None
    players: list[PlayerSettings] = Field(default_factory=list, max_length=2)
    frontend: Literal["terminal", "gui"] = "terminal"
    color: bool = True
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    @field_validator("players")
    @classmethod
    def _distinct_names(cls, players: list[PlayerSettings]) -> list[PlayerSettings]:
        names = [player.name.casefold() for player in players]
        if len(set(names)) != len(names):
            raise ValueError("Player names must be different.")
        return players

    def player_names(self) -> list[str]:
        return [player.name for player in self.players]
