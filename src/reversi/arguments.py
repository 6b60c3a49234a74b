from __future__ import annotations

from pydantic import BaseModel, field_validator
from typing import Optional

from reversi.othello.grid import MIN_SIZE, O, X

PLAYER_COUNTS = [0, 1, 2]


class GameArguments(BaseModel):
    board_size: int
    players: int
    show_moves: bool = False
    seed: Optional[int] = None

    @field_validator("board_size")
    @classmethod
    def validate_board_size(cls, v: int) -> int:
        if v < MIN_SIZE:
            raise ValueError(f"Board size must be at least {MIN_SIZE}")
        return v

    @field_validator("players")
    @classmethod
    def validate_players(cls, v: int) -> int:
        if v not in PLAYER_COUNTS:
            raise ValueError(f"Number of human players must be one of {PLAYER_COUNTS}")
        return v

    def get_agents(self) -> set[int]:
        # A single human always plays X, the side that moves first.
        if self.players == 0:
            return {X, O}
        if self.players == 1:
            return {O}
        return set()
