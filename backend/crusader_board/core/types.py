from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

BOARD_SIZE = 8

class Player(Enum):
    PLAYER_A = "A"
    PLAYER_B = "B"

    def opponent(self) -> "Player":
        return Player.PLAYER_B if self is Player.PLAYER_A else Player.PLAYER_A

    @property
    def forward(self) -> int:
        # PLAYER_A starts on the last row and advances towards row 0.
        return -1 if self is Player.PLAYER_A else 1

class UnitKind(Enum):
    HEAVY = "heavy"
    LIGHT = "light"

class Phase(Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"

@dataclass(frozen=True)
class Position:
    row: int
    col: int

    def offset(self, dr: int, dc: int) -> "Position":
        return Position(self.row + dr, self.col + dc)

    @property
    def name(self) -> str:
        return f"r{self.row}c{self.col}"

def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE

def is_on_board(pos: Position) -> bool:
    return in_bounds(pos.row, pos.col)

def all_positions():
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            yield Position(row, col)
