from __future__ import annotations

from .board import Board
from .types import BOARD_SIZE, Player, Position
from .unit import heavy, light

HEAVY_HOME_ROW = 7
LIGHT_HOME_ROW = 0

def setup_standard(board: Board) -> None:
    # PLAYER_A: heavy infantry on the last row
    for c in range(BOARD_SIZE):
        board.add_unit(heavy(f"heavy-a-{c}", Player.PLAYER_A, Position(HEAVY_HOME_ROW, c)))

    # PLAYER_B: light infantry on the first row
    for c in range(BOARD_SIZE):
        board.add_unit(light(f"light-b-{c}", Player.PLAYER_B, Position(LIGHT_HOME_ROW, c)))

def standard_board() -> Board:
    b = Board()
    setup_standard(b)
    return b

def ascii_board(board: Board, marks=None) -> str:
    """Row 0 first. `marks` maps positions to a character drawn on empty cells."""
    marks = marks or {}
    rows = []
    for r in range(BOARD_SIZE):
        row = [str(r)]
        for c in range(BOARD_SIZE):
            pos = Position(r, c)
            u = board.unit_at(pos)
            if u is not None:
                row.append(u.symbol)
            else:
                row.append(marks.get(pos, "."))
        rows.append(" ".join(row))
    rows.append("  " + " ".join(str(c) for c in range(BOARD_SIZE)))
    return "\n".join(rows)
