from __future__ import annotations

from typing import Dict, Tuple

from .core import (
    Board, GameState, Phase, Player, Position, UnitKind, Unit,
    BOARD_SIZE, LIGHT_ACTIONS_PER_TURN,
)

STARTPOS = "llllllll/8/8/8/8/8/8/HHHHHHHH a 0"

_CHAR_TO_UNIT: Dict[str, Tuple[UnitKind, Player]] = {
    "H": (UnitKind.HEAVY, Player.PLAYER_A),
    "L": (UnitKind.LIGHT, Player.PLAYER_A),
    "h": (UnitKind.HEAVY, Player.PLAYER_B),
    "l": (UnitKind.LIGHT, Player.PLAYER_B),
}
_SIDE_CHARS = {"a": Player.PLAYER_A, "b": Player.PLAYER_B}


def _unit_id(kind: UnitKind, owner: Player, pos: Position) -> str:
    return f"{kind.value}-{owner.value.lower()}-{pos.row}{pos.col}"


def parse_board(placement: str) -> Board:
    """Parse the placement field (row 0 first, `/`-separated) into a Board.

    Unit ids are derived from kind, owner and starting cell.
    """
    rows = placement.strip().split("/")
    if len(rows) != BOARD_SIZE:
        raise ValueError(f"Placement must have {BOARD_SIZE} rows")

    board = Board()
    for r, row in enumerate(rows):
        c = 0
        for ch in row:
            if ch.isdigit():
                gap = int(ch)
                if gap < 1 or gap > BOARD_SIZE:
                    raise ValueError("Bad empty-cell run in placement")
                c += gap
                if c > BOARD_SIZE:
                    raise ValueError("Bad row width in placement")
                continue
            if c >= BOARD_SIZE:
                raise ValueError("Bad row width in placement")
            entry = _CHAR_TO_UNIT.get(ch)
            if entry is None:
                raise ValueError(f"Unknown unit char: {ch}")
            kind, owner = entry
            pos = Position(r, c)
            board.add_unit(Unit(_unit_id(kind, owner, pos), kind, owner, pos))
            c += 1
        if c != BOARD_SIZE:
            raise ValueError("Bad row width in placement")
    return board


def board_to_text(board: Board) -> str:
    rows = []
    for r in range(BOARD_SIZE):
        empty = 0
        row = []
        for c in range(BOARD_SIZE):
            u = board.unit_at(Position(r, c))
            if u is None:
                empty += 1
                continue
            if empty:
                row.append(str(empty))
                empty = 0
            row.append(u.symbol)
        if empty:
            row.append(str(empty))
        rows.append("".join(row))
    return "/".join(rows)


def parse_position(text: str) -> GameState:
    """Parse `<placement> <side> <light_moves>` into a fresh PLAYING state."""
    parts = text.strip().split()
    if len(parts) != 3:
        raise ValueError("Position string must have 3 fields")
    placement, side, light_moves = parts

    board = parse_board(placement)

    player = _SIDE_CHARS.get(side.lower())
    if player is None:
        raise ValueError("Bad side-to-move in position string")

    if not light_moves.isdigit():
        raise ValueError("Bad light-move counter in position string")
    used = int(light_moves)
    if used >= LIGHT_ACTIONS_PER_TURN:
        raise ValueError("Light-move counter must be below the per-turn budget")
    if used and player is not Player.PLAYER_B:
        raise ValueError("Light-move counter is only meaningful on PLAYER_B's turn")

    return GameState(board=board, current_player=player, phase=Phase.PLAYING, light_moves_this_turn=used)


def position_string(state: GameState) -> str:
    side = state.current_player.value.lower()
    return f"{board_to_text(state.board)} {side} {state.light_moves_this_turn}"
