from __future__ import annotations

from typing import Dict, Iterator, List, Optional

from .types import BOARD_SIZE, Player, Position, UnitKind, is_on_board
from .unit import Unit

class Board:
    """8x8 grid of units; at most one unit per cell.

    The state machine copies a board before changing it, so a board that has
    been published inside a GameState is never mutated afterwards.
    """

    def __init__(self) -> None:
        self._units: Dict[Position, Unit] = {}

    def copy(self) -> "Board":
        b = Board()
        b._units = dict(self._units)
        return b

    def unit_at(self, pos: Position) -> Optional[Unit]:
        return self._units.get(pos)

    def is_empty(self, pos: Position) -> bool:
        return pos not in self._units

    def add_unit(self, u: Unit) -> None:
        if not is_on_board(u.position):
            raise ValueError(f"Position {u.position.name} is off the board")
        if u.position in self._units:
            raise ValueError(f"Position {u.position.name} occupied")
        self._units[u.position] = u

    def remove_unit(self, pos: Position) -> Optional[Unit]:
        return self._units.pop(pos, None)

    def move_unit(self, from_pos: Position, to_pos: Position) -> Unit:
        if to_pos in self._units:
            raise ValueError(f"Position {to_pos.name} occupied")
        u = self._units.pop(from_pos).moved_to(to_pos)
        self._units[to_pos] = u
        return u

    def __iter__(self) -> Iterator[Unit]:
        return iter(tuple(self._units.values()))

    def __len__(self) -> int:
        return len(self._units)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._units == other._units

    def __hash__(self) -> int:
        return hash(frozenset(self._units.items()))

    def units_of(self, owner: Player) -> List[Unit]:
        return [u for u in self._units.values() if u.owner is owner]

    def count(self, kind: Optional[UnitKind] = None, owner: Optional[Player] = None) -> int:
        n = 0
        for u in self._units.values():
            if kind is not None and u.kind is not kind:
                continue
            if owner is not None and u.owner is not owner:
                continue
            n += 1
        return n

    def rows(self) -> List[List[Optional[Unit]]]:
        return [
            [self._units.get(Position(r, c)) for c in range(BOARD_SIZE)]
            for r in range(BOARD_SIZE)
        ]
