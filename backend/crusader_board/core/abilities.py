from __future__ import annotations

from typing import Iterable, Tuple

from .ability import Ability
from .types import Player, Position, UnitKind, is_on_board

# deltas
ORTH = ((1,0),(-1,0),(0,1),(0,-1))
DIAG = ((1,1),(1,-1),(-1,1),(-1,-1))
KING8 = ORTH + DIAG

FORWARD_RANGE = 2
COOPERATIVE_THRESHOLD = 2

def count_adjacent_light(board, target: Position, side: Player) -> int:
    """Number of `side`'s Light units in the 8-neighbourhood of `target`."""
    n = 0
    for dr, dc in KING8:
        cell = target.offset(dr, dc)
        if not is_on_board(cell):
            continue
        u = board.unit_at(cell)
        if u is not None and u.kind is UnitKind.LIGHT and u.owner is side:
            n += 1
    return n

class StepAbility(Ability):
    """One step in each delta onto an empty cell.

    With `enhanced_reach` set, a second step along the same delta is also
    offered when the rules enable enhanced light movement and the first cell
    is empty.
    """

    def __init__(self, deltas: Iterable[Tuple[int,int]], enhanced_reach: bool = False):
        self.deltas = tuple(deltas)
        self.enhanced_reach = enhanced_reach

    def generate_moves(self, unit, board, rules):
        reach = 2 if (self.enhanced_reach and rules.enhanced_light_movement) else 1
        for dr, dc in self.deltas:
            cell = unit.position
            for _ in range(reach):
                cell = cell.offset(dr, dc)
                if not is_on_board(cell) or not board.is_empty(cell):
                    break
                yield cell

class ForwardLaneAttack(Ability):
    """Enemy Light units up to FORWARD_RANGE cells ahead in the same column.

    Every distance is tested on its own; a unit at distance 1 does not shield
    distance 2.
    """

    def generate_attacks(self, unit, board):
        step = unit.owner.forward
        for distance in range(1, FORWARD_RANGE + 1):
            cell = unit.position.offset(step * distance, 0)
            if not is_on_board(cell):
                continue
            target = board.unit_at(cell)
            if target is not None and target.kind is UnitKind.LIGHT and target.owner is not unit.owner:
                yield cell

class AdjacentAttack(Ability):
    def generate_attacks(self, unit, board):
        for dr, dc in KING8:
            cell = unit.position.offset(dr, dc)
            if not is_on_board(cell):
                continue
            target = board.unit_at(cell)
            if target is not None and target.kind is UnitKind.LIGHT and target.owner is not unit.owner:
                yield cell

class CooperativeAttack(Ability):
    def generate_attacks(self, unit, board):
        for dr, dc in KING8:
            cell = unit.position.offset(dr, dc)
            if not is_on_board(cell):
                continue
            target = board.unit_at(cell)
            if target is None or target.kind is not UnitKind.HEAVY or target.owner is unit.owner:
                continue
            if count_adjacent_light(board, cell, unit.owner) >= COOPERATIVE_THRESHOLD:
                yield cell

UNIT_ABILITIES = {
    UnitKind.HEAVY: (StepAbility(KING8), ForwardLaneAttack(), AdjacentAttack()),
    UnitKind.LIGHT: (StepAbility(KING8, enhanced_reach=True), CooperativeAttack()),
}
