"""Legal destination and target sets.

Everything here is a pure function of (board, unit[, rules]); the turn state
machine calls these to validate actions and to fill the highlight caches.
"""

from __future__ import annotations

from typing import FrozenSet, Set

from .abilities import (
    UNIT_ABILITIES,
    AdjacentAttack,
    CooperativeAttack,
    ForwardLaneAttack,
    count_adjacent_light,
)
from .board import Board
from .rules import RulesConfig, STANDARD_RULES
from .types import Position, is_on_board
from .unit import Unit

__all__ = [
    "is_on_board",
    "legal_moves",
    "legal_attacks",
    "is_legal_move",
    "is_legal_attack",
    "heavy_forward_attacks",
    "heavy_adjacent_attacks",
    "light_cooperative_attacks",
    "count_adjacent_light",
]

def legal_moves(board: Board, unit: Unit, rules: RulesConfig = STANDARD_RULES) -> FrozenSet[Position]:
    out: Set[Position] = set()
    for ab in UNIT_ABILITIES.get(unit.kind, ()):
        out.update(ab.generate_moves(unit, board, rules))
    return frozenset(out)

def legal_attacks(board: Board, unit: Unit) -> FrozenSet[Position]:
    # Forward-lane and adjacent hits overlap one cell ahead; the set dedupes.
    out: Set[Position] = set()
    for ab in UNIT_ABILITIES.get(unit.kind, ()):
        out.update(ab.generate_attacks(unit, board))
    return frozenset(out)

def is_legal_move(board: Board, unit: Unit, target: Position, rules: RulesConfig = STANDARD_RULES) -> bool:
    return target in legal_moves(board, unit, rules)

def is_legal_attack(board: Board, unit: Unit, target: Position) -> bool:
    return target in legal_attacks(board, unit)

def heavy_forward_attacks(board: Board, unit: Unit) -> FrozenSet[Position]:
    return frozenset(ForwardLaneAttack().generate_attacks(unit, board))

def heavy_adjacent_attacks(board: Board, unit: Unit) -> FrozenSet[Position]:
    return frozenset(AdjacentAttack().generate_attacks(unit, board))

def light_cooperative_attacks(board: Board, unit: Unit) -> FrozenSet[Position]:
    return frozenset(CooperativeAttack().generate_attacks(unit, board))
