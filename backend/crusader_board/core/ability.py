from __future__ import annotations

from typing import Iterable, TYPE_CHECKING

if TYPE_CHECKING:
    from .board import Board
    from .rules import RulesConfig
    from .types import Position
    from .unit import Unit

class Ability:
    """A capability a unit kind has: destinations it can move to, cells it can attack."""

    def generate_moves(self, unit: "Unit", board: "Board", rules: "RulesConfig") -> Iterable["Position"]:
        return ()

    def generate_attacks(self, unit: "Unit", board: "Board") -> Iterable["Position"]:
        return ()
