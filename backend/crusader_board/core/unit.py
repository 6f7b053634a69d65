from __future__ import annotations

from dataclasses import dataclass, replace

from .types import Player, Position, UnitKind

@dataclass(frozen=True)
class Unit:
    id: str
    kind: UnitKind
    owner: Player
    position: Position

    @property
    def symbol(self) -> str:
        ch = "H" if self.kind is UnitKind.HEAVY else "L"
        return ch if self.owner is Player.PLAYER_A else ch.lower()

    @property
    def is_heavy(self) -> bool:
        return self.kind is UnitKind.HEAVY

    @property
    def is_light(self) -> bool:
        return self.kind is UnitKind.LIGHT

    def moved_to(self, pos: Position) -> "Unit":
        return replace(self, position=pos)

def heavy(unit_id: str, owner: Player, pos: Position) -> Unit:
    return Unit(unit_id, UnitKind.HEAVY, owner, pos)

def light(unit_id: str, owner: Player, pos: Position) -> Unit:
    return Unit(unit_id, UnitKind.LIGHT, owner, pos)
