from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .actions import Action
    from .state import GameState
    from .types import Player

@dataclass(frozen=True)
class ActionApplied:
    action: "Action"
    before: "GameState"
    after: "GameState"

@dataclass(frozen=True)
class ActionRejected:
    action: "Action"
    state: "GameState"
    reason: str

@dataclass(frozen=True)
class GameEnded:
    winner: "Player"
    state: "GameState"
