from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Optional

from .board import Board
from .rules import RulesConfig, STANDARD_RULES
from .setup import standard_board
from .types import Phase, Player, Position, UnitKind
from .unit import Unit

LIGHT_ACTIONS_PER_TURN = 2

@dataclass(frozen=True)
class GameState:
    """One immutable snapshot of a game.

    `legal_moves` / `legal_attacks` are the highlight caches for
    `selected_unit`; every accepted action either refills or clears them.
    """
    board: Board
    current_player: Player = Player.PLAYER_A
    selected_unit: Optional[Unit] = None
    legal_moves: FrozenSet[Position] = field(default_factory=frozenset)
    legal_attacks: FrozenSet[Position] = field(default_factory=frozenset)
    phase: Phase = Phase.PLAYING
    winner: Optional[Player] = None
    light_moves_this_turn: int = 0
    version: int = 0

    @property
    def is_over(self) -> bool:
        return self.phase is Phase.GAME_OVER

    @property
    def heavy_count(self) -> int:
        return self.board.count(UnitKind.HEAVY)

    @property
    def light_count(self) -> int:
        return self.board.count(UnitKind.LIGHT)

    @property
    def light_actions_remaining(self) -> int:
        return LIGHT_ACTIONS_PER_TURN - self.light_moves_this_turn

    @property
    def can_end_turn(self) -> bool:
        return (
            self.phase is Phase.PLAYING
            and self.current_player is Player.PLAYER_B
            and self.light_moves_this_turn > 0
        )

def initial_state(
    rules: RulesConfig = STANDARD_RULES,
    starting_player: Optional[Player] = None,
    version: int = 0,
) -> GameState:
    first = rules.starting_player if starting_player is None else starting_player
    return GameState(board=standard_board(), current_player=first, version=version)
