from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .actions import Action, AttackPiece, EndTurn, MovePiece, NewGame, SelectUnit
from .events import ActionApplied, ActionRejected, GameEnded
from .rules import RulesConfig, STANDARD_RULES
from .state import GameState, initial_state
from .types import Phase, Player, Position
from .unit import Unit

LOGGER = logging.getLogger("crusader.core.game")


def evaluate(state: GameState, action: Action, rules: RulesConfig = STANDARD_RULES) -> Tuple[GameState, Optional[str]]:
    """Apply `action`, returning the next state and the rejection reason (if any).

    A rejected action hands back the very same `state` object.
    """
    reason = action.rejection(state)
    if reason is not None:
        return state, reason
    return action.apply(state, rules), None


def reduce(state: GameState, action: Action, rules: RulesConfig = STANDARD_RULES) -> GameState:
    return evaluate(state, action, rules)[0]


@dataclass(frozen=True)
class Transition:
    changed: bool
    state: GameState
    reason: Optional[str] = None


class Listener:
    def on_event(self, game: "Game", event: object) -> None:
        return


class Game:
    """Owns the current snapshot and funnels every action through `reduce`.

    Single writer: callers (UI handlers, an auto-player) must submit actions
    one at a time through `dispatch`.
    """

    def __init__(self, rules: Optional[RulesConfig] = None, state: Optional[GameState] = None) -> None:
        self.rules: RulesConfig = STANDARD_RULES if rules is None else rules
        self.state: GameState = initial_state(self.rules) if state is None else state
        self.listeners: List[Listener] = []

    def emit(self, event: object) -> None:
        for listener in list(self.listeners):
            listener.on_event(self, event)

    def set_rules(self, rules: RulesConfig) -> None:
        # Cached highlights stay as computed; the new rules apply from the
        # next selection or NewGame.
        self.rules = rules
        LOGGER.info("rules_changed", extra={"rules": rules})

    def dispatch(self, action: Action) -> Transition:
        before = self.state
        after, reason = evaluate(before, action, self.rules)
        if reason is not None:
            LOGGER.debug("action_rejected", extra={"action": action, "reason": reason})
            self.emit(ActionRejected(action=action, state=before, reason=reason))
            return Transition(changed=False, state=before, reason=reason)

        self.state = after
        LOGGER.debug("action_applied", extra={"action": action, "version": after.version})
        self.emit(ActionApplied(action=action, before=before, after=after))
        if after.phase is Phase.GAME_OVER and before.phase is not Phase.GAME_OVER:
            LOGGER.info("game_over", extra={"winner": after.winner})
            self.emit(GameEnded(winner=after.winner, state=after))
        return Transition(changed=True, state=after)

    # --- convenience wrappers ---
    def select(self, unit: Unit) -> Transition:
        return self.dispatch(SelectUnit(unit))

    def select_at(self, pos: Position) -> Transition:
        unit = self.state.board.unit_at(pos)
        if unit is None:
            return Transition(changed=False, state=self.state, reason="empty_origin")
        return self.select(unit)

    def move(self, from_pos: Position, to_pos: Position) -> Transition:
        return self.dispatch(MovePiece(from_pos, to_pos))

    def attack(self, attacker: Position, target: Position) -> Transition:
        return self.dispatch(AttackPiece(attacker, target))

    def end_turn(self) -> Transition:
        return self.dispatch(EndTurn())

    def new_game(self, starting_player: Optional[Player] = None) -> Transition:
        return self.dispatch(NewGame(starting_player))
