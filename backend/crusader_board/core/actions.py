from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Tuple, TYPE_CHECKING

from .movement import legal_attacks, legal_moves
from .state import LIGHT_ACTIONS_PER_TURN, GameState, initial_state
from .types import Phase, Player, Position, UnitKind
from .unit import Unit

if TYPE_CHECKING:
    from .board import Board
    from .rules import RulesConfig


def _budget_after(state: GameState, kind: UnitKind) -> Tuple[Player, int]:
    """Whose turn it is and the light counter after one action by `kind`."""
    if kind is UnitKind.HEAVY:
        return state.current_player.opponent(), 0
    used = state.light_moves_this_turn + 1
    if used >= LIGHT_ACTIONS_PER_TURN:
        return state.current_player.opponent(), 0
    return state.current_player, used


def _settled(state: GameState, board: "Board", player: Player, light_moves: int, **changes) -> GameState:
    # every accepted board-changing action drops the selection and both caches
    return replace(
        state,
        board=board,
        current_player=player,
        selected_unit=None,
        legal_moves=frozenset(),
        legal_attacks=frozenset(),
        light_moves_this_turn=light_moves,
        version=state.version + 1,
        **changes,
    )


@dataclass(frozen=True)
class Action:
    def rejection(self, state: GameState) -> Optional[str]:
        """Reason this action has no effect on `state`, or None when it applies."""
        raise NotImplementedError

    def apply(self, state: GameState, rules: "RulesConfig") -> GameState:
        raise NotImplementedError


@dataclass(frozen=True)
class SelectUnit(Action):
    unit: Unit

    def rejection(self, state: GameState) -> Optional[str]:
        if state.phase is Phase.GAME_OVER:
            return "game_over"
        if self.unit.owner is not state.current_player:
            return "not_your_unit"
        if self.unit.kind is UnitKind.LIGHT and state.light_moves_this_turn >= LIGHT_ACTIONS_PER_TURN:
            return "light_budget_exhausted"
        return None

    def apply(self, state: GameState, rules: "RulesConfig") -> GameState:
        # The unit is taken at its word: its stated position drives the
        # calculation even if the board holds something else there.
        return replace(
            state,
            selected_unit=self.unit,
            legal_moves=legal_moves(state.board, self.unit, rules),
            legal_attacks=legal_attacks(state.board, self.unit),
            version=state.version + 1,
        )


@dataclass(frozen=True)
class MovePiece(Action):
    from_pos: Position
    to_pos: Position

    def rejection(self, state: GameState) -> Optional[str]:
        if state.phase is Phase.GAME_OVER:
            return "game_over"
        if state.selected_unit is None:
            return "no_selection"
        if state.board.unit_at(self.from_pos) is None:
            return "empty_origin"
        if state.board.unit_at(self.from_pos).owner is not state.current_player:
            return "not_your_unit"
        if self.to_pos not in state.legal_moves:
            return "illegal_destination"
        return None

    def apply(self, state: GameState, rules: "RulesConfig") -> GameState:
        board = state.board.copy()
        mover = board.move_unit(self.from_pos, self.to_pos)
        player, used = _budget_after(state, mover.kind)
        return _settled(state, board, player, used)


@dataclass(frozen=True)
class AttackPiece(Action):
    attacker: Position
    target: Position

    def rejection(self, state: GameState) -> Optional[str]:
        if state.phase is Phase.GAME_OVER:
            return "game_over"
        if state.selected_unit is None:
            return "no_selection"
        if state.board.unit_at(self.attacker) is None:
            return "empty_origin"
        if self.target == self.attacker:
            return "illegal_target"
        if state.board.unit_at(self.attacker).owner is not state.current_player:
            return "not_your_unit"
        if self.target not in state.legal_attacks:
            return "illegal_target"
        return None

    def apply(self, state: GameState, rules: "RulesConfig") -> GameState:
        board = state.board.copy()
        striker = board.unit_at(self.attacker)
        defender = board.remove_unit(self.target)
        if striker.kind is UnitKind.LIGHT:
            # light infantry takes the vacated cell
            board.move_unit(self.attacker, self.target)

        if board.count(owner=defender.owner) == 0:
            # the game ends on the attacker's action; no hand-over to the loser
            return _settled(
                state, board, state.current_player, 0,
                phase=Phase.GAME_OVER,
                winner=defender.owner.opponent(),
            )
        player, used = _budget_after(state, striker.kind)
        return _settled(state, board, player, used)


@dataclass(frozen=True)
class EndTurn(Action):
    def rejection(self, state: GameState) -> Optional[str]:
        if state.phase is Phase.GAME_OVER:
            return "game_over"
        if state.current_player is not Player.PLAYER_B:
            return "not_light_turn"
        return None

    def apply(self, state: GameState, rules: "RulesConfig") -> GameState:
        return _settled(state, state.board, Player.PLAYER_A, 0)


@dataclass(frozen=True)
class NewGame(Action):
    starting_player: Optional[Player] = None

    def rejection(self, state: GameState) -> Optional[str]:
        return None

    def apply(self, state: GameState, rules: "RulesConfig") -> GameState:
        return initial_state(rules, self.starting_player, version=state.version + 1)
