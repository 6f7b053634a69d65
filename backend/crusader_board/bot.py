from __future__ import annotations

import logging
import random
from typing import Iterator, List, Optional, Tuple

from .core import (
    Action, AttackPiece, Board, Game, GameState, MovePiece, Player,
    RulesConfig, SelectUnit, Transition, Unit, UnitKind,
    count_adjacent_light, legal_attacks, legal_moves,
)

LOGGER = logging.getLogger("crusader.bot")

CAPTURE_SCORE = 100
WIN_SCORE = 10_000
THREAT_SCORE = 10
EXPOSED_PENALTY = 40
ADVANCE_SCORE = 1


def candidate_actions(state: GameState, rules: RulesConfig) -> Iterator[Tuple[Unit, Action]]:
    """Every move/attack available to the side to move, per selectable unit."""
    if state.is_over:
        return
    for u in sorted(state.board.units_of(state.current_player), key=lambda x: x.id):
        if SelectUnit(u).rejection(state) is not None:
            continue
        for target in sorted(legal_attacks(state.board, u), key=lambda p: (p.row, p.col)):
            yield u, AttackPiece(u.position, target)
        for dest in sorted(legal_moves(state.board, u, rules), key=lambda p: (p.row, p.col)):
            yield u, MovePiece(u.position, dest)


def _is_exposed(board: Board, unit: Unit) -> bool:
    enemy = unit.owner.opponent()
    if unit.kind is UnitKind.HEAVY:
        return count_adjacent_light(board, unit.position, enemy) >= 2
    for e in board.units_of(enemy):
        if e.kind is UnitKind.HEAVY and unit.position in legal_attacks(board, e):
            return True
    return False


def score_action(state: GameState, unit: Unit, action: Action) -> int:
    """Greedy one-ply score; higher is better for the side to move."""
    board = state.board
    if isinstance(action, AttackPiece):
        defender = board.unit_at(action.target)
        if defender is not None and board.count(owner=defender.owner) == 1:
            return WIN_SCORE
        return CAPTURE_SCORE

    after = board.copy()
    moved = after.move_unit(action.from_pos, action.to_pos)

    score = THREAT_SCORE * len(legal_attacks(after, moved))
    if unit.kind is UnitKind.LIGHT:
        # lining up a second light next to an enemy heavy opens a cooperative attack
        for e in after.units_of(unit.owner.opponent()):
            if e.kind is UnitKind.HEAVY and count_adjacent_light(after, e.position, unit.owner) >= 2:
                score += THREAT_SCORE
    if _is_exposed(after, moved):
        score -= EXPOSED_PENALTY
    score += ADVANCE_SCORE * (action.to_pos.row - action.from_pos.row) * unit.owner.forward
    return score


class GreedyPlayer:
    """Picks the best-scoring single action, breaking ties with a seeded RNG.

    Lives outside the core: it only reads snapshots and submits actions
    through `Game.dispatch`.
    """

    def __init__(self, seed: int = 1337) -> None:
        self.rng = random.Random(seed)

    def choose(self, state: GameState, rules: RulesConfig) -> Optional[Tuple[Unit, Action]]:
        best: List[Tuple[Unit, Action]] = []
        best_score = None
        for unit, action in candidate_actions(state, rules):
            s = score_action(state, unit, action)
            if best_score is None or s > best_score:
                best_score = s
                best = [(unit, action)]
            elif s == best_score:
                best.append((unit, action))
        if not best:
            return None
        return best[self.rng.randrange(len(best))]

    def play_action(self, game: Game) -> Optional[Transition]:
        choice = self.choose(game.state, game.rules)
        if choice is None:
            return None
        unit, action = choice
        game.select(unit)
        t = game.dispatch(action)
        LOGGER.debug("bot_action", extra={"unit": unit.id, "action": action, "changed": t.changed})
        return t

    def play_turn(self, game: Game) -> List[Transition]:
        """Act until control passes to the opponent or nothing is left to do."""
        out: List[Transition] = []
        side = game.state.current_player
        while not game.state.is_over and game.state.current_player is side:
            t = self.play_action(game)
            if t is None or not t.changed:
                if game.state.can_end_turn:
                    out.append(game.end_turn())
                break
            out.append(t)
        return out


def self_play(
    rules: Optional[RulesConfig] = None,
    seed: int = 1337,
    max_turns: int = 500,
    starting_player: Optional[Player] = None,
) -> Tuple[GameState, int]:
    """Let two greedy players finish a game; returns (final state, turns played)."""
    game = Game(rules=rules)
    if starting_player is not None:
        game.new_game(starting_player)
    players = {Player.PLAYER_A: GreedyPlayer(seed), Player.PLAYER_B: GreedyPlayer(seed + 1)}

    turns = 0
    while not game.state.is_over and turns < max_turns:
        side = game.state.current_player
        played = players[side].play_turn(game)
        turns += 1
        if not played:
            LOGGER.info("self_play_stuck", extra={"side": side, "turns": turns})
            break
    return game.state, turns


__all__ = ["GreedyPlayer", "candidate_actions", "score_action", "self_play"]
