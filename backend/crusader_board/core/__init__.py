from .types import Player, UnitKind, Phase, Position, BOARD_SIZE, in_bounds, is_on_board, all_positions
from .unit import Unit, heavy, light
from .board import Board
from .rules import RulesConfig, STANDARD_RULES, parse_player
from .movement import (
    legal_moves, legal_attacks, is_legal_move, is_legal_attack,
    heavy_forward_attacks, heavy_adjacent_attacks, light_cooperative_attacks, count_adjacent_light,
)
from .state import GameState, initial_state, LIGHT_ACTIONS_PER_TURN
from .actions import Action, SelectUnit, MovePiece, AttackPiece, EndTurn, NewGame
from .events import ActionApplied, ActionRejected, GameEnded
from .game import Game, Listener, Transition, reduce, evaluate
from .setup import setup_standard, standard_board, ascii_board

__all__ = [
    "Player","UnitKind","Phase","Position","BOARD_SIZE","in_bounds","is_on_board","all_positions",
    "Unit","heavy","light","Board",
    "RulesConfig","STANDARD_RULES","parse_player",
    "legal_moves","legal_attacks","is_legal_move","is_legal_attack",
    "heavy_forward_attacks","heavy_adjacent_attacks","light_cooperative_attacks","count_adjacent_light",
    "GameState","initial_state","LIGHT_ACTIONS_PER_TURN",
    "Action","SelectUnit","MovePiece","AttackPiece","EndTurn","NewGame",
    "ActionApplied","ActionRejected","GameEnded",
    "Game","Listener","Transition","reduce","evaluate",
    "setup_standard","standard_board","ascii_board",
]
