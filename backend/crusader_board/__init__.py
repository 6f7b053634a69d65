"""Crusader board (backend).

- core: units, movement/attack calculator and the turn state machine
- api: stable JSON-oriented facade for UIs
- notation: compact position strings
- bot: greedy auto-player and self-play
- cli: terminal front end
"""

from . import core, api
from .notation import parse_position, position_string, parse_board, board_to_text, STARTPOS
from .bot import GreedyPlayer, self_play

__all__ = [
    "core","api",
    "parse_position","position_string","parse_board","board_to_text","STARTPOS",
    "GreedyPlayer","self_play",
]
