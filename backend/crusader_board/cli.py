from __future__ import annotations

import argparse
import logging
import os
from typing import Dict, Optional

from .bot import GreedyPlayer, self_play
from .core import Game, GameState, Player, Position, RulesConfig, ascii_board, parse_player
from .notation import parse_position, position_string

LOGGER = logging.getLogger("crusader.cli")

_SIDE_NAMES = {Player.PLAYER_A: "Heavy (A)", Player.PLAYER_B: "Light (B)"}


def _rules_from_args(args: argparse.Namespace) -> RulesConfig:
    rules = RulesConfig.from_env()
    first = None if args.first is None else parse_player(args.first)
    enhanced = True if args.enhanced_light else None
    return rules.with_overrides(enhanced, first)


def _log_level(raw: str) -> int:
    level = logging.getLevelName(raw.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Bad log level: {raw!r}")
    return level


def _marks(state: GameState) -> Dict[Position, str]:
    out = {p: "*" for p in state.legal_moves}
    out.update({p: "x" for p in state.legal_attacks})
    return out


def status_line(state: GameState) -> str:
    if state.is_over:
        return f"Game over. {_SIDE_NAMES[state.winner]} wins."
    line = f"{_SIDE_NAMES[state.current_player]} to act. Heavy: {state.heavy_count} Light: {state.light_count}"
    if state.current_player is Player.PLAYER_B:
        line += f" (light actions left: {state.light_actions_remaining})"
    return line


def _parse_cell(token: str) -> Position:
    parts = token.replace(",", " ").split()
    if len(parts) != 2 or not all(p.isdigit() for p in parts):
        raise ValueError(f"Bad cell: {token!r} (expected row,col)")
    return Position(int(parts[0]), int(parts[1]))


def cmd_show(args: argparse.Namespace) -> int:
    state = parse_position(args.position) if args.position else Game(_rules_from_args(args)).state
    print(ascii_board(state.board))
    print()
    print(status_line(state))
    print(position_string(state))
    return 0


def _human_step(game: Game, line: str) -> Optional[str]:
    """Apply one typed command; returns a message for the user or None."""
    words = line.split()
    cmd, rest = words[0], words[1:]
    if cmd == "end":
        t = game.end_turn()
        return None if t.changed else f"Cannot end turn ({t.reason})."
    if cmd in ("sel", "select") and len(rest) == 1:
        t = game.select_at(_parse_cell(rest[0]))
        return None if t.changed else f"Cannot select ({t.reason})."
    if cmd in ("mv", "move") and len(rest) == 1:
        sel = game.state.selected_unit
        if sel is None:
            return "Select a unit first."
        t = game.move(sel.position, _parse_cell(rest[0]))
        return None if t.changed else f"Illegal move ({t.reason})."
    if cmd in ("at", "attack") and len(rest) == 1:
        sel = game.state.selected_unit
        if sel is None:
            return "Select a unit first."
        t = game.attack(sel.position, _parse_cell(rest[0]))
        return None if t.changed else f"Illegal attack ({t.reason})."
    return "Commands: sel R,C | move R,C | attack R,C | end | quit"


def cmd_play(args: argparse.Namespace) -> int:
    game = Game(_rules_from_args(args))
    human = parse_player(args.human)
    bot = GreedyPlayer(seed=args.seed)

    while not game.state.is_over:
        state = game.state
        print(ascii_board(state.board, _marks(state)))
        print(status_line(state))

        if state.current_player is not human:
            for t in bot.play_turn(game):
                LOGGER.debug("bot_transition", extra={"version": t.state.version})
            if game.state is state:
                print("Bot has no legal action.")
                return 0
            continue

        line = input("> ").strip()
        if not line:
            continue
        if line in ("quit", "exit"):
            return 0
        try:
            msg = _human_step(game, line)
        except ValueError as exc:
            msg = str(exc)
        if msg:
            print(msg)

    print(ascii_board(game.state.board))
    print(status_line(game.state))
    return 0


def cmd_selfplay(args: argparse.Namespace) -> int:
    rules = _rules_from_args(args)
    wins = {Player.PLAYER_A: 0, Player.PLAYER_B: 0}
    unfinished = 0
    for i in range(args.games):
        final, turns = self_play(rules, seed=args.seed + i, max_turns=args.max_turns)
        if final.winner is None:
            unfinished += 1
        else:
            wins[final.winner] += 1
        if args.verbose:
            print(f"game {i + 1}: winner={final.winner.name if final.winner else '-'} turns={turns}")
    print(f"Heavy (A) wins: {wins[Player.PLAYER_A]}")
    print(f"Light (B) wins: {wins[Player.PLAYER_B]}")
    print(f"Unfinished: {unfinished}")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="crusader-board")
    ap.add_argument("--log-level", type=str, default=os.environ.get("CRUSADER_LOG_LEVEL", "WARNING"))
    ap.add_argument("--enhanced-light", action="store_true", help="Light units may move two cells")
    ap.add_argument("--first", type=str, default=None, choices=["a", "b"], help="side that acts first")
    sub = ap.add_subparsers(dest="cmd", required=True)

    ss = sub.add_parser("show", help="Show the board and its position string")
    ss.add_argument("--position", type=str, default=None)
    ss.set_defaults(fn=cmd_show)

    pl = sub.add_parser("play", help="Play against the greedy bot")
    pl.add_argument("--human", type=str, default="a", choices=["a", "b"])
    pl.add_argument("--seed", type=int, default=1337)
    pl.set_defaults(fn=cmd_play)

    sp = sub.add_parser("selfplay", help="Pit two greedy bots against each other")
    sp.add_argument("--games", type=int, default=10)
    sp.add_argument("--seed", type=int, default=1337)
    sp.add_argument("--max-turns", type=int, default=500)
    sp.add_argument("--verbose", action="store_true")
    sp.set_defaults(fn=cmd_selfplay)

    args = ap.parse_args(argv)
    try:
        logging.basicConfig(level=_log_level(args.log_level))
        return int(args.fn(args))
    except ValueError as exc:
        print(f"error: {exc}")
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
