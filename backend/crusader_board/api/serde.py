from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from ..core import (
    Action, AttackPiece, EndTurn, GameState, MovePiece, NewGame, SelectUnit,
    Player, Position, Unit, UnitKind, is_on_board,
)
from ..core.rules import parse_player
from ..notation import board_to_text


LOGGER = logging.getLogger("crusader.api.serde")


class MalformedActionError(ValueError):
    pass


def _player_to_str(p: Optional[Player]) -> Optional[str]:
    return None if p is None else p.name


def pos_to_dict(pos: Position) -> Dict[str, int]:
    return {"row": pos.row, "col": pos.col}


def dict_to_pos(d: Any, key: str = "position") -> Position:
    if not isinstance(d, dict):
        raise MalformedActionError(f"Missing {key}: expected an object with row/col")
    try:
        pos = Position(int(d["row"]), int(d["col"]))
    except (KeyError, TypeError, ValueError) as exc:
        raise MalformedActionError(f"Bad {key}: {d!r}") from exc
    if not is_on_board(pos):
        raise MalformedActionError(f"Bad {key}: {pos.name} is off the board")
    return pos


def _positions(cells: Iterable[Position]) -> List[Dict[str, int]]:
    return [pos_to_dict(p) for p in sorted(cells, key=lambda p: (p.row, p.col))]


def unit_to_dict(u: Unit) -> Dict[str, Any]:
    return {
        "id": u.id,
        "kind": u.kind.name,
        "owner": u.owner.name,
        "row": u.position.row,
        "col": u.position.col,
        "symbol": u.symbol,
    }


def dict_to_unit(d: Any) -> Unit:
    if not isinstance(d, dict):
        raise MalformedActionError("Missing unit")
    try:
        kind = UnitKind[str(d["kind"]).upper()]
        owner = Player[str(d["owner"]).upper()]
        unit_id = str(d["id"])
    except KeyError as exc:
        raise MalformedActionError(f"Bad unit: {d!r}") from exc
    return Unit(unit_id, kind, owner, dict_to_pos(d, "unit position"))


def action_to_dict(a: Action) -> Dict[str, Any]:
    if isinstance(a, SelectUnit):
        return {"kind": "select", "unit": unit_to_dict(a.unit)}
    if isinstance(a, MovePiece):
        return {"kind": "move", "from": pos_to_dict(a.from_pos), "to": pos_to_dict(a.to_pos)}
    if isinstance(a, AttackPiece):
        return {"kind": "attack", "attacker": pos_to_dict(a.attacker), "target": pos_to_dict(a.target)}
    if isinstance(a, EndTurn):
        return {"kind": "end_turn"}
    if isinstance(a, NewGame):
        return {"kind": "new_game", "starting_player": _player_to_str(a.starting_player)}
    return {"kind": a.__class__.__name__}


def dict_to_action(d: Dict[str, Any]) -> Action:
    if not isinstance(d, dict):
        raise MalformedActionError("Action payload must be an object")
    kind = d.get("kind")

    if kind == "select":
        return SelectUnit(dict_to_unit(d.get("unit")))

    if kind == "move":
        return MovePiece(dict_to_pos(d.get("from"), "from"), dict_to_pos(d.get("to"), "to"))

    if kind == "attack":
        return AttackPiece(dict_to_pos(d.get("attacker"), "attacker"), dict_to_pos(d.get("target"), "target"))

    if kind == "end_turn":
        return EndTurn()

    if kind == "new_game":
        raw = d.get("starting_player")
        if raw is None:
            return NewGame()
        try:
            return NewGame(parse_player(str(raw)))
        except ValueError as exc:
            raise MalformedActionError(str(exc)) from exc

    LOGGER.warning("unknown_action_kind", extra={"kind": kind})
    raise MalformedActionError(f"Unknown action kind: {kind!r}")


def snapshot(state: GameState) -> Dict[str, Any]:
    """JSON-friendly snapshot of a game state."""

    units = [unit_to_dict(u) for u in state.board]
    out: Dict[str, Any] = {
        "version": state.version,
        "current_player": _player_to_str(state.current_player),
        "phase": state.phase.name,
        "winner": _player_to_str(state.winner),
        "light_moves_this_turn": state.light_moves_this_turn,
        "light_actions_remaining": state.light_actions_remaining,
        "can_end_turn": state.can_end_turn,
        "counts": {"HEAVY": state.heavy_count, "LIGHT": state.light_count},
        "selected": unit_to_dict(state.selected_unit) if state.selected_unit is not None else None,
        "legal_moves": _positions(state.legal_moves),
        "legal_attacks": _positions(state.legal_attacks),
        "units": sorted(units, key=lambda x: (x["owner"], x["kind"], x["row"], x["col"])),
        "board": board_to_text(state.board),
    }

    return out
