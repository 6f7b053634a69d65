from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..bot import candidate_actions
from ..core import AttackPiece, Game, GameState, MovePiece, RulesConfig, SelectUnit, Transition
from ..core.rules import parse_player

from .serde import snapshot, dict_to_action, action_to_dict, dict_to_pos


def _index_by_id(snap: Dict[str, Any]) -> Dict[str, Dict[str, Any]]:
    out: Dict[str, Dict[str, Any]] = {}
    for u in snap.get("units", []):
        out[str(u["id"])] = u
    return out


def diff(before: Dict[str, Any], after: Dict[str, Any]) -> Dict[str, Any]:
    """Compute an animation-friendly diff between two snapshots."""
    b = _index_by_id(before)
    a = _index_by_id(after)

    added = [uid for uid in a.keys() if uid not in b]
    removed = [uid for uid in b.keys() if uid not in a]

    moved: List[Dict[str, Any]] = []
    for uid in sorted(a.keys() & b.keys()):
        bu = b[uid]
        au = a[uid]
        if (bu["row"], bu["col"]) != (au["row"], au["col"]):
            moved.append({
                "id": uid,
                "from": {"row": bu["row"], "col": bu["col"]},
                "to": {"row": au["row"], "col": au["col"]},
                "kind": au["kind"],
                "owner": au["owner"],
            })

    return {
        "added": [a[uid] for uid in added],
        "removed": [b[uid] for uid in removed],
        "moved": moved,
        "current_player": after.get("current_player"),
        "phase": after.get("phase"),
        "winner": after.get("winner"),
    }


class CrusaderEngine:
    """A small, stable facade for UI integration.

    - every call goes through the single `Game.dispatch` path
    - returns snapshots + diffs; rules-level rejections come back as
      `changed: False` with a reason, never as exceptions
    """

    def __init__(self, rules: Optional[RulesConfig] = None) -> None:
        self.game = Game(rules=rules)

    @classmethod
    def from_env(cls) -> "CrusaderEngine":
        return cls(RulesConfig.from_env())

    @property
    def current(self) -> GameState:
        return self.game.state

    def state(self) -> Dict[str, Any]:
        return snapshot(self.game.state)

    def configure(self, enhanced_light_movement: Optional[bool] = None, starting_player: Optional[str] = None) -> Dict[str, Any]:
        first = None if starting_player is None else parse_player(starting_player)
        self.game.set_rules(self.game.rules.with_overrides(enhanced_light_movement, first))
        return {
            "enhanced_light_movement": self.game.rules.enhanced_light_movement,
            "starting_player": self.game.rules.starting_player.name,
        }

    def _result(self, before: Dict[str, Any], action_dict: Dict[str, Any], t: Transition) -> Dict[str, Any]:
        after = snapshot(t.state) if t.changed else before
        return {
            "before": before,
            "after": after,
            "diff": diff(before, after),
            "meta": {"applied": action_dict, "changed": t.changed, "reason": t.reason},
        }

    def apply(self, action: Dict[str, Any]) -> Dict[str, Any]:
        a = dict_to_action(action)
        before = snapshot(self.game.state)
        t = self.game.dispatch(a)
        return self._result(before, action_to_dict(a), t)

    def click(self, row: int, col: int) -> Dict[str, Any]:
        """Square-click handling as a board UI does it.

        Own unit on the cell -> select it. Otherwise, with a selection, move
        if the cell is highlighted as a move, else attack if highlighted as an
        attack. Anything else is a no-op.
        """
        pos = dict_to_pos({"row": row, "col": col}, "click")
        st = self.game.state
        before = snapshot(st)

        occupant = st.board.unit_at(pos)
        if occupant is not None and occupant.owner is st.current_player:
            a = SelectUnit(occupant)
            return self._result(before, action_to_dict(a), self.game.dispatch(a))

        sel = st.selected_unit
        if sel is not None:
            if pos in st.legal_moves:
                a = MovePiece(sel.position, pos)
                return self._result(before, action_to_dict(a), self.game.dispatch(a))
            if pos in st.legal_attacks:
                a = AttackPiece(sel.position, pos)
                return self._result(before, action_to_dict(a), self.game.dispatch(a))

        t = Transition(changed=False, state=st, reason="nothing_to_do")
        return self._result(before, {"kind": "click", "row": row, "col": col}, t)

    def legal_actions(self) -> List[Dict[str, Any]]:
        """Every move/attack the side to move could make, as action dicts."""
        out: List[Dict[str, Any]] = []
        for unit, a in candidate_actions(self.game.state, self.game.rules):
            out.append({"unit": unit.id, **action_to_dict(a)})
        return out
