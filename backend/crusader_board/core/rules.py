from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from .types import Player

_TRUTHY = ("1", "true", "yes", "on")
_FALSY = ("0", "false", "no", "off", "")

def _parse_bool(raw: str, name: str) -> bool:
    v = raw.strip().lower()
    if v in _TRUTHY:
        return True
    if v in _FALSY:
        return False
    raise ValueError(f"Bad boolean for {name}: {raw!r}")

def parse_player(raw: str) -> Player:
    v = raw.strip().lower()
    if v in ("a", "player_a", "heavy"):
        return Player.PLAYER_A
    if v in ("b", "player_b", "light"):
        return Player.PLAYER_B
    raise ValueError(f"Bad player: {raw!r}")

@dataclass(frozen=True)
class RulesConfig:
    """Rule variants for a game.

    Passed explicitly to the calculator and the state machine; two games with
    different configs never see each other's settings.
    """
    enhanced_light_movement: bool = False
    starting_player: Player = Player.PLAYER_A

    def with_overrides(
        self,
        enhanced_light_movement: Optional[bool] = None,
        starting_player: Optional[Player] = None,
    ) -> "RulesConfig":
        out = self
        if enhanced_light_movement is not None:
            out = replace(out, enhanced_light_movement=enhanced_light_movement)
        if starting_player is not None:
            out = replace(out, starting_player=starting_player)
        return out

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "RulesConfig":
        env = os.environ if environ is None else environ
        enhanced = _parse_bool(env.get("CRUSADER_ENHANCED_LIGHT", "0"), "CRUSADER_ENHANCED_LIGHT")
        first = parse_player(env.get("CRUSADER_FIRST_PLAYER", "a"))
        return cls(enhanced_light_movement=enhanced, starting_player=first)

STANDARD_RULES = RulesConfig()
