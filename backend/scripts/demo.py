from __future__ import annotations

from pathlib import Path
import sys

# Ensure `backend/` is on sys.path so `import crusader_board` works.
BACKEND_DIR = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(BACKEND_DIR))

from crusader_board.core import Game, GameState, Player, Position, RulesConfig, ascii_board
from crusader_board.notation import parse_position


def show(title: str, game: Game) -> None:
    st = game.state
    marks = {p: "*" for p in st.legal_moves}
    marks.update({p: "x" for p in st.legal_attacks})
    print("\n" + "=" * 72)
    print(title)
    print(ascii_board(st.board, marks))
    print("To act:", st.current_player.name, "| light actions used:", st.light_moves_this_turn, "| phase:", st.phase.name)


def demo_heavy_lane_attack() -> None:
    g = Game(state=parse_position("8/8/4l3/4l3/4H3/8/8/8 a 0"))
    g.select_at(Position(4, 4))
    show("Demo 1: Heavy sees both lights in its forward lane (no shielding)", g)

    g.attack(Position(4, 4), Position(2, 4))
    show("Heavy strikes the far light and stays put; the turn passes", g)


def demo_cooperative_attack() -> None:
    g = Game(state=parse_position("8/8/8/4l3/3lH3/8/8/7H b 0"))
    g.select_at(Position(3, 4))
    show("Demo 2: two lights flank a heavy, cooperative attack unlocked", g)

    g.attack(Position(3, 4), Position(4, 4))
    show("Light takes the heavy's cell; one light action left", g)


def demo_enhanced_movement() -> None:
    rules = RulesConfig(enhanced_light_movement=True, starting_player=Player.PLAYER_B)
    g = Game(rules=rules)
    g.select_at(Position(0, 3))
    show("Demo 3: enhanced light movement reaches two cells", g)


def demo_elimination(state: GameState) -> None:
    g = Game(state=state)
    g.select_at(Position(4, 4))
    g.attack(Position(4, 4), Position(3, 3))
    show("Demo 4: the last light falls; the game is over", g)
    print("Winner:", g.state.winner.name)


if __name__ == "__main__":
    demo_heavy_lane_attack()
    demo_cooperative_attack()
    demo_enhanced_movement()
    demo_elimination(parse_position("8/8/8/3l4/4H3/8/8/8 a 0"))
