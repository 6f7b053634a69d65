import unittest

from crusader_board.bot import GreedyPlayer, WIN_SCORE, candidate_actions, score_action, self_play
from crusader_board.core import (
    AttackPiece, Board, Game, GameState, Player, Position, RulesConfig, heavy, initial_state, light,
)


def _game(*units, player=Player.PLAYER_A) -> Game:
    b = Board()
    for u in units:
        b.add_unit(u)
    return Game(state=GameState(board=b, current_player=player))


class TestGreedyPlayer(unittest.TestCase):
    def test_candidates_cover_side_to_move_only(self):
        s = initial_state()
        cands = list(candidate_actions(s, RulesConfig()))
        self.assertEqual(len(cands), 22)
        self.assertTrue(all(u.owner is Player.PLAYER_A for u, _ in cands))

    def test_no_candidates_after_game_over(self):
        g = _game(heavy("h", Player.PLAYER_A, Position(4, 4)), light("l", Player.PLAYER_B, Position(3, 4)))
        g.select_at(Position(4, 4))
        g.attack(Position(4, 4), Position(3, 4))
        self.assertTrue(g.state.is_over)
        self.assertEqual(list(candidate_actions(g.state, g.rules)), [])

    def test_takes_the_winning_capture(self):
        h = heavy("h", Player.PLAYER_A, Position(4, 4))
        g = _game(h, light("l", Player.PLAYER_B, Position(2, 4)))
        self.assertEqual(score_action(g.state, h, AttackPiece(Position(4, 4), Position(2, 4))), WIN_SCORE)

        t = GreedyPlayer(seed=3).play_action(g)
        self.assertTrue(t.changed)
        self.assertIs(g.state.winner, Player.PLAYER_A)

    def test_light_turn_uses_both_actions(self):
        g = Game(rules=RulesConfig(starting_player=Player.PLAYER_B))
        played = GreedyPlayer(seed=5).play_turn(g)
        self.assertEqual(len(played), 2)
        self.assertIs(g.state.current_player, Player.PLAYER_A)

    def test_heavy_turn_is_one_action(self):
        g = Game()
        played = GreedyPlayer(seed=5).play_turn(g)
        self.assertEqual(len(played), 1)
        self.assertIs(g.state.current_player, Player.PLAYER_B)


class TestSelfPlay(unittest.TestCase):
    def test_self_play_is_deterministic(self):
        a, turns_a = self_play(seed=11, max_turns=60)
        b, turns_b = self_play(seed=11, max_turns=60)
        self.assertEqual(turns_a, turns_b)
        self.assertEqual(a.board, b.board)
        self.assertEqual(a.winner, b.winner)

    def test_self_play_respects_turn_cap(self):
        final, turns = self_play(seed=2, max_turns=10)
        self.assertLessEqual(turns, 10)
        if not final.is_over:
            self.assertEqual(turns, 10)

    def test_self_play_with_enhanced_light(self):
        final, turns = self_play(RulesConfig(enhanced_light_movement=True), seed=4, max_turns=40)
        self.assertGreater(turns, 0)
        self.assertEqual(final.board.count(), final.heavy_count + final.light_count)


if __name__ == "__main__":
    unittest.main()
