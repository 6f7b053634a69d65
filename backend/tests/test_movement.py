import unittest

from crusader_board.core import (
    Board, Player, Position, RulesConfig, all_positions, heavy, light,
    is_legal_move, legal_moves, standard_board,
)


ENHANCED = RulesConfig(enhanced_light_movement=True)


def _board(*units) -> Board:
    b = Board()
    for u in units:
        b.add_unit(u)
    return b


class TestLegalMoves(unittest.TestCase):
    def test_heavy_corner_on_initial_board(self):
        b = standard_board()
        h = b.unit_at(Position(7, 0))
        self.assertEqual(legal_moves(b, h), {Position(6, 0), Position(6, 1)})

    def test_heavy_in_the_open_has_eight_moves(self):
        h = heavy("h", Player.PLAYER_A, Position(4, 4))
        moves = legal_moves(_board(h), h)
        self.assertEqual(len(moves), 8)
        self.assertNotIn(Position(4, 4), moves)

    def test_occupied_cells_are_not_destinations(self):
        h = heavy("h", Player.PLAYER_A, Position(4, 4))
        own = heavy("h2", Player.PLAYER_A, Position(4, 5))
        enemy = light("l", Player.PLAYER_B, Position(3, 4))
        moves = legal_moves(_board(h, own, enemy), h)
        self.assertNotIn(Position(4, 5), moves)
        self.assertNotIn(Position(3, 4), moves)
        self.assertEqual(len(moves), 6)

    def test_light_corner(self):
        lt = light("l", Player.PLAYER_B, Position(0, 0))
        self.assertEqual(
            legal_moves(_board(lt), lt),
            {Position(0, 1), Position(1, 0), Position(1, 1)},
        )

    def test_light_on_initial_board_moves_forward_only(self):
        b = standard_board()
        lt = b.unit_at(Position(0, 3))
        self.assertEqual(legal_moves(b, lt), {Position(1, 2), Position(1, 3), Position(1, 4)})

    def test_is_legal_move(self):
        b = standard_board()
        h = b.unit_at(Position(7, 0))
        self.assertTrue(is_legal_move(b, h, Position(6, 1)))
        self.assertFalse(is_legal_move(b, h, Position(5, 0)))
        self.assertFalse(is_legal_move(b, h, Position(8, 0)))

    def test_moves_stay_on_board_everywhere(self):
        for pos in all_positions():
            for u in (heavy("h", Player.PLAYER_A, pos), light("l", Player.PLAYER_B, pos)):
                with self.subTest(pos=pos.name, kind=u.kind.value):
                    for rules in (RulesConfig(), ENHANCED):
                        for dest in legal_moves(_board(u), u, rules):
                            self.assertTrue(0 <= dest.row < 8 and 0 <= dest.col < 8)
                            self.assertNotEqual(dest, pos)


class TestEnhancedLightMovement(unittest.TestCase):
    def test_light_reaches_two_cells(self):
        lt = light("l", Player.PLAYER_B, Position(4, 4))
        moves = legal_moves(_board(lt), lt, ENHANCED)
        self.assertEqual(len(moves), 16)
        self.assertIn(Position(2, 2), moves)
        self.assertIn(Position(6, 4), moves)

    def test_second_step_needs_an_empty_first_cell(self):
        lt = light("l", Player.PLAYER_B, Position(4, 4))
        block = heavy("h", Player.PLAYER_A, Position(5, 4))
        moves = legal_moves(_board(lt, block), lt, ENHANCED)
        self.assertNotIn(Position(5, 4), moves)
        self.assertNotIn(Position(6, 4), moves)

    def test_heavy_is_unaffected(self):
        h = heavy("h", Player.PLAYER_A, Position(4, 4))
        self.assertEqual(legal_moves(_board(h), h, ENHANCED), legal_moves(_board(h), h))

    def test_rules_are_not_shared_between_calls(self):
        lt = light("l", Player.PLAYER_B, Position(4, 4))
        b = _board(lt)
        self.assertEqual(len(legal_moves(b, lt, ENHANCED)), 16)
        self.assertEqual(len(legal_moves(b, lt)), 8)


if __name__ == "__main__":
    unittest.main()
