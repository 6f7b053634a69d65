import random
import unittest

from crusader_board.core import (
    Board, Player, Position, UnitKind, all_positions, count_adjacent_light, heavy, light,
    heavy_adjacent_attacks, heavy_forward_attacks, is_legal_attack, legal_attacks,
    light_cooperative_attacks,
)


def _board(*units) -> Board:
    b = Board()
    for u in units:
        b.add_unit(u)
    return b


class TestHeavyAttacks(unittest.TestCase):
    def test_forward_lane_reaches_two_cells(self):
        h = heavy("h", Player.PLAYER_A, Position(4, 4))
        far = light("l", Player.PLAYER_B, Position(2, 4))
        b = _board(h, far)
        self.assertEqual(heavy_forward_attacks(b, h), {Position(2, 4)})
        self.assertEqual(legal_attacks(b, h), {Position(2, 4)})

    def test_forward_lane_is_not_shielded(self):
        h = heavy("h", Player.PLAYER_A, Position(4, 4))
        near = light("l1", Player.PLAYER_B, Position(3, 4))
        far = light("l2", Player.PLAYER_B, Position(2, 4))
        b = _board(h, near, far)
        self.assertEqual(legal_attacks(b, h), {Position(3, 4), Position(2, 4)})

    def test_forward_depends_on_owner(self):
        h = heavy("h", Player.PLAYER_B, Position(4, 4))
        behind = light("l1", Player.PLAYER_A, Position(2, 4))
        ahead = light("l2", Player.PLAYER_A, Position(6, 4))
        b = _board(h, behind, ahead)
        self.assertEqual(heavy_forward_attacks(b, h), {Position(6, 4)})

    def test_adjacent_attack_covers_all_eight_neighbours(self):
        h = heavy("h", Player.PLAYER_A, Position(4, 4))
        units = [h]
        for i, pos in enumerate(p for p in all_positions() if max(abs(p.row - 4), abs(p.col - 4)) == 1):
            units.append(light(f"l{i}", Player.PLAYER_B, pos))
        b = _board(*units)
        self.assertEqual(len(heavy_adjacent_attacks(b, h)), 8)
        self.assertEqual(len(legal_attacks(b, h)), 8)

    def test_heavy_never_targets_heavy_or_friendly(self):
        h = heavy("h", Player.PLAYER_A, Position(4, 4))
        enemy_heavy = heavy("h2", Player.PLAYER_B, Position(3, 4))
        own_light = light("l", Player.PLAYER_A, Position(4, 5))
        b = _board(h, enemy_heavy, own_light)
        self.assertEqual(legal_attacks(b, h), frozenset())

    def test_lane_edge_of_board(self):
        h = heavy("h", Player.PLAYER_A, Position(0, 0))
        self.assertEqual(legal_attacks(_board(h), h), frozenset())


class TestCooperativeAttack(unittest.TestCase):
    def test_two_adjacent_lights_enable_attack(self):
        target = heavy("h", Player.PLAYER_A, Position(4, 4))
        l1 = light("l1", Player.PLAYER_B, Position(3, 4))
        l2 = light("l2", Player.PLAYER_B, Position(4, 3))
        b = _board(target, l1, l2)
        self.assertEqual(count_adjacent_light(b, Position(4, 4), Player.PLAYER_B), 2)
        self.assertEqual(light_cooperative_attacks(b, l1), {Position(4, 4)})
        self.assertTrue(is_legal_attack(b, l2, Position(4, 4)))

    def test_single_light_cannot_attack(self):
        target = heavy("h", Player.PLAYER_A, Position(4, 4))
        l1 = light("l1", Player.PLAYER_B, Position(3, 4))
        far = light("l2", Player.PLAYER_B, Position(1, 1))
        b = _board(target, l1, far)
        self.assertEqual(legal_attacks(b, l1), frozenset())

    def test_enemy_lights_do_not_count(self):
        target = heavy("h", Player.PLAYER_A, Position(4, 4))
        l1 = light("l1", Player.PLAYER_B, Position(3, 4))
        other = light("l2", Player.PLAYER_A, Position(4, 3))
        b = _board(target, l1, other)
        self.assertEqual(legal_attacks(b, l1), frozenset())

    def test_light_never_targets_light(self):
        l1 = light("l1", Player.PLAYER_B, Position(3, 4))
        l2 = light("l2", Player.PLAYER_B, Position(3, 5))
        enemy = light("l3", Player.PLAYER_A, Position(4, 4))
        b = _board(l1, l2, enemy)
        self.assertEqual(legal_attacks(b, l1), frozenset())


class TestAttackProperties(unittest.TestCase):
    def _random_board(self, rng: random.Random) -> Board:
        b = Board()
        cells = list(all_positions())
        rng.shuffle(cells)
        for i, pos in enumerate(cells[: rng.randint(2, 24)]):
            kind = rng.choice((UnitKind.HEAVY, UnitKind.LIGHT))
            owner = rng.choice((Player.PLAYER_A, Player.PLAYER_B))
            make = heavy if kind is UnitKind.HEAVY else light
            b.add_unit(make(f"u{i}", owner, pos))
        return b

    def test_targets_are_enemies_of_the_other_kind(self):
        rng = random.Random(2024)
        for trial in range(60):
            b = self._random_board(rng)
            for u in b:
                with self.subTest(trial=trial, unit=u.id):
                    for target in legal_attacks(b, u):
                        victim = b.unit_at(target)
                        self.assertIsNotNone(victim)
                        self.assertIsNot(victim.owner, u.owner)
                        self.assertIsNot(victim.kind, u.kind)

    def test_light_attacks_meet_cooperative_threshold(self):
        rng = random.Random(7)
        for trial in range(60):
            b = self._random_board(rng)
            for u in b:
                if u.kind is not UnitKind.LIGHT:
                    continue
                with self.subTest(trial=trial, unit=u.id):
                    for target in legal_attacks(b, u):
                        self.assertGreaterEqual(count_adjacent_light(b, target, u.owner), 2)
                        self.assertLessEqual(max(abs(target.row - u.position.row), abs(target.col - u.position.col)), 1)


if __name__ == "__main__":
    unittest.main()
