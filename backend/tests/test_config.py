import unittest

from crusader_board.core import Player, RulesConfig, STANDARD_RULES, parse_player


class TestRulesConfig(unittest.TestCase):
    def test_defaults(self):
        self.assertFalse(STANDARD_RULES.enhanced_light_movement)
        self.assertIs(STANDARD_RULES.starting_player, Player.PLAYER_A)
        self.assertEqual(RulesConfig.from_env({}), STANDARD_RULES)

    def test_from_env(self):
        rules = RulesConfig.from_env({"CRUSADER_ENHANCED_LIGHT": "yes", "CRUSADER_FIRST_PLAYER": "Light"})
        self.assertTrue(rules.enhanced_light_movement)
        self.assertIs(rules.starting_player, Player.PLAYER_B)

    def test_from_env_rejects_garbage(self):
        for env in ({"CRUSADER_ENHANCED_LIGHT": "maybe"}, {"CRUSADER_FIRST_PLAYER": "c"}):
            with self.subTest(env=env):
                with self.assertRaises(ValueError):
                    RulesConfig.from_env(env)

    def test_with_overrides(self):
        rules = STANDARD_RULES.with_overrides(enhanced_light_movement=True)
        self.assertTrue(rules.enhanced_light_movement)
        self.assertFalse(STANDARD_RULES.enhanced_light_movement)
        self.assertIs(rules.with_overrides().starting_player, Player.PLAYER_A)
        self.assertIs(rules.with_overrides(starting_player=Player.PLAYER_B).starting_player, Player.PLAYER_B)

    def test_parse_player(self):
        for raw, expected in (("a", Player.PLAYER_A), ("PLAYER_A", Player.PLAYER_A), (" b ", Player.PLAYER_B), ("heavy", Player.PLAYER_A)):
            with self.subTest(raw=raw):
                self.assertIs(parse_player(raw), expected)


if __name__ == "__main__":
    unittest.main()
