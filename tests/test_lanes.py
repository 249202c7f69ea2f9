import sys
import unittest
from itertools import permutations, product
from pathlib import Path

# ── Ensure project root and src/ are on sys.path ──
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))
sys.path.insert(0, str(PROJECT_ROOT))

from cantstop.lanes import CONFIGS, LaneConfig, lanes, pair_sums, parse_lanes


ALL_ROLLS = list(product(range(1, 7), repeat=4))

REPRESENTATIVE = [
    lanes(2),
    lanes(7),
    lanes(12),
    lanes(2, 3, 4),
    lanes(6, 7, 8),
    lanes(10, 11, 12),
]


class TestLaneMatcher(unittest.TestCase):

    def test_seven_examples(self):
        cnf = lanes(7)
        self.assertTrue(cnf.matches(1, 6, 2, 3))
        self.assertFalse(cnf.matches(1, 1, 1, 1))

    def test_two_needs_a_pair_of_ones(self):
        cnf = lanes(2)
        self.assertTrue(cnf.matches(4, 1, 5, 1))
        self.assertFalse(cnf.matches(1, 2, 3, 4))

    def test_any_target_is_enough(self):
        cnf = lanes(10, 11, 12)
        self.assertTrue(cnf.matches(1, 2, 6, 6))
        self.assertTrue(cnf.matches(5, 1, 1, 6))
        self.assertFalse(cnf.matches(1, 2, 3, 4))

    def test_matches_brute_force_pair_sums(self):
        """Matcher agrees with intersecting the six pair sums with the targets."""
        for cnf in REPRESENTATIVE:
            targets = set(cnf.targets)
            for dice in ALL_ROLLS:
                expected = bool(targets.intersection(pair_sums(dice)))
                self.assertEqual(cnf.matches(*dice), expected, f"{cnf} {dice}")

    def test_symmetric_in_dice_order(self):
        for cnf in REPRESENTATIVE:
            for dice in ALL_ROLLS[::7]:
                first = cnf.matches(*dice)
                for perm in permutations(dice):
                    self.assertEqual(cnf.matches(*perm), first, f"{cnf} {perm}")

    def test_pair_sums_has_six_entries(self):
        self.assertEqual(pair_sums((1, 2, 3, 4)), [3, 4, 5, 5, 6, 7])


class TestLaneConfig(unittest.TestCase):

    def test_rejects_empty(self):
        with self.assertRaises(ValueError):
            LaneConfig(())

    def test_rejects_out_of_range(self):
        for bad in [(1,), (13,), (2, 3, 0)]:
            with self.assertRaises(ValueError):
                LaneConfig(bad)

    def test_rejects_non_integers_and_duplicates(self):
        with self.assertRaises(ValueError):
            LaneConfig((7.0,))
        with self.assertRaises(ValueError):
            LaneConfig((True,))
        with self.assertRaises(ValueError):
            LaneConfig((7, 7))

    def test_list_input_is_frozen_to_tuple(self):
        cnf = LaneConfig([2, 3, 4])
        self.assertEqual(cnf.targets, (2, 3, 4))
        self.assertEqual(cnf, lanes(2, 3, 4))
        self.assertEqual(hash(cnf), hash(lanes(2, 3, 4)))

    def test_display_and_key(self):
        cnf = lanes(2, 3, 4)
        self.assertEqual(str(cnf), "[2 3 4]")
        self.assertEqual(cnf.key, "2-3-4")
        self.assertEqual(len(cnf), 3)

    def test_parse_lanes(self):
        self.assertEqual(parse_lanes("7"), lanes(7))
        self.assertEqual(parse_lanes(" 2, 3,4 "), lanes(2, 3, 4))
        with self.assertRaises(ValueError):
            parse_lanes("seven")
        with self.assertRaises(ValueError):
            parse_lanes("")
        with self.assertRaises(ValueError):
            parse_lanes("2,13")


class TestCatalog(unittest.TestCase):

    def test_catalog_shape(self):
        self.assertEqual(len(CONFIGS), 34)
        self.assertEqual(len(set(CONFIGS)), 34)
        singles = [c.targets[0] for c in CONFIGS if len(c) == 1]
        self.assertEqual(singles, list(range(2, 13)))
        triples = [c for c in CONFIGS if len(c) == 3]
        self.assertEqual(len(triples), 23)

    def test_catalog_starts_with_singles_in_order(self):
        self.assertEqual(CONFIGS[0], lanes(2))
        self.assertEqual(CONFIGS[11], lanes(2, 3, 4))
        self.assertEqual(CONFIGS[-1], lanes(10, 11, 12))


if __name__ == "__main__":
    unittest.main()
