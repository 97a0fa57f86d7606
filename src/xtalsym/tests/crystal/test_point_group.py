import logging
import unittest
from xtalsym.crystal import PointGroup

LOG = logging.getLogger(__name__)


class PointGroupTestCase(unittest.TestCase):
    def test_from_number(self):
        self.assertEqual(PointGroup.from_number(1).symbol, "1")
        self.assertEqual(PointGroup.from_number(18).symbol, "32")
        self.assertEqual(PointGroup.from_number(26).symbol, "-6m2")
        self.assertEqual(PointGroup.from_number(32).symbol, "m-3m")
        for number in range(1, 33):
            self.assertEqual(PointGroup.from_number(number).number, number)

    def test_from_number_invalid(self):
        for number in (0, 33):
            with self.assertRaises(ValueError):
                PointGroup.from_number(number)

    def test_from_symbol(self):
        pg = PointGroup.from_symbol("321")
        self.assertEqual(pg.number, 18)
        self.assertEqual(pg.schoenflies, "D3")
        self.assertEqual(pg.laue_group, "-3m1")
        self.assertIs(PointGroup.from_number(18), PointGroup.from_symbol("32"))
        with self.assertRaises(ValueError):
            PointGroup.from_symbol("5")

    def test_centrosymmetric(self):
        self.assertTrue(PointGroup.from_symbol("m-3m").is_centrosymmetric)
        self.assertFalse(PointGroup.from_symbol("-43m").is_centrosymmetric)
        groups = [PointGroup.from_number(n) for n in range(1, 33)]
        self.assertEqual(sum(pg.is_centrosymmetric for pg in groups), 11)
