import logging
import unittest
from fractions import Fraction
from xtalsym.crystal import SymmetryOperation
from xtalsym.crystal.hall import (
    centering_multiplicity,
    expand_hall_symbol,
    parse_hall_symbol,
)

LOG = logging.getLogger(__name__)


def _symops(*codes):
    return {SymmetryOperation.from_string_code(x) for x in codes}


class HallSymbolTestCase(unittest.TestCase):
    def test_parse(self):
        hall = parse_hall_symbol("-P 2ac 2n")
        self.assertTrue(hall.centric)
        self.assertEqual(hall.lattice, "P")
        # inversion plus the two generators
        self.assertEqual(len(hall.generators), 3)
        self.assertEqual(hall.origin_shift, (0, 0, 0))

    def test_parse_origin_shift(self):
        hall = parse_hall_symbol("P 31 2c (0 0 1)")
        self.assertFalse(hall.centric)
        self.assertEqual(hall.origin_shift, (0, 0, Fraction(1, 12)))

    def test_expand_primitive(self):
        symops = expand_hall_symbol("P 2ac 2ab")
        self.assertTrue(symops[0].is_identity())
        self.assertEqual(
            set(symops),
            _symops("x,y,z", "-x+1/2,-y,z+1/2", "x+1/2,-y+1/2,-z", "-x,y+1/2,-z+1/2"),
        )

    def test_expand_monoclinic(self):
        symops = expand_hall_symbol("-P 2ybc")
        self.assertEqual(
            set(symops),
            _symops("x,y,z", "-x,y+1/2,-z+1/2", "-x,-y,-z", "x,-y+1/2,z+1/2"),
        )

    def test_expand_counts(self):
        for symbol, count in (
            ("P 1", 1),
            ("-P 1", 2),
            ("C 2y", 4),
            ("-P 4 2", 16),
            ("R 3", 9),
            ("-R 3 2\"", 36),
            ("P 6c", 6),
            ("-F 4 2 3", 192),
            ("-I 4bd 2c 3", 96),
        ):
            self.assertEqual(len(expand_hall_symbol(symbol)), count, symbol)

    def test_centering_blocks(self):
        symops = expand_hall_symbol("C 2y")
        self.assertEqual(
            symops[2:], [x + (0.5, 0.5, 0) for x in symops[:2]]
        )

    def test_origin_shift(self):
        # P3112, the diagonal two-fold picks up a c/3 translation
        symops = expand_hall_symbol("P 31 2c (0 0 1)")
        self.assertEqual(len(symops), 6)
        self.assertIn(SymmetryOperation.from_string_code("-y,-x,-z+2/3"), symops)
        self.assertIn(SymmetryOperation.from_string_code("-y,x-y,z+1/3"), symops)
        # P6122
        symops = expand_hall_symbol("P 61 2 (0 0 -1)")
        self.assertEqual(len(symops), 12)
        self.assertIn(SymmetryOperation.from_string_code("-y,-x,-z+5/6"), symops)
        self.assertIn(SymmetryOperation.from_string_code("x-y,x,z+1/6"), symops)

    def test_centering_multiplicity(self):
        self.assertEqual(centering_multiplicity("P"), 1)
        self.assertEqual(centering_multiplicity("-C"), 2)
        self.assertEqual(centering_multiplicity("I"), 2)
        self.assertEqual(centering_multiplicity("R"), 3)
        self.assertEqual(centering_multiplicity("-F"), 4)

    def test_invalid(self):
        for symbol in ("", "Q 2", "P 5", "P 2 2 7", "P 21x1", "P 2k", "-P 3 2 2 2 2"):
            with self.assertRaises(ValueError):
                expand_hall_symbol(symbol)
